"""Shared Mavenlink connector constants."""

from __future__ import annotations

# Every endpoint lives directly under the v1 API root
BASE_URL = "https://api.mavenlink.com/api/v1"

# Page size sent as ``per_page`` on every list request
PER_PAGE = 200

DEFAULT_TIMEOUT = 30.0
