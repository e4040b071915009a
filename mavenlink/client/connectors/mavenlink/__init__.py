"""Mavenlink connector implementation."""

from .config import BASE_URL, PER_PAGE
from .rest.provider import MavenlinkRESTConnector

__all__ = [
    "BASE_URL",
    "PER_PAGE",
    "MavenlinkRESTConnector",
]
