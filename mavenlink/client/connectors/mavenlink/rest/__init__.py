"""Mavenlink REST connector."""

from .provider import MavenlinkRESTConnector

__all__ = ["MavenlinkRESTConnector"]
