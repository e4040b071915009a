"""API connectors."""

from .mavenlink import MavenlinkRESTConnector

__all__ = ["MavenlinkRESTConnector"]
