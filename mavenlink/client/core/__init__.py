"""Core components."""

from .exceptions import APIError, MavenlinkError, ShapeError, TransportError

__all__ = [
    "MavenlinkError",
    "TransportError",
    "APIError",
    "ShapeError",
]
