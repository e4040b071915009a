"""Mavenlink Client - paginated Mavenlink REST access with normalized results."""

from .connectors.mavenlink import MavenlinkRESTConnector
from .core import APIError, MavenlinkError, ShapeError, TransportError
from .models import NormalizedPage, PageMeta, RelationSpec
from .processing import Processor
from .runtime import PageExecutor, PagePolicy, RESTTransport, load_all_items

__version__ = "0.1.0"

__all__ = [
    # Connector
    "MavenlinkRESTConnector",
    # Runtime
    "RESTTransport",
    "PageExecutor",
    "PagePolicy",
    "load_all_items",
    # Normalization
    "Processor",
    # Models
    "NormalizedPage",
    "PageMeta",
    "RelationSpec",
    # Exceptions
    "MavenlinkError",
    "TransportError",
    "APIError",
    "ShapeError",
]
