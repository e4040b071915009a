"""Runtime layer: REST transport and pagination."""

from .pagination import PageExecutor, PagePolicy, load_all_items
from .rest import ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "PageExecutor",
    "PagePolicy",
    "load_all_items",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
