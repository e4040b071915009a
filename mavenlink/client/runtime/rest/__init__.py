"""REST runtime abstractions."""

from .runner import ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport, encode_query

__all__ = [
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "encode_query",
]
