"""REST runtime abstractions."""

from .http_client import HTTPClient, RawResponse
from .transport import RESTTransport, clean_params, json_url, raise_for_status

__all__ = [
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "clean_params",
    "json_url",
    "raise_for_status",
]
