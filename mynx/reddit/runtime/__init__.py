"""Runtime components: request spacing, caching, transport and paging."""

from .cache import TTLCache, memoize_with_ttl
from .paging import ListingQuery, filter_chunked, items_since, paginate, poll
from .rest import HTTPClient, RawResponse, RESTTransport
from .throttle import RequestThrottle, configure_default_throttle, get_default_throttle

__all__ = [
    "RequestThrottle",
    "get_default_throttle",
    "configure_default_throttle",
    "TTLCache",
    "memoize_with_ttl",
    "HTTPClient",
    "RawResponse",
    "RESTTransport",
    "ListingQuery",
    "paginate",
    "filter_chunked",
    "items_since",
    "poll",
]
