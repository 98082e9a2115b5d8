"""Lazy listing streams: pagination, windowed filtering and polling.

Architecture:
    - definitions.py: ListingQuery, the page fetch contract, cursor extraction
    - paginator.py: cursor-driven stream over every page of a listing
    - filters.py: windowed take-while tolerant of out-of-order items
    - polling.py: "since" queries and the unbounded new-items stream
    - telemetry.py: structured logging

Every stream is an async generator; realizing the next page is the only
point where a request is made.
"""

from __future__ import annotations

from .definitions import ListingQuery, PageFetcher, cursor_of
from .filters import filter_chunked
from .paginator import paginate
from .polling import items_since, poll

__all__ = [
    "ListingQuery",
    "PageFetcher",
    "cursor_of",
    "filter_chunked",
    "items_since",
    "paginate",
    "poll",
]
