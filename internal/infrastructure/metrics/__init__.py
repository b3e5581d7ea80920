"""
Metrics infrastructure package.
"""
from .prometheus import (
    CACHE_LOOKUPS_TOTAL,
    HTTP_REQUEST_DURATION,
    HTTP_REQUESTS_TOTAL,
    REPOSITORY_OPERATIONS_TOTAL,
    UPSTREAM_REQUEST_DURATION,
    UPSTREAM_REQUESTS_TOTAL,
)

__all__ = [
    "CACHE_LOOKUPS_TOTAL",
    "HTTP_REQUEST_DURATION",
    "HTTP_REQUESTS_TOTAL",
    "REPOSITORY_OPERATIONS_TOTAL",
    "UPSTREAM_REQUEST_DURATION",
    "UPSTREAM_REQUESTS_TOTAL",
]
