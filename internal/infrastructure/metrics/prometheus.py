"""
Prometheus Metrics for the Product Catalog.

Defines all metrics for monitoring catalog API traffic and upstream calls.
"""

from prometheus_client import Counter, Histogram

# Inbound HTTP
HTTP_REQUESTS_TOTAL = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

HTTP_REQUEST_DURATION = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# Remote catalog API
UPSTREAM_REQUESTS_TOTAL = Counter(
    'upstream_requests_total',
    'Requests sent to the remote catalog API',
    ['method', 'status']  # status: HTTP code or "error"
)

UPSTREAM_REQUEST_DURATION = Histogram(
    'upstream_request_duration_seconds',
    'Remote catalog API request duration',
    ['method'],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# Response cache
CACHE_LOOKUPS_TOTAL = Counter(
    'api_cache_lookups_total',
    'API response cache lookups',
    ['result']  # hit, miss
)

# Repository operations
REPOSITORY_OPERATIONS_TOTAL = Counter(
    'product_repository_operations_total',
    'Product repository operations',
    ['operation', 'status']  # status: success, not_found, error
)
