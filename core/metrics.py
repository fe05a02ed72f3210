"""
Prometheus metrics for the license manager service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# Generator API metrics
generator_api_responses_total = Counter(
    "generator_api_responses_total",
    "Total generator API responses",
    ["route", "outcome"],
)

generators_created_total = Counter(
    "generators_created_total",
    "Total generators created",
)

generators_updated_total = Counter(
    "generators_updated_total",
    "Total generators updated",
)

route_disabled_total = Counter(
    "route_disabled_total",
    "Total requests rejected because their route is switched off",
    ["route_id"],
)

# Error metrics
errors_total = Counter(
    "errors_total",
    "Total errors",
    ["error_type", "endpoint"],
)
