"""
Metrics instrumentation for repository traffic.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Database metrics
db_operations = Counter(
    'db_operations_total',
    'Total database operations issued by repositories',
    ['operation']  # read, write, delete
)

repository_errors = Counter(
    'repository_errors_total',
    'Storage errors surfaced by repositories',
    ['kind']  # constraint_violation, connectivity_failure
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_db_operation(operation: str):
    """Record database operation. Operation: read, write, delete"""
    db_operations.labels(operation=operation).inc()


def record_repository_error(kind: str):
    """Record a storage error. Kind: constraint_violation, connectivity_failure"""
    repository_errors.labels(kind=kind).inc()
