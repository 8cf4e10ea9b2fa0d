"""Prometheus metrics for HTTP traffic and directory mutations."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Histogram
from starlette.requests import Request

from backend.core.exceptions import ApplicationError

UNMATCHED_ROUTE = "unmatched"

http_requests_total = Counter(
    "directory_http_requests_total",
    "HTTP requests by route template",
    ["method", "path", "status"],
)

http_request_latency_seconds = Histogram(
    "directory_http_request_latency_seconds",
    "HTTP request latency by route template",
    ["method", "path"],
)

employee_mutations_total = Counter(
    "directory_employee_mutations_total",
    "Employee create/update/delete attempts by outcome",
    ["action", "outcome"],
)


def route_label(request: Request, prefix: str = "") -> str:
    """Public route template for a request, e.g. /api/employees/{employee_id}.

    Ids never appear in labels. Unmatched requests share one label.
    """

    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if not template:
        return UNMATCHED_ROUTE
    if prefix and request.url.path.startswith(prefix) and not template.startswith(prefix):
        template = prefix.rstrip("/") + template
    return template


def observe_request(request: Request, status: int, duration_seconds: float, prefix: str = "") -> None:
    path = route_label(request, prefix)
    http_requests_total.labels(method=request.method, path=path, status=str(status)).inc()
    http_request_latency_seconds.labels(method=request.method, path=path).observe(duration_seconds)


@contextmanager
def track_mutation(action: str) -> Iterator[None]:
    """Count a store mutation as success or by the error code that ended it."""

    try:
        yield
    except ApplicationError as exc:
        employee_mutations_total.labels(action=action, outcome=exc.code).inc()
        raise
    employee_mutations_total.labels(action=action, outcome="success").inc()
