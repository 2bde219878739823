"""
Prometheus counters for the v20 client.

Metrics
-------

* ``v20_requests_total{method,endpoint,status}`` – REST requests by outcome.
  ``status`` is the HTTP status code, or ``error`` when no response arrived.
* ``v20_stream_lines_total{stream,outcome}`` – stream lines by outcome
  (``event``, ``heartbeat`` or ``skipped``).

Counters live on the default registry.  Exposing them is left to the
application (for example ``prometheus_client.start_http_server``).
"""

from __future__ import annotations

from prometheus_client import Counter

REQUESTS = Counter(
    "v20_requests_total",
    "REST requests sent to the v20 API",
    labelnames=["method", "endpoint", "status"],
)

STREAM_LINES = Counter(
    "v20_stream_lines_total",
    "Lines read from v20 streaming endpoints",
    labelnames=["stream", "outcome"],
)


def record_request(method: str, endpoint: str, status: object) -> None:
    REQUESTS.labels(method=method, endpoint=endpoint, status=str(status)).inc()


def record_stream_line(stream: str, outcome: str) -> None:
    STREAM_LINES.labels(stream=stream, outcome=outcome).inc()
