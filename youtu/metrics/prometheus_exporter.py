"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram


youtu_requests_total = Counter(
    "youtu_requests_total",
    "Total number of Youtu API calls by outcome.",
    ["operation", "outcome"],
)

youtu_request_seconds = Histogram(
    "youtu_request_seconds",
    "Wall time spent on a Youtu API call.",
    ["operation"],
)
