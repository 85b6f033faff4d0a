"""Prometheus metrics helpers."""

from __future__ import annotations

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry()

INVOCATIONS_TOTAL = Counter(
    "layer_function_invocations_total",
    "Number of handler invocations",
    registry=REGISTRY,
)

INVOCATION_LATENCY = Histogram(
    "layer_function_invocation_latency_seconds",
    "Latency of handler invocations",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1),
    registry=REGISTRY,
)


def observe_invocation(*, latency_ms: float) -> None:
    INVOCATIONS_TOTAL.inc()
    INVOCATION_LATENCY.observe(latency_ms / 1000.0)


def render_metrics() -> tuple[bytes, str]:
    payload = generate_latest(REGISTRY)
    return payload, CONTENT_TYPE_LATEST
