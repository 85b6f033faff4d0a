"""Function handler that exercises the shared layer."""

from __future__ import annotations

from collections.abc import Mapping
from time import perf_counter
from typing import Any

import structlog

from lambda_app import metrics
from lambda_app.logs import ensure_logging
from lambda_app.settings import get_settings
from layer_util import print_message

ensure_logging(get_settings().log_level)

LOGGER = structlog.get_logger(__name__)

INVOKED_BANNER = "Lambda invoked, using layer function"


def handle(event: Mapping[str, Any], context: Any) -> None:
    """Print the invocation banner, call the layer and return ``None``.

    Neither the event nor the context is read; every invocation prints the
    same three lines.
    """

    del event, context
    start = perf_counter()
    LOGGER.info("invocation.start")

    print(INVOKED_BANNER, flush=True)
    print_message("test")

    latency_ms = (perf_counter() - start) * 1000
    metrics.observe_invocation(latency_ms=latency_ms)
    LOGGER.info("invocation.end", latency_ms=latency_ms)
    return None
