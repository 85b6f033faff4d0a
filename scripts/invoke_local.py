#!/usr/bin/env python3
"""
Invoke the layer test function locally.

The handler runs in-process by default. With ``--url`` the event is POSTed to
the local invoke server instead.

Usage:
    # In-process, empty event:
    PYTHONPATH=. python scripts/invoke_local.py

    # Event from a file (or '-' for stdin):
    PYTHONPATH=. python scripts/invoke_local.py --event events/sample.json

    # Against the local server:
    # python -m lambda_app.main
    python scripts/invoke_local.py --url http://127.0.0.1:9000
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

import requests

from lambda_app.context import InvocationContext
from lambda_app.logs import configure_logging
from lambda_app.main import INVOKE_PATH
from lambda_app.settings import get_settings
from transports.aws_lambda_handler import handler

EXIT_OK = 0
EXIT_HTTP_ERROR = 1
EXIT_BAD_EVENT = 2


class EventError(ValueError):
    """Raised when the event payload is not a JSON object."""


def load_event(source: str | None, *, stdin: TextIO | None = None) -> dict[str, Any]:
    if source is None:
        return {}
    try:
        if source == "-":
            raw = (stdin or sys.stdin).read()
        else:
            raw = Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise EventError(f"event is not valid UTF-8: {exc}") from exc
    if not raw.strip():
        return {}
    try:
        event = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise EventError(f"invalid JSON: {exc}") from exc
    if not isinstance(event, dict):
        raise EventError(f"event must be a JSON object, got {type(event).__name__}")
    return event


def invoke_in_process(event: dict[str, Any]) -> Any:
    context = InvocationContext.from_settings(get_settings())
    return handler(event, context)


def invoke_remote(event: dict[str, Any], *, url: str, timeout: float) -> Any:
    endpoint = url.rstrip("/") + INVOKE_PATH
    response = requests.post(endpoint, json=event, timeout=timeout)
    response.raise_for_status()
    return response.json()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Invoke the layer test function locally.")
    parser.add_argument(
        "--event",
        default=None,
        help="Path to a JSON event file, or '-' for stdin (default: empty event)",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Base URL of a running local invoke server (default: invoke in-process)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="HTTP timeout in seconds when --url is given (default: 30)",
    )
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    try:
        event = load_event(args.event)
    except (EventError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_EVENT

    if args.url:
        try:
            result = invoke_remote(event, url=args.url, timeout=args.timeout)
        except requests.RequestException as exc:
            print(f"error: invocation failed: {exc}", file=sys.stderr)
            return EXIT_HTTP_ERROR
    else:
        result = invoke_in_process(event)

    print(json.dumps(result))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
