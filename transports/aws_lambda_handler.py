"""AWS Lambda adapter (``Handler: transports.aws_lambda_handler.handler``)."""

from __future__ import annotations

from typing import Any, Dict

from lambda_app.handler import handle


def handler(event: Dict[str, Any], context: Any) -> None:
    return handle(event, context)
