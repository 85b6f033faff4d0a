"""FastAPI application exposing the Lambda invoke endpoint for local runs.

Run with ``python -m lambda_app.main`` (``HOST``/``PORT`` from settings).
"""

from __future__ import annotations

from typing import Annotated, Any

import uvicorn
from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from lambda_app import metrics
from lambda_app.context import InvocationContext
from lambda_app.handler import handle
from lambda_app.logs import configure_logging
from lambda_app.settings import Settings, get_settings

INVOKE_PATH = "/2015-03-31/functions/function/invocations"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Lambda Layer Test", version=settings.service_version)

    # Sync route: FastAPI runs the handler in its threadpool.
    @app.post(INVOKE_PATH)
    def invoke_endpoint(event: Annotated[dict[str, Any], Body()]) -> JSONResponse:
        result = handle(event, InvocationContext.from_settings(settings))
        return JSONResponse(content=result)

    @app.get("/healthz")
    def healthz() -> PlainTextResponse:
        return PlainTextResponse("ok\n")

    @app.get("/metrics")
    def metrics_endpoint() -> Response:
        if not settings.metrics_enabled:
            raise HTTPException(status_code=404, detail="metrics disabled")
        payload, content_type = metrics.render_metrics()
        return Response(content=payload, media_type=content_type)

    return app


def run(settings: Settings | None = None) -> None:  # pragma: no cover - manual run helper
    settings = settings or get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":  # pragma: no cover
    run()
