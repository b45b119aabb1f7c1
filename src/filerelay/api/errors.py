"""Reusable error primitives for API exception handling."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..relay.relay_errors import RelayError
from ..relay.relay_schemas import RelayErrorSchema

logger = logging.getLogger(__name__)


def relay_error_response(exc: RelayError) -> JSONResponse:
    """Materialise a relay error into a stable JSON payload."""

    body = RelayErrorSchema(error=exc.failure_reason.value, message=exc.message)
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    logger.info(
        "api.relay_error",
        extra={
            "path": request.url.path,
            "status_code": exc.http_status,
            "failure_reason": exc.failure_reason.value,
        },
    )
    return relay_error_response(exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RelayError, relay_error_handler)  # type: ignore[arg-type]


__all__ = ["register_error_handlers", "relay_error_handler", "relay_error_response"]
