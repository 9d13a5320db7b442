"""HTTP middleware for the inventory API.

Two layers wrap every request: request context (correlation id, access
log) on the outside, and a last-resort error boundary inside it so that
even crashes are answered with an ``ErrorResponse`` carrying the id.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from inventory_api.api.schemas import ErrorResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Attach a correlation id to the request, its logs and its response.

    A client-supplied ``X-Request-ID`` is reused; otherwise a UUID is
    minted. The id, method and path are bound into the structlog context
    for everything logged while the request is handled.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        started = time.perf_counter()
        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        ):
            try:
                response = await call_next(request)
            except Exception:
                logger.warning(
                    "Request aborted",
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )
                raise

            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Answer exceptions no handler claimed with a generic 500.

    The exception text goes to the log only; the client sees a fixed
    ``INTERNAL_ERROR`` body.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled exception")
            body = ErrorResponse(
                error_code="INTERNAL_ERROR",
                message="An internal error occurred",
                request_id=getattr(request.state, "request_id", None),
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=body.model_dump(),
            )


def setup_middleware(app: FastAPI) -> None:
    """Install the inventory middleware stack.

    Starlette runs the most recently added middleware first, so the
    request context is added last to sit outermost.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(RequestContextMiddleware)
