import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from powerscore.core.logging import add_log_context, clear_log_context, get_logger

logger = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and bind it to every log line it produces.

    The ID comes from ``X-Request-ID`` when the caller sends one and is echoed
    back in the same header and in the envelope ``meta.request_id``.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        clear_log_context()
        add_log_context(request_id=request_id, path=request.url.path)
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            logger.debug(
                "request_completed",
                method=request.method,
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            clear_log_context()

        response.headers["X-Request-ID"] = request_id
        return response
