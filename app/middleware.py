import logging
import time

import sentry_sdk
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.errors import ReceiptProcessorError, error_response
from app.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

SKIP_LOG_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status code and duration for each request.

    Also the last line of defence: an exception no handler dealt with is
    reported and answered with a 400 error body, so one bad request can never
    take the server down.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}: {e}",
                exc_info=True,
                extra={"extra_data": {"error": type(e).__name__}},
            )
            sentry_sdk.capture_exception(e)
            response = error_response(ReceiptProcessorError(f"Internal error: {type(e).__name__}"))
        duration_ms = round((time.time() - start) * 1000)

        path = request.url.path
        if path in SKIP_LOG_PATHS:
            return response

        logger.info(
            f"{request.method} {path} {response.status_code}",
            extra={"extra_data": {
                "method": request.method,
                "path": path,
                "status": response.status_code,
                "duration_ms": duration_ms,
            }},
        )
        return response
