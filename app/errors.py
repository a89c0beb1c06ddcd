"""Error taxonomy and its single mapping onto HTTP responses.

Every failure a client can cause is one of the tagged errors below. Handlers
raise them; `register_exception_handlers` turns them into a status code and
an ``{"Error": "<message>"}`` body in one place.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

# Fields whose values are checked for format after the structure is valid
FORMAT_FIELDS = {"purchaseDate", "purchaseTime", "total", "price"}
FORMAT_ERROR_TYPES = {"string_pattern_mismatch", "value_error"}


class ReceiptProcessorError(Exception):
    tag = "Error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedJsonError(ReceiptProcessorError):
    tag = "MalformedJson"


class FieldFormatError(ReceiptProcessorError):
    tag = "FieldFormat"


class MethodNotAllowedError(ReceiptProcessorError):
    tag = "MethodNotAllowed"


class NotFoundError(ReceiptProcessorError):
    tag = "NotFound"


class DuplicateReceiptError(ReceiptProcessorError):
    tag = "DuplicateReceipt"


class RateLimitedError(ReceiptProcessorError):
    tag = "RateLimited"
    status_code = 429


def error_response(error: ReceiptProcessorError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"Error": error.message})


def _format_location(loc) -> str:
    # ("body", "items", 0, "price") -> "items[0].price"
    parts: list[str] = []
    for part in loc:
        if part == "body":
            continue
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            parts.append(f".{part}" if parts else str(part))
    return "".join(parts) or "body"


def classify_validation_error(exc: RequestValidationError) -> ReceiptProcessorError:
    """Map a request validation failure onto MalformedJson or FieldFormat.

    A body that fails to decode, misses a field, or carries the wrong type is
    malformed. A body whose only problems are the formats of dates, times and
    amounts is a field format error.
    """
    errors = exc.errors()
    if not errors:
        return MalformedJsonError("Invalid request body")

    first = errors[0]
    if first.get("type") == "json_invalid":
        return MalformedJsonError("Request body is not valid JSON")

    def is_format_error(err) -> bool:
        loc = err.get("loc") or ()
        field = loc[-1] if loc else None
        return err.get("type") in FORMAT_ERROR_TYPES and field in FORMAT_FIELDS

    message = f"{_format_location(first.get('loc', ()))}: {first.get('msg', 'invalid value')}"
    if all(is_format_error(err) for err in errors):
        return FieldFormatError(message)
    return MalformedJsonError(message)


def register_exception_handlers(app: FastAPI) -> None:
    async def handle_receipt_error(request: Request, exc: ReceiptProcessorError):
        logger.info(
            f"Rejected {request.method} {request.url.path}: {exc.message}",
            extra={"extra_data": {"error": exc.tag, "path": request.url.path}},
        )
        return error_response(exc)

    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return await handle_receipt_error(request, classify_validation_error(exc))

    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            error: ReceiptProcessorError = MethodNotAllowedError(
                f"Method not allowed: {request.method} {request.url.path}"
            )
        elif exc.status_code == 404:
            error = NotFoundError(f"Not found: {request.url.path}")
        else:
            error = ReceiptProcessorError(str(exc.detail))
        return await handle_receipt_error(request, error)

    async def handle_rate_limited(request: Request, exc: RateLimitExceeded):
        return await handle_receipt_error(request, RateLimitedError(f"Rate limit exceeded: {exc.detail}"))

    app.add_exception_handler(ReceiptProcessorError, handle_receipt_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RateLimitExceeded, handle_rate_limited)
