"""
Consolidated middleware for the FoodAPI
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import ServiceError, ServiceValidationError
from app.messages import ErrorMessages

logger = logging.getLogger("foodapi.middleware")

# Request parts in the order their validation errors are reported
_LOCATION_MESSAGES = (
    ("path", ErrorMessages.REQ_PARAMS),
    ("body", ErrorMessages.REQ_BODY),
    ("query", ErrorMessages.REQ_QUERIES),
)


# ============================================================================
# Helper Functions
# ============================================================================


def make_serializable(errors) -> list:
    """Reduce pydantic error entries to JSON-safe loc/msg/type triples"""
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": str(err.get("msg", "")),
            "type": str(err.get("type", "")),
        }
        for err in errors
    ]


def validation_message(errors) -> str:
    """Pick the category message for a set of request validation errors"""
    locations = {err.get("loc", ("",))[0] for err in errors if err.get("loc")}
    for location, message in _LOCATION_MESSAGES:
        if location in locations:
            return message
    return ErrorMessages.REQ_BODY


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "Request completed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "status_code": response.status_code,
                    "process_time": f"{process_time:.4f}s",
                },
            )

            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = f"{process_time:.4f}"

            return response

        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url),
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer request validation failures with 400 and a body/query/params message"""
    errors = exc.errors()
    logger.warning(f"Validation error on {request.url}: {errors}")

    error = ServiceValidationError(
        validation_message(errors),
        details=make_serializable(errors),
        code="VALIDATION_ERROR",
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_dict())


async def service_exception_handler(request: Request, exc: ServiceError):
    """Handle ServiceError subclasses (validation, not found) raised by routes or services"""
    logger.warning(f"{exc.__class__.__name__} on {request.url}: {str(exc)}")

    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url}: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": ErrorMessages.INTERNAL, "code": "INTERNAL_SERVER_ERROR"},
    )
