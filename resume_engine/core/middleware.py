"""
Custom middleware for request processing
"""
import time
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
import structlog

from resume_engine.core.exceptions import ResumeEngineException

logger = structlog.get_logger()


def error_body(exc: ResumeEngineException) -> dict:
    """Serialize a service exception into the public error envelope"""
    return {
        "error": {
            "message": exc.message,
            "details": exc.details,
            "type": exc.__class__.__name__,
        }
    }


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Add correlation ID to requests for tracing"""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


def request_body_length(request: Request) -> int:
    """Declared body size in bytes; resume submissions are logged by size, never by content"""
    value = request.headers.get("content-length", "")
    return int(value) if value.isdigit() else 0


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log all requests and responses"""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        body_length = request_body_length(request)

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            body_length=body_length,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                process_time=time.time() - start_time,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            body_length=body_length,
            process_time=process_time,
        )

        response.headers["X-Process-Time"] = str(process_time)
        return response


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Handle exceptions and return proper error responses"""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except ResumeEngineException as e:
            return JSONResponse(status_code=e.status_code, content=error_body(e))
        except Exception as e:
            logger.exception("unhandled_exception", error=str(e))
            return JSONResponse(
                status_code=500,
                content={
                    "error": {
                        "message": "Internal server error",
                        "type": "InternalServerError",
                    }
                },
            )
