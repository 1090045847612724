import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class WeatherReportError(Exception):
    """
    Base class for domain errors raised by services and repositories.

    Each subclass carries the HTTP status the API layer answers with.
    """

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WeatherReportError):
    """Missing or malformed required input (e.g. no city)."""

    status_code = 400


class AuthenticationError(WeatherReportError):
    """Credentials rejected by the admin login."""

    status_code = 401


class NotFoundError(WeatherReportError):
    """The query succeeded but returned no records."""

    status_code = 404


class DatabaseError(WeatherReportError):
    """The store is unavailable, a query failed, or an operation timed out."""

    status_code = 500


def error_body(message: str) -> dict:
    return {"success": False, "error": message}


async def weather_report_error_handler(request: Request, exc: WeatherReportError) -> JSONResponse:
    """
    Answer a domain error with its status code and the failure envelope.

    Server-side (5xx) errors are logged; client errors are not.
    """
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer malformed requests (bad JSON, wrong types) with a 400 failure envelope.
    """
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=400, content=error_body(f"Invalid request: {problems}"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log an unexpected exception with its traceback and answer a generic 500.
    """
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=error_body("Internal server error"))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Render domain errors as `{"success": false, "error": ...}` responses.
    """
    app.add_exception_handler(WeatherReportError, weather_report_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
