from typing import List, Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger(__name__)

# First path segment under /api -> message prefix for 400 responses
VALIDATION_MESSAGES = {
    "employees": "Invalid employee data",
    "time-entries": "Invalid time entry data",
    "schedules": "Invalid schedule data",
    "attendance": "Invalid attendance data",
}

LOCATION_PREFIXES = ("body", "query", "path")


class BusinessRuleError(Exception):
    """A request that passed schema validation but breaks a domain rule."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


def validation_message(path: str) -> str:
    segments = [s for s in path.split("/") if s]
    if len(segments) >= 2 and segments[0] == "api":
        return VALIDATION_MESSAGES.get(segments[1], "Invalid request data")
    return "Invalid request data"


def format_validation_errors(errors) -> List[dict]:
    """Flatten pydantic error entries to ``{field, message}`` pairs."""
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        formatted.append({"field": field, "message": error.get("msg", "Invalid value")})
    return formatted


def register_exception_handlers(app: FastAPI) -> None:
    """Map errors to ``{message}`` / ``{message, errors}`` JSON bodies."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": validation_message(request.url.path), "errors": errors},
        )

    @app.exception_handler(BusinessRuleError)
    async def business_rule_handler(request: Request, exc: BusinessRuleError):
        errors = [{"field": exc.field, "message": exc.message}] if exc.field else []
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": exc.message, "errors": errors},
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
