# dojo_api/core/error_handlers.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import DojoException, ValidationException

logger = logging.getLogger(__name__)


def _field_path(loc) -> str:
    # Drop the "body"/"query"/"path" prefix FastAPI puts first
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path"):
        parts = parts[1:]
    return ".".join(parts)


async def dojo_exception_handler(request: Request, exc: DojoException):
    """Handle application exceptions"""
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")
    else:
        logger.info(f"{exc.__class__.__name__}: {exc.message} - Path: {request.url.path}")

    content = {"error": exc.message, "type": exc.__class__.__name__}
    if isinstance(exc, ValidationException):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Render schema failures as a structured 400 with one entry per field"""
    errors = [
        {"field": _field_path(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    logger.info(f"Validation failed on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "type": "ValidationException", "errors": errors},
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.exception(f"Unexpected error: {exc} - Path: {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": "InternalError"}
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(DojoException, dojo_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, general_exception_handler)
