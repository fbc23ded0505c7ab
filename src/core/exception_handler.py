"""
Global exception handler for the Drug Catalogue service.
Renders every application error through the shared error page.
"""
import logging
from fastapi import FastAPI, Request
from src.api.templating import ERROR_VIEW, templates
from .exceptions import (
    DrugNotFoundException,
    ValidationException,
    DynamoDBException
)

logger = logging.getLogger(__name__)


def _error_page(request: Request, status_code: int, error: str, message: str):
    return templates.TemplateResponse(
        request,
        ERROR_VIEW,
        {"status_code": status_code, "error": error, "message": message},
        status_code=status_code
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""

    @app.exception_handler(DrugNotFoundException)
    async def handle_not_found(request: Request, exc: DrugNotFoundException):
        return _error_page(request, 404, "Not Found", exc.message)

    @app.exception_handler(ValidationException)
    async def handle_validation_error(request: Request, exc: ValidationException):
        return _error_page(request, 400, "Bad Request", exc.message)

    @app.exception_handler(DynamoDBException)
    async def handle_dynamodb_error(request: Request, exc: DynamoDBException):
        logger.error("Database error on %s: %s", request.url.path, exc.message, exc_info=exc)
        return _error_page(request, 500, "Database Error", "The drug store is unavailable")

    @app.exception_handler(Exception)
    async def handle_generic_error(request: Request, exc: Exception):
        logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
        return _error_page(request, 500, "Internal Server Error", "An unexpected error occurred")
