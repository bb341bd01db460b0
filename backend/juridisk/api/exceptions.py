from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from ..exceptions import JuridiskException
import logging

logger = logging.getLogger(__name__)


async def juridisk_exception_handler(request: Request, exc: JuridiskException):
    """Handle application exceptions"""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{type(exc).__name__}: {exc.detail} - {request.method} {request.url.path}")
    else:
        logger.warning(f"{type(exc).__name__}: {exc.detail} - {request.method} {request.url.path}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors as caller-correctable input errors"""
    errors = exc.errors()
    logger.warning(f"Validation error: {errors} - {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)}
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions without leaking details"""
    logger.error(f"Unhandled exception: {exc} - {request.method} {request.url.path}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )
