import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_403_FORBIDDEN

from app.security import (
    API_KEY_NAME,
    FORBIDDEN_MESSAGE,
    AdminCheck,
    get_admin_check,
    get_settings,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "id, title, and content are required"
ADMIN_METHODS = {"POST", "DELETE"}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _resolve_admin_check(app: FastAPI) -> AdminCheck:
    # Same resolution as the require_admin dependency, overrides included
    overrides = app.dependency_overrides
    if get_admin_check in overrides:
        return overrides[get_admin_check]()
    settings_factory = overrides.get(get_settings, get_settings)
    return get_admin_check(current_settings=settings_factory())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # The body is decoded before dependencies run, so re-check the secret here
    if request.method in ADMIN_METHODS:
        is_admin = _resolve_admin_check(request.app)
        if not is_admin(request.headers.get(API_KEY_NAME)):
            return JSONResponse(
                status_code=HTTP_403_FORBIDDEN,
                content={"error": FORBIDDEN_MESSAGE},
            )

    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"error": REQUIRED_FIELDS_MESSAGE},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Render every error as {"error": ...} and map body validation to 400."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
