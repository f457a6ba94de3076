import secrets
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Security
from fastapi.security.api_key import APIKeyHeader
from starlette.status import HTTP_403_FORBIDDEN

from app.settings import Settings, settings

API_KEY_NAME = "X-Admin-Key"
api_key_header = APIKeyHeader(name=API_KEY_NAME, auto_error=False)

AdminCheck = Callable[[Optional[str]], bool]
FORBIDDEN_MESSAGE = "Forbidden - invalid admin key"


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def secret_matches(expected: str) -> AdminCheck:
    def check(candidate: Optional[str]) -> bool:
        if not expected or not candidate:
            return False
        return secrets.compare_digest(candidate.encode(), expected.encode())

    return check


def get_admin_check(
    current_settings: Settings = Depends(get_settings),
) -> AdminCheck:
    return secret_matches(current_settings.ADMIN_SECRET)


def require_admin(
    api_key_header: Optional[str] = Security(api_key_header),
    is_admin: AdminCheck = Depends(get_admin_check),
):
    if is_admin(api_key_header):
        return api_key_header
    raise HTTPException(
        status_code=HTTP_403_FORBIDDEN,
        detail=FORBIDDEN_MESSAGE,
    )
