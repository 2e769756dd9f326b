"""FastAPI dependency — bearer token auth gate."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.services.auth_service import ADMIN_ROLE, get_admin_from_token
from app.config import Settings
from app.core.exceptions import ForbiddenException, UnauthorizedException
from app.domain.repositories.admin_repository import AdminRepository
from app.domain.schemas.auth import AdminIdentity
from app.interfaces.deps import get_admin_repository, get_app_settings

security = HTTPBearer(auto_error=False)


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    repo: AdminRepository = Depends(get_admin_repository),
    settings: Settings = Depends(get_app_settings),
) -> AdminIdentity:
    """Extract and validate the current admin from the bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Access token required")

    admin = get_admin_from_token(repo, credentials.credentials, settings)
    return AdminIdentity.model_validate(admin)


def require_admin(admin: AdminIdentity = Depends(get_current_admin)) -> AdminIdentity:
    """Require admin role."""
    if admin.role != ADMIN_ROLE:
        raise ForbiddenException("Admin access required")
    return admin
