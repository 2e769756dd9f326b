"""Auth API routes — login, register, profile, password reset."""

from fastapi import APIRouter, Depends, status

from app.application.services import auth_service
from app.config import Settings
from app.core.exceptions import EntityNotFoundException
from app.domain.repositories.admin_repository import AdminRepository
from app.domain.schemas.auth import (
    AdminCreate,
    AdminIdentity,
    AdminRead,
    AdminSummary,
    ChangePasswordRequest,
    LoginData,
    LoginRequest,
)
from app.domain.schemas.common import ApiResponse
from app.interfaces.api.deps import get_current_admin
from app.interfaces.deps import get_admin_repository, get_app_settings

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post("/login", response_model=ApiResponse[LoginData])
def login(
    body: LoginRequest,
    repo: AdminRepository = Depends(get_admin_repository),
    settings: Settings = Depends(get_app_settings),
):
    data = auth_service.login(repo, settings, body.email, body.password)
    return ApiResponse(message="Login successful", data=data)


@router.post("/register", response_model=ApiResponse[AdminSummary], status_code=status.HTTP_201_CREATED)
def register(body: AdminCreate, repo: AdminRepository = Depends(get_admin_repository)):
    admin = auth_service.register_admin(repo, body)
    return ApiResponse(
        message="Admin account created successfully",
        data=AdminSummary.model_validate(admin),
    )


@router.get("/profile", response_model=ApiResponse[AdminRead])
def profile(
    identity: AdminIdentity = Depends(get_current_admin),
    repo: AdminRepository = Depends(get_admin_repository),
):
    admin = repo.get_by_id(identity.id)
    if admin is None:
        raise EntityNotFoundException("Admin not found")
    return ApiResponse(data=AdminRead.model_validate(admin))


@router.put("/change-password", response_model=ApiResponse)
def change_password(body: ChangePasswordRequest, repo: AdminRepository = Depends(get_admin_repository)):
    auth_service.change_password(repo, body)
    return ApiResponse(message="Password changed successfully")
