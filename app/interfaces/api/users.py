"""User API routes — admin-only CRUD and shift statistics."""

from fastapi import APIRouter, Depends, Query, status

from app.application.services import user_service
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import AdminIdentity
from app.domain.schemas.common import MAX_PAGE, MAX_PAGE_SIZE, ApiResponse
from app.domain.schemas.user import UserCreate, UserDeleted, UserRead, UserStats, UserUpdate
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api", tags=["Users"])


@router.get("/users", response_model=ApiResponse[list[UserRead]])
def list_users(
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
    repo: UserRepository = Depends(get_user_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    result = user_service.list_users(repo, page, limit)
    return ApiResponse(data=result["items"], pagination=result["pagination"])


@router.get("/users-stats", response_model=ApiResponse[UserStats])
def user_stats(
    repo: UserRepository = Depends(get_user_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    return ApiResponse(data=user_service.get_user_stats(repo))


@router.get("/users/{user_id}", response_model=ApiResponse[UserRead])
def get_user(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    return ApiResponse(data=user_service.get_user(repo, user_id))


@router.post("/users", response_model=ApiResponse[UserRead], status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    user = user_service.create_user(repo, body)
    return ApiResponse(message="User created successfully", data=user)


@router.put("/users/{user_id}", response_model=ApiResponse[UserRead])
def update_user(
    user_id: int,
    body: UserUpdate,
    repo: UserRepository = Depends(get_user_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    user = user_service.update_user(repo, user_id, body)
    return ApiResponse(message="User updated successfully", data=user)


@router.delete("/users/{user_id}", response_model=ApiResponse[UserDeleted])
def delete_user(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    admin: AdminIdentity = Depends(require_admin),
):
    deleted = user_service.delete_user(repo, user_id)
    return ApiResponse(message="User deleted successfully", data=deleted)
