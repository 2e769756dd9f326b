"""User service — registration, updates and shift statistics."""

from typing import Any, Dict

import structlog

from app.core.exceptions import ConflictException, EntityNotFoundException
from app.domain.enums import describe_shift
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.common import Pagination
from app.domain.schemas.user import (
    ShiftCount,
    UserCreate,
    UserDeleted,
    UserRead,
    UserStats,
    UserUpdate,
)

logger = structlog.get_logger(__name__)


def list_users(repo: UserRepository, page: int, limit: int) -> Dict[str, Any]:
    users = repo.list_recent(skip=(page - 1) * limit, limit=limit)
    return {
        "items": [UserRead.model_validate(u) for u in users],
        "pagination": Pagination.build(page, limit, repo.count()),
    }


def get_user(repo: UserRepository, user_id: int) -> UserRead:
    user = repo.get_by_id(user_id)
    if not user:
        raise EntityNotFoundException("User not found")
    return UserRead.model_validate(user)


def create_user(repo: UserRepository, body: UserCreate) -> UserRead:
    if repo.get_by_email(body.email):
        raise ConflictException("Email already exists", {"field": "email"})
    if repo.get_by_pid(body.pid):
        raise ConflictException("PID already exists", {"field": "pid"})

    user = repo.create({
        "name": body.name,
        "email": body.email,
        "phone": body.phone,
        "shift": int(body.shift),
        "pid": body.pid,
    })
    logger.info("User created", user_id=user.id, pid=user.pid)
    return UserRead.model_validate(user)


def update_user(repo: UserRepository, user_id: int, body: UserUpdate) -> UserRead:
    user = repo.get_by_id(user_id)
    if not user:
        raise EntityNotFoundException("User not found")

    if body.email != user.email and repo.get_by_email(body.email):
        raise ConflictException("Email already exists", {"field": "email"})

    user = repo.update(user, {
        "name": body.name,
        "email": body.email,
        "phone": body.phone,
        "shift": int(body.shift),
    })
    logger.info("User updated", user_id=user.id)
    return UserRead.model_validate(user)


def delete_user(repo: UserRepository, user_id: int) -> UserDeleted:
    user = repo.get_by_id(user_id)
    if not user:
        raise EntityNotFoundException("User not found")

    deleted = UserDeleted(id=user.id, name=user.name, email=user.email)
    pid = user.pid
    repo.delete(user_id)
    logger.info("User deleted", user_id=user_id, pid=pid)
    return deleted


def get_user_stats(repo: UserRepository) -> UserStats:
    shift_stats = [
        ShiftCount(shift=shift, label=describe_shift(shift)[0], count=count)
        for shift, count in repo.count_by_shift()
    ]
    return UserStats(total_users=repo.count(), shift_stats=shift_stats)
