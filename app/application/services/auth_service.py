"""Auth service — JWT token management, password hashing and admin accounts."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.config import Settings
from app.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    UnauthorizedException,
    ValidationException,
)
from app.domain.models.admin import Admin
from app.domain.repositories.admin_repository import AdminRepository
from app.domain.schemas.auth import (
    AdminCreate,
    AdminSummary,
    ChangePasswordRequest,
    LoginData,
)

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ADMIN_ROLE = "admin"
DEACTIVATED_MESSAGE = "Account is deactivated. Please contact administrator."


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: dict, settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    """Verify signature and expiry; expired and invalid tokens fail differently."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise UnauthorizedException("Token expired")
    except JWTError:
        raise UnauthorizedException("Invalid token")


def token_claims(admin: Admin) -> dict:
    return {"admin_id": admin.id, "email": admin.email, "role": admin.role}


def get_admin_from_token(repo: AdminRepository, token: str, settings: Settings) -> Admin:
    """Resolve a bearer token to a stored, active admin."""
    payload = decode_access_token(token, settings)

    admin_id = payload.get("admin_id")
    if not isinstance(admin_id, int):
        raise UnauthorizedException("Invalid token")

    admin = repo.get_by_id(admin_id)
    if admin is None:
        raise UnauthorizedException("Admin not found")
    if not admin.is_active:
        raise UnauthorizedException("Account is deactivated")
    return admin


def authenticate_admin(repo: AdminRepository, email: str, password: str) -> Admin:
    admin = repo.get_by_email(email)
    if not admin or not verify_password(password, admin.password_hash):
        raise UnauthorizedException("Invalid email or password")
    if not admin.is_active:
        raise UnauthorizedException(DEACTIVATED_MESSAGE)
    return admin


def login(repo: AdminRepository, settings: Settings, email: str, password: str) -> LoginData:
    admin = authenticate_admin(repo, email, password)
    token = create_access_token(token_claims(admin), settings)
    admin = repo.touch_last_login(admin)
    logger.info("Admin logged in", admin_id=admin.id)
    return LoginData(token=token, admin=AdminSummary.model_validate(admin))


def register_admin(repo: AdminRepository, body: AdminCreate) -> Admin:
    if repo.get_by_email(body.email):
        raise ConflictException("Admin with this email already exists")

    admin = repo.create({
        "name": body.name,
        "email": body.email,
        "password_hash": hash_password(body.password),
        "role": ADMIN_ROLE,
        "is_active": True,
    })
    logger.info("Admin registered", admin_id=admin.id, email=admin.email)
    return admin


def change_password(repo: AdminRepository, body: ChangePasswordRequest) -> None:
    admin = repo.get_by_email(body.email)
    if not admin:
        raise EntityNotFoundException("Admin with this email does not exist")
    if not admin.is_active:
        raise ValidationException(DEACTIVATED_MESSAGE)

    repo.set_password_hash(admin, hash_password(body.new_password))
    logger.info("Admin password changed", admin_id=admin.id)
