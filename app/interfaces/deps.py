"""
API Dependencies.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import Settings
from app.domain.models.admin import Admin
from app.domain.models.ip_data import IpData
from app.domain.models.user import User
from app.domain.repositories.admin_repository import AdminRepository
from app.domain.repositories.ip_data_repository import IpDataRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.database import get_db
from app.infrastructure.ipinfo_api import IpInfoClient
from app.infrastructure.repositories.admin_repository import SQLAlchemyAdminRepository
from app.infrastructure.repositories.ip_data_repository import SQLAlchemyIpDataRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_admin_repository(db: Session = Depends(get_db)) -> AdminRepository:
    """Get admin repository instance."""
    return SQLAlchemyAdminRepository(db, Admin)


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_ip_data_repository(db: Session = Depends(get_db)) -> IpDataRepository:
    """Get IP data repository instance."""
    return SQLAlchemyIpDataRepository(db, IpData)


def get_ipinfo_client(request: Request) -> IpInfoClient:
    """Get the ipinfo client built at startup."""
    return request.app.state.ipinfo_client
