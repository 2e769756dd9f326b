"""
SQLAlchemy Implementation of Admin Repository.
"""

from datetime import datetime, timezone
from typing import Optional

from app.domain.models.admin import Admin
from app.domain.repositories.admin_repository import AdminRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyAdminRepository(SQLAlchemyRepository[Admin], AdminRepository):
    """Admin repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[Admin]:
        return self.db.query(Admin).filter(Admin.email == email).first()

    def touch_last_login(self, admin: Admin) -> Admin:
        return self.update(admin, {"last_login": datetime.now(timezone.utc)})

    def set_password_hash(self, admin: Admin, password_hash: str) -> Admin:
        return self.update(
            admin,
            {"password_hash": password_hash, "updated_at": datetime.now(timezone.utc)},
        )
