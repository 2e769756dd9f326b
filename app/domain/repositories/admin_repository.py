"""
Admin Repository Interface.
"""

from typing import Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.admin import Admin


class AdminRepository(BaseRepository[Admin]):
    """Interface for Admin-specific operations."""

    def get_by_email(self, email: str) -> Optional[Admin]:
        """Find an admin by email."""
        ...

    def touch_last_login(self, admin: Admin) -> Admin:
        """Stamp the admin's last successful login."""
        ...

    def set_password_hash(self, admin: Admin, password_hash: str) -> Admin:
        """Replace the stored password hash and stamp updated_at."""
        ...
