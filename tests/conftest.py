import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test-bootstrap.db")
os.environ.setdefault("IPINFO_TOKEN", "test-token")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient

from app.application.services.auth_service import hash_password
from app.config import get_settings
from app.domain.models.admin import Admin
from app.domain.models.ip_data import IpData
from app.domain.models.user import User
from app.main import create_app

ADMIN_EMAIL = "root@example.com"
ADMIN_PASSWORD = "s3cret-pass"


@pytest.fixture
def settings(tmp_path):
    return get_settings().model_copy(
        update={"DATABASE_URL": f"sqlite:///{tmp_path / 'test.db'}"}
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    session = app.state.database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def admin(db):
    admin = Admin(
        name="Root",
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        role="admin",
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def token(client, admin):
    res = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert res.status_code == 200
    return res.json()["data"]["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(db):
    def _make(pid, shift=1, name=None, email=None, phone="0123456789"):
        user = User(
            name=name or f"User {pid}",
            email=email or f"user{pid}@example.com",
            phone=phone,
            shift=shift,
            pid=pid,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_ip_data(db):
    """Insert a record directly, bypassing the PID check."""
    def _make(pid, ip, record_type="Search", city=None, country_name=None):
        record = IpData(pid=pid, ip=ip, record_type=record_type, city=city, country_name=country_name)
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    return _make
