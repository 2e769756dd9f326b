import logging

import structlog
from fastapi.testclient import TestClient
from jose import jwt

from app.application.services.auth_service import decode_access_token, hash_password
from app.domain.models.admin import Admin
from app.interfaces.deps import get_user_repository
from app.main import create_app


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Backend server is running!", "status": "success"}
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert "timestamp" in body


def test_request_id_header(client):
    res = client.get("/health")
    assert res.headers.get("X-Request-ID")


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.json()["success"] is False


def test_unexpected_error_is_500(app, auth_headers):
    class BrokenRepository:
        def list_recent(self, skip, limit):
            raise RuntimeError("storage exploded")

    app.dependency_overrides[get_user_repository] = lambda: BrokenRepository()
    try:
        with TestClient(app, raise_server_exceptions=False) as client:
            res = client.get("/api/users", headers=auth_headers)
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 500
    body = res.json()
    assert body["success"] is False
    assert body["message"] == "Internal server error"
    assert "storage exploded" in body["details"]


def test_injected_production_settings(settings, auth_headers):
    prod_settings = settings.model_copy(
        update={"ENVIRONMENT": "production", "SECRET_KEY": "other-key"}
    )
    prod_app = create_app(prod_settings)

    class BrokenRepository:
        def list_recent(self, skip, limit):
            raise RuntimeError("storage exploded")

    with TestClient(prod_app, raise_server_exceptions=False) as prod_client:
        session = prod_app.state.database.session()
        try:
            session.add(Admin(
                name="Prod",
                email="prod@example.com",
                password_hash=hash_password("prod-pass"),
                role="admin",
                is_active=True,
            ))
            session.commit()
        finally:
            session.close()

        res = prod_client.post(
            "/api/admin/login", json={"email": "prod@example.com", "password": "prod-pass"}
        )
        assert res.status_code == 200
        token = res.json()["data"]["token"]
        assert decode_access_token(token, prod_settings)["email"] == "prod@example.com"
        assert jwt.decode(token, "other-key", algorithms=[prod_settings.JWT_ALGORITHM])

        # Tokens signed with the default key do not pass this app's gate
        res = prod_client.get("/api/users", headers=auth_headers)
        assert res.status_code == 401

        prod_app.dependency_overrides[get_user_repository] = lambda: BrokenRepository()
        res = prod_client.get("/api/users", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 500
    body = res.json()
    assert body == {"success": False, "message": "Internal server error", "error": "internal_error"}

    handler = next(h for h in logging.getLogger().handlers if h.get_name() == "ip-records-structlog")
    assert isinstance(handler.formatter.processors[-1], structlog.processors.JSONRenderer)
