"""
Tests del login del administrador y del servicio de credenciales.
"""
from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from leaderboard.core.config import settings
from leaderboard.core.security import security_service
from leaderboard.infrastructure.security.single_user_auth_service import SingleUserAuthService


def test_single_user_auth_service() -> None:
    service = SingleUserAuthService("admin", "s3cret")

    assert service.is_configured()
    assert service.verify("admin", "s3cret")
    assert not service.verify("admin", "wrong")
    assert not service.verify("other", "s3cret")
    assert not service.verify("", "")


def test_unconfigured_service_rejects_everything() -> None:
    service = SingleUserAuthService("", "")

    assert not service.is_configured()
    assert not service.verify("", "")


@pytest.fixture
def admin_credentials(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_USERNAME", "admin")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "s3cret")


async def _login(payload: dict):
    from main import create_application
    transport = ASGITransport(app=create_application())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post("/api/v1/auth/login", json=payload)


@pytest.mark.asyncio
async def test_login_issues_admin_token(admin_credentials) -> None:
    response = await _login({"username": "admin", "password": "s3cret"})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    claims = security_service.decode_access_token(body["access_token"])
    assert claims["sub"] == "admin"
    assert claims["role"] == "admin"


@pytest.mark.asyncio
async def test_login_with_wrong_password(admin_credentials) -> None:
    response = await _login({"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_not_configured(monkeypatch) -> None:
    monkeypatch.setattr(settings, "ADMIN_USERNAME", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", "")

    response = await _login({"username": "admin", "password": "s3cret"})

    assert response.status_code == 503
    assert response.json()["error"] == "AUTH_NOT_CONFIGURED"
