"""
Tests del endpoint POST /api/v1/sync/models.

Verifica el contrato HTTP:
- 401 sin token de administrador (antes de cualquier trabajo)
- 200 con {updated, total, skipped}
- 429 con retry_after_seconds cuando hay rate limit
- 500 con {error, message, details} si falta config o falla el proveedor
"""
from __future__ import annotations

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from leaderboard.api.v1.dependencies.use_case_deps import get_sync_use_cases
from leaderboard.application.use_cases.sync_use_cases import ModelSyncUseCases
from leaderboard.core.security import security_service
from leaderboard.infrastructure.external.artificial_analysis import ArtificialAnalysisApiError


SYNC_URL = "/api/v1/sync/models"


def _admin_headers() -> dict:
    token = security_service.create_access_token({"sub": "admin", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fake_client(provider_record) -> MagicMock:
    client = MagicMock()
    client.fetch_models.return_value = [
        provider_record(source_id="a"),
        provider_record(source_id="b", company=None),
    ]
    return client


@pytest.fixture
def app_with_sync(db_session, fake_client):
    """App con el sync apuntando a SQLite en memoria y al proveedor falso."""
    from main import create_application
    app = create_application()
    app.state.api_key = "test-key"
    app.dependency_overrides[get_sync_use_cases] = lambda: ModelSyncUseCases(
        db_session, client=fake_client, api_key=app.state.api_key
    )
    yield app
    app.dependency_overrides.clear()


async def _post(app, headers=None):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post(SYNC_URL, headers=headers or {})


@pytest.mark.asyncio
async def test_requires_admin_token(app_with_sync, fake_client) -> None:
    response = await _post(app_with_sync)

    assert response.status_code == 401
    assert response.json()["error"] == "UNAUTHORIZED"
    fake_client.fetch_models.assert_not_called()


@pytest.mark.asyncio
async def test_rejects_invalid_token(app_with_sync) -> None:
    response = await _post(app_with_sync, {"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["error"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_rejects_expired_token(app_with_sync) -> None:
    token = security_service.create_access_token(
        {"sub": "admin", "role": "admin"}, expires_delta=timedelta(minutes=-1)
    )
    response = await _post(app_with_sync, {"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"] == "TOKEN_EXPIRED"


@pytest.mark.asyncio
async def test_rejects_non_admin_role(app_with_sync) -> None:
    token = security_service.create_access_token({"sub": "viewer", "role": "viewer"})
    response = await _post(app_with_sync, {"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_sync_returns_summary(app_with_sync) -> None:
    response = await _post(app_with_sync, _admin_headers())

    assert response.status_code == 200
    body = response.json()
    assert body["updated"] == 1
    assert body["total"] == 2
    assert body["skipped"] == [
        {"id": "b", "name": "GPT-4o", "reason": "Missing required fields: company"}
    ]


@pytest.mark.asyncio
async def test_second_call_is_rate_limited(app_with_sync, fake_client) -> None:
    first = await _post(app_with_sync, _admin_headers())
    second = await _post(app_with_sync, _admin_headers())

    assert first.status_code == 200
    assert second.status_code == 429
    body = second.json()
    assert body["error"] == "SYNC_RATE_LIMITED"
    assert 0 < body["details"]["retry_after_seconds"] <= 300
    assert fake_client.fetch_models.call_count == 1


@pytest.mark.asyncio
async def test_missing_api_key_returns_500(app_with_sync, fake_client) -> None:
    app_with_sync.state.api_key = ""

    response = await _post(app_with_sync, _admin_headers())

    assert response.status_code == 500
    assert response.json()["error"] == "SYNC_NOT_CONFIGURED"
    fake_client.fetch_models.assert_not_called()


@pytest.mark.asyncio
async def test_provider_failure_hides_provider_text(app_with_sync, fake_client) -> None:
    fake_client.fetch_models.side_effect = ArtificialAnalysisApiError(
        "Artificial Analysis request fallo 403: secret upstream detail", status_code=403
    )

    response = await _post(app_with_sync, _admin_headers())

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "PROVIDER_FETCH_ERROR"
    assert body["details"] == {"provider_status": 403}
    assert "secret upstream detail" not in response.text
