"""
Tests de los repositorios contra SQLite en memoria.

- UPSERT por source_id (ON CONFLICT DO UPDATE)
- candado del rate limit en sync_state
"""
from datetime import datetime, timedelta, timezone

import pytest

from leaderboard.infrastructure.repositories.ai_model_repository import AIModelRepository
from leaderboard.infrastructure.repositories.sync_state_repository import SyncStateRepository


T0 = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
INTERVAL = timedelta(minutes=5)


def _row(source_id="m-1", **overrides):
    row = {
        "source_id": source_id,
        "name": "Model One",
        "company": "Acme",
        "overall_intelligence": 50.0,
        "benchmark_scores": {"speed": 100.0, "coding": 40.0},
    }
    row.update(overrides)
    return row


@pytest.mark.asyncio
async def test_upsert_inserts_then_replaces(db_session) -> None:
    repo = AIModelRepository(db_session)

    await repo.upsert_by_source_id(_row(), synced_at=T0)
    await db_session.commit()
    first = await repo.get_by_source_id("m-1")
    first_id = first.id

    await repo.upsert_by_source_id(
        _row(name="Model One v2", benchmark_scores={"coding": 42.0}),
        synced_at=T0 + timedelta(hours=1),
    )
    await db_session.commit()
    db_session.expire_all()

    assert await repo.count() == 1
    stored = await repo.get_by_source_id("m-1")
    assert stored.id == first_id
    assert stored.name == "Model One v2"
    # Reemplazo completo: speed desaparece
    assert stored.benchmark_scores == {"coding": 42.0}


@pytest.mark.asyncio
async def test_upsert_keeps_description(db_session) -> None:
    repo = AIModelRepository(db_session)
    await repo.upsert_by_source_id(_row(), synced_at=T0)
    await db_session.commit()

    stored = await repo.get_by_source_id("m-1")
    stored.description = "Escrita a mano"
    await db_session.commit()

    await repo.upsert_by_source_id(_row(overall_intelligence=55.0), synced_at=T0)
    await db_session.commit()
    db_session.expire_all()

    stored = await repo.get_by_source_id("m-1")
    assert stored.overall_intelligence == 55.0
    assert stored.description == "Escrita a mano"


@pytest.mark.asyncio
async def test_upsert_requires_source_id(db_session) -> None:
    with pytest.raises(ValueError):
        await AIModelRepository(db_session).upsert_by_source_id(_row(source_id=None))


@pytest.mark.asyncio
async def test_list_page_filters_sorts_and_counts(db_session) -> None:
    repo = AIModelRepository(db_session)
    await repo.create(_row(source_id=None, name="Beta", company="Acme", overall_intelligence=30.0))
    await repo.create(_row(source_id=None, name="Alpha", company="Acme", overall_intelligence=60.0))
    await repo.create(_row(source_id=None, name="Gamma", company="Other", overall_intelligence=90.0))
    await db_session.commit()

    rows, total = await repo.list_page(company="Acme", sort="name", offset=0, limit=10)
    assert total == 2
    assert [r.name for r in rows] == ["Alpha", "Beta"]

    rows, total = await repo.list_page(offset=1, limit=1)
    assert total == 3
    assert [r.name for r in rows] == ["Alpha"]


@pytest.mark.asyncio
async def test_first_claim_creates_state_row(db_session) -> None:
    repo = SyncStateRepository(db_session)

    assert await repo.try_claim_run("model_sync", now=T0, min_interval=INTERVAL) is True
    await db_session.commit()

    state = await repo.get("model_sync")
    assert state.last_run_status == "running"


@pytest.mark.asyncio
async def test_claim_within_interval_is_rejected(db_session) -> None:
    repo = SyncStateRepository(db_session)
    assert await repo.try_claim_run("model_sync", now=T0, min_interval=INTERVAL)
    await db_session.commit()

    later = T0 + timedelta(seconds=60)
    assert await repo.try_claim_run("model_sync", now=later, min_interval=INTERVAL) is False
    assert await repo.seconds_until_next_run("model_sync", now=later, min_interval=INTERVAL) == 240


@pytest.mark.asyncio
async def test_claim_after_interval_succeeds(db_session) -> None:
    repo = SyncStateRepository(db_session)
    assert await repo.try_claim_run("model_sync", now=T0, min_interval=INTERVAL)
    await repo.mark_run_finished("model_sync", status="success", error=None, finished_at=T0)
    await db_session.commit()

    later = T0 + INTERVAL
    assert await repo.try_claim_run("model_sync", now=later, min_interval=INTERVAL) is True
    await db_session.commit()

    state = await repo.get("model_sync")
    assert state.last_run_status == "running"
    assert state.last_run_completed_at is None
    assert state.last_run_started_at.replace(tzinfo=timezone.utc) == later
