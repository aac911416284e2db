"""
Tests de configuracion, utilidades de fechas y arranque del scheduler.
"""
from datetime import datetime, timezone, timedelta

import pytest

from leaderboard.core import events
from leaderboard.core.config import Settings, get_cors_origins, settings
from leaderboard.shared.utils.datetime_utils import ensure_utc, to_iso_string


def test_cors_origins_formats() -> None:
    assert get_cors_origins("*") == ["*"]
    assert get_cors_origins('["https://a.dev", "https://b.dev"]') == ["https://a.dev", "https://b.dev"]
    assert get_cors_origins("https://a.dev, https://b.dev") == ["https://a.dev", "https://b.dev"]


def test_database_url_from_components() -> None:
    config = Settings(
        DATABASE_URL="",
        DATABASE_USER="u",
        DATABASE_PASSWORD="p",
        DATABASE_HOST="db",
        DATABASE_PORT=5433,
        DATABASE_NAME="board",
    )
    assert config.effective_database_url == "postgresql+asyncpg://u:p@db:5433/board"


def test_sync_defaults() -> None:
    config = Settings()
    assert config.SYNC_MIN_INTERVAL_SECONDS == 300
    assert config.ARTIFICIAL_ANALYSIS_TIMEOUT_SECONDS == 30
    assert config.ARTIFICIAL_ANALYSIS_MAX_RETRIES == 2


def test_ensure_utc_handles_naive_and_offset_datetimes() -> None:
    naive = datetime(2026, 1, 1, 10, 0)
    assert ensure_utc(naive) == datetime(2026, 1, 1, 10, 0, tzinfo=timezone.utc)

    offset = datetime(2026, 1, 1, 7, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert to_iso_string(offset) == "2026-01-01T10:00:00+00:00"
    assert to_iso_string(None) is None


def test_scheduler_disabled_by_default(monkeypatch) -> None:
    monkeypatch.setattr(settings, "SYNC_SCHEDULE_HOURS", 0)
    assert events._start_scheduler() is None


@pytest.mark.asyncio
async def test_scheduler_registers_sync_job(monkeypatch) -> None:
    monkeypatch.setattr(settings, "SYNC_SCHEDULE_HOURS", 6)

    scheduler = events._start_scheduler()
    try:
        job = scheduler.get_job(events.SYNC_SCHEDULER_JOB_ID)
        assert job is not None
        assert job.trigger.interval == timedelta(hours=6)
    finally:
        scheduler.shutdown(wait=False)
