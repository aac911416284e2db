"""
DTOs del sync de modelos con Artificial Analysis.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class SkippedRecordDTO(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    reason: str


class SyncResultDTO(BaseModel):
    """Resultado de POST /sync/models."""

    updated: int = Field(..., description="Registros escritos con exito")
    total: int = Field(..., description="Registros devueltos por el proveedor")
    skipped: List[SkippedRecordDTO] = Field(default_factory=list)


class SyncStatusDTO(BaseModel):
    """Estado de la ultima corrida del sync (tabla sync_state)."""

    job_name: str
    status: str = Field(..., description="never_run | running | success | error")
    last_run_started_at: Optional[datetime] = None
    last_run_completed_at: Optional[datetime] = None
    last_run_error: Optional[str] = None
    next_run_available_at: Optional[datetime] = None
    min_interval_seconds: int
