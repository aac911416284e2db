"""
Entidades del dominio.
"""
from leaderboard.domain.entities.ai_model import (
    NormalizedModel,
    SkippedRecord,
    SyncResult,
)

__all__ = [
    "NormalizedModel",
    "SkippedRecord",
    "SyncResult",
]
