"""
Entidades de dominio del sync de modelos.

Son estructuras puras (sin I/O) que viajan entre las tres fases del sync:
fetch -> normalize -> reconcile.
"""
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class NormalizedModel:
    """
    Registro del proveedor ya saneado y validado, listo para UPSERT.

    benchmark_scores solo contiene las metricas con valor: una metrica
    ausente no existe como key (nunca se guarda como 0 ni como null).
    """

    source_id: str
    name: str
    company: str
    overall_intelligence: float
    benchmark_scores: Dict[str, float] = field(default_factory=dict)

    def to_row(self) -> Dict[str, Any]:
        """Columnas de ai_models que el sync es dueño de escribir."""
        return {
            "source_id": self.source_id,
            "name": self.name,
            "company": self.company,
            "overall_intelligence": self.overall_intelligence,
            "benchmark_scores": dict(self.benchmark_scores),
        }


@dataclass(frozen=True)
class SkippedRecord:
    """Registro descartado durante el sync, con motivo legible."""

    id: Optional[str]
    name: Optional[str]
    reason: str


@dataclass
class SyncResult:
    """
    Resultado de una corrida de sync.

    - updated: UPSERTs confirmados
    - total: registros devueltos por el proveedor (validos o no)
    - skipped: registros invalidos o que fallaron al escribirse
    """

    updated: int = 0
    total: int = 0
    skipped: List[SkippedRecord] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
