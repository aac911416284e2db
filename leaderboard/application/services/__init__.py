"""
Servicios de aplicacion.

Contiene la logica de negocio reutilizable que no pertenece
a un caso de uso especifico.
"""
from leaderboard.application.services.model_normalizer import (
    ModelNormalizer,
    NormalizationOutcome,
)

__all__ = [
    "ModelNormalizer",
    "NormalizationOutcome",
]
