"""
Integracion con el proveedor de benchmarks Artificial Analysis.

Solo lectura: el cliente descarga el catalogo de modelos y el sync
(ModelSyncUseCases) se encarga de normalizar y reconciliar contra la base.
"""
from .client import ArtificialAnalysisApiError, ArtificialAnalysisClient

__all__ = ["ArtificialAnalysisApiError", "ArtificialAnalysisClient"]
