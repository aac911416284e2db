"""
Casos de uso de la aplicacion.
"""
from .auth_use_cases import AuthUseCases
from .model_use_cases import ModelUseCases
from .sync_use_cases import ModelSyncUseCases

__all__ = ["AuthUseCases", "ModelUseCases", "ModelSyncUseCases"]
