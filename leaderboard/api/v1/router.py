"""
Router principal de la API v1.
Agrupa todos los endpoints de la version 1.
"""
from fastapi import APIRouter

from leaderboard.api.v1.endpoints import admin, auth, companies, metrics, models, sync


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

# Incluir routers de endpoints especificos
api_router.include_router(models.router)
api_router.include_router(companies.router)
api_router.include_router(metrics.router)
api_router.include_router(auth.router)
api_router.include_router(sync.router)
api_router.include_router(admin.router)
