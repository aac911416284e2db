"""
Ciclo de vida de la aplicacion (inicio y cierre).
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger
from fastapi import FastAPI
from loguru import logger

from leaderboard.core.config import settings
from leaderboard.infrastructure.database.session import init_db, close_db


SYNC_SCHEDULER_JOB_ID = "model_sync"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Inicializa recursos al inicio y los libera al cerrar."""
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


async def startup(app: FastAPI) -> None:
    try:
        logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Entorno: {settings.ENVIRONMENT}")

        # Validar configuracion critica
        _validate_config()

        # Inicializar base de datos (crea tablas si no existen)
        await init_db()
        logger.info("Base de datos inicializada")

        # Configurar logging adicional
        logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            level=settings.LOG_LEVEL
        )

        app.state.scheduler = _start_scheduler()

        logger.success("Aplicacion iniciada correctamente")
        _print_available_urls()

    except Exception as e:
        logger.error(f"Error durante startup: {e}")
        logger.exception("Detalle del error:")
        raise


def _validate_config() -> None:
    """Valida que la configuracion critica este presente."""
    warnings = []

    if not settings.ARTIFICIAL_ANALYSIS_API_KEY:
        warnings.append("ARTIFICIAL_ANALYSIS_API_KEY no configurada - el sync respondera 500")
    if not (settings.ADMIN_USERNAME and settings.ADMIN_PASSWORD):
        warnings.append("ADMIN_USERNAME/ADMIN_PASSWORD vacios - login de administrador deshabilitado")
    if not settings.is_development and settings.SECRET_KEY.startswith("change-this"):
        warnings.append("SECRET_KEY por defecto - cambiarla en produccion")

    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")


def _start_scheduler():
    """
    Arranca el sync programado si SYNC_SCHEDULE_HOURS > 0.
    El rate limit de sync_state aplica igual que para el endpoint.
    """
    if settings.SYNC_SCHEDULE_HOURS <= 0:
        logger.info("Sync programado deshabilitado (SYNC_SCHEDULE_HOURS=0)")
        return None

    from leaderboard.application.use_cases.sync_use_cases import run_scheduled_sync

    scheduler = AsyncIOScheduler(timezone="UTC")
    scheduler.add_job(
        run_scheduled_sync,
        trigger=IntervalTrigger(hours=settings.SYNC_SCHEDULE_HOURS),
        id=SYNC_SCHEDULER_JOB_ID,
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    scheduler.start()
    logger.info(f"Sync programado cada {settings.SYNC_SCHEDULE_HOURS} horas")
    return scheduler


def _print_available_urls() -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    access_host = "localhost" if settings.HOST == "0.0.0.0" else settings.HOST
    base_url = f"http://{access_host}:{settings.PORT}"

    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONIBLES:</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Leaderboard: {base_url}/api/v1/models</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/health</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")


async def shutdown(app: FastAPI) -> None:
    """Libera recursos al cerrar la aplicacion."""
    logger.info("Cerrando aplicacion...")

    scheduler = getattr(app.state, "scheduler", None)
    if scheduler is not None:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler detenido")

    await close_db()
    logger.info("Conexiones de base de datos cerradas")

    logger.success("Aplicacion cerrada correctamente")
