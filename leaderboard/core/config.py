"""
Settings del leaderboard.

Todo se lee de variables de entorno (o de .env en desarrollo). Los valores
por defecto permiten levantar el API en local sin proveedor configurado:
el sync responde SYNC_NOT_CONFIGURED hasta que exista la API key.
"""
import json
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field, field_validator


class Settings(BaseSettings):
    """
    Variables de entorno del API.

    - DATABASE_URL tiene prioridad sobre DATABASE_HOST/PORT/USER/PASSWORD/NAME
    - ADMIN_USERNAME/ADMIN_PASSWORD vacios deshabilitan el login
    - SYNC_SCHEDULE_HOURS=0 deshabilita el sync programado
    """

    APP_NAME: str = Field(default="AI Model Leaderboard API")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # Postgres por componentes
    DATABASE_HOST: str = Field(default="localhost")
    DATABASE_PORT: int = Field(default=5432)
    DATABASE_USER: str = Field(default="leaderboard_user")
    DATABASE_PASSWORD: str = Field(default="leaderboard_pass")
    DATABASE_NAME: str = Field(default="leaderboard_db")
    DATABASE_URL: str = Field(default="")
    DB_POOL_SIZE: int = Field(default=5)
    DB_MAX_OVERFLOW: int = Field(default=10)

    # Token del administrador
    SECRET_KEY: str = Field(default="change-this-secret-key-in-production")
    ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60, ge=1)
    ADMIN_USERNAME: str = Field(default="")
    ADMIN_PASSWORD: str = Field(default="")

    # "*", lista JSON o lista separada por comas
    CORS_ORIGINS: str = Field(default="*")

    # Artificial Analysis
    ARTIFICIAL_ANALYSIS_API_KEY: str = Field(default="")
    ARTIFICIAL_ANALYSIS_BASE_URL: str = Field(default="https://artificialanalysis.ai/api/v2")
    ARTIFICIAL_ANALYSIS_TIMEOUT_SECONDS: int = Field(default=30, ge=1)
    ARTIFICIAL_ANALYSIS_MAX_RETRIES: int = Field(default=2, ge=0)

    # Sync
    SYNC_MIN_INTERVAL_SECONDS: int = Field(default=300, ge=0)
    SYNC_SCHEDULE_HOURS: float = Field(default=0, ge=0)

    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    @field_validator("ARTIFICIAL_ANALYSIS_API_KEY", "ADMIN_USERNAME", "ADMIN_PASSWORD")
    @classmethod
    def strip_secrets(cls, v: str) -> str:
        return v.strip()

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """URL de conexion: DATABASE_URL o la construida con los componentes."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


def get_cors_origins(cors_string: str) -> List[str]:
    """Convierte CORS_ORIGINS en la lista que espera CORSMiddleware."""
    value = cors_string.strip()
    if value == "*":
        return ["*"]
    if value.startswith("["):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass
    return [origin.strip() for origin in value.split(",") if origin.strip()]


settings = Settings()
