"""
Casos de uso para autenticacion del administrador.

El unico usuario se configura por env (ADMIN_USERNAME/ADMIN_PASSWORD).
Un login valido emite un JWT con role=admin que protege el sync y el panel.
"""

from __future__ import annotations

from loguru import logger

from leaderboard.application.dto.auth_dto import AuthTokenResponseDTO
from leaderboard.core.config import settings
from leaderboard.core.security import ADMIN_ROLE, security_service
from leaderboard.infrastructure.security.single_user_auth_service import SingleUserAuthService
from leaderboard.shared.exceptions.auth import (
    AuthNotConfiguredException,
    InvalidCredentialsException,
)


class AuthUseCases:
    def __init__(self, auth_service: SingleUserAuthService) -> None:
        self._auth_service = auth_service

    def is_configured(self) -> bool:
        return self._auth_service.is_configured()

    def verify_login(self, username: str, password: str) -> bool:
        return self._auth_service.verify(username=username, password=password)

    def login(self, username: str, password: str) -> AuthTokenResponseDTO:
        if not self.is_configured():
            raise AuthNotConfiguredException()

        if not self.verify_login(username, password):
            logger.warning(f"Login de administrador rechazado para '{username}'")
            raise InvalidCredentialsException()

        token = security_service.create_access_token({"sub": "admin", "role": ADMIN_ROLE})
        return AuthTokenResponseDTO(
            access_token=token,
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )
