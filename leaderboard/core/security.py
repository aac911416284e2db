"""
Utilidades de seguridad: emision y validacion de tokens JWT del administrador.
"""
from datetime import timedelta
from typing import Optional, Dict, Any
from jose import ExpiredSignatureError, JWTError, jwt

from leaderboard.core.config import settings
from leaderboard.shared.exceptions.auth import InvalidCredentialsException, TokenExpiredException
from leaderboard.shared.utils.datetime_utils import utc_now


ADMIN_ROLE = "admin"


class SecurityService:
    """Servicio para operaciones de seguridad."""

    @staticmethod
    def create_access_token(
        data: Dict[str, Any],
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Crea un token JWT de acceso.

        Args:
            data: Claims a incluir en el token
            expires_delta: Tiempo de expiracion personalizado

        Returns:
            str: Token JWT codificado
        """
        to_encode = data.copy()
        expire = utc_now() + (
            expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        )
        to_encode.update({"exp": expire})

        return jwt.encode(
            to_encode,
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM
        )

    @staticmethod
    def decode_access_token(token: str) -> Dict[str, Any]:
        """
        Decodifica y valida un token JWT.

        Raises:
            InvalidCredentialsException: Si el token es invalido
            TokenExpiredException: Si el token ha expirado
        """
        try:
            return jwt.decode(
                token,
                settings.SECRET_KEY,
                algorithms=[settings.ALGORITHM]
            )
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError:
            raise InvalidCredentialsException()


# Instancia global del servicio de seguridad
security_service = SecurityService()
