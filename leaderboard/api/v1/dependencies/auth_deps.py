"""
Dependencias de autorizacion (token bearer del administrador).
"""
from typing import Any, Dict, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from leaderboard.core.security import ADMIN_ROLE, security_service
from leaderboard.shared.exceptions.auth import UnauthorizedException


# auto_error=False: la ausencia de token se responde con el formato de AppException
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """
    Valida el token del administrador.

    Raises:
        UnauthorizedException: sin token o con un rol distinto de admin
        InvalidCredentialsException: token invalido
        TokenExpiredException: token expirado
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Se requiere token de administrador")

    payload = security_service.decode_access_token(credentials.credentials)
    if payload.get("role") != ADMIN_ROLE:
        raise UnauthorizedException("El token no tiene permisos de administrador")
    return payload
