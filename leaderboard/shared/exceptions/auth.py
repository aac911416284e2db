"""
Errores del login y del token del administrador.

Todos responden 401 salvo AuthNotConfiguredException (503): sin credenciales
configuradas no existe forma de autenticarse y no es culpa del cliente.
"""
from leaderboard.shared.exceptions.base import AppException


class AuthException(AppException):
    """Base de los errores 401."""

    def __init__(self, message: str, error_code: str = "AUTH_ERROR", details=None):
        super().__init__(message=message, status_code=401, error_code=error_code, details=details)


class InvalidCredentialsException(AuthException):
    """Usuario/contraseña incorrectos o token con firma invalida."""

    def __init__(self):
        super().__init__("Credenciales inválidas", error_code="INVALID_CREDENTIALS")


class TokenExpiredException(AuthException):
    def __init__(self):
        super().__init__("El token de administrador expiró", error_code="TOKEN_EXPIRED")


class UnauthorizedException(AuthException):
    """Request sin token de administrador o con otro rol."""

    def __init__(self, message: str = "No autorizado"):
        super().__init__(message, error_code="UNAUTHORIZED")


class AuthNotConfiguredException(AppException):
    def __init__(self) -> None:
        super().__init__(
            message="Login deshabilitado: ADMIN_USERNAME/ADMIN_PASSWORD no configurados",
            status_code=503,
            error_code="AUTH_NOT_CONFIGURED",
        )
