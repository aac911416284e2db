"""
Servicio de autenticacion del unico administrador (credenciales por env).

Solo valida credenciales; la emision del token la hace AuthUseCases.
"""

from __future__ import annotations

import hmac


class SingleUserAuthService:
    """
    Verifica credenciales contra un unico usuario/contraseña esperados.

    Usa comparacion en tiempo constante (hmac.compare_digest).
    """

    def __init__(self, expected_username: str, expected_password: str) -> None:
        self._expected_username = expected_username or ""
        self._expected_password = expected_password or ""

    def is_configured(self) -> bool:
        return bool(self._expected_username and self._expected_password)

    def verify(self, username: str, password: str) -> bool:
        if not self.is_configured():
            return False

        # Se evaluan ambas comparaciones siempre
        username_ok = hmac.compare_digest(
            (username or "").encode("utf-8"), self._expected_username.encode("utf-8")
        )
        password_ok = hmac.compare_digest(
            (password or "").encode("utf-8"), self._expected_password.encode("utf-8")
        )
        return username_ok and password_ok
