"""
Cliente minimo de la API de Artificial Analysis (sin SDKs externos).

Cubre:
- requests con API key en el header x-api-key
- timeout por request
- rate-limit/backoff (429, 5xx)
"""

from __future__ import annotations

import time
from typing import Any, Optional

import requests
from loguru import logger


DEFAULT_BASE_URL = "https://artificialanalysis.ai/api/v2"
MODELS_PATH = "/data/llms/models"


class ArtificialAnalysisApiError(RuntimeError):
    """Error de integracion con Artificial Analysis."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ArtificialAnalysisClient:
    """
    Cliente HTTP de Artificial Analysis.

    No interpreta los registros: solo valida que el body tenga la forma
    {"data": [...]}. El saneamiento campo a campo lo hace ModelNormalizer.
    """

    def __init__(
        self,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: int = 30,
        max_retries: int = 2,
        min_backoff_s: float = 1.0,
        max_backoff_s: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s
        self._max_retries = max_retries
        self._min_backoff_s = min_backoff_s
        self._max_backoff_s = max_backoff_s
        self._session = session or requests.Session()

    def fetch_models(self) -> list[Any]:
        """
        Descarga el catalogo completo de modelos.

        Returns:
            Lista cruda de registros (los elementos pueden no ser dicts)

        Raises:
            ArtificialAnalysisApiError: error HTTP, de red o body inesperado
        """
        payload = self._request_json("GET", f"{self._base_url}{MODELS_PATH}")

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise ArtificialAnalysisApiError(
                "Respuesta inesperada de Artificial Analysis: falta la lista 'data'"
            )
        return data

    def _request_json(self, method: str, url: str) -> Any:
        """
        Request HTTP con backoff para 429/5xx.

        - 429: respeta Retry-After si existe, si no exponencial.
        - 5xx: exponencial.
        - 4xx (no 429): error inmediato (API key invalida, etc).
        """
        headers = {
            "x-api-key": self._api_key,
            "Accept": "application/json",
        }

        for attempt in range(self._max_retries + 1):
            try:
                resp = self._session.request(
                    method=method,
                    url=url,
                    headers=headers,
                    timeout=self._timeout_s,
                )
            except requests.RequestException as e:
                raise ArtificialAnalysisApiError(
                    f"Error de red contra Artificial Analysis: {e}"
                ) from e

            if 200 <= resp.status_code < 300:
                try:
                    return resp.json()
                except ValueError as e:
                    raise ArtificialAnalysisApiError(
                        "Artificial Analysis devolvio un body que no es JSON",
                        status_code=resp.status_code,
                    ) from e

            # Errores recuperables
            if resp.status_code == 429 or 500 <= resp.status_code < 600:
                if attempt >= self._max_retries:
                    raise ArtificialAnalysisApiError(
                        f"Artificial Analysis error {resp.status_code} "
                        f"tras {attempt} reintentos: {resp.text}",
                        status_code=resp.status_code,
                    )

                sleep_s = self._backoff_seconds(attempt, resp.headers.get("Retry-After"))
                logger.warning(
                    f"Artificial Analysis respondio {resp.status_code}, "
                    f"reintento {attempt + 1}/{self._max_retries} en {sleep_s:.1f}s"
                )
                time.sleep(sleep_s)
                continue

            # Errores no recuperables
            raise ArtificialAnalysisApiError(
                f"Artificial Analysis request fallo {resp.status_code}: {resp.text}",
                status_code=resp.status_code,
            )

        # Inalcanzable: el loop siempre retorna o lanza
        raise ArtificialAnalysisApiError("Reintentos agotados")

    def _backoff_seconds(self, attempt: int, retry_after: Optional[str]) -> float:
        if retry_after:
            try:
                return min(self._max_backoff_s, float(retry_after))
            except ValueError:
                return self._min_backoff_s
        return min(self._max_backoff_s, self._min_backoff_s * (2**attempt))
