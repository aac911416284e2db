"""
Normalizador de registros del proveedor de benchmarks (Artificial Analysis).

Transforma cada registro externo (estructura anidada, campos opcionales,
tipos inconsistentes) en un NormalizedModel plano y validado.

Reglas:
- name/company/source_id/overall_intelligence son obligatorios
- cada metrica de benchmark es opcional: None, ausente o no numerica => se
  omite del mapa (nunca se convierte a 0)
- el redondeo y los rangos validos salen de METRIC_DEFINITIONS
- los alias de compañia salen de COMPANY_ALIASES
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from leaderboard.domain.entities.ai_model import NormalizedModel, SkippedRecord
from leaderboard.shared.constants.company_constants import canonical_company_name
from leaderboard.shared.constants.metric_constants import (
    COST_EFFICIENCY_KEY,
    METRIC_DEFINITIONS,
    OVERALL_INTELLIGENCE_RANGE,
    OVERALL_INTELLIGENCE_SOURCE,
    PRICE_KEY,
    PROVIDER_METRICS,
    SCORE_DECIMALS,
    round_half_up,
)
from leaderboard.shared.exceptions.sync import RecordValidationError


MAX_TEXT_LENGTH = 100

MISSING_FIELDS_REASON = "Missing required fields"
INVALID_FORMAT_REASON = "Invalid record format"


@dataclass
class NormalizationOutcome:
    """Resultado de normalizar un lote completo."""

    valid: List[NormalizedModel] = field(default_factory=list)
    skipped: List[SkippedRecord] = field(default_factory=list)


def parse_finite_number(value: Any) -> Optional[float]:
    """
    Parsea un valor a float finito.

    Acepta int, float y strings numericos. Rechaza bool, None, NaN e infinito.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        clean = value.strip()
        if not clean:
            return None
        try:
            number = float(clean)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def sanitize_text(value: Any, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Trim + corte de longitud. Valores no string se tratan como vacios."""
    if not isinstance(value, str):
        return ""
    return value.strip()[:max_length].strip()


class ModelNormalizer:
    """
    Normalizador de registros del proveedor.

    Uso:
        normalizer = ModelNormalizer()
        outcome = normalizer.normalize_batch(payload["data"])
    """

    def normalize_batch(self, records: List[Any]) -> NormalizationOutcome:
        """
        Normaliza un lote. Un registro invalido no interrumpe el resto.
        """
        outcome = NormalizationOutcome()

        for raw in records:
            try:
                outcome.valid.append(self.normalize_record(raw))
            except RecordValidationError as e:
                logger.warning(f"Registro omitido ({e.record_id}): {e.reason}")
                outcome.skipped.append(
                    SkippedRecord(id=e.record_id, name=e.name, reason=e.reason)
                )

        logger.info(
            f"Lote normalizado: {len(outcome.valid)} validos, "
            f"{len(outcome.skipped)} omitidos"
        )
        return outcome

    def normalize_record(self, raw: Any) -> NormalizedModel:
        """
        Normaliza un registro individual.

        Raises:
            RecordValidationError: si falta un campo obligatorio o es invalido
        """
        if not isinstance(raw, dict):
            raise RecordValidationError(None, None, INVALID_FORMAT_REASON)

        raw_id = raw.get("id")
        source_id = raw_id.strip() if isinstance(raw_id, str) else ""
        name = sanitize_text(raw.get("name"))
        company = sanitize_text(self._extract_nested(raw, "model_creator", "name"))
        intelligence = parse_finite_number(
            self._extract_nested(raw, *OVERALL_INTELLIGENCE_SOURCE)
        )

        missing = [
            field_name
            for field_name, present in (
                ("name", bool(name)),
                ("company", bool(company)),
                ("overall_intelligence", intelligence is not None),
                ("source_id", bool(source_id)),
            )
            if not present
        ]
        record_id = source_id or (str(raw_id) if raw_id is not None else None)
        if missing:
            raise RecordValidationError(
                record_id, name or None, f"{MISSING_FIELDS_REASON}: {', '.join(missing)}"
            )

        low, high = OVERALL_INTELLIGENCE_RANGE
        if not low <= intelligence <= high:
            raise RecordValidationError(
                record_id, name, f"overall_intelligence out of range: {intelligence}"
            )

        return NormalizedModel(
            source_id=source_id,
            name=name,
            company=canonical_company_name(company),
            overall_intelligence=round_half_up(intelligence, SCORE_DECIMALS),
            benchmark_scores=self.extract_benchmark_scores(raw),
        )

    def extract_benchmark_scores(self, raw: Dict[str, Any]) -> Dict[str, float]:
        """
        Mapea las metricas del proveedor segun METRIC_DEFINITIONS.
        Solo se incluyen metricas con valor numerico dentro de rango.
        """
        scores: Dict[str, float] = {}
        raw_price: Optional[float] = None

        for metric in PROVIDER_METRICS:
            value = parse_finite_number(self._extract_nested(raw, *metric.source_path))
            if value is None:
                continue
            if not metric.in_range(value):
                logger.debug(
                    f"{raw.get('id')}: {metric.key}={value} fuera de rango "
                    f"{metric.valid_range}, se omite"
                )
                continue
            if metric.key == PRICE_KEY:
                raw_price = value
            scores[metric.key] = round_half_up(value, metric.decimals)

        cost_efficiency = self.compute_cost_efficiency(raw_price)
        if cost_efficiency is not None:
            scores[COST_EFFICIENCY_KEY] = cost_efficiency

        return scores

    @staticmethod
    def compute_cost_efficiency(price: Optional[float]) -> Optional[float]:
        """Inverso del precio; solo definido para precio > 0."""
        if price is None or price <= 0:
            return None
        return round_half_up(1 / price, METRIC_DEFINITIONS[COST_EFFICIENCY_KEY].decimals)

    def _extract_nested(self, data: Dict, *keys: str, default: Any = None) -> Any:
        """
        Extrae valor de estructura anidada de forma segura.

        Ejemplo: _extract_nested(raw, "pricing", "price_1m_blended_3_to_1")
        """
        current: Any = data
        for key in keys:
            if not isinstance(current, dict):
                return default
            current = current.get(key, default)
            if current is None:
                return default
        return current
