"""
Catalogo declarativo de metricas del leaderboard.

Cada metrica define en un solo lugar:
- de donde se lee en el registro del proveedor (source_path)
- cuantos decimales se guardan
- el rango valido (fuera de rango => se omite)
- metadatos de presentacion (nombre, unidad, categoria)

Agregar un benchmark nuevo es agregar una entrada a METRIC_DEFINITIONS.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Dict, List, Optional, Tuple


class MetricCategory(str, Enum):
    """Categorias de metricas."""
    CAPABILITY = "capability"
    PERFORMANCE = "performance"
    EFFICIENCY = "efficiency"


# Precision por tipo de valor
SCORE_DECIMALS = 1      # indices 0-100, tokens/s, segundos
RATIO_DECIMALS = 3      # porcentajes expresados como 0-1
CURRENCY_DECIMALS = 3   # USD por 1M tokens

OVERALL_INTELLIGENCE_SOURCE = ("evaluations", "artificial_analysis_intelligence_index")
OVERALL_INTELLIGENCE_RANGE = (0.0, 100.0)

COST_EFFICIENCY_KEY = "cost_efficiency"
PRICE_KEY = "price"


def round_half_up(value: float, decimals: int) -> float:
    """
    Redondeo con mitades hacia arriba: 110.25 -> 110.3 (round() daria 110.2).
    Opera sobre el valor binario exacto del float: 1.005 a 2 decimales da 1.0.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class MetricDefinition:
    """
    Definicion de una metrica de benchmark_scores.

    - source_path: ruta dentro del registro del proveedor; None si la metrica
      no viene del proveedor (derivada o carga manual)
    - valid_range: (min, max); None en un extremo = sin limite
    """

    key: str
    name: str
    short_name: str
    description: str
    category: MetricCategory
    decimals: int
    higher_is_better: bool = True
    unit: Optional[str] = None
    source_path: Optional[Tuple[str, ...]] = None
    valid_range: Tuple[Optional[float], Optional[float]] = (0.0, None)

    def in_range(self, value: float) -> bool:
        low, high = self.valid_range
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True


_DEFINITIONS: List[MetricDefinition] = [
    MetricDefinition(
        key="speed",
        name="Output Speed",
        short_name="Speed",
        description="Tokens generated per second during inference",
        category=MetricCategory.PERFORMANCE,
        decimals=SCORE_DECIMALS,
        unit="tokens/sec",
        source_path=("median_output_tokens_per_second",),
    ),
    MetricDefinition(
        key="latency",
        name="Response Latency",
        short_name="Latency",
        description="Time to first token generation",
        category=MetricCategory.PERFORMANCE,
        decimals=SCORE_DECIMALS,
        higher_is_better=False,
        unit="seconds",
        source_path=("median_time_to_first_token_seconds",),
    ),
    MetricDefinition(
        key="time_to_first_answer_token",
        name="Time to First Answer Token",
        short_name="TTFAT",
        description="Time to generate the first answer token (for reasoning models)",
        category=MetricCategory.PERFORMANCE,
        decimals=SCORE_DECIMALS,
        higher_is_better=False,
        unit="seconds",
        source_path=("median_time_to_first_answer_token",),
    ),
    MetricDefinition(
        key=PRICE_KEY,
        name="Price per 1M Tokens",
        short_name="Price",
        description="Cost per million tokens (blended input/output)",
        category=MetricCategory.EFFICIENCY,
        decimals=CURRENCY_DECIMALS,
        higher_is_better=False,
        unit="USD",
        source_path=("pricing", "price_1m_blended_3_to_1"),
    ),
    MetricDefinition(
        key=COST_EFFICIENCY_KEY,
        name="Cost Efficiency",
        short_name="Efficiency",
        description="Value per dollar spent (inverse of price)",
        category=MetricCategory.EFFICIENCY,
        decimals=RATIO_DECIMALS,
    ),
    MetricDefinition(
        key="coding",
        name="Coding Ability",
        short_name="Coding",
        description="Performance on programming and software development tasks",
        category=MetricCategory.CAPABILITY,
        decimals=SCORE_DECIMALS,
        source_path=("evaluations", "artificial_analysis_coding_index"),
        valid_range=(0.0, 100.0),
    ),
    MetricDefinition(
        key="math",
        name="Mathematical Reasoning",
        short_name="Math",
        description="Performance on mathematical problem-solving tasks",
        category=MetricCategory.CAPABILITY,
        decimals=SCORE_DECIMALS,
        source_path=("evaluations", "artificial_analysis_math_index"),
        valid_range=(0.0, 100.0),
    ),
    MetricDefinition(
        key="mmlu_pro",
        name="General Knowledge (MMLU Pro)",
        short_name="MMLU Pro",
        description="Massive Multitask Language Understanding - Professional level",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "mmlu_pro"),
        valid_range=(0.0, 1.0),
    ),
    MetricDefinition(
        key="gpqa",
        name="Graduate-Level Q&A",
        short_name="GPQA",
        description="Graduate-level Google-proof Q&A benchmark",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "gpqa"),
        valid_range=(0.0, 1.0),
    ),
    MetricDefinition(
        key="hle",
        name="Humanity's Last Exam",
        short_name="HLE",
        description="Frontier-level questions across many academic subjects",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "hle"),
        valid_range=(0.0, 1.0),
    ),
    MetricDefinition(
        key="livecodebench",
        name="Live Code Benchmark",
        short_name="LiveCode",
        description="Real-world coding challenges and problem-solving",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "livecodebench"),
        valid_range=(0.0, 1.0),
    ),
    MetricDefinition(
        key="scicode",
        name="Scientific Coding",
        short_name="SciCode",
        description="Scientific computing and research-oriented programming",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "scicode"),
        valid_range=(0.0, 1.0),
    ),
    MetricDefinition(
        key="math_500",
        name="Math 500",
        short_name="Math 500",
        description="Comprehensive mathematical problem-solving benchmark",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "math_500"),
        valid_range=(0.0, 1.0),
    ),
    MetricDefinition(
        key="aime",
        name="AIME Math Competition",
        short_name="AIME",
        description="American Invitational Mathematics Examination problems",
        category=MetricCategory.CAPABILITY,
        decimals=RATIO_DECIMALS,
        source_path=("evaluations", "aime"),
        valid_range=(0.0, 1.0),
    ),
    # Solo carga manual desde el panel de administracion
    MetricDefinition(
        key="reasoning",
        name="Reasoning",
        short_name="Reasoning",
        description="Manually curated reasoning score",
        category=MetricCategory.CAPABILITY,
        decimals=SCORE_DECIMALS,
        valid_range=(0.0, 100.0),
    ),
]

METRIC_DEFINITIONS: Dict[str, MetricDefinition] = {m.key: m for m in _DEFINITIONS}

# Metricas que se leen directamente del proveedor
PROVIDER_METRICS: List[MetricDefinition] = [m for m in _DEFINITIONS if m.source_path]

METRIC_CATEGORIES: Dict[MetricCategory, Dict[str, str]] = {
    MetricCategory.CAPABILITY: {
        "name": "Capability",
        "description": "Model intelligence and reasoning abilities",
    },
    MetricCategory.PERFORMANCE: {
        "name": "Performance",
        "description": "Speed and responsiveness metrics",
    },
    MetricCategory.EFFICIENCY: {
        "name": "Efficiency",
        "description": "Cost-effectiveness and resource utilization",
    },
}

