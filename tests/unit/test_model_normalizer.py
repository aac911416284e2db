"""
Tests unitarios para ModelNormalizer.

Verifica el saneamiento de registros de Artificial Analysis: campos
obligatorios, metricas opcionales (ausencia != 0), redondeo por metrica,
cost_efficiency derivado y alias de compañias.
"""
import math

import pytest

from leaderboard.application.services.model_normalizer import (
    ModelNormalizer,
    parse_finite_number,
    sanitize_text,
)
from leaderboard.shared.constants.metric_constants import round_half_up
from leaderboard.shared.exceptions.sync import RecordValidationError


class TestParseFiniteNumber:

    @pytest.mark.parametrize(
        "value, expected",
        [(42, 42.0), (3.5, 3.5), (" 12.5 ", 12.5), ("0", 0.0)],
    )
    def test_accepts_numbers_and_numeric_strings(self, value, expected):
        assert parse_finite_number(value) == expected

    @pytest.mark.parametrize(
        "value",
        [None, True, False, "not-a-number", "", float("nan"), float("inf"), [], {}],
    )
    def test_rejects_non_numeric(self, value):
        assert parse_finite_number(value) is None


@pytest.mark.parametrize(
    "value, decimals, expected",
    [(110.25, 1, 110.3), (0.25, 1, 0.3), (0.0625, 3, 0.063), (2.675, 2, 2.67), (70.0, 1, 70.0)],
)
def test_round_half_up(value, decimals, expected):
    # 2.675 es 2.67499... en binario
    assert round_half_up(value, decimals) == expected


def test_sanitize_text_trims_and_caps_length():
    assert sanitize_text("  Claude  ") == "Claude"
    assert len(sanitize_text("x" * 300)) == 100
    assert sanitize_text(123) == ""
    assert sanitize_text(None) == ""


class TestModelNormalizer:

    @pytest.fixture
    def normalizer(self):
        return ModelNormalizer()

    def test_normalizes_complete_record(self, normalizer, provider_record):
        model = normalizer.normalize_record(provider_record())

        assert model.source_id == "gpt-4o"
        assert model.name == "GPT-4o"
        assert model.company == "OpenAI"
        assert model.overall_intelligence == 70.2
        assert model.benchmark_scores == {
            "speed": 110.5,
            "latency": 0.4,
            "price": 2.5,
            "cost_efficiency": 0.4,
            "coding": 55.3,
            "math": 60.0,
            "mmlu_pro": 0.748,
            "gpqa": 0.543,
        }

    def test_null_metric_is_absent_not_zero(self, normalizer, provider_record):
        model = normalizer.normalize_record(
            provider_record(median_output_tokens_per_second=None)
        )
        assert "speed" not in model.benchmark_scores

    def test_unparsable_metric_is_absent(self, normalizer, provider_record):
        model = normalizer.normalize_record(
            provider_record(median_time_to_first_token_seconds="n/a")
        )
        assert "latency" not in model.benchmark_scores

    def test_out_of_range_metric_is_dropped(self, normalizer, provider_record):
        record = provider_record()
        record["evaluations"]["mmlu_pro"] = 1.7
        record["median_output_tokens_per_second"] = -5
        scores = normalizer.normalize_record(record).benchmark_scores
        assert "mmlu_pro" not in scores
        assert "speed" not in scores

    @pytest.mark.parametrize("price", [0, None, -1])
    def test_cost_efficiency_absent_without_positive_price(self, normalizer, provider_record, price):
        model = normalizer.normalize_record(
            provider_record(pricing={"price_1m_blended_3_to_1": price})
        )
        assert "cost_efficiency" not in model.benchmark_scores

    def test_cost_efficiency_uses_unrounded_price(self, normalizer, provider_record):
        model = normalizer.normalize_record(
            provider_record(pricing={"price_1m_blended_3_to_1": 0.0004})
        )
        assert model.benchmark_scores["price"] == 0.0
        assert model.benchmark_scores["cost_efficiency"] == 2500.0

    def test_compute_cost_efficiency(self):
        assert ModelNormalizer.compute_cost_efficiency(2.5) == 0.4
        assert ModelNormalizer.compute_cost_efficiency(3) == 0.333
        assert ModelNormalizer.compute_cost_efficiency(0) is None
        assert ModelNormalizer.compute_cost_efficiency(None) is None

    @pytest.mark.parametrize(
        "raw_company, expected",
        [("Google DeepMind", "Google"), ("meta ai", "Meta"), ("Mistral AI", "Mistral"), ("Acme Labs", "Acme Labs")],
    )
    def test_company_aliases(self, normalizer, provider_record, raw_company, expected):
        assert normalizer.normalize_record(provider_record(company=raw_company)).company == expected

    def test_numeric_string_intelligence_is_accepted(self, normalizer, provider_record):
        model = normalizer.normalize_record(provider_record(intelligence="65.46"))
        assert model.overall_intelligence == 65.5

    def test_invalid_intelligence_is_missing_field(self, normalizer, provider_record):
        with pytest.raises(RecordValidationError) as exc_info:
            normalizer.normalize_record(provider_record(intelligence="not-a-number"))
        assert "required fields" in exc_info.value.reason
        assert "overall_intelligence" in exc_info.value.reason
        assert exc_info.value.record_id == "gpt-4o"

    def test_lists_every_missing_field(self, normalizer):
        with pytest.raises(RecordValidationError) as exc_info:
            normalizer.normalize_record({"id": "x-1", "name": "  "})
        assert exc_info.value.reason == (
            "Missing required fields: name, company, overall_intelligence"
        )

    def test_blank_id_is_missing_source_id(self, normalizer, provider_record):
        with pytest.raises(RecordValidationError) as exc_info:
            normalizer.normalize_record(provider_record(source_id="   "))
        assert "source_id" in exc_info.value.reason

    def test_intelligence_out_of_range(self, normalizer, provider_record):
        with pytest.raises(RecordValidationError) as exc_info:
            normalizer.normalize_record(provider_record(intelligence=150))
        assert exc_info.value.reason == "overall_intelligence out of range: 150.0"

    def test_batch_keeps_going_after_invalid_records(self, normalizer, provider_record):
        outcome = normalizer.normalize_batch([
            provider_record(source_id="a"),
            "not-an-object",
            provider_record(source_id="b", company=None),
            provider_record(source_id="c"),
        ])

        assert [m.source_id for m in outcome.valid] == ["a", "c"]
        assert [(s.id, s.reason) for s in outcome.skipped] == [
            (None, "Invalid record format"),
            ("b", "Missing required fields: company"),
        ]

    def test_scores_are_finite(self, normalizer, provider_record):
        model = normalizer.normalize_record(provider_record())
        assert all(math.isfinite(v) for v in model.benchmark_scores.values())

    def test_exact_halves_round_up(self, normalizer, provider_record):
        model = normalizer.normalize_record(
            provider_record(
                intelligence=64.25,
                median_output_tokens_per_second=110.25,
                median_time_to_first_token_seconds=0.25,
                pricing={"price_1m_blended_3_to_1": 0.0625},
            )
        )

        scores = model.benchmark_scores
        assert model.overall_intelligence == 64.3
        assert scores["speed"] == 110.3
        assert scores["latency"] == 0.3
        assert scores["price"] == 0.063
        assert scores["cost_efficiency"] == 16.0
