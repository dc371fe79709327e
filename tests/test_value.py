"""
Tests for value estimation, Kelly sizing and recommendations
Run with: pytest tests/test_value.py -v
"""

import pytest

from core.models import BestOdds, Recommendation
from core.pricing import find_best_odds
from core.value import (
    calculate_confidence,
    calculate_value_analysis,
    consensus_samples,
    generate_recommendation,
    kelly_fraction,
)
from tests.builders import make_table


class TestConsensusSamples:

    def test_only_the_named_outcome_is_sampled(self):
        table = make_table({
            "book_a": {"Home": 2.00, "Away": 1.90},
            "book_b": {"Home": 2.50, "Away": 1.60},
            "book_c": {"Away": 1.80},
        })

        assert consensus_samples(table, "Home") == pytest.approx([0.5, 0.4])

    def test_malformed_prices_are_not_sampled(self):
        table = make_table({"book_a": {"Home": 2.0}, "book_b": {"Home": 0.0}})

        assert consensus_samples(table, "Home") == [0.5]


class TestCalculateValueAnalysis:

    def test_two_book_market(self):
        table = make_table({
            "book_a": {"Home": 2.00, "Away": 1.90},
            "book_b": {"Home": 2.20, "Away": 1.75},
        })
        best = find_best_odds(table)

        va = calculate_value_analysis(table, best, vig_adjustment=0.95)

        avg = (0.5 + 1 / 2.2) / 2
        assert va.expected_value == pytest.approx(2.2 * avg * 0.95 - 1)
        assert va.expected_value == pytest.approx(-0.0025)
        assert va.kelly == 0.0
        assert va.confidence == pytest.approx(1 - 2 * (0.5 - 1 / 2.2) / 2)
        assert va.recommendation == Recommendation.HOLD

    def test_outlier_price_is_strong_buy(self):
        table = make_table({
            "book_a": {"Home": 2.00, "Away": 1.80},
            "book_b": {"Home": 2.00, "Away": 1.80},
            "book_c": {"Home": 2.60, "Away": 1.50},
        })
        best = find_best_odds(table)

        va = calculate_value_analysis(table, best, vig_adjustment=0.95)

        assert best.bookmaker == "book_c"
        assert va.expected_value == pytest.approx(0.14)
        assert va.kelly == pytest.approx(0.0875)
        assert 0.85 < va.confidence < 0.95
        assert va.recommendation == Recommendation.STRONG_BUY

    def test_vig_adjustment_defaults_to_settings(self, monkeypatch):
        from config.settings import settings
        monkeypatch.setattr(settings, "VIG_ADJUSTMENT", 1.0)
        table = make_table({
            "book_a": {"Home": 2.00, "Away": 1.80},
            "book_b": {"Home": 2.00, "Away": 1.80},
            "book_c": {"Home": 2.60, "Away": 1.50},
        })

        va = calculate_value_analysis(table, find_best_odds(table))

        assert va.expected_value == pytest.approx(0.2)

    def test_no_samples_falls_back_to_best_price(self):
        best = BestOdds(outcome="Draw", bookmaker="book_a", price=2.0, implied_probability=0.5)

        va = calculate_value_analysis({}, best, vig_adjustment=1.0)

        assert va.expected_value == pytest.approx(0.0)
        assert va.confidence == 0.0
        assert va.kelly == 0.0
        assert va.recommendation == Recommendation.HOLD

    def test_single_bookmaker_has_zero_confidence(self):
        table = make_table({"book_a": {"Home": 2.5, "Away": 1.5}})

        va = calculate_value_analysis(table, find_best_odds(table))

        assert va.confidence == 0.0


class TestKellyFraction:

    def test_positive_edge(self):
        # b = 1.0, p = 0.6 -> (0.6 - 0.4) / 1.0
        assert kelly_fraction(2.0, 0.6) == pytest.approx(0.2)

    def test_negative_edge_is_zero(self):
        assert kelly_fraction(2.0, 0.4) == 0.0

    def test_even_price_is_zero(self):
        assert kelly_fraction(1.0, 0.9) == 0.0

    @pytest.mark.parametrize("price", [1.01, 1.5, 2.0, 3.75, 12.0, 101.0])
    @pytest.mark.parametrize("probability", [0.001, 0.1, 0.45, 0.8, 0.999])
    def test_never_negative(self, price, probability):
        assert kelly_fraction(price, probability) >= 0.0


class TestCalculateConfidence:

    def test_fewer_than_two_samples(self):
        assert calculate_confidence([]) == 0.0
        assert calculate_confidence([0.5]) == 0.0

    def test_identical_samples_are_fully_confident(self):
        assert calculate_confidence([0.4, 0.4, 0.4]) == 1.0

    def test_uses_population_standard_deviation(self):
        # pstdev([0.4, 0.6]) == 0.1
        assert calculate_confidence([0.4, 0.6]) == pytest.approx(0.8)

    @pytest.mark.parametrize("samples", [
        [0.01, 0.99],
        [0.0, 1.0],
        [0.2, 0.25, 0.3, 0.9],
        [0.5, 0.5000001],
    ])
    def test_stays_within_unit_interval(self, samples):
        assert 0.0 <= calculate_confidence(samples) <= 1.0


class TestGenerateRecommendation:

    @pytest.mark.parametrize("ev, kelly, confidence, expected", [
        (0.12, 0.06, 0.75, Recommendation.STRONG_BUY),
        (0.07, 0.03, 0.60, Recommendation.BUY),
        (0.12, 0.06, 0.65, Recommendation.BUY),
        (0.07, 0.00, 0.90, Recommendation.WEAK_BUY),
        (0.01, 0.00, 0.31, Recommendation.WEAK_BUY),
        (0.20, 0.10, 0.30, Recommendation.HOLD),
        (0.00, 0.00, 0.90, Recommendation.HOLD),
        (-0.05, 0.00, 0.90, Recommendation.HOLD),
        (-0.10, 0.00, 0.20, Recommendation.AVOID),
    ])
    def test_decision_table(self, ev, kelly, confidence, expected):
        assert generate_recommendation(ev, kelly, confidence) == expected

    def test_values_match_display_labels(self):
        assert [r.value for r in Recommendation] == [
            "STRONG BUY", "BUY", "WEAK BUY", "AVOID", "HOLD",
        ]
