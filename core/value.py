"""
Value estimation for the best available price.

The fair probability of the winning outcome is the consensus of every
bookmaker that prices it, discounted by a fixed vig adjustment. From it we
derive expected value, a Kelly stake fraction and a confidence score based on
how much the bookmakers disagree.
"""
from __future__ import annotations

import statistics
from typing import List
from core.models import BestOdds, MarketTable, Recommendation, ValueAnalysis
from core.pricing import valid_outcomes
from config.settings import settings


def consensus_samples(table: MarketTable, outcome_name: str) -> List[float]:
    """Implied probabilities of one outcome from every bookmaker pricing it."""
    return [
        outcome.implied_probability
        for market in table.values()
        for outcome in valid_outcomes(market)
        if outcome.name == outcome_name
    ]


def kelly_fraction(price: float, probability: float) -> float:
    """Kelly stake f = (bp - q) / b, never negative."""
    b = price - 1.0
    if b <= 0:
        return 0.0
    q = 1.0 - probability
    return max(0.0, (b * probability - q) / b)


def calculate_confidence(probabilities: List[float]) -> float:
    """
    Agreement between bookmakers: 1 - 2 * population std dev, within [0, 1].

    Fewer than two samples give no basis for agreement, so confidence is 0.
    """
    if len(probabilities) < 2:
        return 0.0
    spread = statistics.pstdev(probabilities)
    return min(1.0, max(0.0, 1.0 - spread * 2.0))


def generate_recommendation(expected_value: float, kelly: float, confidence: float) -> Recommendation:
    if expected_value > 0.10 and kelly > 0.05 and confidence > 0.70:
        return Recommendation.STRONG_BUY
    if expected_value > 0.05 and kelly > 0.02 and confidence > 0.50:
        return Recommendation.BUY
    if expected_value > 0.0 and confidence > 0.30:
        return Recommendation.WEAK_BUY
    if expected_value < -0.05:
        return Recommendation.AVOID
    return Recommendation.HOLD


def calculate_value_analysis(table: MarketTable, best_odds: BestOdds,
                             vig_adjustment: float = None) -> ValueAnalysis:
    """
    Value analysis for the best price in a market.

    Args:
        table: Bookmaker -> market table for one market type
        best_odds: Best price found in the same table
        vig_adjustment: Multiplier applied to the consensus probability
            (defaults to VIG_ADJUSTMENT)

    Returns:
        ValueAnalysis with expected value, Kelly fraction, confidence and
        recommendation
    """
    if vig_adjustment is None:
        vig_adjustment = settings.VIG_ADJUSTMENT

    samples = consensus_samples(table, best_odds.outcome)
    if samples:
        avg_probability = statistics.fmean(samples)
    else:
        avg_probability = best_odds.implied_probability

    true_probability = avg_probability * vig_adjustment
    expected_value = best_odds.price * true_probability - 1.0
    kelly = kelly_fraction(best_odds.price, true_probability)
    confidence = calculate_confidence(samples)

    return ValueAnalysis(
        expected_value=expected_value,
        kelly=kelly,
        confidence=confidence,
        recommendation=generate_recommendation(expected_value, kelly, confidence),
    )
