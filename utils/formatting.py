"""
Plain-text views of analysis results.
"""
from __future__ import annotations

from typing import List, Sequence, Tuple
from core.analyzer import MARKET_TYPES
from core.indexer import build_market_table
from core.models import AnalysisResult, Event, Recommendation

LINE = "=" * 60

# (event, result) pairs as produced by the scripts
EventResult = Tuple[Event, AnalysisResult]


def recommendation_label(recommendation) -> str:
    """Display label for a recommendation; unknown values are a defect."""
    try:
        return Recommendation(recommendation).value
    except ValueError:
        raise ValueError(f"Unrecognized recommendation: {recommendation!r}") from None


def _pct(value: float, digits: int = 2) -> str:
    return f"{value * 100:.{digits}f}%"


def _matchup(event: Event) -> str:
    return f"{event.home_team} vs {event.away_team}"


def select_arbitrage(pairs: Sequence[EventResult]) -> List[EventResult]:
    """Results holding a guaranteed, profitable arbitrage."""
    return [
        (event, result) for event, result in pairs
        if result.arbitrage_opportunity is not None
        and result.arbitrage_opportunity.guaranteed
        and result.arbitrage_opportunity.profit > 0
    ]


def select_best_bets(pairs: Sequence[EventResult], min_confidence: float) -> List[EventResult]:
    """BUY and STRONG BUY results at or above the confidence threshold."""
    wanted = {Recommendation.STRONG_BUY, Recommendation.BUY}
    return [
        (event, result) for event, result in pairs
        if result.value_analysis.confidence >= min_confidence
        and Recommendation(result.value_analysis.recommendation) in wanted
    ]


def format_analysis(event: Event, results: Sequence[AnalysisResult]) -> str:
    """Detailed market analysis for one event."""
    lines = [
        "Detailed Market Analysis",
        f"Event: {_matchup(event)}",
        f"Start Time: {event.start_time.isoformat()}",
        "",
    ]

    if not results:
        lines.append("No market data available for this event.")
        return "\n".join(lines)

    for result in results:
        best = result.best_odds
        va = result.value_analysis
        lines.append(f"{result.market.upper()} MARKET")
        lines.append(f"Best Bet: {best.outcome} @ {best.price:.2f} ({best.bookmaker})")
        lines.append(f"Recommendation: {recommendation_label(va.recommendation)}")
        lines.append(f"Expected Value: {_pct(va.expected_value)}")
        lines.append(f"Kelly Stake: {_pct(va.kelly)}")
        lines.append(f"Confidence: {_pct(va.confidence, 1)}")

        arb = result.arbitrage_opportunity
        if arb is not None and arb.guaranteed:
            lines.append(f"ARBITRAGE OPPORTUNITY: {arb.profit:.2f} profit guaranteed "
                         f"per {arb.total_stake:.2f} staked")
            for leg in arb.legs:
                lines.append(f"  Bet {leg.stake:.2f} on {leg.outcome} @ {leg.price:.2f} ({leg.bookmaker})")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def format_arbitrage(pairs: Sequence[EventResult], label: str = "") -> str:
    """Summary of every guaranteed arbitrage among the results."""
    found = select_arbitrage(pairs)
    if not found:
        suffix = f" for {label}" if label else ""
        return f"No arbitrage opportunities found{suffix}"

    lines = [f"Found {len(found)} arbitrage opportunities:"]
    for event, result in found:
        arb = result.arbitrage_opportunity
        lines.append(
            f"Event: {_matchup(event)}, Market: {result.market}, "
            f"Profit: {arb.profit:.2f} ({_pct(1.0 - arb.total_implied_probability)})"
        )
    return "\n".join(lines)


def format_best_bets(pairs: Sequence[EventResult], min_confidence: float,
                     limit: int = 10, label: str = "") -> str:
    """Top BUY/STRONG BUY recommendations above a confidence threshold."""
    picks = select_best_bets(pairs, min_confidence)
    suffix = f" in {label}" if label else ""
    if not picks:
        return (f"No high-confidence betting opportunities found{suffix} "
                f"with the specified criteria.")

    blocks = []
    for event, result in picks[:limit]:
        best = result.best_odds
        va = result.value_analysis
        blocks.append("\n".join([
            f"{_matchup(event)}",
            f"   Market: {result.market}",
            f"   Best: {best.outcome} @ {best.price:.2f} ({best.bookmaker})",
            f"   Recommendation: {recommendation_label(va.recommendation)}",
            f"   Expected Value: {_pct(va.expected_value)}",
            f"   Kelly: {_pct(va.kelly)}",
            f"   Confidence: {_pct(va.confidence, 1)}",
        ]))

    header = (f"Best betting opportunities{suffix} "
              f"(confidence >= {int(min_confidence * 100)}%):")
    return header + "\n\n" + "\n\n".join(blocks)


def format_odds_comparison(event: Event) -> str:
    """Each bookmaker's prices side by side, per market type."""
    lines = [f"Odds comparison: {_matchup(event)}", LINE]

    for market_key in MARKET_TYPES:
        table = build_market_table(event, market_key)
        if not table:
            continue
        lines.append(f"{market_key.upper()}:")
        for bookmaker, market in table.items():
            prices = []
            for outcome in market.outcomes:
                point = f" {outcome.point:+g}" if outcome.point is not None else ""
                prices.append(f"{outcome.name}{point} @ {outcome.price:.2f}")
            lines.append(f"  {bookmaker}: {', '.join(prices)}")

    if len(lines) == 2:
        lines.append("No odds available for this event.")
    return "\n".join(lines)
