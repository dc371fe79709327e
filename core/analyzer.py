"""
Per-event analysis: best price, arbitrage and value for each market type.
"""
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional
from core.arbitrage import find_arbitrage
from core.exceptions import AnalysisError
from core.indexer import build_market_table
from core.models import AnalysisResult, Event
from core.pricing import find_best_odds
from core.value import calculate_value_analysis
import logging

logger = logging.getLogger(__name__)

# Results follow this order, not the order bookmakers list their markets
MARKET_TYPES = ["h2h", "spreads", "totals"]


def analyze_market(event: Event, market_key: str,
                   total_stake: float = None,
                   vig_adjustment: float = None) -> Optional[AnalysisResult]:
    """
    Analyse one market type of an event.

    Returns:
        AnalysisResult, or None when no bookmaker offers the market

    Raises:
        NoPricedOutcome: If the market is offered but carries no valid price
    """
    table = build_market_table(event, market_key)
    if not table:
        logger.debug(f"No odds found for market {market_key} in event {event.id}")
        return None

    best_odds = find_best_odds(table, market_key)
    arbitrage = find_arbitrage(table, total_stake)
    value_analysis = calculate_value_analysis(table, best_odds, vig_adjustment)

    return AnalysisResult(
        event_id=event.id,
        market=market_key,
        best_odds=best_odds,
        arbitrage_opportunity=arbitrage,
        value_analysis=value_analysis,
        timestamp=datetime.now(timezone.utc),
    )


def analyze_event(event: Event, total_stake: float = None,
                  vig_adjustment: float = None) -> List[AnalysisResult]:
    """
    Analyse every market type of an event.

    A market nobody offers is left out. A market with broken prices is
    logged and left out without affecting the others.

    Args:
        event: Event to analyse
        total_stake: Stake used to size arbitrage opportunities
        vig_adjustment: Discount applied to consensus probabilities

    Returns:
        Results ordered as MARKET_TYPES, possibly empty
    """
    logger.info(f"Analyzing event: {event.home_team} vs {event.away_team}")
    results: List[AnalysisResult] = []

    for market_key in MARKET_TYPES:
        try:
            result = analyze_market(event, market_key, total_stake, vig_adjustment)
        except AnalysisError as e:
            logger.warning(f"Skipping {market_key} for event {event.id}: {e}")
            continue
        if result is not None:
            results.append(result)

    return results


def analyze_events(events: Iterable[Event], total_stake: float = None,
                   vig_adjustment: float = None) -> Dict[str, List[AnalysisResult]]:
    """
    Analyse several events, keyed by event id in input order.

    A repeated event id is logged and skipped; the first event with that id
    is the one analysed.
    """
    results: Dict[str, List[AnalysisResult]] = {}

    for event in events:
        if event.id in results:
            logger.warning(f"Duplicate event id {event.id}, keeping the first occurrence")
            continue
        results[event.id] = analyze_event(event, total_stake, vig_adjustment)

    return results
