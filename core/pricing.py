"""
Best price selection across bookmakers.
"""
from __future__ import annotations

import math
from functools import reduce
from typing import Iterator, List, Optional, Tuple
from core.exceptions import NoPricedOutcome
from core.models import BestOdds, Market, MarketTable, Outcome

MIN_DECIMAL_PRICE = 1.0


def is_valid_price(price: float) -> bool:
    """Decimal odds must be finite and strictly above 1.0."""
    return math.isfinite(price) and price > MIN_DECIMAL_PRICE


def valid_outcomes(market: Market) -> List[Outcome]:
    """Outcomes of a market with a usable decimal price, in market order."""
    return [o for o in market.outcomes if is_valid_price(o.price)]


def iter_priced_outcomes(table: MarketTable) -> Iterator[Tuple[str, Outcome]]:
    """Yield (bookmaker, outcome) pairs in table order, skipping malformed prices."""
    for bookmaker, market in table.items():
        for outcome in valid_outcomes(market):
            yield bookmaker, outcome


def _keep_better(best: Optional[Tuple[str, Outcome]],
                 candidate: Tuple[str, Outcome]) -> Tuple[str, Outcome]:
    # Strict improvement only: equal prices keep the first bookmaker seen
    if best is None or candidate[1].price > best[1].price:
        return candidate
    return best


def find_best_odds(table: MarketTable, market_key: str = None) -> BestOdds:
    """
    Find the single highest price on offer across every bookmaker and outcome.

    Args:
        table: Bookmaker -> market table for one market type
        market_key: Market being analysed, used in the error message

    Returns:
        BestOdds for the winning (bookmaker, outcome) pair

    Raises:
        NoPricedOutcome: If no outcome in the table has a valid price
    """
    best = reduce(_keep_better, iter_priced_outcomes(table), None)
    if best is None:
        raise NoPricedOutcome(market_key)

    bookmaker, outcome = best
    return BestOdds(
        outcome=outcome.name,
        bookmaker=bookmaker,
        price=outcome.price,
        implied_probability=outcome.implied_probability,
    )
