"""
Arbitrage detection: back every outcome at its best price and check whether
the combined implied probability leaves a guaranteed profit.
"""
from __future__ import annotations

import math
from functools import reduce
from typing import Dict, List, Optional, Tuple
from core.models import ArbitrageOpportunity, MarketTable, Outcome, StakeLeg
from core.pricing import iter_priced_outcomes
from config.settings import settings
import logging

logger = logging.getLogger(__name__)

# outcome name -> (bookmaker, price)
BestPrices = Dict[str, Tuple[str, float]]


def _merge_price(best: BestPrices, candidate: Tuple[str, Outcome]) -> BestPrices:
    bookmaker, outcome = candidate
    current = best.get(outcome.name)
    if current is None or outcome.price > current[1]:
        return {**best, outcome.name: (bookmaker, outcome.price)}
    return best


def best_prices_by_outcome(table: MarketTable) -> BestPrices:
    """
    Best (bookmaker, price) for each distinct outcome name.

    Ties keep the bookmaker seen first; outcome names keep the order in
    which they first appear in the table.
    """
    return reduce(_merge_price, iter_priced_outcomes(table), {})


def balance_to_total(amounts: List[float], total: float) -> List[float]:
    """
    Move floating point residue onto the last amount so that
    sum(amounts) == total exactly.
    """
    amounts = list(amounts)
    for _ in range(16):
        current = sum(amounts)
        if current == total:
            break
        adjusted = amounts[-1] + (total - current)
        # Residue below the last amount's precision: step one ulp instead
        if adjusted == amounts[-1]:
            adjusted = math.nextafter(adjusted, math.inf if current < total else -math.inf)
        amounts[-1] = adjusted
    return amounts


def allocate_stakes(best: BestPrices, total_implied: float, total_stake: float) -> List[StakeLeg]:
    """
    Split total_stake so that every outcome pays out total_stake / total_implied.

    The last leg takes whatever is left after the others so the stakes add up
    to total_stake.
    """
    items = list(best.items())
    amounts = balance_to_total(
        [(total_stake / price) / total_implied for _, (_, price) in items],
        total_stake,
    )
    return [
        StakeLeg(outcome=outcome, bookmaker=bookmaker, price=price, stake=stake)
        for (outcome, (bookmaker, price)), stake in zip(items, amounts)
    ]


def stakes_by_bookmaker(legs: List[StakeLeg], total_stake: float) -> Dict[str, float]:
    """Combined stake per bookmaker, in leg order, adding up to total_stake."""
    grouped: Dict[str, float] = {}
    for leg in legs:
        grouped[leg.bookmaker] = grouped.get(leg.bookmaker, 0.0) + leg.stake
    return dict(zip(grouped, balance_to_total(list(grouped.values()), total_stake)))


def find_arbitrage(table: MarketTable, total_stake: float = None) -> Optional[ArbitrageOpportunity]:
    """
    Calculate if an arbitrage opportunity exists for one market.

    Args:
        table: Bookmaker -> market table for one market type
        total_stake: Total amount to stake (defaults to ARBITRAGE_TOTAL_STAKE)

    Returns:
        None if fewer than two outcomes are priced or the best prices do not
        add up to a guaranteed profit, otherwise the opportunity with its
        stake split.
    """
    if total_stake is None:
        total_stake = settings.ARBITRAGE_TOTAL_STAKE
    if total_stake <= 0:
        raise ValueError(f"total_stake must be positive, got {total_stake}")

    best = best_prices_by_outcome(table)
    if len(best) < 2:
        return None

    total_implied = sum(1.0 / price for _, price in best.values())

    # Betting every outcome cannot beat the book
    if total_implied >= 1.0:
        return None

    legs = allocate_stakes(best, total_implied, total_stake)
    stakes = stakes_by_bookmaker(legs, total_stake)

    profit = total_stake * (1.0 - total_implied)
    logger.info(
        f"Arbitrage across {len(stakes)} bookmakers: "
        f"implied {total_implied:.4f}, profit {profit:.2f} per {total_stake:.2f}"
    )

    return ArbitrageOpportunity(
        guaranteed=True,
        profit=profit,
        stakes=stakes,
        legs=legs,
        total_stake=total_stake,
        total_implied_probability=total_implied,
    )
