"""
Market indexer: which bookmakers price a given market for one event.
"""
from typing import Optional
from core.models import Event, Market, MarketTable, Bookmaker
import logging

logger = logging.getLogger(__name__)


def find_market(bookmaker: Bookmaker, market_key: str) -> Optional[Market]:
    """Return the bookmaker's market with the given key, if it offers one."""
    return next((m for m in bookmaker.markets if m.key == market_key), None)


def build_market_table(event: Event, market_key: str) -> MarketTable:
    """
    Build the bookmaker -> market table for one market type of an event.

    Snapshots are scanned in the order they appear in the event, and
    bookmakers in the order the snapshot lists them. A bookmaker that shows
    up in more than one snapshot keeps its first market.

    Args:
        event: Event with its per-bookmaker odds snapshots
        market_key: "h2h", "spreads" or "totals"

    Returns:
        Ordered mapping of bookmaker key to market. Empty when no bookmaker
        offers the market.
    """
    table: MarketTable = {}

    for snapshot in event.odds.values():
        for bookmaker in snapshot.bookmakers:
            if bookmaker.key in table:
                continue
            market = find_market(bookmaker, market_key)
            if market is not None:
                table[bookmaker.key] = market

    logger.debug(f"Indexed {len(table)} bookmakers for {market_key} in event {event.id}")
    return table
