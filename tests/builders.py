"""Builders for odds fixtures used across the tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from core.models import Bookmaker, Event, Market, MarketTable, OddsSnapshot, Outcome

START = datetime(2026, 11, 1, 19, 30, tzinfo=timezone.utc)
UPDATED = datetime(2026, 11, 1, 12, 0, tzinfo=timezone.utc)


def make_market(key: str, prices: Dict[str, float],
                points: Optional[Dict[str, float]] = None) -> Market:
    points = points or {}
    return Market(
        key=key,
        outcomes=[Outcome(name=name, price=price, point=points.get(name))
                  for name, price in prices.items()],
    )


def make_bookmaker(key: str, markets: Sequence[Market]) -> Bookmaker:
    return Bookmaker(key=key, title=key.title(), last_update=UPDATED, markets=list(markets))


def make_event(bookmakers: List[Bookmaker], event_id: str = "evt_1",
               home: str = "Boston Celtics", away: str = "Miami Heat") -> Event:
    odds = {
        bm.key: OddsSnapshot(
            id=event_id,
            sport_key="basketball_nba",
            sport_title="NBA",
            home_team=home,
            away_team=away,
            commence_time=START,
            bookmakers=[bm],
        )
        for bm in bookmakers
    }
    return Event(
        id=event_id,
        sport="basketball_nba",
        league="NBA",
        home_team=home,
        away_team=away,
        start_time=START,
        odds=odds,
    )


def make_table(books: Dict[str, Dict[str, float]], key: str = "h2h") -> MarketTable:
    """bookmaker -> {outcome: price} into a market table, in dict order."""
    return {bookmaker: make_market(key, prices) for bookmaker, prices in books.items()}


def provider_record(event_id: str = "evt_1", bookmakers: Optional[list] = None) -> dict:
    """One event as the odds provider returns it."""
    if bookmakers is None:
        bookmakers = [
            {
                "key": "draftkings",
                "title": "DraftKings",
                "last_update": "2026-11-01T12:00:00Z",
                "markets": [
                    {"key": "h2h", "outcomes": [
                        {"name": "Boston Celtics", "price": 1.65},
                        {"name": "Miami Heat", "price": 2.30},
                    ]},
                    {"key": "totals", "outcomes": [
                        {"name": "Over", "price": 1.91, "point": 218.5},
                        {"name": "Under", "price": 1.91, "point": 218.5},
                    ]},
                ],
            },
            {
                "key": "pinnacle",
                "title": "Pinnacle",
                "last_update": "2026-11-01T12:05:00Z",
                "markets": [
                    {"key": "h2h", "outcomes": [
                        {"name": "Boston Celtics", "price": 1.70},
                        {"name": "Miami Heat", "price": 2.25},
                    ]},
                ],
            },
        ]
    return {
        "id": event_id,
        "sport_key": "basketball_nba",
        "sport_title": "NBA",
        "commence_time": "2026-11-01T19:30:00Z",
        "home_team": "Boston Celtics",
        "away_team": "Miami Heat",
        "bookmakers": bookmakers,
    }
