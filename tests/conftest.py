"""Shared test fixtures for the odds analysis tests."""

from __future__ import annotations

import pytest

from tests.builders import make_bookmaker, make_event, make_market


@pytest.fixture
def two_book_event():
    """Two bookmakers pricing all three markets for one game."""
    return make_event([
        make_bookmaker("draftkings", [
            make_market("h2h", {"Boston Celtics": 2.00, "Miami Heat": 1.75}),
            make_market("spreads", {"Boston Celtics": 1.91, "Miami Heat": 1.91},
                        points={"Boston Celtics": -4.5, "Miami Heat": 4.5}),
            make_market("totals", {"Over": 1.87, "Under": 1.95},
                        points={"Over": 218.5, "Under": 218.5}),
        ]),
        make_bookmaker("fanduel", [
            make_market("totals", {"Over": 1.90, "Under": 1.90},
                        points={"Over": 218.5, "Under": 218.5}),
            make_market("h2h", {"Boston Celtics": 2.20, "Miami Heat": 1.70}),
            make_market("spreads", {"Boston Celtics": 1.95, "Miami Heat": 1.87},
                        points={"Boston Celtics": -4.5, "Miami Heat": 4.5}),
        ]),
    ])


@pytest.fixture
def arbitrage_event():
    """Complementary mispricing: each side is 2.10 at a different book."""
    return make_event([
        make_bookmaker("book_a", [make_market("h2h", {"A": 2.10, "B": 1.70})]),
        make_bookmaker("book_b", [make_market("h2h", {"A": 1.70, "B": 2.10})]),
    ])
