"""
Team name normalization and event lookup.

Users look events up by id or by typing a team name ("celtics",
"Atletico Madrid"). Names are compared after stripping accents and
punctuation, with fuzzy matching for partial or reordered names.
"""
from __future__ import annotations

import re
from typing import List, Optional
from unidecode import unidecode
from rapidfuzz import fuzz
from core.models import Event


def normalize_team_name(name: str) -> str:
    """
    Normalize a team name for matching.

    1. Remove accents/diacritics
    2. Convert to lowercase
    3. Replace punctuation with spaces
    4. Collapse spacing

    Args:
        name: Raw team name

    Returns:
        Normalized team name
    """
    if not name:
        return ""

    name = unidecode(name).lower()

    # "St. Louis", "Paris Saint-Germain"
    name = re.sub(r'[.\-_/&]', ' ', name)
    name = re.sub(r'[^\w\s]', '', name)
    name = re.sub(r'\s+', ' ', name)

    return name.strip()


def team_similarity(query: str, team: str) -> float:
    """
    Similarity (0-100) between a query and a team name.

    A query that is a whole word of the team name ("celtics" in
    "boston celtics") scores 100.
    """
    norm_query = normalize_team_name(query)
    norm_team = normalize_team_name(team)

    if not norm_query or not norm_team:
        return 0.0

    if norm_query == norm_team or f" {norm_query} " in f" {norm_team} ":
        return 100.0

    # Token sort handles word order ("Milan AC" vs "AC Milan")
    return max(
        fuzz.token_sort_ratio(norm_query, norm_team),
        fuzz.partial_ratio(norm_query, norm_team) if len(norm_query) >= 4 else 0.0,
    )


def teams_match(team1: str, team2: str, threshold: int = 80) -> bool:
    """
    Check if two team names match using fuzzy string matching.

    Args:
        team1: First team name
        team2: Second team name
        threshold: Similarity threshold (0-100)

    Returns:
        True if teams match, False otherwise
    """
    return team_similarity(team1, team2) >= threshold


def find_event(events: List[Event], query: str, threshold: int = 80) -> Optional[Event]:
    """
    Find an event by id, or by the best fuzzy match on either team name.

    Args:
        events: Events to search
        query: Event id or team name
        threshold: Minimum similarity for a team name match

    Returns:
        The matching event, or None
    """
    query = (query or "").strip()
    if not query:
        return None

    for event in events:
        if event.id == query:
            return event

    best_event = None
    best_score = 0.0

    for event in events:
        score = max(team_similarity(query, event.home_team),
                    team_similarity(query, event.away_team))
        # Strict improvement keeps the earliest event on ties
        if score > best_score:
            best_score = score
            best_event = event

    if best_score >= threshold:
        return best_event

    return None
