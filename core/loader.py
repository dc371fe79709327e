"""
Load odds provider payloads saved to disk and turn them into Events.

The provider returns one record per event with every bookmaker nested inside
it. Events keep one snapshot per bookmaker so that each bookmaker's odds can
be traced back on their own.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List
from pydantic import ValidationError
from core.models import Event, OddsSnapshot
import logging

logger = logging.getLogger(__name__)


def snapshot_from_dict(payload: Dict[str, Any]) -> OddsSnapshot:
    """Validate one provider event record."""
    return OddsSnapshot.model_validate(payload)


def event_from_snapshot(snapshot: OddsSnapshot) -> Event:
    """
    Build an Event from a provider snapshot.

    Each bookmaker gets its own single-bookmaker snapshot, keyed by the
    bookmaker key, in the order the provider listed them.
    """
    odds: Dict[str, OddsSnapshot] = {}
    for bookmaker in snapshot.bookmakers:
        if bookmaker.key in odds:
            logger.debug(f"Duplicate bookmaker {bookmaker.key} in event {snapshot.id}, keeping first")
            continue
        odds[bookmaker.key] = snapshot.model_copy(update={"bookmakers": [bookmaker]})

    return Event(
        id=snapshot.id,
        sport=snapshot.sport_key,
        league=snapshot.sport_title,
        home_team=snapshot.home_team,
        away_team=snapshot.away_team,
        start_time=snapshot.commence_time,
        odds=odds,
    )


def _read_records(text: str) -> List[Any]:
    stripped = text.lstrip()
    if not stripped:
        return []
    if stripped.startswith("["):
        return json.loads(stripped)

    records = []
    for line_num, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line:
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid JSON on line {line_num}: {e}")
    return records


def load_events(filepath: str | Path) -> List[Event]:
    """
    Load events from a JSON array or NDJSON file of provider records.

    Args:
        filepath: Path to the saved odds payload

    Returns:
        List of Event objects; invalid records are skipped
    """
    path = Path(filepath)
    events: List[Event] = []

    try:
        records = _read_records(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning(f"File not found: {path}")
        return events
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Error loading events from {path}: {e}")
        return events
    except OSError as e:
        logger.error(f"Could not read {path}: {e}")
        return events

    for index, record in enumerate(records):
        try:
            snapshot = snapshot_from_dict(record)
        except ValidationError as e:
            logger.warning(f"Skipping invalid event record #{index} in {path}: {e.error_count()} errors")
            continue
        events.append(event_from_snapshot(snapshot))

    logger.info(f"Loaded {len(events)} events from {path}")
    return events
