from pathlib import Path
from config.settings import settings
from core.analyzer import analyze_event
from core.loader import load_events
from utils.formatting import format_best_bets
from utils.logger import get_logger

logger = get_logger(__name__)


def main():
    """Print the strongest value recommendations across saved events."""
    events = load_events(Path(settings.ODDS_FILE))
    events = events[:settings.BEST_BETS_EVENT_LIMIT]
    logger.info(f"Scanning {len(events)} events for value bets")

    pairs = [(event, result) for event in events for result in analyze_event(event)]
    label = events[0].league or events[0].sport if events else ""

    print(format_best_bets(
        pairs,
        min_confidence=settings.BEST_BETS_MIN_CONFIDENCE,
        limit=settings.BEST_BETS_LIMIT,
        label=label,
    ))


if __name__ == "__main__":
    main()
