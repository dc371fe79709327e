import sys
from pathlib import Path
from config.settings import settings
from core.analyzer import analyze_event
from core.loader import load_events
from core.normalizer import find_event
from utils.formatting import format_analysis, format_odds_comparison
from utils.logger import get_logger

logger = get_logger(__name__)


def main(argv=None):
    """Detailed analysis of one event, looked up by id or team name."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python market_analysis.py <event id or team name>")
        return 1

    query = " ".join(argv)
    events = load_events(Path(settings.ODDS_FILE))
    event = find_event(events, query, threshold=settings.TEAM_MATCH_THRESHOLD)

    if event is None:
        logger.warning(f"Event not found: {query}")
        print(f"Event not found: {query}")
        return 1

    print(format_odds_comparison(event))
    print()
    print(format_analysis(event, analyze_event(event)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
