import json
from pathlib import Path
from typing import List, Tuple
from config.settings import settings
from core.analyzer import analyze_event
from core.loader import load_events
from core.models import AnalysisResult, Event
from utils.formatting import LINE, format_arbitrage, select_arbitrage
from utils.logger import get_logger
from utils.webhook import opportunity_payload, send_to_webhook

logger = get_logger(__name__)


def find_all_arbitrage_opportunities(events: List[Event]) -> List[Tuple[Event, AnalysisResult]]:
    """
    Analyse every event and keep the markets with a guaranteed arbitrage.

    Returns:
        (event, result) pairs sorted by profit, highest first
    """
    pairs = [(event, result) for event in events for result in analyze_event(event)]
    found = select_arbitrage(pairs)
    found.sort(key=lambda pair: pair[1].arbitrage_opportunity.profit, reverse=True)
    return found


def save_opportunities(opportunities: List[dict], output_file: Path):
    """Write opportunities to an NDJSON file."""
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, 'w', encoding='utf-8') as f:
        for opp in opportunities:
            f.write(json.dumps(opp, ensure_ascii=False) + '\n')
    logger.info(f"Saved {len(opportunities)} opportunities to {output_file}")


def main():
    """Main function to find and save arbitrage opportunities."""
    input_file = Path(settings.ODDS_FILE)
    output_file = Path(settings.OPPORTUNITIES_DIR) / 'opportunities.ndjson'

    print(LINE)
    print("ARBITRAGE DETECTION")
    print(LINE)
    print()

    print(f"Reading events from: {input_file}")
    events = load_events(input_file)
    found = find_all_arbitrage_opportunities(events)

    print()
    print(format_arbitrage(found))
    print()

    if found:
        opportunities = [opportunity_payload(event, result) for event, result in found]
        save_opportunities(opportunities, output_file)

        if settings.N8N_WEBHOOK_URL:
            if send_to_webhook(settings.N8N_WEBHOOK_URL, opportunities):
                print(f"Sent {len(opportunities)} opportunities to n8n")
            else:
                print("Failed to send to n8n webhook (check logs)")
        else:
            print("Note: N8N_WEBHOOK_URL not configured. Set it in .env to enable n8n integration.")
        print()

        for i, (event, result) in enumerate(found[:10], 1):
            arb = result.arbitrage_opportunity
            print(f"{i}. {event.home_team} vs {event.away_team} [{result.market}]")
            print(f"   Profit: {arb.profit:.2f} per {arb.total_stake:.0f}")
            for leg in arb.legs:
                print(f"     Bet {leg.stake:.2f} on {leg.outcome} @ {leg.price:.2f} ({leg.bookmaker})")
            print()

    print(LINE)


if __name__ == '__main__':
    main()
