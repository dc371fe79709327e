"""
Webhook notification utility for sending arbitrage opportunities to n8n.
"""
import requests
from typing import Any, Dict, List
from core.models import AnalysisResult, Event
from utils.logger import get_logger

logger = get_logger(__name__)

WEBHOOK_TIMEOUT = 10


def opportunity_payload(event: Event, result: AnalysisResult) -> Dict[str, Any]:
    """
    Build the JSON-serializable record for one arbitrage result.

    Args:
        event: Event the result belongs to
        result: Analysis result holding an arbitrage opportunity

    Returns:
        Dictionary with the event, market and stake split
    """
    arb = result.arbitrage_opportunity
    return {
        "event_id": event.id,
        "sport": event.sport,
        "home": event.home_team,
        "away": event.away_team,
        "start": event.start_time.isoformat(),
        "market": result.market,
        "profit": round(arb.profit, 2) if arb else None,
        "total_stake": arb.total_stake if arb else None,
        "total_implied_probability": round(arb.total_implied_probability, 4) if arb else None,
        "legs": [leg.model_dump(mode="json") for leg in arb.legs] if arb else [],
        "detected_at": result.timestamp.isoformat(),
    }


def send_to_webhook(webhook_url: str, opportunities: List[Dict]) -> bool:
    """
    Send arbitrage opportunities to n8n webhook.

    Args:
        webhook_url: The n8n webhook URL
        opportunities: List of arbitrage opportunity dictionaries

    Returns:
        True if successful, False otherwise
    """
    if not webhook_url:
        logger.debug("No webhook URL configured, skipping webhook notification")
        return False

    if not opportunities:
        logger.info("No opportunities to send to webhook")
        return True

    payload = {
        "count": len(opportunities),
        "opportunities": opportunities
    }

    try:
        logger.info(f"Sending {len(opportunities)} opportunities to webhook: {webhook_url}")

        response = requests.post(
            webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=WEBHOOK_TIMEOUT
        )
    except requests.exceptions.Timeout:
        logger.error(f"Webhook request timed out after {WEBHOOK_TIMEOUT} seconds: {webhook_url}")
        return False
    except requests.exceptions.ConnectionError:
        logger.error(f"Could not connect to webhook URL: {webhook_url}")
        return False
    except requests.exceptions.RequestException as e:
        logger.error(f"Error sending to webhook: {e}")
        return False

    if response.status_code == 200:
        logger.info(f"Successfully sent {len(opportunities)} opportunities to n8n webhook")
        return True

    logger.error(
        f"Webhook request failed with status {response.status_code}: {response.text}"
    )
    return False
