from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "analysis.log"

    # Data paths
    DATA_DIR: str = "data"
    ODDS_FILE: str = "data/raw/odds.json"
    OPPORTUNITIES_DIR: str = "data/opportunities"

    # Analysis
    VIG_ADJUSTMENT: float = Field(0.95, gt=0, le=1)  # discount applied to consensus probability
    ARBITRAGE_TOTAL_STAKE: float = Field(100.0, gt=0)

    # Best bets
    BEST_BETS_MIN_CONFIDENCE: float = 0.6
    BEST_BETS_EVENT_LIMIT: int = 20
    BEST_BETS_LIMIT: int = 10

    # Event lookup
    TEAM_MATCH_THRESHOLD: int = 80

    # n8n Webhook
    N8N_WEBHOOK_URL: str = ""  # Set in .env or leave empty to disable

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
