from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional
from datetime import datetime


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Outcome(FrozenModel):
    name: str  # e.g. "Boston Celtics", "Over"
    price: float  # decimal odds
    point: Optional[float] = None  # spread/total line

    @property
    def implied_probability(self) -> float:
        return 1.0 / self.price


class Market(FrozenModel):
    key: str  # "h2h", "spreads" or "totals"
    outcomes: List[Outcome] = Field(default_factory=list)


class Bookmaker(FrozenModel):
    key: str
    title: str
    last_update: Optional[datetime] = None
    markets: List[Market] = Field(default_factory=list)


class OddsSnapshot(FrozenModel):
    """One odds fetch for an event, as delivered by the odds provider."""
    id: str
    sport_key: str
    sport_title: Optional[str] = None
    home_team: str
    away_team: str
    commence_time: datetime
    bookmakers: List[Bookmaker] = Field(default_factory=list)


class Event(FrozenModel):
    id: str
    sport: str
    league: Optional[str] = None
    home_team: str
    away_team: str
    start_time: datetime
    odds: Dict[str, OddsSnapshot] = Field(default_factory=dict)  # bookmaker key -> snapshot


# bookmaker key -> that bookmaker's market, in event order
MarketTable = Dict[str, Market]


class Recommendation(str, Enum):
    STRONG_BUY = "STRONG BUY"
    BUY = "BUY"
    WEAK_BUY = "WEAK BUY"
    AVOID = "AVOID"
    HOLD = "HOLD"


class BestOdds(FrozenModel):
    outcome: str
    bookmaker: str
    price: float
    implied_probability: float


class StakeLeg(FrozenModel):
    outcome: str
    bookmaker: str
    price: float
    stake: float


class ArbitrageOpportunity(FrozenModel):
    guaranteed: bool
    profit: float
    stakes: Dict[str, float]  # bookmaker -> stake
    legs: List[StakeLeg]
    total_stake: float
    total_implied_probability: float


class ValueAnalysis(FrozenModel):
    expected_value: float  # 0.08 == 8%
    kelly: float  # fraction of bankroll
    confidence: float
    recommendation: Recommendation


class AnalysisResult(FrozenModel):
    event_id: str
    market: str
    best_odds: BestOdds
    arbitrage_opportunity: Optional[ArbitrageOpportunity] = None
    value_analysis: ValueAnalysis
    timestamp: datetime
