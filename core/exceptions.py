class AnalysisError(Exception):
    """Base class for faults raised while analysing one market."""


class NoPricedOutcome(AnalysisError):
    """No outcome in a market table carries a usable price."""

    def __init__(self, market: str = None):
        self.market = market
        message = "No outcome with a valid decimal price"
        if market:
            message += f" in market '{market}'"
        super().__init__(message)
