"""Market domain specific exceptions."""


class MarketError(Exception):
    """Base class for market domain errors."""


class TokenNotFoundError(MarketError):
    """Raised when a token id is not in the supported catalog."""

    def __init__(self, token_id: str) -> None:
        super().__init__(f"Token '{token_id}' not found")
        self.token_id = token_id


class InvalidTimeFrameError(MarketError):
    """Raised when a chart is requested for an unknown time frame."""
