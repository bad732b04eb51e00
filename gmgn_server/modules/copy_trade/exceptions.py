"""Copy-trade domain specific exceptions."""


class CopyTradeError(Exception):
    """Base class for copy-trade domain errors."""


class TraderNotFoundError(CopyTradeError):
    def __init__(self, trader_id: str) -> None:
        super().__init__(f"Trader '{trader_id}' not found")
        self.trader_id = trader_id
