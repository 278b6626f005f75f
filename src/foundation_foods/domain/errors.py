"""Errors raised by the food query engine."""


class FoodQueryError(Exception):
    """Base error for the food query engine."""


class CorpusLoadError(FoodQueryError):
    """Raised when the food dataset cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load Foundation Foods data from {source}: {reason}")


class CorpusNotReadyError(FoodQueryError):
    """Raised when a query arrives before a non-empty corpus is loaded."""


class FoodNotFoundError(FoodQueryError):
    """Raised when a lookup references an unknown FDC id."""

    def __init__(self, fdc_id: int) -> None:
        self.fdc_id = fdc_id
        super().__init__(f"Food with FDC ID {fdc_id} not found")
