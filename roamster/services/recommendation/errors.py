"""Error types raised by the recommendation engine."""


class RecommendationError(Exception):
    """Base class for recommendation engine errors."""


class InvalidTripError(RecommendationError, ValueError):
    """The caller supplied a trip (or clock reading) that violates the input contract.

    Raised before any context is built. Unknown destinations are NOT invalid input;
    they degrade to default weather and empty destination tables.
    """

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
