"""Exceptions raised by the forecasting core."""


class ForecastError(Exception):
    """Base exception for forecasting errors."""


class FeatureMismatchError(ForecastError, ValueError):
    """Feature vectors of different lengths were compared."""

    def __init__(self, left_length: int, right_length: int):
        super().__init__(
            f"Feature vectors must have equal length (got {left_length} and {right_length})"
        )
        self.left_length = left_length
        self.right_length = right_length


class InvalidRecordError(ForecastError, ValueError):
    """A serialized task or objective record could not be read."""
