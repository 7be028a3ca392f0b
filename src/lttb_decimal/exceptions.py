"""
lttb_decimal exceptions module.

Contains exception classes used across multiple modules to avoid circular dependencies.
"""


class LttbError(Exception):
    """Base class for all lttb_decimal errors."""

    pass


class TimeBeforeEpochError(LttbError, ValueError):
    """Exception raised when a timestamp predates the UNIX epoch."""

    pass


class TimeOutOfRangeError(LttbError, OverflowError):
    """Exception raised when epoch seconds cannot be represented as an external time."""

    pass


class InvalidThresholdError(LttbError, ValueError):
    """Exception raised when a threshold cannot produce a valid bucketing for the input size."""

    def __init__(self, threshold: int, n_points: int) -> None:
        self.threshold = threshold
        self.n_points = n_points
        super().__init__(f"invalid threshold for input size: threshold={threshold}, points={n_points} (minimum is 3)")
