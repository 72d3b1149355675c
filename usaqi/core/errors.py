from enum import Enum
from typing import Optional


class Bound(str, Enum):
    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


class AqiError(ValueError):
    """Base class for everything the calculator and adjuster raise."""


class OutOfRangeError(AqiError):
    """Concentration lies outside every breakpoint of the selected table.

    The calculator never clamps; ``bound`` says which side was crossed and
    ``limit`` is the table edge that was crossed.
    """

    def __init__(self, bound: Bound, limit: float, message: Optional[str] = None):
        self.bound = bound
        self.limit = limit
        if message is None:
            side = "below" if bound is Bound.BELOW_MINIMUM else "above"
            message = f"concentration is {side} the table limit of {limit}"
        super().__init__(message)


class UnsupportedPollutantError(AqiError):
    pass


class MissingRequiredInputError(AqiError):
    pass


class InvalidInputError(AqiError):
    pass
