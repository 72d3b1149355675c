import math
import numbers
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    localcontext,
)
from enum import Enum
from typing import NamedTuple, Optional, Union

from usaqi.core.breakpoints import AveragingWindow, Breakpoint, BreakpointTable, Pollutant, get_table
from usaqi.core.config import logger
from usaqi.core.errors import Bound, InvalidInputError, OutOfRangeError, UnsupportedPollutantError

AQI_MAX = 500

# fixed arithmetic, independent of whatever context the caller has set
_DECIMAL_CONTEXT = Context(
    prec=28, rounding=ROUND_HALF_EVEN, Emin=-999999, Emax=999999,
    traps=[InvalidOperation, DivisionByZero, Overflow], flags=[],
)


class Category(Enum):
    GOOD = ("Good", 0, 50)
    MODERATE = ("Moderate", 51, 100)
    UNHEALTHY_FOR_SENSITIVE_GROUPS = ("Unhealthy for Sensitive Groups", 101, 150)
    UNHEALTHY = ("Unhealthy", 151, 200)
    VERY_UNHEALTHY = ("Very Unhealthy", 201, 300)
    HAZARDOUS = ("Hazardous", 301, 500)

    def __init__(self, label: str, aqi_low: int, aqi_high: int):
        self.label = label
        self.aqi_low = aqi_low
        self.aqi_high = aqi_high

    def __str__(self) -> str:
        return self.label


class AqiResult(NamedTuple):
    index: Union[int, float]
    category: Category


def validate_concentration(value: float, name: str = "concentration") -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    if value < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value!r}")
    return value


def _dec(value: float) -> Decimal:
    # str() gives the shortest repr, so 0.071 stays 0.071 and not 0.0709999...
    return Decimal(str(value))


def linear_interpolate(c: Decimal, bp: Breakpoint) -> Decimal:
    c_lo, c_hi = _dec(bp.concentration_low), _dec(bp.concentration_high)
    i_lo, i_hi = bp.aqi_low, bp.aqi_high
    if c_hi == c_lo:
        return Decimal(i_lo)
    return (i_hi - i_lo) * (c - c_lo) / (c_hi - c_lo) + i_lo


def find_breakpoint(table: BreakpointTable, c: Decimal) -> Optional[Breakpoint]:
    # ascending scan: a value shared by two rows resolves to the lower row
    for bp in table.breakpoints:
        if _dec(bp.concentration_low) <= c <= _dec(bp.concentration_high):
            return bp
    return None


def categorize(index: float) -> Category:
    """Map an AQI value to its category.

    Bands are closed on their upper edge, so unrounded values such as 50.4
    stay Good and 50.6 is Moderate. Anything above 500 is Hazardous.
    """
    index = validate_concentration(index, name="AQI")
    for category in Category:
        if index <= category.aqi_high:
            return category
    return Category.HAZARDOUS


def _truncate_onto_table(conc: float, table: BreakpointTable) -> Decimal:
    step = Decimal(1).scaleb(-table.precision)
    d = _dec(conc)

    if d < _dec(table.min_concentration):
        limit = table.min_concentration
        logger.debug("%s %s below table minimum %s", table.pollutant.value, conc, limit)
        if table.min_aqi > 0:
            raise UnsupportedPollutantError(
                f"{table.pollutant.value} ({table.window.value}) AQI is not defined "
                f"below {limit} {table.unit}; use a table for another averaging window"
            )
        raise OutOfRangeError(Bound.BELOW_MINIMUM, limit)

    # anything under max + one step truncates onto the table
    if d >= _dec(table.max_concentration) + step:
        limit = table.max_concentration
        logger.debug("%s %s above table maximum %s", table.pollutant.value, conc, limit)
        if table.max_aqi < AQI_MAX:
            raise UnsupportedPollutantError(
                f"{table.pollutant.value} ({table.window.value}) AQI is not defined "
                f"above {limit} {table.unit}; use a table for another averaging window"
            )
        raise OutOfRangeError(Bound.ABOVE_MAXIMUM, limit)

    return d.quantize(step, rounding=ROUND_DOWN)


def calculate(pollutant: Union[Pollutant, str],
              concentration: float,
              averaging_window: Optional[Union[AveragingWindow, str]] = None,
              rounded: bool = True) -> AqiResult:
    """Convert a time-averaged concentration to an AQI value and category.

    The concentration must already be averaged over the table's window and
    given in the table's unit (see ``usaqi.core.units.unit_for``). It is
    truncated to the table's reporting precision before lookup, as EPA
    prescribes. The index is rounded half-up to an integer unless
    ``rounded`` is False.

    Raises InvalidInputError, UnsupportedPollutantError or OutOfRangeError.
    Concentrations above the table are never clamped to 500.
    """
    table = get_table(pollutant, averaging_window)
    conc = validate_concentration(concentration)
    with localcontext(_DECIMAL_CONTEXT):
        c = _truncate_onto_table(conc, table)

        bp = find_breakpoint(table, c)
        if bp is None:
            # tables are contiguous at their precision, so this means bad data
            raise OutOfRangeError(Bound.ABOVE_MAXIMUM, table.max_concentration,
                                  f"no breakpoint covers {c} {table.unit}")

        val = linear_interpolate(c, bp)
        if rounded:
            index = int(val.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        else:
            index = float(val)

    category = categorize(index)
    logger.debug("%s (%s) %s %s -> AQI %s (%s)", table.pollutant.value,
                 table.window.value, c, table.unit, index, category.label)
    return AqiResult(index, category)
