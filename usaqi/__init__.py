from usaqi.core.adjustments import AdjustmentFormula, adjust, calculate_adjusted
from usaqi.core.breakpoints import AveragingWindow, Breakpoint, BreakpointTable, Pollutant, get_table
from usaqi.core.conversions import AqiResult, Category, calculate, categorize
from usaqi.core.errors import (
    AqiError,
    Bound,
    InvalidInputError,
    MissingRequiredInputError,
    OutOfRangeError,
    UnsupportedPollutantError,
)
from usaqi.core.units import ugm3_to_standard, unit_for

__all__ = [
    "AdjustmentFormula",
    "AqiError",
    "AqiResult",
    "AveragingWindow",
    "Bound",
    "Breakpoint",
    "BreakpointTable",
    "Category",
    "InvalidInputError",
    "MissingRequiredInputError",
    "OutOfRangeError",
    "Pollutant",
    "UnsupportedPollutantError",
    "adjust",
    "calculate",
    "calculate_adjusted",
    "categorize",
    "get_table",
    "ugm3_to_standard",
    "unit_for",
]
