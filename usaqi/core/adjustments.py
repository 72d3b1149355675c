"""Corrections that bring low-cost optical PM2.5 sensor readings (PurpleAir
and similar) closer to reference monitors.

- LRAPA: Lane Regional Air Protection Agency,
  https://www.lrapa.org/DocumentCenter/View/4147/PurpleAir-Correction-Summary
- AQandU: University of Utah AQ&U network,
  https://www.aqandu.org/airu_sensor#calibrationSection
- EPA: US-wide correction,
  https://cfpub.epa.gov/si/si_public_record_Report.cfm?dirEntryId=350075&Lab=CEMM
"""
import math
import numbers
from enum import Enum
from typing import Optional, Union

from usaqi.core.breakpoints import Pollutant
from usaqi.core.config import logger
from usaqi.core.conversions import AqiResult, calculate, validate_concentration
from usaqi.core.errors import (
    Bound,
    InvalidInputError,
    MissingRequiredInputError,
    OutOfRangeError,
)


class AdjustmentFormula(str, Enum):
    LRAPA = "lrapa"
    AQANDU = "aqandu"
    EPA = "epa"


# LRAPA only published its fit for raw readings up to this value (µg/m³)
LRAPA_MAX_RAW = 65.0


def _lrapa(raw: float) -> float:
    if raw > LRAPA_MAX_RAW:
        raise OutOfRangeError(
            Bound.ABOVE_MAXIMUM, LRAPA_MAX_RAW,
            f"LRAPA correction is not defined above {LRAPA_MAX_RAW} µg/m³",
        )
    return max(0.5 * raw - 0.66, 0.0)


def _aqandu(raw: float) -> float:
    return 0.778 * raw + 2.65


def _epa(raw: float, humidity: Optional[float]) -> float:
    if humidity is None:
        raise MissingRequiredInputError("EPA correction requires relative humidity")
    if isinstance(humidity, bool) or not isinstance(humidity, numbers.Real):
        raise InvalidInputError(f"humidity must be a real number, got {humidity!r}")
    humidity = float(humidity)
    if not math.isfinite(humidity) or not 0.0 <= humidity <= 100.0:
        raise InvalidInputError(f"relative humidity must be within 0-100 %, got {humidity!r}")
    return max(0.52 * raw - 0.085 * humidity + 5.71, 0.0)


def adjust(raw: float,
           formula: Union[AdjustmentFormula, str],
           humidity: Optional[float] = None) -> float:
    """Apply a PM2.5 correction to a raw reading in µg/m³.

    ``humidity`` is relative humidity in percent (0-100) and is only read by
    the EPA formula; the other formulas ignore it. Code written against the
    0.0-1.0 humidity fraction of the Rust aqi crate must multiply by 100.
    """
    try:
        formula = AdjustmentFormula(formula)
    except ValueError:
        raise InvalidInputError(f"unknown PM2.5 adjustment formula: {formula!r}") from None

    raw = validate_concentration(raw, name="raw PM2.5")

    if formula is AdjustmentFormula.LRAPA:
        adjusted = _lrapa(raw)
    elif formula is AdjustmentFormula.AQANDU:
        adjusted = _aqandu(raw)
    else:
        adjusted = _epa(raw, humidity)

    logger.debug("PM2.5 %s adjusted with %s -> %s", raw, formula.value, adjusted)
    return adjusted


def calculate_adjusted(raw: float,
                       formula: Union[AdjustmentFormula, str],
                       humidity: Optional[float] = None,
                       rounded: bool = True) -> AqiResult:
    """AQI of a raw PM2.5 reading after applying ``formula`` to it."""
    return calculate(Pollutant.PM2_5, adjust(raw, formula, humidity), rounded=rounded)
