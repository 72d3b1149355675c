"""US EPA AQI breakpoint tables.

Tables are read once from ``data/aqi_breakpoints.json`` and frozen into
tuples keyed by (pollutant, averaging window). Source: EPA Technical
Assistance Document for the Reporting of Daily Air Quality (EPA-454/B-18-007).
"""
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, NamedTuple, Optional, Tuple, Union

from usaqi.core.config import AQI_BREAKPOINTS
from usaqi.core.errors import UnsupportedPollutantError


class Pollutant(str, Enum):
    OZONE_8HR = "ozone_8hr"
    OZONE_1HR = "ozone_1hr"
    PM2_5 = "pm2_5"
    PM10 = "pm10"
    CO = "co"
    SO2 = "so2"
    NO2 = "no2"


class AveragingWindow(str, Enum):
    ONE_HOUR = "1h"
    EIGHT_HOUR = "8h"
    TWENTY_FOUR_HOUR = "24h"


class Breakpoint(NamedTuple):
    concentration_low: float
    concentration_high: float
    aqi_low: int
    aqi_high: int


class BreakpointTable(NamedTuple):
    pollutant: Pollutant
    window: AveragingWindow
    unit: str
    # decimal places a reading is truncated to before lookup
    precision: int
    breakpoints: Tuple[Breakpoint, ...]

    @property
    def min_concentration(self) -> float:
        return self.breakpoints[0].concentration_low

    @property
    def max_concentration(self) -> float:
        return self.breakpoints[-1].concentration_high

    @property
    def min_aqi(self) -> int:
        return self.breakpoints[0].aqi_low

    @property
    def max_aqi(self) -> int:
        return self.breakpoints[-1].aqi_high


# window used when the caller does not name one
NATIVE_WINDOWS: Mapping[Pollutant, AveragingWindow] = MappingProxyType({
    Pollutant.OZONE_8HR: AveragingWindow.EIGHT_HOUR,
    Pollutant.OZONE_1HR: AveragingWindow.ONE_HOUR,
    Pollutant.PM2_5: AveragingWindow.TWENTY_FOUR_HOUR,
    Pollutant.PM10: AveragingWindow.TWENTY_FOUR_HOUR,
    Pollutant.CO: AveragingWindow.EIGHT_HOUR,
    Pollutant.SO2: AveragingWindow.ONE_HOUR,
    Pollutant.NO2: AveragingWindow.ONE_HOUR,
})


def _build_tables(raw: Dict[str, Dict]) -> Mapping[Tuple[Pollutant, AveragingWindow], BreakpointTable]:
    tables = {}
    for entry in raw.values():
        pollutant = Pollutant(entry["pollutant"])
        window = AveragingWindow(entry["window"])
        rows = tuple(
            Breakpoint(c_low, c_high, int(i_low), int(i_high))
            for c_low, c_high, i_low, i_high in entry["breakpoints"]
        )
        tables[(pollutant, window)] = BreakpointTable(
            pollutant, window, entry["unit"], int(entry["precision"]), rows
        )
    return MappingProxyType(tables)


TABLES = _build_tables(AQI_BREAKPOINTS)


def get_table(pollutant: Union[Pollutant, str],
              averaging_window: Optional[Union[AveragingWindow, str]] = None) -> BreakpointTable:
    """Return the breakpoint table for a pollutant and averaging window.

    Omitting ``averaging_window`` selects the pollutant's native window.
    Raises UnsupportedPollutantError for any pair without a published table.
    """
    try:
        pollutant = Pollutant(pollutant)
    except ValueError:
        raise UnsupportedPollutantError(f"unknown pollutant: {pollutant!r}") from None

    if averaging_window is None:
        window = NATIVE_WINDOWS[pollutant]
    else:
        try:
            window = AveragingWindow(averaging_window)
        except ValueError:
            raise UnsupportedPollutantError(
                f"unknown averaging window: {averaging_window!r}"
            ) from None

    table = TABLES.get((pollutant, window))
    if table is None:
        raise UnsupportedPollutantError(
            f"no AQI table for {pollutant.value} averaged over {window.value}"
        )
    return table
