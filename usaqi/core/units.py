from typing import Union

from usaqi.core.breakpoints import Pollutant, get_table
from usaqi.core.conversions import validate_concentration
from usaqi.core.errors import InvalidInputError

_MOLAR_VOLUME = 24.45  # liters/mol at 25°C
_REFERENCE_TEMP_K = 298.15
_MW = {
    Pollutant.OZONE_8HR: 47.998,  # g/mol
    Pollutant.OZONE_1HR: 47.998,
    Pollutant.NO2: 46.0055,
    Pollutant.SO2: 64.066,
    Pollutant.CO: 28.010,
}


def unit_for(pollutant: Union[Pollutant, str]) -> str:
    """Unit a concentration must be given in for ``pollutant``: ppm, ppb or µg/m³."""
    return get_table(pollutant).unit


def ugm3_to_standard(pollutant: Union[Pollutant, str], ugm3: float,
                     temp_k: float = _REFERENCE_TEMP_K) -> float:
    """Convert a µg/m³ reading to the unit the pollutant's AQI table expects.

    Gases are converted through the molar volume at 25°C, scaled by the
    air temperature. Particulates are already in µg/m³ and pass through.
    """
    unit = unit_for(pollutant)
    pollutant = Pollutant(pollutant)
    ugm3 = validate_concentration(ugm3)
    temp_k = validate_concentration(temp_k, name="temperature")
    if temp_k == 0:
        raise InvalidInputError("temperature must be above 0 K")

    if pollutant not in _MW:
        return ugm3

    ppb = ugm3 * _MOLAR_VOLUME / _MW[pollutant] * (temp_k / _REFERENCE_TEMP_K)
    if unit == "ppm":
        return ppb / 1000.0
    return ppb
