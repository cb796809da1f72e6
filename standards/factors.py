import logging
import math
from typing import Tuple, Union
from core.converters import parse_air_spacing
from core.errors import InvalidSelectionError
from core.models import AirSpacing, ConductorType, InstallationMethod
from standards.cable_tables import (
    BUNDLE_FACTORS, SPACING_COUNT_FACTORS, REFERENCE_TEMP_C,
    TEMP_MAX_C, TEMP_MIN_C, TEMP_STEP_C, get_temperature_table,
)

logger = logging.getLogger(__name__)

def resolve_temperature_key(temp_c: float) -> int:
    """
    Snaps an ambient temperature to a table key.

    Rounds to the nearest multiple of TEMP_STEP_C (halves go up, 27.5 -> 30)
    and clamps into [TEMP_MIN_C, TEMP_MAX_C]. Never fails: infinities clamp to
    the bounds and NaN resolves to the reference temperature.
    """
    if math.isnan(temp_c):
        logger.warning("Ambient temperature is NaN, using %d°C", REFERENCE_TEMP_C)
        return REFERENCE_TEMP_C
    if math.isinf(temp_c):
        return TEMP_MAX_C if temp_c > 0 else TEMP_MIN_C

    key = int(math.floor(temp_c / TEMP_STEP_C + 0.5)) * TEMP_STEP_C
    return max(TEMP_MIN_C, min(TEMP_MAX_C, key))

def get_temperature_factor(conductor_type: ConductorType, method: InstallationMethod, temp_c: float) -> Tuple[int, float]:
    key = resolve_temperature_key(temp_c)
    if key != temp_c:
        logger.debug("Ambient %s°C resolved to %d°C", temp_c, key)
    return key, get_temperature_table(conductor_type, method)[key]

def get_bundle_factor(bundle_key: str) -> float:
    try:
        return BUNDLE_FACTORS[bundle_key]
    except (KeyError, TypeError):
        raise InvalidSelectionError("conduit bundle count (f2)", bundle_key) from None

def get_spacing_factor(spacing: Union[AirSpacing, str], count: int) -> float:
    spacing_enum = parse_air_spacing(spacing)
    if spacing_enum is None:
        raise InvalidSelectionError("open air spacing (f4)", spacing)
    try:
        return SPACING_COUNT_FACTORS[spacing_enum][count]
    except (KeyError, TypeError):
        raise InvalidSelectionError(f"open air count at {spacing_enum.value} (f4)", count) from None
