from typing import Tuple
from core.calculator import AmpacityCalculator
from core.models import InstallationMethod, QueryParameters, WireSizeSpec
from standards.cable_tables import get_wire_spec
from standards.factors import get_spacing_factor, get_temperature_factor

class OpenAirCalculator(AmpacityCalculator):
    """Cables in open air or in a duct: I = In x f3(temperature) x f4(spacing, count)."""

    method = InstallationMethod.OPEN_AIR
    formula = "I = In × f3(temperature) × f4(spacing, count)"

    def wire_spec(self, params: QueryParameters) -> WireSizeSpec:
        return get_wire_spec(params.conductor_type, params.size)

    def temperature_factor(self, params: QueryParameters) -> Tuple[int, float]:
        # f3 has its own sub-table, referenced at 40°C
        return get_temperature_factor(params.conductor_type, self.method, params.ambient_temp_c)

    def secondary_factor(self, params: QueryParameters) -> float:
        return get_spacing_factor(params.air_spacing, params.air_count)
