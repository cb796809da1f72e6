from typing import Tuple
from core.calculator import AmpacityCalculator
from core.models import InstallationMethod, QueryParameters, WireSizeSpec
from standards.cable_tables import get_wire_spec
from standards.factors import get_bundle_factor, get_temperature_factor

class ConduitCalculator(AmpacityCalculator):
    """Cables pulled in conduit: I = In x f1(temperature) x f2(count)."""

    method = InstallationMethod.CONDUIT
    formula = "I = In × f1(temperature) × f2(count)"

    def wire_spec(self, params: QueryParameters) -> WireSizeSpec:
        return get_wire_spec(params.conductor_type, params.size)

    def temperature_factor(self, params: QueryParameters) -> Tuple[int, float]:
        return get_temperature_factor(params.conductor_type, self.method, params.ambient_temp_c)

    def secondary_factor(self, params: QueryParameters) -> float:
        return get_bundle_factor(params.bundle_key)
