from dataclasses import replace
from typing import List, Optional, Tuple
from core.calculator import AmpacityCalculator
from core.models import (
    AirSpacing, BundleOption, ConductorType, InstallationMethod, QueryParameters, QueryResult,
)
from standards import cable_tables
from standards.conduit import ConduitCalculator
from standards.open_air import OpenAirCalculator

class AmpacityLogic:
    @staticmethod
    def calculator_for(method: InstallationMethod, strict: bool = False) -> AmpacityCalculator:
        if method is InstallationMethod.CONDUIT:
            return ConduitCalculator(strict=strict)
        return OpenAirCalculator(strict=strict)

    @staticmethod
    def compute_ampacity(params: QueryParameters, strict: bool = False) -> QueryResult:
        """
        Safe current for one cable under the given conditions.
        Raises SizeNotFoundError when the size is not listed for the conductor type.
        With strict=True an invalid bundle/spacing selection raises
        InvalidSelectionError instead of falling back to a factor of 1.0.
        """
        calc = AmpacityLogic.calculator_for(params.installation_method, strict=strict)
        return calc.calculate(params)

    @staticmethod
    def ampacity_table(params: QueryParameters, strict: bool = False) -> List[Tuple[str, QueryResult]]:
        """Runs the same conditions over every size of params.conductor_type (size in params is ignored)."""
        calc = AmpacityLogic.calculator_for(params.installation_method, strict=strict)
        rows = []
        for size in cable_tables.size_labels(params.conductor_type):
            rows.append((size, calc.calculate(replace(params, size=size))))
        return rows

    # --- Enumerations for selection UIs ---

    @staticmethod
    def conductor_types() -> List[ConductorType]:
        return list(ConductorType)

    @staticmethod
    def installation_methods() -> List[InstallationMethod]:
        return list(InstallationMethod)

    @staticmethod
    def size_labels(conductor_type: ConductorType) -> List[str]:
        return list(cable_tables.size_labels(conductor_type))

    @staticmethod
    def default_size(conductor_type: ConductorType, current: Optional[str] = None) -> str:
        # Keep the current size when switching type if the new table lists it
        if current is not None and cable_tables.has_size(conductor_type, current):
            return current
        return cable_tables.size_labels(conductor_type)[0]

    @staticmethod
    def temperature_keys() -> List[int]:
        return list(range(cable_tables.TEMP_MIN_C, cable_tables.TEMP_MAX_C + 1, cable_tables.TEMP_STEP_C))

    @staticmethod
    def bundle_options() -> List[BundleOption]:
        return list(cable_tables.BUNDLE_OPTIONS)

    @staticmethod
    def bundle_keys() -> List[str]:
        return [o.key for o in cable_tables.BUNDLE_OPTIONS]

    @staticmethod
    def air_spacings() -> List[AirSpacing]:
        return list(AirSpacing)

    @staticmethod
    def air_counts() -> List[int]:
        return list(cable_tables.AIR_COUNTS)

    @staticmethod
    def spacing_factor_options(spacing: AirSpacing) -> List[Tuple[int, float]]:
        """(count, f4) pairs for one spacing, for labelling count choices."""
        return [(n, cable_tables.SPACING_COUNT_FACTORS[spacing][n]) for n in cable_tables.AIR_COUNTS]
