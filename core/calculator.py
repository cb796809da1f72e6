import logging
import math
from abc import ABC, abstractmethod
from typing import Tuple
from .errors import InvalidSelectionError
from .models import InstallationMethod, QueryParameters, QueryResult, WireSizeSpec

logger = logging.getLogger(__name__)

# Neutral factor substituted for an invalid bundle/spacing selection
DEFAULT_FACTOR = 1.0

def round_half_up(value: float) -> int:
    """Rounds to the nearest whole ampere, halves going up (27.5 -> 28)."""
    return int(math.floor(value + 0.5))

class AmpacityCalculator(ABC):
    method: InstallationMethod
    formula: str = ""

    def __init__(self, strict: bool = False):
        # strict=True turns an invalid secondary selection into an error
        self.strict = strict

    @abstractmethod
    def wire_spec(self, params: QueryParameters) -> WireSizeSpec:
        """Looks up the size record. Raises SizeNotFoundError."""
        pass

    @abstractmethod
    def temperature_factor(self, params: QueryParameters) -> Tuple[int, float]:
        """Returns (resolved temperature key, factor)."""
        pass

    @abstractmethod
    def secondary_factor(self, params: QueryParameters) -> float:
        """Returns the grouping factor. Raises InvalidSelectionError."""
        pass

    def calculate(self, params: QueryParameters) -> QueryResult:
        spec = self.wire_spec(params)
        base = spec.base_ampacity(self.method)
        temp_key, f_temp = self.temperature_factor(params)

        defaulted = False
        try:
            f_sec = self.secondary_factor(params)
        except InvalidSelectionError as e:
            if self.strict:
                raise
            logger.warning("%s; using factor %.1f", e, DEFAULT_FACTOR)
            f_sec = DEFAULT_FACTOR
            defaulted = True

        final = round_half_up(base * f_temp * f_sec)
        logger.debug("%s %s mm² %s: %d x %s x %s = %d",
                     params.conductor_type.value, spec.size, self.method.value,
                     base, f_temp, f_sec, final)

        return QueryResult(
            base_ampacity=base,
            temperature_factor=f_temp,
            secondary_factor=f_sec,
            final_ampacity=final,
            resolved_temp_c=temp_key,
            secondary_defaulted=defaulted,
            formula=self.formula,
        )
