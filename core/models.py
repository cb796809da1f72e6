from dataclasses import dataclass
from enum import Enum

class ConductorType(Enum):
    HYPALON = "hypalon"
    PVC = "pvc"

    @property
    def label(self) -> str:
        return _CONDUCTOR_LABELS[self]

    @property
    def max_conductor_temp_c(self) -> int:
        return _CONDUCTOR_MAX_TEMP[self]

_CONDUCTOR_LABELS = {
    ConductorType.HYPALON: "600V Hypalon (90°C)",
    ConductorType.PVC: "600V PVC Flexible (105°C)",
}

_CONDUCTOR_MAX_TEMP = {
    ConductorType.HYPALON: 90,
    ConductorType.PVC: 105,
}

class InstallationMethod(Enum):
    CONDUIT = "pipe"
    OPEN_AIR = "air"  # Open air or duct

    @property
    def label(self) -> str:
        return "Conduit" if self is InstallationMethod.CONDUIT else "Open air / Duct"

class AirSpacing(Enum):
    S_D = "S=d"
    S_2D = "S=2d"
    S_3D = "S=3d"

@dataclass(frozen=True)
class WireSizeSpec:
    size: str  # Nominal mm2 label, never parsed as a number
    conduit_ampacity: int
    open_air_ampacity: int

    def base_ampacity(self, method: InstallationMethod) -> int:
        if method is InstallationMethod.CONDUIT:
            return self.conduit_ampacity
        return self.open_air_ampacity

@dataclass(frozen=True)
class BundleOption:
    key: str
    label: str
    factor: float

@dataclass
class QueryParameters:
    conductor_type: ConductorType
    size: str
    installation_method: InstallationMethod
    ambient_temp_c: float = 25.0
    bundle_key: str = "1"            # Conduit only (f2)
    air_spacing: AirSpacing = AirSpacing.S_D  # Open air only (f4)
    air_count: int = 1               # Open air only (f4)

@dataclass(frozen=True)
class QueryResult:
    base_ampacity: int
    temperature_factor: float
    secondary_factor: float
    final_ampacity: int
    resolved_temp_c: int = 25
    secondary_defaulted: bool = False
    formula: str = ""
