from types import MappingProxyType
from typing import Mapping, Tuple
from core.errors import SizeNotFoundError
from core.models import AirSpacing, BundleOption, ConductorType, InstallationMethod, WireSizeSpec

# Walsin Lihwa 600V Hypalon cable - max conductor temperature 90°C
# Format: (Size mm2, Conduit Amps, Open air/Duct Amps)
_HYPALON_ROWS = [
    ("0.75", 18, 16),
    ("1.25", 25, 22),
    ("2.0", 32, 28),
    ("3.5", 47, 42),
    ("5.5", 61, 55),
    ("8", 76, 69),
    ("14", 114, 104),
    ("22", 154, 141),
    ("30", 186, 172),
    ("38", 216, 200),
    ("50", 254, 238),
    ("60", 292, 275),
    ("80", 354, 335),
    ("100", 409, 389),
    ("125", 464, 445),
    ("150", 506, 487),
    ("200", 610, 593),
    ("250", 690, 676),
    ("325", 799, 791),
    ("400", 900, 900),
]

# 600V 105°C PVC flexible cable - Table 1, standard conditions (no 0.75 or 400)
_PVC_ROWS = [
    ("1.25", 23, 21),
    ("2.0", 33, 30),
    ("3.5", 48, 44),
    ("5.5", 66, 61),
    ("8", 87, 81),
    ("14", 127, 119),
    ("22", 170, 160),
    ("30", 205, 195),
    ("38", 239, 228),
    ("50", 280, 268),
    ("60", 322, 310),
    ("80", 390, 378),
    ("100", 450, 440),
    ("125", 513, 504),
    ("150", 559, 552),
    ("200", 675, 673),
    ("250", 764, 768),
    ("325", 888, 901),
]

def _spec_table(rows) -> Mapping[str, WireSizeSpec]:
    table = {}
    for size, conduit, air in rows:
        if size in table:
            raise ValueError(f"Duplicate size label {size}")
        table[size] = WireSizeSpec(size=size, conduit_ampacity=conduit, open_air_ampacity=air)
    return MappingProxyType(table)

HYPALON_SPECS = _spec_table(_HYPALON_ROWS)
PVC_SPECS = _spec_table(_PVC_ROWS)

SPECS_BY_TYPE = MappingProxyType({
    ConductorType.HYPALON: HYPALON_SPECS,
    ConductorType.PVC: PVC_SPECS,
})

# Ambient temperature correction factors
# Conduit -> f1 (PVC Table 2), Open air/Duct -> f3 (PVC Table 4)
# Format: {Temp_C: Factor}, 25°C conduit / 40°C open air as reference
TEMP_STEP_C = 5
TEMP_MIN_C = 20
TEMP_MAX_C = 50
REFERENCE_TEMP_C = 25

def _freeze(d: dict) -> Mapping:
    return MappingProxyType(dict(d))

TEMP_FACTORS = MappingProxyType({
    ConductorType.HYPALON: MappingProxyType({
        InstallationMethod.CONDUIT: _freeze({20: 1.04, 25: 1.0, 30: 0.96, 35: 0.92, 40: 0.88, 45: 0.83, 50: 0.78}),
        InstallationMethod.OPEN_AIR: _freeze({20: 1.18, 25: 1.14, 30: 1.1, 35: 1.05, 40: 1.0, 45: 0.95, 50: 0.89}),
    }),
    ConductorType.PVC: MappingProxyType({
        InstallationMethod.CONDUIT: _freeze({20: 1.03, 25: 1.0, 30: 0.97, 35: 0.94, 40: 0.9, 45: 0.87, 50: 0.83}),
        InstallationMethod.OPEN_AIR: _freeze({20: 1.14, 25: 1.11, 30: 1.07, 35: 1.04, 40: 1.0, 45: 0.96, 50: 0.92}),
    }),
})

# f2 - Several conductors in the same conduit (Table 3, shared by both types)
BUNDLE_OPTIONS: Tuple[BundleOption, ...] = (
    BundleOption("1", "1 conductor", 1.0),
    BundleOption("2", "2 conductors", 0.7),
    BundleOption("3", "3 conductors", 0.7),
    BundleOption("4", "4 conductors", 0.63),
    BundleOption("5-6", "5-6 conductors", 0.56),
    BundleOption("7-15", "7-15 conductors", 0.49),
    BundleOption("16-40", "16-40 conductors", 0.43),
    BundleOption("41-60", "41-60 conductors", 0.39),
    BundleOption("60+", "60+ conductors", 0.34),
)

BUNDLE_FACTORS = _freeze({o.key: o.factor for o in BUNDLE_OPTIONS})

# f4 - Several cables laid in open air/duct (Table 5: spacing x count)
AIR_COUNTS: Tuple[int, ...] = (1, 2, 3, 4, 6, 8, 9, 12)

SPACING_COUNT_FACTORS = MappingProxyType({
    AirSpacing.S_D: _freeze({1: 1.0, 2: 0.85, 3: 0.8, 4: 0.7, 6: 0.7, 8: 0.6, 9: 0.6, 12: 0.6}),
    AirSpacing.S_2D: _freeze({1: 1.0, 2: 0.95, 3: 0.95, 4: 0.9, 6: 0.9, 8: 0.9, 9: 0.85, 12: 0.8}),
    AirSpacing.S_3D: _freeze({1: 1.0, 2: 1.0, 3: 1.0, 4: 0.95, 6: 0.95, 8: 0.95, 9: 0.9, 12: 0.85}),
})

def get_wire_spec(conductor_type: ConductorType, size: str) -> WireSizeSpec:
    try:
        return SPECS_BY_TYPE[conductor_type][size]
    except KeyError:
        raise SizeNotFoundError(conductor_type, size) from None

def has_size(conductor_type: ConductorType, size: str) -> bool:
    return size in SPECS_BY_TYPE[conductor_type]

def size_labels(conductor_type: ConductorType) -> Tuple[str, ...]:
    """Size labels in table order (smallest first)."""
    return tuple(SPECS_BY_TYPE[conductor_type].keys())

def get_temperature_table(conductor_type: ConductorType, method: InstallationMethod) -> Mapping[int, float]:
    return TEMP_FACTORS[conductor_type][method]
