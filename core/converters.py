import re
from typing import Optional, Union
from core.models import AirSpacing

def parse_size_label(text: str) -> str:
    """
    Strips whitespace and a trailing mm2 unit from a typed size ("5.5 mm²" -> "5.5").
    The label is kept as text, "2" and "2.0" are different labels.
    """
    label = str(text).strip()
    label = re.sub(r"\s*(mm²|mm2|mm\^2|sq\.?\s*mm)$", "", label, flags=re.IGNORECASE)
    return label.strip()

def parse_air_spacing(text: Union[str, AirSpacing]) -> Optional[AirSpacing]:
    """Accepts "S=2d", "s = 2D", "2d", "d" or "1d". Returns None if unrecognised."""
    if isinstance(text, AirSpacing):
        return text
    t = str(text).strip().lower().replace(" ", "")
    if t.startswith("s="): t = t[2:]
    if t in ["d", "1d"]: return AirSpacing.S_D
    if t == "2d": return AirSpacing.S_2D
    if t == "3d": return AirSpacing.S_3D
    return None

def parse_count(text: Union[str, int]) -> Optional[int]:
    """Parses "4", "4 conductors" or 4. Returns None if no leading integer."""
    if isinstance(text, int): return text
    match = re.match(r"\s*(\d+)", str(text))
    if match:
        return int(match.group(1))
    return None

def parse_temperature(text: Union[str, float], default: float = 25.0) -> float:
    """Parses "30", "30 C", "30°C" or "27.5". Falls back to default."""
    if isinstance(text, (int, float)): return float(text)
    match = re.match(r"\s*(-?[0-9]+(?:\.[0-9]+)?)", str(text))
    if match:
        return float(match.group(1))
    return default
