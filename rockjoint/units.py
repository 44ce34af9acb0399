"""Display-unit conversion.

Statistics are always computed and stored in metres; these helpers only
convert values for printing.
"""

from __future__ import annotations

from typing import Dict

METERS_TO_FEET = 3.28084
SQ_METERS_TO_SQ_FEET = 10.7639


def convert_length(meters: float, imperial: bool = False) -> float:
    return meters * METERS_TO_FEET if imperial else meters


def convert_area(square_meters: float, imperial: bool = False) -> float:
    return square_meters * SQ_METERS_TO_SQ_FEET if imperial else square_meters


def convert_density(m_per_m2: float, imperial: bool = False) -> float:
    """Convert a P21 value; 1 m/m^2 is 3.28084 ft over 10.7639 ft^2."""
    return m_per_m2 * METERS_TO_FEET / SQ_METERS_TO_SQ_FEET if imperial else m_per_m2


def convert_frequency(per_meter: float, imperial: bool = False) -> float:
    return per_meter / METERS_TO_FEET if imperial else per_meter


def unit_labels(imperial: bool = False) -> Dict[str, str]:
    if imperial:
        return {"length": "ft", "area": "ft²", "density": "ft/ft²", "frequency": "joints/ft"}
    return {"length": "m", "area": "m²", "density": "m/m²", "frequency": "joints/m"}
