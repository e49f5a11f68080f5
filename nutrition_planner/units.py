"""Body measurement parsing and conversion.

Weights and heights are calculated in kg and cm. Forms and the CLI also
accept imperial input such as "165lb" or "5'10\"".
"""

import re

LBS_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12

_NUMBER = r"(\d+(?:\.\d+)?)"
_WEIGHT_RE = re.compile(rf"^\s*{_NUMBER}\s*(kg|kgs|lb|lbs)?\s*$", re.IGNORECASE)
_HEIGHT_METRIC_RE = re.compile(rf"^\s*{_NUMBER}\s*(cm)?\s*$", re.IGNORECASE)
_HEIGHT_IMPERIAL_RE = re.compile(
    rf"^\s*{_NUMBER}\s*(?:ft|')\s*(?:{_NUMBER}\s*(?:in|\"|'')?)?\s*$", re.IGNORECASE
)


def lbs_to_kg(lbs: float) -> float:
    return lbs / LBS_PER_KG


def kg_to_lbs(kg: float) -> float:
    return kg * LBS_PER_KG


def ft_in_to_cm(feet: float, inches: float = 0) -> float:
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def cm_to_ft_in(cm: float) -> tuple:
    """Convert centimeters to whole (feet, inches)."""
    total_inches = round(cm / CM_PER_INCH)
    return total_inches // INCHES_PER_FOOT, total_inches % INCHES_PER_FOOT


def parse_weight_kg(text: str) -> float:
    """Parse "80", "80kg" or "176lb" into kilograms.

    Raises ValueError for anything else.
    """
    match = _WEIGHT_RE.match(text)
    if not match:
        raise ValueError(f"Unrecognized weight: {text!r}")
    value, unit = float(match.group(1)), (match.group(2) or "kg").lower()
    return lbs_to_kg(value) if unit.startswith("lb") else value


def parse_height_cm(text: str) -> float:
    """Parse "180", "180cm", "5ft10in" or 5'10" into centimeters.

    Raises ValueError for anything else.
    """
    match = _HEIGHT_METRIC_RE.match(text)
    if match:
        return float(match.group(1))
    match = _HEIGHT_IMPERIAL_RE.match(text)
    if match:
        return ft_in_to_cm(float(match.group(1)), float(match.group(2) or 0))
    raise ValueError(f"Unrecognized height: {text!r}")


def format_weight(kg: float) -> str:
    return f"{kg:.1f} kg ({kg_to_lbs(kg):.0f} lbs)"


def format_height(cm: float) -> str:
    feet, inches = cm_to_ft_in(cm)
    return f"{cm:.0f} cm ({feet}'{inches}\")"
