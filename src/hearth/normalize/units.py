"""Quantity parsing, formatting and unit normalization."""

import math
import re
from typing import Any

from hearth.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# Unit Vocabulary Tables
# =============================================================================

# Each table maps a recognized spelling to its canonical unit code.

VOLUME_UNITS: dict[str, str] = {
    "cup": "cups",
    "cups": "cups",
    "c": "cups",
    "tablespoon": "tbsp",
    "tablespoons": "tbsp",
    "tbsp": "tbsp",
    "tbs": "tbsp",
    "tb": "tbsp",
    "teaspoon": "tsp",
    "teaspoons": "tsp",
    "tsp": "tsp",
    "ts": "tsp",
    "fluid ounce": "fl oz",
    "fluid ounces": "fl oz",
    "fl oz": "fl oz",
    "pint": "pint",
    "pints": "pints",
    "pt": "pt",
    "quart": "quart",
    "quarts": "quarts",
    "qt": "qt",
    "gallon": "gallon",
    "gallons": "gallons",
    "gal": "gal",
    "milliliter": "ml",
    "milliliters": "ml",
    "ml": "ml",
    "liter": "L",
    "liters": "L",
    "l": "L",
}

WEIGHT_UNITS: dict[str, str] = {
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "gram": "g",
    "grams": "g",
    "g": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kg": "kg",
}

COUNT_UNITS: dict[str, str] = {
    "piece": "pieces",
    "pieces": "pieces",
    "pc": "pieces",
    "pcs": "pieces",
    "slice": "slices",
    "slices": "slices",
    "clove": "cloves",
    "cloves": "cloves",
    "head": "head",
    "heads": "heads",
    "bunch": "bunch",
    "bunches": "bunches",
    "can": "can",
    "cans": "cans",
    "package": "pkg",
    "packages": "pkg",
    "pkg": "pkg",
    "bag": "bag",
    "bags": "bags",
    "stick": "stick",
    "sticks": "sticks",
    "pinch": "pinch",
    "pinches": "pinches",
    "dash": "dash",
    "dashes": "dashes",
    "sprig": "sprig",
    "sprigs": "sprigs",
    "stalk": "stalk",
    "stalks": "stalks",
    "leaf": "leaf",
    "leaves": "leaves",
    "handful": "handful",
    "handfuls": "handfuls",
}

# Size words act as pseudo-units ("3 large eggs")
SIZE_DESCRIPTORS: dict[str, str] = {
    "small": "small",
    "medium": "medium",
    "large": "large",
}

_UNIT_TABLES: dict[str, dict[str, str]] = {
    "volume": VOLUME_UNITS,
    "weight": WEIGHT_UNITS,
    "count": COUNT_UNITS,
    "size": SIZE_DESCRIPTORS,
}

UNIT_SYNONYMS: dict[str, str] = {
    spelling: canonical for table in _UNIT_TABLES.values() for spelling, canonical in table.items()
}

UNICODE_FRACTIONS: dict[str, float] = {
    "½": 1 / 2,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "¼": 1 / 4,
    "¾": 3 / 4,
    "⅕": 1 / 5,
    "⅖": 2 / 5,
    "⅗": 3 / 5,
    "⅘": 4 / 5,
    "⅙": 1 / 6,
    "⅚": 5 / 6,
    "⅛": 1 / 8,
    "⅜": 3 / 8,
    "⅝": 5 / 8,
    "⅞": 7 / 8,
}

# (value, display) pairs preferred over raw decimals
NICE_FRACTIONS: tuple[tuple[float, str], ...] = (
    (0.25, "1/4"),
    (0.5, "1/2"),
    (0.75, "3/4"),
    (0.333, "1/3"),
    (0.667, "2/3"),
)
NICE_FRACTION_TOLERANCE = 0.01


# =============================================================================
# Unit Normalization
# =============================================================================


def is_unit(token: str) -> bool:
    """Check whether a token belongs to the unit vocabulary."""
    return token.lower().strip() in UNIT_SYNONYMS


def normalize_unit(token: str | None) -> str | None:
    """
    Map a unit spelling to its canonical code.

    Examples:
        "Tablespoons" -> "tbsp"
        "cup" -> "cups"
        "l" -> "L"
        "handful" -> "handful"
        "spoonful" -> None
    """
    if not token:
        return None
    return UNIT_SYNONYMS.get(token.lower().strip())


def unit_kind(unit: str | None) -> str | None:
    """Return "volume", "weight", "count" or "size" for a known unit."""
    if not unit:
        return None
    key = unit.lower().strip()
    for kind, table in _UNIT_TABLES.items():
        if key in table:
            return kind
    return None


# =============================================================================
# Quantity Parsing
# =============================================================================

_GLYPHS = "".join(UNICODE_FRACTIONS)

_DECIMAL_RE = re.compile(r"^(\d+(?:\.\d+)?)$")
_FRACTION_RE = re.compile(r"^(\d+)\s*/\s*(\d+)$")
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)$")
_GLYPH_RE = re.compile(rf"^(\d+)?\s*([{_GLYPHS}])$")
_RANGE_RE = re.compile(r"^(.+?)\s*(?:-|–|—|\bto\b)\s*(.+)$", re.IGNORECASE)


def _parse_single(text: str) -> float | None:
    """Parse one quantity expression without range handling."""
    try:
        value = _parse_number(text)
    except (ValueError, OverflowError) as e:
        logger.debug(f"Unreadable quantity {text[:20]!r}...: {e}")
        return None

    if value is None or not math.isfinite(value):
        return None
    return value


def _parse_number(text: str) -> float | None:
    if match := _DECIMAL_RE.match(text):
        return float(match.group(1))

    if match := _FRACTION_RE.match(text):
        numerator, denominator = int(match.group(1)), int(match.group(2))
        if denominator == 0:
            return None
        return numerator / denominator

    if match := _MIXED_RE.match(text):
        whole, numerator, denominator = (int(g) for g in match.groups())
        if denominator == 0:
            return None
        return whole + numerator / denominator

    if match := _GLYPH_RE.match(text):
        whole = int(match.group(1)) if match.group(1) else 0
        return whole + UNICODE_FRACTIONS[match.group(2)]

    return None


def parse_quantity_token(text: str | None) -> float | None:
    """
    Parse a quantity string into a float.

    Handles formats like:
    - "2", "1.5"
    - "1/2"
    - "1 1/2" (one and a half)
    - "½", "1½"
    - "2-3", "2 to 3" (range, returns the first bound)

    Returns None for anything else.
    """
    if not text:
        return None

    text = text.strip()
    value = _parse_single(text)
    if value is not None:
        return value

    if match := _RANGE_RE.match(text):
        low, high = match.group(1).strip(), match.group(2).strip()
        if _parse_single(high) is not None:
            return _parse_single(low)

    return None


def coerce_quantity(value: Any, default: float = 1.0) -> float:
    """
    Read a stored quantity leniently.

    Numbers and numeric strings pass through; anything missing, non-numeric,
    negative or non-finite becomes ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            logger.debug(f"Non-numeric quantity {value!r}, using {default}")
            return default

    if not math.isfinite(number) or number < 0:
        return default
    return number


# =============================================================================
# Quantity Formatting
# =============================================================================


def format_quantity(quantity: float) -> str:
    """
    Format a quantity for display.

    Integers print bare, values near 1/4, 1/3, 1/2, 2/3 or 3/4 print as that
    fraction, everything else prints with at most two decimals. Only the bare
    value is compared, so 1.5 prints as "1.5" rather than "1 1/2".
    """
    if float(quantity).is_integer():
        return str(int(quantity))

    for value, display in NICE_FRACTIONS:
        if abs(quantity - value) < NICE_FRACTION_TOLERANCE:
            return display

    return f"{quantity:.2f}".rstrip("0").rstrip(".")
