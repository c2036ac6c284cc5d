"""Parse ingredient text into quantities, units, names and notes."""

from hearth.normalize.ingredients import (
    ParsedIngredient,
    extract_notes,
    format_ingredient,
    parse_ingredient,
    scale_ingredient,
)
from hearth.normalize.units import (
    coerce_quantity,
    format_quantity,
    is_unit,
    normalize_unit,
    parse_quantity_token,
    unit_kind,
)

__all__ = [
    "ParsedIngredient",
    "coerce_quantity",
    "extract_notes",
    "format_ingredient",
    "format_quantity",
    "is_unit",
    "normalize_unit",
    "parse_ingredient",
    "parse_quantity_token",
    "scale_ingredient",
    "unit_kind",
]
