"""Free-text ingredient line parsing."""

import re
from dataclasses import dataclass, replace

from hearth.normalize.units import (
    format_quantity,
    is_unit,
    normalize_unit,
    parse_quantity_token,
)

# Descriptors stripped from the end of a line when they follow a comma
INTENSITY_ADVERBS: tuple[str, ...] = ("finely", "roughly", "freshly", "thinly", "coarsely")

TRAILING_DESCRIPTORS: tuple[str, ...] = (
    "chopped",
    "minced",
    "diced",
    "sliced",
    "grated",
    "crushed",
    "peeled",
    "seeded",
    "julienned",
    "cubed",
    "melted",
    "softened",
    "room temperature",
    "at room temperature",
    "divided",
    "optional",
    "to taste",
    "for garnish",
    "for serving",
    "packed",
)

_PAREN_RE = re.compile(r"\(([^)]+)\)")
_DESCRIPTOR_RE = re.compile(
    r",\s*((?:(?:{adverbs}) )?(?:{descriptors}))".format(
        adverbs="|".join(INTENSITY_ADVERBS),
        descriptors="|".join(re.escape(d) for d in TRAILING_DESCRIPTORS),
    ),
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ParsedIngredient:
    """Structured form of one ingredient line."""

    quantity: float | None
    unit: str | None
    name: str
    notes: str | None = None


def extract_notes(text: str) -> tuple[str, str | None]:
    """
    Pull parenthetical groups and trailing descriptors out of a line.

    Parentheses are handled first so a descriptor inside them is captured
    once, as part of the parenthetical note.

    Returns:
        Tuple of (remaining text, joined notes or None).
    """
    notes: list[str] = []

    def _capture_paren(match: re.Match) -> str:
        notes.append(match.group(1).strip())
        return " "

    def _capture_descriptor(match: re.Match) -> str:
        notes.append(match.group(1).strip())
        return ""

    clean = _PAREN_RE.sub(_capture_paren, text)
    clean = _DESCRIPTOR_RE.sub(_capture_descriptor, clean)
    clean = " ".join(clean.split())

    return clean, ", ".join(notes) if notes else None


def parse_ingredient(text: str) -> ParsedIngredient:
    """
    Parse an ingredient line into quantity, unit, name and notes.

    Never raises: anything that cannot be read as a quantity or unit is kept
    in the name, and an empty name falls back to the whole line. A blank
    line therefore gives an empty name; callers drop blank lines first.

    Examples:
        "2 cups all-purpose flour" -> (2, "cups", "all-purpose flour", None)
        "1/2 cup butter, melted" -> (0.5, "cups", "butter", "melted")
        "3 large eggs" -> (3, "large", "eggs", None)
        "Salt, to taste" -> (None, None, "Salt", "to taste")
    """
    clean, notes = extract_notes(text)
    tokens = clean.split()

    quantity: float | None = None
    unit: str | None = None
    cursor = 0

    if tokens:
        quantity = parse_quantity_token(tokens[0])

    if quantity is not None:
        cursor = 1
        # "1 1/2" spans two tokens
        if len(tokens) > 1:
            combined = parse_quantity_token(f"{tokens[0]} {tokens[1]}")
            if combined is not None and combined != quantity:
                quantity = combined
                cursor = 2

    if cursor < len(tokens):
        candidate = re.sub(r"[.,]", "", tokens[cursor].lower())
        if is_unit(candidate):
            unit = normalize_unit(candidate)
            cursor += 1

    if cursor < len(tokens) and tokens[cursor].lower() == "of":
        cursor += 1

    name = " ".join(tokens[cursor:]).strip() or text.strip()

    return ParsedIngredient(quantity=quantity, unit=unit, name=name, notes=notes)


def scale_ingredient(ingredient: ParsedIngredient, multiplier: float) -> ParsedIngredient:
    """Return a copy with the quantity multiplied; a missing quantity stays missing."""
    if ingredient.quantity is None:
        return ingredient
    return replace(ingredient, quantity=ingredient.quantity * multiplier)


def format_ingredient(ingredient: ParsedIngredient) -> str:
    """Format a parsed ingredient back to a single display line."""
    parts: list[str] = []

    if ingredient.quantity is not None:
        parts.append(format_quantity(ingredient.quantity))
    if ingredient.unit:
        parts.append(ingredient.unit)
    parts.append(ingredient.name)
    if ingredient.notes:
        parts.append(f"({ingredient.notes})")

    return " ".join(parts)
