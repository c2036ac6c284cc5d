"""Duplicate detection for shopping list items.

Two mentions refer to the same item when their names agree after
singularizing each word and their units agree after trimming and
lowercasing. Unit synonyms are not folded here; callers pass units that
went through ``hearth.normalize.units.normalize_unit`` already.
"""

from collections.abc import Iterable

from hearth.shopping.models import ShoppingItem

IRREGULAR_PLURALS: dict[str, str] = {
    "potatoes": "potato",
    "tomatoes": "tomato",
    "leaves": "leaf",
    "loaves": "loaf",
    "halves": "half",
    "knives": "knife",
    "shelves": "shelf",
    "calves": "calf",
    "wolves": "wolf",
    "wives": "wife",
    "children": "child",
    "people": "person",
    "teeth": "tooth",
    "feet": "foot",
    "geese": "goose",
    "mice": "mouse",
    "dice": "die",
    "cherries": "cherry",
    "berries": "berry",
    "strawberries": "strawberry",
    "blueberries": "blueberry",
    "raspberries": "raspberry",
    "blackberries": "blackberry",
    "cranberries": "cranberry",
    "anchovies": "anchovy",
}

# Stems after which a plural "-es" is dropped whole (boxes, dishes, tomatoes)
ES_STEM_ENDINGS: tuple[str, ...] = ("sh", "ch", "ss", "x", "z", "o")


def singularize(word: str) -> str:
    """
    Reduce an English noun to an approximate singular form.

    The irregular table wins; then -ies -> -y, -ves -> -f, -es after a
    sibilant or "o" stem, and finally a bare -s unless the word ends in -ss.
    """
    lower = word.lower().strip()

    if lower in IRREGULAR_PLURALS:
        return IRREGULAR_PLURALS[lower]

    if lower.endswith("ies") and len(lower) > 3:
        return lower[:-3] + "y"
    if lower.endswith("ves") and len(lower) > 3:
        return lower[:-3] + "f"
    if lower.endswith("es") and len(lower) > 2:
        stem = lower[:-2]
        if stem.endswith(ES_STEM_ENDINGS):
            return stem
    if lower.endswith("s") and not lower.endswith("ss") and len(lower) > 1:
        return lower[:-1]

    return lower


def normalize_item_name(name: str) -> str:
    """Lowercase a name and singularize each word."""
    return " ".join(singularize(word) for word in name.lower().split())


def names_match(first: str, second: str) -> bool:
    """Check if two item names refer to the same thing, ignoring plurals and case."""
    return normalize_item_name(first) == normalize_item_name(second)


def normalize_unit_key(unit: str | None) -> str | None:
    """Comparison key for a unit; None, "" and whitespace all mean no unit."""
    if not unit or not unit.strip():
        return None
    return unit.lower().strip()


def units_match(first: str | None, second: str | None) -> bool:
    """Check if two units are the same, treating every blank form as equal."""
    return normalize_unit_key(first) == normalize_unit_key(second)


def combine_notes(existing: str | None, incoming: str | None) -> str | None:
    """
    Merge two note strings without repeating text.

    A note contained in the other one is dropped in favour of the longer
    note, so "chopped" + "finely chopped" stays "finely chopped".
    """
    existing = (existing or "").strip()
    incoming = (incoming or "").strip()

    if not existing and not incoming:
        return None
    if not existing:
        return incoming
    if not incoming:
        return existing
    if existing == incoming or incoming in existing:
        return existing
    if existing in incoming:
        return incoming

    return f"{existing}; {incoming}"


def find_match(
    name: str,
    unit: str | None,
    candidates: Iterable[ShoppingItem],
) -> ShoppingItem | None:
    """
    Find the first unchecked candidate with the same name and unit.

    Candidates are scanned in order and the earliest match wins. Checked
    items never match.
    """
    target_name = normalize_item_name(name)
    target_unit = normalize_unit_key(unit)

    for item in candidates:
        if item.checked:
            continue
        if normalize_item_name(item.name) != target_name:
            continue
        if normalize_unit_key(item.unit) != target_unit:
            continue
        return item

    return None
