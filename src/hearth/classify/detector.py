"""Allergen and dietary detection over ingredient lines."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from hearth.classify.keywords import (
    ALLERGEN_KEYWORDS,
    ANIMAL_PRODUCT_KEYWORDS,
    FISH_KEYWORDS,
    MEAT_KEYWORDS,
    AllergenTag,
    DietaryTag,
)
from hearth.schemas import CategoryRow

_WORD_RE = re.compile(r"\w+")


def tokenize(text: str) -> tuple[str, ...]:
    """Split text into lowercase word tokens."""
    return tuple(_WORD_RE.findall(text.lower()))


class KeywordSet:
    """
    A set of keywords matched on whole words.

    A keyword matches a line when its word tokens appear contiguously in the
    line's tokens, so "nut" matches "pine nut" but not "coconut" or "nutmeg".
    """

    def __init__(self, keywords: Iterable[str]):
        self.phrases: tuple[tuple[str, ...], ...] = tuple(
            dict.fromkeys(tokens for tokens in map(tokenize, keywords) if tokens)
        )

    def matches(self, text: str) -> bool:
        """Check whether any keyword occurs in the text as whole words."""
        tokens = tokenize(text)
        if not tokens:
            return False

        for phrase in self.phrases:
            size = len(phrase)
            for start in range(len(tokens) - size + 1):
                if tokens[start : start + size] == phrase:
                    return True
        return False


ALLERGEN_SETS: dict[AllergenTag, KeywordSet] = {
    tag: KeywordSet(keywords) for tag, keywords in ALLERGEN_KEYWORDS.items()
}
MEAT_SET = KeywordSet(MEAT_KEYWORDS)
FISH_SET = KeywordSet(FISH_KEYWORDS)
ANIMAL_PRODUCT_SET = KeywordSet(ANIMAL_PRODUCT_KEYWORDS)


def classify_allergens(lines: Iterable[str]) -> set[AllergenTag]:
    """Return every allergen whose keywords appear in any line."""
    detected: set[AllergenTag] = set()
    for line in lines:
        for tag, keywords in ALLERGEN_SETS.items():
            if tag not in detected and keywords.matches(line):
                detected.add(tag)
    return detected


def classify_dietary(lines: Iterable[str]) -> set[DietaryTag]:
    """
    Derive dietary tags from ingredient lines.

    Any meat rules out every tag, even alongside fish. Without meat, fish
    gives pescatarian; without fish, other animal products give vegetarian;
    otherwise the list is vegan and vegetarian.
    """
    has_meat = False
    has_fish = False
    has_animal_product = False

    for line in lines:
        has_meat = has_meat or MEAT_SET.matches(line)
        has_fish = has_fish or FISH_SET.matches(line)
        has_animal_product = has_animal_product or ANIMAL_PRODUCT_SET.matches(line)

    if not has_meat and not has_fish and not has_animal_product:
        return {DietaryTag.VEGAN, DietaryTag.VEGETARIAN}
    elif not has_meat and not has_fish:
        return {DietaryTag.VEGETARIAN}
    elif not has_meat and has_fish:
        return {DietaryTag.PESCATARIAN}
    return set()


@dataclass
class ClassificationResult:
    """Allergens and dietary tags detected for one ingredient list."""

    allergens: set[AllergenTag] = field(default_factory=set)
    dietary: set[DietaryTag] = field(default_factory=set)

    def category_rows(self) -> list[CategoryRow]:
        """Rows for the recipe category table, allergens first."""
        rows = [
            CategoryRow(category_type="allergen", category_value=tag.value)
            for tag in sorted(self.allergens)
        ]
        rows.extend(
            CategoryRow(category_type="dietary", category_value=tag.value)
            for tag in sorted(self.dietary)
        )
        return rows


def classify_all(lines: Iterable[str]) -> ClassificationResult:
    """Run allergen and dietary classification over the same lines."""
    lines = list(lines)
    return ClassificationResult(
        allergens=classify_allergens(lines),
        dietary=classify_dietary(lines),
    )
