"""Allergen and dietary tagging of ingredient lists."""

from hearth.classify.detector import (
    ClassificationResult,
    KeywordSet,
    classify_all,
    classify_allergens,
    classify_dietary,
)
from hearth.classify.keywords import AllergenTag, DietaryTag

__all__ = [
    "AllergenTag",
    "ClassificationResult",
    "DietaryTag",
    "KeywordSet",
    "classify_all",
    "classify_allergens",
    "classify_dietary",
]
