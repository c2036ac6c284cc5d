"""Shopping list item matching and add-or-merge."""

from hearth.shopping.conversion import (
    MealPlanEntry,
    MergeSummary,
    attribution_note,
    meal_plan_item_inputs,
    recipe_item_inputs,
)
from hearth.shopping.matcher import (
    combine_notes,
    find_match,
    names_match,
    normalize_item_name,
    normalize_unit_key,
    singularize,
    units_match,
)
from hearth.shopping.models import AddItemResult, ShoppingItem
from hearth.shopping.service import ShoppingListMerger
from hearth.shopping.store import InMemoryItemStore, ShoppingItemStore

__all__ = [
    "AddItemResult",
    "InMemoryItemStore",
    "MealPlanEntry",
    "MergeSummary",
    "ShoppingItem",
    "ShoppingItemStore",
    "ShoppingListMerger",
    "attribution_note",
    "combine_notes",
    "find_match",
    "meal_plan_item_inputs",
    "names_match",
    "normalize_item_name",
    "normalize_unit_key",
    "recipe_item_inputs",
    "singularize",
    "units_match",
]
