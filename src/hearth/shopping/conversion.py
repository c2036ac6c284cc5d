"""Build shopping list inputs from recipes and meal plans.

Both callers hand the merge service pre-scaled ingredients with a note
saying which recipe they came from.
"""

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from hearth.config import get_settings
from hearth.normalize.ingredients import ParsedIngredient, scale_ingredient
from hearth.schemas import AddItemInput
from hearth.shopping.models import AddItemResult


@dataclass
class MealPlanEntry:
    """One planned meal: a recipe and its ingredients."""

    recipe_id: int
    recipe_name: str
    ingredients: Sequence[ParsedIngredient]


@dataclass
class MergeSummary:
    """Counts reported back to the user after adding ingredients."""

    added_count: int = 0
    merged_count: int = 0

    @property
    def total(self) -> int:
        return self.added_count + self.merged_count

    @classmethod
    def from_results(cls, results: Iterable[AddItemResult]) -> "MergeSummary":
        summary = cls()
        for result in results:
            if result.merged:
                summary.merged_count += 1
            else:
                summary.added_count += 1
        return summary


def attribution_note(notes: str | None, recipe_name: str) -> str:
    """Note recording which recipe an ingredient came from."""
    if notes:
        return f"{notes} (from {recipe_name})"
    return f"From {recipe_name}"


def _item_input(
    list_id: int,
    ingredient: ParsedIngredient,
    recipe_name: str,
    user_id: str | None,
) -> AddItemInput:
    quantity = ingredient.quantity
    if quantity is None:
        quantity = get_settings().default_quantity
    return AddItemInput(
        list_id=list_id,
        name=ingredient.name,
        quantity=quantity,
        unit=ingredient.unit,
        notes=attribution_note(ingredient.notes, recipe_name),
        created_by=user_id,
        updated_by=user_id,
    )


def recipe_item_inputs(
    list_id: int,
    recipe_name: str,
    ingredients: Iterable[ParsedIngredient],
    serving_multiplier: float = 1.0,
    user_id: str | None = None,
) -> list[AddItemInput]:
    """
    Inputs for adding selected recipe ingredients to a list.

    Args:
        list_id: Target shopping list.
        recipe_name: Used in the attribution note.
        ingredients: The selected ingredients.
        serving_multiplier: Ratio of wanted servings to recipe servings.
        user_id: Recorded as creator/updater.
    """
    inputs = []
    for ingredient in ingredients:
        if serving_multiplier != 1:
            ingredient = scale_ingredient(ingredient, serving_multiplier)
        inputs.append(_item_input(list_id, ingredient, recipe_name, user_id))
    return inputs


def meal_plan_item_inputs(
    list_id: int,
    entries: Sequence[MealPlanEntry],
    user_id: str | None = None,
) -> list[AddItemInput]:
    """
    Inputs for adding every ingredient of a meal plan to a list.

    A recipe planned several times contributes its ingredients once, with
    quantities multiplied by the number of times it appears. Ingredients
    without a quantity count as the default quantity per appearance.
    """
    repeat_counts = Counter(entry.recipe_id for entry in entries)
    seen: set[int] = set()
    inputs = []

    for entry in entries:
        if entry.recipe_id in seen:
            continue
        seen.add(entry.recipe_id)

        count = repeat_counts[entry.recipe_id]
        for ingredient in entry.ingredients:
            if ingredient.quantity is None:
                ingredient = replace(ingredient, quantity=get_settings().default_quantity)
            if count > 1:
                ingredient = scale_ingredient(ingredient, count)
            inputs.append(_item_input(list_id, ingredient, entry.recipe_name, user_id))

    return inputs
