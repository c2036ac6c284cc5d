"""Parse and classify the ingredients of an imported recipe."""

from typing import Any

from hearth.classify.detector import classify_all
from hearth.ingest.schemas import ImportedIngredient, ImportedRecipe, ScrapedRecipe
from hearth.logging_config import get_logger
from hearth.normalize.ingredients import parse_ingredient

logger = get_logger(__name__)


def process_scraped_recipe(recipe: ScrapedRecipe | dict[str, Any]) -> ImportedRecipe:
    """
    Turn scraped ingredient lines into stored ingredients and category tags.

    Classification runs over the original lines, not the parsed names, so
    notes such as "(made with anchovies)" still count.

    Args:
        recipe: Validated ScrapedRecipe or the raw dict from the scraper.

    Returns:
        ImportedRecipe with positioned ingredients and category rows.
    """
    if not isinstance(recipe, ScrapedRecipe):
        recipe = ScrapedRecipe.model_validate(recipe)

    ingredients = [
        ImportedIngredient.from_parsed(parse_ingredient(line), position, line)
        for position, line in enumerate(recipe.ingredients)
    ]
    classification = classify_all(recipe.ingredients)

    logger.info(
        f"Imported '{recipe.name}': {len(ingredients)} ingredients, "
        f"allergens={sorted(t.value for t in classification.allergens)}, "
        f"dietary={sorted(t.value for t in classification.dietary)}"
    )

    return ImportedRecipe(
        name=recipe.name,
        ingredients=ingredients,
        categories=classification.category_rows(),
    )
