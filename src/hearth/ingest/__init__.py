"""Import scraped recipes into structured ingredients and category tags."""

from hearth.ingest.recipes import process_scraped_recipe
from hearth.ingest.schemas import ImportedIngredient, ImportedRecipe, ScrapedRecipe

__all__ = [
    "ImportedIngredient",
    "ImportedRecipe",
    "ScrapedRecipe",
    "process_scraped_recipe",
]
