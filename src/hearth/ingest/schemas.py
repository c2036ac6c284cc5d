"""Pydantic schemas for recipes handed over by the import collaborator."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from hearth.normalize.ingredients import ParsedIngredient
from hearth.schemas import CategoryRow


class ScrapedRecipe(BaseModel):
    """Recipe name and raw ingredient lines produced by a scraper."""

    name: str = Field(default="Untitled Recipe")
    ingredients: list[str] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def default_name(cls, v: Any) -> str:
        """Ensure name is never None or empty."""
        if not v or not str(v).strip():
            return "Untitled Recipe"
        return str(v).strip()

    @field_validator("ingredients", mode="before")
    @classmethod
    def clean_ingredients(cls, v: Any) -> list[str]:
        """Drop missing and blank lines and trim the rest."""
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        return [str(line).strip() for line in v if line is not None and str(line).strip()]


class ImportedIngredient(BaseModel):
    """A parsed ingredient line with its place in the recipe."""

    position: int = Field(ge=0)
    original_text: str
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None
    name: str
    notes: str | None = None

    @classmethod
    def from_parsed(
        cls, parsed: ParsedIngredient, position: int, original_text: str
    ) -> "ImportedIngredient":
        return cls(
            position=position,
            original_text=original_text,
            quantity=parsed.quantity,
            unit=parsed.unit,
            name=parsed.name,
            notes=parsed.notes,
        )

    def to_parsed(self) -> ParsedIngredient:
        return ParsedIngredient(
            quantity=self.quantity, unit=self.unit, name=self.name, notes=self.notes
        )


class ImportedRecipe(BaseModel):
    """Everything the persistence layer stores for one imported recipe."""

    name: str
    ingredients: list[ImportedIngredient] = Field(default_factory=list)
    categories: list[CategoryRow] = Field(default_factory=list)
