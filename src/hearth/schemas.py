"""Boundary schemas exchanged with the persistence collaborators."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from hearth.config import get_settings
from hearth.normalize.units import coerce_quantity


class CategoryRow(BaseModel):
    """A recipe category tag as persisted by the tagging collaborator."""

    model_config = {"frozen": True}

    category_type: Literal["allergen", "dietary"]
    category_value: str


class AddItemInput(BaseModel):
    """One ingredient to add to a shopping list, already scaled by the caller."""

    list_id: int
    name: str = Field(min_length=1)
    quantity: float = Field(default_factory=lambda: get_settings().default_quantity, ge=0)
    unit: str | None = None
    notes: str | None = None
    category: str | None = None
    position: int | None = Field(default=None, ge=0)
    created_by: str | None = None
    updated_by: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: Any) -> Any:
        """Trim surrounding whitespace from the item name."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity_value(cls, v: Any) -> float:
        """Accept numbers or numeric strings; anything else becomes the default."""
        return coerce_quantity(v, get_settings().default_quantity)

    @field_validator("unit", "notes", "category", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty strings as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
