"""Shopping list item types."""

from dataclasses import dataclass


@dataclass
class ShoppingItem:
    """A single row of a shopping list."""

    id: int
    list_id: int
    name: str
    quantity: float
    unit: str | None = None
    notes: str | None = None
    checked: bool = False
    position: int = 0

    # Carried through untouched
    category: str | None = None
    created_by: str | None = None
    updated_by: str | None = None


@dataclass
class AddItemResult:
    """Outcome of adding one ingredient to a list."""

    item: ShoppingItem
    merged: bool
    previous_quantity: float | None = None
