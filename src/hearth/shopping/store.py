"""Storage interface the merge service reads and writes through."""

import itertools
from dataclasses import replace
from typing import Protocol

from hearth.exceptions import ItemStoreError
from hearth.shopping.models import ShoppingItem


class ShoppingItemStore(Protocol):
    """Lookup and upsert access to the items of shopping lists."""

    async def list_items(self, list_id: int) -> list[ShoppingItem]:
        """Return the items of a list ordered by position."""
        ...

    async def insert(self, item: ShoppingItem) -> ShoppingItem:
        """Persist a new item and return it with its assigned id."""
        ...

    async def update(self, item: ShoppingItem) -> ShoppingItem:
        """Persist changes to an existing item and return the stored row."""
        ...


class InMemoryItemStore:
    """
    Dictionary-backed store.

    Items are copied on the way in and out, so callers never hold a
    reference to the stored row.
    """

    def __init__(self, items: list[ShoppingItem] | None = None):
        self._items: dict[int, ShoppingItem] = {}
        self._ids = itertools.count(1)
        for item in items or []:
            self._items[item.id] = replace(item)
        if self._items:
            self._ids = itertools.count(max(self._items) + 1)

    async def list_items(self, list_id: int) -> list[ShoppingItem]:
        rows = [replace(item) for item in self._items.values() if item.list_id == list_id]
        rows.sort(key=lambda item: (item.position, item.id))
        return rows

    async def insert(self, item: ShoppingItem) -> ShoppingItem:
        stored = replace(item, id=next(self._ids))
        self._items[stored.id] = stored
        return replace(stored)

    async def update(self, item: ShoppingItem) -> ShoppingItem:
        if item.id not in self._items:
            raise ItemStoreError(f"Shopping item {item.id} does not exist")
        self._items[item.id] = replace(item)
        return replace(item)

    async def set_checked(self, item_id: int, checked: bool = True) -> ShoppingItem:
        """Mark an item as obtained (or not)."""
        if item_id not in self._items:
            raise ItemStoreError(f"Shopping item {item_id} does not exist")
        self._items[item_id].checked = checked
        return replace(self._items[item_id])
