"""Add-or-merge of ingredients into shopping lists."""

import asyncio
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import replace

from hearth.config import get_settings
from hearth.logging_config import LoggingContext, get_logger
from hearth.normalize.units import coerce_quantity
from hearth.schemas import AddItemInput
from hearth.shopping.matcher import combine_notes, find_match
from hearth.shopping.models import AddItemResult, ShoppingItem
from hearth.shopping.store import ShoppingItemStore

logger = get_logger(__name__)


class ShoppingListMerger:
    """
    Adds ingredients to shopping lists, merging duplicates into one item.

    An incoming ingredient merges into the first unchecked item with the
    same singularized name and the same unit:
    - Quantity is summed
    - Notes are combined without repeating text
    - Other properties of the existing item are kept

    Calls against the same list are serialized with a per-list lock, since
    every match decision depends on seeing all earlier writes.
    """

    def __init__(self, store: ShoppingItemStore, default_quantity: float | None = None):
        self.store = store
        self.default_quantity = (
            default_quantity if default_quantity is not None else get_settings().default_quantity
        )
        # One lock per list id seen, kept for the lifetime of the merger
        self._locks: defaultdict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    async def add_or_merge(self, item_input: AddItemInput) -> AddItemResult:
        """
        Add one ingredient to its list, merging with a matching item if present.

        Args:
            item_input: The ingredient, already scaled by the caller.

        Returns:
            AddItemResult with the stored item and whether it was merged.
        """
        async with self._locks[item_input.list_id]:
            with LoggingContext(list_id=item_input.list_id):
                return await self._add_or_merge(item_input)

    async def add_or_merge_all(self, item_inputs: Iterable[AddItemInput]) -> list[AddItemResult]:
        """
        Add a batch of ingredients, one at a time, in order.

        Each input sees the writes of the inputs before it, so two mentions
        of the same ingredient in one batch end up as a single item.
        """
        results: list[AddItemResult] = []

        for item_input in item_inputs:
            results.append(await self.add_or_merge(item_input))

        merged_count = sum(1 for r in results if r.merged)
        logger.info(
            f"Processed {len(results)} shopping items: "
            f"{len(results) - merged_count} added, {merged_count} merged"
        )
        return results

    async def _add_or_merge(self, item_input: AddItemInput) -> AddItemResult:
        try:
            existing_items = await self.store.list_items(item_input.list_id)
        except Exception as e:
            logger.error(f"Failed to load items for list {item_input.list_id}: {e}")
            raise

        match = find_match(item_input.name, item_input.unit, existing_items)

        if match is not None:
            return await self._merge(match, item_input)
        return await self._insert(existing_items, item_input)

    async def _merge(self, match: ShoppingItem, item_input: AddItemInput) -> AddItemResult:
        previous_quantity = coerce_quantity(match.quantity, self.default_quantity)
        incoming_quantity = coerce_quantity(item_input.quantity, self.default_quantity)

        merged_item = replace(
            match,
            quantity=previous_quantity + incoming_quantity,
            notes=combine_notes(match.notes, item_input.notes),
            updated_by=(
                item_input.updated_by if item_input.updated_by is not None else match.updated_by
            ),
        )

        try:
            updated = await self.store.update(merged_item)
        except Exception as e:
            logger.error(f"Failed to merge '{item_input.name}' into item {match.id}: {e}")
            raise

        logger.debug(
            f"Merged '{item_input.name}' into item {updated.id}: "
            f"{previous_quantity} -> {updated.quantity}"
        )
        return AddItemResult(item=updated, merged=True, previous_quantity=previous_quantity)

    async def _insert(
        self,
        existing_items: list[ShoppingItem],
        item_input: AddItemInput,
    ) -> AddItemResult:
        if item_input.position is not None:
            position = item_input.position
        elif existing_items:
            position = max(item.position for item in existing_items) + 1
        else:
            position = 0

        new_item = ShoppingItem(
            id=0,
            list_id=item_input.list_id,
            name=item_input.name,
            quantity=coerce_quantity(item_input.quantity, self.default_quantity),
            unit=item_input.unit,
            notes=item_input.notes,
            checked=False,
            position=position,
            category=item_input.category,
            created_by=item_input.created_by,
            updated_by=item_input.updated_by,
        )

        try:
            inserted = await self.store.insert(new_item)
        except Exception as e:
            logger.error(f"Failed to insert '{item_input.name}': {e}")
            raise

        logger.debug(f"Added '{inserted.name}' as item {inserted.id} at position {position}")
        return AddItemResult(item=inserted, merged=False)
