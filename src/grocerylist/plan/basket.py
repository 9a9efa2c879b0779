"""In-memory basket and grocery list.

Every basket mutation runs the whole "mutate basket -> aggregate -> replace
grocery list" cycle under one lock, so two concurrent additions cannot
overwrite each other's grocery list.
"""

import asyncio
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from grocerylist.logging_config import LoggingContext, get_logger
from grocerylist.normalize.categories import Category
from grocerylist.normalize.scaling import scale_line
from grocerylist.plan.grocery_list import aggregate_lines

logger = get_logger(__name__)


@dataclass
class BasketItem:
    """A recipe added to the basket with a chosen serving count."""

    id: str
    recipe_id: str
    recipe_name: str
    servings: int
    ingredients: list[str]
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class GroceryItem:
    """A checkable line on the grocery list."""

    id: str
    name: str
    category: Category
    quantity: str
    checked: bool = False


class BasketStore:
    """Owns the basket and the grocery list derived from it."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._basket: dict[str, BasketItem] = {}
        self._grocery: dict[str, GroceryItem] = {}

    async def add_item(
        self,
        recipe_id: str,
        recipe_name: str,
        ingredients: Iterable[str],
        servings: int,
        recipe_servings: int | None = None,
    ) -> BasketItem:
        """
        Add a recipe to the basket and rebuild the grocery list.

        Args:
            recipe_id: ID of the recipe being added.
            recipe_name: Display name of the recipe.
            ingredients: Ingredient lines as written in the recipe.
            servings: Serving count chosen by the user.
            recipe_servings: Servings the lines are written for. When given,
                lines are scaled by servings / recipe_servings.

        Returns:
            The stored basket item with its (scaled) ingredient lines.
        """
        if servings < 1:
            raise ValueError(f"servings must be at least 1, got {servings}")

        lines = list(ingredients)
        if recipe_servings is not None and recipe_servings != servings:
            if recipe_servings < 1:
                raise ValueError(f"recipe_servings must be at least 1, got {recipe_servings}")
            multiplier = servings / recipe_servings
            lines = [scale_line(line, multiplier) for line in lines]

        item = BasketItem(
            id=str(uuid.uuid4()),
            recipe_id=recipe_id,
            recipe_name=recipe_name,
            servings=servings,
            ingredients=lines,
        )

        async with self._lock:
            with LoggingContext(basket_id=item.id):
                self._basket[item.id] = item
                logger.info(f"Added {recipe_name} ({servings} servings) to basket")
                self._rebuild_grocery_list()

        return item

    async def remove_item(self, item_id: str) -> bool:
        """Remove one basket item. Returns False if it does not exist."""
        async with self._lock:
            if self._basket.pop(item_id, None) is None:
                return False
            with LoggingContext(basket_id=item_id):
                logger.info("Removed item from basket")
                self._rebuild_grocery_list()
            return True

    async def clear(self) -> None:
        """Empty the basket and with it the grocery list."""
        async with self._lock:
            self._basket.clear()
            self._grocery.clear()
            logger.info("Basket cleared")

    async def list_items(self) -> list[BasketItem]:
        async with self._lock:
            return list(self._basket.values())

    async def grocery_items(self) -> list[GroceryItem]:
        async with self._lock:
            return list(self._grocery.values())

    async def toggle_grocery_item(self, item_id: str) -> GroceryItem | None:
        """Flip the checked state of a grocery item."""
        async with self._lock:
            item = self._grocery.get(item_id)
            if item is None:
                return None
            item.checked = not item.checked
            return item

    async def delete_checked(self) -> int:
        """Drop checked items from the grocery list. Returns how many were removed."""
        async with self._lock:
            checked_ids = [item_id for item_id, item in self._grocery.items() if item.checked]
            for item_id in checked_ids:
                del self._grocery[item_id]
            return len(checked_ids)

    def _rebuild_grocery_list(self) -> None:
        """Recompute the grocery list from the whole basket. Caller holds the lock."""
        lines = [line for item in self._basket.values() for line in item.ingredients]
        entries = aggregate_lines(lines)

        # Entries whose name and quantity did not change keep their id and check mark
        previous = {(item.name, item.quantity): item for item in self._grocery.values()}

        rebuilt: dict[str, GroceryItem] = {}
        for entry in entries:
            record = entry.as_record()
            old = previous.get((record["name"], record["quantity"]))
            item = GroceryItem(
                id=old.id if old else str(uuid.uuid4()),
                name=record["name"],
                category=entry.category,
                quantity=record["quantity"],
                checked=old.checked if old else False,
            )
            rebuilt[item.id] = item

        self._grocery = rebuilt
        logger.info(
            f"Grocery list rebuilt: {len(lines)} lines -> {len(rebuilt)} items"
        )


_store: BasketStore | None = None


def get_basket_store() -> BasketStore:
    """Get the process-wide basket store."""
    global _store
    if _store is None:
        _store = BasketStore()
    return _store
