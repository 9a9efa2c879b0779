"""Basket handling and grocery-list aggregation."""

from grocerylist.plan.basket import (
    BasketItem,
    BasketStore,
    GroceryItem,
    get_basket_store,
)
from grocerylist.plan.grocery_list import (
    AggregationKey,
    MergedEntry,
    aggregate_lines,
)

__all__ = [
    "AggregationKey",
    "BasketItem",
    "BasketStore",
    "GroceryItem",
    "MergedEntry",
    "aggregate_lines",
    "get_basket_store",
]
