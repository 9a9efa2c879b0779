"""API routers for the grocerylist application."""

from grocerylist.routers.basket import router as basket_router
from grocerylist.routers.ingredients import router as ingredients_router

__all__ = [
    "basket_router",
    "ingredients_router",
]
