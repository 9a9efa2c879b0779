"""API routes for the basket and the grocery list built from it."""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from grocerylist.logging_config import get_logger
from grocerylist.plan.basket import BasketStore, get_basket_store
from grocerylist.schemas import BasketItemResponse, GroceryItemResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["basket"])


# Request/Response schemas
class BasketItemRequest(BaseModel):
    """Request to add a recipe to the basket."""

    recipe_id: str
    recipe_name: str
    ingredients: list[str] = Field(default_factory=list)
    servings: int = Field(ge=1, le=100)
    recipe_servings: int | None = Field(
        None, ge=1, le=100, description="Servings the ingredient lines are written for"
    )


class BasketResponse(BaseModel):
    items: list[BasketItemResponse]
    total: int


class GroceryListResponse(BaseModel):
    items: list[GroceryItemResponse]
    total: int
    checked: int


class DeleteResponse(BaseModel):
    success: bool
    deleted: int = 0


@router.get("/basket", response_model=BasketResponse)
async def get_basket(store: BasketStore = Depends(get_basket_store)) -> BasketResponse:
    """List the recipes currently in the basket."""
    items = await store.list_items()
    return BasketResponse(
        items=[BasketItemResponse.model_validate(item) for item in items],
        total=len(items),
    )


@router.post("/basket", response_model=BasketItemResponse, status_code=status.HTTP_201_CREATED)
async def add_to_basket(
    request: BasketItemRequest,
    store: BasketStore = Depends(get_basket_store),
) -> BasketItemResponse:
    """
    Add a recipe to the basket.

    The grocery list is rebuilt from the whole basket before this returns.
    """
    item = await store.add_item(
        recipe_id=request.recipe_id,
        recipe_name=request.recipe_name,
        ingredients=request.ingredients,
        servings=request.servings,
        recipe_servings=request.recipe_servings,
    )
    return BasketItemResponse.model_validate(item)


@router.delete("/basket", response_model=DeleteResponse)
async def clear_basket(store: BasketStore = Depends(get_basket_store)) -> DeleteResponse:
    """Empty the basket and the grocery list."""
    await store.clear()
    return DeleteResponse(success=True)


@router.delete("/basket/{item_id}", response_model=DeleteResponse)
async def remove_from_basket(
    item_id: str,
    store: BasketStore = Depends(get_basket_store),
) -> DeleteResponse:
    """Remove one recipe from the basket."""
    if not await store.remove_item(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Basket item {item_id} not found",
        )
    return DeleteResponse(success=True, deleted=1)


@router.get("/grocery-list", response_model=GroceryListResponse)
async def get_grocery_list(
    store: BasketStore = Depends(get_basket_store),
) -> GroceryListResponse:
    """Get the consolidated grocery list."""
    items = await store.grocery_items()
    return GroceryListResponse(
        items=[GroceryItemResponse.model_validate(item) for item in items],
        total=len(items),
        checked=sum(1 for item in items if item.checked),
    )


@router.patch("/grocery-list/{item_id}/toggle", response_model=GroceryItemResponse)
async def toggle_grocery_item(
    item_id: str,
    store: BasketStore = Depends(get_basket_store),
) -> GroceryItemResponse:
    """Check or uncheck a grocery item."""
    item = await store.toggle_grocery_item(item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Grocery item {item_id} not found",
        )
    return GroceryItemResponse.model_validate(item)


@router.delete("/grocery-list/checked", response_model=DeleteResponse)
async def delete_checked_items(
    store: BasketStore = Depends(get_basket_store),
) -> DeleteResponse:
    """Remove every checked item from the grocery list."""
    deleted = await store.delete_checked()
    logger.info(f"Deleted {deleted} checked grocery items")
    return DeleteResponse(success=True, deleted=deleted)
