"""Common API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from grocerylist.normalize.categories import Category


class ParsedIngredientResponse(BaseModel):
    """One ingredient line split into quantity, unit and name."""

    model_config = ConfigDict(from_attributes=True)

    quantity: float = Field(ge=0)
    unit: str
    name: str
    raw: str


class MergedEntryResponse(BaseModel):
    """A consolidated grocery-list entry."""

    name: str
    unit: str
    total_quantity: float
    display_name: str
    category: Category
    quantity: str


class GroceryItemResponse(BaseModel):
    """A grocery-list line as shown to the user."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    category: Category
    quantity: str
    checked: bool


class BasketItemResponse(BaseModel):
    """A recipe in the basket."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    recipe_id: str
    recipe_name: str
    servings: int
    ingredients: list[str]
