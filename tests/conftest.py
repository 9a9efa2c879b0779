"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from grocerylist.main import app
from grocerylist.plan.basket import BasketStore, get_basket_store

# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def adobo_ingredients():
    """Ingredient lines of a chicken adobo recipe for 4."""
    return [
        "1 kg chicken thigh",
        "1/2 cup soy sauce",
        "1/4 cup vinegar",
        "6 cloves garlic, crushed",
        "3 bay leaves",
        "1 tsp black pepper",
        "2 tbsp cooking oil",
    ]


@pytest.fixture
def silog_ingredients():
    """Ingredient lines of a garlic fried rice breakfast for 2."""
    return [
        "2 cups cooked rice",
        "2 eggs",
        "1 tbsp cooking oil",
        "Salt",
    ]


# =============================================================================
# Store and API Fixtures
# =============================================================================


@pytest.fixture
def basket_store():
    """A fresh, empty basket store."""
    return BasketStore()


@pytest.fixture
def client(basket_store):
    """API client whose basket endpoints use a fresh store."""
    app.dependency_overrides[get_basket_store] = lambda: basket_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
