"""Pytest configuration and shared fixtures."""

import pytest

from hearth.config import get_settings
from hearth.logging_config import clear_context
from hearth.shopping.models import ShoppingItem
from hearth.shopping.service import ShoppingListMerger
from hearth.shopping.store import InMemoryItemStore

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


@pytest.fixture(autouse=True)
def reset_settings_and_context():
    """Give every test fresh settings and an empty logging context."""
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


# =============================================================================
# Ingredient Line Fixtures
# =============================================================================


@pytest.fixture
def pancake_ingredients():
    """Ingredient lines of a vegetarian recipe with several allergens."""
    return [
        "1 1/2 cups all-purpose flour",
        "2 large eggs",
        "1 1/4 cups milk",
        "3 tbsp butter, melted",
        "1/4 cup chopped walnuts",
        "Salt, to taste",
    ]


@pytest.fixture
def vegan_ingredients():
    """Ingredient lines without any animal product."""
    return [
        "2 cups cooked rice",
        "1 can chickpeas (drained)",
        "3 tomatoes, diced",
        "2 tbsp olive oil",
        "1 tsp ground cumin",
    ]


# =============================================================================
# Shopping List Fixtures
# =============================================================================


@pytest.fixture
def make_item():
    """Factory for shopping items on list 1."""

    def _make(item_id: int, name: str, **kwargs) -> ShoppingItem:
        kwargs.setdefault("list_id", 1)
        kwargs.setdefault("quantity", 1.0)
        kwargs.setdefault("position", item_id - 1)
        return ShoppingItem(id=item_id, name=name, **kwargs)

    return _make


@pytest.fixture
def item_store():
    """Empty in-memory item store."""
    return InMemoryItemStore()


@pytest.fixture
def merger(item_store):
    """Merge service backed by the in-memory store."""
    return ShoppingListMerger(item_store)
