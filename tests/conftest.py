"""Pytest fixtures for menu-view tests."""
import pytest

from menu_view.config import DEBUG_LOG_ENV
from menu_view.data import load_menu_data
from menu_view.models import Category, MenuData, MenuItem


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    """Redirect the debug log into the test's temp directory."""
    path = tmp_path / "debug.log"
    monkeypatch.setenv(DEBUG_LOG_ENV, str(path))
    return path


@pytest.fixture
def salads():
    return Category(category_id=1, name="Salads", description="Fresh greens", display_order=1)


@pytest.fixture
def wraps():
    return Category(category_id=2, name="Wraps", display_order=2)


@pytest.fixture
def chicken_menu(salads, wraps):
    """Two categories, both with a chicken dish."""
    return MenuData(
        categories=(wraps, salads),
        menu_items=(
            MenuItem(
                item_id=2,
                category_id=2,
                name="Grilled Chicken Wrap",
                description="Chicken, lettuce and garlic mayo",
                price_euro=7.5,
                display_order=1,
            ),
            MenuItem(
                item_id=1,
                category_id=1,
                name="Grilled Chicken Caesar Salad",
                description="Romaine and parmesan",
                price_euro=8.5,
                display_order=1,
            ),
            MenuItem(
                item_id=3,
                category_id=1,
                name="Greek Salad",
                description="Feta, olives, tomato",
                price_euro=7.9,
                display_order=2,
            ),
        ),
    )


@pytest.fixture
def raw_menu():
    """Raw data-contract menu used for loader and app tests."""
    return {
        "categories": [
            {"id": 2, "name": "Wraps", "description": None, "displayOrder": 2, "isActive": True},
            {"id": 1, "name": "Salads", "description": "Fresh greens", "displayOrder": 1, "isActive": True},
            {"id": 3, "name": "Specials", "description": "Gone for now", "displayOrder": 3, "isActive": False},
        ],
        "menuItems": [
            {
                "id": 1,
                "categoryId": 1,
                "name": "Grilled Chicken Caesar Salad",
                "description": "Romaine and parmesan",
                "priceEuro": 8.5,
                "displayOrder": 1,
                "isAvailable": True,
            },
            {
                "id": 2,
                "categoryId": 2,
                "name": "Grilled Chicken Wrap",
                "description": "Chicken, lettuce and garlic mayo",
                "priceEuro": 7.5,
                "displayOrder": 1,
                "isAvailable": True,
            },
            {
                "id": 3,
                "categoryId": 3,
                "name": "Chicken Curry",
                "description": "Seasonal",
                "priceEuro": 11,
                "displayOrder": 1,
                "isAvailable": True,
            },
            {
                "id": 4,
                "categoryId": 1,
                "name": "Quinoa Bowl",
                "description": "Sold out today",
                "priceEuro": 9.25,
                "displayOrder": 2,
                "isAvailable": False,
            },
        ],
    }


@pytest.fixture
def loaded_menu(raw_menu):
    return load_menu_data(raw_menu)
