"""Editable static mock menu, in the raw camelCase data-contract shape."""

from __future__ import annotations

MOCK_MENU_DATA: dict[str, list[dict[str, object]]] = {
    "categories": [
        {"id": 3, "name": "Wraps", "description": "Warm tortilla wraps, made to order", "displayOrder": 3, "isActive": True},
        {"id": 1, "name": "Salads", "description": "Fresh greens and house dressings", "displayOrder": 1, "isActive": True},
        {"id": 2, "name": "Soups", "description": None, "displayOrder": 2, "isActive": True},
        {"id": 4, "name": "Desserts", "description": "Baked in-house every morning", "displayOrder": 5, "isActive": True},
        {"id": 5, "name": "Drinks", "description": "Soft drinks, juices and coffee", "displayOrder": 4, "isActive": True},
        {"id": 6, "name": "Seasonal Specials", "description": "Back next season", "displayOrder": 6, "isActive": False},
    ],
    "menuItems": [
        {
            "id": 1,
            "categoryId": 1,
            "name": "Grilled Chicken Caesar Salad",
            "description": "Romaine, parmesan, croutons and grilled chicken breast",
            "priceEuro": 8.5,
            "displayOrder": 1,
            "isAvailable": True,
        },
        {
            "id": 2,
            "categoryId": 1,
            "name": "Greek Salad",
            "description": "Tomato, cucumber, red onion, olives and feta",
            "priceEuro": 7.9,
            "displayOrder": 2,
            "isAvailable": True,
        },
        {
            "id": 3,
            "categoryId": 1,
            "name": "Quinoa Power Bowl",
            "description": "Quinoa, roasted sweet potato, avocado and tahini",
            "priceEuro": 9.25,
            "displayOrder": 3,
            "isAvailable": False,
        },
        {
            "id": 4,
            "categoryId": 2,
            "name": "Tomato Basil Soup",
            "description": "Slow-roasted tomatoes with fresh basil",
            "priceEuro": 5,
            "displayOrder": 1,
            "isAvailable": True,
        },
        {
            "id": 5,
            "categoryId": 2,
            "name": "Chicken Noodle Soup",
            "description": "Classic broth with egg noodles and vegetables",
            "priceEuro": 5.5,
            "displayOrder": 2,
            "isAvailable": True,
        },
        {
            "id": 6,
            "categoryId": 3,
            "name": "Grilled Chicken Wrap",
            "description": "Chicken, lettuce, tomato and garlic mayo",
            "priceEuro": 7.5,
            "displayOrder": 1,
            "isAvailable": True,
        },
        {
            "id": 7,
            "categoryId": 3,
            "name": "Falafel Wrap",
            "description": "Crispy falafel, hummus and pickled vegetables",
            "priceEuro": 7,
            "displayOrder": 2,
            "isAvailable": True,
        },
        {
            "id": 8,
            "categoryId": 4,
            "name": "Chocolate Brownie",
            "description": "Served warm with vanilla ice cream",
            "priceEuro": 4.5,
            "displayOrder": 1,
            "isAvailable": True,
        },
        {
            "id": 9,
            "categoryId": 4,
            "name": "Apple Crumble",
            "description": "Cinnamon apples under a buttery crumble",
            "priceEuro": 4.75,
            "displayOrder": 2,
            "isAvailable": True,
        },
        {
            "id": 10,
            "categoryId": 5,
            "name": "Fresh Orange Juice",
            "description": "Squeezed to order",
            "priceEuro": 3.5,
            "displayOrder": 2,
            "isAvailable": True,
        },
        {
            "id": 11,
            "categoryId": 5,
            "name": "Flat White",
            "description": "Double espresso with steamed milk",
            "priceEuro": 3.2,
            "displayOrder": 1,
            "isAvailable": True,
        },
        {
            "id": 12,
            "categoryId": 6,
            "name": "Pumpkin Chicken Curry",
            "description": "Mild curry with roasted pumpkin and rice",
            "priceEuro": 11,
            "displayOrder": 1,
            "isAvailable": True,
        },
    ],
}
