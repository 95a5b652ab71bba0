"""Menu data loading: raw data-contract records into typed models."""

from __future__ import annotations

import json
import math
import os
from collections.abc import Mapping
from pathlib import Path

from menu_view.config import MENU_DATA_PATH_ENV
from menu_view.constant import MOCK_MENU_DATA
from menu_view.models import Category, MenuData, MenuItem


class MenuDataError(ValueError):
    """Raised when raw menu data does not match the data contract."""


def _require(record: Mapping[str, object], key: str, kind: str) -> object:
    if key not in record or record[key] is None:
        raise MenuDataError(f"{kind} record is missing {key!r}: {dict(record)!r}")
    return record[key]


def _identifier(record: Mapping[str, object], key: str, kind: str) -> int | str:
    value = _require(record, key, kind)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise MenuDataError(f"{kind} {key!r} must be an int or string, got {value!r}")
    return value


def _number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MenuDataError(f"{field_name} must be numeric, got {value!r}")
    if not math.isfinite(value):
        raise MenuDataError(f"{field_name} must be finite, got {value!r}")
    return value


def _flag(record: Mapping[str, object], key: str, default: bool) -> bool:
    value = record.get(key, default)
    if not isinstance(value, bool):
        raise MenuDataError(f"{key} must be true or false, got {value!r}")
    return value


def _category_from_raw(record: Mapping[str, object]) -> Category:
    description = record.get("description")
    return Category(
        category_id=_identifier(record, "id", "category"),
        name=str(_require(record, "name", "category")),
        description=str(description) if description is not None else None,
        display_order=_number(record.get("displayOrder", 0), "displayOrder"),
        is_active=_flag(record, "isActive", True),
    )


def _item_from_raw(record: Mapping[str, object]) -> MenuItem:
    price = _number(record.get("priceEuro", 0), "priceEuro")
    if price < 0:
        raise MenuDataError(f"priceEuro must be non-negative, got {price!r}")
    description = record.get("description")
    return MenuItem(
        item_id=_identifier(record, "id", "menu item"),
        category_id=_identifier(record, "categoryId", "menu item"),
        name=str(_require(record, "name", "menu item")),
        description=str(description) if description is not None else "",
        price_euro=price,
        display_order=_number(record.get("displayOrder", 0), "displayOrder"),
        is_available=_flag(record, "isAvailable", True),
    )


def load_menu_data(raw: Mapping[str, object] | None) -> MenuData:
    """Convert a raw ``{"categories": [...], "menuItems": [...]}`` mapping."""
    if not isinstance(raw, Mapping):
        raise MenuDataError("menu data must be a mapping with 'categories' and 'menuItems'")

    categories = raw.get("categories")
    items = raw.get("menuItems")
    if not isinstance(categories, list) or not isinstance(items, list):
        raise MenuDataError("menu data needs 'categories' and 'menuItems' lists")

    for record in (*categories, *items):
        if not isinstance(record, Mapping):
            raise MenuDataError(f"menu record must be an object, got {record!r}")

    return MenuData(
        categories=tuple(_category_from_raw(record) for record in categories),
        menu_items=tuple(_item_from_raw(record) for record in items),
    )


def load_menu_file(path: str | Path) -> MenuData:
    """Load menu data from a JSON file using the same contract."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise MenuDataError(f"cannot read menu file {str(path)!r}: {exc}") from exc
    return load_menu_data(raw)


def load_configured_menu() -> MenuData:
    """Load the menu named by MENU_VIEW_DATA_PATH, or the built-in mock menu."""
    override = os.environ.get(MENU_DATA_PATH_ENV, "").strip()
    if override:
        return load_menu_file(override)
    return load_menu_data(MOCK_MENU_DATA)
