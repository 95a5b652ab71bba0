"""Live search over menu items."""

from __future__ import annotations

from dataclasses import replace

from menu_view.models import MenuData, MenuItem


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def item_matches(item: MenuItem, normalized_query: str) -> bool:
    """Case-insensitive substring match on item name or description."""
    return normalized_query in item.name.lower() or normalized_query in (item.description or "").lower()


def filter_menu(dataset: MenuData, query: str | None) -> MenuData:
    """Return the items matching ``query``; a blank query returns ``dataset`` itself.

    Categories are passed through untouched and never matched against the
    query. The source dataset is never modified.
    """
    q = normalize_query(query)
    if not q:
        return dataset
    return replace(dataset, menu_items=tuple(item for item in dataset.menu_items if item_matches(item, q)))
