"""Domain and presentation models for menu-view."""

from __future__ import annotations

from dataclasses import dataclass

CategoryId = int | str


@dataclass(frozen=True)
class Category:
    """A named grouping of menu items."""

    category_id: CategoryId
    name: str
    description: str | None = None
    display_order: float = 0
    is_active: bool = True


@dataclass(frozen=True)
class MenuItem:
    """A sellable, searchable menu entry."""

    item_id: int | str
    category_id: CategoryId
    name: str
    description: str = ""
    price_euro: float = 0.0
    display_order: float = 0
    is_available: bool = True


@dataclass(frozen=True)
class MenuData:
    """Categories plus items, as loaded at startup."""

    categories: tuple[Category, ...]
    menu_items: tuple[MenuItem, ...]

    def category_by_id(self) -> dict[CategoryId, Category]:
        return {category.category_id: category for category in self.categories}


@dataclass(frozen=True)
class ItemNode:
    """A single item display block."""

    item_id: int | str
    name: str
    description: str
    price_text: str


@dataclass(frozen=True)
class CategoryNode:
    """A collapsible category header together with its items panel."""

    category_id: CategoryId
    name: str
    description: str | None
    items: tuple[ItemNode, ...]
    expanded: bool = False


PresentationNode = CategoryNode | ItemNode
PresentationTree = list[PresentationNode]
