"""Presentation-tree building and rich formatting helpers."""

from __future__ import annotations

from rich.text import Text

from menu_view.models import (
    Category,
    CategoryNode,
    ItemNode,
    MenuData,
    MenuItem,
    PresentationTree,
)

COLLAPSED_GLYPH = "▶"
EXPANDED_GLYPH = "▼"


def format_price(value: float) -> str:
    """Format a euro amount with exactly two decimals, e.g. 3.5 -> €3.50."""
    return f"€{value:.2f}"


def indicator_glyph(expanded: bool) -> str:
    return EXPANDED_GLYPH if expanded else COLLAPSED_GLYPH


def _id_key(value: int | str) -> tuple[int, int | float | str]:
    # Numeric ids sort before string ids so mixed datasets still compare.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value)
    return (1, str(value))


def _category_sort_key(category: Category) -> tuple:
    return (category.display_order, _id_key(category.category_id))


def _item_sort_key(item: MenuItem) -> tuple:
    return (item.display_order, _id_key(item.item_id))


def to_item_node(item: MenuItem) -> ItemNode:
    return ItemNode(
        item_id=item.item_id,
        name=item.name,
        description=item.description,
        price_text=format_price(item.price_euro),
    )


def _grouped_tree(dataset: MenuData) -> PresentationTree:
    tree: PresentationTree = []
    categories = sorted((c for c in dataset.categories if c.is_active), key=_category_sort_key)
    for category in categories:
        items = sorted(
            (
                item
                for item in dataset.menu_items
                if item.category_id == category.category_id and item.is_available
            ),
            key=_item_sort_key,
        )
        if not items:
            continue
        tree.append(
            CategoryNode(
                category_id=category.category_id,
                name=category.name,
                description=category.description,
                items=tuple(to_item_node(item) for item in items),
            )
        )
    return tree


def _flat_tree(dataset: MenuData) -> PresentationTree:
    categories = dataset.category_by_id()

    def search_sort_key(item: MenuItem) -> tuple:
        category = categories.get(item.category_id)
        if category is None:
            # Unresolved category: skip the category tier, after all resolved items.
            return (1, 0, _item_sort_key(item))
        return (0, category.display_order, _item_sort_key(item))

    items = sorted((item for item in dataset.menu_items if item.is_available), key=search_sort_key)
    return [to_item_node(item) for item in items]


def build_presentation_tree(dataset: MenuData, is_search_mode: bool) -> PresentationTree:
    """Build the ordered presentation tree for ``dataset``.

    Normal mode groups available items under active, non-empty categories.
    Search mode returns a flat item list with no category nodes.
    """
    if is_search_mode:
        return _flat_tree(dataset)
    return _grouped_tree(dataset)


def format_category_header(node: CategoryNode, expanded: bool) -> Text:
    """Render a category header with its directional indicator."""
    text = Text()
    text.append(f"{indicator_glyph(expanded)} ", style="bold #5fbf72")
    text.append(node.name, style="bold")
    if node.description:
        text.append(f"\n  {node.description}", style="dim")
    return text


def format_item_block(node: ItemNode) -> Text:
    """Render one item block: name, price and description."""
    text = Text()
    text.append(node.name, style="bold")
    text.append(f"  {node.price_text}", style="bold #ffffff on #2f6db5")
    if node.description:
        text.append(f"\n{node.description}", style="white")
    return text
