"""Main Textual app class and menu widgets."""

from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Click
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Header, Input, Static

from menu_view.config import MENU_CONTAINER_ID, SEARCH_INPUT_ID
from menu_view.debuglog import log_debug
from menu_view.models import CategoryId, CategoryNode, ItemNode, MenuData, PresentationTree
from menu_view.rendering import format_category_header, format_item_block
from menu_view.session import MenuSession


class MenuItemBlock(Static):
    """One item display block."""

    def __init__(self, node: ItemNode) -> None:
        super().__init__(format_item_block(node), classes="item-block")
        self.node = node


class CategoryHeader(Static):
    """Collapsible category header; posts Toggled instead of handling it."""

    can_focus = True

    BINDINGS = [
        ("enter", "toggle", "Toggle"),
        ("space", "toggle", "Toggle"),
    ]

    class Toggled(Message):
        """Request to flip the items panel of one category."""

        def __init__(self, category_id: CategoryId) -> None:
            super().__init__()
            self.category_id = category_id

    def __init__(self, node: CategoryNode) -> None:
        super().__init__(format_category_header(node, node.expanded), classes="category-header")
        self.node = node
        self.category_id = node.category_id
        self.expanded = node.expanded

    def set_expanded(self, expanded: bool) -> None:
        self.expanded = expanded
        self.update(format_category_header(self.node, expanded))

    def on_click(self, event: Click) -> None:
        self.post_message(self.Toggled(self.category_id))
        event.stop()

    def action_toggle(self) -> None:
        self.post_message(self.Toggled(self.category_id))


class CategoryPanel(Vertical):
    """Items panel of one category, hidden until its header is toggled."""

    def __init__(self, node: CategoryNode) -> None:
        super().__init__(*(MenuItemBlock(item) for item in node.items), classes="items-panel")
        self.category_id = node.category_id
        self.display = node.expanded


def widgets_for_tree(tree: PresentationTree) -> list[Widget]:
    """Materialize a presentation tree into fresh, unmounted widgets."""
    if not tree:
        return [Static("No matching items", classes="menu-empty")]

    widgets: list[Widget] = []
    for node in tree:
        if isinstance(node, CategoryNode):
            widgets.append(CategoryHeader(node))
            widgets.append(CategoryPanel(node))
        else:
            widgets.append(MenuItemBlock(node))
    return widgets


class MenuViewApp(App):
    """A Textual app showing a collapsible restaurant menu with live search."""

    TITLE = "Menu"
    SUB_TITLE = "Type to search items"

    CSS = """
    Screen {
        layout: vertical;
    }

    #search-input {
        border: heavy $secondary;
        margin: 0 1;
    }

    #menu-container {
        height: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    .category-header {
        text-style: bold;
        padding: 1 0 0 0;
    }

    .category-header:focus {
        background: $boost;
    }

    .items-panel {
        height: auto;
        padding-left: 2;
    }

    .item-block {
        margin-bottom: 1;
    }

    .menu-empty {
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("escape", "clear_search", "Clear search"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, menu_data: MenuData | None = None) -> None:
        super().__init__()
        self.session = MenuSession(menu_data) if menu_data is not None else None
        log_debug(f"app_init has_data={self.session is not None}")

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search by name or description", id=SEARCH_INPUT_ID)
        yield VerticalScroll(id=MENU_CONTAINER_ID)

    async def on_mount(self) -> None:
        try:
            self.query_one(f"#{SEARCH_INPUT_ID}", Input)
        except NoMatches:
            log_debug("search_input_missing")

        if self.session is None:
            log_debug("menu_data_missing")
            await self._show_unavailable()
            return

        await self.render_menu(self.session.presentation_for(""), self.session.is_search_mode)

    @on(Input.Changed, f"#{SEARCH_INPUT_ID}")
    async def handle_search_changed(self, event: Input.Changed) -> None:
        if self.session is None:
            return
        tree = self.session.presentation_for(event.value)
        await self.render_menu(tree, self.session.is_search_mode)

    def on_category_header_toggled(self, message: CategoryHeader.Toggled) -> None:
        message.stop()
        self.toggle_category(message.category_id)

    def action_clear_search(self) -> None:
        try:
            search = self.query_one(f"#{SEARCH_INPUT_ID}", Input)
        except NoMatches:
            return
        search.value = ""

    async def render_menu(self, tree: PresentationTree, is_search_mode: bool = False) -> None:
        """Replace the container's children with widgets for ``tree``."""
        try:
            container = self.query_one(f"#{MENU_CONTAINER_ID}")
        except NoMatches:
            log_debug("render_skipped reason=missing_container")
            return

        widgets = widgets_for_tree(tree)
        await container.remove_children()
        await container.mount_all(widgets)
        mode = "flat" if is_search_mode else "grouped"
        query = self.session.query if self.session is not None else ""
        log_debug(f"menu_rendered mode={mode} nodes={len(tree)} query={query!r}")

    def toggle_category(self, category_id: CategoryId) -> bool | None:
        """Flip one category panel; return the new expanded state, or None if absent."""
        panel = next((p for p in self.query(CategoryPanel) if p.category_id == category_id), None)
        if panel is None:
            log_debug(f"toggle_skipped reason=missing_panel category_id={category_id!r}")
            return None

        expanded = not panel.display
        panel.display = expanded
        header = next((h for h in self.query(CategoryHeader) if h.category_id == category_id), None)
        if header is not None:
            header.set_expanded(expanded)
        return expanded

    async def _show_unavailable(self) -> None:
        try:
            container = self.query_one(f"#{MENU_CONTAINER_ID}")
        except NoMatches:
            log_debug("render_skipped reason=missing_container")
            return
        await container.remove_children()
        await container.mount(Static("Menu data unavailable", classes="menu-empty"))
