"""Single-owner holder of the loaded menu for one view session."""

from __future__ import annotations

from menu_view.filtering import filter_menu, normalize_query
from menu_view.models import MenuData, PresentationTree
from menu_view.rendering import build_presentation_tree


class MenuSession:
    """Keeps the originally loaded menu and derives filtered views from it."""

    def __init__(self, menu_data: MenuData) -> None:
        self._original = menu_data
        self.query = ""
        self.is_search_mode = False

    @property
    def original(self) -> MenuData:
        return self._original

    def apply_query(self, query: str | None) -> tuple[MenuData, bool]:
        """Return the filtered menu and whether search mode is active."""
        self.query = query or ""
        self.is_search_mode = bool(normalize_query(query))
        return filter_menu(self._original, query), self.is_search_mode

    def presentation_for(self, query: str | None) -> PresentationTree:
        dataset, is_search_mode = self.apply_query(query)
        return build_presentation_tree(dataset, is_search_mode)
