"""Entry point for the menu-view Textual app."""

from __future__ import annotations

from menu_view.data import MenuDataError, load_configured_menu
from menu_view.debuglog import log_debug
from menu_view.menu_app import MenuViewApp
from menu_view.models import MenuData


def load_startup_menu() -> MenuData | None:
    """Load the configured menu; invalid data is logged and yields None."""
    try:
        return load_configured_menu()
    except MenuDataError as exc:
        log_debug(f"menu_data_invalid error={exc!r}")
        return None


def main() -> None:
    """Run the Textual application."""
    MenuViewApp(load_startup_menu()).run()


if __name__ == "__main__":
    main()
