"""Runtime configuration defaults for data loading and diagnostics."""

from __future__ import annotations

DEBUG_LOG_PATH = "/tmp/menu-view-debug.log"
DEBUG_LOG_ENV = "MENU_VIEW_DEBUG_LOG"

# Optional JSON file replacing the built-in mock menu.
MENU_DATA_PATH_ENV = "MENU_VIEW_DATA_PATH"

MENU_CONTAINER_ID = "menu-container"
SEARCH_INPUT_ID = "search-input"
