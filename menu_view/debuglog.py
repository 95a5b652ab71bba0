"""Append-only debug log shared by the engine and the Textual app."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from menu_view.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH


def debug_log_path() -> Path:
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(override or DEBUG_LOG_PATH)


def log_debug(message: str) -> None:
    """Write one timestamped line to the debug log."""
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = debug_log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with app flow.
        return
