"""Runtime configuration: settings file location and logging."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

STORE_ENV = "PASSCODER_STORE"
LOG_LEVEL_ENV = "PASSCODER_LOG_LEVEL"
SETTINGS_FILENAME = "settings.json"


def get_store_path(override: Optional[Path] = None) -> Path:
    """Resolve the settings file: explicit path, then ``$PASSCODER_STORE``, then the data dir."""
    if override:
        return override
    env = os.environ.get(STORE_ENV)
    if env:
        return Path(env)
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home()))
    else:
        base = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return base / "passcoder" / SETTINGS_FILENAME


def configure_logging(verbose: bool = False) -> None:
    """Send passcoder's log records to stderr through rich."""
    if verbose:
        level: int | str = logging.DEBUG
    else:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()

    root = logging.getLogger("passcoder")
    root.handlers.clear()
    root.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    )
    try:
        root.setLevel(level)
    except ValueError:
        root.setLevel(logging.WARNING)
        root.warning("Unknown log level %r in %s; using WARNING", level, LOG_LEVEL_ENV)
