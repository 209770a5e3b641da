"""Clipboard and system-settings collaborators.

Both are fire-and-forget: a missing clipboard backend or a platform without
a settings URI handler is logged and otherwise ignored.
"""

from __future__ import annotations

import logging
import sys
from abc import abstractmethod
from typing import Protocol, runtime_checkable

import typer

logger = logging.getLogger(__name__)

SYSTEM_SETTINGS = "system-settings"


@runtime_checkable
class Clipboard(Protocol):
    @abstractmethod
    def set_text(self, text: str) -> None:
        ...


@runtime_checkable
class SettingsLauncher(Protocol):
    @abstractmethod
    def open(self, target: str = SYSTEM_SETTINGS) -> None:
        ...


class SystemClipboard:
    """Copies text to the OS clipboard through pyperclip."""

    def set_text(self, text: str) -> None:
        try:
            import pyperclip  # noqa: PLC0415

            pyperclip.copy(text)
        except Exception as exc:
            logger.warning("Clipboard unavailable: %s", exc)


def settings_uri(platform: str = sys.platform) -> str:
    """Return the URI that opens the system settings app on *platform*."""
    if platform == "darwin":
        return "x-apple.systempreferences:"
    if platform == "win32":
        return "ms-settings:"
    return "settings://"


class SystemSettingsLauncher:
    """Opens the platform settings app with the default URI handler."""

    def __init__(self, platform: str = sys.platform) -> None:
        self.platform = platform

    def open(self, target: str = SYSTEM_SETTINGS) -> None:
        if target != SYSTEM_SETTINGS:
            logger.warning("Unknown settings target %r", target)
            return
        uri = settings_uri(self.platform)
        try:
            code = typer.launch(uri)
        except Exception as exc:
            logger.warning("Settings launch unavailable: %s", exc)
            return
        if code:
            logger.warning("Settings launch for %s exited with status %s", uri, code)
