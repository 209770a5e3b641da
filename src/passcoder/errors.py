"""Exception types raised by passcoder."""

from __future__ import annotations


class PasscoderError(Exception):
    """Base class for passcoder errors."""


class StorageUnavailableError(PasscoderError):
    """Raised when the settings file cannot be read or written."""


class SlotEmptyError(PasscoderError, ValueError):
    """Raised when an action needs a value but the slot has none yet."""

    def __init__(self, slot) -> None:
        self.slot = slot
        super().__init__(f"No {slot.value} has been generated yet.")
