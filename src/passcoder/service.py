"""The credential service: owns both slots and dispatches user actions.

The presentation layer never mutates slot state directly. It calls the
action methods here and renders :meth:`CredentialService.snapshot`, or
subscribes to receive a :class:`ServiceEvent` after every change.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from .errors import SlotEmptyError
from .generator import generate_passcode, generate_password
from .handoff import SYSTEM_SETTINGS, Clipboard, SettingsLauncher
from .models import (
    CHANGE_REQUIRED,
    Credential,
    EventKind,
    Notice,
    ServiceEvent,
    Slot,
    SlotState,
    SlotView,
    Snapshot,
)
from .store import CredentialStore

logger = logging.getLogger(__name__)

Listener = Callable[[ServiceEvent], None]


class CredentialService:
    def __init__(
        self,
        store: CredentialStore,
        clipboard: Clipboard,
        launcher: SettingsLauncher,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        self.clipboard = clipboard
        self.launcher = launcher
        self._rng = rng
        self._slots: dict[Slot, Credential] = {slot: Credential() for slot in Slot}
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> Snapshot:
        """Repopulate both slots from the store; loaded values start masked."""
        stored = self.store.load()
        self._slots[Slot.PASSWORD] = Credential(value=stored.password or "")
        self._slots[Slot.PASSCODE] = Credential(value=stored.passcode or "")
        logger.debug(
            "Started with password %s, passcode %s",
            self.state(Slot.PASSWORD).value,
            self.state(Slot.PASSCODE).value,
        )
        return self._changed()

    def suspend(self) -> bool:
        """Persist both slots, changed or not."""
        return self._save()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def generate(self, slot: Slot) -> str:
        """Replace *slot* with a fresh value, reveal it and persist both slots."""
        if slot is Slot.PASSWORD:
            value = generate_password(self._rng)
        else:
            value = generate_passcode(self._rng)
        self._slots[slot] = Credential(value=value, visible=True)
        logger.info("Generated new %s", slot.value)
        self._save()
        self._changed()
        return value

    def tap(self, slot: Slot) -> SlotState:
        """Tap the value display: masked or empty slots regenerate, revealed ones stay."""
        if self.state(slot) is not SlotState.REVEALED:
            self.generate(slot)
        return self.state(slot)

    def toggle_visibility(self, slot: Slot) -> SlotState:
        credential = self._require(slot)
        credential.visible = not credential.visible
        self._changed()
        return credential.state

    def copy_and_handoff(self, slot: Slot) -> Notice:
        """Copy *slot* to the clipboard and send the user to system settings."""
        credential = self._require(slot)
        self.clipboard.set_text(credential.value)
        self.launcher.open(SYSTEM_SETTINGS)
        logger.info("Copied %s and requested settings handoff", slot.value)
        self._notify(
            ServiceEvent(
                kind=EventKind.HANDOFF_REQUESTED,
                snapshot=self.snapshot(),
                slot=slot,
                notice=CHANGE_REQUIRED,
            )
        )
        return CHANGE_REQUIRED

    # ------------------------------------------------------------------
    # Queries and subscriptions
    # ------------------------------------------------------------------

    def state(self, slot: Slot) -> SlotState:
        return self._slots[slot].state

    def snapshot(self) -> Snapshot:
        return Snapshot(
            password=SlotView.of(Slot.PASSWORD, self._slots[Slot.PASSWORD]),
            passcode=SlotView.of(Slot.PASSCODE, self._slots[Slot.PASSCODE]),
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, slot: Slot) -> Credential:
        credential = self._slots[slot]
        if credential.state is SlotState.EMPTY:
            raise SlotEmptyError(slot)
        return credential

    def _save(self) -> bool:
        return self.store.save(self._slots[Slot.PASSWORD].value, self._slots[Slot.PASSCODE].value)

    def _changed(self) -> Snapshot:
        snapshot = self.snapshot()
        self._notify(ServiceEvent(kind=EventKind.STATE_CHANGED, snapshot=snapshot))
        return snapshot

    def _notify(self, event: ServiceEvent) -> None:
        for listener in list(self._listeners):
            listener(event)
