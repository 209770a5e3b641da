"""Domain models for passcoder."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

PASSWORD_KEY = "savedPassword"
PASSCODE_KEY = "savedPasscode"


class Slot(str, Enum):
    """One of the two independent credential roles."""

    PASSWORD = "password"
    PASSCODE = "passcode"


class SlotState(str, Enum):
    EMPTY = "empty"
    HIDDEN = "hidden"
    REVEALED = "revealed"


_MASKS = {
    Slot.PASSWORD: "•" * 14,
    Slot.PASSCODE: "•" * 6,
}


class Credential(BaseModel):
    """The current value of a slot and whether it is shown in clear text."""

    value: str = ""
    visible: bool = False

    @property
    def state(self) -> SlotState:
        if not self.value:
            return SlotState.EMPTY
        return SlotState.REVEALED if self.visible else SlotState.HIDDEN


class StoredCredentials(BaseModel):
    """The persisted record, keyed the way the settings file stores it."""

    model_config = ConfigDict(populate_by_name=True)

    password: Optional[str] = Field(default=None, alias=PASSWORD_KEY)
    passcode: Optional[str] = Field(default=None, alias=PASSCODE_KEY)

    @property
    def present(self) -> bool:
        return self.password is not None and self.passcode is not None


class SlotView(BaseModel):
    """What the presentation layer renders for one slot."""

    model_config = ConfigDict(frozen=True)

    slot: Slot
    value: str
    state: SlotState

    @property
    def display(self) -> str:
        if self.state is SlotState.REVEALED:
            return self.value
        if self.state is SlotState.HIDDEN:
            return _MASKS[self.slot]
        return ""

    @classmethod
    def of(cls, slot: Slot, credential: Credential) -> "SlotView":
        return cls(slot=slot, value=credential.value, state=credential.state)


class Snapshot(BaseModel):
    """Immutable view of both slots."""

    model_config = ConfigDict(frozen=True)

    password: SlotView
    passcode: SlotView

    def __getitem__(self, slot: Slot) -> SlotView:
        return self.password if slot is Slot.PASSWORD else self.passcode


class Notice(BaseModel):
    """Informational dialog shown after a copy and handoff."""

    model_config = ConfigDict(frozen=True)

    title: str
    message: str


CHANGE_REQUIRED = Notice(
    title="Change Required",
    message=(
        "The new password and passcode have been copied to your clipboard.\n\n"
        "To change your password or passcode, please open the Settings app."
    ),
)


class EventKind(str, Enum):
    STATE_CHANGED = "state_changed"
    HANDOFF_REQUESTED = "handoff_requested"


class ServiceEvent(BaseModel):
    """Delivered to service subscribers after every mutation."""

    model_config = ConfigDict(frozen=True)

    kind: EventKind
    snapshot: Snapshot
    slot: Optional[Slot] = None
    notice: Optional[Notice] = None
