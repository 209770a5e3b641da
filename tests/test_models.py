"""Tests for passcoder.models."""

import pytest
from pydantic import ValidationError

from passcoder.models import (
    CHANGE_REQUIRED,
    Credential,
    Slot,
    SlotState,
    SlotView,
    StoredCredentials,
)


def test_credential_defaults_to_empty():
    c = Credential()
    assert c.value == ""
    assert c.visible is False
    assert c.state is SlotState.EMPTY


def test_credential_state_follows_visibility():
    c = Credential(value="042817")
    assert c.state is SlotState.HIDDEN
    c.visible = True
    assert c.state is SlotState.REVEALED


def test_visible_empty_credential_is_still_empty():
    assert Credential(value="", visible=True).state is SlotState.EMPTY


def test_slot_view_display():
    hidden = SlotView.of(Slot.PASSWORD, Credential(value="Ab12!@#$cdEF34%^"))
    revealed = SlotView.of(Slot.PASSCODE, Credential(value="042817", visible=True))
    empty = SlotView.of(Slot.PASSCODE, Credential())

    assert hidden.display == "•" * 14
    assert "Ab12" not in hidden.display
    assert revealed.display == "042817"
    assert empty.display == ""


def test_slot_view_is_frozen():
    view = SlotView.of(Slot.PASSCODE, Credential(value="042817"))
    with pytest.raises(ValidationError):
        view.value = "000000"


def test_stored_credentials_use_settings_keys():
    stored = StoredCredentials.model_validate({"savedPassword": "pw", "savedPasscode": "123456"})
    assert stored.password == "pw"
    assert stored.passcode == "123456"
    assert stored.present
    assert stored.model_dump(by_alias=True) == {"savedPassword": "pw", "savedPasscode": "123456"}


def test_stored_credentials_partial_is_not_present():
    assert not StoredCredentials(password="pw").present
    assert not StoredCredentials().present


def test_change_required_notice():
    assert CHANGE_REQUIRED.title == "Change Required"
    assert "copied to your clipboard" in CHANGE_REQUIRED.message
    assert "Settings app" in CHANGE_REQUIRED.message
