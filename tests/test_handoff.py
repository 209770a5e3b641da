"""Tests for passcoder.handoff."""

import logging
import sys
import types

import pytest

from passcoder import handoff
from passcoder.handoff import (
    Clipboard,
    SettingsLauncher,
    SystemClipboard,
    SystemSettingsLauncher,
    settings_uri,
)


def test_adapters_implement_protocols(clipboard, launcher):
    assert isinstance(SystemClipboard(), Clipboard)
    assert isinstance(SystemSettingsLauncher(), SettingsLauncher)
    assert isinstance(clipboard, Clipboard)
    assert isinstance(launcher, SettingsLauncher)


@pytest.mark.parametrize(
    "platform, uri",
    [("darwin", "x-apple.systempreferences:"), ("win32", "ms-settings:"), ("linux", "settings://")],
)
def test_settings_uri(platform, uri):
    assert settings_uri(platform) == uri


def test_clipboard_copies_with_pyperclip(monkeypatch):
    copied = []
    monkeypatch.setitem(sys.modules, "pyperclip", types.SimpleNamespace(copy=copied.append))
    SystemClipboard().set_text("042817")
    assert copied == ["042817"]


def test_clipboard_failure_is_swallowed(monkeypatch, caplog):
    def broken(text):
        raise RuntimeError("no clipboard mechanism")

    monkeypatch.setitem(sys.modules, "pyperclip", types.SimpleNamespace(copy=broken))
    with caplog.at_level(logging.WARNING, logger="passcoder.handoff"):
        SystemClipboard().set_text("042817")
    assert "Clipboard unavailable" in caplog.text
    assert "042817" not in caplog.text


def test_launcher_opens_platform_uri(monkeypatch):
    launched = []
    monkeypatch.setattr(handoff.typer, "launch", lambda uri: launched.append(uri) or 0)
    SystemSettingsLauncher("darwin").open()
    assert launched == ["x-apple.systempreferences:"]


def test_launcher_failure_is_swallowed(monkeypatch, caplog):
    def broken(uri):
        raise OSError("no handler")

    monkeypatch.setattr(handoff.typer, "launch", broken)
    with caplog.at_level(logging.WARNING, logger="passcoder.handoff"):
        SystemSettingsLauncher("linux").open()
    assert "Settings launch unavailable" in caplog.text


def test_launcher_nonzero_exit_is_logged(monkeypatch, caplog):
    monkeypatch.setattr(handoff.typer, "launch", lambda uri: 3)
    with caplog.at_level(logging.WARNING, logger="passcoder.handoff"):
        SystemSettingsLauncher("linux").open()
    assert "exited with status 3" in caplog.text


def test_launcher_ignores_unknown_target(monkeypatch):
    launched = []
    monkeypatch.setattr(handoff.typer, "launch", launched.append)
    SystemSettingsLauncher().open("bluetooth")
    assert launched == []
