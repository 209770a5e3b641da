"""pytest configuration: put src/ on sys.path and provide clipboard/launcher fakes."""
import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent / "src"))


class FakeClipboard:
    def __init__(self):
        self.copied = []

    def set_text(self, text):
        self.copied.append(text)


class FakeLauncher:
    def __init__(self):
        self.opened = []

    def open(self, target="system-settings"):
        self.opened.append(target)


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture(autouse=True)
def _reset_passcoder_logger():
    logger = logging.getLogger("passcoder")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
