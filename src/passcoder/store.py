"""Local persistence of the last generated password and passcode.

Settings file format
--------------------
A single JSON object of string entries, e.g.::

    {"savedPassword": "Ab12!@#$cdEF34%^", "savedPasscode": "042817"}

Unknown keys are preserved on write. The file is replaced atomically and
restricted to owner read/write.
"""

from __future__ import annotations

import json
import logging
import os
from abc import abstractmethod
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .errors import StorageUnavailableError
from .models import PASSCODE_KEY, PASSWORD_KEY, StoredCredentials

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Synchronous string key-value persistence."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def update(self, values: dict[str, str]) -> None:
        """Write every entry of *values* together, or none of them."""

    @abstractmethod
    def delete(self, *keys: str) -> None:
        ...


class MemorySettings:
    """Process-local key-value store; nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def update(self, values: dict[str, str]) -> None:
        self._data.update(values)

    def delete(self, *keys: str) -> None:
        for key in keys:
            self._data.pop(key, None)


class JsonSettingsFile:
    """Key-value store backed by a JSON object file.

    Reads of an unparseable file raise :class:`StorageUnavailableError`.
    Writes start over from an empty object instead, so one bad file does
    not block every later save.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return self.path.exists()

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self.update({key: value})

    def update(self, values: dict[str, str]) -> None:
        data, _ = self._read_for_write()
        data.update(values)
        self._write(data)

    def delete(self, *keys: str) -> None:
        data, discarded = self._read_for_write()
        removed = [key for key in keys if data.pop(key, None) is not None]
        if removed or discarded:
            self._write(data)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageUnavailableError(f"Cannot read settings file {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageUnavailableError(f"Settings file {self.path} does not hold a JSON object.")
        return data

    def _read_for_write(self) -> tuple[dict, bool]:
        """Return *(data, discarded)*; *discarded* is set when a bad file was dropped."""
        try:
            return self._read(), False
        except StorageUnavailableError as exc:
            logger.warning("Replacing unreadable settings: %s", exc)
            return {}, True

    def _write(self, data: dict) -> None:
        tmp = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            tmp.replace(self.path)
            os.chmod(self.path, 0o600)
        except OSError as exc:
            if tmp.exists():
                tmp.unlink()
            raise StorageUnavailableError(f"Cannot write settings file {self.path}: {exc}") from exc


class CredentialStore:
    """Reads and writes the password/passcode pair under two fixed keys.

    Both keys are always written in one update, so the pair is replaced
    together. Storage failures are logged and degrade silently: ``save`` and
    ``clear`` report ``False`` and ``load`` reports nothing stored.
    """

    def __init__(self, settings: KeyValueStore) -> None:
        self.settings = settings

    def save(self, password: str, passcode: str) -> bool:
        try:
            self.settings.update({PASSWORD_KEY: password, PASSCODE_KEY: passcode})
        except StorageUnavailableError as exc:
            logger.warning("Credentials not saved: %s", exc)
            return False
        logger.debug("Saved credentials")
        return True

    def load(self) -> StoredCredentials:
        try:
            stored = StoredCredentials(
                password=self.settings.get(PASSWORD_KEY),
                passcode=self.settings.get(PASSCODE_KEY),
            )
        except StorageUnavailableError as exc:
            logger.warning("Credentials not loaded: %s", exc)
            return StoredCredentials()

        if not stored.present:
            if stored.password is not None or stored.passcode is not None:
                logger.warning("Only one of %s/%s is stored; ignoring both", PASSWORD_KEY, PASSCODE_KEY)
            return StoredCredentials()
        return stored

    def clear(self) -> bool:
        try:
            self.settings.delete(PASSWORD_KEY, PASSCODE_KEY)
        except StorageUnavailableError as exc:
            logger.warning("Credentials not cleared: %s", exc)
            return False
        logger.info("Cleared stored credentials")
        return True
