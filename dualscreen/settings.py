"""Persistent device settings kept in a 32-byte record."""

from __future__ import annotations

import os
from pathlib import Path

RECORD_SIZE = 32
DEFAULT_BRIGHTNESS = 255
DEFAULT_CONTRAST = 128
DEFAULT_APP = 0x01

_FIELDS = 3


def _check_byte(name: str, value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


class Settings:
    """Brightness, contrast and default app, saved to ``path`` on every change."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._brightness = DEFAULT_BRIGHTNESS
        self._contrast = DEFAULT_CONTRAST
        self._default_app = DEFAULT_APP
        self._reserved = bytes(RECORD_SIZE - _FIELDS)
        self.load()

    def load(self) -> None:
        """Read the record from disk; a missing file leaves the current values."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return
        if len(raw) != RECORD_SIZE:
            raise ValueError(f"settings record must be {RECORD_SIZE} bytes, got {len(raw)}")
        self._brightness, self._contrast, self._default_app = raw[:_FIELDS]
        self._reserved = raw[_FIELDS:]

    def save(self) -> None:
        """Write the record to disk."""
        record = bytes([self._brightness, self._contrast, self._default_app]) + self._reserved
        tmp = self.path.with_name(self.path.name + ".tmp")
        tmp.write_bytes(record)
        os.replace(tmp, self.path)

    @property
    def brightness(self) -> int:
        return self._brightness

    @brightness.setter
    def brightness(self, value: int) -> None:
        self._brightness = _check_byte("brightness", value)
        self.save()

    @property
    def contrast(self) -> int:
        return self._contrast

    @contrast.setter
    def contrast(self, value: int) -> None:
        self._contrast = _check_byte("contrast", value)
        self.save()

    @property
    def default_app(self) -> int:
        return self._default_app

    @default_app.setter
    def default_app(self, value: int) -> None:
        self._default_app = _check_byte("default_app", value)
        self.save()