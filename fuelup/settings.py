"""Reading and writing fuelup's settings file."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError


@dataclass
class Settings:
    default_toolchain: str | None = None

    @classmethod
    def parse(cls, text: str) -> Settings:
        try:
            document = tomlkit.parse(text)
        except TOMLKitError as exc:
            raise ValueError(f"invalid settings: {exc}") from exc
        value = document.get("default_toolchain")
        if value is not None and not isinstance(value, str):
            raise ValueError("invalid settings: 'default_toolchain' must be a string")
        return cls(default_toolchain=None if value is None else str(value))

    def to_string(self) -> str:
        document = tomlkit.document()
        if self.default_toolchain is not None:
            document["default_toolchain"] = self.default_toolchain
        return tomlkit.dumps(document)


class SettingsFile:
    """A settings file loaded lazily and cached; created with defaults if missing."""

    def __init__(self, path: os.PathLike | str) -> None:
        self.path = Path(path)
        self._cache: Settings | None = None

    def _write(self) -> None:
        assert self._cache is not None
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self._cache.to_string(), encoding="utf-8")

    def _load(self) -> Settings:
        if self._cache is None:
            if self.path.is_file():
                self._cache = Settings.parse(self.path.read_text(encoding="utf-8"))
            else:
                self._cache = Settings()
                self._write()
        return self._cache

    def read(self) -> Settings:
        """A copy of the current settings."""
        return dataclasses.replace(self._load())

    @contextmanager
    def edit(self) -> Iterator[Settings]:
        """Yield the settings for changing; they are saved when the block ends normally."""
        settings = self._load()
        yield settings
        self._write()