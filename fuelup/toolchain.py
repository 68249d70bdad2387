"""Toolchain names, distributable toolchain descriptions and installed toolchains."""

from __future__ import annotations

import datetime as _dt
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .paths import settings_file, toolchain_bin_dir, toolchain_dir, toolchains_dir
from .settings import SettingsFile
from .target_triple import TargetTriple

LATEST = "latest"
NIGHTLY = "nightly"
BETA_1 = "beta-1"
BETA_2 = "beta-2"
BETA_3 = "beta-3"
BETA_4 = "beta-4"
BETA_5 = "beta-5"
DEVNET = "devnet"
TESTNET = "testnet"
STABLE = "stable"

RESERVED_TOOLCHAIN_NAMES = (
    LATEST,
    BETA_1,
    BETA_2,
    BETA_3,
    BETA_4,
    BETA_5,
    NIGHTLY,
    DEVNET,
    # Stable is reserved, although currently unused.
    STABLE,
)

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ToolchainError(ValueError):
    """Raised for unknown toolchain names or a missing default toolchain."""


class DistToolchainName(Enum):
    BETA_1 = BETA_1
    BETA_2 = BETA_2
    BETA_3 = BETA_3
    BETA_4 = BETA_4
    BETA_5 = BETA_5
    LATEST = LATEST
    NIGHTLY = NIGHTLY
    DEVNET = DEVNET
    TESTNET = TESTNET

    @classmethod
    def parse(cls, s: str) -> DistToolchainName:
        try:
            return cls(s)
        except ValueError:
            raise ToolchainError(f"Unknown name for toolchain: {s}") from None

    def __str__(self) -> str:
        return self.value


def _parse_date(text: str) -> _dt.date | None:
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        return None


def _extract_date(parts: list[str]) -> _dt.date | None:
    """Parse a date from the last three parts, consuming them on success."""
    if len(parts) < 3:
        return None
    date = _parse_date("-".join(parts[-3:]))
    if date is not None:
        del parts[-3:]
    return date


def _extract_target(parts: list[str]) -> TargetTriple | None:
    """Parse a target from the last three or four parts, consuming them on success."""
    for count in (3, 4):
        if len(parts) < count:
            return None
        try:
            target = TargetTriple("-".join(parts[-count:]))
        except ValueError:
            continue
        del parts[-count:]
        return target
    return None


def _host_target() -> TargetTriple | None:
    try:
        return TargetTriple.from_host()
    except ValueError:
        return None


@dataclass
class DistToolchainDescription:
    """A distributable toolchain: channel name, optional date and target.

    Accepted forms are ``<channel>``, ``<channel>-<target>``, ``<channel>-<YYYY-MM-DD>``,
    ``<channel>-<YYYY-MM-DD>-<target>`` and ``<channel>-<target>-<YYYY-MM-DD>``.
    """

    name: DistToolchainName
    date: _dt.date | None = None
    target: TargetTriple | None = None

    @classmethod
    def parse(cls, s: str) -> DistToolchainDescription:
        if s.endswith("-") and s.count("-") == 1:
            raise ToolchainError(f"Invalid distributable toolchain name '{s}'")

        parts = s.split("-")
        if len(parts) == 1:
            return cls(name=DistToolchainName.parse(parts[0]), date=None, target=_host_target())

        date = _extract_date(parts)
        target = _extract_target(parts)
        if date is None and target is not None:
            date = _extract_date(parts)

        return cls(
            name=DistToolchainName.parse("-".join(parts)),
            date=date,
            target=target if target is not None else _host_target(),
        )

    def __str__(self) -> str:
        host = _host_target()
        target = str(host) if host is not None else ""
        if self.date is not None:
            return f"{self.name}-{self.date.isoformat()}-{target}"
        return f"{self.name}-{target}"


@dataclass
class Toolchain:
    name: str
    path: Path
    bin_path: Path

    @classmethod
    def for_host(cls, name: str) -> Toolchain:
        """The toolchain ``name`` qualified with the host target triple."""
        target = TargetTriple.from_host()
        return cls.from_path(f"{name}-{target}")

    @classmethod
    def all(cls) -> list[str]:
        """Names of every installed toolchain directory."""
        directory = toolchains_dir()
        if not directory.is_dir():
            return []
        return [entry.name for entry in directory.iterdir() if entry.is_dir()]

    @classmethod
    def from_path(cls, toolchain: str) -> Toolchain:
        return cls(
            name=toolchain,
            path=toolchain_dir(toolchain),
            bin_path=toolchain_bin_dir(toolchain),
        )

    @classmethod
    def from_settings(cls) -> Toolchain:
        """The default toolchain recorded in the settings file."""
        path = settings_file()
        if path.exists():
            name = SettingsFile(path).read().default_toolchain
            if name is not None:
                return cls.from_path(name)
        raise ToolchainError(
            "No default toolchain detected. Please install or create a toolchain first."
        )

    def is_distributed(self) -> bool:
        return self.name.split("-", 1)[0] in RESERVED_TOOLCHAIN_NAMES

    def exists(self) -> bool:
        return self.path.is_dir()