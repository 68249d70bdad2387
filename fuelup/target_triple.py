"""Validated target triples such as ``x86_64-unknown-linux-gnu``."""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

_ARCHITECTURES = ("aarch64", "x86_64")
_VENDORS = ("apple", "unknown")
_OSES = ("darwin", "linux-gnu")

_ARCH_ALIASES = {"arm64": "aarch64", "aarch64": "aarch64", "x86_64": "x86_64", "amd64": "x86_64"}


@dataclass(frozen=True, order=True)
class TargetTriple:
    value: str

    def __post_init__(self) -> None:
        parts = self.value.split("-", 1)
        if len(parts) < 2:
            raise ValueError("missing vendor-os specifier")
        architecture, rest = parts
        if architecture not in _ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: '{architecture}'")
        parts = rest.split("-", 1)
        if len(parts) < 2:
            raise ValueError("missing os specifier")
        vendor, os_name = parts
        if vendor not in _VENDORS:
            raise ValueError(f"Unsupported vendor: '{vendor}'")
        if os_name not in _OSES:
            raise ValueError(f"Unsupported os: '{os_name}'")

    @classmethod
    def from_host(cls) -> TargetTriple:
        machine = platform.machine()
        architecture = _ARCH_ALIASES.get(machine.lower())
        if architecture is None:
            raise ValueError(f"Unsupported architecture: {machine}")
        host = sys.platform
        if host == "darwin":
            vendor, os_name = "apple", "darwin"
        elif host.startswith("linux"):
            vendor, os_name = "unknown", "linux-gnu"
        else:
            raise ValueError(f"Unsupported os: {host}")
        return cls(f"{architecture}-{vendor}-{os_name}")

    def __str__(self) -> str:
        return self.value