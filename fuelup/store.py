"""The store of installed component versions under the fuelup home."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from semver import Version

from .paths import ensure_dir_exists, store_dir


def component_dirname(component_name: str, version: Version | str) -> str:
    """Directory name of one component version, e.g. ``fuel-core-0.15.1``."""
    return f"{component_name}-{version}"


@dataclass(frozen=True)
class Store:
    path: Path

    @classmethod
    def from_env(cls) -> Store:
        path = store_dir()
        ensure_dir_exists(path)
        return cls(path)

    def has_component(self, component_name: str, version: Version | str) -> bool:
        return self.component_dir_path(component_name, version).exists()

    def component_dir_path(self, component_name: str, version: Version | str) -> Path:
        return self.path / component_dirname(component_name, version)