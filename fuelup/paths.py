"""Locations of fuelup's files and directories, and small filesystem helpers."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

FUELUP_DIR = ".fuelup"
FUELUP_HOME = "FUELUP_HOME"
FUEL_TOOLCHAIN_TOML_FILE = "fuel-toolchain.toml"

CANONICAL_FUEL_HOME = r"%USERPROFILE%\.fuelup" if os.name == "nt" else "$HOME/.fuelup"


def _home_or_cwd() -> Path:
    try:
        return Path.home()
    except RuntimeError:
        return Path(".")


def canonical_fuelup_dir() -> str:
    """The fuelup home for display, with the home prefix written symbolically when default."""
    path = fuelup_dir()
    default_fuelup_home = _home_or_cwd() / FUELUP_DIR
    if default_fuelup_home == path:
        return CANONICAL_FUEL_HOME
    return str(path)


def fuelup_dir() -> Path:
    return Path.home() / FUELUP_DIR


def fuelup_bin_dir() -> Path:
    return fuelup_dir() / "bin"


def fuelup_bin() -> Path:
    return fuelup_bin_dir() / "fuelup"


def fuelup_bin_or_current_bin() -> Path:
    """The installed fuelup binary, or the running program if that is missing."""
    candidate = fuelup_bin()
    if candidate.exists():
        return candidate
    return Path(sys.argv[0]).resolve()


def fuelup_log_dir() -> Path:
    return fuelup_dir() / "log"


def settings_file() -> Path:
    return fuelup_dir() / "settings.toml"


def hashes_dir() -> Path:
    return fuelup_dir() / "hashes"


def toolchains_dir() -> Path:
    return fuelup_dir() / "toolchains"


def store_dir() -> Path:
    return fuelup_dir() / "store"


def fuelup_tmp_dir() -> Path:
    return fuelup_dir() / "tmp"


def toolchain_dir(toolchain: str) -> Path:
    return toolchains_dir() / toolchain


def toolchain_bin_dir(toolchain: str) -> Path:
    return toolchain_dir(toolchain) / "bin"


def ensure_dir_exists(path: os.PathLike | str) -> None:
    """Create ``path`` and its parents unless it is already a directory."""
    path = Path(path)
    if path.is_dir():
        return
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"Failed to create directory {path}: {exc}") from exc


def find_parent_dir_with_file(starter_path: os.PathLike | str, file_name: str) -> Path | None:
    """Walk up from ``starter_path`` to the first directory containing ``file_name``."""
    try:
        path = Path(starter_path).resolve(strict=True)
    except OSError:
        return None
    while path != path.parent:
        if (path / file_name).exists():
            return path
        path = path.parent
    return None


def get_fuel_toolchain_toml() -> Path | None:
    """The toolchain override file of the project containing the working directory."""
    parent = find_parent_dir_with_file(Path.cwd(), FUEL_TOOLCHAIN_TOML_FILE)
    return parent / FUEL_TOOLCHAIN_TOML_FILE if parent is not None else None


def is_executable(path: os.PathLike | str) -> bool:
    path = Path(path)
    if os.name == "nt":
        return path.is_file()
    try:
        info = path.stat()
    except OSError:
        return False
    return stat.S_ISREG(info.st_mode) and bool(info.st_mode & 0o111)