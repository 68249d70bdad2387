"""Shells whose startup files fuelup knows about."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class Shell(Enum):
    POSIX = "posix"
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"

    def does_exist(self) -> bool:
        return True

    def rc_files(self) -> list[Path]:
        home = Path.home()
        return [home / name for name in _RC_FILES[self]]


_RC_FILES = {
    Shell.BASH: (".bash_profile", ".bash_login", ".bashrc"),
    Shell.ZSH: (".zshenv", ".zprofile", ".zshrc", ".zlogin"),
    Shell.POSIX: (".profile",),
    Shell.FISH: (".config/fish/config.fish",),
}