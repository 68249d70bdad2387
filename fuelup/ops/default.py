"""Showing or setting the default toolchain."""

from __future__ import annotations

import logging

from ..paths import settings_file
from ..settings import SettingsFile
from ..toolchain import DistToolchainDescription, Toolchain, ToolchainError
from ..toolchain_override import ToolchainOverride

logger = logging.getLogger(__name__)


def _resolve(name: str) -> Toolchain:
    try:
        return Toolchain.from_path(str(DistToolchainDescription.parse(name)))
    except ToolchainError:
        return Toolchain.from_path(name)


def default(toolchain: str | None = None) -> str:
    """Show the active toolchains when ``toolchain`` is None, otherwise make it the default.

    Returns the message that was reported.
    """
    if toolchain is None:
        current = Toolchain.from_settings()
        result = ""
        override = ToolchainOverride.from_project_root()
        if override is not None:
            channel = str(override.cfg.toolchain.channel)
            try:
                name = str(DistToolchainDescription.parse(channel))
            except ToolchainError:
                name = channel
            result += f"{name} (override)"
            if current.exists():
                result += ", "
        result += f"{current.name} (default)"
        logger.info("%s", result)
        return result

    new_default = _resolve(toolchain)
    if not new_default.exists():
        raise ToolchainError(f"Toolchain with name '{new_default.name}' does not exist")

    with SettingsFile(settings_file()).edit() as settings:
        settings.default_toolchain = new_default.name

    message = f"default toolchain set to '{new_default.name}'"
    logger.info("%s", message)
    return message