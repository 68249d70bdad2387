"""Creating a new, empty custom toolchain."""

from __future__ import annotations

import logging

from ..paths import ensure_dir_exists, settings_file, toolchain_bin_dir
from ..settings import SettingsFile
from ..toolchain import Toolchain, ToolchainError

logger = logging.getLogger(__name__)


def new(name: str) -> None:
    """Create the toolchain ``name`` and make it the default."""
    if name in Toolchain.all():
        raise ToolchainError(f"Toolchain with name '{name}' already exists")

    with SettingsFile(settings_file()).edit() as settings:
        settings.default_toolchain = name

    ensure_dir_exists(toolchain_bin_dir(name))
    logger.info("New toolchain initialized: %s\ndefault toolchain set to '%s'", name, name)