"""The project-level ``fuel-toolchain.toml`` that overrides the default toolchain."""

from __future__ import annotations

import datetime as _dt
import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from semver import Version
from tomlkit.exceptions import TOMLKitError

from .paths import FUEL_TOOLCHAIN_TOML_FILE, get_fuel_toolchain_toml
from .toolchain import (
    BETA_1,
    BETA_2,
    BETA_3,
    BETA_4,
    BETA_5,
    LATEST,
    NIGHTLY,
    DistToolchainDescription,
    ToolchainError,
)

logger = logging.getLogger(__name__)

_BETA_CHANNELS = (BETA_1, BETA_2, BETA_3, BETA_4, BETA_5)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_EXPECTED_CHANNELS = "one of <latest-YYYY-MM-DD|nightly-YYYY-MM-DD|beta-1|beta-2|beta-3|beta-4>"


class OverrideError(ValueError):
    """Raised when a toolchain override file or channel is invalid."""


def _parse_date(text: str) -> _dt.date | None:
    if not _DATE_RE.fullmatch(text):
        return None
    try:
        return _dt.date.fromisoformat(text)
    except ValueError:
        return None


@dataclass
class Channel:
    name: str
    date: _dt.date | None = None

    @classmethod
    def parse(cls, s: str) -> Channel:
        if s in _BETA_CHANNELS:
            return cls(name=s, date=None)
        if "-" in s:
            name, rest = s.split("-", 1)
            return cls(name=name, date=_parse_date(rest))
        if s in (LATEST, NIGHTLY):
            raise OverrideError(f"'{s}' without date specifier is forbidden")
        raise OverrideError(f"Invalid str for channel: '{s}'")

    def __str__(self) -> str:
        if self.date is not None:
            return f"{self.name}-{self.date.isoformat()}"
        return self.name


@dataclass
class ToolchainCfg:
    """The ``[toolchain]`` table."""

    channel: Channel


def _table_document(name: str, entries: Mapping[str, str]) -> str:
    document = tomlkit.document()
    table = tomlkit.table()
    for key, value in entries.items():
        table.add(key, value)
    document.add(name, table)
    return tomlkit.dumps(document)


@dataclass
class OverrideCfg:
    """The whole contents of a ``fuel-toolchain.toml``."""

    toolchain: ToolchainCfg
    components: dict[str, Version] | None = None

    @classmethod
    def from_toml(cls, toml: str) -> OverrideCfg:
        try:
            document = tomlkit.parse(toml)
        except TOMLKitError as exc:
            raise OverrideError(str(exc)) from exc

        toolchain_table = document.get("toolchain")
        if toolchain_table is None:
            raise OverrideError("missing field `toolchain`")
        if not isinstance(toolchain_table, Mapping):
            raise OverrideError("invalid type for key `toolchain`, expected a table")

        raw_channel = toolchain_table.get("channel")
        if raw_channel is None:
            raise OverrideError("missing field `channel` for key `toolchain`")
        if not isinstance(raw_channel, str):
            raise OverrideError("invalid type for key `toolchain.channel`, expected a string")
        channel_text = str(raw_channel)
        try:
            channel = Channel.parse(channel_text)
        except OverrideError:
            raise OverrideError(
                f'invalid value: string "{channel_text}", expected {_EXPECTED_CHANNELS} '
                "for key `toolchain.channel`"
            ) from None

        components: dict[str, Version] | None = None
        raw_components = document.get("components")
        if raw_components is not None:
            if not isinstance(raw_components, Mapping):
                raise OverrideError("invalid type for key `components`, expected a table")
            components = {}
            for key, value in raw_components.items():
                try:
                    components[str(key)] = Version.parse(str(value))
                except (TypeError, ValueError) as exc:
                    raise OverrideError(
                        f"invalid version for key `components.{key}`: {exc}"
                    ) from exc

        cfg = cls(toolchain=ToolchainCfg(channel=channel), components=components)

        try:
            DistToolchainDescription.parse(str(cfg.toolchain.channel))
        except ToolchainError:
            raise OverrideError(f"Invalid channel '{cfg.toolchain.channel}'") from None

        if cfg.components is not None and not cfg.components:
            raise OverrideError("'[components]' table is declared with no components")

        return cfg

    def to_string_pretty(self) -> str:
        sections = [_table_document("toolchain", {"channel": str(self.toolchain.channel)})]
        if self.components is not None:
            sections.append(
                _table_document(
                    "components", {name: str(version) for name, version in self.components.items()}
                )
            )
        return "\n".join(sections)


@dataclass
class ToolchainOverride:
    """An override configuration together with the file it was read from."""

    cfg: OverrideCfg
    path: Path

    @classmethod
    def from_path(cls, path: os.PathLike | str) -> ToolchainOverride:
        path = Path(path)
        text = path.read_text(encoding="utf-8")
        return cls(cfg=OverrideCfg.from_toml(text), path=path)

    @classmethod
    def from_project_root(cls) -> ToolchainOverride | None:
        """The override of the project containing the working directory, if valid."""
        toml_file = get_fuel_toolchain_toml()
        if toml_file is None:
            return None
        try:
            return cls.from_path(toml_file)
        except (OSError, OverrideError) as exc:
            logger.warning("warning: invalid '%s' in project root: %s", FUEL_TOOLCHAIN_TOML_FILE, exc)
            return None

    def to_toml(self) -> tomlkit.TOMLDocument:
        document = tomlkit.document()
        toolchain = tomlkit.table()
        toolchain.add("channel", str(self.cfg.toolchain.channel))
        document.add("toolchain", toolchain)
        if self.cfg.components is not None:
            components = tomlkit.table()
            for name, version in self.cfg.components.items():
                components.add(name, str(version))
            document.add("components", components)
        return document

    def get_component_version(self, component: str) -> Version | None:
        if self.cfg.components is None:
            return None
        return self.cfg.components.get(component)