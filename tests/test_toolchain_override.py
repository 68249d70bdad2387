import datetime

import pytest
import tomlkit
from semver import Version

from fuelup.toolchain import BETA_1, BETA_2, BETA_3, LATEST, NIGHTLY
from fuelup.toolchain_override import (
    Channel,
    OverrideCfg,
    OverrideError,
    ToolchainOverride,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_parse_toolchain_override_latest_with_date():
    toml = '[toolchain]\nchannel = "latest-2023-01-09"\n'
    cfg = OverrideCfg.from_toml(toml)
    assert str(cfg.toolchain.channel) == "latest-2023-01-09"
    assert cfg.components is None
    assert cfg.to_string_pretty() == toml


def test_parse_toolchain_override_nightly_with_date():
    toml = '[toolchain]\nchannel = "nightly-2023-01-09"\n\n[components]\nforc = "0.33.0"\n'
    cfg = OverrideCfg.from_toml(toml)
    assert str(cfg.toolchain.channel) == "nightly-2023-01-09"
    assert cfg.components["forc"] == Version(0, 33, 0)
    assert cfg.to_string_pretty() == toml


@pytest.mark.parametrize("name", ["latest", "nightly"])
def test_parse_toolchain_override_channel_without_date_error(name):
    toml = f'[toolchain]\nchannel = "{name}"\n'
    with pytest.raises(OverrideError) as info:
        OverrideCfg.from_toml(toml)
    assert str(info.value) == (
        f'invalid value: string "{name}", expected one of '
        "<latest-YYYY-MM-DD|nightly-YYYY-MM-DD|beta-1|beta-2|beta-3|beta-4> "
        "for key `toolchain.channel`"
    )


@pytest.mark.parametrize(
    "toml",
    [
        "",
        "[toolchain]\n",
        '[toolchain]\nchannel = "invalid-channel"\n',
        '[toolchain]\nchannel = "beta-2"\n\n[components]\n',
    ],
)
def test_parse_toolchain_override_invalid_tomls(toml):
    with pytest.raises(OverrideError):
        OverrideCfg.from_toml(toml)


def test_channel_from_str():
    assert Channel.parse(BETA_1).name == BETA_1
    assert Channel.parse(BETA_2).name == BETA_2
    assert Channel.parse(BETA_3).date is None
    with pytest.raises(OverrideError):
        Channel.parse(NIGHTLY)
    with pytest.raises(OverrideError):
        Channel.parse(LATEST)


def test_channel_with_date_parses_date():
    channel = Channel.parse("latest-2023-01-09")
    assert channel.name == "latest"
    assert channel.date == datetime.date(2023, 1, 9)
    assert str(channel) == "latest-2023-01-09"


def test_from_path_and_component_version(tmp_path):
    path = tmp_path / "fuel-toolchain.toml"
    path.write_text('[toolchain]\nchannel = "nightly-2023-01-09"\n\n[components]\nforc = "0.33.0"\n')
    override = ToolchainOverride.from_path(path)
    assert override.path == path
    assert override.get_component_version("forc") == Version(0, 33, 0)
    assert override.get_component_version("fuel-core") is None


def test_component_version_without_components(tmp_path):
    path = tmp_path / "fuel-toolchain.toml"
    path.write_text('[toolchain]\nchannel = "beta-2"\n')
    override = ToolchainOverride.from_path(path)
    assert override.get_component_version("forc") is None


def test_to_toml_round_trip(tmp_path):
    path = tmp_path / "fuel-toolchain.toml"
    path.write_text('[toolchain]\nchannel = "nightly-2023-01-09"\n\n[components]\nforc = "0.33.0"\n')
    override = ToolchainOverride.from_path(path)
    reparsed = OverrideCfg.from_toml(tomlkit.dumps(override.to_toml()))
    assert str(reparsed.toolchain.channel) == "nightly-2023-01-09"
    assert reparsed.components == {"forc": Version(0, 33, 0)}


def test_from_project_root_finds_file_in_parent(home, monkeypatch):
    project = home / "project"
    nested = project / "src" / "deep"
    nested.mkdir(parents=True)
    (project / "fuel-toolchain.toml").write_text('[toolchain]\nchannel = "beta-3"\n')
    monkeypatch.chdir(nested)
    override = ToolchainOverride.from_project_root()
    assert str(override.cfg.toolchain.channel) == "beta-3"
    assert override.path.resolve() == (project / "fuel-toolchain.toml").resolve()


def test_from_project_root_invalid_file_gives_none(home, monkeypatch):
    project = home / "project"
    project.mkdir()
    (project / "fuel-toolchain.toml").write_text('[toolchain]\nchannel = "latest"\n')
    monkeypatch.chdir(project)
    assert ToolchainOverride.from_project_root() is None