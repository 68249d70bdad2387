import pytest
from semver import Version

from fuelup.paths import store_dir
from fuelup.store import Store, component_dirname


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


def test_component_dirname():
    assert component_dirname("fuel-core", Version.parse("0.15.1")) == "fuel-core-0.15.1"


def test_from_env_creates_store_dir(home):
    store = Store.from_env()
    assert store.path == store_dir()
    assert store.path.is_dir()


def test_component_dir_path(home):
    store = Store.from_env()
    version = Version.parse("0.15.1")
    path = store.component_dir_path("fuel-core", version)
    assert path.parent == store.path
    assert path.name == component_dirname("fuel-core", version)


def test_has_component(home):
    store = Store.from_env()
    version = Version.parse("0.33.0")
    assert store.has_component("forc", version) is False
    store.component_dir_path("forc", version).mkdir()
    assert store.has_component("forc", version) is True
    assert store.has_component("forc", Version.parse("0.33.1")) is False