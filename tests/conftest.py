"""
Shared fixtures for the gogo test suite.

Every test runs against a temporary home and working directory and a fixed
machine identifier, so nothing touches the real ~/.gogopasswd.
"""
import machineid
import pytest

from gogo.storage.config import ConfigStore
from gogo.storage.passwd import KeyMaterialProvider
from gogo.utils.dataModels import GOGO_PASSWD, GOGO_YAML

FAKE_MACHINE_ID = b"0123456789abcdef0123456789abcdef"


@pytest.fixture
def home(tmp_path, monkeypatch):
    path = tmp_path / "home"
    path.mkdir()
    monkeypatch.setenv("GOGO_HOME", str(path))
    return path


@pytest.fixture
def cwd(tmp_path, monkeypatch):
    path = tmp_path / "project"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def keys(home):
    return KeyMaterialProvider(home / GOGO_PASSWD, machine_id=lambda: FAKE_MACHINE_ID)


@pytest.fixture
def store(cwd, home, keys):
    return ConfigStore(cwd, home, keys)


@pytest.fixture
def write_config(cwd):
    def _write(text, where=None):
        path = (where or cwd) / GOGO_YAML
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def fake_machine_id(monkeypatch):
    monkeypatch.setattr("gogo.storage.passwd.machine_identifier", lambda: FAKE_MACHINE_ID)
    monkeypatch.setattr(machineid, "id", lambda: "test-host-id")
