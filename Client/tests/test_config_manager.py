"""
Tests for configuration loading and account construction in UCDrive Client
"""

import json
import tempfile
from pathlib import Path

import pytest

from fakes import FakeKeyring
from exceptions import UCDriveConfigError
from managers import ConfigManager, DEFAULT_CONFIG
from managers import config_manager as config_module


@pytest.fixture
def keyring_store(monkeypatch):
    store = FakeKeyring()
    monkeypatch.setattr(config_module, "keyring", store)
    return store


def test_load_creates_default_config():
    with tempfile.TemporaryDirectory() as temp_dir:
        manager = ConfigManager(Path(temp_dir))
        config = manager.load_config()

        assert config == DEFAULT_CONFIG
        assert json.loads((Path(temp_dir) / "config.json").read_text()) == DEFAULT_CONFIG


def test_load_merges_missing_defaults():
    with tempfile.TemporaryDirectory() as temp_dir:
        (Path(temp_dir) / "config.json").write_text(json.dumps({"root_folder": "abc"}))
        manager = ConfigManager(Path(temp_dir))
        config = manager.load_config()

        assert config["root_folder"] == "abc"
        assert config["order_by"] == "file_name"


def test_account_built_from_config_and_keyring(keyring_store):
    with tempfile.TemporaryDirectory() as temp_dir:
        manager = ConfigManager(Path(temp_dir))
        manager.load_config()
        manager.set("order_direction", "desc")
        manager.store_cookie("cookie-value")

        account = manager.get_account()

    assert keyring_store.passwords[("UCDrive", "uc")] == "cookie-value"
    assert account.access_token == "cookie-value"
    assert account.root_folder == "0"
    assert account.order_direction == "desc"


def test_missing_cookie_is_config_error(keyring_store):
    with tempfile.TemporaryDirectory() as temp_dir:
        manager = ConfigManager(Path(temp_dir))
        manager.load_config()

        with pytest.raises(UCDriveConfigError):
            manager.get_account()


def test_invalid_sort_order_is_config_error(keyring_store):
    with tempfile.TemporaryDirectory() as temp_dir:
        manager = ConfigManager(Path(temp_dir))
        manager.load_config()
        manager.set("order_by", "size")
        manager.store_cookie("cookie-value")

        with pytest.raises(UCDriveConfigError):
            manager.get_account()
