"""
Tests for command-line parsing and dispatch in UCDrive Client
"""

import pytest

import fakes
from client import build_parser
from exceptions import UCDriveAuthError, UCDriveRemoteError
from managers import ConfigManager
from managers import config_manager as config_module
from operations import UCDriveOperations
import cli


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a temporary config directory and an in-memory keyring."""
    store = fakes.FakeKeyring()
    monkeypatch.setattr(config_module, "keyring", store)
    monkeypatch.setattr(cli, "ConfigManager", lambda: ConfigManager(tmp_path))
    return store


def use_fake_api(monkeypatch, api):
    """Route build_operations to a UCDriveOperations over the given fake API."""
    built = []

    def fake_build_operations(config_manager, account=None):
        ops = UCDriveOperations(api, account or fakes.make_account())
        built.append(ops)
        return ops

    monkeypatch.setattr(cli, "build_operations", fake_build_operations)
    return built


def run(argv):
    args = build_parser().parse_args(argv)
    return cli.run_cli_operation(args.operation, args)


def make_tree():
    return {"0": [fakes.make_folder("d1", "docs")], "d1": []}


def test_parse_upload_arguments():
    args = build_parser().parse_args(["upload", "report.pdf", "/docs", "--mime-type", "application/pdf"])

    assert args.operation == "upload"
    assert args.local_path == "report.pdf"
    assert args.remote_dir == "/docs"
    assert args.mime_type == "application/pdf"
    assert args.name is None


def test_ls_defaults_to_root():
    args = build_parser().parse_args(["ls"])

    assert args.path == "/"


def test_format_entry():
    line = cli.format_entry(fakes.make_folder("d1", "docs"))

    assert line.startswith("d ")
    assert line.endswith(" docs")


def test_ls_root_prints_listing(cli_env, monkeypatch, capsys):
    use_fake_api(monkeypatch, fakes.FakeUCDriveAPI(make_tree()))

    assert run(["ls", "/"]) == cli.EXIT_SUCCESS
    assert capsys.readouterr().out.strip().endswith(" docs")


def test_ls_missing_path_exits_not_found(cli_env, monkeypatch):
    use_fake_api(monkeypatch, fakes.FakeUCDriveAPI(make_tree()))

    assert run(["ls", "/missing"]) == cli.EXIT_NOT_FOUND


def test_mkdir_dispatches_to_api(cli_env, monkeypatch):
    api = fakes.FakeUCDriveAPI(make_tree())
    use_fake_api(monkeypatch, api)

    assert run(["mkdir", "/docs/new"]) == cli.EXIT_SUCCESS
    assert ("make_dir", ("d1", "new")) in api.calls


def test_missing_cookie_exits_config_error(cli_env):
    assert run(["ls", "/"]) == cli.EXIT_CONFIG_ERROR


def test_rejected_cookie_exits_auth_error(cli_env, monkeypatch):
    api = fakes.FakeUCDriveAPI(make_tree(), fail_on={"list_files": UCDriveAuthError("Cookie expired", status_code=401)})
    use_fake_api(monkeypatch, api)

    assert run(["ls", "/"]) == cli.EXIT_AUTH_ERROR


def test_remote_failure_exits_failure(cli_env, monkeypatch):
    api = fakes.FakeUCDriveAPI(make_tree(), fail_on={"delete": UCDriveRemoteError("Server error", status_code=500)})
    use_fake_api(monkeypatch, api)

    assert run(["rm", "/docs"]) == cli.EXIT_FAILURE


def test_login_stores_cookie_after_validation(cli_env, monkeypatch):
    api = fakes.FakeUCDriveAPI()
    built = use_fake_api(monkeypatch, api)

    assert run(["login", "--cookie", "__pus=new"]) == cli.EXIT_SUCCESS
    assert built[0].account.access_token == "__pus=new"
    assert api.call_names() == ["get_config"]
    assert cli_env.passwords[("UCDrive", "uc")] == "__pus=new"


def test_login_with_rejected_cookie_stores_nothing(cli_env, monkeypatch):
    api = fakes.FakeUCDriveAPI(fail_on={"get_config": UCDriveAuthError("Cookie rejected", status_code=401)})
    use_fake_api(monkeypatch, api)

    assert run(["login", "--cookie", "__pus=bad"]) == cli.EXIT_AUTH_ERROR
    assert cli_env.passwords == {}
