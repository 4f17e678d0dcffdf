"""
Tests for the drive operations facade in UCDrive Client

Checks that each operation resolves its paths and issues the right API call.
"""

import pytest

from fakes import FakeUCDriveAPI, make_account, make_entry, make_folder
from exceptions import UCDriveNotFoundError, UCDriveUnsupportedError
from operations import UCDriveOperations


def make_ops():
    tree = {
        "0": [make_folder("d1", "docs"), make_folder("d2", "archive"), make_entry("f1", "top.txt", size=5)],
        "d1": [make_entry("f2", "report.pdf", size=100)],
    }
    api = FakeUCDriveAPI(tree)
    return UCDriveOperations(api, make_account()), api


def test_validate_account_calls_config():
    ops, api = make_ops()

    ops.validate_account()

    assert api.call_names() == ["get_config"]


def test_file_and_files():
    ops, _ = make_ops()

    assert ops.file("/docs/report.pdf").id == "f2"
    assert [entry.name for entry in ops.files("/")] == ["docs", "archive", "top.txt"]


def test_path_returns_listing_for_folder():
    ops, _ = make_ops()

    file, children = ops.path("/docs")

    assert file is None
    assert [entry.id for entry in children] == ["f2"]


def test_link_includes_cookie_header():
    ops, api = make_ops()

    link = ops.link("/docs/report.pdf")

    assert link.url == "https://dl.example.com/f2"
    assert link.headers == {"Cookie": "__pus=abc; __puus=def"}
    assert ("get_download_url", ("f2",)) in api.calls


def test_make_dir_uses_parent_id():
    ops, api = make_ops()

    ops.make_dir("/docs/new folder/")

    assert api.calls[-1] == ("make_dir", ("d1", "new folder"))


def test_move_into_destination_parent():
    ops, api = make_ops()

    ops.move("/top.txt", "/archive/top.txt")

    assert api.calls[-1] == ("move", ("f1", "d2"))


def test_rename_uses_base_name_of_destination():
    ops, api = make_ops()

    ops.rename("/docs/report.pdf", "/docs/final.pdf")

    assert api.calls[-1] == ("rename", ("f2", "final.pdf"))


def test_delete():
    ops, api = make_ops()

    ops.delete("/docs/report.pdf")

    assert api.calls[-1] == ("delete", ("f2",))


def test_delete_missing_path_makes_no_call():
    ops, api = make_ops()

    with pytest.raises(UCDriveNotFoundError):
        ops.delete("/docs/missing.pdf")

    assert "delete" not in api.call_names()


def test_preview_and_copy_are_unsupported():
    ops, api = make_ops()

    with pytest.raises(UCDriveUnsupportedError):
        ops.preview("/top.txt")
    with pytest.raises(UCDriveUnsupportedError):
        ops.copy("/top.txt", "/docs/top.txt")

    assert api.calls == []
