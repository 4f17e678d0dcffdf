"""
Test doubles for the UCDrive client tests.

FakeUCDriveAPI stands in for UCDriveAPI at the operations level;
FakeSession and FakeResponse stand in for requests at the transport level.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from api import FINISH_SENTINEL
from models import Account, EntryKind, RemoteEntry
from models.api import UpPreResponse

UPDATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_account(name="uc", root_folder="0"):
    return Account(name=name, access_token="__pus=abc; __puus=def", root_folder=root_folder)


def make_entry(fid, name, kind=EntryKind.FILE, size=0):
    return RemoteEntry(id=fid, name=name, size=size, kind=kind, updated_at=UPDATED)


def make_folder(fid, name):
    return make_entry(fid, name, kind=EntryKind.FOLDER)


def make_pre_response(task_id="task-1", part_size=4):
    return UpPreResponse.model_validate({
        "data": {
            "task_id": task_id,
            "upload_id": "upload-1",
            "obj_key": "obj/key",
            "upload_url": "http://upload.example.com",
            "bucket": "bkt",
            "auth_info": "auth-info",
            "callback": {"callbackUrl": "https://cb.example.com", "callbackBody": "body"}
        },
        "metadata": {"part_size": part_size}
    })


class FakeUCDriveAPI:
    """
    Records every call and answers from an in-memory folder tree.

    Args:
        tree: Children per folder fid
        part_size: Part size returned by upload_pre
        hash_finish: Value returned by upload_hash
        finish_at_part: Part number answered with FINISH_SENTINEL
        fail_on: Name of a method that raises the given error
    """

    def __init__(self, tree=None, part_size=4, hash_finish=False, finish_at_part=None, fail_on=None):
        self.tree = tree if tree is not None else {}
        self.part_size = part_size
        self.hash_finish = hash_finish
        self.finish_at_part = finish_at_part
        self.fail_on = fail_on or {}
        self.calls = []
        self.parts = []
        self.committed = None

    def _record(self, name, *args):
        self.calls.append((name, args))
        if name in self.fail_on:
            raise self.fail_on[name]

    def call_names(self):
        return [name for name, _ in self.calls]

    def get_config(self):
        self._record("get_config")
        return {"code": 0, "data": {}}

    def list_files(self, parent_id):
        self._record("list_files", parent_id)
        return list(self.tree.get(parent_id, []))

    def get_download_url(self, file_id):
        self._record("get_download_url", file_id)
        return f"https://dl.example.com/{file_id}"

    def make_dir(self, parent_id, name):
        self._record("make_dir", parent_id, name)

    def move(self, file_id, to_parent_id):
        self._record("move", file_id, to_parent_id)

    def rename(self, file_id, name):
        self._record("rename", file_id, name)

    def delete(self, file_id):
        self._record("delete", file_id)

    def upload_pre(self, request):
        self._record("upload_pre", request)
        return make_pre_response(part_size=self.part_size)

    def upload_hash(self, request):
        self._record("upload_hash", request)
        return self.hash_finish

    def upload_part(self, pre, mime_type, part_number, data):
        self._record("upload_part", part_number)
        self.parts.append((part_number, bytes(data), mime_type))
        if part_number == self.finish_at_part:
            return FINISH_SENTINEL
        return f"etag-{part_number}"

    def upload_commit(self, pre, parts):
        self._record("upload_commit", list(parts))
        self.committed = list(parts)

    def upload_finish(self, pre):
        self._record("upload_finish", pre.data.task_id)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, headers=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.headers = headers or {}
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Returns queued responses (or raises queued exceptions) in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def ok(data=None, metadata=None):
    """Successful UC API envelope."""
    return FakeResponse(200, {"status": 200, "code": 0, "message": "ok",
                              "data": data if data is not None else {}, "metadata": metadata or {}})


class FakeKeyring:
    """In-memory replacement for the keyring module."""

    def __init__(self):
        self.passwords = {}

    def set_password(self, service, username, password):
        self.passwords[(service, username)] = password

    def get_password(self, service, username):
        return self.passwords.get((service, username))
