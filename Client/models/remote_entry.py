"""
UCDrive Client - Remote Entry Model

Contains the RemoteEntry dataclass and EntryKind enum describing one file
or folder as known to the UC drive.

Author: UCDrive Project
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class EntryKind(Enum):
    """
    Enum representing the kind of a remote entry.

    States:
    - FILE: Regular file with content
    - FOLDER: Folder that can hold other entries
    """
    FILE = "file"
    FOLDER = "folder"


@dataclass(frozen=True)
class RemoteEntry:
    """
    One file or folder on the remote drive.

    Attributes:
        id: Remote file id (fid), used by every operation on this entry
        name: Display name (leaf path segment)
        size: Byte length, 0 for folders
        kind: EntryKind.FILE or EntryKind.FOLDER
        updated_at: Last modification time
    """
    id: str
    name: str
    size: int
    kind: EntryKind
    updated_at: datetime

    @property
    def is_dir(self) -> bool:
        return self.kind == EntryKind.FOLDER
