"""
UCDrive Client - Models Package

Contains data models and enumerations used by the client.
Request and response models of the remote API live in models.api.

Author: UCDrive Project
"""

from .remote_entry import EntryKind, RemoteEntry
from .file_stream import FileStream, DEFAULT_MIME_TYPE
from .account import Account
from .download_link import DownloadLink

__all__ = [
    'EntryKind',
    'RemoteEntry',
    'FileStream',
    'DEFAULT_MIME_TYPE',
    'Account',
    'DownloadLink'
]
