"""
UCDrive Client - Exceptions Package

Contains all exception classes for the UCDrive client.

Author: UCDrive Project
"""

from .drive_error import UCDriveError
from .not_found_error import UCDriveNotFoundError
from .empty_input_error import UCDriveEmptyInputError
from .unsupported_error import UCDriveUnsupportedError
from .remote_error import UCDriveRemoteError
from .auth_error import UCDriveAuthError
from .local_io_error import UCDriveLocalIOError
from .config_error import UCDriveConfigError

__all__ = [
    'UCDriveError',
    'UCDriveNotFoundError',
    'UCDriveEmptyInputError',
    'UCDriveUnsupportedError',
    'UCDriveRemoteError',
    'UCDriveAuthError',
    'UCDriveLocalIOError',
    'UCDriveConfigError'
]
