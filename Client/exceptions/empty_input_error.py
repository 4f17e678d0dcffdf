"""
UCDrive Client - Empty Input Error Exception

Exception raised when an upload is started without a source stream.

Author: UCDrive Project
"""

from .drive_error import UCDriveError


class UCDriveEmptyInputError(UCDriveError):
    """Exception for uploads without a source stream."""
    pass
