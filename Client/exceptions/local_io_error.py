"""
UCDrive Client - Local I/O Error Exception

Exception raised when the local staging file cannot be created, written,
read or repositioned.

Author: UCDrive Project
"""

from .drive_error import UCDriveError


class UCDriveLocalIOError(UCDriveError):
    """Exception for staging file failures."""
    pass
