"""
UCDrive Client - Not Found Error Exception

Exception raised when a path or its parent folder cannot be resolved.

Author: UCDrive Project
"""

from .drive_error import UCDriveError


class UCDriveNotFoundError(UCDriveError):
    """Exception for paths that do not exist on the remote drive."""
    pass
