"""
UCDrive Client - Unsupported Error Exception

Exception raised for operations the remote service cannot perform
(preview, server-side copy).

Author: UCDrive Project
"""

from .drive_error import UCDriveError


class UCDriveUnsupportedError(UCDriveError):
    """Exception for operations the UC drive does not support."""
    pass
