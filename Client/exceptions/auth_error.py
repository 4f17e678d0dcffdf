"""
UCDrive Client - Authentication Error Exception

Exception raised when the remote service rejects the account cookie.

Author: UCDrive Project
"""

from .remote_error import UCDriveRemoteError


class UCDriveAuthError(UCDriveRemoteError):
    """Exception for authentication errors."""
    pass
