"""
UCDrive Client - Configuration Error Exception

Exception raised when the account configuration is missing or invalid.

Author: UCDrive Project
"""

from .drive_error import UCDriveError


class UCDriveConfigError(UCDriveError):
    """Exception for missing or invalid configuration."""
    pass
