"""
UCDrive Client - Drive Error Exception

Base exception class for all driver errors.

Author: UCDrive Project
"""


class UCDriveError(Exception):
    """Base exception for UCDrive errors."""
    pass
