"""
UCDrive Client - Remote Error Exception

Exception raised for any failure reported by a remote call: connection
problems, HTTP errors, non-zero API codes and malformed responses.

Author: UCDrive Project
"""

from typing import Optional

from .drive_error import UCDriveError


class UCDriveRemoteError(UCDriveError):
    """
    Exception for remote API and storage failures.

    Attributes:
        status_code: HTTP status code, if a response was received
        code: UC API error code, if the response carried one
    """

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code
