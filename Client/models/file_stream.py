"""
UCDrive Client - File Stream Model

Describes an upload source: a readable binary stream of known length
and the remote folder it should be written into.

Author: UCDrive Project
"""

from dataclasses import dataclass
from typing import BinaryIO

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass
class FileStream:
    """
    Upload source for UCDriveOperations.upload().

    Attributes:
        stream: Binary stream positioned at the start of the payload
        name: Target file name on the remote drive
        size: Declared payload length in bytes
        parent_path: Remote folder path the file is uploaded into
        mime_type: Content type sent with the pre-upload request and each part
    """
    stream: BinaryIO
    name: str
    size: int
    parent_path: str
    mime_type: str = DEFAULT_MIME_TYPE
