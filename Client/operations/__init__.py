"""
UCDrive Client - Operations Package

Contains path resolution, the upload session and the drive operations facade.
"""

from .path_resolver import PathResolver, parse_path, split_path, dir_of, base_of
from .upload_session import UploadSession
from .drive_operations import UCDriveOperations

__all__ = [
    'PathResolver',
    'parse_path',
    'split_path',
    'dir_of',
    'base_of',
    'UploadSession',
    'UCDriveOperations'
]
