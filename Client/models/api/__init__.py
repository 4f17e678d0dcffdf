"""
UCDrive Client - API Models Package

This package contains Pydantic models for all remote API endpoints.
"""

from models.api.file_list import FileItem, SortData, SortMetadata, SortResponse
from models.api.download import DownloadRequest, DownloadItem, DownloadResponse
from models.api.file_operations import (
    MakeDirRequest,
    MoveRequest,
    RenameRequest,
    DeleteRequest
)
from models.api.upload import (
    UpPreRequest,
    UpCallback,
    UpPreData,
    UpPreMetadata,
    UpPreResponse,
    UpHashRequest,
    UpHashData,
    UpHashResponse,
    UpAuthRequest,
    UpAuthData,
    UpAuthResponse,
    UpFinishRequest
)

__all__ = [
    'FileItem',
    'SortData',
    'SortMetadata',
    'SortResponse',
    'DownloadRequest',
    'DownloadItem',
    'DownloadResponse',
    'MakeDirRequest',
    'MoveRequest',
    'RenameRequest',
    'DeleteRequest',
    'UpPreRequest',
    'UpCallback',
    'UpPreData',
    'UpPreMetadata',
    'UpPreResponse',
    'UpHashRequest',
    'UpHashData',
    'UpHashResponse',
    'UpAuthRequest',
    'UpAuthData',
    'UpAuthResponse',
    'UpFinishRequest',
]
