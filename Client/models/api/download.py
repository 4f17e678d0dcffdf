"""
UCDrive Client - Download API Models

Pydantic models for the /file/download endpoint.
"""

from typing import List
from pydantic import BaseModel


class DownloadRequest(BaseModel):
    """Request model for POST /file/download"""
    fids: List[str]


class DownloadItem(BaseModel):
    fid: str = ""
    download_url: str


class DownloadResponse(BaseModel):
    """Response model for POST /file/download"""
    data: List[DownloadItem]
