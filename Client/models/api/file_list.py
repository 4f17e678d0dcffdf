"""
UCDrive Client - File List API Models

Pydantic models for the paged /file/sort listing endpoint.
"""

from datetime import datetime, timezone
from typing import List
from pydantic import BaseModel, Field

from models.remote_entry import EntryKind, RemoteEntry


class FileItem(BaseModel):
    """One entry of a folder listing"""
    fid: str
    file_name: str
    size: int = 0
    file: bool  # True for files, False for folders
    updated_at: int = 0  # Milliseconds since the epoch

    def to_remote_entry(self) -> RemoteEntry:
        return RemoteEntry(
            id=self.fid,
            name=self.file_name,
            size=self.size if self.file else 0,
            kind=EntryKind.FILE if self.file else EntryKind.FOLDER,
            updated_at=datetime.fromtimestamp(self.updated_at / 1000, tz=timezone.utc)
        )


class SortData(BaseModel):
    list: List[FileItem] = []


class SortMetadata(BaseModel):
    total: int = Field(0, alias="_total")


class SortResponse(BaseModel):
    """Response model for GET /file/sort"""
    data: SortData
    metadata: SortMetadata
