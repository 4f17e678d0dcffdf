"""
UCDrive Client - File Operation API Models

Pydantic request models for make-directory, move, rename and delete.
"""

from typing import List
from pydantic import BaseModel


class MakeDirRequest(BaseModel):
    """Request model for POST /file"""
    dir_init_lock: bool = False
    dir_path: str = ""
    file_name: str
    pdir_fid: str


class MoveRequest(BaseModel):
    """Request model for POST /file/move"""
    action_type: int = 1
    exclude_fids: List[str] = []
    filelist: List[str]
    to_pdir_fid: str


class RenameRequest(BaseModel):
    """Request model for POST /file/rename"""
    fid: str
    file_name: str


class DeleteRequest(BaseModel):
    """Request model for POST /file/delete"""
    action_type: int = 1
    exclude_fids: List[str] = []
    filelist: List[str]
