"""
UCDrive Client - Upload API Models

Pydantic models for the upload protocol: pre-negotiation, hash check,
storage request signing and finish.
"""

from pydantic import BaseModel, ConfigDict, Field


class UpPreRequest(BaseModel):
    """Request model for POST /file/upload/pre"""
    ccp_hash_update: bool = True
    dir_name: str = ""
    file_name: str
    format_type: str  # MIME type of the payload
    l_created_at: int  # Milliseconds since the epoch
    l_updated_at: int
    pdir_fid: str
    size: int


class UpCallback(BaseModel):
    """Storage callback the remote service wants attached to the commit"""
    model_config = ConfigDict(populate_by_name=True)

    callback_url: str = Field("", alias="callbackUrl")
    callback_body: str = Field("", alias="callbackBody")


class UpPreData(BaseModel):
    task_id: str
    upload_id: str = ""
    obj_key: str = ""
    upload_url: str = ""
    bucket: str = ""
    auth_info: str = ""
    callback: UpCallback = Field(default_factory=UpCallback)


class UpPreMetadata(BaseModel):
    part_size: int = Field(gt=0)


class UpPreResponse(BaseModel):
    """Response model for POST /file/upload/pre"""
    data: UpPreData
    metadata: UpPreMetadata


class UpHashRequest(BaseModel):
    """Request model for POST /file/update/hash"""
    md5: str
    sha1: str
    task_id: str


class UpHashData(BaseModel):
    finish: bool = False


class UpHashResponse(BaseModel):
    """Response model for POST /file/update/hash"""
    data: UpHashData


class UpAuthRequest(BaseModel):
    """Request model for POST /file/upload/auth"""
    auth_info: str
    auth_meta: str  # Canonical string the storage request is signed over
    task_id: str


class UpAuthData(BaseModel):
    auth_key: str


class UpAuthResponse(BaseModel):
    """Response model for POST /file/upload/auth"""
    data: UpAuthData


class UpFinishRequest(BaseModel):
    """Request model for POST /file/upload/finish"""
    obj_key: str
    task_id: str
