"""
UCDrive Client - Account Model

Pydantic model for the per-account driver settings.

Author: UCDrive Project
"""

from datetime import datetime, timezone
from typing import Literal
from pydantic import BaseModel, Field


class Account(BaseModel):
    """Settings for one UC drive account"""
    name: str = "uc"  # Cache identity, also the name of the root entry
    access_token: str = Field(min_length=1)  # Value of the Cookie header
    root_folder: str = "0"  # fid of the folder mounted as "/"
    order_by: Literal["file_type", "file_name", "updated_at"] = "file_name"
    order_direction: Literal["asc", "desc"] = "asc"
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
