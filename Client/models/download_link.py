"""
UCDrive Client - Download Link Model

Author: UCDrive Project
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class DownloadLink:
    """Direct download URL plus the headers the storage host expects."""
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
