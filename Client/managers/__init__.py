"""
UCDrive Client - Managers Package

Contains manager classes for configuration and directory listing cache.

Author: UCDrive Project
"""

from .config_manager import ConfigManager, DEFAULT_CONFIG
from .directory_cache import CacheStore, MemoryCacheStore, DirectoryCache

__all__ = [
    'ConfigManager',
    'DEFAULT_CONFIG',
    'CacheStore',
    'MemoryCacheStore',
    'DirectoryCache'
]
