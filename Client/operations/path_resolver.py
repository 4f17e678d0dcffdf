"""
UCDrive Client - Path Resolution Module

Resolves slash-delimited drive paths to remote entries by walking the
folder tree one level at a time through the DirectoryCache.

Author: UCDrive Project
"""

import logging
import posixpath
from typing import Optional, Tuple

from exceptions import UCDriveNotFoundError
from managers import DirectoryCache
from models import Account, EntryKind, RemoteEntry

# Configure logging
logger = logging.getLogger(__name__)


def parse_path(path: str) -> str:
    """
    Normalize a drive path.

    The result has exactly one leading slash, no empty, "." or ".." segments
    and no trailing slash (except for the root itself).

    Args:
        path: Path as given by the caller (e.g., "docs//a/", "docs/./b")

    Returns:
        Normalized path (e.g., "/docs/a")
    """
    path = path.replace("\\", "/")
    return posixpath.normpath("/" + path.lstrip("/"))


def split_path(path: str) -> Tuple[str, str]:
    """Split a path into its normalized parent folder and leaf name."""
    return posixpath.split(parse_path(path))


def dir_of(path: str) -> str:
    return split_path(path)[0]


def base_of(path: str) -> str:
    return split_path(path)[1]


class PathResolver:
    """
    Resolves paths for one account.

    Responsibilities:
    - Map "/" to the account's configured root folder without a remote call
    - Resolve files by listing their parent folder
    - Fetch folder listings, caching every non-empty result
    """

    def __init__(self, api_client, account: Account, cache: Optional[DirectoryCache] = None):
        """
        Initialize path resolver.

        Args:
            api_client: UCDriveAPI instance used for folder listings
            account: Account the paths belong to
            cache: DirectoryCache to read and populate. A private cache is used if None.
        """
        self.api = api_client
        self.account = account
        self.cache = cache if cache is not None else DirectoryCache()

    def root_entry(self) -> RemoteEntry:
        return RemoteEntry(
            id=self.account.root_folder,
            name=self.account.name,
            size=0,
            kind=EntryKind.FOLDER,
            updated_at=self.account.updated_at
        )

    def resolve_file(self, path: str) -> RemoteEntry:
        """
        Resolve a path to its remote entry.

        Args:
            path: Drive path of a file or folder

        Returns:
            The matching RemoteEntry

        Raises:
            UCDriveNotFoundError: If the path or any of its parents does not exist
            UCDriveRemoteError: If a listing request fails
        """
        path = parse_path(path)
        if path == "/":
            return self.root_entry()

        parent, name = split_path(path)
        for entry in self.list_children(parent):
            if entry.name == name:
                return entry
        raise UCDriveNotFoundError(f"Path not found: {path}")

    def list_children(self, path: str) -> Tuple[RemoteEntry, ...]:
        """
        List the children of a folder.

        A cached listing is returned as is. Otherwise the folder is resolved,
        listed once remotely and the result is cached if it is non-empty.

        Args:
            path: Drive path of a folder

        Returns:
            Children in remote order

        Raises:
            UCDriveNotFoundError: If the path does not exist or is not a folder
            UCDriveRemoteError: If a listing request fails
        """
        path = parse_path(path)
        cached = self.cache.get(self.account, path)
        if cached is not None:
            return cached

        folder = self.resolve_file(path)
        if not folder.is_dir:
            raise UCDriveNotFoundError(f"Not a folder: {path}")

        logger.debug(f"Listing {path} ({folder.id})")
        entries = tuple(self.api.list_files(folder.id))
        if entries:
            self.cache.set(self.account, path, entries)
        return entries

    def resolve_path(self, path: str) -> Tuple[Optional[RemoteEntry], Optional[Tuple[RemoteEntry, ...]]]:
        """
        Resolve a path to either a file or a folder listing.

        Returns:
            (entry, None) for a file, (None, children) for a folder
        """
        path = parse_path(path)
        logger.debug(f"Resolving path: {path}")
        entry = self.resolve_file(path)
        if not entry.is_dir:
            return entry, None
        return None, self.list_children(path)
