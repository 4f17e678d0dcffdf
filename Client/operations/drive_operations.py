"""
UCDrive Client - Drive Operations Module

Implements the user-facing file operations of the UC drive: listing,
download links, folder creation, move, rename, delete and upload.
All paths are resolved through a PathResolver sharing one DirectoryCache.

Author: UCDrive Project
"""

import logging
from typing import Optional, Callable, Tuple

from exceptions import UCDriveUnsupportedError
from managers import DirectoryCache
from models import Account, DownloadLink, FileStream, RemoteEntry
from operations.path_resolver import PathResolver, base_of, dir_of, parse_path
from operations.upload_session import UploadSession

# Configure logging
logger = logging.getLogger(__name__)


class UCDriveOperations:
    """
    Driver for one UC drive account.

    Responsibilities:
    - Check that the account cookie is accepted
    - Resolve paths to files and folder listings
    - Translate move, rename, delete and make-directory into API calls
    - Run upload sessions

    Listings stay cached after mutating operations; hosts that need fresh
    listings clear the cache store.
    """

    def __init__(self, api_client, account: Account, cache: Optional[DirectoryCache] = None,
                 temp_dir: Optional[str] = None):
        """
        Initialize drive operations.

        Args:
            api_client: UCDriveAPI instance for server communication
            account: Account the operations act on
            cache: DirectoryCache shared by all lookups (private cache if None)
            temp_dir: Directory for upload staging files (OS default if None)
        """
        self.api = api_client
        self.account = account
        self.resolver = PathResolver(api_client, account, cache)
        self.temp_dir = temp_dir

    def validate_account(self) -> None:
        """
        Check the account against the server.

        Raises:
            UCDriveRemoteError: If the server rejects the cookie or is unreachable
        """
        logger.info(f"Validating account: {self.account.name}")
        self.api.get_config()

    # ==================== Lookups ====================

    def file(self, path: str) -> RemoteEntry:
        return self.resolver.resolve_file(path)

    def files(self, path: str) -> Tuple[RemoteEntry, ...]:
        return self.resolver.list_children(path)

    def path(self, path: str) -> Tuple[Optional[RemoteEntry], Optional[Tuple[RemoteEntry, ...]]]:
        return self.resolver.resolve_path(path)

    def link(self, path: str) -> DownloadLink:
        """
        Get a direct download link for a file.

        The storage host only serves the URL to requests carrying the cookie,
        so it is returned along with the link.

        Raises:
            UCDriveNotFoundError: If the path does not exist
            UCDriveRemoteError: If the request fails
        """
        file = self.resolver.resolve_file(path)
        url = self.api.get_download_url(file.id)
        return DownloadLink(url=url, headers={"Cookie": self.account.access_token})

    def preview(self, path: str):
        raise UCDriveUnsupportedError("Preview is not supported by the UC drive")

    # ==================== Mutations ====================

    def make_dir(self, path: str) -> None:
        path = parse_path(path)
        parent = self.resolver.resolve_file(dir_of(path))
        logger.info(f"Creating folder {path}")
        self.api.make_dir(parent.id, base_of(path))

    def move(self, src: str, dst: str) -> None:
        """
        Move an entry into the parent folder of dst.

        Args:
            src: Path of the entry to move
            dst: Destination path; only its parent folder is used
        """
        src_file = self.resolver.resolve_file(src)
        dst_parent = self.resolver.resolve_file(dir_of(dst))
        logger.info(f"Moving {parse_path(src)} to {dir_of(dst)}")
        self.api.move(src_file.id, dst_parent.id)

    def rename(self, src: str, dst: str) -> None:
        src_file = self.resolver.resolve_file(src)
        logger.info(f"Renaming {parse_path(src)} to {base_of(dst)}")
        self.api.rename(src_file.id, base_of(dst))

    def copy(self, src: str, dst: str) -> None:
        raise UCDriveUnsupportedError("Copy is not supported by the UC drive")

    def delete(self, path: str) -> None:
        file = self.resolver.resolve_file(path)
        logger.info(f"Deleting {parse_path(path)}")
        self.api.delete(file.id)

    def upload(self, file_stream: Optional[FileStream], progress_callback: Optional[Callable] = None) -> None:
        """
        Upload a stream into the drive.

        Args:
            file_stream: Upload source with target name and parent folder path
            progress_callback: Optional callback for progress updates
                             Called with (message: str, current: int, total: int)

        Raises:
            UCDriveEmptyInputError: If file_stream is None
            UCDriveNotFoundError: If the parent folder does not exist
            UCDriveLocalIOError: If staging fails
            UCDriveRemoteError: If any remote call fails
        """
        session = UploadSession(
            self.api,
            self.resolver,
            file_stream,
            temp_dir=self.temp_dir,
            progress_callback=progress_callback
        )
        session.run()
