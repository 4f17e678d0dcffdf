"""
UCDrive Client - Upload Session Module

Implements the chunked, deduplicating upload protocol of the UC drive.
One UploadSession handles exactly one upload and is discarded afterwards.

Protocol:
1. Resolve the destination folder
2. Stage the payload in a temporary file
3. Hash the staged file (MD5, then SHA-1)
4. Open an upload task (server dictates the part size)
5. Submit the digests; the server may already hold the content
6. Upload parts in order, collecting their checksums
7. Commit the parts
8. Finish the task

Author: UCDrive Project
"""

import hashlib
import logging
import shutil
import tempfile
import time
from typing import Optional, Callable, List, BinaryIO

from api import FINISH_SENTINEL
from exceptions import (
    UCDriveEmptyInputError,
    UCDriveLocalIOError,
    UCDriveNotFoundError
)
from models import FileStream
from models.api import UpPreRequest, UpPreResponse, UpHashRequest

# Configure logging
logger = logging.getLogger(__name__)


HASH_CHUNK_SIZE = 8192


class UploadSession:
    """
    Transfers one byte stream into a remote folder.

    Attributes:
        content_md5: Hex MD5 of the staged payload
        content_sha1: Hex SHA-1 of the staged payload
        task_id: Upload task id issued by the pre-upload request
        part_size: Server-dictated part size in bytes
        part_checksums: Checksums of uploaded parts, in part number order
        part_number: 1-based index of the next part to upload
    """

    def __init__(self, api_client, resolver, file_stream: Optional[FileStream],
                 temp_dir: Optional[str] = None, progress_callback: Optional[Callable] = None):
        """
        Initialize upload session.

        Args:
            api_client: UCDriveAPI instance for the remote calls
            resolver: PathResolver used to find the destination folder
            file_stream: Upload source
            temp_dir: Directory for the staging file (OS default if None)
            progress_callback: Optional callback for progress updates
                             Called with (message: str, current: int, total: int)
        """
        self.api = api_client
        self.resolver = resolver
        self.file = file_stream
        self.temp_dir = temp_dir
        self.progress_callback = progress_callback

        self.content_md5: Optional[str] = None
        self.content_sha1: Optional[str] = None
        self.task_id: Optional[str] = None
        self.part_size: Optional[int] = None
        self.part_checksums: List[str] = []
        self.part_number: int = 1

    def run(self) -> None:
        """
        Execute the upload.

        Returns normally when the file is stored, including when the server
        recognizes the content by hash or declares the upload complete early.

        Raises:
            UCDriveEmptyInputError: If there is no source stream
            UCDriveNotFoundError: If the destination folder cannot be resolved
            UCDriveLocalIOError: If the staging file cannot be written or read
            UCDriveRemoteError: If any remote call fails
        """
        if self.file is None or self.file.stream is None:
            raise UCDriveEmptyInputError("No file to upload")

        # Parent must resolve before anything is staged
        parent = self.resolver.resolve_file(self.file.parent_path)
        if not parent.is_dir:
            raise UCDriveNotFoundError(f"Not a folder: {self.file.parent_path}")

        logger.info(f"Uploading {self.file.name} ({self.file.size} bytes) to {self.file.parent_path}")

        try:
            staging = tempfile.NamedTemporaryFile(prefix="file-", dir=self.temp_dir)
        except OSError as e:
            raise UCDriveLocalIOError(f"Cannot create staging file: {e}") from e

        with staging:
            self._stage(staging)
            self._hash(staging)

            pre = self.api.upload_pre(UpPreRequest(
                file_name=self.file.name,
                format_type=self.file.mime_type,
                l_created_at=int(time.time() * 1000),
                l_updated_at=int(time.time() * 1000),
                pdir_fid=parent.id,
                size=self.file.size
            ))
            self.task_id = pre.data.task_id
            self.part_size = pre.metadata.part_size
            logger.debug(f"Upload task {self.task_id}, part size {self.part_size}")

            finished = self.api.upload_hash(UpHashRequest(
                md5=self.content_md5,
                sha1=self.content_sha1,
                task_id=self.task_id
            ))
            if finished:
                logger.info(f"{self.file.name} already stored on server, skipping transfer")
                self._report("Upload complete (matched by hash)", self.file.size, self.file.size)
                return

            if not self._upload_parts(staging, pre):
                logger.info(f"Server finished {self.file.name} after part {self.part_number}")
                self._report("Upload complete", self.file.size, self.file.size)
                return

            self.api.upload_commit(pre, self.part_checksums)
            self.api.upload_finish(pre)

        logger.info(f"Uploaded {self.file.name} in {len(self.part_checksums)} part(s)")
        self._report("Upload complete", self.file.size, self.file.size)

    def _stage(self, staging: BinaryIO) -> None:
        """Copy the whole source stream into the staging file."""
        try:
            shutil.copyfileobj(self.file.stream, staging)
            staging.flush()
            written = staging.tell()
        except OSError as e:
            raise UCDriveLocalIOError(f"Failed to stage {self.file.name}: {e}") from e

        if written != self.file.size:
            raise UCDriveLocalIOError(
                f"Staged {written} bytes for {self.file.name}, expected {self.file.size}"
            )
        self._report(f"Staged {self.file.name}", 0, self.file.size)

    def _hash(self, staging: BinaryIO) -> None:
        """Compute MD5 and SHA-1 in two passes, leaving the cursor at the start."""
        self.content_md5 = self._digest(staging, hashlib.md5())
        self.content_sha1 = self._digest(staging, hashlib.sha1())
        try:
            staging.seek(0)
        except OSError as e:
            raise UCDriveLocalIOError(f"Failed to rewind staging file: {e}") from e
        logger.debug(f"hash: {self.content_md5} {self.content_sha1}")
        self._report(f"Hashed {self.file.name}", 0, self.file.size)

    @staticmethod
    def _digest(staging: BinaryIO, hasher) -> str:
        try:
            staging.seek(0)
            while chunk := staging.read(HASH_CHUNK_SIZE):
                hasher.update(chunk)
        except OSError as e:
            raise UCDriveLocalIOError(f"Failed to hash staging file: {e}") from e
        return hasher.hexdigest()

    def _upload_parts(self, staging: BinaryIO, pre: UpPreResponse) -> bool:
        """
        Upload the staged file part by part.

        The remaining byte count drops by the nominal part size per part,
        also for a shorter final part.

        Returns:
            True if all parts were uploaded and must be committed,
            False if the server declared the upload complete
        """
        try:
            staging.seek(0)
        except OSError as e:
            raise UCDriveLocalIOError(f"Failed to rewind staging file: {e}") from e

        left = self.file.size
        while left > 0:
            size = min(self.part_size, left)
            try:
                data = staging.read(size)
            except OSError as e:
                raise UCDriveLocalIOError(f"Failed to read part {self.part_number}: {e}") from e
            if len(data) != size:
                raise UCDriveLocalIOError(
                    f"Short read for part {self.part_number}: got {len(data)} of {size} bytes"
                )

            left -= self.part_size
            logger.debug(f"left: {left}")

            checksum = self.api.upload_part(pre, self.file.mime_type, self.part_number, data)
            if checksum == FINISH_SENTINEL:
                return False

            self.part_checksums.append(checksum)
            self._report(
                f"Uploaded part {self.part_number}",
                min(self.part_number * self.part_size, self.file.size),
                self.file.size
            )
            self.part_number += 1

        return True

    def _report(self, message: str, current: int, total: int) -> None:
        if self.progress_callback:
            self.progress_callback(message, current, total)
