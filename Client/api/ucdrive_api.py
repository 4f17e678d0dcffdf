"""
UCDrive Client - API Communication Module

Handles all communication with the UC drive REST API and with the object
storage endpoint that receives upload parts.
Authentication is carried as the account cookie on every API request.

Author: UCDrive Project
"""

import base64
import hashlib
import json
import logging
from email.utils import formatdate
from typing import Optional, Dict, Any, List, Type, TypeVar
from urllib.parse import urlparse

import requests
from pydantic import BaseModel, ValidationError

from exceptions import UCDriveAuthError, UCDriveRemoteError
from models import Account, RemoteEntry
from models.api import (
    SortResponse,
    DownloadRequest,
    DownloadResponse,
    MakeDirRequest,
    MoveRequest,
    RenameRequest,
    DeleteRequest,
    UpPreRequest,
    UpPreResponse,
    UpHashRequest,
    UpHashResponse,
    UpAuthRequest,
    UpAuthResponse,
    UpFinishRequest
)

# Configure logging
logger = logging.getLogger(__name__)


DEFAULT_API_BASE_URL = "https://pc-api.uc.cn/1/clouddrive"
DEFAULT_REFERER = "https://drive.uc.cn"
DEFAULT_TIMEOUT = 30
LIST_PAGE_SIZE = 100

# Returned by upload_part() when the storage side considers the upload finished
FINISH_SENTINEL = "finish"

OSS_USER_AGENT = "aliyun-sdk-js/6.6.1 Chrome 98.0.4758.80 on Windows 10 64-bit"

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse(model: Type[ModelT], data: Any, endpoint: str) -> ModelT:
    """
    Validate a decoded JSON payload against its response model.

    Raises:
        UCDriveRemoteError: If the payload does not match the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Malformed response from {endpoint}: {e}")
        raise UCDriveRemoteError(f"Malformed response from {endpoint}") from e


class UCDriveAPI:
    """
    API client for the UC cloud drive.

    Responsibilities:
    - Attach the account cookie and fixed query parameters to API calls
    - Translate transport failures and API error codes into UCDriveRemoteError
    - Validate responses against explicit request/response models
    - Sign and send multipart upload requests to the object storage endpoint
    """

    def __init__(self, account: Account, base_url: str = DEFAULT_API_BASE_URL,
                 referer: str = DEFAULT_REFERER, timeout: int = DEFAULT_TIMEOUT,
                 session: Optional[requests.Session] = None):
        """
        Initialize API client.

        Args:
            account: Account whose cookie authenticates every request
            base_url: Base URL of the drive API
            referer: Referer header expected by the drive API
            timeout: Per-request timeout in seconds
            session: Optional pre-built session (a new one is created if None)
        """
        self.account = account
        self.base_url = base_url.rstrip("/")
        self.referer = referer
        self.timeout = timeout
        # One session for all requests (connection pooling)
        self.session = session if session is not None else requests.Session()
        logger.debug(f"Initialized API client for {self.base_url} (account: {account.name})")

    def close(self):
        """Close the session and release resources."""
        if self.session:
            self.session.close()
            logger.debug("API client session closed")

    def _make_request(self, method: str, endpoint: str, params: Optional[Dict[str, Any]] = None,
                      json_body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET, POST)
            endpoint: API endpoint (e.g., "/file/sort")
            params: Additional query parameters
            json_body: JSON request body

        Returns:
            Decoded JSON envelope ({status, code, message, data, metadata})

        Raises:
            UCDriveAuthError: If the cookie is rejected
            UCDriveRemoteError: On connection failure, HTTP error or non-zero API code
        """
        url = f"{self.base_url}{endpoint}"
        query = {"pr": "UCBrowser", "fr": "pc"}
        if params:
            query.update(params)
        headers = {
            "Cookie": self.account.access_token,
            "Accept": "application/json, text/plain, */*",
            "Referer": self.referer
        }
        logger.debug(f"API request: {method} {endpoint}")

        try:
            response = self.session.request(
                method,
                url,
                params=query,
                json=json_body,
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to server at {self.base_url}: {e}")
            raise UCDriveRemoteError(f"Cannot connect to server at {self.base_url}") from e
        except requests.exceptions.Timeout as e:
            logger.error("Request timed out")
            raise UCDriveRemoteError("Request timed out") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error: {str(e)}")
            raise UCDriveRemoteError(f"Request error: {str(e)}") from e

        if response.status_code == 401:
            logger.warning("Cookie rejected by server")
            raise UCDriveAuthError("Cookie expired or invalid - update the account cookie", status_code=401)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            logger.error(f"Request failed with status {response.status_code}: {response.text}")
            raise UCDriveRemoteError(
                f"Request {method} {endpoint} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code
            )

        code = data.get("code", 0)
        if response.status_code >= 400 or code != 0:
            message = data.get("message", response.text)
            logger.error(f"Request {method} {endpoint} failed with status {response.status_code}, code {code}: {message}")
            raise UCDriveRemoteError(
                f"Request {method} {endpoint} failed with code {code}: {message}",
                status_code=response.status_code,
                code=code
            )

        return data

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._make_request("GET", endpoint, params=params)

    def post(self, endpoint: str, json_body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._make_request("POST", endpoint, json_body=json_body)

    # ==================== Account ====================

    def get_config(self) -> Dict[str, Any]:
        """
        Fetch the account's drive configuration.

        Used to check that the stored cookie is accepted.

        Raises:
            UCDriveRemoteError: If the request fails
        """
        return self.get("/config")

    # ==================== File Operations ====================

    def list_files(self, parent_id: str) -> List[RemoteEntry]:
        """
        List all children of a folder, following pagination.

        Sorting follows the account's order_by and order_direction settings,
        with folders grouped before files.

        Args:
            parent_id: fid of the folder to list

        Returns:
            Children in remote order

        Raises:
            UCDriveRemoteError: If any page request fails
        """
        entries: List[RemoteEntry] = []
        page = 1
        params = {
            "pdir_fid": parent_id,
            "_size": str(LIST_PAGE_SIZE),
            "_fetch_total": "1",
            "_sort": f"file_type:asc,{self.account.order_by}:{self.account.order_direction}"
        }
        while True:
            params["_page"] = str(page)
            resp = _parse(SortResponse, self.get("/file/sort", params=params), "/file/sort")
            entries.extend(item.to_remote_entry() for item in resp.data.list)
            if page * LIST_PAGE_SIZE >= resp.metadata.total:
                break
            page += 1
        logger.debug(f"Listed {len(entries)} entries under {parent_id}")
        return entries

    def get_download_url(self, file_id: str) -> str:
        """
        Resolve a direct download URL for a file.

        Raises:
            UCDriveRemoteError: If the request fails or returns no URL
        """
        payload = DownloadRequest(fids=[file_id]).model_dump()
        resp = _parse(DownloadResponse, self.post("/file/download", payload), "/file/download")
        if not resp.data:
            raise UCDriveRemoteError(f"No download URL returned for {file_id}")
        return resp.data[0].download_url

    def make_dir(self, parent_id: str, name: str) -> None:
        payload = MakeDirRequest(file_name=name, pdir_fid=parent_id).model_dump()
        self.post("/file", payload)

    def move(self, file_id: str, to_parent_id: str) -> None:
        payload = MoveRequest(filelist=[file_id], to_pdir_fid=to_parent_id).model_dump()
        self.post("/file/move", payload)

    def rename(self, file_id: str, name: str) -> None:
        payload = RenameRequest(fid=file_id, file_name=name).model_dump()
        self.post("/file/rename", payload)

    def delete(self, file_id: str) -> None:
        payload = DeleteRequest(filelist=[file_id]).model_dump()
        self.post("/file/delete", payload)

    # ==================== Upload Protocol ====================

    def upload_pre(self, request: UpPreRequest) -> UpPreResponse:
        """
        Open an upload task.

        Returns:
            Task id, part size and the storage coordinates for the parts

        Raises:
            UCDriveRemoteError: If the request fails
        """
        data = self.post("/file/upload/pre", request.model_dump())
        return _parse(UpPreResponse, data, "/file/upload/pre")

    def upload_hash(self, request: UpHashRequest) -> bool:
        """
        Submit the content digests of an upload task.

        Returns:
            True if the server already holds this content and the upload is complete
        """
        data = self.post("/file/update/hash", request.model_dump())
        return _parse(UpHashResponse, data, "/file/update/hash").data.finish

    def upload_part(self, pre: UpPreResponse, mime_type: str, part_number: int, data: bytes) -> str:
        """
        Upload one part of a multipart upload to the storage endpoint.

        Args:
            pre: Response of the pre-upload request
            mime_type: Content type of the payload
            part_number: 1-based part index
            data: Part content

        Returns:
            The part's ETag, or FINISH_SENTINEL if storage reports the upload complete

        Raises:
            UCDriveRemoteError: If signing or the storage request fails
        """
        time_str = formatdate(usegmt=True)
        auth_meta = (
            f"PUT\n"
            f"\n"
            f"{mime_type}\n"
            f"{time_str}\n"
            f"x-oss-date:{time_str}\n"
            f"x-oss-user-agent:{OSS_USER_AGENT}\n"
            f"/{pre.data.bucket}/{pre.data.obj_key}?partNumber={part_number}&uploadId={pre.data.upload_id}"
        )
        auth_key = self._sign(pre, auth_meta)
        headers = {
            "Authorization": auth_key,
            "Content-Type": mime_type,
            "Referer": f"{self.referer}/",
            "x-oss-date": time_str,
            "x-oss-user-agent": OSS_USER_AGENT
        }
        params = {"partNumber": str(part_number), "uploadId": pre.data.upload_id}
        response = self._storage_request("PUT", self._storage_url(pre), headers, params, data)

        if response.status_code == 203:
            logger.info(f"Storage reported upload complete at part {part_number}")
            return FINISH_SENTINEL
        if response.status_code != 200:
            logger.error(f"Part {part_number} upload failed with status {response.status_code}: {response.text}")
            raise UCDriveRemoteError(
                f"Part {part_number} upload failed with status {response.status_code}: {response.text}",
                status_code=response.status_code
            )
        etag = response.headers.get("ETag")
        if not etag:
            raise UCDriveRemoteError(f"Part {part_number} upload returned no ETag")
        return etag

    def upload_commit(self, pre: UpPreResponse, parts: List[str]) -> None:
        """
        Assemble the uploaded parts into the final object.

        Args:
            pre: Response of the pre-upload request
            parts: Part ETags in ascending part number order

        Raises:
            UCDriveRemoteError: If signing or the storage request fails
        """
        body_parts = ['<?xml version="1.0" encoding="UTF-8"?>\n<CompleteMultipartUpload>\n']
        for part_number, etag in enumerate(parts, start=1):
            body_parts.append(f"<Part>\n<PartNumber>{part_number}</PartNumber>\n<ETag>{etag}</ETag>\n</Part>\n")
        body_parts.append("</CompleteMultipartUpload>")
        body = "".join(body_parts).encode("utf-8")

        content_md5 = base64.b64encode(hashlib.md5(body).digest()).decode("ascii")
        callback = json.dumps(pre.data.callback.model_dump(by_alias=True), separators=(",", ":"))
        callback_b64 = base64.b64encode(callback.encode("utf-8")).decode("ascii")
        time_str = formatdate(usegmt=True)
        auth_meta = (
            f"POST\n"
            f"{content_md5}\n"
            f"application/xml\n"
            f"{time_str}\n"
            f"x-oss-callback:{callback_b64}\n"
            f"x-oss-date:{time_str}\n"
            f"x-oss-user-agent:{OSS_USER_AGENT}\n"
            f"/{pre.data.bucket}/{pre.data.obj_key}?uploadId={pre.data.upload_id}"
        )
        auth_key = self._sign(pre, auth_meta)
        headers = {
            "Authorization": auth_key,
            "Content-MD5": content_md5,
            "Content-Type": "application/xml",
            "Referer": f"{self.referer}/",
            "x-oss-callback": callback_b64,
            "x-oss-date": time_str,
            "x-oss-user-agent": OSS_USER_AGENT
        }
        params = {"uploadId": pre.data.upload_id}
        response = self._storage_request("POST", self._storage_url(pre), headers, params, body)
        if response.status_code != 200:
            logger.error(f"Commit failed with status {response.status_code}: {response.text}")
            raise UCDriveRemoteError(
                f"Commit failed with status {response.status_code}: {response.text}",
                status_code=response.status_code
            )
        logger.debug(f"Committed {len(parts)} parts for task {pre.data.task_id}")

    def upload_finish(self, pre: UpPreResponse) -> None:
        """Close out an upload task after a successful commit."""
        payload = UpFinishRequest(obj_key=pre.data.obj_key, task_id=pre.data.task_id).model_dump()
        self.post("/file/upload/finish", payload)

    # ==================== Storage Helpers ====================

    def _sign(self, pre: UpPreResponse, auth_meta: str) -> str:
        """Ask the drive API to sign a storage request."""
        payload = UpAuthRequest(
            auth_info=pre.data.auth_info,
            auth_meta=auth_meta,
            task_id=pre.data.task_id
        ).model_dump()
        return _parse(UpAuthResponse, self.post("/file/upload/auth", payload), "/file/upload/auth").data.auth_key

    @staticmethod
    def _storage_url(pre: UpPreResponse) -> str:
        host = urlparse(pre.data.upload_url).netloc or pre.data.upload_url
        return f"https://{pre.data.bucket}.{host}/{pre.data.obj_key}"

    def _storage_request(self, method: str, url: str, headers: Dict[str, str],
                         params: Dict[str, str], data: bytes) -> requests.Response:
        """
        Send a signed request to the storage endpoint.

        The cookie is not sent; the signature in headers authenticates it.
        """
        logger.debug(f"Storage request: {method} {url} ({len(data)} bytes)")
        try:
            return self.session.request(
                method,
                url,
                params=params,
                data=data,
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Cannot connect to storage at {url}: {e}")
            raise UCDriveRemoteError(f"Cannot connect to storage at {url}") from e
        except requests.exceptions.Timeout as e:
            logger.error("Storage request timed out")
            raise UCDriveRemoteError("Storage request timed out") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Storage request error: {str(e)}")
            raise UCDriveRemoteError(f"Storage request error: {str(e)}") from e
