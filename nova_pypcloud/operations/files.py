"""File operations module for nova-pypcloud."""

import logging
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Union

from nova_pypcloud.constants import API_MESSAGES
from nova_pypcloud.exceptions import PCloudError
from nova_pypcloud.operations.base import BaseOperations
from nova_pypcloud.types import PathLike
from nova_pypcloud.utils.progress import ProgressReader, create_progress_bar

logger = logging.getLogger(__name__)


class FileOperations(BaseOperations):
    """
    Class for handling pCloud file operations.

    Provides functionality for:
    - Uploading in-memory content
    - Uploading local files with progress

    Inherits from:
        BaseOperations: Core pCloud request handling
    """

    def upload_file(
        self,
        folder_id: int,
        file_name: str,
        file_content: Union[bytes, BinaryIO],
        no_partial: bool = False,
        progress_hash: Optional[str] = None,
        rename_if_exists: bool = False,
        mtime: Optional[int] = None,
        ctime: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Upload a file to a specified folder.

        Args:
            folder_id (int): ID of the destination folder
            file_name (str): Name of the file to create
            file_content (Union[bytes, BinaryIO]): File content or a readable binary file
            no_partial (bool, optional): Do not keep partially uploaded files.
                Defaults to False.
            progress_hash (Optional[str]): Hash used to observe upload progress
            rename_if_exists (bool, optional): Rename the upload if a file with
                the same name exists. Defaults to False.
            mtime (Optional[int]): Modification time, unix seconds
            ctime (Optional[int]): Creation time, unix seconds. pCloud only
                honours it together with ``mtime``.

        Returns:
            Dict[str, Any]: The pCloud response with ``fileids`` and ``metadata``

        Raises:
            PCloudError: If pCloud rejects the upload
        """
        params: Dict[str, Any] = {"folderid": folder_id}
        self._flag(params, "nopartial", no_partial)
        self._flag(params, "renameifexists", rename_if_exists)
        self._optional(params, "mtime", mtime)
        self._optional(params, "ctime", ctime)
        self._optional(params, "progresshash", progress_hash)
        files = {"file": (file_name, file_content)}
        try:
            result = self._request("POST", "/uploadfile", params=params, files=files)
            logger.info(f"Uploaded {file_name!r} to {folder_id}")
            return result
        except PCloudError as e:
            logger.error(
                API_MESSAGES["upload_error"].format(f"{file_name!r} to {folder_id}: {e}")
            )
            raise

    def upload_local_file(
        self,
        local_path: PathLike,
        folder_id: int = 0,
        file_name: Optional[str] = None,
        show_progress: bool = True,
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Upload a file from the local filesystem.

        The open file is wrapped in a ``ProgressReader`` and handed to
        requests, which reads it into the multipart body in
        ``config.CHUNK_SIZE`` pieces while the progress bar advances.

        Args:
            local_path (PathLike): Path of the local file
            folder_id (int, optional): ID of the destination folder. Defaults to root.
            file_name (Optional[str]): Remote name. Defaults to the local file name.
            show_progress (bool, optional): Show an upload progress bar. Defaults to True.
            **options: Forwarded to ``upload_file`` (``rename_if_exists``, ``mtime``, ...)

        Returns:
            Dict[str, Any]: The pCloud response

        Raises:
            FileNotFoundError: If the local file does not exist
            PCloudError: If pCloud rejects the upload
        """
        path = Path(local_path)
        if not path.is_file():
            raise FileNotFoundError(f"Local file not found: {path}")
        with open(path, "rb") as f:
            with create_progress_bar(
                total=path.stat().st_size,
                desc=f"Uploading {path.name}",
                unit=self.config.PROGRESS_BAR_UNIT,
                unit_scale=self.config.PROGRESS_BAR_UNIT_SCALE,
                disable=not show_progress,
            ) as pbar:
                reader = ProgressReader(f, pbar, self.config.CHUNK_SIZE)
                return self.upload_file(
                    folder_id, file_name or path.name, reader, **options
                )
