"""Folder operations module for nova-pypcloud."""

import logging
from typing import Any, Dict, List, Optional

import pandas as pd

from nova_pypcloud.exceptions import PCloudError
from nova_pypcloud.operations.base import BaseOperations

logger = logging.getLogger(__name__)

LISTING_COLUMNS = ["name", "path", "type", "id", "parent_id", "size", "modified"]


class FolderOperations(BaseOperations):
    """
    Class for handling pCloud folder operations.

    Provides functionality for:
    - Folder listing (raw API payload or flattened DataFrame)
    - Folder creation
    - Renaming and moving
    - Recursive deletion

    Inherits from:
        BaseOperations: Core pCloud request handling
    """

    def list_folders(
        self,
        folder_id: int,
        recursive: bool = False,
        show_deleted: bool = False,
        no_files: bool = False,
        no_shares: bool = False,
    ) -> Dict[str, Any]:
        """
        List folders/files in a specified folder.

        Args:
            folder_id (int): ID of the folder to list (0 is the root folder)
            recursive (bool, optional): List contents recursively. Defaults to False.
            show_deleted (bool, optional): Include deleted items. Defaults to False.
            no_files (bool, optional): Exclude files, return only folders. Defaults to False.
            no_shares (bool, optional): Exclude shared items. Defaults to False.

        Returns:
            Dict[str, Any]: The pCloud response, with the listing under ``metadata``

        Raises:
            PCloudError: If pCloud rejects the request

        Example:
            ```python
            listing = client.list_folders(0, recursive=True)
            for item in listing["metadata"]["contents"]:
                print(item["name"])
            ```
        """
        params: Dict[str, Any] = {"folderid": folder_id}
        self._flag(params, "recursive", recursive)
        self._flag(params, "showdeleted", show_deleted)
        self._flag(params, "nofiles", no_files)
        self._flag(params, "noshares", no_shares)
        try:
            return self._request("GET", "/listfolder", params=params)
        except PCloudError as e:
            logger.error(f"Error listing folder {folder_id}: {e}")
            raise

    def create_folder(self, folder_id: int, name: str) -> Dict[str, Any]:
        """
        Create a new folder.

        Args:
            folder_id (int): ID of the parent folder
            name (str): Name of the new folder

        Returns:
            Dict[str, Any]: The pCloud response; ``metadata`` describes the new folder

        Raises:
            PCloudError: If pCloud rejects the request (e.g. the folder exists)
        """
        try:
            result = self._request(
                "GET", "/createfolder", params={"folderid": folder_id, "name": name}
            )
            logger.info(f"Created folder {name!r} in {folder_id}")
            return result
        except PCloudError as e:
            logger.error(f"Error creating folder {name!r} in {folder_id}: {e}")
            raise

    def delete_folder_recursive(self, folder_id: int) -> Dict[str, Any]:
        """
        Delete a folder and everything inside it.

        Args:
            folder_id (int): ID of the folder to delete

        Returns:
            Dict[str, Any]: The pCloud response with ``deletedfiles``/``deletedfolders``

        Raises:
            PCloudError: If pCloud rejects the request

        Note:
            Irreversible; the folder contents are deleted too.
        """
        try:
            result = self._request(
                "GET", "/deletefolderrecursive", params={"folderid": folder_id}
            )
            logger.info(f"Deleted folder {folder_id}")
            return result
        except PCloudError as e:
            logger.error(f"Error deleting folder {folder_id}: {e}")
            raise

    def rename_folder(
        self,
        folder_id: int,
        to_folder_id: Optional[int] = None,
        to_name: Optional[str] = None,
        to_path: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Rename and/or move a folder.

        Args:
            folder_id (int): ID of the folder to rename/move
            to_folder_id (Optional[int]): ID of the destination folder
            to_name (Optional[str]): New name for the folder
            to_path (Optional[str]): New path. To place the folder inside an
                existing folder without renaming it, the path must end with ``/``.

        Returns:
            Dict[str, Any]: The pCloud response; ``metadata`` describes the folder

        Raises:
            PCloudError: If pCloud rejects the request
        """
        params: Dict[str, Any] = {"folderid": folder_id}
        self._optional(params, "tofolderid", to_folder_id)
        self._optional(params, "toname", to_name)
        self._optional(params, "topath", to_path)
        try:
            result = self._request("GET", "/renamefolder", params=params)
            logger.info(f"Renamed folder {folder_id}")
            return result
        except PCloudError as e:
            logger.error(f"Error renaming folder {folder_id}: {e}")
            raise

    def list_contents(
        self, folder_id: int = 0, recursive: bool = False, no_files: bool = False
    ) -> pd.DataFrame:
        """
        List a folder as a flat DataFrame.

        Args:
            folder_id (int, optional): ID of the folder to list. Defaults to root.
            recursive (bool, optional): Include nested contents. Defaults to False.
            no_files (bool, optional): Only include folders. Defaults to False.

        Returns:
            pd.DataFrame: One row per item with columns name, path, type, id,
                parent_id, size and modified. ``path`` is absolute when pCloud
                reports the listed folder's path, and relative to the listed
                folder (e.g. ``Photos/beach.jpg``) when it does not, as for
                folders other than the root listed by id.

        Raises:
            PCloudError: If pCloud rejects the request
        """
        listing = self.list_folders(folder_id, recursive=recursive, no_files=no_files)
        metadata = listing.get("metadata", {})
        rows = self._flatten_contents(
            metadata.get("contents", []), metadata.get("path", "")
        )
        return pd.DataFrame(rows, columns=LISTING_COLUMNS)

    def _flatten_contents(
        self, contents: List[Dict[str, Any]], parent_path: str
    ) -> List[Dict[str, Any]]:
        rows = []
        for item in contents:
            row = self._process_metadata(item, parent_path)
            rows.append(row)
            if item.get("isfolder") and item.get("contents"):
                rows.extend(self._flatten_contents(item["contents"], row["path"]))
        return rows

    def _process_metadata(self, item: Dict[str, Any], parent_path: str) -> dict:
        """
        Process pCloud item metadata into a standardized row.

        Note:
            pCloud only returns ``path`` for some listings; it is rebuilt
            from the parent path, which is empty for a relative listing.
        """
        is_folder = bool(item.get("isfolder"))
        name = item.get("name", "")
        path = item.get("path") or (
            f"{parent_path.rstrip('/')}/{name}" if parent_path else name
        )
        return {
            "name": item.get("name"),
            "path": path,
            "type": "folder" if is_folder else "file",
            "id": item.get("folderid") if is_folder else item.get("fileid"),
            "parent_id": item.get("parentfolderid"),
            "size": 0 if is_folder else item.get("size", 0),
            "modified": item.get("modified"),
        }
