"""pCloud client combining all API operations."""

from typing import Optional

from nova_pypcloud.config import Config
from nova_pypcloud.operations.files import FileOperations
from nova_pypcloud.operations.folders import FolderOperations


class PCloudClient(FolderOperations, FileOperations):
    """
    pCloud client exposing every supported API operation.

    Example:
        ```python
        client = PCloudClient(access_token, ApiEndpoint.EU)
        folder = client.create_folder(0, "reports")
        client.upload_file(folder["metadata"]["folderid"], "a.txt", b"hello")
        ```
    """

    @classmethod
    def from_config(
        cls, access_token: str, config: Optional[Config] = None
    ) -> "PCloudClient":
        """Create a client whose endpoint, timeout and file settings come from a Config."""
        return cls(access_token, config=config)
