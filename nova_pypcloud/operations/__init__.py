"""Operations module for nova-pypcloud."""

from nova_pypcloud.operations.files import FileOperations
from nova_pypcloud.operations.folders import FolderOperations

__all__ = ["FileOperations", "FolderOperations"]
