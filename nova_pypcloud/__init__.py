# nova_pypcloud/__init__.py
from .auth.authenticator import Authenticator, get_access_token, get_oauth_url
from .auth.token_storage import TokenStorage
from .client import PCloudClient
from .config import Config
from .constants import ApiEndpoint
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    NovaPCloudError,
    PCloudError,
    TokenStorageError,
)
from .operations.files import FileOperations
from .operations.folders import FolderOperations
from .types import ApiError, ApiResponse, ApiResult, TokenData

__all__ = [
    "ApiEndpoint",
    "ApiError",
    "ApiResponse",
    "ApiResult",
    "Authenticator",
    "AuthenticationError",
    "Config",
    "ConfigurationError",
    "FileOperations",
    "FolderOperations",
    "NovaPCloudError",
    "PCloudClient",
    "PCloudError",
    "TokenData",
    "TokenStorage",
    "TokenStorageError",
    "get_access_token",
    "get_oauth_url",
]
