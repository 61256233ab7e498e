"""Authentication module for nova-pypcloud."""

from nova_pypcloud.auth.authenticator import (
    Authenticator,
    authenticate_pcloud,
    get_access_token,
    get_oauth_url,
    get_pcloud_client,
)
from nova_pypcloud.auth.token_storage import TokenStorage

__all__ = [
    "Authenticator",
    "authenticate_pcloud",
    "get_access_token",
    "get_oauth_url",
    "get_pcloud_client",
    "TokenStorage",
]
