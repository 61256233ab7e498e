"""
Constants module for nova-pypcloud.

This module defines enumerations and constant values used throughout the package:
- pCloud API endpoints per data region
- OAuth URLs
- Standard API messages

Note:
    All enumerations inherit from Enum for type safety and consistency.
"""

from enum import Enum
from typing import Dict, Union


class ApiEndpoint(Enum):
    """
    pCloud API endpoints by data region.

    Attributes:
        US: Endpoint for accounts hosted in the United States
        EU: Endpoint for accounts hosted in Europe

    Example:
        ```python
        client = PCloudClient(token, ApiEndpoint.EU)
        ```
    """

    US = "https://api.pcloud.com"
    EU = "https://eapi.pcloud.com"

    @classmethod
    def coerce(cls, value: Union["ApiEndpoint", str]) -> "ApiEndpoint":
        """
        Resolve an endpoint from an enum member, a base URL or a region name.

        Raises:
            ValueError: If the value matches no known endpoint
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        if text.upper() in cls.__members__:
            return cls[text.upper()]
        return cls(text.rstrip("/"))


OAUTH_AUTHORIZE_URL = "https://my.pcloud.com/oauth2/authorize"
PCLOUD_APPS_URL = "https://docs.pcloud.com/my_apps/"

# API response messages
API_MESSAGES: Dict[str, str] = {
    "auth_success": "Authentication successful! Token securely stored.",
    "auth_failed": "Authentication failed: {}",
    "token_error": "Error saving token.",
    "no_credentials": "No stored pCloud token. Run 'nova-pypcloud authenticate' first.",
    "upload_error": "Error uploading: {}",
}
