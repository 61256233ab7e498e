import os
from dataclasses import dataclass
from typing import Optional, Union

from nova_pypcloud.constants import ApiEndpoint
from nova_pypcloud.exceptions import ConfigurationError


@dataclass
class Config:
    """Global configuration settings for Nova-PyPCloud"""

    # API settings
    DEFAULT_ENDPOINT: Union[ApiEndpoint, str] = ApiEndpoint.US
    TIMEOUT: Optional[float] = None  # None leaves requests' default (no timeout)

    # File operation settings
    CHUNK_SIZE: int = 4 * 1024 * 1024  # 4MB chunks when reading local files

    # Authentication settings
    SERVICE_NAME: str = "nova-pypcloud"

    # Progress bar settings
    PROGRESS_BAR_UNIT: str = "B"
    PROGRESS_BAR_UNIT_SCALE: bool = True

    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.CHUNK_SIZE <= 0:
            raise ValueError("CHUNK_SIZE must be positive")
        if self.TIMEOUT is not None and self.TIMEOUT <= 0:
            raise ValueError("TIMEOUT must be positive or None")
        try:
            self.DEFAULT_ENDPOINT = ApiEndpoint.coerce(self.DEFAULT_ENDPOINT)
        except ValueError as e:
            raise ConfigurationError(
                f"Unknown pCloud endpoint: {self.DEFAULT_ENDPOINT}"
            ) from e

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build a configuration from environment variables.

        Reads:
            PCLOUD_API_ENDPOINT: 'us', 'eu' or a full endpoint URL
            PCLOUD_TIMEOUT: Request timeout in seconds
            PCLOUD_SERVICE_NAME: Keyring service and config directory name

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        kwargs = {}
        endpoint = os.getenv("PCLOUD_API_ENDPOINT")
        if endpoint:
            kwargs["DEFAULT_ENDPOINT"] = endpoint
        service_name = os.getenv("PCLOUD_SERVICE_NAME")
        if service_name:
            kwargs["SERVICE_NAME"] = service_name
        timeout = os.getenv("PCLOUD_TIMEOUT")
        if timeout:
            try:
                kwargs["TIMEOUT"] = float(timeout)
            except ValueError as e:
                raise ConfigurationError(f"Invalid PCLOUD_TIMEOUT: {timeout}") from e
        try:
            return cls(**kwargs)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
