"""Base operations module for nova-pypcloud."""

import logging
from typing import Any, Dict, Optional, Union

import requests

from nova_pypcloud.config import Config
from nova_pypcloud.constants import ApiEndpoint
from nova_pypcloud.utils.response import unwrap_response

logger = logging.getLogger(__name__)


class BaseOperations:
    """
    Base class for pCloud API operations.

    Holds the per-instance transport configuration and funnels every call
    through a single request helper that classifies the response.

    Attributes:
        session (requests.Session): HTTP session carrying the bearer header
        timeout (Optional[float]): Passed unchanged to requests
        config (Config): Settings for chunk size and progress display
    """

    def __init__(
        self,
        access_token: str,
        api_endpoint: Optional[Union[ApiEndpoint, str]] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        config: Optional[Config] = None,
    ):
        """
        Initialize operations bound to one access token and endpoint.

        Args:
            access_token (str): OAuth access token for authenticating requests.
            api_endpoint (Optional[Union[ApiEndpoint, str]]): pCloud API region.
                Defaults to config.DEFAULT_ENDPOINT (ApiEndpoint.US).
            timeout (Optional[float], optional): Request timeout in seconds.
                Defaults to config.TIMEOUT.
            session (Optional[requests.Session]): Existing HTTP session. Defaults to None.
            config (Optional[Config]): Package settings. Defaults to Config().
        """
        self.config = config if config is not None else Config()
        self._endpoint = ApiEndpoint.coerce(
            api_endpoint if api_endpoint is not None else self.config.DEFAULT_ENDPOINT
        )
        self._access_token = access_token
        self.timeout = timeout if timeout is not None else self.config.TIMEOUT
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {access_token}"})

    @property
    def api_endpoint(self) -> ApiEndpoint:
        return self._endpoint

    @property
    def base_url(self) -> str:
        return self._endpoint.value

    @property
    def access_token(self) -> str:
        return self._access_token

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Make a request to the pCloud API.

        Args:
            method (str): HTTP method (GET, POST, ...)
            path (str): API method path, e.g. ``/listfolder``
            params (Optional[Dict[str, Any]]): Query parameters
            files (Optional[Dict[str, Any]]): Multipart parts for uploads

        Returns:
            Dict[str, Any]: The decoded response body, unchanged

        Raises:
            PCloudError: If pCloud answers with a non-zero result
            requests.RequestException: On transport failures, non-2xx
                statuses or undecodable bodies
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url} params={params}")
        response = self.session.request(
            method, url, params=params, files=files, timeout=self.timeout
        )
        response.raise_for_status()
        return unwrap_response(response.json())

    @staticmethod
    def _flag(params: Dict[str, Any], name: str, enabled: bool) -> None:
        """Add a presence flag (``name=1``) only when enabled."""
        if enabled:
            params[name] = 1

    @staticmethod
    def _optional(params: Dict[str, Any], name: str, value: Any) -> None:
        """Add a query parameter only when a value was given."""
        if value is not None:
            params[name] = value
