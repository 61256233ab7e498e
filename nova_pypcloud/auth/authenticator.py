import logging
import webbrowser
from typing import Optional, Tuple, Union
from urllib.parse import urlencode

import requests

from nova_pypcloud.auth.token_storage import TokenStorage
from nova_pypcloud.client import PCloudClient
from nova_pypcloud.config import Config
from nova_pypcloud.constants import (
    API_MESSAGES,
    OAUTH_AUTHORIZE_URL,
    PCLOUD_APPS_URL,
    ApiEndpoint,
)
from nova_pypcloud.exceptions import AuthenticationError, PCloudError
from nova_pypcloud.types import TokenData
from nova_pypcloud.utils.response import unwrap_response

logger = logging.getLogger(__name__)


def get_oauth_url(client_id: str, redirect_uri: Optional[str] = None) -> str:
    """
    Generate the OAuth URL used to authorize an app with pCloud.

    Args:
        client_id (str): The OAuth client ID provided by pCloud
        redirect_uri (Optional[str]): Where pCloud redirects after authorization

    Returns:
        str: The authorization URL

    Example:
        ```python
        get_oauth_url("abc", "http://localhost/callback")
        # https://my.pcloud.com/oauth2/authorize?client_id=abc&response_type=code
        #     &redirect_uri=http%3A%2F%2Flocalhost%2Fcallback
        ```
    """
    params = {"client_id": client_id, "response_type": "code"}
    if redirect_uri:
        params["redirect_uri"] = redirect_uri
    return f"{OAUTH_AUTHORIZE_URL}?{urlencode(params)}"


def get_access_token(
    client_id: str,
    client_secret: str,
    code: str,
    api_endpoint: Union[ApiEndpoint, str] = ApiEndpoint.US,
    timeout: Optional[float] = None,
) -> str:
    """
    Exchange an OAuth authorization code for an access token.

    Args:
        client_id (str): The OAuth client ID provided by pCloud
        client_secret (str): The OAuth client secret provided by pCloud
        code (str): Authorization code received after user authorization
        api_endpoint (Union[ApiEndpoint, str], optional): API region of the
            account. Defaults to ApiEndpoint.US.
        timeout (Optional[float]): Passed unchanged to requests

    Returns:
        str: The OAuth access token

    Raises:
        PCloudError: If pCloud rejects the code or the credentials
        requests.RequestException: On transport failures
    """
    url = ApiEndpoint.coerce(api_endpoint).value + "/oauth2_token"
    response = requests.get(
        url,
        params={"client_id": client_id, "client_secret": client_secret, "code": code},
        timeout=timeout,
    )
    response.raise_for_status()
    return unwrap_response(response.json())["access_token"]


class Authenticator:
    """
    Handles the interactive pCloud OAuth flow and client creation.

    This class manages:
    - Opening the authorization page in the browser
    - Exchanging the authorization code for an access token
    - Token storage and retrieval

    Attributes:
        storage (TokenStorage): Instance of TokenStorage for secure token management
        config (Config): Settings passed on to the clients it builds
    """

    def __init__(
        self, storage: Optional[TokenStorage] = None, config: Optional[Config] = None
    ):
        """Initialize authenticator with token storage named after config.SERVICE_NAME."""
        self.config = config if config is not None else Config()
        self.storage = (
            storage if storage is not None else TokenStorage(self.config.SERVICE_NAME)
        )

    def prompt_credentials(self) -> Tuple[str, str]:
        """
        Ask the user for the app's client ID and secret.

        Returns:
            tuple[str, str]: A tuple containing (client_id, client_secret)

        Raises:
            AuthenticationError: If either value is left empty
        """
        print(f"\nYour app's Client ID and Client Secret are listed at {PCLOUD_APPS_URL}")
        client_id = input("Enter your Client ID: ").strip()
        client_secret = input("Enter your Client Secret: ").strip()
        if not client_id or not client_secret:
            raise AuthenticationError("Client ID and Client Secret are required")
        return client_id, client_secret

    def authenticate_pcloud(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        api_endpoint: Union[ApiEndpoint, str] = ApiEndpoint.US,
        force_reauth: bool = False,
    ) -> bool:
        """
        Perform the OAuth code flow with pCloud and store the access token.

        Args:
            client_id (Optional[str]): App client ID; prompted for when missing
            client_secret (Optional[str]): App client secret; prompted for when missing
            api_endpoint (Union[ApiEndpoint, str], optional): API region of the
                account. Defaults to ApiEndpoint.US.
            force_reauth (bool, optional): Re-authenticate even if a token exists.
                Defaults to False.

        Returns:
            bool: True if a token is stored, False if the exchange or storage failed

        Raises:
            AuthenticationError: If no credentials were provided
        """
        if not force_reauth and self.storage.get_tokens():
            print("Already authenticated. Skipping authentication process.")
            return True

        if not client_id or not client_secret:
            client_id, client_secret = self.prompt_credentials()
        endpoint = ApiEndpoint.coerce(api_endpoint)

        authorize_url = get_oauth_url(client_id)
        print("\n1. I'll open the pCloud authorization page in your browser.")
        print("2. Log in and click 'Allow'.")
        print("3. Copy the authorization code.")
        if not webbrowser.open(authorize_url):
            print(f"\nPlease manually visit: {authorize_url}")
        code = input("\nEnter the authorization code here: ").strip()

        try:
            access_token = get_access_token(client_id, client_secret, code, endpoint)
        except (PCloudError, requests.RequestException) as e:
            logger.error(API_MESSAGES["auth_failed"].format(e))
            return False

        tokens: TokenData = {
            "client_id": client_id,
            "access_token": access_token,
            "endpoint": endpoint.value,
        }
        if not self.storage.save_tokens(tokens):
            logger.error(API_MESSAGES["token_error"])
            return False
        print(f"\n{API_MESSAGES['auth_success']}")
        return True

    def get_client(self, timeout: Optional[float] = None) -> Optional[PCloudClient]:
        """
        Create a pCloud client from stored tokens.

        Returns:
            Optional[PCloudClient]: Client, or None if no token is stored
        """
        tokens = self.storage.get_tokens()
        if not tokens:
            logger.error("No credentials found")
            return None
        return PCloudClient(
            tokens["access_token"], tokens["endpoint"], timeout=timeout, config=self.config
        )


# Top-level aliases to support module-level imports
def authenticate_pcloud(*args, **kwargs) -> bool:
    """
    Module-level function to authenticate with pCloud.

    Example:
        ```python
        success = authenticate_pcloud(client_id, client_secret, ApiEndpoint.EU)
        ```
    """
    return Authenticator().authenticate_pcloud(*args, **kwargs)


def get_pcloud_client(*args, **kwargs) -> Optional[PCloudClient]:
    """
    Module-level function to get a pCloud client from stored tokens.

    Example:
        ```python
        client = get_pcloud_client()
        if client:
            client.list_folders(0)
        ```
    """
    return Authenticator().get_client(*args, **kwargs)
