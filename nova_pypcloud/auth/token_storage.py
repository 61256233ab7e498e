import json
import logging
import platform
from pathlib import Path
from typing import Optional

import keyring
from cryptography.fernet import Fernet, InvalidToken
from keyring.errors import KeyringError, PasswordDeleteError

from nova_pypcloud.config import Config
from nova_pypcloud.exceptions import TokenStorageError
from nova_pypcloud.types import TokenData

logger = logging.getLogger(__name__)

TOKEN_KEYS = ("client_id", "access_token", "endpoint")
KEYRING_USERNAME = "tokens"


class TokenStorage:
    """
    A class to handle secure storage of pCloud access tokens.

    This class provides two storage backends:
    1. System keyring (default on non-Windows systems)
    2. File-based storage with Fernet encryption (default on Windows, and the
       fallback when the keyring fails)

    Attributes:
        service_name (str): Name of the service for keyring storage
        use_keyring (bool): Whether to use keyring backend or Fernet encryption
        config_dir (Path): Directory holding the key and encrypted token file

    Args:
        service_name (str, optional): Service name for keyring storage.
            Defaults to Config.SERVICE_NAME.
        force_fernet (bool, optional): Force use of Fernet encryption instead of
            keyring. Defaults to None.
        config_dir (Path, optional): Override the configuration directory.
    """

    def __init__(
        self,
        service_name: str = Config.SERVICE_NAME,
        force_fernet: Optional[bool] = None,
        config_dir: Optional[Path] = None,
    ):
        self.service_name = service_name
        self.config_dir = (
            Path(config_dir)
            if config_dir is not None
            else Path.home() / ".config" / service_name
        )
        if force_fernet is not None:
            self.use_keyring = not force_fernet
        else:
            self.use_keyring = platform.system() != "Windows" and self._test_keyring()

        logger.debug(
            f"Using {'keyring' if self.use_keyring else 'Fernet encryption'} backend for token storage"
        )

    def _test_keyring(self) -> bool:
        """
        Test if the system keyring is working correctly.

        Returns:
            bool: True if keyring is working, False otherwise
        """
        try:
            keyring.set_password(self.service_name, "test", "test")
            test_value = keyring.get_password(self.service_name, "test")
            keyring.delete_password(self.service_name, "test")
            return test_value == "test"
        except KeyringError as e:
            logger.warning(f"Keyring not available: {e}")
            return False

    def _get_token_path(self) -> Path:
        return self.config_dir / ".tokens.encrypted"

    def _get_or_create_encryption_key(self) -> bytes:
        """
        Get existing or create new encryption key for Fernet.

        Raises:
            TokenStorageError: If the key file cannot be read or written
        """
        key_path = self.config_dir / ".key"
        try:
            if key_path.exists():
                return key_path.read_bytes()
            key_path.parent.mkdir(parents=True, exist_ok=True)
            key = Fernet.generate_key()
            key_path.write_bytes(key)
            key_path.chmod(0o600)
            return key
        except OSError as e:
            raise TokenStorageError(f"Error handling encryption key: {e}") from e

    @staticmethod
    def _validate(tokens: dict) -> Optional[TokenData]:
        if not all(tokens.get(key) for key in TOKEN_KEYS):
            logger.error("Stored token data is incomplete")
            return None
        return {key: tokens[key] for key in TOKEN_KEYS}

    def save_tokens(self, tokens: TokenData) -> bool:
        """
        Save tokens using the configured storage backend.

        Args:
            tokens (TokenData): Client ID, access token and endpoint

        Returns:
            bool: True if save successful, False otherwise

        Note:
            Falls back to Fernet encryption if keyring save fails
        """
        if not self.use_keyring:
            return self._fernet_save_tokens(tokens)
        try:
            keyring.set_password(self.service_name, KEYRING_USERNAME, json.dumps(tokens))
            logger.info("Tokens saved successfully using keyring")
            return True
        except KeyringError as e:
            logger.error(f"Keyring save failed: {e}")
            logger.info("Falling back to Fernet encryption")
            return self._fernet_save_tokens(tokens)

    def get_tokens(self) -> Optional[TokenData]:
        """
        Retrieve tokens from the configured storage backend.

        Returns:
            Optional[TokenData]: Stored tokens, or None if missing or incomplete
        """
        if not self.use_keyring:
            return self._fernet_get_tokens()
        try:
            raw = keyring.get_password(self.service_name, KEYRING_USERNAME)
        except KeyringError as e:
            logger.error(f"Error retrieving tokens: {e}")
            return self._fernet_get_tokens()
        if raw is None:
            return self._fernet_get_tokens()
        try:
            return self._validate(json.loads(raw))
        except json.JSONDecodeError:
            logger.error("Failed to parse token data from keyring")
            return None

    def _fernet_save_tokens(self, tokens: TokenData) -> bool:
        try:
            fernet = Fernet(self._get_or_create_encryption_key())
            token_path = self._get_token_path()
            token_path.parent.mkdir(parents=True, exist_ok=True)
            token_path.write_bytes(fernet.encrypt(json.dumps(tokens).encode()))
            token_path.chmod(0o600)
            logger.info("Tokens saved successfully using Fernet encryption")
            return True
        except (TokenStorageError, OSError) as e:
            logger.error(f"Fernet save failed: {e}")
            return False

    def _fernet_get_tokens(self) -> Optional[TokenData]:
        token_path = self._get_token_path()
        if not token_path.exists():
            logger.debug("Token file does not exist")
            return None
        try:
            fernet = Fernet(self._get_or_create_encryption_key())
            decrypted = fernet.decrypt(token_path.read_bytes())
            return self._validate(json.loads(decrypted.decode("utf-8")))
        except InvalidToken:
            logger.error("Failed to decrypt token data - invalid token")
            return None
        except json.JSONDecodeError:
            logger.error("Failed to parse decrypted token data")
            return None
        except (TokenStorageError, OSError) as e:
            logger.error(f"Fernet retrieval failed: {e}")
            return None

    def clear_tokens(self) -> bool:
        """
        Clear stored tokens from both backends.

        Returns:
            bool: True if clearing successful, False otherwise
        """
        if self.use_keyring:
            try:
                keyring.delete_password(self.service_name, KEYRING_USERNAME)
            except PasswordDeleteError:
                pass
            except KeyringError as e:
                logger.error(f"Error clearing tokens: {e}")
                return False
        token_path = self._get_token_path()
        if token_path.exists():
            try:
                token_path.unlink()
            except OSError as e:
                logger.error(f"Failed to delete token file: {e}")
                return False
        logger.info("Tokens cleared successfully")
        return True
