class NovaPCloudError(Exception):
    """Base exception for all Nova-PyPCloud errors"""

    pass


class PCloudError(NovaPCloudError):
    """
    Raised when the pCloud API answers with a non-zero ``result``.

    Attributes:
        code (int): Numeric error code returned by pCloud
        message (str): Human readable error returned by pCloud
    """

    def __init__(self, code: int, message: str):
        super().__init__(code, message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    @property
    def code(self) -> int:
        return self.args[0]

    @property
    def message(self) -> str:
        return self.args[1]

    @classmethod
    def from_api_error(cls, error) -> "PCloudError":
        """Build the exception from a decoded ``ApiError`` response."""
        return cls(error.result, error.error)


class AuthenticationError(NovaPCloudError):
    """Raised when authentication fails"""

    pass


class TokenStorageError(NovaPCloudError):
    """Raised when there are issues with token storage"""

    pass


class ConfigurationError(NovaPCloudError):
    """Raised when there are configuration issues"""

    pass
