from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, TypedDict, Union


class TokenData(TypedDict):
    """Type definition for stored authentication data"""

    client_id: str
    access_token: str
    endpoint: str


@dataclass(frozen=True)
class ApiResult:
    """Successful pCloud response (``result == 0``); ``data`` is the full body."""

    data: Dict[str, Any] = field(default_factory=dict)
    result: int = 0


@dataclass(frozen=True)
class ApiError:
    """Failed pCloud response (``result != 0``)."""

    result: int
    error: str


# Decoded response from any pCloud endpoint
ApiResponse = Union[ApiResult, ApiError]

# Type aliases for common types
PathLike = Union[str, Path]
