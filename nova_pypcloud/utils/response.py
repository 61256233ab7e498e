"""Classification of decoded pCloud API responses."""

from typing import Any, Dict

from nova_pypcloud.exceptions import PCloudError
from nova_pypcloud.types import ApiError, ApiResponse, ApiResult


def is_api_error(body: Dict[str, Any]) -> bool:
    """Return True if the decoded response signals a failure (``result != 0``)."""
    return body["result"] != 0


def parse_response(body: Dict[str, Any]) -> ApiResponse:
    """Decode a pCloud response body into an ``ApiResult`` or an ``ApiError``.

    Args:
        body: JSON object returned by the API.

    Returns:
        ``ApiError`` carrying ``result``/``error`` when the call failed,
        otherwise ``ApiResult`` wrapping the untouched body.
    """
    if is_api_error(body):
        return ApiError(result=body["result"], error=body.get("error", ""))
    return ApiResult(data=body)


def unwrap_response(body: Dict[str, Any]) -> Dict[str, Any]:
    """Return the success payload or raise ``PCloudError`` for a failure."""
    response = parse_response(body)
    if isinstance(response, ApiError):
        raise PCloudError.from_api_error(response)
    return response.data
