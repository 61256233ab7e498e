"""Tests for the base operations module."""

from unittest.mock import MagicMock

import pytest
import requests

from nova_pypcloud.client import PCloudClient
from nova_pypcloud.config import Config
from nova_pypcloud.constants import ApiEndpoint
from nova_pypcloud.exceptions import PCloudError
from nova_pypcloud.operations.base import BaseOperations


@pytest.fixture
def base_ops(mock_session) -> BaseOperations:
    return BaseOperations("test_token", session=mock_session)


def test_init_sets_bearer_header(mock_session):
    """Test that the bearer token is fixed on the session."""
    ops = BaseOperations("abc", session=mock_session)
    assert mock_session.headers["Authorization"] == "Bearer abc"
    assert ops.access_token == "abc"


def test_default_endpoint_is_us(base_ops):
    """Test the default endpoint selection."""
    assert base_ops.api_endpoint is ApiEndpoint.US
    assert base_ops.base_url == "https://api.pcloud.com"


@pytest.mark.parametrize("endpoint", [ApiEndpoint.EU, "eu", "https://eapi.pcloud.com"])
def test_eu_endpoint(mock_session, endpoint):
    """Test that the EU endpoint can be given as enum, region or URL."""
    ops = BaseOperations("test_token", endpoint, session=mock_session)
    assert ops.base_url == "https://eapi.pcloud.com"


def test_unknown_endpoint_raises(mock_session):
    """Test that unknown endpoints are rejected."""
    with pytest.raises(ValueError):
        BaseOperations("test_token", "https://example.com", session=mock_session)


def test_endpoint_is_read_only(base_ops):
    """Test that session state cannot be swapped after construction."""
    with pytest.raises(AttributeError):
        base_ops.api_endpoint = ApiEndpoint.EU
    with pytest.raises(AttributeError):
        base_ops.access_token = "other"


def test_creates_session_when_not_given(mocker):
    """Test that a requests session is created by default."""
    session_cls = mocker.patch("nova_pypcloud.operations.base.requests.Session")
    session_cls.return_value.headers = {}
    ops = BaseOperations("abc")
    assert ops.session is session_cls.return_value
    assert ops.session.headers["Authorization"] == "Bearer abc"


def test_request_returns_body_unchanged(base_ops, mock_session, response_factory):
    """Test that a successful body is handed back as-is."""
    body = {"result": 0, "metadata": {"name": "x"}}
    mock_session.request.return_value = response_factory(body)

    result = base_ops._request("GET", "/listfolder", params={"folderid": 1})

    assert result is body
    mock_session.request.assert_called_once_with(
        "GET",
        "https://api.pcloud.com/listfolder",
        params={"folderid": 1},
        files=None,
        timeout=None,
    )


def test_request_passes_timeout(mock_session):
    """Test that the timeout is passed through to requests."""
    ops = BaseOperations("test_token", timeout=12.5, session=mock_session)
    ops._request("GET", "/listfolder")
    assert mock_session.request.call_args.kwargs["timeout"] == 12.5


def test_request_raises_pcloud_error(base_ops, mock_session, response_factory):
    """Test that a non-zero result becomes PCloudError."""
    mock_session.request.return_value = response_factory(
        {"result": 2005, "error": "Directory does not exist."}
    )
    with pytest.raises(PCloudError) as exc_info:
        base_ops._request("GET", "/listfolder", params={"folderid": -1})
    assert exc_info.value.code == 2005
    assert exc_info.value.message == "Directory does not exist."


def test_request_propagates_http_error(base_ops, mock_session, response_factory):
    """Test that non-2xx responses raise the requests error unchanged."""
    response = response_factory({"result": 0}, status_code=502)
    mock_session.request.return_value = response
    with pytest.raises(requests.HTTPError):
        base_ops._request("GET", "/listfolder")
    response.json.assert_not_called()


def test_request_propagates_network_error(base_ops, mock_session):
    """Test that transport errors are not wrapped."""
    error = requests.ConnectionError("connection refused")
    mock_session.request.side_effect = error
    with pytest.raises(requests.ConnectionError) as exc_info:
        base_ops._request("GET", "/listfolder")
    assert exc_info.value is error


def test_request_propagates_decode_error(base_ops, mock_session):
    """Test that undecodable bodies are not reinterpreted."""
    response = MagicMock(spec=requests.Response)
    response.json.side_effect = ValueError("not json")
    mock_session.request.return_value = response
    with pytest.raises(ValueError, match="not json"):
        base_ops._request("GET", "/listfolder")


def test_client_combines_operations(client, mock_session):
    """Test that PCloudClient exposes folder and file operations on one session."""
    client.create_folder(0, "a")
    client.upload_file(0, "a.txt", b"x")
    methods = [call.args[0] for call in mock_session.request.call_args_list]
    urls = [call.args[1] for call in mock_session.request.call_args_list]
    assert methods == ["GET", "POST"]
    assert urls == [
        "https://api.pcloud.com/createfolder",
        "https://api.pcloud.com/uploadfile",
    ]


def test_client_from_config(mocker):
    """Test building a client from a Config."""
    mocker.patch("nova_pypcloud.operations.base.requests.Session").return_value.headers = {}
    config = Config(DEFAULT_ENDPOINT="eu", TIMEOUT=9, CHUNK_SIZE=4)
    client = PCloudClient.from_config("tok", config)
    assert client.base_url == "https://eapi.pcloud.com"
    assert client.timeout == 9
    assert client.config is config
    assert client.config.CHUNK_SIZE == 4


def test_client_from_config_carries_file_settings(mock_session):
    """Test that a Config reaches the client instead of the class defaults."""
    config = Config(CHUNK_SIZE=4, PROGRESS_BAR_UNIT="KB")
    client = PCloudClient("tok", session=mock_session, config=config)
    assert client.config.CHUNK_SIZE == 4
    assert client.config.PROGRESS_BAR_UNIT == "KB"


def test_explicit_arguments_override_config(mock_session):
    """Test that endpoint and timeout arguments win over the Config."""
    config = Config(DEFAULT_ENDPOINT="eu", TIMEOUT=9)
    ops = BaseOperations("tok", ApiEndpoint.US, timeout=2, session=mock_session, config=config)
    assert ops.api_endpoint is ApiEndpoint.US
    assert ops.timeout == 2
