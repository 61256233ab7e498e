from unittest.mock import MagicMock

import pytest
import requests

from nova_pypcloud.client import PCloudClient


def pytest_addoption(parser):
    """Add E2E test options to pytest."""
    parser.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help="run end-to-end tests against the live pCloud API",
    )


def pytest_configure(config):
    """Register e2e marker."""
    config.addinivalue_line("markers", "e2e: mark test as end-to-end test")


def pytest_collection_modifyitems(config, items):
    """Skip E2E tests unless --run-e2e option is provided."""
    if not config.getoption("--run-e2e"):
        skip_e2e = pytest.mark.skip(reason="need --run-e2e option to run")
        for item in items:
            if "e2e" in item.keywords:
                item.add_marker(skip_e2e)


def make_response(body, status_code=200):
    """Build a fake requests.Response returning ``body`` as JSON."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


@pytest.fixture
def mock_session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    session.request.return_value = make_response({"result": 0})
    return session


@pytest.fixture
def client(mock_session):
    return PCloudClient("test_token", session=mock_session)


@pytest.fixture
def folder_listing():
    return {
        "result": 0,
        "metadata": {
            "folderid": 0,
            "name": "/",
            "path": "/",
            "isfolder": True,
            "contents": [
                {
                    "name": "Photos",
                    "isfolder": True,
                    "folderid": 11,
                    "parentfolderid": 0,
                    "modified": "Thu, 19 Sep 2013 07:31:46 +0000",
                    "contents": [
                        {
                            "name": "beach.jpg",
                            "isfolder": False,
                            "fileid": 101,
                            "parentfolderid": 11,
                            "size": 2048,
                            "modified": "Fri, 20 Sep 2013 10:00:00 +0000",
                        }
                    ],
                },
                {
                    "name": "notes.txt",
                    "isfolder": False,
                    "fileid": 102,
                    "parentfolderid": 0,
                    "size": 13,
                    "modified": "Sat, 21 Sep 2013 12:00:00 +0000",
                },
            ],
        },
    }


@pytest.fixture
def response_factory():
    """Factory fixture for fake HTTP responses."""
    return make_response
