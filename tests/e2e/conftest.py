"""Configuration and fixtures for E2E tests."""
import logging
import os
import time
import uuid

import pytest

from nova_pypcloud.client import PCloudClient
from nova_pypcloud.exceptions import PCloudError

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def e2e_client():
    """
    Create a client against the live pCloud API.

    Requires environment variables:
    - PCLOUD_ACCESS_TOKEN
    Optional:
    - PCLOUD_API_ENDPOINT ('us' or 'eu', defaults to 'us')
    """
    token = os.getenv("PCLOUD_ACCESS_TOKEN")
    if not token:
        pytest.skip("Missing required environment variable: PCLOUD_ACCESS_TOKEN")
    return PCloudClient(token, os.getenv("PCLOUD_API_ENDPOINT", "us"))


@pytest.fixture(scope="function")
def e2e_folder(e2e_client):
    """
    Create an isolated folder in the root and remove it afterwards.

    Yields:
        dict: Metadata of the created folder
    """
    name = "e2e_{}_{:.8}".format(int(time.time()), uuid.uuid4().hex)
    metadata = e2e_client.create_folder(0, name)["metadata"]
    yield metadata
    try:
        e2e_client.delete_folder_recursive(metadata["folderid"])
        logger.info("Cleaned up test folder: {}".format(name))
    except PCloudError as e:
        logger.warning("Failed to clean up test folder {}: {}".format(name, e))
