"""End-to-end tests against the live pCloud API."""
import pytest

from nova_pypcloud.exceptions import PCloudError


@pytest.mark.e2e
def test_list_root(e2e_client):
    """Test listing the root folder."""
    result = e2e_client.list_folders(0)
    assert result["result"] == 0
    assert result["metadata"]["folderid"] == 0


@pytest.mark.e2e
def test_upload_file(e2e_client, e2e_folder):
    """Test uploading in-memory content."""
    result = e2e_client.upload_file(e2e_folder["folderid"], "test.txt", b"Hello, world!")
    assert result["metadata"][0]["name"] == "test.txt"

    contents = e2e_client.list_contents(e2e_folder["folderid"])
    assert list(contents["name"]) == ["test.txt"]


@pytest.mark.e2e
def test_rename_and_delete_folder(e2e_client, e2e_folder):
    """
    Test folder lifecycle.

    This test:
    1. Renames the created folder
    2. Verifies the new name in the parent listing
    3. Deletes a nested folder and checks it is gone
    """
    folder_id = e2e_folder["folderid"]
    new_name = "renamed-{}".format(e2e_folder["name"])

    renamed = e2e_client.rename_folder(folder_id, to_name=new_name)
    assert renamed["metadata"]["name"] == new_name
    assert renamed["metadata"]["folderid"] == folder_id

    listing = e2e_client.list_folders(0)
    match = [
        item for item in listing["metadata"]["contents"] if item.get("folderid") == folder_id
    ]
    assert match and match[0]["name"] == new_name

    nested = e2e_client.create_folder(folder_id, "nested")["metadata"]["folderid"]
    e2e_client.delete_folder_recursive(nested)
    with pytest.raises(PCloudError):
        e2e_client.list_folders(nested)


@pytest.mark.e2e
def test_invalid_folder_raises(e2e_client):
    """Test that API errors surface as PCloudError."""
    with pytest.raises(PCloudError):
        e2e_client.list_folders(-1)
