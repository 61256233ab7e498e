"""
Command-line interface for nova-pypcloud.

This module provides commands for:
- pCloud OAuth authentication
- Folder listing with formatted output
- File upload and basic folder operations

The CLI uses Click for command handling and Rich for formatted terminal output.
"""

import logging
import os

import click
from rich.console import Console
from rich.table import Table

from nova_pypcloud.auth import Authenticator, TokenStorage, get_oauth_url
from nova_pypcloud.client import PCloudClient
from nova_pypcloud.config import Config
from nova_pypcloud.constants import API_MESSAGES
from nova_pypcloud.exceptions import NovaPCloudError
from nova_pypcloud.utils.progress import format_size

REGIONS = click.Choice(["us", "eu"], case_sensitive=False)


def _get_client() -> PCloudClient:
    """Build a client from PCLOUD_ACCESS_TOKEN or the stored token."""
    config = _run(Config.from_env)
    token = os.getenv("PCLOUD_ACCESS_TOKEN")
    if token:
        return PCloudClient.from_config(token, config)
    client = Authenticator(config=config).get_client()
    if client is None:
        raise click.ClickException(API_MESSAGES["no_credentials"])
    return client


def _run(operation, *args, **kwargs):
    try:
        return operation(*args, **kwargs)
    except NovaPCloudError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """
    Nova PyPCloud CLI.

    Provides a command-line interface for basic pCloud operations.
    Use --help with any command for more information.

    Examples:
        Initialize authentication:
        $ nova-pypcloud authenticate --region eu

        List files in root:
        $ nova-pypcloud list-folder

        Upload a file into folder 12345:
        $ nova-pypcloud upload report.pdf --folder-id 12345
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("--client-id", envvar="PCLOUD_CLIENT_ID", help="OAuth client ID.")
@click.option("--client-secret", envvar="PCLOUD_CLIENT_SECRET", help="OAuth client secret.")
@click.option("--region", type=REGIONS, default="us", show_default=True)
@click.option("--force", is_flag=True, help="Re-authenticate even if a token is stored.")
def authenticate(client_id, client_secret, region, force):
    """
    Authenticate with pCloud.

    Opens the authorization page, asks for the returned code and stores the
    resulting access token using the configured storage backend.
    """
    auth = Authenticator(config=_run(Config.from_env))
    ok = _run(
        auth.authenticate_pcloud,
        client_id,
        client_secret,
        api_endpoint=region,
        force_reauth=force,
    )
    if not ok:
        raise click.ClickException("Authentication failed.")
    click.echo("Authentication successful!")


@cli.command("auth-url")
@click.argument("client_id")
@click.option("--redirect-uri", default=None, help="Redirect URI registered for the app.")
def auth_url(client_id, redirect_uri):
    """Print the OAuth authorization URL for CLIENT_ID."""
    click.echo(get_oauth_url(client_id, redirect_uri))


@cli.command("list-folder")
@click.argument("folder_id", type=int, default=0)
@click.option("--recursive", "-r", is_flag=True, help="Include nested contents.")
@click.option("--no-files", is_flag=True, help="Only show folders.")
def list_folder(folder_id, recursive, no_files):
    """
    List the contents of a pCloud folder.

    FOLDER_ID defaults to the root folder (0).
    """
    client = _get_client()
    contents = _run(
        client.list_contents, folder_id, recursive=recursive, no_files=no_files
    )

    table = Table(title=f"Contents of folder {folder_id}")
    table.add_column("ID")
    table.add_column("Path")
    table.add_column("Type")
    table.add_column("Size")
    table.add_column("Modified")

    for row in contents.itertuples(index=False):
        size = "" if row.type == "folder" else format_size(row.size)
        table.add_row(str(row.id), row.path, row.type, size, str(row.modified or ""))

    Console().print(table)


@cli.command()
@click.argument("local_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--folder-id", type=int, default=0, show_default=True)
@click.option("--name", default=None, help="Remote file name.")
@click.option("--rename-if-exists", is_flag=True, help="Rename instead of overwriting.")
def upload(local_path, folder_id, name, rename_if_exists):
    """Upload LOCAL_PATH into a pCloud folder."""
    client = _get_client()
    result = _run(
        client.upload_local_file,
        local_path,
        folder_id,
        file_name=name,
        rename_if_exists=rename_if_exists,
    )
    for item in result.get("metadata", []):
        click.echo(f"Uploaded {item.get('name')} (file id {item.get('fileid')})")


@cli.command()
@click.argument("parent_id", type=int)
@click.argument("name")
def mkdir(parent_id, name):
    """Create folder NAME inside PARENT_ID."""
    result = _run(_get_client().create_folder, parent_id, name)
    click.echo(f"Created folder {result['metadata']['folderid']}")


@cli.command()
@click.argument("folder_id", type=int)
@click.option("--to-folder-id", type=int, default=None, help="Destination folder ID.")
@click.option("--to-name", default=None, help="New folder name.")
@click.option("--to-path", default=None, help="New path; end with '/' to keep the name.")
def rename(folder_id, to_folder_id, to_name, to_path):
    """Rename and/or move FOLDER_ID."""
    if to_folder_id is None and to_name is None and to_path is None:
        raise click.UsageError("Give at least one of --to-folder-id, --to-name, --to-path.")
    result = _run(
        _get_client().rename_folder,
        folder_id,
        to_folder_id=to_folder_id,
        to_name=to_name,
        to_path=to_path,
    )
    click.echo(f"Folder is now {result['metadata'].get('name')}")


@cli.command()
@click.argument("folder_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
def rmdir(folder_id, yes):
    """Delete FOLDER_ID and everything inside it."""
    if not yes:
        click.confirm(f"Delete folder {folder_id} and all its contents?", abort=True)
    result = _run(_get_client().delete_folder_recursive, folder_id)
    click.echo(
        f"Deleted {result.get('deletedfolders', 0)} folders "
        f"and {result.get('deletedfiles', 0)} files"
    )


@cli.command()
def logout():
    """Remove the stored pCloud token."""
    config = _run(Config.from_env)
    if not TokenStorage(config.SERVICE_NAME).clear_tokens():
        raise click.ClickException("Could not clear stored tokens.")
    click.echo("Logged out.")


if __name__ == "__main__":
    cli()
