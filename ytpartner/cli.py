import json
import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ytpartner.client import YouTubePartner
from ytpartner.config import get_config
from ytpartner.exceptions import YouTubePartnerError
from ytpartner.utils import parse_assignments

console = Console()
app = typer.Typer(
    name='ytpartner',
    help='Call the YouTube Content ID API from the command line',
    no_args_is_help=True,
)


def _client(config: str | None, discovery: str | None) -> YouTubePartner:
    settings = get_config(config)
    if discovery:
        return YouTubePartner.from_discovery(
            discovery, context=settings.to_context()
        )
    return YouTubePartner.from_config(settings)


@app.command()
def methods(
    resource: Annotated[
        str | None, typer.Argument(help='Only list methods of this resource')
    ] = None,
    discovery: Annotated[
        str | None,
        typer.Option('--discovery', '-d', help='Discovery document to read methods from'),
    ] = None,
) -> None:
    """List the available API methods.

    Examples:
        ytpartner methods
        ytpartner methods assets
    """
    try:
        client = _client(None, discovery)
    except YouTubePartnerError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    resources = client.descriptors
    if resource:
        if resource not in resources:
            console.print(f'[red]Error:[/red] Unknown resource: {resource}')
            raise typer.Exit(1)
        resources = {resource: resources[resource]}

    table = Table('Method', 'HTTP', 'URL', 'Required')
    for methods_ in resources.values():
        for descriptor in methods_.values():
            table.add_row(
                descriptor.name,
                descriptor.http_method,
                descriptor.url_template,
                ', '.join(descriptor.required_params),
            )
    console.print(table)
    client.close()


@app.command()
def call(
    operation: Annotated[str, typer.Argument(help='Method to call, e.g. assets.get')],
    param: Annotated[
        list[str] | None,
        typer.Option('--param', '-p', help='Parameter as name=value (repeatable)'),
    ] = None,
    resource: Annotated[
        Path | None,
        typer.Option('--resource', '-r', help='JSON file sent as the request body'),
    ] = None,
    media: Annotated[
        Path | None, typer.Option('--media', help='File uploaded as media')
    ] = None,
    mime_type: Annotated[
        str, typer.Option('--mime-type', help='MIME type of the media file')
    ] = 'application/octet-stream',
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
    ] = None,
    discovery: Annotated[
        str | None,
        typer.Option('--discovery', '-d', help='Discovery document to read methods from'),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Log requests')
    ] = False,
) -> None:
    """Call one API method and print the JSON response.

    Examples:
        ytpartner call assets.get -p assetId=A123
        ytpartner call assetLabels.list -p onBehalfOfContentOwner=CO1
        ytpartner call references.insert -r reference.json --media ref.mp4 --mime-type video/mp4
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        params = parse_assignments(param or [])
    except ValueError as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(2)
    try:
        if resource:
            params['resource'] = json.loads(resource.read_text())
        if media:
            params['media'] = {'mimeType': mime_type, 'body': media.read_bytes()}
    except (OSError, json.JSONDecodeError) as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(2)

    try:
        with _client(config, discovery) as client:
            descriptor = client.descriptor(operation)
            method = getattr(client.resources[descriptor.resource_name], descriptor.method_name)
            result = method(params)
    except KeyError as e:
        console.print(f'[red]Error:[/red] {escape(e.args[0])}')
        raise typer.Exit(1)
    except (YouTubePartnerError, httpx.HTTPError) as e:
        console.print(f'[red]Error:[/red] {escape(str(e))}')
        raise typer.Exit(1)

    if result is None:
        console.print('[dim]No content[/dim]')
    elif isinstance(result, str):
        console.print(result)
    else:
        console.print_json(data=result)


@app.command()
def version() -> None:
    """Show the version of ytpartner."""
    from ytpartner._version import version

    console.print(f'ytpartner version: {version}')


if __name__ == '__main__':
    app()
