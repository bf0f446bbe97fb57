import logging
import sys
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from esapi import __version__
from esapi.config import get_config
from esapi.endpoint import ENVELOPE_PARAMS, Endpoint
from esapi.exceptions import ESAPIError
from esapi.params import ParamKind, parse_cli_value
from esapi.registry import Registry, default_registry
from esapi.transport import HttpxTransport

console = Console()
app = typer.Typer(
    name='esapi',
    help='Inspect and call Elasticsearch REST endpoints',
    no_args_is_help=True,
)

SpecOption = Annotated[
    str | None,
    typer.Option('--spec', '-s', help='Extra REST API spec file or directory'),
]


def get_registry(spec: str | None = None) -> Registry:
    """Built-in endpoints, extended by the descriptors found in ``spec``."""
    if spec is None:
        return default_registry()
    registry = default_registry().copy()
    registry.load(spec)
    return registry


def _fail(error: Exception) -> typer.Exit:
    console.print(f'[red]Error:[/red] {error}', markup=True, highlight=False)
    return typer.Exit(1)


@app.command()
def endpoints(
    namespace: Annotated[
        str | None,
        typer.Option('--namespace', '-n', help='Only list endpoints of this namespace'),
    ] = None,
    spec: SpecOption = None,
) -> None:
    """List the known endpoints.

    Examples:
        esapi endpoints
        esapi endpoints --namespace cat
        esapi endpoints --spec ./rest-api-spec/api
    """
    try:
        registry = get_registry(spec)
    except ESAPIError as e:
        raise _fail(e)

    table = Table('Endpoint', 'Method', 'Path')
    table.columns[0].no_wrap = True
    for endpoint in registry:
        if namespace is not None and endpoint.namespace != namespace:
            continue
        variant = endpoint.longest_path
        table.add_row(endpoint.name, '|'.join(variant.methods), variant.path)
    console.print(table)


@app.command()
def describe(
    name: Annotated[str, typer.Argument(help='Dotted endpoint name, e.g. cat.count')],
    spec: SpecOption = None,
) -> None:
    """Show the paths, parts and parameters of one endpoint."""
    try:
        endpoint = get_registry(spec).get(name)
    except ESAPIError as e:
        raise _fail(e)

    console.print(f'[bold]{endpoint.signature()}[/bold]', highlight=False)
    if endpoint.documentation:
        console.print(f'[dim]{endpoint.documentation}[/dim]')

    paths = Table('Method', 'Path', title='Paths')
    for variant in endpoint.paths:
        paths.add_row('|'.join(variant.methods), variant.path)
    console.print(paths)

    options = Table('Name', 'Wire name', 'Kind', 'Where', title='Options')
    for part in endpoint.parts.values():
        where = 'path (required)' if part.required else 'path'
        options.add_row(part.python_name, part.name, part.kind.value, where)
    for param in endpoint.params.values():
        options.add_row(param.python_name, param.name, param.kind.value, 'query')
    if endpoint.body is not None:
        where = 'body (required)' if endpoint.body.required else 'body'
        options.add_row('body', '', endpoint.body.serialize or 'json', where)
    console.print(options)


def parse_options(endpoint: Endpoint, pairs: list[str]) -> dict[str, Any]:
    """Turn ``key=value`` pairs into keyword arguments for ``endpoint``."""
    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep:
            raise typer.BadParameter(f"expected key=value, got '{pair}'")
        option = endpoint.option(key)
        if option is not None:
            options[option.python_name] = parse_cli_value(option.kind, value)
        elif key == 'filter_path':
            options[key] = parse_cli_value(ParamKind.LIST, value)
        elif key in ENVELOPE_PARAMS:
            options[key] = parse_cli_value(ParamKind.BOOLEAN, value)
        else:
            # rejected by the endpoint with a proper message
            options[key] = value
    return options


def _read_body(body: str) -> str:
    if body == '-':
        return sys.stdin.read()
    return Path(body).read_text()


@app.command()
def request(
    name: Annotated[str, typer.Argument(help='Dotted endpoint name, e.g. cat.count')],
    args: Annotated[
        list[str] | None,
        typer.Argument(help='Required path parts, in order'),
    ] = None,
    param: Annotated[
        list[str] | None,
        typer.Option('--param', '-p', help='Option as key=value, may be repeated'),
    ] = None,
    body: Annotated[
        str | None,
        typer.Option('--body', '-b', help="Request body file, '-' for stdin"),
    ] = None,
    config: Annotated[
        str | None,
        typer.Option('--config', '-c', help='Path to configuration file (YAML or JSON)'),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option('--dry-run', help='Print the request instead of sending it')
    ] = False,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Log transport activity')
    ] = False,
    spec: SpecOption = None,
) -> None:
    """Build one request and send it to the cluster.

    Examples:
        esapi request cat.count -p index=logs-2024 -p format=json
        esapi request index logs-2024 --body doc.json -p id=1
        esapi request search --body - --dry-run < query.json
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(message)s',
            handlers=[RichHandler(console=console, show_path=False)],
        )

    try:
        endpoint = get_registry(spec).get(name)
        options = parse_options(endpoint, param or [])
        if body is not None:
            options['body'] = _read_body(body)
        positional = list(args or [])

        if dry_run:
            prepared = endpoint.build_request(*positional, **options)
            console.print(f'{prepared.method} {prepared.url}', highlight=False)
            for key, value in prepared.headers:
                console.print(f'{key}: {value}', highlight=False)
            if prepared.body is not None:
                console.print()
                console.print(prepared.body, markup=False, highlight=False)
            return

        settings = get_config(config)
        with HttpxTransport.from_config(settings) as transport:
            with endpoint.perform(transport, *positional, **options) as response:
                text = response.text()
    except (ESAPIError, OSError) as e:
        raise _fail(e)

    style = 'red' if response.is_error() else 'green'
    console.print(f'[{style}]{response.status_code}[/{style}]')
    if text:
        console.print(text, markup=False, highlight=False)
    if response.is_error():
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of esapi."""
    console.print(f'esapi version: {__version__}')


if __name__ == '__main__':
    app()
