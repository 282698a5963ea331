import asyncio
import json
import logging
import typing as t
from typing import Annotated

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from matomo_client.cli.callbacks import params_callback
from matomo_client.client import ReportingClient
from matomo_client.exceptions import MatomoError
from matomo_client.utils.logging import setup_logging

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("-v", "--verbose", help="Log every request sent to the API"),
    ] = False,
):
    """Query the Matomo Reporting API configured through MATOMO_* variables"""
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING)


def get_client() -> ReportingClient:
    try:
        return ReportingClient.from_env()
    except ValueError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def run_or_exit(coro: t.Coroutine[t.Any, t.Any, t.Any]) -> t.Any:
    try:
        return asyncio.run(coro)
    except MatomoError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def format_result(result: t.Any) -> str:
    if isinstance(result, str):
        return result
    return json.dumps(obj=result, indent=2, ensure_ascii=False)


@app.command()
def version():
    """Get the version of the Matomo instance"""
    client = get_client()
    result = run_or_exit(client.api.get_matomo_version())
    if isinstance(result, dict) and "value" in result:
        result = result["value"]
    typer.echo(result)


@app.command(name="call")
def call_method(
    method: Annotated[
        str,
        typer.Argument(help="The API method to call, e.g. VisitsSummary.get"),
    ],
    params: Annotated[
        list[str] | None,
        typer.Option(
            "-p",
            "--param",
            help="A request parameter as key=value, can be repeated",
            callback=params_callback,
        ),
    ] = None,
):
    """Call a single API method and print the result"""
    client = get_client()
    result = run_or_exit(client.core.request(method, params or {}))
    typer.echo(format_result(result))


@app.command(name="batch")
def batch_methods(
    methods: Annotated[
        list[str],
        typer.Argument(help="The API methods to call in one bulk request"),
    ],
):
    """Call several API methods in one bulk request and print the results in order"""
    client = get_client()
    batch = client.prepare_requests()
    for method in methods:
        batch.add_request(method)
    results = run_or_exit(batch.send())

    table = Table(title=f"{len(results)} results")
    table.add_column("#", justify="right")
    table.add_column("Method")
    table.add_column("Result")
    for index, (method, result) in enumerate(zip(methods, results)):
        table.add_row(str(index), method, format_result(result))
    console = Console()
    console.print(table)
