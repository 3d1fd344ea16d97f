"""Typer CLI for dartsym — search and sdk commands."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
from result import Err

from dartsym.config import DEFAULT_MAX_RESULTS, Config
from dartsym.models.symbols import ResolvedLocation, SymbolEntry

app = typer.Typer(
    name="dartsym",
    help="Fuzzy workspace symbol search for Dart projects.",
    no_args_is_help=True,
)

SdkOption = Annotated[
    Path | None,
    typer.Option("--sdk", envvar="DART_SDK", help="Path to the Dart SDK"),
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Search Dart declarations by name."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Symbol name, matched fuzzily")],
    roots: Annotated[
        list[Path] | None,
        typer.Option("--root", help="Workspace root (repeatable, defaults to cwd)"),
    ] = None,
    sdk: SdkOption = None,
    max_results: Annotated[
        int, typer.Option("--max-results", help="Maximum declarations to fetch")
    ] = DEFAULT_MAX_RESULTS,
    resolve: Annotated[
        bool, typer.Option("--resolve", help="Resolve and print source positions")
    ] = False,
) -> None:
    """Search the workspace for declarations matching QUERY."""
    config = Config(
        sdk_path=sdk,
        workspace_roots=tuple(roots or [Path.cwd()]),
        max_results=max_results,
    )
    asyncio.run(_do_search(config, query, resolve))


@app.command("sdk")
def show_sdk(sdk: SdkOption = None) -> None:
    """Print the Dart SDK that would be used."""
    from dartsym.data.sdk import find_dart_sdk

    sdk_root = find_dart_sdk(sdk)
    if sdk_root is None:
        typer.echo("No Dart SDK found.", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(sdk_root))


async def _do_search(config: Config, query: str, resolve: bool) -> None:
    """Run one search against a freshly started analysis server."""
    from dartsym.services.container import SdkNotFoundError, ServiceContainer

    try:
        container = await ServiceContainer.create(config)
    except SdkNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    try:
        service = container.symbol_service
        entries = await service.provide_workspace_symbols(query)
        if not entries:
            typer.echo("No symbols found.")
            return
        for entry in entries:
            if resolve:
                result = await service.resolve_workspace_symbol(entry)
                if isinstance(result, Err):
                    typer.echo(f"  ! {result.err_value}", err=True)
            typer.echo(format_entry(entry))
    finally:
        await container.close()


def format_entry(entry: SymbolEntry) -> str:
    """Render an entry as ``kind  name  container[  uri:line:column]``."""
    parts = [entry.kind.name.lower(), entry.name, entry.container_name or "-"]
    if isinstance(entry.location, ResolvedLocation):
        start = entry.location.range.start
        parts.append(f"{entry.location.uri}:{start.line + 1}:{start.character + 1}")
    return "  ".join(parts)
