# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Annotated

import typer

from commentguard.binary.downloader import BinaryDownloader
from commentguard.binary.locator import BinaryLocator, asset_name
from commentguard.binary.platform import current_descriptor, platform_key
from commentguard.binary.resolver import BinaryResolver
from commentguard.checker.invoker import CheckInvoker
from commentguard.core.config import get_settings
from commentguard.core.constants import EXIT_COMMENTS_FOUND, ToolName
from commentguard.core.logging import setup_logging_from_settings
from commentguard.models.calls import PendingCall
from commentguard.models.payload import CheckResult

app = typer.Typer(
    name="commentguard",
    help="Locate, download and run the comment-checker binary",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log diagnostics to stderr")
    ] = False,
) -> None:
    setup_logging_from_settings(get_settings(), stream=verbose)


def _resolver() -> BinaryResolver:
    settings = get_settings()
    locator = BinaryLocator(settings)
    return BinaryResolver(locator, BinaryDownloader(locator, settings=settings))


@app.command()
def install() -> None:
    """Find the checker binary, downloading it if necessary."""
    path = asyncio.run(_resolver().resolve())
    if path is None:
        typer.echo("comment-checker binary unavailable; comment checking disabled.", err=True)
        raise typer.Exit(1)
    typer.echo(str(path))


@app.command()
def path() -> None:
    """Print the installed binary path without downloading."""
    found = _resolver().resolve_sync()
    if found is None:
        typer.echo("comment-checker binary not found.", err=True)
        raise typer.Exit(1)
    typer.echo(str(found))


@app.command()
def status() -> None:
    """Show platform, cache location and binary availability."""
    from rich.console import Console
    from rich.table import Table

    locator = BinaryLocator(get_settings())
    descriptor = current_descriptor()
    version = locator.package_version()

    table = Table(title="comment-checker")
    table.add_column("Item", style="bold")
    table.add_column("Value")

    table.add_row("Platform", platform_key())
    table.add_row(
        "Release asset",
        asset_name(version, descriptor) if descriptor else "[red]unsupported[/red]",
    )
    table.add_row("Version", version)
    table.add_row("Cache directory", str(locator.cache_dir))
    table.add_row("Bundled binary", str(locator.locate_bundled() or "-"))
    table.add_row("Cached binary", str(locator.locate_cached() or "-"))

    Console().print(table)


@app.command()
def check(
    file: Annotated[Path, typer.Argument(help="File whose whole content is checked")],
    prompt: Annotated[
        str | None, typer.Option("--prompt", help="Custom warning message template")
    ] = None,
    session: Annotated[str, typer.Option("--session", help="Session identifier")] = "cli",
) -> None:
    """Run the checker over FILE as if it had just been written."""
    if not file.is_file():
        typer.echo(f"No such file: {file}", err=True)
        raise typer.Exit(1)

    settings = get_settings()
    call = PendingCall(
        file_path=str(file.resolve()),
        tool=ToolName.WRITE,
        session_id=session,
        content=file.read_text(encoding="utf-8", errors="replace"),
    )
    result = asyncio.run(_async_check(call, prompt or settings.custom_prompt or None))
    if result is None:
        typer.echo("comment-checker binary unavailable.", err=True)
        raise typer.Exit(1)
    if result.has_comments:
        typer.echo(result.message, err=True)
        raise typer.Exit(EXIT_COMMENTS_FOUND)
    typer.echo("No new comments found.")


async def _async_check(call: PendingCall, prompt: str | None) -> CheckResult | None:
    binary = await _resolver().resolve()
    if binary is None:
        return None
    return await CheckInvoker().check(call, binary, prompt=prompt)


@app.command(name="clear-cache")
def clear_cache() -> None:
    """Remove the downloaded binary from the cache directory."""
    cache_dir = BinaryLocator(get_settings()).cache_dir
    if not cache_dir.exists():
        typer.echo("Cache is empty.")
        return
    shutil.rmtree(cache_dir)
    typer.echo(f"Removed {cache_dir}")
