"""Import chain command: why is a module in the bundle?"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import BundleScopeError
from ..format import format_bytes
from ..graph import explain_packages, find_import_chain
from ..logging_config import setup_logging
from . import app
from ._common import (
    ANALYSIS_ARGUMENT,
    CONFIG_OPTION,
    console,
    load_result,
    resolve_config,
    short_path,
)


@app.command()
def chain(
    analysis: Path = ANALYSIS_ARGUMENT,
    module: Optional[str] = typer.Argument(
        None, help="Module path to explain (default: largest file of each package)"
    ),
    entry: Optional[str] = typer.Option(
        None, "--entry", "-e", help="Entry point (default: the analysis file's entry)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Show the shortest import chain from the entry point to a module.

    Without MODULE, explains the largest file of each top package.

    [bold cyan]Examples:[/bold cyan]

      bundlescope chain web.analysis.json node_modules/lodash/lodash.js

      bundlescope chain web.analysis.json --entry src/main.ts
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        result = load_result(analysis, settings)
        entry_point = entry or result.entry

        if not entry_point:
            console.print("[red]Error:[/red] no entry point; pass --entry")
            raise typer.Exit(1)

        if module is not None:
            found = find_import_chain(result.import_graph, module, entry_point)
            if as_json:
                print(json.dumps({"entry": entry_point, "target": module, "chain": found}, indent=2))
            elif found is None:
                console.print(
                    f"[yellow]No import chain from {escape(entry_point)} to {escape(module)}[/yellow]"
                )
            else:
                _print_chain(found)
            if found is None:
                raise typer.Exit(1)
            return

        explained = explain_packages(
            result.packages, result.import_graph, entry_point, limit=settings.chain_limit
        )
        if as_json:
            output = [
                {
                    "package": item.package.name,
                    "bytes": item.package.bytes,
                    "largest": item.largest.path,
                    "chain": item.chain,
                }
                for item in explained
            ]
            print(json.dumps(output, indent=2))
            return

        for item in explained:
            console.print(
                f"[bold]{escape(item.package.name)}[/bold]  [dim]{format_bytes(item.package.bytes)}[/dim]"
            )
            if item.chain:
                _print_chain(item.chain, indent=1)
            else:
                console.print(
                    f"    [dim]no chain to {escape(short_path(item.largest.path))}[/dim]"
                )

    except typer.Exit:
        raise
    except BundleScopeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _print_chain(steps: list, indent: int = 0):
    for depth, step in enumerate(steps):
        marker = "  " if depth == 0 else "→ "
        console.print(
            "  " * (indent + depth) + marker + short_path(step), markup=False, highlight=False
        )
