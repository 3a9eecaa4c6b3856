"""Package ranking command."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import BundleScopeError
from ..format import format_bytes, format_pct
from ..logging_config import setup_logging
from ..models import BundleResult
from . import app
from ._common import (
    ANALYSIS_ARGUMENT,
    CONFIG_OPTION,
    console,
    load_result,
    print_summary,
    resolve_config,
)

_CATEGORY_STYLE = {"npm": "white", "workspace": "bold cyan", "local": "green"}


@app.command()
def packages(
    analysis: Path = ANALYSIS_ARGUMENT,
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", help="Show only the N largest packages", min=1
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Rank packages by their share of the bundle's input bytes.

    [bold cyan]Examples:[/bold cyan]

      bundlescope packages web.analysis.json

      bundlescope packages web.analysis.json --json --limit 10
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        result = load_result(analysis, settings)

        if as_json:
            _output_json(result, limit)
        else:
            _output_rich(result, limit)

    except typer.Exit:
        raise
    except BundleScopeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _output_json(result: BundleResult, limit: Optional[int]):
    output = result.to_dict()
    if limit is not None:
        output["packages"] = output["packages"][:limit]
    print(json.dumps(output, indent=2))


def _output_rich(result: BundleResult, limit: Optional[int]):
    shown = result.packages[:limit] if limit is not None else result.packages

    print_summary(result)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Package")
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Files", justify="right")

    for group in shown:
        style = _CATEGORY_STYLE[group.category]
        table.add_row(
            f"[{style}]{escape(group.name)}[/{style}]",
            format_bytes(group.bytes),
            format_pct(group.bytes, result.input_bytes),
            str(len(group.files)),
        )

    console.print(table)
    hidden = len(result.packages) - len(shown)
    if hidden > 0:
        console.print(f"  [dim]… {hidden} more packages[/dim]")
