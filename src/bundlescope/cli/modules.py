"""Module listing command: every de-duplicated module by size."""

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
    short_path,
)


@app.command()
def modules(
    analysis: Path = ANALYSIS_ARGUMENT,
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table"),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-n", help="Show only the N largest modules", min=1
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    List modules largest first with their share of the source bytes.

    Duplicate paths from chunk splitting are counted once, at their largest size.

    [bold cyan]Examples:[/bold cyan]

      bundlescope modules web.analysis.json --limit 20

      bundlescope modules web.analysis.json --json
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
    shown = result.modules[:limit] if limit is not None else result.modules
    output = {
        "target": result.target,
        "bundler": result.bundler,
        "input_bytes": result.input_bytes,
        "output_bytes": result.output_bytes,
        "module_count": len(result.modules),
        "modules": [
            {
                **m.to_dict(),
                "short_path": short_path(m.path),
                "pct": round(m.bytes / result.input_bytes, 6) if result.input_bytes else 0.0,
            }
            for m in shown
        ],
    }
    print(json.dumps(output, indent=2))


def _output_rich(result: BundleResult, limit: Optional[int]):
    shown = result.modules[:limit] if limit is not None else result.modules

    print_summary(result)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("Module", overflow="fold")

    for module in shown:
        style = "white" if module.is_external_dependency else "green"
        table.add_row(
            format_bytes(module.bytes),
            format_pct(module.bytes, result.input_bytes),
            f"[{style}]{escape(short_path(module.path))}[/{style}]",
        )

    console.print(table)
    hidden = len(result.modules) - len(shown)
    if hidden > 0:
        console.print(f"  [dim]Showing {len(shown)} of {len(result.modules)} modules[/dim]")
