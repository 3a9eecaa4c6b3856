"""Treemap layout command: tiles as JSON for external renderers."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import BundleScopeError
from ..logging_config import setup_logging
from ..visualization import layout_package_files, layout_packages
from . import app
from ._common import ANALYSIS_ARGUMENT, CONFIG_OPTION, console, load_result, resolve_config


@app.command()
def layout(
    analysis: Path = ANALYSIS_ARGUMENT,
    width: Optional[int] = typer.Option(None, "--width", "-W", help="Canvas width", min=1),
    height: Optional[int] = typer.Option(None, "--height", "-H", help="Canvas height", min=1),
    package: Optional[str] = typer.Option(
        None, "--package", "-p", help="Zoom into one package's files"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress logging"),
    config: Optional[Path] = CONFIG_OPTION,
):
    """
    Compute treemap tiles for the package view or one package's files.

    [bold cyan]Examples:[/bold cyan]

      bundlescope layout web.analysis.json --width 1200 --height 800

      bundlescope layout web.analysis.json -p lodash
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = resolve_config(
            config=config,
            verbose=verbose,
            quiet=quiet,
            canvas_width=width,
            canvas_height=height,
        )
        result = load_result(analysis, settings)
        w, h = settings.canvas_width, settings.canvas_height

        if package is not None:
            group = result.find_package(package)
            if group is None:
                console.print(f"[red]Error:[/red] unknown package: {escape(package)}")
                raise typer.Exit(1)
            tiles = layout_package_files(group, w, h)
        else:
            tiles = layout_packages(result.packages, w, h)

        output = {
            "width": w,
            "height": h,
            "package": package,
            "tiles": [t.to_dict() for t in tiles],
        }
        print(json.dumps(output, indent=2))

    except typer.Exit:
        raise
    except BundleScopeError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
