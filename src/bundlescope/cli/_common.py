"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..api import analyze
from ..config import AnalysisConfig, load_config
from ..format import format_bytes
from ..ingest import load_analysis
from ..models import BundleResult

console = Console()

ANALYSIS_ARGUMENT = typer.Argument(
    ...,
    help="Analysis JSON written by a bundler adapter",
    exists=True,
    file_okay=True,
    dir_okay=False,
)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Configuration file (TOML)",
    exists=True,
    file_okay=True,
    dir_okay=False,
)


def resolve_config(
    config: Optional[Path] = None,
    verbose: bool = False,
    quiet: bool = False,
    **overrides,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    return load_config(config_file=config, verbose=verbose, quiet=quiet, **overrides)


def load_result(path: Path, settings: AnalysisConfig) -> BundleResult:
    """Load an analysis file and aggregate it."""
    return analyze(load_analysis(path), settings)


def short_path(path: str) -> str:
    """Drop everything up to the last ``node_modules/`` segment."""
    return path.rsplit("node_modules/", 1)[-1]


def print_summary(result: BundleResult):
    """One-line header: output size against source size and module counts."""
    external = sum(1 for m in result.modules if m.is_external_dependency)
    console.print(
        f"[bold]{escape(result.target)}[/bold] ({escape(result.bundler)}): "
        f"output {format_bytes(result.output_bytes)}, "
        f"source {format_bytes(result.input_bytes)} in {len(result.modules)} modules "
        f"({external} npm, {len(result.modules) - external} local)"
    )
