"""CLI entry point: registers all subcommands."""

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="bundlescope",
    help="bundlescope - Bundle size attribution by package",
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool):
    if value:
        console.print(f"bundlescope {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Explore where a bundle's bytes come from."""


# Import subcommands to register them
from .packages import packages as _packages  # noqa: F401, E402
from .modules import modules as _modules  # noqa: F401, E402
from .chain import chain as _chain  # noqa: F401, E402
from .layout import layout as _layout  # noqa: F401, E402
