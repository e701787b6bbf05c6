"""Main CLI application."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from .. import __version__
from .. import pipeline

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="confrender",
    help="Render config templates of a package using its properties.yml file.",
    add_completion=False,
)


class ConsoleReporter:
    """Reporter that prints the terminal status for humans."""

    def log(self, event: str) -> None:
        logger.debug(event)

    def report_error(self, message: str) -> None:
        typer.secho(message, fg=typer.colors.RED, err=True)

    def report_success(self, message: str) -> None:
        typer.secho(message, fg=typer.colors.GREEN)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"confrender {__version__}")
        raise typer.Exit()


@app.command()
def template(
    path: Annotated[
        str,
        typer.Argument(help="Package directory.", metavar="PATH"),
    ],
    properties: Annotated[
        Optional[str],
        typer.Option(
            "--properties",
            "-p",
            help="Config properties as a JSON string. Only merges them into properties.yml.",
            metavar="JSON",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Render the config templates of the package at PATH.

    Each config/*.tmpl file is rendered into config/*.clj using the
    package's properties.yml. If config properties are supplied, they are
    only merged into properties.yml, without doing the actual rendering.
    """
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    code = pipeline.run(path, properties, reporter=ConsoleReporter())
    if code != 0:
        raise typer.Exit(code=code)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
