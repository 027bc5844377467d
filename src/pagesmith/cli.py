"""Pagesmith CLI Entry Point

Usage:
    pagesmith serve                    # serve ./pages on 0.0.0.0:6969
    pagesmith serve -c site.yaml -p 8080
    pagesmith render pages/index.template.html
    pagesmith render page.template.html -o out.html
    pagesmith --version
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ._version import __version__
from .config import SiteConfig
from .errors import PageNotFoundError, PagesmithError
from .page.composer import render_page

log = logging.getLogger(__name__)

console = Console(stderr=True)

app = typer.Typer(add_completion=False)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the pagesmith CLI.

    Log levels:
    - Normal: only warnings/errors shown
    - Verbose (-v): INFO level - one line per served page
    - Debug (PAGESMITH_DEBUG=1): DEBUG level - shows everything
    """
    debug = bool(os.environ.get("PAGESMITH_DEBUG"))
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=verbose,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("pagesmith")
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.echo(f"Error: {message}", err=True)
    sys.exit(exit_code)


def handle_error(error: PagesmithError) -> NoReturn:
    """Exit with 2 for a missing page, 1 for everything else."""
    if isinstance(error, PageNotFoundError):
        exit_with_error(str(error), 2)
    exit_with_error(str(error), 1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pagesmith {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Render pages from JSON-headed templates inside a site wrapper."""


@app.command()
def serve(
    config_file: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to a pagesmith.yaml file."
    ),
    host: Optional[str] = typer.Option(None, "--host", help="Bind address."),
    port: Optional[int] = typer.Option(
        None, "-p", "--port", help="The port the HTTP server will run on."
    ),
    pages_dir: Optional[str] = typer.Option(
        None, "--pages-dir", help="Directory containing page-data files."
    ),
    templates_dir: Optional[str] = typer.Option(
        None, "--templates-dir", help="Directory containing wrapper templates."
    ),
    default_template: Optional[str] = typer.Option(
        None, "--default-template", help="Wrapper template used to render pages."
    ),
    static_dir: Optional[str] = typer.Option(
        None, "--static-dir", help="Directory served under /static."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each request."),
) -> None:
    """Run the HTTP server."""
    import uvicorn

    from .server import create_app

    setup_logging(verbose)
    config = SiteConfig.load(
        config_file,
        host=host,
        port=port,
        pages_dir=pages_dir,
        templates_dir=templates_dir,
        default_template=default_template,
        static_dir=static_dir,
    )

    log.info("Starting HTTP server on %s:%d...", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port)


@app.command()
def render(
    page: Path = typer.Argument(..., help="Page-data file to render."),
    config_file: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to a pagesmith.yaml file."
    ),
    templates_dir: Optional[str] = typer.Option(
        None, "--templates-dir", help="Directory containing wrapper templates."
    ),
    default_template: Optional[str] = typer.Option(
        None, "--default-template", help="Wrapper template used to render pages."
    ),
    static_dir: Optional[str] = typer.Option(
        None, "--static-dir", help="Static asset root."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write HTML to a file instead of stdout."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose"),
) -> None:
    """Render a single page-data file."""
    setup_logging(verbose)
    config = SiteConfig.load(
        config_file,
        templates_dir=templates_dir,
        default_template=default_template,
        static_dir=static_dir,
    )

    try:
        html = render_page(page, config)
    except PagesmithError as e:
        handle_error(e)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        log.info("Wrote %s", output)
    else:
        typer.echo(html)


if __name__ == "__main__":
    app()
