"""
srm - CLI Interface.

Moves a single file into /tmp by copying it and then deleting the original.
The original is only removed once the copy has succeeded.

Usage Examples:
    # Relocate notes.txt to /tmp/notes.txt_copy
    srm notes.txt

    # Same, through the module entry point
    python -m srm notes.txt

    # Show debug logging for each step
    srm notes.txt --verbose
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from srm.arguments import get_input_file
from srm.models import OperationError
from srm.operations import FileRelocator

__version__ = "0.1.0"

logger = logging.getLogger('srm.cli')

# Initialize Typer app
app = typer.Typer(
    name="srm",
    help="Move a file to /tmp by copying it and deleting the original.",
    add_completion=False,
)

# Rich consoles for consistent output formatting
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"srm v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """
    Route srm log records to stderr when verbose output is requested.

    Args:
        verbose: Whether to enable debug logging.
    """
    if not verbose:
        return
    srm_logger = logging.getLogger("srm")
    srm_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in srm_logger.handlers):
        srm_logger.addHandler(
            RichHandler(console=err_console, show_path=False, show_time=False)
        )


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    ctx: typer.Context,
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="FILE",
        help="File to move into /tmp.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable verbose output.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    Copy FILE to /tmp/FILE_copy, then delete FILE.

    If the copy fails the original is left untouched. If the delete fails
    the copy is kept and the original remains.
    """
    configure_logging(verbose)

    try:
        path = get_input_file([ctx.info_name or "srm", *(args or [])])
        relocator = FileRelocator(console=console, error_console=err_console)
        relocator.process(path)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except OperationError as e:
        logger.debug(f"Relocation aborted: {e.kind.value}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
