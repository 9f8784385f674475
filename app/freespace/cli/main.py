"""Main CLI application entry point.

Defines the Typer application: a single command that ensures the
desired amount of free space and reports the result.
"""

import logging
from typing import Annotated

import click
import typer
from rich.logging import RichHandler
from typer.core import TyperCommand

from freespace import __version__
from freespace.cli.display import create_outcomes_table, print_outcomes_summary
from freespace.core.config import load_config
from freespace.core.errors import EXIT_OK, EXIT_USAGE, FreespaceError
from freespace.core.reporter import GitHubOutput, report
from freespace.core.runner import run_with_outcomes
from freespace.utils.formatting import console, err_console, format_mb, print_error, print_success

app = typer.Typer(
    name="freespace",
    help="Ensure a minimum amount of free disk space on a CI build agent.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class FreespaceCommand(TyperCommand):
    """Command that reports usage errors on standard output."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            typer.echo(ctx.get_usage())
            typer.echo(f"Error: {e.format_message()}")
            ctx.exit(EXIT_USAGE)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"freespace version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Log debug records.
        quiet: Log warnings and errors only. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


@app.command(
    cls=FreespaceCommand,
    # Negative thresholds such as -5 are arguments, not options
    context_settings={"help_option_names": ["-h", "--help"], "ignore_unknown_options": True},
)
def main(
    desired_space_mb: Annotated[
        int,
        typer.Argument(
            metavar="DESIRED_SPACE_MB",
            help="Minimum free space in MB required on the root filesystem.",
            show_default=False,
        ),
    ],
    sync: Annotated[
        bool,
        typer.Option("--sync", help="Flush filesystem buffers after deleting."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Measure free space and reclaim toolchain directories if it falls short.

    Writes [bold]available-space=<MB>[/bold] to the file named by
    GITHUB_OUTPUT and exits non-zero when the desired space is not met.
    """
    configure_logging(verbose=verbose, quiet=quiet)

    try:
        # Resolve GITHUB_OUTPUT before touching the filesystem
        config = load_config(desired_space_mb, sync=sync)

        result = run_with_outcomes(
            config.threshold,
            root_path=config.root_path,
            directories=config.directories,
            sync=config.sync,
        )

        if result.reclaimed and not quiet:
            console.print(create_outcomes_table(result.outcomes))
            print_outcomes_summary(result.outcomes, result.initial_mb, result.final_mb)

        exit_code = report(result.final_mb, config.threshold, GitHubOutput(config.output_path))
    except FreespaceError as e:
        print_error(str(e))
        raise typer.Exit(code=e.exit_code) from e

    if exit_code != EXIT_OK:
        raise typer.Exit(code=exit_code)

    if not quiet:
        print_success(f"Available space: {format_mb(result.final_mb)}")


if __name__ == "__main__":
    app()
