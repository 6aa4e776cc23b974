# mddiff/cli/main.py

"""
mddiff command line.

Compares two media directories and reports what is missing, extra or
modified in the target. Files are matched on folder + name without the
extension, so `Movie.mkv` -> `Movie.mp4` is a modification, not a
delete plus an add.

Usage:
    mddiff /media/library /mnt/backup
    mddiff /media/library /mnt/backup --format json
    mddiff /media/library /mnt/backup -f markdown --threshold 1024
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer

from mddiff.core.common.enums import ReportFormat
from mddiff.core.config.settings import settings
from mddiff.features.diff.service.api import compare_directories
from mddiff.features.inventory.domain.models import InventoryScanError
from mddiff.features.reporting.service.api import render_report

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="mddiff: media directory diff tool",
    no_args_is_help=True,
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    # Logs go to stderr so json output on stdout stays parseable
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def main(
        source: Path = typer.Argument(
            ...,
            exists=True,
            file_okay=False,
            dir_okay=True,
            help="Reference directory.",
        ),
        target: Path = typer.Argument(
            ...,
            exists=True,
            file_okay=False,
            dir_okay=True,
            help="Directory checked against the reference.",
        ),
        fmt: ReportFormat = typer.Option(
            ReportFormat(settings.DEFAULT_FORMAT),
            "--format",
            "-f",
            case_sensitive=False,
            help="Output format.",
        ),
        threshold: int = typer.Option(
            settings.SIZE_THRESHOLD,
            "--threshold",
            "-t",
            min=0,
            help="Bytes of size difference tolerated before a file counts as modified.",
        ),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """
    Compare SOURCE against TARGET and print the differences.

    A non-empty diff is not an error: the exit code is 0 whenever both
    trees could be read.
    """
    _configure_logging(verbose)
    logger.debug(f"source={source} target={target} format={fmt.value} threshold={threshold}")

    try:
        report = compare_directories(str(source), str(target), size_threshold=threshold)
    except (FileNotFoundError, NotADirectoryError, InventoryScanError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    render_report(report, fmt, sys.stdout)


if __name__ == "__main__":
    app()
