"""CLI interface for globdu."""

from __future__ import annotations

import logging
import sys

import click

from globdu.core.engine import walk_entries
from globdu.core.expander import PatternError, expand_pattern
from globdu.models.options import Options
from globdu.report import render_report
from globdu.settings import Settings


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


class _DuCommand(click.Command):
    """Command that reads its defaults from settings and exits 1 on bad usage."""

    def make_context(self, info_name, args, parent=None, **extra):
        if "default_map" not in extra:
            extra["default_map"] = Settings.instance().command_defaults()
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


@click.command(cls=_DuCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("pattern", default="*", required=False)
@click.option("-r", "--reverse", is_flag=True, help="Reverse ordering")
@click.option("-P", "--percentages", is_flag=True, help="Show percentages")
@click.option("-p", "--path", "by_path", is_flag=True, help="Sort by path, instead of by size")
@click.option(
    "-m", "--min", "min_percentage",
    type=float, default=0.0, metavar="FLOAT", show_default=True,
    help="Show only entries with at least this percentage",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
def main(
    pattern: str,
    reverse: bool,
    percentages: bool,
    by_path: bool,
    min_percentage: float,
    verbose: int,
) -> None:
    """Summarize disk usage of every path matching PATTERN (default: *)."""
    _setup_logging(verbose)
    options = Options(
        reverse=reverse,
        percentages=percentages,
        by_path=by_path,
        min_percentage=min_percentage,
        pattern=pattern,
    )

    try:
        paths = expand_pattern(options.pattern)
    except PatternError as exc:
        click.echo(f"error: could not use that pattern {options.pattern}: {exc}", err=True)
        sys.exit(1)

    result = walk_entries(paths)
    for line in render_report(result, options):
        click.echo(line)
