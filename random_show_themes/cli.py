"""CLI entry point for picking random show themes."""

import sys
from pathlib import Path

import click

from .config import LoggingConfig, OutputMode, RunConfig, TimestampPrecision


def _parse_seed(ctx: click.Context, param: click.Parameter, value: str | None) -> int | str | None:
    """Use integer seeds as integers, anything else as a string seed."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return value


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("number", type=click.IntRange(min=1))
@click.option(
    "--dictionary", "-d",
    "dictionary",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="The list of all known shows (JSON object keyed by show id)"
)
@click.option(
    "--list", "-l",
    "list_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="The subset of shows to choose from the dictionary (JSON array of ids)"
)
@click.option(
    "--hard-fail",
    is_flag=True,
    help="Exit with exit code 1 on any error (output already written is kept)"
)
@click.option("--table", "-t", is_flag=True, help="Sets output to a formatted table")
@click.option(
    "--table-width",
    type=click.IntRange(min=1),
    default=None,
    help="Width of the table (requires --table, default: terminal width)"
)
@click.option("--readable", is_flag=True, help="Sets output to human readable text (default)")
@click.option("--csv", "csv_output", is_flag=True, help="Sets output to csv")
@click.option("--verbose", "-v", "verbosity", count=True, help="Increase message verbosity")
@click.option("--quiet", "-q", is_flag=True, help="Silence all log output")
@click.option(
    "--timestamp",
    type=click.Choice([precision.value for precision in TimestampPrecision]),
    default=TimestampPrecision.NONE.value,
    help="Prepend log lines with a timestamp (default: none)"
)
@click.option(
    "--seed",
    default=None,
    callback=_parse_seed,
    help="Seed for reproducible results (integer or string)"
)
@click.version_option(package_name="random-show-themes")
def cli(
    number: int,
    dictionary: Path,
    list_path: Path,
    hard_fail: bool,
    table: bool,
    table_width: int | None,
    readable: bool,
    csv_output: bool,
    verbosity: int,
    quiet: bool,
    timestamp: str,
    seed: int | str | None,
):
    """Pick NUMBER random theme songs from distinct shows.

    The program is not guaranteed to output NUMBER results if the
    provided inputs don't allow it.

    Examples:

        random-show-themes 5 -d shows.json -l watched.json

        random-show-themes 10 -d shows.json -l watched.json --table

        random-show-themes 3 -d shows.json -l watched.json --csv --hard-fail
    """
    from .runner import run
    from .utils.logging_setup import setup_logging

    selected = [mode for mode, flag in (
        (OutputMode.TABLE, table),
        (OutputMode.READABLE, readable),
        (OutputMode.CSV, csv_output),
    ) if flag]
    if len(selected) > 1:
        raise click.UsageError("--table, --readable and --csv are mutually exclusive")
    output_mode = selected[0] if selected else OutputMode.READABLE

    if table_width is not None and output_mode is not OutputMode.TABLE:
        raise click.UsageError("--table-width requires --table")

    logging_config = LoggingConfig(
        verbosity=verbosity,
        quiet=quiet,
        timestamp=TimestampPrecision(timestamp),
    )
    setup_logging(logging_config)

    config = RunConfig(
        count=number,
        catalog_path=dictionary,
        list_path=list_path,
        hard_fail=hard_fail,
        output_mode=output_mode,
        table_width=table_width,
        seed=seed,
        logging=logging_config,
    )
    sys.exit(run(config))
