"""Typer CLI application."""

from typing import Optional

import typer

from tpcdsgen.config.logging import setup_logging
from tpcdsgen.config.session import Session
from tpcdsgen.config.settings import get_settings
from tpcdsgen.errors import GenerationError, InvalidOptionError
from tpcdsgen.generation.engine.pipeline import generate_data
from tpcdsgen.schema.table import Table

app = typer.Typer(help="tpcdsgen: deterministic TPC-DS style benchmark data generator")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _pick(value, default):
    return default if value is None else value


@app.command()
def generate(
    scale: Optional[float] = typer.Option(None, "--scale", help="Scale factor in GB"),
    directory: Optional[str] = typer.Option(None, "--directory", help="Target directory (local path)"),
    suffix: Optional[str] = typer.Option(None, "--suffix", help="Output file suffix"),
    table: Optional[str] = typer.Option(None, "--table", help="Generate only this table"),
    null_string: Optional[str] = typer.Option(None, "--null", help="Token written for null fields"),
    separator: Optional[str] = typer.Option(None, "--separator", help="Field separator character"),
    do_not_terminate: bool = typer.Option(False, "--do-not-terminate", help="Do not end rows with a separator"),
    no_sexism: bool = typer.Option(False, "--no-sexism", help="Draw names without gender weighting"),
    parallelism: Optional[int] = typer.Option(None, "--parallelism", help="Number of chunks"),
    chunk_number: Optional[int] = typer.Option(None, "--chunk-number", help="Generate only this chunk"),
    overwrite: bool = typer.Option(False, "--overwrite", help="Overwrite existing files"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING or ERROR"),
):
    """
    Generate data files.

    Options not given on the command line fall back to the TPCDS_* settings;
    flags can only switch a setting on.
    """
    settings = get_settings()

    try:
        level = _pick(log_level, settings.log_level)
        if level.upper() not in LOG_LEVELS:
            raise InvalidOptionError("log level", level, f"Log level must be one of {', '.join(LOG_LEVELS)}")
        setup_logging(level=level)

        session = Session(
            scale=_pick(scale, settings.scale),
            target_directory=str(_pick(directory, settings.directory)),
            suffix=_pick(suffix, settings.suffix),
            table=table,
            null_string=_pick(null_string, settings.null_string),
            separator=_pick(separator, settings.separator),
            do_not_terminate=do_not_terminate or settings.do_not_terminate,
            no_sexism=no_sexism or settings.no_sexism,
            parallelism=_pick(parallelism, settings.parallelism),
            chunk_number=_pick(chunk_number, 1),
            overwrite=overwrite or settings.overwrite,
        )
        chunks = [chunk_number] if chunk_number is not None else None

        typer.echo(f"Generating data ({session.command_line_arguments() or 'defaults'})")
        totals = generate_data(session, chunk_numbers=chunks, max_workers=settings.max_workers)
    except GenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for generated_table, count in sorted(totals.items(), key=lambda item: item[0].ordinal):
        typer.echo(f"  {generated_table.table_name}: {count:,} rows")
    typer.echo(f"✓ Complete! Data written to {session.target_path}")


@app.command("row-counts")
def row_counts(scale: float = typer.Option(1.0, "--scale", help="Scale factor in GB")):
    """Print the row count of every table at a scale factor."""
    try:
        scaling = Session(scale=scale).scaling
    except GenerationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for table in Table:
        typer.echo(f"{table.table_name}: {scaling.get_row_count(table):,}")


@app.command()
def tables():
    """List the tables that can be generated."""
    for table in Table:
        if not table.has_generator():
            continue
        note = f" (child of {table.parent.table_name})" if table.is_child() else ""
        typer.echo(f"{table.table_name}{note}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
