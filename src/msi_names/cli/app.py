from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich import print

from ..batch import read_fields, render_fields
from ..config import DEFAULT_OUTPUT_FORMAT, DecodeConfig
from ..names import (
    PARENT_SENTINEL,
    SHORT_LONG_SEPARATOR,
    SOURCE_TARGET_SEPARATOR,
    parse_directory_name,
)

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _build_config(*, output_format: str, keep_blank: bool) -> DecodeConfig:
    try:
        return DecodeConfig(output_format=output_format, skip_blank_lines=not keep_blank)
    except ValidationError as exc:
        valid = "display | debug | json"
        raise typer.BadParameter(
            f"unknown output format: {output_format}. valid: {valid}"
        ) from exc


def _flag(value: bool | None) -> str:
    if value is None:
        return "-"
    return "true" if value else "false"


@app.command()
def decode(
    fields: list[str] | None = typer.Argument(None, help="Raw directory name fields"),
    output_format: str = typer.Option(
        DEFAULT_OUTPUT_FORMAT.value, "--format", help="Output: display | debug | json"
    ),
    input_path: str | None = typer.Option(
        None, "--input", help="File with one field per line ('-' for stdin)"
    ),
    keep_blank: bool = typer.Option(False, help="Decode empty input lines too"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Decode `[source:]target` fields into their short and long names."""
    _configure_logging(verbose)
    cfg = _build_config(output_format=output_format, keep_blank=keep_blank)

    values = list(fields or [])
    if input_path is not None:
        try:
            values.extend(read_fields(input_path, config=cfg))
        except (FileNotFoundError, ValueError) as exc:
            raise typer.BadParameter(str(exc)) from exc
    elif not values:
        raise typer.BadParameter("at least one field or --input is required")

    logger.debug("decoding %d field(s) as %s", len(values), cfg.output_format.value)
    for line in render_fields(values, config=cfg):
        typer.echo(line)


@app.command()
def parent(
    field: str = typer.Argument(..., help="Raw directory name field"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Report whether the field's names point at the parent directory."""
    _configure_logging(verbose)
    name = parse_directory_name(field)
    source = name.source()
    target_at_parent = name.target().is_located_at_parent()

    typer.echo(f"source {_flag(None if source is None else source.is_located_at_parent())}")
    typer.echo(f"target {_flag(target_at_parent)}")
    if not target_at_parent:
        raise typer.Exit(code=1)


@app.command()
def info():
    """Show the reserved separators and the parent-directory sentinel."""
    print(f"[bold]source_target_separator[/bold] {SOURCE_TARGET_SEPARATOR}")
    print(f"[bold]short_long_separator[/bold] {SHORT_LONG_SEPARATOR}")
    print(f"[bold]parent_sentinel[/bold] {PARENT_SENTINEL}")
