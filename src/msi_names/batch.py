"""Decoding of newline-separated dumps of directory name fields."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator

from .config import DecodeConfig, OutputFormat
from .models import DecodedDirectoryName
from .names import CombinedDirectoryName
from .render import canonical_json, render_directory_name

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def iter_fields(text: str, *, config: DecodeConfig | None = None) -> Iterator[str]:
    """Yield one field per line with only the line terminator removed.

    Only ``\\n`` and ``\\r\\n`` end a line; any other character, whitespace
    included, stays part of the field.
    """
    cfg = config or DecodeConfig()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for lineno, line in enumerate(lines, start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if cfg.skip_blank_lines and not line:
            logger.debug("skipping empty line %d", lineno)
            continue
        yield line


def read_fields(path: str | Path, *, config: DecodeConfig | None = None) -> list[str]:
    if str(path) == STDIN_PATH:
        text = sys.stdin.read()
    else:
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"input file does not exist: {p}")
        if not p.is_file():
            raise ValueError(f"input path is not a file: {p}")
        try:
            text = p.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"input file is not valid UTF-8: {p}") from exc
    fields = list(iter_fields(text, config=config))
    logger.debug("read %d field(s) from %s", len(fields), path)
    return fields


def decode_fields(fields: Iterable[str]) -> list[DecodedDirectoryName]:
    return [DecodedDirectoryName.from_view(CombinedDirectoryName.of(f)) for f in fields]


def render_fields(fields: Iterable[str], *, config: DecodeConfig | None = None) -> list[str]:
    cfg = config or DecodeConfig()
    if cfg.output_format == OutputFormat.JSON:
        return [canonical_json(d.model_dump(mode="json")) for d in decode_fields(fields)]
    out: list[str] = []
    for field in fields:
        name = CombinedDirectoryName.of(field)
        if name.source() is None:
            logger.debug("field %r has no source name", field)
        out.append(render_directory_name(name, cfg.output_format))
    return out
