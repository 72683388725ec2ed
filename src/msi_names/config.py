from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class OutputFormat(str, Enum):
    DISPLAY = "display"
    DEBUG = "debug"
    JSON = "json"


DEFAULT_OUTPUT_FORMAT = OutputFormat.DISPLAY


class DecodeConfig(BaseModel):
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    skip_blank_lines: bool = True
