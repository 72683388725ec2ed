from .config import DecodeConfig, OutputFormat
from .models import DecodedDirectoryName, DecodedName, decode_directory_name
from .names import (
    PARENT_SENTINEL,
    SHORT_LONG_SEPARATOR,
    SOURCE_TARGET_SEPARATOR,
    CombinedDirectoryName,
    CombinedName,
    parse_directory_name,
    parse_name,
)
from .render import render_directory_name
from .span import TextSpan

__all__ = [
    "PARENT_SENTINEL",
    "SHORT_LONG_SEPARATOR",
    "SOURCE_TARGET_SEPARATOR",
    "CombinedDirectoryName",
    "CombinedName",
    "DecodeConfig",
    "DecodedDirectoryName",
    "DecodedName",
    "OutputFormat",
    "TextSpan",
    "decode_directory_name",
    "parse_directory_name",
    "parse_name",
    "render_directory_name",
]
