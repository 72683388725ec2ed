from __future__ import annotations

import json

from .config import OutputFormat
from .models import DecodedDirectoryName
from .names import CombinedDirectoryName


def canonical_json(obj: object) -> str:
    return json.dumps(
        obj,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
    )


def render_directory_name(name: CombinedDirectoryName, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.DISPLAY:
        return name.display()
    if fmt == OutputFormat.DEBUG:
        return name.debug()
    if fmt == OutputFormat.JSON:
        return canonical_json(DecodedDirectoryName.from_view(name).model_dump(mode="json"))
    raise ValueError(f"unknown output format: {fmt}")
