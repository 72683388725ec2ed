from __future__ import annotations

from pydantic import BaseModel

from .names import CombinedDirectoryName, CombinedName


class DecodedName(BaseModel):
    combined: str
    short: str | None = None
    long: str
    is_located_at_parent: bool

    @classmethod
    def from_view(cls, name: CombinedName) -> DecodedName:
        return cls(
            combined=name.combined(),
            short=name.short(),
            long=name.long(),
            is_located_at_parent=name.is_located_at_parent(),
        )


class DecodedDirectoryName(BaseModel):
    combined: str
    source: DecodedName | None = None
    target: DecodedName
    display: str

    @classmethod
    def from_view(cls, name: CombinedDirectoryName) -> DecodedDirectoryName:
        source = name.source()
        return cls(
            combined=name.combined(),
            source=None if source is None else DecodedName.from_view(source),
            target=DecodedName.from_view(name.target()),
            display=name.display(),
        )


def decode_directory_name(text: str) -> DecodedDirectoryName:
    return DecodedDirectoryName.from_view(CombinedDirectoryName.of(text))
