"""Decoding of combined directory/file name fields.

A directory field is ``[<source>:]<target>`` and each of the two names is
``[<short>|]<long>``. Both splits use the first occurrence of the separator;
later separators are ordinary text in the trailing segment. Every string is
valid input, and every derived part is a ``TextSpan`` over the caller's string.
"""

from __future__ import annotations

from dataclasses import dataclass

from .span import TextSpan

SOURCE_TARGET_SEPARATOR = ":"
SHORT_LONG_SEPARATOR = "|"
PARENT_SENTINEL = "."


@dataclass(frozen=True)
class CombinedName:
    """A long name with an optional short (8.3-style) name: ``[<short>|]<long>``."""

    raw: TextSpan

    @classmethod
    def of(cls, text: str | TextSpan) -> CombinedName:
        return cls(raw=TextSpan.of(text))

    def _separator(self) -> int | None:
        return self.raw.find(SHORT_LONG_SEPARATOR)

    def long_span(self) -> TextSpan:
        index = self._separator()
        if index is None:
            return self.raw
        return self.raw.tail(index)

    def short_span(self) -> TextSpan | None:
        index = self._separator()
        if index is None:
            return None
        return self.raw.head(index)

    def long(self) -> str:
        """Text after the first ``|``, or the whole name when there is none."""
        return self.long_span().text

    def short(self) -> str | None:
        """Text before the first ``|``; ``None`` when there is no ``|``."""
        span = self.short_span()
        return None if span is None else span.text

    def combined(self) -> str:
        return self.raw.text

    def is_located_at_parent(self) -> bool:
        """Whether the name is the ``.`` sentinel.

        The long form is checked first; the short form is only consulted
        when it exists and the long form is not ``.``.
        """
        if self.long_span().matches(PARENT_SENTINEL):
            return True
        short = self.short_span()
        if short is not None:
            return short.matches(PARENT_SENTINEL)
        return False

    def display(self) -> str:
        short = self.short_span()
        if short is not None:
            return f"short = {short}, long = {self.long_span()}"
        return self.long()

    def debug(self) -> str:
        return self.combined()

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"CombinedName({self.combined()!r})"


@dataclass(frozen=True)
class CombinedDirectoryName:
    """A target name with an optional source name: ``[<source>:]<target>``."""

    raw: TextSpan

    @classmethod
    def of(cls, text: str | TextSpan) -> CombinedDirectoryName:
        return cls(raw=TextSpan.of(text))

    def _separator(self) -> int | None:
        return self.raw.find(SOURCE_TARGET_SEPARATOR)

    def source_span(self) -> TextSpan | None:
        index = self._separator()
        if index is None:
            return None
        return self.raw.head(index)

    def target_span(self) -> TextSpan:
        index = self._separator()
        if index is None:
            return self.raw
        return self.raw.tail(index)

    def source(self) -> CombinedName | None:
        span = self.source_span()
        return None if span is None else CombinedName(raw=span)

    def target(self) -> CombinedName:
        return CombinedName(raw=self.target_span())

    def combined(self) -> str:
        return self.raw.text

    def display(self) -> str:
        source = self.source()
        if source is not None:
            return f"source = [{source.display()}], target = [{self.target().display()}]"
        return self.target().display()

    def debug(self) -> str:
        return self.combined()

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"CombinedDirectoryName({self.combined()!r})"


def parse_name(text: str) -> CombinedName:
    return CombinedName.of(text)


def parse_directory_name(text: str) -> CombinedDirectoryName:
    return CombinedDirectoryName.of(text)
