from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class TextSpan:
    """A read-only window ``buffer[start:end]`` that never copies ``buffer``."""

    buffer: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.buffer):
            raise ValueError(
                f"span [{self.start}, {self.end}) out of range for buffer of length {len(self.buffer)}"
            )

    @classmethod
    def of(cls, text: str | TextSpan) -> TextSpan:
        if isinstance(text, TextSpan):
            return text
        return cls(buffer=text, start=0, end=len(text))

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TextSpan({self.text!r}, start={self.start}, end={self.end})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextSpan):
            return len(self) == len(other) and self.text == other.text
        if isinstance(other, str):
            return self.matches(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    @property
    def text(self) -> str:
        if self.start == 0 and self.end == len(self.buffer):
            return self.buffer
        return self.buffer[self.start : self.end]

    def find(self, char: str) -> int | None:
        """Absolute offset of the first ``char`` inside the span, if any."""
        index = self.buffer.find(char, self.start, self.end)
        return None if index < 0 else index

    def head(self, index: int) -> TextSpan:
        return TextSpan(buffer=self.buffer, start=self.start, end=index)

    def tail(self, index: int) -> TextSpan:
        return TextSpan(buffer=self.buffer, start=index + 1, end=self.end)

    def matches(self, literal: str) -> bool:
        return len(self) == len(literal) and self.buffer.startswith(literal, self.start)
