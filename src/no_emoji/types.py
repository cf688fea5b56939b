"""Core types.

Offsets named ``start``/``end``/``index``/``length`` are UTF-16 code units,
the unit hosts report diagnostics in.  ``char_start`` is a Python string
index (code points).
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MatchCandidate:
    """A single emoji-pattern match in the source text."""
    text: str          # one grapheme cluster as matched by the oracle
    start: int         # UTF-16 offset
    length: int        # UTF-16 length
    char_start: int    # Python index of the same position

    @property
    def end(self) -> int:
        return self.start + self.length

    @property
    def char_end(self) -> int:
        return self.char_start + len(self.text)


@dataclass(frozen=True, slots=True)
class RemovalRange:
    """Half-open [start, end) range into the original text."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise ValueError(f"invalid range [{self.start}, {self.end})")

    def as_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def overlaps(self, other: RemovalRange) -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, slots=True)
class Fix:
    range: RemovalRange
    text: str = ""     # replacement: "" (remove) or " " (legacy mode)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported emoji occurrence with its corrective edit."""
    message: str
    index: int
    fix: Fix

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "index": self.index,
            "fix": {"range": list(self.fix.range.as_tuple()), "text": self.fix.text},
        }
