"""Removal-range calculation.

Deleting an emoji should leave natural spacing: never two spaces where the
emoji was, never a leading space at the start of the text.  All offsets are
UTF-16 units into the ORIGINAL text; ranges for several emoji in the same
text are computed independently.
"""

from __future__ import annotations

from .types import MatchCandidate, RemovalRange


def compute_removal_range(
    start: int,
    length: int,
    has_space_before: bool,
    has_space_after: bool,
) -> RemovalRange:
    """Range to delete for an emoji at ``start``.

    Row order matters; space-before wins over start-of-text:

    - (before, after, _    ) "word 😀 word" -> "word word"  emoji + trailing space
    - (before, -    , _    ) "word 😀word"  -> "wordword"   leading space + emoji
    - (-     , after, start) "😀 word"      -> "word"       emoji + trailing space
    - (-     , after, -    ) "word😀 word"  -> "word word"  emoji only
    - (-     , -    , _    ) "word😀word"   -> "wordword"   emoji only
    """
    end = start + length
    at_start = start == 0

    match (has_space_before, has_space_after, at_start):
        case (True, True, _):
            return RemovalRange(start, end + 1)
        case (True, False, _):
            return RemovalRange(start - 1, end)
        case (False, True, True):
            return RemovalRange(start, end + 1)
        case (False, True, False):
            return RemovalRange(start, end)
        case _:
            return RemovalRange(start, end)


def legacy_range(start: int, length: int) -> RemovalRange:
    """The bare match, for replace-with-space mode."""
    return RemovalRange(start, start + length)


def whitespace_around(text: str, candidate: MatchCandidate) -> tuple[bool, bool]:
    """Whether the character right before/after the match is one ASCII space."""
    before = candidate.char_start > 0 and text[candidate.char_start - 1] == " "
    after = candidate.char_end < len(text) and text[candidate.char_end] == " "
    return before, after
