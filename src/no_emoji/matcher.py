"""Emoji matcher: enumerate emoji-pattern matches in a text.

What counts as an emoji grapheme is delegated to an *oracle*: any callable
that takes a text and yields ``(substring, char_offset)`` pairs in
left-to-right order.  The default oracle is the ``emoji`` package's
tokenizer; swap it (e.g. for a different Unicode version table) without
touching classification or range logic.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterable, Iterator, Optional

import emoji

from .codepoints import utf16_length
from .types import MatchCandidate

logger = logging.getLogger(__name__)

EmojiOracle = Callable[[str], Iterable[tuple[str, Optional[int]]]]


def emoji_package_oracle(text: str) -> Iterator[tuple[str, Optional[int]]]:
    """Yield every emoji the ``emoji`` package recognizes, lazily."""
    for token in emoji.analyze(text, non_emoji=False, join_emoji=True):
        match = token.value
        yield match.emoji, match.start


def iter_matches(text: str, oracle: EmojiOracle | None = None) -> Iterator[MatchCandidate]:
    """Lazily yield non-overlapping MatchCandidates in order of offset.

    Candidates whose offset is missing, or does not actually locate the
    substring in ``text``, are dropped.  So is any candidate that starts
    before the previous one ended.
    """
    if not text:
        return
    oracle = oracle or emoji_package_oracle

    # UTF-16 offsets are accumulated incrementally; matches arrive in order.
    pos = 0       # Python index already converted
    pos16 = 0     # its UTF-16 offset
    for sub, char_start in oracle(text):
        if char_start is None or char_start < 0 or not sub:
            logger.debug("dropping match %r with indeterminate offset", sub)
            continue
        if text[char_start:char_start + len(sub)] != sub:
            logger.debug("dropping match %r: not found at offset %d", sub, char_start)
            continue
        if char_start < pos:
            logger.debug("dropping match %r at %d: overlaps previous match", sub, char_start)
            continue
        pos16 += utf16_length(text[pos:char_start])
        candidate = MatchCandidate(
            text=sub, start=pos16, length=utf16_length(sub), char_start=char_start,
        )
        yield candidate
        pos = candidate.char_end
        pos16 = candidate.end
