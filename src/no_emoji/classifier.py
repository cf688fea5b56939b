"""Presentation classifier — text-default symbol or real emoji?

Code points such as digits or © are Emoji=Yes but Emoji_Presentation=No.
Without an explicit U+FE0F they are ordinary text (copyright notices,
numbered lists) and must not be reported.
"""

from __future__ import annotations

from .codepoints import TEXT_DEFAULT_EMOJI, VARIATION_SELECTOR_16, code_points


def is_text_presentation(match: str) -> bool:
    """Return True if the match should be skipped (text presentation)."""
    cps = code_points(match)
    if not cps:
        return False

    # Trailing FE0F requests emoji presentation, even on a text-default base
    if cps[-1] == VARIATION_SELECTOR_16:
        return False

    # Only a lone text-default code point is skipped.  Multi-code-point
    # sequences (keycaps, flags, ZWJ) are always reported.
    return len(cps) == 1 and cps[0] in TEXT_DEFAULT_EMOJI
