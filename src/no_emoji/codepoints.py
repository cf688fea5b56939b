"""Code point tables and UTF-16 helpers.

Python strings index by code point, hosts index by UTF-16 code unit.  Every
conversion between the two goes through this module.
"""

from __future__ import annotations
from bisect import bisect_right

# Emoji=Yes but Emoji_Presentation=No (Unicode 15.1 emoji-data.txt).  These
# render as text unless followed by U+FE0F.
TEXT_DEFAULT_EMOJI: frozenset[int] = frozenset({
    0x0023, 0x002A,                                          # # *
    *range(0x0030, 0x003A),                                  # 0-9
    0x00A9, 0x00AE,                                          # © ®
    0x203C, 0x2049,                                          # ‼ ⁉
    0x2122, 0x2139,                                          # ™ ℹ
    *range(0x2194, 0x219A),                                  # arrows
    0x21A9, 0x21AA,
    0x2328, 0x23CF,                                          # keyboard, eject
    0x23ED, 0x23EE, 0x23EF, 0x23F1, 0x23F2, 0x23F8, 0x23F9, 0x23FA,
    0x24C2,                                                  # Ⓜ
    0x25AA, 0x25AB, 0x25B6, 0x25C0, 0x25FB, 0x25FC,
    0x2600, 0x2601, 0x2602, 0x2603, 0x2604,                  # weather
    0x260E, 0x2611, 0x2618, 0x261D,
    0x2620, 0x2622, 0x2623, 0x2626, 0x262A, 0x262E, 0x262F,
    0x2638, 0x2639, 0x263A,
    0x2640, 0x2642,                                          # gender
    0x265F, 0x2660, 0x2663, 0x2665, 0x2666, 0x2668,          # cards
    0x267B, 0x267E, 0x267F,
    0x2692, 0x2694, 0x2695, 0x2696, 0x2697, 0x2699, 0x269B, 0x269C,
    0x26A0, 0x26A7, 0x26B0, 0x26B1,
    0x26C8, 0x26CF, 0x26D1, 0x26D3,
    0x26E9, 0x26F0, 0x26F1, 0x26F4, 0x26F7, 0x26F8, 0x26F9, 0x26FA,
    0x2702, 0x2708, 0x2709,
    0x270C, 0x270D, 0x270F, 0x2712,
    0x2714, 0x2716, 0x271D, 0x2721,
    0x2733, 0x2734, 0x2744, 0x2747,
    0x2763, 0x27A1,
    0x2934, 0x2935, 0x2B05, 0x2B06, 0x2B07,                  # arrows
    0x3030, 0x303D, 0x3297, 0x3299,                          # CJK symbols
})

VARIATION_SELECTOR_16 = 0xFE0F

_HIGH = range(0xD800, 0xDC00)
_LOW = range(0xDC00, 0xE000)


def code_points(s: str) -> list[int]:
    """Decompose into code points.

    Surrogate pairs that arrive as two separate characters (e.g. text decoded
    with ``surrogatepass``) are recombined.  Lone surrogates are kept as-is.
    """
    out: list[int] = []
    i = 0
    n = len(s)
    while i < n:
        cp = ord(s[i])
        if cp in _HIGH and i + 1 < n and ord(s[i + 1]) in _LOW:
            cp = 0x10000 + ((cp - 0xD800) << 10) + (ord(s[i + 1]) - 0xDC00)
            i += 1
        out.append(cp)
        i += 1
    return out


def utf16_units(s: str) -> list[int]:
    data = s.encode("utf-16-be", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "big") for i in range(0, len(data), 2)]


def utf16_length(s: str) -> int:
    return sum(2 if ord(c) > 0xFFFF else 1 for c in s)


def escape_utf16(s: str) -> str:
    r"""Render each UTF-16 code unit as ``\uXXXX`` (lowercase, no separator)."""
    return "".join(f"\\u{unit:04x}" for unit in utf16_units(s))


def utf16_offsets(s: str) -> list[int]:
    """UTF-16 offset of every Python index 0..len(s) inclusive."""
    offsets = [0] * (len(s) + 1)
    acc = 0
    for i, c in enumerate(s):
        offsets[i] = acc
        acc += 2 if ord(c) > 0xFFFF else 1
    offsets[len(s)] = acc
    return offsets


def index_for_utf16(s: str, offset: int, offsets: list[int] | None = None) -> int:
    """Python index for a UTF-16 offset.

    An offset that falls inside a surrogate pair resolves to the character
    that contains it.  Pass a precomputed ``utf16_offsets(s)`` table when
    converting many offsets into the same string.
    """
    if offsets is None:
        offsets = utf16_offsets(s)
    return max(bisect_right(offsets, offset) - 1, 0)
