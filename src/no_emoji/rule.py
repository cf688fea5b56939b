"""EmojiRule — the main API.  Match, classify, compute a fix, report.

Usage:
    from no_emoji import EmojiRule

    rule = EmojiRule()                 # reusable, thread-safe
    for d in rule.check("Hello 👋 World"):
        print(d.index, d.message)      # 6 Found emoji character (\\ud83d\\udc4b)

    rule.fix("Hello 👋 World")         # "Hello World"

Hosts that walk a document call ``lint_node`` once per text node.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator

from .classifier import is_text_presentation
from .codepoints import escape_utf16, index_for_utf16, utf16_offsets
from .matcher import EmojiOracle, iter_matches
from .ranges import compute_removal_range, legacy_range, whitespace_around
from .types import Diagnostic, Fix, MatchCandidate, RemovalRange

logger = logging.getLogger(__name__)


@dataclass
class RuleConfig:
    """Configuration for the EmojiRule."""
    legacy_mode: bool = False           # replace with " " instead of removing
    # Emoji that should NEVER be reported (exact match, e.g. "✅")
    allow_list: set[str] = field(default_factory=set)
    oracle: EmojiOracle | None = None   # None = emoji package


class EmojiRule:
    """Reports emoji in plain text, each with a fix that removes it cleanly."""

    def __init__(self, config: RuleConfig | None = None) -> None:
        self.config = config or RuleConfig()

    def iter_diagnostics(self, text: str) -> Iterator[Diagnostic]:
        """Lazily yield one Diagnostic per reportable emoji, in text order."""
        last_end = 0
        for candidate in iter_matches(text, self.config.oracle):
            if is_text_presentation(candidate.text):
                logger.debug("skipping text-default symbol %s", escape_utf16(candidate.text))
                continue
            if candidate.text in self.config.allow_list:
                logger.debug("skipping allow-listed emoji %s", escape_utf16(candidate.text))
                continue
            diagnostic = self._diagnose(text, candidate, last_end)
            last_end = diagnostic.fix.range.end
            yield diagnostic

    def check(self, text: str) -> list[Diagnostic]:
        return list(self.iter_diagnostics(text))

    def fix(self, text: str) -> str:
        """Return ``text`` with every reported emoji removed."""
        return apply_fixes(text, self.iter_diagnostics(text))

    def lint_node(
        self,
        node: Any,
        get_source: Callable[[Any], str],
        report: Callable[[Any, Diagnostic], None],
    ) -> int:
        """Check one host text node, passing each diagnostic to ``report``.

        Returns the number of diagnostics reported.
        """
        count = 0
        for diagnostic in self.iter_diagnostics(get_source(node)):
            report(node, diagnostic)
            count += 1
        return count

    def _diagnose(self, text: str, candidate: MatchCandidate, floor: int) -> Diagnostic:
        if self.config.legacy_mode:
            fix = Fix(legacy_range(candidate.start, candidate.length), " ")
        else:
            before, after = whitespace_around(text, candidate)
            rng = compute_removal_range(candidate.start, candidate.length, before, after)
            # The space before this emoji may already be claimed by the
            # previous fix ("😀 😀 😀"); ranges must stay disjoint.
            if rng.start < floor:
                rng = RemovalRange(floor, rng.end)
            fix = Fix(rng)
        return Diagnostic(
            message=f"Found emoji character ({escape_utf16(candidate.text)})",
            index=candidate.start,
            fix=fix,
        )


def apply_fixes(text: str, diagnostics: Iterable[Diagnostic]) -> str:
    """Apply each diagnostic's fix to ``text``.

    Ranges are UTF-16 offsets into the original text.  Fixes are applied
    right-to-left so earlier offsets stay valid; a fix overlapping one
    already applied is skipped.
    """
    fixes = sorted((d.fix for d in diagnostics), key=lambda f: f.range.start, reverse=True)
    offsets = utf16_offsets(text)
    result = text
    applied: list[Fix] = []
    for fix in fixes:
        if any(fix.range.overlaps(a.range) for a in applied):
            logger.debug("skipping overlapping fix %s", fix.range.as_tuple())
            continue
        start = index_for_utf16(text, fix.range.start, offsets)
        end = index_for_utf16(text, fix.range.end, offsets)
        result = result[:start] + fix.text + result[end:]
        applied.append(fix)
    return result
