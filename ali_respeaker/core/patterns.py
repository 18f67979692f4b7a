"""Tagged matcher variants used by the rule table.

WHY: The rewrite rules need context-sensitive matching (word-final "c",
"on" that is not followed by a vowel, "c" before e/i/y). An opaque regex
per rule hides that context and makes the nasal-vowel boundary hard to
test on its own. Three small matcher types make each rule's matching
semantics explicit and individually testable.

HOW: Every pattern exposes ``finditer(word, start, end)`` which yields
non-overlapping ``(match_start, match_end)`` pairs that lie inside the
``[start, end)`` window. Context checks (lookahead, lookbehind, anchors)
always look at the whole word, so a character already claimed by an
earlier rule still counts as context for a later one.

  Literal:       any of the option strings, anywhere
  Anchored:      an option touching the start or the end of the word
  Lookaround:    an option with letter-class conditions on the characters
                 immediately before and after it

RULES:
- The input word is expected to be lowercase already
- At each position the longest option is tried first
- Scanning resumes right after a match (non-overlapping)
- A match never extends outside the window it was asked to scan
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterator, Optional, Tuple

# Lowercase vowel letters, accented forms included.
VOWEL_LETTERS: FrozenSet[str] = frozenset("aeiouyàâäéèêëîïôöùûüœæ")

# Front vowels that soften a preceding c or g.
FRONT_VOWEL_LETTERS: FrozenSet[str] = frozenset("eéèêëiîïy")


@dataclass(frozen=True)
class Literal:
    """Match any of ``options`` wherever it occurs."""

    options: Tuple[str, ...]

    def _ordered_options(self) -> Tuple[str, ...]:
        return tuple(sorted(self.options, key=len, reverse=True))

    def accepts(self, word: str, start: int, end: int) -> bool:
        """Context hook; a bare literal accepts every occurrence."""
        return True

    def finditer(
        self,
        word: str,
        start: int = 0,
        end: Optional[int] = None,
    ) -> Iterator[Tuple[int, int]]:
        if end is None:
            end = len(word)
        options = self._ordered_options()
        pos = start
        while pos < end:
            for option in options:
                stop = pos + len(option)
                if stop <= end and word.startswith(option, pos) and self.accepts(word, pos, stop):
                    yield pos, stop
                    pos = stop
                    break
            else:
                pos += 1


@dataclass(frozen=True)
class Anchored(Literal):
    """Match an option only where it touches the start or end of the word.

    ``anchor`` is ``"start"`` or ``"end"``.
    """

    anchor: str = "end"

    def __post_init__(self) -> None:
        if self.anchor not in ("start", "end"):
            raise ValueError("anchor must be 'start' or 'end', got {!r}".format(self.anchor))

    def accepts(self, word: str, start: int, end: int) -> bool:
        if self.anchor == "start":
            return start == 0
        return end == len(word)


@dataclass(frozen=True)
class Lookaround(Literal):
    """Match an option subject to conditions on its neighbouring letters.

    WHY: Nasal vowels, soft c/g and intervocalic s all depend on the
    letter right after (or right before) the match, the way a regex
    lookahead/lookbehind would express it.

    RULES:
    - followed_by: next character must be in this set (a missing next
      character fails the check)
    - not_followed_by: next character must not be in this set (end of
      word passes)
    - preceded_by / not_preceded_by: same, for the previous character
    - excluded_prefixes: reject the match when everything before it is
      exactly one of these strings ("ville", "mille")
    """

    followed_by: Optional[FrozenSet[str]] = None
    not_followed_by: Optional[FrozenSet[str]] = None
    preceded_by: Optional[FrozenSet[str]] = None
    not_preceded_by: Optional[FrozenSet[str]] = None
    excluded_prefixes: Tuple[str, ...] = ()

    def accepts(self, word: str, start: int, end: int) -> bool:
        after = word[end] if end < len(word) else None
        before = word[start - 1] if start > 0 else None

        if self.followed_by is not None and (after is None or after not in self.followed_by):
            return False
        if self.not_followed_by is not None and after is not None and after in self.not_followed_by:
            return False
        if self.preceded_by is not None and (before is None or before not in self.preceded_by):
            return False
        if self.not_preceded_by is not None and before is not None and before in self.not_preceded_by:
            return False
        if word[:start] in self.excluded_prefixes:
            return False
        return True
