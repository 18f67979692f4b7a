"""Intermediate representation dataclasses for transliteration traces.

WHY: A respelling alone cannot explain itself. The UI needs to know, for
every fragment of the French input, which rule produced which phoneme and
why, so it can underline, colour and annotate the text. The IR gives the
engine, the post-processor, the segmenter and the renderers one shared,
well-typed vocabulary.

HOW: Seven types form the model:
  RuleCategory:  closed set of rule families (vowel, nasal, ...)
  Rule:          one ordered pattern → token(s) rewrite with its rationale
  TokenTrace:    one source fragment and the token it became
  SegmentKind:   WORD or OTHER
  Segment:       a run of input text tagged with its kind
  RenderOptions: how a trace is projected to a display string
  RuleNote:      how often one rule fired in a text, with examples

RULES:
- TokenTrace is the atomic unit; every layer reads and writes these
- TokenTrace is mutable only inside a single transform call (the
  post-processor and the liaison pass rewrite the tail in place)
- Rule, RenderOptions and Segment are immutable
- All TokenTrace fields are plain data (str / bool / None) so a trace is
  always serialisable
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ali_respeaker.core.patterns import Literal


class RuleCategory(str, enum.Enum):
    """Rule families, used by the UI to pick an underline colour.

    HOW: Inherits from str so values serialise cleanly to JSON.
    """

    VOWEL = "vowel"
    NASAL = "nasal"
    SPECIAL = "special"
    LIAISON = "liaison"
    SILENT = "silent"


@dataclass(frozen=True)
class Rule:
    """One entry of the ordered rewrite table.

    WHY: Each rule pairs a matcher with the phoneme(s) it produces and a
    learner-facing explanation that ends up in tooltip notes.

    HOW: ``replacement`` holds one token for most rules. Rules that turn a
    single match into two sounds ("c'est" → S + EH, "ill" → EE + Y) list
    two tokens and give the length of the leading piece(s) in ``split``;
    the last token takes whatever is left of the match.

    RULES:
    - key: unique, stable identifier (persisted as ``ruleKey``)
    - label: short human description, e.g. "eau → OH"
    - len(split) == len(replacement) - 1
    - Table order is priority; changing the order changes output
    """

    key: str
    label: str
    pattern: "Literal"
    replacement: Tuple[str, ...]
    category: RuleCategory
    explanation: str
    split: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not self.replacement:
            raise ValueError("Rule {!r} has no replacement token".format(self.key))
        if len(self.split) != len(self.replacement) - 1:
            raise ValueError(
                "Rule {!r}: split needs {} length(s), got {}".format(
                    self.key, len(self.replacement) - 1, len(self.split)
                )
            )

    def pieces(self, start: int, end: int) -> list[tuple[int, int, str]]:
        """Divide a match ``[start, end)`` into ``(start, end, token)`` pieces."""
        result = []
        pos = start
        for length, token in zip(self.split, self.replacement):
            stop = min(pos + length, end)
            result.append((pos, stop, token))
            pos = stop
        result.append((pos, end, self.replacement[-1]))
        return [piece for piece in result if piece[0] < piece[1]]


@dataclass
class TokenTrace:
    """A source fragment and the phoneme token it became.

    RULES:
    - src: the original substring consumed (accents intact)
    - out: the token; "(X)" when silent, "Z‿" for liaison, the literal
      text itself for pass-through entries
    - rule_key: which rule produced it; None for pass-through entries
    - changed: whether out reads differently from a naive letter reading
    - note: human explanation for tooltips
    """

    src: str
    out: str
    rule_key: str | None = None
    changed: bool = False
    note: str | None = None

    def copy(self) -> "TokenTrace":
        return replace(self)


class SegmentKind(str, enum.Enum):
    WORD = "word"
    OTHER = "other"


@dataclass(frozen=True)
class Segment:
    """A run of input text: a word to transform or other text to pass through."""

    kind: SegmentKind
    text: str

    @property
    def is_word(self) -> bool:
        return self.kind is SegmentKind.WORD


SEPARATOR_KINDS = ("hyphen", "middot", "space", "none")
LOCALES = ("en", "ar")


@dataclass(frozen=True)
class RenderOptions:
    """How to project a trace into a display string.

    WHY: Separator style, locale and silent-letter display used to be
    ambient UI state. Passing them as one value keeps rendering pure.

    RULES:
    - separator: one of "hyphen", "middot", "space", "none"
    - locale: "en" (English-letter respelling) or "ar" (Arabic approximation)
    - show_silent: False drops silent entries, True shows them struck through
    - Unknown separator or locale raises ValueError
    """

    separator: str = "hyphen"
    locale: str = "en"
    show_silent: bool = False

    def __post_init__(self) -> None:
        if self.separator not in SEPARATOR_KINDS:
            raise ValueError(
                "Unknown separator '{}'. Available: {}".format(
                    self.separator, ", ".join(SEPARATOR_KINDS)
                )
            )
        if self.locale not in LOCALES:
            raise ValueError(
                "Unknown locale '{}'. Available: {}".format(self.locale, ", ".join(LOCALES))
            )


@dataclass
class RuleNote:
    """How often a table rule fired in a text, with example words."""

    rule: Rule
    count: int = 0
    examples: list[str] = field(default_factory=list)
