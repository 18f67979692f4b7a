"""Rewrite engine: turn one French word into an explained token trace.

WHY: Learners need more than the respelling. They need to see which
letters made which sound, and why. The engine therefore never produces
display text; it produces a TokenTrace per source fragment and leaves
rendering to the renderers.

HOW: transform() runs the pipeline for a single word:
  1. NFC-normalise and strip one trailing sentence mark
  2. No letters at all → one pass-through entry
  3. Exception dictionary hit → a copy of the hand-written trace
  4. rewrite(): claimed-span rewriting through RULE_TABLE, then the
     one-letter fallback for whatever is left
  5. Final-position post-processing

Claimed-span rewriting: the word starts as a single unclaimed span. Each
rule, in table order, scans every unclaimed span; a match becomes one or
more claimed entries and splits the span around it. Context checks see
the whole word, so "bonne" still blocks the nasal even after another
rule has claimed the "ne".

RULES:
- Total: any string in, a trace out, no exceptions raised
- Concatenating ``src`` over the result gives back the lowercased word
- Every character is claimed at most once; entries come out in source
  order, not rule order
"""

from __future__ import annotations

import logging
import unicodedata
from typing import Dict, List, Tuple

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.finals import apply_final_position_rules
from ali_respeaker.core.ir import Rule, TokenTrace
from ali_respeaker.core.lexicon import TRAILING_PUNCTUATION, lookup_exception
from ali_respeaker.core.rules import FALLBACK_MAP, RULE_TABLE

logger = logging.getLogger(__name__)

APOSTROPHES = frozenset("'’")

Span = Tuple[int, int]


def _has_letters(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


def fallback_trace(char: str) -> TokenTrace:
    """Spell one unclaimed character on its own.

    Apostrophes pass through untouched. Letters missing from the
    fallback table become their uppercase literal.
    """
    if char in APOSTROPHES:
        return TokenTrace(char, char)
    token = FALLBACK_MAP.get(char)
    if token is None:
        token = char.upper()
    return TokenTrace(char, token, changed=tk.en_spelling(token) != char)


def _claim(rule: Rule, word: str, free: List[Span], claimed: Dict[int, TokenTrace]) -> List[Span]:
    remaining: List[Span] = []
    for start, end in free:
        pos = start
        for match_start, match_end in rule.pattern.finditer(word, start, end):
            if match_start > pos:
                remaining.append((pos, match_start))
            for piece_start, piece_end, token in rule.pieces(match_start, match_end):
                claimed[piece_start] = TokenTrace(
                    word[piece_start:piece_end],
                    token,
                    rule.key,
                    True,
                    rule.explanation,
                )
            pos = match_end
        if pos < end:
            remaining.append((pos, end))
    return remaining


def _attach_combining_marks(trace: List[TokenTrace]) -> List[TokenTrace]:
    # Lowercasing can leave a mark with no precomposed form ("İ" → "i" + U+0307).
    # It belongs to the letter before it, not to an entry of its own.
    merged: List[TokenTrace] = []
    for entry in trace:
        if merged and entry.src and all(unicodedata.combining(ch) for ch in entry.src):
            merged[-1].src += entry.src
            continue
        merged.append(entry)
    return merged


def rewrite(word: str) -> List[TokenTrace]:
    """Run the rule table and the fallback over one word.

    No exception lookup and no final-position pass: see transform().

    Args:
        word: A single word; it is lowercased here.

    Returns:
        Trace entries in source order.
    """
    lowered = word.lower()
    claimed: Dict[int, TokenTrace] = {}
    free: List[Span] = [(0, len(lowered))] if lowered else []

    for rule in RULE_TABLE:
        if not free:
            break
        free = _claim(rule, lowered, free, claimed)

    for start, end in free:
        for index in range(start, end):
            claimed[index] = fallback_trace(lowered[index])

    return _attach_combining_marks([claimed[index] for index in sorted(claimed)])


def transform(word: str) -> List[TokenTrace]:
    """Transliterate one word into a trace.

    Args:
        word: A single word, any case, optionally followed by one of
            ``.,!?``.

    Returns:
        A new list of TokenTrace entries. A word without letters comes
        back as a single pass-through entry (the empty string included).
    """
    normalized = unicodedata.normalize("NFC", word)
    if not _has_letters(normalized):
        return [TokenTrace(normalized, normalized)]
    if normalized[-1] in TRAILING_PUNCTUATION:
        normalized = normalized[:-1]

    exception = lookup_exception(normalized)
    if exception is not None:
        logger.debug("Exception dictionary hit for %r", normalized)
        return exception

    trace = rewrite(normalized)
    return apply_final_position_rules(trace, normalized)
