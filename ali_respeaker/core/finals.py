"""Final-position post-processing: mute final consonants and the schwa.

WHY: Most French final consonants are written but not spoken ("Thomas",
"petit", "trop"), while c, r, f and l usually are ("avec", "parler",
"neuf", "sel"). A silent final "e" is the other big trap for learners.
The rule table works letter group by letter group and cannot see word
ends, so this pass runs once per word afterwards.

HOW: Walk the trace from the right to find the last audible plain
consonant. It only counts as final when nothing audible follows it, so
the t in "porte" stays audible. Then look at the trailing "e".

RULES:
- Mutates and returns the same list
- Only entries produced from b, d, g, p, s, t, x or z are ever muted
- The word's last letter in PRONOUNCED_FINALS, or the word being in
  FINAL_CONSONANT_EXCEPTIONS, keeps the final consonant audible
- The schwa is muted only when another vowel sound is left to carry
  the word ("le" and "je" keep theirs)
"""

from __future__ import annotations

from typing import List, Optional

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.ir import TokenTrace
from ali_respeaker.core.lexicon import (
    FINAL_DROP_NOTE,
    PRONOUNCED_FINALS,
    SCHWA_NOTE,
    TRAILING_PUNCTUATION,
    is_final_consonant_exception,
    normalize_word,
)

DROPPABLE_FINAL_LETTERS = frozenset("bdgpstxz")


def _final_consonant_index(trace: List[TokenTrace]) -> Optional[int]:
    for index in range(len(trace) - 1, -1, -1):
        out = trace[index].out
        if tk.is_plain_consonant(out):
            return index
        if not (tk.is_silent(out) or tk.is_passthrough(out)):
            return None
    return None


def _keeps_final(word: str) -> bool:
    letters = [ch for ch in word if ch.isalpha()]
    if not letters:
        return True
    return letters[-1] in PRONOUNCED_FINALS or is_final_consonant_exception(word)


def _drop_final_consonant(trace: List[TokenTrace], word: str) -> None:
    index = _final_consonant_index(trace)
    if index is None or _keeps_final(word):
        return
    entry = trace[index]
    if entry.src not in DROPPABLE_FINAL_LETTERS:
        return
    entry.out = tk.silent(entry.out)
    entry.changed = True
    entry.rule_key = "finalDrop"
    entry.note = FINAL_DROP_NOTE


def _drop_schwa(trace: List[TokenTrace]) -> None:
    if len(trace) < 2:
        return
    last = trace[-1]
    if last.src != "e" or last.rule_key is not None or tk.is_silent(last.out):
        return
    if not any(tk.is_vowel_sound(entry.out) for entry in trace[:-1]):
        return
    last.out = tk.silent(last.out)
    last.changed = True
    last.rule_key = "finalSchwaDrop"
    last.note = SCHWA_NOTE


def apply_final_position_rules(trace: List[TokenTrace], original_word: str) -> List[TokenTrace]:
    """Mute the final consonant and schwa of one word's trace.

    Args:
        trace: The word's trace in source order, from the rewrite engine.
        original_word: The word the trace was built from. Trailing
            sentence punctuation is ignored.

    Returns:
        ``trace`` itself, with at most two entries rewritten.
    """
    word = normalize_word(original_word).rstrip(TRAILING_PUNCTUATION)
    _drop_final_consonant(trace, word)
    _drop_schwa(trace)
    return trace
