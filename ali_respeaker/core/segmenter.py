"""Text segmentation, hyphenated compounds and the six/dix liaison.

WHY: Learners paste whole sentences, not single words. The text must be
cut into words for the engine while spaces and punctuation survive
untouched, compounds ("arc-en-ciel", "dix-huit") must be read part by
part, and "six"/"dix" change their final sound with the next word.

HOW: segment_text() splits the text into WORD and OTHER segments with one
Unicode-aware regex. transform_words() turns every sub-word into a trace,
keeps each compound joiner as a pass-through entry that renders as a
space, and then resolves the liaison of "six" and "dix" by looking at the
part that follows them. transform_text() flattens the result.

RULES:
- A word starts with a letter and runs over letters and apostrophes;
  -, – and — join words into a compound only between two letters
- OTHER segments become a single pass-through entry, changed=False
- Liaison only crosses plain whitespace or a compound joiner:
  - next word starts with a vowel or h → trailing S becomes Z‿
  - next word starts with a consonant → trailing S is muted
  - punctuation or end of text → S stays audible ("j'en ai six.")
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.engine import transform
from ali_respeaker.core.ir import Segment, SegmentKind, TokenTrace
from ali_respeaker.core.lexicon import FINAL_DROP_NOTE
from ali_respeaker.core.patterns import VOWEL_LETTERS

logger = logging.getLogger(__name__)

COMPOUND_JOINERS = "-–—"

_WORD = r"[^\W\d_](?:[^\W\d_]|['’])*"
WORD_RE = re.compile(r"{word}(?:[{joiners}]{word})*".format(word=_WORD, joiners=COMPOUND_JOINERS))
_JOINER_RE = re.compile(r"([{}])".format(COMPOUND_JOINERS))

LIAISON_WORDS = frozenset({"six", "dix"})
LIAISON_NOTE = (
    "Liaison: before a vowel or a silent h, the final x of 'six' and 'dix' "
    "links to the next word as /z/ (e.g., 'six amis' → 'si-z‿ami')."
)


@dataclass
class _Part:
    """A sub-word with its trace, or a pass-through gap (word is None)."""

    word: Optional[str]
    trace: List[TokenTrace]


def segment_text(text: str) -> List[Segment]:
    """Split text into alternating WORD and OTHER segments.

    The text is NFC-normalised first so decomposed accents stay inside
    their word. Concatenating the segment texts gives the normalised
    text back.
    """
    normalized = unicodedata.normalize("NFC", text)
    segments: List[Segment] = []
    pos = 0
    for match in WORD_RE.finditer(normalized):
        if match.start() > pos:
            segments.append(Segment(SegmentKind.OTHER, normalized[pos:match.start()]))
        segments.append(Segment(SegmentKind.WORD, match.group()))
        pos = match.end()
    if pos < len(normalized):
        segments.append(Segment(SegmentKind.OTHER, normalized[pos:]))
    return segments


def _compound_parts(word: str) -> List[_Part]:
    parts: List[_Part] = []
    for piece in _JOINER_RE.split(word):
        if not piece:
            continue
        if piece in COMPOUND_JOINERS:
            parts.append(_Part(None, [TokenTrace(piece, " ")]))
        else:
            parts.append(_Part(piece, transform(piece)))
    return parts


def _next_word(parts: List[_Part], index: int) -> Optional[str]:
    """The word right after ``parts[index]``, if only a space or joiner sits between."""
    # Punctuation marks a pause, and French does not link across a pause:
    # "six, amis" keeps its s.
    if index + 2 >= len(parts):
        return None
    gap, following = parts[index + 1], parts[index + 2]
    if gap.word is not None or following.word is None:
        return None
    src = "".join(entry.src for entry in gap.trace)
    if src in COMPOUND_JOINERS or src.isspace():
        return following.word
    return None


def _apply_liaison(part: _Part, next_word: Optional[str]) -> None:
    if not part.trace or next_word is None:
        return
    entry = part.trace[-1]
    if entry.out != tk.S:
        return

    first = next_word[0].lower()
    if first in VOWEL_LETTERS or first == "h":
        entry.out = tk.LIAISON_Z
        entry.rule_key = "sixDixLiaison"
        entry.note = LIAISON_NOTE
        logger.debug("Liaison %r → %r", part.word, next_word)
    else:
        entry.out = tk.silent(entry.out)
        entry.rule_key = "finalDrop"
        entry.note = FINAL_DROP_NOTE
    entry.changed = True


def transform_words(text: str) -> List[Tuple[Optional[str], List[TokenTrace]]]:
    """Transform text, keeping each sub-word next to its own trace.

    Returns:
        ``(word, trace)`` pairs in source order. ``word`` is None for
        spaces, punctuation and compound joiners.
    """
    parts: List[_Part] = []
    for segment in segment_text(text):
        if segment.is_word:
            parts.extend(_compound_parts(segment.text))
        else:
            parts.append(_Part(None, [TokenTrace(segment.text, segment.text)]))

    for index, part in enumerate(parts):
        if part.word is not None and part.word.lower() in LIAISON_WORDS:
            _apply_liaison(part, _next_word(parts, index))

    return [(part.word, part.trace) for part in parts]


def transform_text(text: str) -> List[TokenTrace]:
    """Transform a whole text into one flat trace.

    Args:
        text: Any string; the empty string gives an empty trace.

    Returns:
        Word traces and pass-through entries in source order.
    """
    return [entry for _, trace in transform_words(text) for entry in trace]
