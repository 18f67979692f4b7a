"""Exception dictionary and final-consonant exception words.

WHY: A handful of very common words are too irregular for the general
rule table. The French digits are the worst offenders: "sept" hides a
silent p, "six" and "dix" pronounce their final x as /s/, "huit" opens
with a glide. Getting them wrong would undermine trust in every other
respelling, so each one is authored by hand, once.

HOW: NUMBER_EXCEPTIONS maps a lowercase, NFC-normalised word to its
literal trace. ``lookup_exception()`` normalises the query the same way
and hands out a fresh copy of the entry.

RULES:
- Exact match only (no fuzzy or prefix matching)
- An entry is a total override: no rule or post-processing touches it
- Lookups never return the stored objects themselves, so callers may
  mutate the result (the liaison pass does)
"""

from __future__ import annotations

import unicodedata
from typing import Dict, FrozenSet, List, Optional

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.ir import TokenTrace

FINAL_DROP_NOTE = (
    "Rule: Final consonants are usually silent. "
    "Mnemonic: CaReFuL (C, R, F, L are often pronounced)."
)
SCHWA_NOTE = "Rule: A final 'e' (schwa) is typically silent."
_FINAL_X_NOTE = "final x → s"

NUMBER_EXCEPTIONS: Dict[str, List[TokenTrace]] = {
    "un": [
        TokenTrace("un", tk.UH_NASAL, "nasUN", True, "un → nasal /œ̃/"),
    ],
    "deux": [
        TokenTrace("d", tk.D),
        TokenTrace("eu", tk.EU, "eu", True, "eu → ö"),
        TokenTrace("x", tk.silent(tk.X), "finalDrop", True, FINAL_DROP_NOTE),
    ],
    "trois": [
        TokenTrace("t", tk.T),
        TokenTrace("r", tk.R),
        TokenTrace("oi", tk.WA, "oi", True, "oi → wa"),
        TokenTrace("s", tk.silent(tk.S), "finalDrop", True, FINAL_DROP_NOTE),
    ],
    "quatre": [
        TokenTrace("qu", tk.K, "qu", True, "qu → k"),
        TokenTrace("a", tk.AH),
        TokenTrace("t", tk.T),
        TokenTrace("r", tk.R),
        TokenTrace("e", tk.silent(tk.EH), "finalSchwaDrop", True, SCHWA_NOTE),
    ],
    "cinq": [
        TokenTrace("c", tk.S, "cSoft", True, "c before i → s"),
        TokenTrace("in", tk.EH_NASAL, "nasIN", True, "in → eh(n)"),
        TokenTrace("q", tk.K),
    ],
    "six": [
        TokenTrace("s", tk.S),
        TokenTrace("i", tk.EE),
        TokenTrace("x", tk.S, "finalX", True, _FINAL_X_NOTE),
    ],
    "sept": [
        TokenTrace("s", tk.S),
        TokenTrace("e", tk.EH),
        TokenTrace(
            "p", tk.silent(tk.P), "septPdrop", True,
            "Historical spelling: The 'p' in \"sept\" is silent.",
        ),
        TokenTrace("t", tk.T),
    ],
    "huit": [
        TokenTrace(
            "h", tk.silent(tk.H), "hSilent", True,
            "Rule: The letter H is always silent in French.",
        ),
        TokenTrace("ui", tk.UEE, "uiGlide", True, "ui → ü+ee"),
        TokenTrace("t", tk.T),
    ],
    "neuf": [
        TokenTrace("n", tk.N),
        TokenTrace("eu", tk.EU, "eu", True, "eu → ö"),
        TokenTrace("f", tk.F),
    ],
    "dix": [
        TokenTrace("d", tk.D),
        TokenTrace("i", tk.EE),
        TokenTrace("x", tk.S, "finalX", True, _FINAL_X_NOTE),
    ],
}

# Words whose final b/d/g/p/s/t/x/z is pronounced anyway.
FINAL_CONSONANT_EXCEPTIONS: FrozenSet[str] = frozenset({
    "bus", "fils", "ours", "plus", "tous", "sens", "anaïs", "reims",
    "six", "dix", "cinq", "sept", "huit",
})

# "CaReFuL": final letters that are usually pronounced. q covers "cinq"
# and loanword-style endings.
PRONOUNCED_FINALS: FrozenSet[str] = frozenset("crflq")

# One of these may end a word as typed; it is not part of the word.
TRAILING_PUNCTUATION = ".,!?"


def normalize_word(word: str) -> str:
    """NFC-normalise and lowercase a word for dictionary lookups."""
    return unicodedata.normalize("NFC", word).lower()


def lookup_exception(word: str) -> Optional[List[TokenTrace]]:
    """Return a copy of the literal trace for an irregular word, if any.

    Args:
        word: The word as typed; case and Unicode form do not matter.

    Returns:
        A new list of new TokenTrace objects, or None when the word is
        not in the dictionary.
    """
    entry = NUMBER_EXCEPTIONS.get(normalize_word(word))
    if entry is None:
        return None
    return [trace.copy() for trace in entry]


def is_final_consonant_exception(word: str) -> bool:
    return normalize_word(word) in FINAL_CONSONANT_EXCEPTIONS
