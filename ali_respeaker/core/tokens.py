"""Closed phoneme-token vocabulary and silent/liaison marker helpers.

WHY: The engine never emits display text directly. It emits abstract
phoneme codes ("AH", "OH~", "SH") so that one trace can be projected into
several output scripts (English respelling, Arabic approximation) without
re-running the rules.

HOW: Tokens are plain uppercase strings. Nasal vowels carry a trailing
"~". A silent token is the same code wrapped in parentheses ("(S)"), and
the liaison consonant carries a trailing tie bar ("Z‿"). The helper
functions below are the only place that knows about those markers.

RULES:
- VOCABULARY lists every bare token the rule table, fallback table and
  exception dictionary can produce
- Wrapping is idempotent: silent("(S)") == "(S)"
- bare() strips every marker and returns the underlying code
- Pass-through entries (spaces, punctuation) contain no letters at all
"""

from __future__ import annotations

from typing import Dict, FrozenSet

# ---------------------------------------------------------------------------
# Vowels
# ---------------------------------------------------------------------------

AH = "AH"
AY = "AY"
EH = "EH"
EE = "EE"
OH = "OH"
OO = "OO"
UE = "Ü"      # front rounded /y/
EU = "EU"     # front rounded /ø/, /œ/
WA = "WA"
UEE = "ÜEE"   # /ɥi/ as in "huit", "nuit"

# ---------------------------------------------------------------------------
# Nasal vowels
# ---------------------------------------------------------------------------

NASAL_MARK = "~"

AH_NASAL = "AH~"
OH_NASAL = "OH~"
EH_NASAL = "EH~"
UH_NASAL = "UH~"
YEH_NASAL = "YEH~"   # "ien" as in "bien"
WEH_NASAL = "WEH~"   # "oin" as in "loin"

# ---------------------------------------------------------------------------
# Glides and special consonants
# ---------------------------------------------------------------------------

W = "W"
Y = "Y"
SH = "SH"
ZH = "ZH"
NY = "NY"
R = "R"

# ---------------------------------------------------------------------------
# Plain consonants
# ---------------------------------------------------------------------------

B = "B"
D = "D"
F = "F"
G = "G"
K = "K"
L = "L"
M = "M"
N = "N"
P = "P"
S = "S"
T = "T"
V = "V"
X = "X"
Z = "Z"
H = "H"

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

SILENT_OPEN = "("
SILENT_CLOSE = ")"
LIAISON_MARK = "\u203f"  # undertie

LIAISON_Z = Z + LIAISON_MARK

VOWEL_TOKENS: FrozenSet[str] = frozenset({AH, AY, EH, EE, OH, OO, UE, EU, WA, UEE})
NASAL_TOKENS: FrozenSet[str] = frozenset({
    AH_NASAL, OH_NASAL, EH_NASAL, UH_NASAL, YEH_NASAL, WEH_NASAL,
})
GLIDE_TOKENS: FrozenSet[str] = frozenset({W, Y})
SPECIAL_TOKENS: FrozenSet[str] = frozenset({SH, ZH, NY, R})
CONSONANT_TOKENS: FrozenSet[str] = frozenset({
    B, D, F, G, K, L, M, N, P, S, T, V, X, Z, H, R, W, Y,
})

VOCABULARY: FrozenSet[str] = (
    VOWEL_TOKENS | NASAL_TOKENS | GLIDE_TOKENS | SPECIAL_TOKENS | CONSONANT_TOKENS
)
"""Every bare token the engine can produce (markers excluded)."""

# English-letter spelling of the vowel, glide and special codes; plain
# consonant codes read as their lowercase letter. The engine uses it to
# mark a fallback letter as changed, the English renderer to display it.
EN_SPELLING: Dict[str, str] = {
    AH: "ah",
    AY: "ay",
    EH: "eh",
    EE: "ee",
    OH: "oh",
    OO: "oo",
    UE: "ü",
    EU: "ö",
    WA: "wa",
    UEE: "üee",
    W: "w",
    Y: "y",
    SH: "sh",
    ZH: "zh",
    NY: "ny",
    R: "kh(r)",
    AH_NASAL: "ah(n)",
    OH_NASAL: "oh(n)",
    EH_NASAL: "eh(n)",
    UH_NASAL: "un",
    YEH_NASAL: "yeh(n)",
    WEH_NASAL: "weh(n)",
}


def en_spelling(token: str) -> str:
    """English-letter spelling of a bare code; unknown codes read lowercase."""
    return EN_SPELLING.get(token, token.lower())


def bare(token: str) -> str:
    """Strip silent and liaison markers from a token."""
    return (
        token.replace(SILENT_OPEN, "")
        .replace(SILENT_CLOSE, "")
        .replace(LIAISON_MARK, "")
    )


def silent(token: str) -> str:
    """Wrap a token as non-audible, e.g. ``"S"`` → ``"(S)"``."""
    if is_silent(token):
        return token
    return "{}{}{}".format(SILENT_OPEN, token, SILENT_CLOSE)


def is_silent(token: str) -> bool:
    return token.startswith(SILENT_OPEN) and token.endswith(SILENT_CLOSE)


def is_liaison(token: str) -> bool:
    return LIAISON_MARK in token


def is_passthrough(token: str) -> bool:
    """True for whitespace/punctuation entries that carry no phoneme."""
    return not any(ch.isalpha() for ch in token)


def is_plain_consonant(token: str) -> bool:
    """True for an audible single-letter consonant code such as ``"T"``."""
    return not is_silent(token) and not is_liaison(token) and token in CONSONANT_TOKENS


def is_vowel_sound(token: str) -> bool:
    """True for audible oral or nasal vowels."""
    if is_silent(token):
        return False
    return token in VOWEL_TOKENS or token in NASAL_TOKENS
