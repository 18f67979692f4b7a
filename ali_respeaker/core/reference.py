"""Static learner reference data: letter names, operational rules, examples.

WHY: Alongside the respelling, learners get a small fixed curriculum: how
each letter of the alphabet is named, a handful of high-yield heuristics,
sample sentences to try, and a word list that exercises every major rule
(the self-check).

HOW: Plain frozen dataclasses and tuples, served as-is by the CLI and the
HTTP API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Letter:
    """How a letter of the alphabet is named, with a learner respelling."""

    ch: str
    name_ipa: str
    ali: str
    alt: Optional[str] = None
    note: Optional[str] = None


LETTERS: Tuple[Letter, ...] = (
    Letter("A", "[a]", "aah"),
    Letter("B", "[be]", "beh", "bé", "Aim for /e/ (not English 'bee')."),
    Letter("C", "[se]", "say", "cé", "Use single 'ay' quality; don't write 'cee'."),
    Letter("D", "[de]", "deh", "dé", "Avoid 'the' (no /θ/ in French)."),
    Letter("E", "[ə]", "uh", note="This is the famous 'euh' → just 'uh'."),
    Letter("F", "[ɛf]", "ehf", "èf"),
    Letter("G", "[ʒe]", "zhay", "jé", "It's /ʒ/ as in 'vision' → 'zh', not 'jsh'."),
    Letter("H", "[aʃ]", "ash", note="Letter name; sound is silent in words."),
    Letter("I", "[i]", "ee"),
    Letter("J", "[ʒi]", "zhee", "ji", "'zh' + 'ee'."),
    Letter("K", "[ka]", "kaah", "ka", "Open /a/; length not phonemic, but this cue is fine."),
    Letter("L", "[ɛl]", "ehl"),
    Letter("M", "[ɛm]", "ehm"),
    Letter("N", "[ɛn]", "ehn"),
    Letter("O", "[o]", "oh"),
    Letter("P", "[pe]", "peh", "pé", "Avoid 'pee' (that's /piː/)."),
    Letter("Q", "[ky]", "kü", "kyü", "k + front-rounded /y/ (round lips)."),
    Letter("R", "[ɛʁ]", "kh(r)", note="Uvular; like a throaty 'kh' sound."),
    Letter("S", "[ɛs]", "ehs", "ès"),
    Letter("T", "[te]", "teh", "té", "Avoid 'tee'."),
    Letter(
        "U", "[y]", "ü", "uu",
        "Front-rounded vowel. To make it, say 'ee' but with your lips rounded "
        "as if for 'oo'.",
    ),
    Letter("V", "[ve]", "veh", "vé"),
    Letter("W", "[dublə ve]", "double vé"),
    Letter("X", "[iks]", "iks"),
    Letter("Y", "[i ɡʁɛk]", "i grec"),
    Letter("Z", "[zɛd]", "zèd"),
)

OPERATIONAL_RULES: Tuple[str, ...] = (
    "C before e/i/y → S; otherwise K. G before e/i/y → ZH; otherwise G.",
    "OU → OO, OI → WA, AU/EAU → OH, EU/ŒU → EU (ö-like).",
    "Nasals: AN/EN → AH~, ON → OH~, IN/AIN/EIN → EH~, UN → UH~.",
    "H is silent; some words block liaison (h aspiré) but the letter itself never sounds.",
    "S between vowels → Z. ILL after a vowel → Y (e.g., fille → fiy).",
    "Drop a final silent -e (schwa). Other finals vary; treat them case-by-case as you learn items.",
    "R is uvular. Keep it as kh(r) to avoid English /ɹ/ drift.",
    "Length marks (double letters) are cues only; French contrasts quality, not length.",
)


@dataclass(frozen=True)
class Example:
    label: str
    text: str


EXAMPLES: Tuple[Example, ...] = (
    Example("Greeting", "Bonjour, je m'appelle Thomas."),
    Example("Numbers", "un, deux, trois, quatre, cinq, six, sept, huit, neuf, dix"),
    Example("Liaison", "J'ai six amis et dix chats."),
    Example("Compound", "dix-huit arcs-en-ciel"),
    Example("Nasals", "Le bon vin blanc est loin."),
    Example("C'est", "C'est la fille du garçon."),
)

# One word per major rule; rendered by the self-check.
SMOKE_TESTS: Tuple[str, ...] = (
    "eau", "beau", "oiseau", "bonjour", "garçon", "cinq", "fille", "ville",
    "avec", "Thomas", "chien", "loin", "vin", "un", "gens", "rose",
    "photo", "montagne", "guitare", "huit", "six", "dix", "c'est",
)
