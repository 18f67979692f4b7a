"""The ordered rewrite-rule table and the one-letter fallback map.

WHY: French spelling maps to sound through overlapping letter groups
("eau", "au", "a"), context ("c" before e/i/y) and word position (final
"c"). Keeping every rule as plain data in one ordered table makes the
precedence visible and lets the UI list, underline and explain rules
from the same source the engine runs.

HOW: RULE_TABLE is a tuple of Rule objects. The engine walks it top to
bottom; the first rule to claim a character wins it. Anything left over
is spelled through FALLBACK_MAP, one letter at a time.

RULES:
- Trigraphs before digraphs before single letters (eau, au, then a)
- "qu" and "gu" + front vowel before any lone u handling
- Nasal rules need a vowel, n, m or h NOT to follow, so "bonne" and
  "ami" are read orally
- "ien" runs before "in"; "oin" before "oi"
- Soft c/g (before e/i/y) before the hard c/g fallback
- Keys are persisted in saved traces: never rename one
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.ir import Rule, RuleCategory
from ali_respeaker.core.patterns import (
    FRONT_VOWEL_LETTERS,
    VOWEL_LETTERS,
    Anchored,
    Literal,
    Lookaround,
)

# A nasal vowel loses its nasality when the n/m is followed by a vowel or
# is doubled ("bonne", "comme"). h behaves like a vowel here ("bonheur").
_NASAL_BLOCKERS: FrozenSet[str] = VOWEL_LETTERS | frozenset("nmh")

RULE_TABLE: Tuple[Rule, ...] = (
    Rule(
        key="cEst",
        label="c'est → S-EH",
        pattern=Literal(("c'est", "c’est")),
        replacement=(tk.S, tk.EH),
        split=(1,),
        category=RuleCategory.SPECIAL,
        explanation="The common phrase 'c'est' is pronounced as one unit: /sɛ/.",
    ),
    Rule(
        key="qu",
        label="qu → K",
        pattern=Literal(("qu",)),
        replacement=(tk.K,),
        category=RuleCategory.SPECIAL,
        explanation="The 'qu' digraph is almost always pronounced as /k/.",
    ),
    Rule(
        key="guHard",
        label="gu + e/i → G",
        pattern=Lookaround(("gu",), followed_by=FRONT_VOWEL_LETTERS),
        replacement=(tk.G,),
        category=RuleCategory.SPECIAL,
        explanation=(
            "Before E, I or Y the 'u' in 'gu' is silent: it only keeps the "
            "'g' hard (/g/), as in 'guitare'."
        ),
    ),
    Rule(
        key="eau",
        label="eau → OH",
        pattern=Literal(("eau",)),
        replacement=(tk.OH,),
        category=RuleCategory.VOWEL,
        explanation=(
            "The trigraph 'eau' is a 'vowel team' that produces the /o/ sound, "
            "as in 'boat'."
        ),
    ),
    Rule(
        key="au",
        label="au → OH",
        pattern=Literal(("au",)),
        replacement=(tk.OH,),
        category=RuleCategory.VOWEL,
        explanation="Like 'eau', the 'au' digraph is pronounced /o/.",
    ),
    Rule(
        key="nasOIN",
        label="oin → WEH(n)",
        pattern=Lookaround(("oin",), not_followed_by=_NASAL_BLOCKERS),
        replacement=(tk.WEH_NASAL,),
        category=RuleCategory.NASAL,
        explanation="'oin' combines the 'w' glide with the bright nasal /ɛ̃/, as in 'loin'.",
    ),
    Rule(
        key="oi",
        label="oi → WA",
        pattern=Literal(("oi",)),
        replacement=(tk.WA,),
        category=RuleCategory.VOWEL,
        explanation="The 'oi' digraph is consistently pronounced 'wa' in French.",
    ),
    Rule(
        key="ou",
        label="ou → OO",
        pattern=Literal(("ou",)),
        replacement=(tk.OO,),
        category=RuleCategory.VOWEL,
        explanation="The 'ou' vowel team makes the /u/ sound, as in 'soup'.",
    ),
    Rule(
        key="eu",
        label="eu/œu → EU",
        pattern=Literal(("œu", "eu")),
        replacement=(tk.EU,),
        category=RuleCategory.VOWEL,
        explanation=(
            "'eu' and 'œu' make a rounded front vowel (/ø/ or /œ/): say 'eh' "
            "with your lips rounded."
        ),
    ),
    Rule(
        key="ch",
        label="ch → SH",
        pattern=Literal(("ch",)),
        replacement=(tk.SH,),
        category=RuleCategory.SPECIAL,
        explanation=(
            "The 'ch' digraph in French is usually soft, pronounced /ʃ/ like "
            "'sh' in 'shoe'."
        ),
    ),
    Rule(
        key="ph",
        label="ph → F",
        pattern=Literal(("ph",)),
        replacement=(tk.F,),
        category=RuleCategory.SPECIAL,
        explanation="Like in English, 'ph' is pronounced as /f/.",
    ),
    Rule(
        key="gn",
        label="gn → NY",
        pattern=Literal(("gn",)),
        replacement=(tk.NY,),
        category=RuleCategory.SPECIAL,
        explanation="'gn' is one palatal sound /ɲ/, like 'ny' in 'canyon'.",
    ),
    Rule(
        key="ill",
        label="-ill → EE-Y",
        pattern=Lookaround(
            ("ill",),
            not_followed_by=frozenset("aioué"),
            excluded_prefixes=("v", "m", "tranqu"),
        ),
        replacement=(tk.EE, tk.Y),
        split=(1,),
        category=RuleCategory.SPECIAL,
        explanation=(
            "'-ill' usually makes a 'y' glide (/j/) after the 'ee' sound, as in "
            "'fille'. Exceptions exist (e.g., 'ville', 'mille')."
        ),
    ),
    Rule(
        key="ui",
        label="ui → ÜEE",
        pattern=Literal(("ui",)),
        replacement=(tk.UEE,),
        category=RuleCategory.VOWEL,
        explanation="'ui' glides from a quick /y/ into /i/, as in 'nuit' or 'huit'.",
    ),
    Rule(
        key="nasIEN",
        label="ien → YEH(n)",
        pattern=Lookaround(("ien",), not_followed_by=_NASAL_BLOCKERS),
        replacement=(tk.YEH_NASAL,),
        category=RuleCategory.NASAL,
        explanation=(
            "'ien' is a 'y' glide followed by the bright nasal /ɛ̃/, as in "
            "'bien' or 'chien'."
        ),
    ),
    Rule(
        key="nasON",
        label="on/om → OH(n)",
        pattern=Lookaround(("on", "om"), not_followed_by=_NASAL_BLOCKERS),
        replacement=(tk.OH_NASAL,),
        category=RuleCategory.NASAL,
        explanation=(
            "Nasal vowel. The sound is made in the back of the mouth with air "
            "passing through the nose. Think of the 'on' in 'bon'."
        ),
    ),
    Rule(
        key="nasAN",
        label="an/am/en/em → AH(n)",
        pattern=Lookaround(("an", "am", "en", "em"), not_followed_by=_NASAL_BLOCKERS),
        replacement=(tk.AH_NASAL,),
        category=RuleCategory.NASAL,
        explanation=(
            "A common nasal vowel, like in 'vent' or 'temps'. The 'en' in "
            "'examen' is an exception."
        ),
    ),
    Rule(
        key="nasIN",
        label="in/im/ain/ein/yn/ym → EH(n)",
        pattern=Lookaround(
            ("ain", "ein", "in", "im", "yn", "ym"),
            not_followed_by=_NASAL_BLOCKERS,
        ),
        replacement=(tk.EH_NASAL,),
        category=RuleCategory.NASAL,
        explanation="A bright nasal sound, as in 'vin' or 'pain'.",
    ),
    Rule(
        key="nasUN",
        label="un/um → UH(n)",
        pattern=Lookaround(("un", "um"), not_followed_by=_NASAL_BLOCKERS),
        replacement=(tk.UH_NASAL,),
        category=RuleCategory.NASAL,
        explanation=(
            "The nasal sound in 'un' or 'parfum'. Made by saying 'uh' with air "
            "passing through the nose."
        ),
    ),
    Rule(
        key="sBetweenVowels",
        label="s between vowels → Z",
        pattern=Lookaround(("s",), preceded_by=VOWEL_LETTERS, followed_by=VOWEL_LETTERS),
        replacement=(tk.Z,),
        category=RuleCategory.SPECIAL,
        explanation="A single 's' between two vowel sounds is typically voiced, like /z/.",
    ),
    Rule(
        key="cSoft",
        label="c → S",
        pattern=Lookaround(("c",), followed_by=FRONT_VOWEL_LETTERS),
        replacement=(tk.S,),
        category=RuleCategory.SPECIAL,
        explanation=(
            "Soft C rule: When 'c' comes before an E, I, or Y, it is "
            "pronounced /s/."
        ),
    ),
    Rule(
        key="gSoft",
        label="g → ZH",
        pattern=Lookaround(("g",), followed_by=FRONT_VOWEL_LETTERS),
        replacement=(tk.ZH,),
        category=RuleCategory.SPECIAL,
        explanation=(
            "Soft G rule: When 'g' comes before an E, I, or Y, it is "
            "pronounced /ʒ/ (as in 'vision')."
        ),
    ),
    Rule(
        key="j",
        label="j → ZH",
        pattern=Literal(("j",)),
        replacement=(tk.ZH,),
        category=RuleCategory.SPECIAL,
        explanation="The letter 'j' in French is consistently pronounced /ʒ/.",
    ),
    Rule(
        key="hSilent",
        label="h → (H)",
        pattern=Literal(("h",)),
        replacement=(tk.silent(tk.H),),
        category=RuleCategory.SILENT,
        explanation=(
            "Rule: The letter H is always silent in French, though it can "
            "sometimes block liaisons (h aspiré)."
        ),
    ),
    Rule(
        key="cedilla",
        label="ç → S",
        pattern=Literal(("ç",)),
        replacement=(tk.S,),
        category=RuleCategory.SPECIAL,
        explanation="The cedilla (¸) guarantees a soft 'c' sound (/s/) before A, O, or U.",
    ),
    Rule(
        key="finalC",
        label="Final C",
        pattern=Anchored(("c",), anchor="end"),
        replacement=(tk.K,),
        category=RuleCategory.SPECIAL,
        explanation="Final 'c' is usually pronounced, unlike many other final consonants.",
    ),
    Rule(
        key="accentA",
        label="à/â → AH",
        pattern=Literal(("à", "â")),
        replacement=(tk.AH,),
        category=RuleCategory.VOWEL,
        explanation=(
            "Accents on 'a' don't change the sound but can change the meaning "
            "of the word."
        ),
    ),
    Rule(
        key="accentE",
        label="é → AY",
        pattern=Literal(("é",)),
        replacement=(tk.AY,),
        category=RuleCategory.VOWEL,
        explanation=(
            "The 'é' (accent aigu) produces an /e/ sound, similar to 'ay' in "
            "'hay'."
        ),
    ),
    Rule(
        key="accentE2",
        label="è/ê/ë → EH",
        pattern=Literal(("è", "ê", "ë")),
        replacement=(tk.EH,),
        category=RuleCategory.VOWEL,
        explanation=(
            "These accents on 'e' typically produce an /ɛ/ sound, like 'eh' "
            "in 'bet'."
        ),
    ),
    Rule(
        key="accentI",
        label="î/ï → EE",
        pattern=Literal(("î", "ï")),
        replacement=(tk.EE,),
        category=RuleCategory.VOWEL,
        explanation=(
            "Accents on 'i' don't usually change the sound but can indicate a "
            "historical spelling or separate vowel sounds."
        ),
    ),
    Rule(
        key="accentO",
        label="ô → OH",
        pattern=Literal(("ô",)),
        replacement=(tk.OH,),
        category=RuleCategory.VOWEL,
        explanation=(
            "The circumflex on 'o' often indicates a long /o/ sound and a "
            "historical, dropped 's'."
        ),
    ),
    Rule(
        key="accentU",
        label="û/ù → Ü",
        pattern=Literal(("û", "ù")),
        replacement=(tk.UE,),
        category=RuleCategory.VOWEL,
        explanation=(
            "Accents on 'u' don't change the sound (/y/) but distinguish "
            "words (e.g., 'ou' vs 'où')."
        ),
    ),
    Rule(
        key="xToS",
        label="final x → S",
        pattern=Anchored(("x",), anchor="end"),
        replacement=(tk.S,),
        category=RuleCategory.SPECIAL,
        explanation=(
            "In numbers like 'six' and 'dix', the final 'x' is pronounced as "
            "/s/ when at the end of a phrase."
        ),
    ),
)

RULES_BY_KEY: Dict[str, Rule] = {rule.key: rule for rule in RULE_TABLE}

# Letters the rule table did not claim, spelled one at a time.
# c and g default to their hard sounds; the soft cases are rules above.
FALLBACK_MAP: Dict[str, str] = {
    "a": tk.AH,
    "b": tk.B,
    "c": tk.K,
    "d": tk.D,
    "e": tk.EH,
    "f": tk.F,
    "g": tk.G,
    "i": tk.EE,
    "k": tk.K,
    "l": tk.L,
    "m": tk.M,
    "n": tk.N,
    "o": tk.OH,
    "p": tk.P,
    "q": tk.K,
    "r": tk.R,
    "s": tk.S,
    "t": tk.T,
    "u": tk.UE,
    "v": tk.V,
    "w": tk.W,
    "x": tk.X,
    "y": tk.EE,
    "z": tk.Z,
    "ä": tk.AH,
    "ö": tk.EU,
    "ü": tk.UE,
    "œ": tk.EU,
}
