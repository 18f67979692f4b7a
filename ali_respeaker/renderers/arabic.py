"""Approximate Arabic-script renderer.

WHY: Many learners read Arabic script more fluently than Latin. An
approximate transliteration lets them sound out French with letters they
already know, accepting that Arabic has no letters for several French
vowels.

HOW: Vowels map to the closest long-vowel letter (alif, waw, ya),
nasal vowels append a nun, and consonants missing from standard Arabic
use the widespread extended letters: پ for /p/, ڤ for /v/, ڨ for hard
/g/. The uvular French R is written with ghayn, which is closer to it
than ra.

RULES:
- Output is plain letters without harakat, to stay legible at small
  sizes
- Every token in tokens.VOCABULARY has an entry
- Unknown tokens fall back to their lowercase literal (base class)
"""

from __future__ import annotations

from typing import Dict

from ali_respeaker.core import tokens as tk
from ali_respeaker.renderers.base import BaseRenderer


class ArabicRenderer(BaseRenderer):
    """Renders tokens as an approximate Arabic-script transliteration."""

    DISPLAY: Dict[str, str] = {
        # Vowels
        tk.AH: "ا",
        tk.AY: "ي",
        tk.EH: "ي",
        tk.EE: "ي",
        tk.OH: "و",
        tk.OO: "و",
        tk.UE: "يو",
        tk.EU: "ؤ",
        tk.WA: "وا",
        tk.UEE: "وي",
        # Nasal vowels
        tk.AH_NASAL: "ان",
        tk.OH_NASAL: "ون",
        tk.EH_NASAL: "ين",
        tk.UH_NASAL: "ان",
        tk.YEH_NASAL: "يين",
        tk.WEH_NASAL: "وين",
        # Glides and special consonants
        tk.W: "و",
        tk.Y: "ي",
        tk.SH: "ش",
        tk.ZH: "ج",
        tk.NY: "ني",
        tk.R: "غ",
        # Plain consonants
        tk.B: "ب",
        tk.D: "د",
        tk.F: "ف",
        tk.G: "ڨ",
        tk.K: "ك",
        tk.L: "ل",
        tk.M: "م",
        tk.N: "ن",
        tk.P: "پ",
        tk.S: "س",
        tk.T: "ت",
        tk.V: "ڤ",
        tk.X: "كس",
        tk.Z: "ز",
        tk.H: "ه",
    }

    @property
    def name(self) -> str:
        return "Arabic approximation"

    @property
    def locale(self) -> str:
        return "ar"


_DEFAULT = ArabicRenderer()


def to_arabic(token: str) -> str:
    return _DEFAULT.to_display(token)
