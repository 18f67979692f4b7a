"""English-letter respelling renderer.

WHY: The primary audience reads English letters. Each phoneme token is
spelled with the English letter group a learner would naturally sound
out ("OO" → "oo", "ZH" → "zh"), with a few deliberate cues such as
"kh(r)" for the uvular R so learners avoid the English /ɹ/.

HOW: DISPLAY is the core's EN_SPELLING table, so the engine and this
renderer agree on what a letter reads as. Everything not listed (plain
consonants, unknown characters) renders as its lowercase code via the
base class.

RULES:
- Nasal vowels render with a trailing "(n)" cue, except UH~ which reads
  as "un"
- Plain consonant codes render as their lowercase letter
- Silent markers are stripped; join_trace decides whether to show them
"""

from __future__ import annotations

from typing import Dict

from ali_respeaker.core import tokens as tk
from ali_respeaker.renderers.base import BaseRenderer


class EnglishRenderer(BaseRenderer):
    """Renders tokens as an English-letter respelling ("ali respell")."""

    DISPLAY: Dict[str, str] = dict(tk.EN_SPELLING)

    @property
    def name(self) -> str:
        return "English respelling"

    @property
    def locale(self) -> str:
        return "en"


_DEFAULT = EnglishRenderer()


def to_en(token: str) -> str:
    """Module-level shortcut for ``EnglishRenderer().to_display``."""
    return _DEFAULT.to_display(token)
