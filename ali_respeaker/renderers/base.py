"""Abstract base renderer and the shared trace-joining logic.

WHY: Every output script consumes the same TokenTrace list but spells
each phoneme differently. This base class enforces one interface so the
CLI and the HTTP API can render any locale generically, and keeps the
separator/silent-letter policy in a single place.

HOW: BaseRenderer is an ABC with a ``name``, a ``locale`` and a
``DISPLAY`` table. ``to_display()`` strips markers, looks the bare token
up, and falls back to the lowercase literal. ``join_trace()`` walks a
trace and glues the rendered tokens together.

RULES:
- to_display() is total: any non-empty token yields a non-empty string
- Renderers hold no mutable state
- Silent entries are dropped unless show_silent is set, in which case
  they are struck through (U+0336 combining long stroke)
- The separator goes only between two consecutive rendered tokens of
  the same word, never next to a liaison token or a pass-through entry

To add an output script:
1. Create a new file in renderers/
2. Subclass BaseRenderer and fill DISPLAY
3. Register it in RENDERERS in renderers/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Sequence

from ali_respeaker.core.ir import TokenTrace
from ali_respeaker.core.tokens import LIAISON_MARK, bare, is_liaison, is_passthrough, is_silent

SEP_MAP: Dict[str, str] = {
    "hyphen": "\u2011",  # non-breaking hyphen
    "middot": "·",
    "space": " ",
    "none": "",
}

_STRIKE = "\u0336"


def strike(text: str) -> str:
    """Render text struck through with combining overlay characters."""
    return "".join(ch + _STRIKE for ch in text)


class BaseRenderer(ABC):
    """Abstract base for all locale renderers."""

    DISPLAY: Dict[str, str] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable renderer name, e.g. 'English respelling'."""

    @property
    @abstractmethod
    def locale(self) -> str:
        """Locale key, e.g. 'en'."""

    def to_display(self, token: str) -> str:
        """Map a token to its display string for this locale.

        HOW: Silent parentheses are removed and the bare code is looked up.
        A liaison token keeps its tie bar so the learner sees the link.
        Unknown tokens fall back to their lowercase literal form.
        """
        code = bare(token)
        text = self.DISPLAY.get(code)
        if text is None:
            text = code.lower() or token
        if is_liaison(token):
            text = self.liaison_display(text)
        return text

    def liaison_display(self, text: str) -> str:
        return text + LIAISON_MARK


def join_trace(
    trace: Sequence[TokenTrace],
    to_display: Callable[[str], str],
    separator: str = "",
    show_silent: bool = False,
) -> str:
    """Join a trace into one display string.

    Args:
        trace: Token traces for a word or a whole text, in source order.
        to_display: Token → string function (usually a renderer's
            ``to_display``).
        separator: Literal string placed between consecutive tokens of a
            word (see SEP_MAP).
        show_silent: Render silent entries struck through instead of
            dropping them.

    Returns:
        The rendered line.
    """
    parts: List[str] = []
    joinable = False

    for entry in trace:
        token = entry.out
        if is_passthrough(token):
            parts.append(token)
            joinable = False
            continue

        if is_silent(token):
            if not show_silent:
                continue
            text = strike(to_display(token))
        else:
            text = to_display(token)

        liaison = is_liaison(token)
        if joinable and not liaison and separator:
            parts.append(separator)
        parts.append(text)
        joinable = not liaison

    return "".join(parts)
