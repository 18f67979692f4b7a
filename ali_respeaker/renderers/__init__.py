"""Renderer registry and the ``render`` entry point.

WHY: The CLI and the HTTP API need a single lookup to find the renderer
for a locale. A central dict makes adding an output script one import
and one line.

HOW: RENDERERS maps locale keys to renderer *classes* (not instances),
the same way callers would pick any pluggable backend:
``renderer = RENDERERS["ar"]()``. ``render()`` combines that lookup with
``join_trace`` and a RenderOptions value.

RULES:
- Keys are locale identifiers used in CLI flags, config and API bodies
- Values are BaseRenderer subclasses
- Every renderer listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Sequence

from ali_respeaker.core.ir import RenderOptions, TokenTrace
from ali_respeaker.renderers.arabic import ArabicRenderer
from ali_respeaker.renderers.base import SEP_MAP, join_trace
from ali_respeaker.renderers.english import EnglishRenderer

if TYPE_CHECKING:
    from ali_respeaker.renderers.base import BaseRenderer

RENDERERS: Dict[str, type[BaseRenderer]] = {
    "en": EnglishRenderer,
    "ar": ArabicRenderer,
}


def render(trace: Sequence[TokenTrace], options: Optional[RenderOptions] = None) -> str:
    """Project a trace to a display string for ``options.locale``.

    Args:
        trace: Output of ``transform`` or ``transform_text``.
        options: Separator, locale and silent-letter display. Defaults
            to hyphen-separated English, silent letters dropped.

    Returns:
        The rendered respelling.
    """
    if options is None:
        options = RenderOptions()
    renderer = RENDERERS[options.locale]()
    return join_trace(
        trace,
        renderer.to_display,
        separator=SEP_MAP[options.separator],
        show_silent=options.show_silent,
    )


__all__ = ["RENDERERS", "SEP_MAP", "join_trace", "render"]
