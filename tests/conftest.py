"""Shared test fixtures for the ali_respeaker test suite.

WHY: Most test modules compare rendered respellings and need the same
separator constants and the same clean configuration environment.
Centralizing them here avoids duplication and keeps a developer's own
ALI_* variables or .env file from leaking into assertions.

HOW: An autouse fixture removes every ALI_* variable before each test.
Helper functions turn text into rendered lines with explicit options.

RULES:
- Tests never depend on the caller's environment
- HY is the non-breaking hyphen used by the default separator
"""

from typing import List

import pytest

from ali_respeaker.core.ir import RenderOptions, TokenTrace
from ali_respeaker.core.segmenter import transform_text
from ali_respeaker.renderers import render

HY = "\u2011"

ALI_ENV_VARS = (
    "ALI_DEFAULT_SEPARATOR",
    "ALI_DEFAULT_LOCALE",
    "ALI_SHOW_SILENT",
    "ALI_API_HOST",
    "ALI_API_PORT",
    "ALI_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Start every test with no ALI_* configuration set."""
    for name in ALI_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def en(text: str, **options) -> str:
    """English respelling of text with hyphen separators unless overridden."""
    return render(transform_text(text), RenderOptions(locale="en", **options))


def ar(text: str, **options) -> str:
    return render(transform_text(text), RenderOptions(locale="ar", **options))


def outs(trace: List[TokenTrace]) -> List[str]:
    return [entry.out for entry in trace]


def srcs(trace: List[TokenTrace]) -> str:
    return "".join(entry.src for entry in trace)


@pytest.fixture
def sample_sentence():
    """A sentence touching nasals, liaison, punctuation and a compound."""
    return "Bonjour, j'ai six amis et dix-huit chats."
