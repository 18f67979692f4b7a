"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Requests and responses each get their own model. Enums mirror the
closed sets of the core (separators, rule categories). Trace entries use
the persisted wire field names (ruleKey), so what the API returns can be
saved as-is.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Enum values match internal constants exactly
- TraceEntry matches saved_trace.schema.json field for field
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Separator(str, Enum):
    """Separator styles between the sounds of a word.

    RULES:
    - Values match ali_respeaker.core.ir.SEPARATOR_KINDS exactly
    """

    hyphen = "hyphen"
    middot = "middot"
    space = "space"
    none = "none"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class RespellRequest(BaseModel):
    """French text to respell, with display options."""

    text: str = Field(
        max_length=10000,
        description="French text (a word, a sentence or several lines).",
    )
    separator: Separator = Field(
        default=Separator.hyphen,
        description="Separator placed between the sounds of each word.",
    )
    show_silent: bool = Field(
        default=False,
        description="Render silent letters struck through instead of dropping them.",
    )


class NotesRequest(BaseModel):
    """Text to scan for firing rules."""

    text: str = Field(max_length=10000, description="French text to analyse.")
    max_examples: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Maximum number of example words listed per rule.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class TraceEntry(BaseModel):
    """One source fragment and the token it became (wire format)."""

    out: str = Field(description="Phoneme token; '(X)' when silent, 'Z‿' for liaison.")
    src: str = Field(description="Original substring of the input.")
    ruleKey: Optional[str] = Field(
        default=None,
        description="Key of the rule that produced the token; absent for plain letters.",
    )
    changed: Optional[bool] = Field(
        default=None,
        description="True when the token reads differently from the letters.",
    )
    note: Optional[str] = Field(default=None, description="Learner-facing explanation.")


class RespellResponse(BaseModel):
    """Both renderings of a text plus the trace behind them."""

    text: str = Field(description="The input text.")
    en: str = Field(description="English-letter respelling.")
    ar: str = Field(description="Approximate Arabic-script transliteration.")
    trace: List[TraceEntry] = Field(description="Per-fragment trace in source order.")


class RuleInfo(BaseModel):
    """Metadata for one rule of the rewrite table."""

    key: str = Field(description="Stable rule identifier, persisted as ruleKey.")
    label: str = Field(description="Short description, e.g. 'eau → OH'.")
    category: str = Field(description="Rule family: vowel, nasal, special, liaison or silent.")
    replacement: List[str] = Field(description="Token(s) the rule produces.")
    explanation: str = Field(description="Learner-facing explanation.")


class RuleNoteInfo(BaseModel):
    """How often a rule fired in a text."""

    rule: RuleInfo = Field(description="The rule that fired.")
    count: int = Field(description="Number of matches in the text.")
    examples: List[str] = Field(description="Distinct example words, in order of appearance.")


class LetterInfo(BaseModel):
    """French name of a letter of the alphabet."""

    ch: str = Field(description="The letter, uppercase.")
    name_ipa: str = Field(description="IPA transcription of the letter name.")
    ali: str = Field(description="English-letter respelling of the name.")
    alt: Optional[str] = Field(default=None, description="French spelling of the name.")
    note: Optional[str] = Field(default=None, description="Pronunciation tip.")


class ExampleInfo(BaseModel):
    """One built-in example sentence."""

    label: str = Field(description="Short title, e.g. 'Liaison'.")
    text: str = Field(description="French text to try.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
