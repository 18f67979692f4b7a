"""FastAPI application exposing the respelling core over HTTP.

WHY: The learner UI, notebooks and other tools need the respelling,
the rule table and the reference data without embedding Python. FastAPI
gives request validation and OpenAPI docs for free.

HOW: A single FastAPI app with read-only endpoints grouped by tags. Each
endpoint is a plain synchronous call into the core; nothing is stored
and no work runs in the background.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- Error responses use a consistent ErrorResponse schema
- ValueError from the core or config becomes HTTP 400
- Trace entries are returned in wire format with empty fields omitted
"""

from __future__ import annotations

import logging
from typing import Annotated, List

from fastapi import FastAPI, HTTPException, Query
from fastapi import Path as PathParam

from ali_respeaker import __version__
from ali_respeaker.config import configure_logging, load_api_address, parse_log_level
from ali_respeaker.core.ir import RenderOptions, Rule
from ali_respeaker.core.matching import collect_rule_notes, match_rule_for_display
from ali_respeaker.core.reference import EXAMPLES, LETTERS, OPERATIONAL_RULES
from ali_respeaker.core.rules import RULE_TABLE
from ali_respeaker.core.segmenter import WORD_RE, transform_text
from ali_respeaker.core.wire import trace_to_wire
from ali_respeaker.renderers import render
from ali_respeaker.server.models import (
    ErrorResponse,
    ExampleInfo,
    HealthResponse,
    LetterInfo,
    NotesRequest,
    RespellRequest,
    RespellResponse,
    RuleInfo,
    RuleNoteInfo,
    TraceEntry,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ali Respeaker API",
    description=(
        "Explainable French pronunciation respelling. Convert French text into "
        "an English-letter respelling and an approximate Arabic-script "
        "transliteration, with a per-fragment trace of the rules that fired."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule_to_info(rule: Rule) -> RuleInfo:
    return RuleInfo(
        key=rule.key,
        label=rule.label,
        category=rule.category.value,
        replacement=list(rule.replacement),
        explanation=rule.explanation,
    )


# ---------------------------------------------------------------------------
# Endpoints: Respelling
# ---------------------------------------------------------------------------


@app.post(
    "/respell",
    response_model=RespellResponse,
    response_model_exclude_none=True,
    tags=["respelling"],
    summary="Respell French text",
    description=(
        "Transform French text and render it in both output scripts. "
        "The trace lists every source fragment with the token it became "
        "and the rule that produced it."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid rendering options"},
    },
)
def respell(body: RespellRequest) -> RespellResponse:
    trace = transform_text(body.text)
    try:
        en = render(trace, RenderOptions(body.separator.value, "en", body.show_silent))
        ar = render(trace, RenderOptions(body.separator.value, "ar", body.show_silent))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    logger.debug("Respelled %d character(s) into %d trace entries", len(body.text), len(trace))
    return RespellResponse(
        text=body.text,
        en=en,
        ar=ar,
        trace=[TraceEntry(**entry) for entry in trace_to_wire(trace)],
    )


@app.get(
    "/words/{word}/trace",
    response_model=List[TraceEntry],
    response_model_exclude_none=True,
    tags=["respelling"],
    summary="Trace a single word",
    description="Return the wire-format trace of one word (compounds allowed).",
    responses={
        400: {"model": ErrorResponse, "description": "Not a single word"},
    },
)
def word_trace(
    word: Annotated[str, PathParam(description="A single French word, e.g. 'garçon'.")],
) -> List[TraceEntry]:
    if WORD_RE.fullmatch(word.strip()) is None:
        raise HTTPException(
            status_code=400,
            detail="Expected a single word, got '{}'".format(word),
        )
    trace = transform_text(word.strip())
    return [TraceEntry(**entry) for entry in trace_to_wire(trace)]


# ---------------------------------------------------------------------------
# Endpoints: Rules
# ---------------------------------------------------------------------------


@app.get(
    "/rules",
    response_model=List[RuleInfo],
    tags=["rules"],
    summary="List the rewrite rules",
    description="The rule table in priority order. Earlier rules claim letters first.",
)
def list_rules() -> List[RuleInfo]:
    return [_rule_to_info(rule) for rule in RULE_TABLE]


@app.get(
    "/rules/match",
    response_model=RuleInfo,
    tags=["rules"],
    summary="Find the rule that describes a word",
    description="Longest match wins; ties go to the rule earlier in the table.",
    responses={
        404: {"model": ErrorResponse, "description": "No rule matches the word"},
    },
)
def match_rule(
    word: Annotated[str, Query(min_length=1, description="Word to look up.")],
) -> RuleInfo:
    rule = match_rule_for_display(word)
    if rule is None:
        raise HTTPException(status_code=404, detail="No rule matches '{}'".format(word))
    return _rule_to_info(rule)


@app.post(
    "/rules/notes",
    response_model=List[RuleNoteInfo],
    tags=["rules"],
    summary="Rules that fire for a text",
    description="Count how often each table rule fires in the text, with example words.",
)
def rule_notes(body: NotesRequest) -> List[RuleNoteInfo]:
    return [
        RuleNoteInfo(rule=_rule_to_info(note.rule), count=note.count, examples=note.examples)
        for note in collect_rule_notes(body.text, max_examples=body.max_examples)
    ]


# ---------------------------------------------------------------------------
# Endpoints: Reference
# ---------------------------------------------------------------------------


@app.get(
    "/letters",
    response_model=List[LetterInfo],
    response_model_exclude_none=True,
    tags=["reference"],
    summary="French letter names",
)
def list_letters() -> List[LetterInfo]:
    return [
        LetterInfo(
            ch=letter.ch,
            name_ipa=letter.name_ipa,
            ali=letter.ali,
            alt=letter.alt,
            note=letter.note,
        )
        for letter in LETTERS
    ]


@app.get(
    "/operational-rules",
    response_model=List[str],
    tags=["reference"],
    summary="High-yield pronunciation heuristics",
)
def list_operational_rules() -> List[str]:
    return list(OPERATIONAL_RULES)


@app.get(
    "/examples",
    response_model=List[ExampleInfo],
    tags=["reference"],
    summary="Example sentences",
    description="Short French texts that exercise the main rules, ready to respell.",
)
def list_examples() -> List[ExampleInfo]:
    return [ExampleInfo(label=example.label, text=example.text) for example in EXAMPLES]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the ali-respeaker-api console script."""
    import uvicorn

    configure_logging(parse_log_level())
    host, port = load_api_address()
    logger.info("Starting API on %s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
