"""Persisted wire format for traces and saved words.

WHY: Saved words outlive the code that produced them. The document store
keeps each trace as an ordered array of plain objects, and old records
must keep loading after the rule table evolves. This module is the one
place that knows that shape.

HOW: trace_to_wire() drops empty optional fields and renames rule_key to
ruleKey. trace_from_wire() validates the array against
saved_trace.schema.json with jsonschema before building TokenTrace
objects. build_saved_word() renders both locales and validates the
finished record the same way.

RULES:
- Entry shape: {out, src, ruleKey?, changed?, note?}; nothing else
- Saved word shape: {fr_line, en_line, ali_respell, ar_respell, tags, trace}
- Schema violations raise ValueError with the validator's message
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import jsonschema

from ali_respeaker.core.ir import RenderOptions, TokenTrace
from ali_respeaker.core.segmenter import transform_text
from ali_respeaker.renderers import render

_SCHEMA_PATH = Path(__file__).resolve().parent / "saved_trace.schema.json"

_CACHED_SCHEMA: dict[str, Any] | None = None


def get_schema() -> dict[str, Any]:
    """Load the saved-word JSON schema, cached after the first call."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _trace_schema() -> dict[str, Any]:
    schema = get_schema()
    return {"$ref": "#/definitions/trace", "definitions": schema["definitions"]}


def _validate(instance: Any, schema: dict[str, Any], what: str) -> None:
    try:
        jsonschema.validate(instance=instance, schema=schema)
    except jsonschema.ValidationError as exc:
        raise ValueError("Invalid {}: {}".format(what, exc.message)) from exc


def entry_to_wire(entry: TokenTrace) -> Dict[str, Any]:
    data: Dict[str, Any] = {"out": entry.out, "src": entry.src}
    if entry.rule_key is not None:
        data["ruleKey"] = entry.rule_key
    if entry.changed:
        data["changed"] = True
    if entry.note is not None:
        data["note"] = entry.note
    return data


def trace_to_wire(trace: Iterable[TokenTrace]) -> List[Dict[str, Any]]:
    """Serialise a trace to its persisted array form."""
    return [entry_to_wire(entry) for entry in trace]


def trace_from_wire(data: Any) -> List[TokenTrace]:
    """Rebuild a trace from its persisted array form.

    Args:
        data: Decoded JSON, expected to be a list of entry objects.

    Returns:
        A new list of TokenTrace objects.

    Raises:
        ValueError: If ``data`` does not match the entry schema.
    """
    _validate(data, _trace_schema(), "saved trace")
    return [
        TokenTrace(
            src=item["src"],
            out=item["out"],
            rule_key=item.get("ruleKey"),
            changed=item.get("changed", False),
            note=item.get("note"),
        )
        for item in data
    ]


def validate_saved_word(record: Any) -> None:
    """Raise ValueError unless ``record`` is a valid saved word."""
    _validate(record, get_schema(), "saved word")


def build_saved_word(
    fr_line: str,
    en_line: str = "",
    tags: Optional[Sequence[str]] = None,
    trace: Optional[Sequence[TokenTrace]] = None,
    separator: str = "hyphen",
) -> Dict[str, Any]:
    """Build the record the document store persists for a saved word.

    Args:
        fr_line: The French text.
        en_line: The learner's meaning or translation.
        tags: Free-text tags.
        trace: A precomputed trace; computed from ``fr_line`` when None.
        separator: Separator style for both respellings.

    Returns:
        A plain dict matching saved_trace.schema.json.

    Raises:
        ValueError: If ``separator`` is unknown.
    """
    if trace is None:
        trace = transform_text(fr_line)
    record = {
        "fr_line": fr_line,
        "en_line": en_line,
        "ali_respell": render(trace, RenderOptions(separator=separator, locale="en")),
        "ar_respell": render(trace, RenderOptions(separator=separator, locale="ar")),
        "tags": list(tags or []),
        "trace": trace_to_wire(trace),
    }
    validate_saved_word(record)
    return record
