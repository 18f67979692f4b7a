"""Tests for the FastAPI respelling API.

WHY: The learner UI talks to the core only through these endpoints, so
status codes, field names and the omitted-when-empty trace fields are a
contract.

HOW: FastAPI TestClient, synchronous and in-process. The core is pure
and stateless, so nothing needs mocking or resetting between tests.

RULES:
- All tests use the FastAPI TestClient
- Tests cover happy paths, 400 bad input, 404 no match, 422 validation
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ali_respeaker import __version__
from ali_respeaker.core.reference import EXAMPLES, LETTERS, OPERATIONAL_RULES
from ali_respeaker.core.rules import RULE_TABLE
from ali_respeaker.server.app import app

from conftest import HY


@pytest.fixture
def client():
    return TestClient(app)


# ---------------------------------------------------------------------------
# POST /respell
# ---------------------------------------------------------------------------


class TestRespell:

    def test_both_scripts(self, client):
        resp = client.post("/respell", json={"text": "bon"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["text"] == "bon"
        assert data["en"] == "b" + HY + "oh(n)"
        assert data["ar"] == "ب" + HY + "ون"

    def test_trace_omits_empty_fields(self, client):
        trace = client.post("/respell", json={"text": "bon"}).json()["trace"]
        assert trace[0] == {"out": "B", "src": "b"}
        assert trace[1]["ruleKey"] == "nasON"
        assert trace[1]["changed"] is True

    def test_separator_and_silent(self, client):
        resp = client.post(
            "/respell",
            json={"text": "pont", "separator": "none", "show_silent": True},
        )
        assert resp.json()["en"] == "poh(n)t\u0336"

    def test_liaison(self, client):
        data = client.post("/respell", json={"text": "dix amis", "separator": "none"}).json()
        assert data["en"] == "deez‿ ahmee"
        assert data["trace"][2]["ruleKey"] == "sixDixLiaison"

    def test_bad_separator(self, client):
        resp = client.post("/respell", json={"text": "bon", "separator": "dash"})
        assert resp.status_code == 422

    def test_missing_text(self, client):
        assert client.post("/respell", json={}).status_code == 422


# ---------------------------------------------------------------------------
# GET /words/{word}/trace
# ---------------------------------------------------------------------------


class TestWordTrace:

    def test_single_word(self, client):
        resp = client.get("/words/garçon/trace")
        assert resp.status_code == 200
        keys = [entry.get("ruleKey") for entry in resp.json()]
        assert "cedilla" in keys

    def test_compound(self, client):
        resp = client.get("/words/dix-huit/trace")
        assert resp.status_code == 200
        assert resp.json()[2]["ruleKey"] == "sixDixLiaison"

    def test_not_a_word(self, client):
        resp = client.get("/words/two words/trace")
        assert resp.status_code == 400
        assert "single word" in resp.json()["detail"]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class TestRules:

    def test_list(self, client):
        data = client.get("/rules").json()
        assert len(data) == len(RULE_TABLE)
        assert data[0]["key"] == "cEst"
        assert set(data[0]) == {"key", "label", "category", "replacement", "explanation"}

    def test_match(self, client):
        resp = client.get("/rules/match", params={"word": "beau"})
        assert resp.status_code == 200
        assert resp.json()["key"] == "eau"
        assert resp.json()["category"] == "vowel"

    def test_match_none(self, client):
        resp = client.get("/rules/match", params={"word": "brr"})
        assert resp.status_code == 404
        assert resp.json()["detail"] == "No rule matches 'brr'"

    def test_match_requires_word(self, client):
        assert client.get("/rules/match").status_code == 422

    def test_notes(self, client):
        resp = client.post("/rules/notes", json={"text": "beau chapeau"})
        assert resp.status_code == 200
        data = resp.json()
        assert data[0]["rule"]["key"] == "eau"
        assert data[0]["count"] == 2
        assert data[0]["examples"] == ["beau", "chapeau"]

    def test_notes_max_examples(self, client):
        resp = client.post(
            "/rules/notes",
            json={"text": "beau chapeau bateau", "max_examples": 1},
        )
        assert resp.json()[0]["examples"] == ["beau"]

    def test_notes_bad_max_examples(self, client):
        resp = client.post("/rules/notes", json={"text": "beau", "max_examples": 0})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Reference and health
# ---------------------------------------------------------------------------


class TestReference:

    def test_letters(self, client):
        data = client.get("/letters").json()
        assert len(data) == len(LETTERS)
        assert data[0] == {"ch": "A", "name_ipa": "[a]", "ali": "aah"}

    def test_operational_rules(self, client):
        assert client.get("/operational-rules").json() == list(OPERATIONAL_RULES)

    def test_examples(self, client):
        data = client.get("/examples").json()
        assert len(data) == len(EXAMPLES)
        assert data[0] == {"label": EXAMPLES[0].label, "text": EXAMPLES[0].text}

    def test_examples_respell(self, client):
        for example in client.get("/examples").json():
            resp = client.post("/respell", json={"text": example["text"]})
            assert resp.status_code == 200
            assert resp.json()["en"]

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
