"""Tests for the command-line interface.

WHY: The CLI is the quickest way to try a respelling and is used in
shell scripts, so its output format and exit codes matter.

HOW: Call main() with an explicit argv and read stdout/stderr through
capsys. stdin is replaced with io.StringIO where needed.

RULES:
- Errors print "Error: ..." to stderr and exit with code 1
- Nothing but results goes to stdout
"""

from __future__ import annotations

import io
import json

import pytest

from ali_respeaker.cli import build_parser, main
from ali_respeaker.core.reference import EXAMPLES, LETTERS, OPERATIONAL_RULES, SMOKE_TESTS

from conftest import HY


def _run(capsys, *argv):
    main(list(argv))
    return capsys.readouterr()


class TestParser:

    def test_defaults_left_to_config(self):
        args = build_parser().parse_args(["bon"])
        assert args.text == "bon"
        assert args.separator is None
        assert args.locale is None
        assert args.show_silent is False

    def test_rejects_unknown_separator(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--separator", "dash", "bon"])


class TestRespell:

    def test_english_default(self, capsys):
        assert _run(capsys, "bon").out == "b" + HY + "oh(n)\n"

    def test_both_locales(self, capsys):
        out = _run(capsys, "--locale", "both", "--separator", "none", "bon").out
        assert out.splitlines() == ["boh(n)", "بون"]

    def test_show_silent(self, capsys):
        out = _run(capsys, "--separator", "none", "--show-silent", "pont").out
        assert out == "poh(n)t\u0336\n"

    def test_config_defaults_apply(self, capsys, monkeypatch):
        monkeypatch.setenv("ALI_DEFAULT_SEPARATOR", "space")
        monkeypatch.setenv("ALI_DEFAULT_LOCALE", "ar")
        assert _run(capsys, "bon").out == "ب ون\n"

    def test_flags_override_config(self, capsys, monkeypatch):
        monkeypatch.setenv("ALI_DEFAULT_SEPARATOR", "space")
        assert _run(capsys, "--separator", "middot", "beau").out == "b·oh\n"

    def test_json_output(self, capsys):
        payload = json.loads(_run(capsys, "--json", "bon").out)
        assert payload["text"] == "bon"
        assert payload["en"] == "b" + HY + "oh(n)"
        assert payload["trace"][1]["ruleKey"] == "nasON"
        assert "ar" not in payload

    def test_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("beau\n"))
        assert _run(capsys, "--separator", "none").out == "boh\n"

    def test_empty_input_fails(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("   \n"))
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_bad_config_fails(self, capsys, monkeypatch):
        monkeypatch.setenv("ALI_DEFAULT_SEPARATOR", "dash")
        with pytest.raises(SystemExit) as exc_info:
            main(["bon"])
        assert exc_info.value.code == 1
        assert "Error: Unknown separator 'dash'" in capsys.readouterr().err


class TestModes:

    def test_rule(self, capsys):
        out = _run(capsys, "--rule", "beau").out
        assert out.startswith("eau [vowel] eau → OH\n")

    def test_rule_no_match(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--rule", "brr"])
        assert exc_info.value.code == 1
        assert "No rule matches 'brr'" in capsys.readouterr().err

    def test_notes(self, capsys):
        lines = _run(capsys, "--notes", "beau chapeau").out.splitlines()
        assert lines[0].startswith("eau → OH x2: ")
        assert lines[0].endswith("(beau, chapeau)")
        assert lines[1].startswith("ch → SH x1: ")

    def test_letters(self, capsys):
        lines = _run(capsys, "--letters").out.splitlines()
        assert len(lines) == len(LETTERS)
        assert lines[0].startswith("A  [a]")

    def test_operational_rules(self, capsys):
        lines = _run(capsys, "--operational-rules").out.splitlines()
        assert lines == ["- {}".format(rule) for rule in OPERATIONAL_RULES]

    def test_examples(self, capsys):
        lines = _run(capsys, "--examples").out.splitlines()
        assert len(lines) == len(EXAMPLES)
        assert lines[0] == "{}: {}".format(EXAMPLES[0].label, EXAMPLES[0].text)

    def test_self_check(self, capsys):
        lines = _run(capsys, "--self-check").out.splitlines()
        assert len(lines) == len(SMOKE_TESTS)
        assert lines[0].split()[0] == SMOKE_TESTS[0]
