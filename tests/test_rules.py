"""Tests for the rule table, display matching and rule notes.

WHY: The table order is part of the contract: saved traces reference rule
keys, and moving a rule changes output. Display matching and rule notes
drive the UI tooltips and rule radar.

RULES:
- Table order is asserted literally
- Matching prefers the longest match, then the earlier rule
"""

from __future__ import annotations

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.ir import RuleCategory
from ali_respeaker.core.matching import collect_rule_notes, match_rule_for_display
from ali_respeaker.core.rules import FALLBACK_MAP, RULE_TABLE, RULES_BY_KEY

EXPECTED_ORDER = [
    "cEst", "qu", "guHard", "eau", "au", "nasOIN", "oi", "ou", "eu", "ch",
    "ph", "gn", "ill", "ui", "nasIEN", "nasON", "nasAN", "nasIN", "nasUN",
    "sBetweenVowels", "cSoft", "gSoft", "j", "hSilent", "cedilla", "finalC",
    "accentA", "accentE", "accentE2", "accentI", "accentO", "accentU", "xToS",
]


class TestRuleTable:

    def test_order(self):
        assert [rule.key for rule in RULE_TABLE] == EXPECTED_ORDER

    def test_keys_unique(self):
        assert len(RULES_BY_KEY) == len(RULE_TABLE)

    def test_trigraph_before_digraph(self):
        keys = [rule.key for rule in RULE_TABLE]
        assert keys.index("eau") < keys.index("au")
        assert keys.index("nasIEN") < keys.index("nasIN")
        assert keys.index("nasOIN") < keys.index("oi")

    def test_every_replacement_in_vocabulary(self):
        for rule in RULE_TABLE:
            for token in rule.replacement:
                assert tk.bare(token) in tk.VOCABULARY, rule.key

    def test_nasal_rules_are_nasal(self):
        for rule in RULE_TABLE:
            if rule.key.startswith("nas"):
                assert rule.category is RuleCategory.NASAL

    def test_every_rule_explained(self):
        for rule in RULE_TABLE:
            assert rule.label
            assert rule.explanation

    def test_fallback_covers_ascii_letters(self):
        for letter in "abcdefgiklmnopqrstuvwxyz":
            assert FALLBACK_MAP[letter] in tk.VOCABULARY

    def test_fallback_c_and_g_are_hard(self):
        assert FALLBACK_MAP["c"] == tk.K
        assert FALLBACK_MAP["g"] == tk.G


class TestMatchRuleForDisplay:

    def test_longest_match_wins(self):
        assert match_rule_for_display("beau").key == "eau"
        assert match_rule_for_display("chien").key == "nasIEN"
        assert match_rule_for_display("fille").key == "ill"

    def test_tie_goes_to_earlier_rule(self):
        """'ch' and 'ou' are both two letters; 'ou' comes first in the table."""
        assert match_rule_for_display("chou").key == "ou"

    def test_case_insensitive(self):
        assert match_rule_for_display("BEAU").key == "eau"

    def test_nasal(self):
        assert match_rule_for_display("bon").key == "nasON"

    def test_no_match(self):
        assert match_rule_for_display("brr") is None
        assert match_rule_for_display("") is None


class TestCollectRuleNotes:

    def test_counts_in_table_order(self):
        notes = collect_rule_notes("beau chapeau")
        assert [note.rule.key for note in notes] == ["eau", "ch"]
        assert notes[0].count == 2
        assert notes[0].examples == ["beau", "chapeau"]
        assert notes[1].count == 1

    def test_split_rule_counts_once_per_match(self):
        notes = collect_rule_notes("fille")
        ill = [note for note in notes if note.rule.key == "ill"][0]
        assert ill.count == 1

    def test_examples_are_distinct_and_capped(self):
        notes = collect_rule_notes("beau beau gâteau bateau château", max_examples=2)
        eau = notes[0]
        assert eau.rule.key == "eau"
        assert eau.count == 5
        assert eau.examples == ["beau", "gâteau"]

    def test_post_processing_keys_not_reported(self):
        keys = [note.rule.key for note in collect_rule_notes("Thomas porte six chats")]
        assert "finalDrop" not in keys
        assert "finalSchwaDrop" not in keys

    def test_empty_text(self):
        assert collect_rule_notes("") == []
