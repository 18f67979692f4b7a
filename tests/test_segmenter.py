"""Tests for text segmentation, compounds and the six/dix liaison.

WHY: The segmenter decides what counts as a word and is the only place
that looks across word boundaries. Liaison mistakes ("six chats" read
with a /z/) are exactly what learners notice first.

RULES:
- Pass-through segments come back verbatim with changed=False
- Liaison crosses whitespace and compound joiners, never punctuation
"""

from __future__ import annotations

import pytest

from ali_respeaker.core import tokens as tk
from ali_respeaker.core.ir import Segment, SegmentKind, TokenTrace
from ali_respeaker.core.segmenter import segment_text, transform_text, transform_words

from conftest import srcs

W = SegmentKind.WORD
O = SegmentKind.OTHER


class TestSegmentText:

    def test_words_and_punctuation(self):
        assert segment_text("Bonjour, Thomas!") == [
            Segment(W, "Bonjour"),
            Segment(O, ", "),
            Segment(W, "Thomas"),
            Segment(O, "!"),
        ]

    def test_compound_is_one_word(self):
        assert segment_text("arc-en-ciel") == [Segment(W, "arc-en-ciel")]
        assert segment_text("dix–huit") == [Segment(W, "dix–huit")]

    def test_apostrophes_stay_inside_words(self):
        assert segment_text("l'ami c’est") == [
            Segment(W, "l'ami"),
            Segment(O, " "),
            Segment(W, "c’est"),
        ]

    def test_loose_dash_is_other(self):
        assert segment_text("six - amis")[1] == Segment(O, " - ")
        assert segment_text("dix-") == [Segment(W, "dix"), Segment(O, "-")]

    def test_digits_are_other(self):
        assert segment_text("42 ans") == [Segment(O, "42 "), Segment(W, "ans")]

    def test_concatenation_gives_text_back(self, sample_sentence):
        assert "".join(segment.text for segment in segment_text(sample_sentence)) == sample_sentence

    def test_empty(self):
        assert segment_text("") == []


class TestTransformText:

    def test_empty_text(self):
        assert transform_text("") == []

    def test_round_trip_case_insensitive(self, sample_sentence):
        assert srcs(transform_text(sample_sentence)) == sample_sentence.lower()

    def test_other_segments_pass_through(self):
        trace = transform_text("Thomas, William")
        comma = [entry for entry in trace if entry.src == ", "][0]
        assert comma == TokenTrace(", ", ", ", None, False)

    def test_compound_joiner_becomes_space(self):
        trace = transform_text("arc-en-ciel")
        joiners = [entry for entry in trace if entry.src == "-"]
        assert len(joiners) == 2
        assert all(entry.out == " " for entry in joiners)
        assert srcs(trace) == "arc-en-ciel"

    def test_compound_parts_transformed_separately(self):
        trace = transform_text("arc-en-ciel")
        assert trace[2].out == tk.K
        assert trace[2].rule_key == "finalC"
        assert trace[4].out == tk.AH_NASAL

    def test_transform_words_pairs(self):
        pairs = transform_words("dix-huit")
        assert [word for word, _ in pairs] == ["dix", None, "huit"]

    def test_deterministic(self, sample_sentence):
        assert transform_text(sample_sentence) == transform_text(sample_sentence)


class TestLiaison:

    @pytest.mark.parametrize("text", ["six amis", "dix amis", "Six enfants", "dix hommes"])
    def test_vowel_or_h_gives_liaison(self, text):
        entry = transform_text(text)[2]
        assert entry.out == tk.LIAISON_Z
        assert entry.rule_key == "sixDixLiaison"
        assert entry.changed is True
        assert "liaison" in entry.note.lower()

    @pytest.mark.parametrize("text", ["six chats", "dix livres"])
    def test_consonant_silences_s(self, text):
        entry = transform_text(text)[2]
        assert entry.out == "(S)"
        assert entry.rule_key == "finalDrop"

    @pytest.mark.parametrize("text", ["six", "six.", "six, amis", "j'en ai dix, merci", "six (amis)"])
    def test_end_or_punctuation_keeps_s(self, text):
        trace = transform_text(text)
        x = [entry for entry in trace if entry.src == "x"][0]
        assert x.out == tk.S
        assert x.rule_key == "finalX"

    def test_liaison_across_compound_joiner(self):
        trace = transform_text("dix-huit")
        assert trace[2].out == tk.LIAISON_Z
        assert trace[3] == TokenTrace("-", " ")

    def test_consonant_across_compound_joiner(self):
        assert transform_text("dix-sept")[2].out == "(S)"

    def test_liaison_does_not_leak_into_later_lookups(self):
        transform_text("six amis")
        assert transform_text("six")[-1].out == tk.S

    def test_other_words_untouched(self):
        """Only six and dix take part; 'deux amis' keeps its own trace."""
        trace = transform_text("deux amis")
        assert trace[2].out == "(X)"
        assert trace[2].rule_key == "finalDrop"
