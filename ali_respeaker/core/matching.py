"""Read-only rule lookups for display: rule-for-word and rule notes.

WHY: The rule book and the word tooltips need to answer "which rule is
this word about?" and "which rules does this text exercise?" without
caring about claimed spans or word-final muting.

HOW: match_rule_for_display() scans the lowercased word with every rule
and keeps the longest match. collect_rule_notes() runs the real
transform_text() pipeline and counts the rule keys in the result.

RULES:
- Longest match wins; on a tie the rule earlier in the table wins
- Only RULE_TABLE rules are reported, in table order (post-processing
  keys such as finalDrop are not table rules)
- A rule that splits a match into several entries counts once per match
"""

from __future__ import annotations

from typing import Dict, List, Optional

from ali_respeaker.core.ir import Rule, RuleNote
from ali_respeaker.core.lexicon import normalize_word
from ali_respeaker.core.rules import RULE_TABLE, RULES_BY_KEY
from ali_respeaker.core.segmenter import transform_words


def match_rule_for_display(word: str) -> Optional[Rule]:
    """Return the rule that best describes ``word``, or None."""
    lowered = normalize_word(word)
    best: Optional[Rule] = None
    best_length = 0
    for rule in RULE_TABLE:
        for start, end in rule.pattern.finditer(lowered):
            if end - start > best_length:
                best, best_length = rule, end - start
    return best


def collect_rule_notes(text: str, max_examples: int = 5) -> List[RuleNote]:
    """Summarise which table rules fired while transforming ``text``.

    Args:
        text: Any text.
        max_examples: Maximum number of distinct example words per rule.

    Returns:
        One RuleNote per rule that fired, in table order.
    """
    notes: Dict[str, RuleNote] = {}
    for word, trace in transform_words(text):
        if word is None:
            continue
        for entry in trace:
            rule = RULES_BY_KEY.get(entry.rule_key or "")
            # Only the first piece of a split match counts.
            if rule is None or entry.out != rule.replacement[0]:
                continue
            note = notes.setdefault(rule.key, RuleNote(rule))
            note.count += 1
            example = word.lower()
            if example not in note.examples and len(note.examples) < max_examples:
                note.examples.append(example)
    return [notes[rule.key] for rule in RULE_TABLE if rule.key in notes]
