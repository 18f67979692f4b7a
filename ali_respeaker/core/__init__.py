"""Core transliteration modules.

WHY: The core package holds everything that decides how French is
pronounced: the token vocabulary, the rule table, the exception
dictionary, the rewrite engine and the segmenter. Renderers, the CLI and
the HTTP API only consume its traces.

HOW: tokens.py and ir.py define the data, patterns.py and rules.py the
ordered rewrite table, lexicon.py the irregular words, engine.py and
finals.py transform a single word, segmenter.py a whole text.
matching.py, reference.py and wire.py serve the outer layers.

RULES:
- No I/O except wire.py loading its JSON schema
- Static tables are never mutated after import
- Rule keys are persisted in saved traces; never rename one
- Only wire.py imports the renderers, to fill saved-word respellings
"""
