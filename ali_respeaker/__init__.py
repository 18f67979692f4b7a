"""Ali Respeaker: explainable French pronunciation respelling.

WHY: Learners who do not read IPA still need to know how a French word
sounds, and why. This package turns French text into an English-letter
respelling and an approximate Arabic-script transliteration, and keeps a
per-fragment trace of which rule produced which sound.

HOW: Four-stage pipeline: segment (core.segmenter), rewrite one word
(core.engine, with the exception dictionary and final-position
post-processing), trace (core.ir), render (pluggable renderers). The CLI
and the HTTP API are thin layers over the same calls.

RULES:
- The core is pure and total: any string in, a trace out
- All renderers consume the same TokenTrace list
- Adding an output script = one new renderer module, no core changes
"""

__version__ = "0.1.0"
