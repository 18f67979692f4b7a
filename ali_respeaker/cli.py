"""Command-line interface for Ali Respeaker.

WHY: Teachers and learners want a respelling without starting the web
UI: paste a line, get the English-letter and Arabic-script readings. The
CLI also exposes the reference material (letter names, operational
rules, self-check words) and the rule lookup behind the UI tooltips.

HOW: Uses argparse. The text comes from the positional argument or, when
absent, from stdin. Rendering defaults come from config (ALI_* variables)
and can be overridden per call. Results go to stdout; status and errors
go to stderr.

RULES:
- Positional: text to respell (optional; stdin when omitted)
- --locale en | ar | both (default from ALI_DEFAULT_LOCALE)
- --separator hyphen | middot | space | none, --show-silent
- --json prints the wire-format trace instead of plain lines
- --rule WORD, --letters, --operational-rules, --examples, --self-check,
  --notes are alternative modes; the first one given wins in that order
- Invalid configuration or options: "Error: ..." on stderr, exit code 1
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from ali_respeaker.config import configure_logging, load_render_options, parse_log_level
from ali_respeaker.core.ir import SEPARATOR_KINDS, RenderOptions
from ali_respeaker.core.matching import collect_rule_notes, match_rule_for_display
from ali_respeaker.core.reference import EXAMPLES, LETTERS, OPERATIONAL_RULES, SMOKE_TESTS
from ali_respeaker.core.segmenter import transform_text
from ali_respeaker.core.wire import trace_to_wire
from ali_respeaker.renderers import RENDERERS, render

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    RULES:
    - All status messages go to stderr
    - Always flush after writing
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _locales(choice: str) -> List[str]:
    if choice == "both":
        return list(RENDERERS)
    return [choice]


def _resolve_options(args: argparse.Namespace, defaults: RenderOptions) -> RenderOptions:
    """Merge command-line flags over the configured defaults."""
    locale = args.locale or defaults.locale
    return RenderOptions(
        separator=args.separator or defaults.separator,
        locale="en" if locale == "both" else locale,
        show_silent=args.show_silent or defaults.show_silent,
    )


def _print_respelling(text: str, args: argparse.Namespace, options: RenderOptions) -> None:
    trace = transform_text(text)
    locales = _locales(args.locale or options.locale)

    if args.json:
        payload = {"text": text, "trace": trace_to_wire(trace)}
        for locale in locales:
            payload[locale] = render(
                trace,
                RenderOptions(options.separator, locale, options.show_silent),
            )
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for locale in locales:
        print(render(trace, RenderOptions(options.separator, locale, options.show_silent)))


def _print_rule(word: str) -> None:
    rule = match_rule_for_display(word)
    if rule is None:
        _fail("No rule matches '{}'".format(word))
        return
    print("{} [{}] {}".format(rule.key, rule.category.value, rule.label))
    print(rule.explanation)


def _print_notes(text: str) -> None:
    notes = collect_rule_notes(text)
    if not notes:
        _status("No table rules fired.")
        return
    for note in notes:
        print("{} x{}: {} ({})".format(
            note.rule.label, note.count, note.rule.explanation, ", ".join(note.examples)
        ))


def _print_letters() -> None:
    for letter in LETTERS:
        line = "{}  {:<12} {}".format(letter.ch, letter.name_ipa, letter.ali)
        if letter.alt:
            line += " ({})".format(letter.alt)
        if letter.note:
            line += "  {}".format(letter.note)
        print(line)


def _print_self_check(options: RenderOptions, locales: List[str]) -> None:
    for word in SMOKE_TESTS:
        trace = transform_text(word)
        rendered = [
            render(trace, RenderOptions(options.separator, locale, options.show_silent))
            for locale in locales
        ]
        print("{:<10} {}".format(word, "  ".join(rendered)))


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if sys.stdin.isatty():
        _status("Reading French text from stdin (Ctrl-D to finish)...")
    return sys.stdin.read().strip()


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="ali_respeaker",
        description="Respell French text for learners: English-letter respelling "
                    "and approximate Arabic-script transliteration, with rule traces.",
    )

    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="French text to respell. Read from stdin when omitted.",
    )

    parser.add_argument(
        "--separator",
        choices=SEPARATOR_KINDS,
        default=None,
        help="Separator between sounds of a word (default: ALI_DEFAULT_SEPARATOR or hyphen).",
    )

    parser.add_argument(
        "--locale",
        choices=("en", "ar", "both"),
        default=None,
        help="Output script (default: ALI_DEFAULT_LOCALE or en).",
    )

    parser.add_argument(
        "--show-silent",
        action="store_true",
        help="Show silent letters struck through instead of dropping them.",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print renderings and the wire-format trace as JSON.",
    )

    parser.add_argument(
        "--rule",
        metavar="WORD",
        default=None,
        help="Show the rule that best describes WORD.",
    )

    parser.add_argument(
        "--notes",
        action="store_true",
        help="List the rules that fire for the text, with example words.",
    )

    parser.add_argument(
        "--letters",
        action="store_true",
        help="Print the French letter names.",
    )

    parser.add_argument(
        "--operational-rules",
        action="store_true",
        help="Print the short list of high-yield pronunciation heuristics.",
    )

    parser.add_argument(
        "--examples",
        action="store_true",
        help="Print the built-in example sentences.",
    )

    parser.add_argument(
        "--self-check",
        action="store_true",
        help="Respell the built-in self-check word list.",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log rule decisions (DEBUG) to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        level = logging.DEBUG if args.verbose else parse_log_level()
        defaults = load_render_options()
        options = _resolve_options(args, defaults)
    except ValueError as e:
        _fail(str(e))
        return
    configure_logging(level)

    if args.rule is not None:
        _print_rule(args.rule)
    elif args.letters:
        _print_letters()
    elif args.operational_rules:
        for rule in OPERATIONAL_RULES:
            print("- {}".format(rule))
    elif args.examples:
        for example in EXAMPLES:
            print("{}: {}".format(example.label, example.text))
    elif args.self_check:
        _print_self_check(options, _locales(args.locale or defaults.locale))
    elif args.notes:
        _print_notes(_read_text(args))
    else:
        text = _read_text(args)
        if not text:
            _fail("No text given. Pass it as an argument or on stdin.")
            return
        logger.debug("Respelling %d character(s)", len(text))
        _print_respelling(text, args, options)


if __name__ == "__main__":
    main()
