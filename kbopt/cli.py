"""Command line: analyse a keyboard layout against a corpus, or optimise it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .analysis import analyze_hand_usage, analyze_lsbs, analyze_sfbs, analyze_sfss
from .corpus import Corpus, load_corpus
from .layout import LayoutFormatError, SplitLayout, load_layout
from .optimisation import AcceptWorse, optimise
from .textoutput import render_lsbs, render_sfbs, render_sfss

LAYOUTS_DIR = "data/layouts/"
CORPUS_DIR = "data/corpus/"
PINS_DIR = "data/pins/"
BEST_FILE = "best.kb"


class UsageError(Exception):
    """The command line arguments are missing or invalid."""


@dataclass
class Flags:
    """Parsed command line options."""

    show_usage: bool = False
    layout: str = ""
    corpus: str = ""
    optimize: bool = False
    pins: str = ""
    generations: int = 1000
    accept_worse: str = AcceptWorse.DROP_SLOW.value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kbopt", add_help=False)
    parser.add_argument("-h", dest="help", action="store_true", help="show usage")
    parser.add_argument("-l", dest="layout", default="",
                        help="layout file to load (located in data/layouts/)")
    parser.add_argument("-c", dest="corpus", default="",
                        help="corpus file to load (located in data/corpus/)")
    parser.add_argument("-o", dest="optimize", action="store_true",
                        help="optimize the layout (default false).")
    parser.add_argument("-p", dest="pins", default="",
                        help="file containing keys the optimiser cannot move (located in data/pins/)")
    parser.add_argument("-g", dest="generations", type=int, default=1000,
                        help="number of generations (must be above 0)")
    parser.add_argument("-f", dest="accept_worse", default=AcceptWorse.DROP_SLOW.value,
                        help="accept worse function: always, drop-slow, temp, drop-fast, or never")
    return parser


def parse_flags(argv: Sequence[str] | None = None) -> Flags:
    """Parse and validate the command line; raise UsageError when it is unusable."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.help:
        parser.print_help(sys.stderr)
        raise UsageError("please specify flags")

    if not args.layout or not args.corpus:
        raise UsageError(
            "please specify both a layout file using the -l flag "
            "and a corpus file using the -c flag"
        )

    valid = [kind.value for kind in AcceptWorse]
    if args.accept_worse not in valid:
        raise UsageError(
            f"invalid accept worse function: {args.accept_worse}. "
            f"Must be one of: [{' '.join(valid)}]"
        )

    if args.generations <= 0:
        raise UsageError(f"number of generations must be above 0. Got: {args.generations}")

    return Flags(
        layout=args.layout,
        corpus=args.corpus,
        optimize=args.optimize,
        pins=args.pins,
        generations=args.generations,
        accept_worse=args.accept_worse,
    )


def _report(layout: SplitLayout, corpus: Corpus, *, lsbs: bool) -> None:
    print(analyze_hand_usage(layout, corpus))
    print(render_sfbs(analyze_sfbs(layout, corpus)))
    print(render_sfss(analyze_sfss(layout, corpus)))
    if lsbs:
        print(render_lsbs(analyze_lsbs(layout, corpus)))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analyser; returns 0 on success and 1 when something went wrong."""
    try:
        flags = parse_flags(argv)
        corpus = load_corpus(flags.corpus, CORPUS_DIR + flags.corpus)
        layout = load_layout(LAYOUTS_DIR + flags.layout)
    except (UsageError, OSError, LayoutFormatError, UnicodeDecodeError) as exc:
        print(exc)
        return 1

    print(layout)
    if not flags.optimize:
        _report(layout, corpus, lsbs=True)
        return 0

    if flags.pins:
        try:
            layout.load_pins(PINS_DIR + flags.pins)
        except (OSError, LayoutFormatError, UnicodeDecodeError) as exc:
            print(exc)
            return 1

    try:
        best = optimise(layout, corpus, flags.generations, flags.accept_worse)
    except ValueError as exc:
        print(exc)
        return 1
    print(best)
    _report(best, corpus, lsbs=False)

    try:
        best.save(BEST_FILE)
    except OSError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())