"""
five_words.py

Finds every set of five five-letter words that together use 25 distinct
letters.

Usage:
    five_words.py WORD_FILE [-dup] [-incremental] [-workers N]
                  [-chunk-size N] [-progress {bar,log,off}]

Results go to stdout as a list with one JSON array of word groups per line.
Anagrams share a group. Progress and run statistics go to stderr.

Modes:
-incremental: print each combination as soon as it is found (unordered).
    By default the full listing is printed once, sorted, at the end.
-dup: also accept words with a repeated letter.
"""

import argparse

from fivewords.pairs import DEFAULT_CHUNK_SIZE
from fivewords.report import make_reporter
from fivewords.search import PROGRESS_MODES, run_search
from fivewords.words import build_mask_index, load_word_list


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Search a word list for five words covering 25 distinct letters."
    )
    parser.add_argument(
        "word_file",
        help="Newline-separated word list.",
    )
    parser.add_argument(
        "-dup",
        action="store_true",
        help="Allow words with repeated letters.",
    )
    parser.add_argument(
        "-incremental",
        action="store_true",
        help="Print combinations as they are found instead of one final listing.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Outer indices per worker task (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument(
        "-progress",
        choices=PROGRESS_MODES,
        default="bar",
        help="Progress output style on stderr (default: bar).",
    )
    args = parser.parse_args(argv)

    if args.workers is not None and args.workers < 1:
        parser.error("-workers must be at least 1")
    if args.chunk_size < 1:
        parser.error("-chunk-size must be at least 1")
    return args


def main(argv=None):
    args = parse_args(argv)

    try:
        lines = load_word_list(args.word_file)
    except OSError as exc:
        raise SystemExit(f"cannot read word list {args.word_file}: {exc}") from exc

    index = build_mask_index(lines, allow_duplicate_letters=args.dup)
    reporter = make_reporter(index, incremental=args.incremental)
    run_search(
        index,
        reporter=reporter,
        workers=args.workers,
        chunk_size=args.chunk_size,
        progress=args.progress,
    )


if __name__ == "__main__":
    main()
