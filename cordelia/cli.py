#!/usr/bin/env python
"""Cordelia — identify chords from notes and estimate keys from chords.

Usage
-----
    # Identify a chord from notes
    cordelia C E G Bb
    cordelia --notes "C,E,G,Bb"

    # Try every note as the root (inversions)
    cordelia --inversions E G C

    # Show every dictionary check, including failures
    cordelia --verbose C E G

    # Estimate the key from chord names
    cordelia --keys C G Am F

    # Batch file: one chord per line, whitespace-separated notes
    cordelia --batch chords.txt
    cordelia --batch chords.txt --keys

Exit codes
----------
    0  — success
    1  — invalid input, missing notes, or unreadable batch file
    2  — batch file processed but one or more lines had errors
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from cordelia.batch import format_batch_line, process_batch, split_lines
from cordelia.config import CordeliaConfig
from cordelia.core import (
    ChordEngineError,
    Note,
    compute_intervals,
    find_matches,
    generate_notes,
    parse_chord_name,
)
from cordelia.formatting import (
    format_identification,
    format_key_estimation,
    format_verbose,
    parse_note_list,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BATCH_ERRORS = 2


class _UsageFormatter(argparse.HelpFormatter):
    """Head the usage block with 'Usage of cordelia:' instead of 'usage: '."""

    def add_usage(self, usage, actions, groups, prefix=None):
        super().add_usage(usage, actions, groups, prefix=f"Usage of {self._prog}:")


class _CordeliaParser(argparse.ArgumentParser):
    """ArgumentParser whose --help goes to stderr, like every other diagnostic."""

    def print_help(self, file=None):
        super().print_help(sys.stderr if file is None else file)


def build_parser() -> argparse.ArgumentParser:
    p = _CordeliaParser(
        prog="cordelia",
        formatter_class=_UsageFormatter,
        description="Identify chords from notes and estimate musical keys.",
        usage=(
            "\n  Identify a chord from notes: %(prog)s [flags] <note1> <note2> ..."
            "\n  Estimate key from chords:    %(prog)s --keys <chord1> <chord2> ..."
            "\n  Batch processing from file:  %(prog)s --batch <file> [flags]"
        ),
    )
    p.add_argument("args", nargs="*", help="Note names, or chord names with --keys")
    p.add_argument(
        "--notes",
        default="",
        help='Comma-separated list of notes (e.g., "C,E,G,Bb").',
    )
    p.add_argument(
        "--inversions",
        action="store_true",
        help="Enable inversion detection by treating each note as a potential root.",
    )
    p.add_argument(
        "--batch",
        default="",
        metavar="FILE",
        help="Path to a file containing multiple chords (one chord per line, notes-based).",
    )
    p.add_argument("--keys", action="store_true", help="Enables key estimation.")
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed matching logic, including failed checks.",
    )
    p.add_argument(
        "--max-keys",
        type=int,
        default=None,
        metavar="N",
        help="Show at most N likely keys (0 = all). Defaults to CORDELIA_MAX_KEYS.",
    )
    return p


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


def run_single_chord(note_strings: list[str], inversions: bool, verbose: bool) -> int:
    """Identify one chord, optionally from every note as root."""
    try:
        notes = parse_note_list(note_strings)
    except ChordEngineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    roots: list[Note] = notes if inversions else notes[:1]
    render = format_verbose if verbose else format_identification
    for root in roots:
        intervals = compute_intervals(root, notes)
        matches = find_matches(intervals, root=root)
        print(render(root, notes, intervals, matches), end="")
    return EXIT_OK


def run_key_estimation_from_chords(chord_names: list[str], max_keys: int) -> int:
    """Expand chord names into notes and rank candidate keys."""
    print(f"Processing Chords: {' '.join(chord_names)}")
    all_notes: list[Note] = []
    for name in chord_names:
        try:
            root, definition = parse_chord_name(name)
        except ChordEngineError as exc:
            print(f"Error: Could not parse chord name '{name}': {exc}", file=sys.stderr)
            return EXIT_ERROR
        all_notes.extend(generate_notes(root, definition.offsets))

    print(format_key_estimation(all_notes, limit=max_keys), end="")
    return EXIT_OK


def run_batch(path: Path, keys: bool, max_keys: int, encoding: str) -> int:
    """Identify every line of a batch file, then optionally estimate the key."""
    try:
        # undecodable bytes become U+FFFD and fail note parsing on their own line
        text = path.read_text(encoding=encoding, errors="replace")
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if not text:
        logger.info("Batch file %s is empty", path)
        return EXIT_OK

    print(f"Processing {path}...")
    report = process_batch(split_lines(text), collect_notes=keys)
    for line in report.lines:
        if line.ok:
            print(format_batch_line(line))
        else:
            print(f"Error on line {line.number}: {line.error}", file=sys.stderr)

    if keys:
        print(format_key_estimation(report.notes, limit=max_keys), end="")

    return EXIT_BATCH_ERRORS if report.has_errors else EXIT_OK


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    try:
        config = CordeliaConfig.from_env()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    logging.basicConfig(level=config.log_level, format="%(levelname)s: %(message)s")

    args = build_parser().parse_args(argv)
    max_keys = config.max_keys if args.max_keys is None else args.max_keys
    if max_keys < 0:
        print("Error: --max-keys must be non-negative", file=sys.stderr)
        return EXIT_ERROR

    if args.batch:
        return run_batch(Path(args.batch), args.keys, max_keys, config.batch_encoding)

    if args.keys:
        if not args.args:
            print("Error: No chord names provided for key estimation.", file=sys.stderr)
            return EXIT_ERROR
        return run_key_estimation_from_chords(args.args, max_keys)

    note_strings: list[str] = args.args
    if args.notes:
        if args.args:
            print(
                "Warning: Both positional arguments and --notes provided; using --notes.",
                file=sys.stderr,
            )
        note_strings = args.notes.split(",")

    if not note_strings:
        print("Error: No notes provided.", file=sys.stderr)
        return EXIT_ERROR

    return run_single_chord(note_strings, args.inversions, args.verbose)


if __name__ == "__main__":
    sys.exit(main())
