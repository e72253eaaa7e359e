"""
cordelia/batch.py — Line-by-line chord identification.

Batch files hold one chord per line as whitespace-separated note names.
Each line is identified against its first note as the root. A bad line is
recorded as an error and processing continues with the next one; output
order always follows input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from cordelia.core import ChordEngineError, Match, Note, compute_intervals, find_matches
from cordelia.formatting import format_match, parse_note_list

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchLine:
    """Result for one input line.

    Attributes:
        number:  1-based line number
        text:    Stripped line text
        matches: Chords matched from the first note as root
        error:   Error message if the line could not be parsed
    """

    number: int
    text: str
    matches: tuple[Match, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchReport:
    """All line results plus the notes gathered for key estimation."""

    lines: tuple[BatchLine, ...]
    notes: tuple[Note, ...] = field(default_factory=tuple)

    @property
    def has_errors(self) -> bool:
        return any(not line.ok for line in self.lines)


def split_lines(text: str) -> list[str]:
    """Split batch text on LF only, dropping a trailing CR from each line.

    Text ending in a newline has no extra empty line after it, and empty
    text has no lines. Other line breaks such as form feed or U+2028 stay
    inside their line, so line numbers count LF characters.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines[-1] == "":
        lines.pop()
    return lines


def identify_line(number: int, raw: str) -> tuple[BatchLine, list[Note]]:
    """Identify a single batch line. Returns the result and the parsed notes."""
    text = raw.strip()
    if not text:
        return BatchLine(number=number, text=text, error="No notes provided"), []
    try:
        notes = parse_note_list(text.split())
    except ChordEngineError as exc:
        return BatchLine(number=number, text=text, error=str(exc)), []
    root = notes[0]
    matches = find_matches(compute_intervals(root, notes), root=root)
    return BatchLine(number=number, text=text, matches=tuple(matches)), notes


def process_batch(lines: Iterable[str], collect_notes: bool = False) -> BatchReport:
    """Identify every line of a batch input.

    Args:
        lines:         Raw lines (trailing newlines allowed)
        collect_notes: Keep every successfully parsed note for key estimation

    Returns:
        BatchReport with one BatchLine per input line
    """
    results: list[BatchLine] = []
    gathered: list[Note] = []
    for number, raw in enumerate(lines, start=1):
        result, notes = identify_line(number, raw)
        if not result.ok:
            logger.info("Batch line %d rejected: %s", number, result.error)
        results.append(result)
        if collect_notes:
            gathered.extend(notes)
    return BatchReport(lines=tuple(results), notes=tuple(gathered))


def format_batch_line(line: BatchLine) -> str:
    """Render a successful line as '[N] <text> -> <matches>'."""
    if not line.matches:
        return f"[{line.number}] {line.text} -> No match found"
    labels = ", ".join(format_match(m.root, m) for m in line.matches)
    return f"[{line.number}] {line.text} -> {labels}"
