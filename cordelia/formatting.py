"""
cordelia/formatting.py — Text rendering of engine results for the console.

Pure string builders: nothing here prints. The CLI and batch runner decide
where the text goes.

Exports:
    parse_note_list(tokens) → list[Note]
    format_match(root, match) → str
    format_intervals(values) → str
    format_identification(root, notes, intervals, matches) → str
    format_verbose(root, notes, intervals, matches) → str
    format_key_estimation(notes, limit) → str
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cordelia.core import (
    ChordEngineError,
    Match,
    Note,
    UnrecognizedPitchError,
    check,
    dedupe,
    estimate,
    get_dictionary,
    parse_pitch,
    render,
)


def parse_note_list(tokens: Iterable[str]) -> list[Note]:
    """Parse raw note tokens (argv entries, comma fields, batch words).

    Blank tokens are skipped and the result is deduplicated by pitch class.

    Raises:
        UnrecognizedPitchError: A token is not a note ("invalid note 'X' in input")
        ChordEngineError:       Nothing left after skipping blanks
    """
    notes: list[Note] = []
    for raw in tokens:
        token = raw.strip()
        if not token:
            continue
        try:
            notes.append(parse_pitch(token))
        except UnrecognizedPitchError as exc:
            raise UnrecognizedPitchError(token, f"invalid note '{token}' in input") from exc
    if not notes:
        raise ChordEngineError("no valid notes provided")
    return dedupe(notes)


def format_intervals(values: Iterable[int]) -> str:
    """Render integers as '[0 4 7]'."""
    return "[" + " ".join(str(v) for v in values) + "]"


def format_match(root: str, match: Match) -> str:
    """Render one matched chord, e.g. 'C Major Triad' or 'C Major Triad (subset)'.

    An empty root renders the chord name alone.
    """
    text = f"{root} {match.name}" if root else match.name
    if match.subset:
        text += " (subset)"
    return text


def _matched_block(matches: Sequence[Match]) -> list[str]:
    lines = ["Matched Chords:"]
    if not matches:
        lines.append(" - None")
    else:
        lines.extend(f" - {format_match(m.root, m)}" for m in matches)
    lines.append("")
    return lines


def format_identification(
    root: Note,
    notes: Sequence[Note],
    intervals: Sequence[int],
    matches: Sequence[Match],
) -> str:
    """Standard single-root report, terminated by a blank line."""
    lines = [
        f"Input Notes: {render(notes)}",
        f"Root: {root.name}",
        f"Intervals: {format_intervals(intervals)}",
        *_matched_block(matches),
    ]
    return "\n".join(lines) + "\n"


def format_verbose(
    root: Note,
    notes: Sequence[Note],
    intervals: Sequence[int],
    matches: Sequence[Match],
) -> str:
    """Single-root report listing every dictionary entry with its pass/fail reason."""
    lines = [
        f"Input Notes: {render(notes)}",
        f"Root: {root.name}",
        f"Input Intervals: {format_intervals(intervals)}",
        "---",
        "Checking Dictionary...",
    ]
    for definition in get_dictionary():
        result = check(definition, intervals)
        offsets = format_intervals(definition.offsets)
        if result.matched:
            lines.append(f"✅ Match: {definition.name} {offsets}")
        else:
            lines.append(f"❌ No Match: {definition.name} {offsets} ({result.reason})")
    lines.append("---")
    lines.extend(_matched_block(matches))
    return "\n".join(lines) + "\n"


def format_key_estimation(notes: Iterable[Note], limit: int = 0) -> str:
    """Key-estimation report over aggregated notes.

    Args:
        notes: All notes gathered from chords or batch lines
        limit: Show at most this many keys; 0 shows the full ranking
    """
    unique = sorted(dedupe(notes), key=lambda n: n.pitch_class)
    lines = [
        "---",
        "Key Estimation Results",
        f"Aggregated Notes: {render(unique)}",
        "",
    ]
    ranked = estimate(unique)
    if limit:
        ranked = ranked[:limit]
    if not ranked:
        lines.append("Could not determine likely keys.")
    else:
        lines.append("Likely Keys:")
        lines.extend(f" {km.name} ({km.match_count} matches)" for km in ranked)
    return "\n".join(lines) + "\n"
