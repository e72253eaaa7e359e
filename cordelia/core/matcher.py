"""
cordelia/core/matcher.py — Interval computation and subset chord matching.

Algorithm:
    1. Measure every input note against a chosen root: (pc - root) mod 12
    2. For each dictionary entry, fast-fail when the input has fewer
       intervals than the formula has offsets
    3. Otherwise require every formula offset to be present in the input
       (extra input intervals are tolerated — subset matching)
    4. Return all passing entries in dictionary order

Design decisions:
    - Matching never raises on musically meaningless input; a set of notes
      that matches nothing simply yields an empty list.
    - ``check`` reports the first failed requirement so hosts can explain
      misses (verbose listings) without re-implementing the rule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from cordelia.core.dictionary import get_dictionary
from cordelia.core.types import CheckResult, ChordDefinition, Match, Note

logger = logging.getLogger(__name__)


def compute_intervals(root: Note, notes: Iterable[Note]) -> list[int]:
    """Return the ascending root-relative intervals (0–11) of ``notes``.

    Args:
        root:  Note the intervals are measured from
        notes: Input notes, normally already deduplicated by pitch class

    Examples:
        >>> c, e, g = parse_pitch("C"), parse_pitch("E"), parse_pitch("G")
        >>> compute_intervals(e, [c, e, g])
        [0, 3, 8]
    """
    return sorted((note.pitch_class - root.pitch_class) % 12 for note in notes)


def check(definition: ChordDefinition, intervals: Sequence[int]) -> CheckResult:
    """Check a single definition against an interval list.

    Args:
        definition: Dictionary entry to test
        intervals:  Root-relative intervals from compute_intervals()

    Returns:
        CheckResult — matched, or not matched with the reason
    """
    if len(intervals) < definition.size:
        return CheckResult(
            matched=False,
            reason=f"requires {definition.size} intervals, input has {len(intervals)}",
        )
    present = frozenset(intervals)
    for required in definition.offsets:
        if required not in present:
            return CheckResult(matched=False, reason=f"missing interval {required}")
    return CheckResult(matched=True)


def find_matches(intervals: Sequence[int], root: Note | None = None) -> list[Match]:
    """Return every dictionary entry whose offsets are all present in ``intervals``.

    Args:
        intervals: Root-relative intervals from compute_intervals()
        root:      Optional root note; its spelling is recorded on each Match

    Returns:
        Matches in dictionary order. A match is flagged ``subset`` when the
        input holds strictly more distinct intervals than the formula.

    Examples:
        >>> [m.name for m in find_matches([0, 4, 7])]
        ['Major Triad']
        >>> [m.name for m in find_matches([0, 4, 7, 10])]
        ['Dominant 7th', 'Major Triad']
    """
    distinct = len(set(intervals))
    root_name = root.name if root is not None else ""
    matches = [
        Match(
            root=root_name,
            name=definition.name,
            offsets=definition.offsets,
            subset=distinct > definition.size,
        )
        for definition in get_dictionary()
        if check(definition, intervals).matched
    ]
    logger.debug("Intervals %s matched %d chord(s)", list(intervals), len(matches))
    return matches
