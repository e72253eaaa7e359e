"""
cordelia/core/keys.py — Key estimation by scale overlap.

estimate() ranks the 24 major / natural-minor keys by how many distinct
input pitch classes each one contains.

Key naming follows a fixed convention: major keys use flat spellings
("Db Major", "Bb Major") and minor keys use sharp spellings ("C# Minor",
"A# Minor"). The asymmetry is deliberate and pinned by tests.

Exports:
    MAJOR_PATTERN, MINOR_PATTERN    diatonic scale formulas
    build_key_signatures() → tuple[KeySignature, ...]
    estimate(notes) → list[KeyMatch]
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable

from cordelia.core.pitch import dedupe
from cordelia.core.types import SHARP_NAMES, KeyMatch, KeySignature, Note

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Scale formulas + naming tables
# ---------------------------------------------------------------------------

MAJOR_PATTERN: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
MINOR_PATTERN: tuple[int, ...] = (0, 2, 3, 5, 7, 8, 10)

# Major keys are named with flats, minor keys with sharps.
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")


def _scale(root_pc: int, pattern: tuple[int, ...]) -> frozenset[int]:
    return frozenset((root_pc + interval) % 12 for interval in pattern)


@functools.cache
def build_key_signatures() -> tuple[KeySignature, ...]:
    """Build the 24 key signatures, major then minor for each root C..B.

    Cached: every call returns the same immutable tuple.
    """
    keys: list[KeySignature] = []
    for root_pc in range(12):
        keys.append(KeySignature(f"{FLAT_NAMES[root_pc]} Major", _scale(root_pc, MAJOR_PATTERN)))
        keys.append(KeySignature(f"{SHARP_NAMES[root_pc]} Minor", _scale(root_pc, MINOR_PATTERN)))
    return tuple(keys)


def estimate(notes: Iterable[Note]) -> list[KeyMatch]:
    """Rank keys by how many distinct input pitch classes they contain.

    Args:
        notes: Any notes; duplicates by pitch class are collapsed first

    Returns:
        KeyMatch list sorted by match count descending, then key name
        ascending. Keys with zero matches are dropped; nothing is truncated.

    Examples:
        >>> ranked = estimate(parse_pitch(n) for n in "C D E F G A".split())
        >>> [km.name for km in ranked if km.match_count == 6]
        ['A Minor', 'C Major', 'D Minor', 'F Major']
    """
    pitch_classes = frozenset(note.pitch_class for note in dedupe(notes))
    if not pitch_classes:
        return []

    matches = [
        KeyMatch(name=key.name, match_count=count)
        for key in build_key_signatures()
        if (count := key.overlap(pitch_classes)) > 0
    ]
    matches.sort(key=lambda m: (-m.match_count, m.name))
    logger.debug(
        "Estimated %d candidate key(s) from %d pitch class(es)", len(matches), len(pitch_classes)
    )
    return matches
