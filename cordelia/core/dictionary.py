"""
cordelia/core/dictionary.py — The fixed chord dictionary.

Order matters only for deterministic iteration: matching results and the
verbose dictionary listing follow it, and suffix lookup returns the first
entry in this order that accepts a quality token.

Exports:
    CHORD_DICTIONARY      ordered tuple of ChordDefinition
    get_dictionary() → tuple[ChordDefinition, ...]
    lookup_suffix(quality) → ChordDefinition | None
"""

from __future__ import annotations

import functools

from cordelia.core.types import ChordDefinition

# ---------------------------------------------------------------------------
# Chord formulas (semitones from root) + compact-name suffixes
# ---------------------------------------------------------------------------

CHORD_DICTIONARY: tuple[ChordDefinition, ...] = (
    # Sevenths
    ChordDefinition("Major 7th", (0, 4, 7, 11), ("maj7", "M7")),
    ChordDefinition("Minor-Major 7th", (0, 3, 7, 11), ("m(maj7)",)),
    ChordDefinition("Minor 7th", (0, 3, 7, 10), ("m7", "min7")),
    ChordDefinition("Dominant 7th", (0, 4, 7, 10), ("7", "dom7")),
    # Triads
    ChordDefinition("Major Triad", (0, 4, 7), ("", "M")),
    ChordDefinition("Minor Triad", (0, 3, 7), ("m", "min")),
    ChordDefinition("Diminished Triad", (0, 3, 6), ("dim",)),
    ChordDefinition("Augmented Triad", (0, 4, 8), ("aug", "+")),
    # Suspended
    ChordDefinition("Sus2", (0, 2, 7), ("sus2",)),
    ChordDefinition("Sus4", (0, 5, 7), ("sus4",)),
)


def get_dictionary() -> tuple[ChordDefinition, ...]:
    """Return the read-only chord dictionary in iteration order."""
    return CHORD_DICTIONARY


@functools.cache
def _suffix_index() -> dict[str, ChordDefinition]:
    """Map each suffix to the first definition (in dictionary order) accepting it."""
    index: dict[str, ChordDefinition] = {}
    for definition in CHORD_DICTIONARY:
        for suffix in definition.suffixes:
            index.setdefault(suffix, definition)
    return index


def lookup_suffix(quality: str) -> ChordDefinition | None:
    """Find the definition whose suffixes contain ``quality`` exactly.

    Matching is case-sensitive ("m7" is Minor 7th, "M7" is Major 7th) and the
    empty string resolves to the Major Triad.
    """
    return _suffix_index().get(quality)
