"""
cordelia/core/pitch.py — Pitch-name parsing and note-collection helpers.

Exports:
    NOTE_TO_PITCH_CLASS   21-entry normalized spelling → pitch class table
    SHARP_NAMES           canonical sharp spelling per pitch class

    parse_pitch(token) → Note
    pitch_class_to_name(pc) → str
    dedupe(notes) → list[Note]
    render(notes) → str
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cordelia.core.errors import UnrecognizedPitchError
from cordelia.core.types import SHARP_NAMES, Note

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Spelling table
# ---------------------------------------------------------------------------

# Keys are normalized: uppercase letter, "#" for sharp, "B" for flat.
# Includes the theoretical spellings B#, Cb, E#, Fb.
NOTE_TO_PITCH_CLASS: dict[str, int] = {
    "C": 0,
    "B#": 0,
    "C#": 1,
    "DB": 1,
    "D": 2,
    "D#": 3,
    "EB": 3,
    "E": 4,
    "FB": 4,
    "F": 5,
    "E#": 5,
    "F#": 6,
    "GB": 6,
    "G": 7,
    "G#": 8,
    "AB": 8,
    "A": 9,
    "A#": 10,
    "BB": 10,
    "B": 11,
    "CB": 11,
}


def _normalize(token: str) -> str:
    """Uppercase the whole token: letter → uppercase, flat marker b → B."""
    return token.upper()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_pitch(token: str) -> Note:
    """Parse a note spelling into a Note.

    Args:
        token: Note name, e.g. "C", "f#", "Bb", "cb"

    Returns:
        Note with the canonical pitch class and ``original=token``

    Raises:
        UnrecognizedPitchError: If the token is empty or not in the spelling table

    Examples:
        >>> parse_pitch("Db")
        Note(pitch_class=1, original='Db')
    """
    if not token:
        raise UnrecognizedPitchError(token, "cannot parse empty string")
    pitch_class = NOTE_TO_PITCH_CLASS.get(_normalize(token))
    if pitch_class is None:
        raise UnrecognizedPitchError(token)
    return Note(pitch_class=pitch_class, original=token)


def pitch_class_to_name(pc: int) -> str:
    """Return the canonical sharp spelling for a pitch class (reduced mod 12)."""
    return SHARP_NAMES[pc % 12]


def dedupe(notes: Iterable[Note]) -> list[Note]:
    """Collapse notes sharing a pitch class, keeping the first spelling seen.

    Relative order of first occurrences is preserved, so the function is
    idempotent: ``dedupe(dedupe(x)) == dedupe(x)``.
    """
    seen: set[int] = set()
    unique: list[Note] = []
    for note in notes:
        if note.pitch_class in seen:
            continue
        seen.add(note.pitch_class)
        unique.append(note)
    return unique


def render(notes: Iterable[Note]) -> str:
    """Join note spellings with single spaces, e.g. 'C E G Bb'."""
    return " ".join(note.name for note in notes)
