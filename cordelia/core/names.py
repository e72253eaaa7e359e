"""
cordelia/core/names.py — Compact chord-name parsing and note generation.

parse_chord_name() splits tokens such as "F#m7", "Bb7" or "Gaug" into a root
Note and a ChordDefinition. The root is matched longest-prefix first: a
two-character root ("F#", "Bb") is tried strictly before a one-character
root, otherwise "F#" would split into root "F" + unknown quality "#".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from cordelia.core.dictionary import lookup_suffix
from cordelia.core.errors import InvalidRootError, UnknownQualityError, UnrecognizedPitchError
from cordelia.core.pitch import parse_pitch
from cordelia.core.types import ChordDefinition, Note

logger = logging.getLogger(__name__)


def _split_root(token: str) -> tuple[Note, str]:
    """Return (root, quality) using longest-prefix root matching."""
    if len(token) >= 2:
        try:
            return parse_pitch(token[:2]), token[2:]
        except UnrecognizedPitchError:
            pass
    try:
        return parse_pitch(token[:1]), token[1:]
    except UnrecognizedPitchError as exc:
        raise InvalidRootError(token) from exc


def parse_chord_name(token: str) -> tuple[Note, ChordDefinition]:
    """Parse a compact chord name into its root and dictionary entry.

    Args:
        token: Chord name, e.g. "C", "Am", "F#m7", "Bb7", "Gaug"

    Returns:
        (root Note, ChordDefinition)

    Raises:
        InvalidRootError:    No pitch spelling at the start of the token
        UnknownQualityError: Root parsed but the suffix is not in the dictionary

    Examples:
        >>> root, chord = parse_chord_name("F#m7")
        >>> root.original, chord.name
        ('F#', 'Minor 7th')
    """
    root, quality = _split_root(token)
    definition = lookup_suffix(quality)
    if definition is None:
        raise UnknownQualityError(token, quality)
    logger.debug("Parsed chord %r as root=%s quality=%r", token, root.original, quality)
    return root, definition


def generate_notes(root: Note, offsets: Iterable[int]) -> list[Note]:
    """Expand a root + offsets into Notes, one per offset.

    Generated notes carry no input spelling, so they display with the
    canonical sharp name (see Note.name).
    """
    return [Note(pitch_class=(root.pitch_class + offset) % 12) for offset in offsets]
