"""
cordelia/core/ — Pure chord-matching and key-estimation engine.

Exports:
    Types:      Note, ChordDefinition, KeySignature, Match, KeyMatch, CheckResult
    Errors:     ChordEngineError, UnrecognizedPitchError, InvalidRootError,
                UnknownQualityError
    Pitch:      parse_pitch, pitch_class_to_name, dedupe, render
    Dictionary: CHORD_DICTIONARY, get_dictionary, lookup_suffix
    Matcher:    compute_intervals, check, find_matches
    Names:      parse_chord_name, generate_notes
    Keys:       build_key_signatures, estimate
"""

from cordelia.core.dictionary import CHORD_DICTIONARY, get_dictionary, lookup_suffix
from cordelia.core.errors import (
    ChordEngineError,
    InvalidRootError,
    UnknownQualityError,
    UnrecognizedPitchError,
)
from cordelia.core.keys import build_key_signatures, estimate
from cordelia.core.matcher import check, compute_intervals, find_matches
from cordelia.core.names import generate_notes, parse_chord_name
from cordelia.core.pitch import dedupe, parse_pitch, pitch_class_to_name, render
from cordelia.core.types import (
    CheckResult,
    ChordDefinition,
    KeyMatch,
    KeySignature,
    Match,
    Note,
)

__all__ = [
    # Types
    "Note",
    "ChordDefinition",
    "KeySignature",
    "Match",
    "KeyMatch",
    "CheckResult",
    # Errors
    "ChordEngineError",
    "UnrecognizedPitchError",
    "InvalidRootError",
    "UnknownQualityError",
    # Pitch
    "parse_pitch",
    "pitch_class_to_name",
    "dedupe",
    "render",
    # Dictionary
    "CHORD_DICTIONARY",
    "get_dictionary",
    "lookup_suffix",
    # Matcher
    "compute_intervals",
    "check",
    "find_matches",
    # Names
    "parse_chord_name",
    "generate_notes",
    # Keys
    "build_key_signatures",
    "estimate",
]
