"""
cordelia/core/errors.py — Typed failures raised by the chord engine.

Every error subclasses ``ValueError`` so callers that only care about
"bad musical input" can catch the builtin, while hosts that need to tell
the kinds apart (CLI, tools, API) catch the specific class.
"""

from __future__ import annotations


class ChordEngineError(ValueError):
    """Base class for all malformed-input errors raised by cordelia.core."""


class UnrecognizedPitchError(ChordEngineError):
    """Token is not a valid note spelling (empty, unknown letter, double accidental, digit)."""

    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"unrecognized note {token!r}")


class InvalidRootError(ChordEngineError):
    """Chord-name token does not start with any known pitch spelling."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid root note in chord name {token!r}")


class UnknownQualityError(ChordEngineError):
    """Chord-name root parsed, but its suffix matches no dictionary entry."""

    def __init__(self, token: str, quality: str) -> None:
        self.token = token
        self.quality = quality
        super().__init__(f"unknown chord quality: {quality!r}")
