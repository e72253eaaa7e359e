"""
cordelia/core/types.py — Frozen value objects for the chord engine.

All types are immutable frozen dataclasses — safe to hash, share between
threads, and use as dict keys. No I/O, no side effects, stdlib only.

Types:
    Note             — a parsed (or generated) pitch with its input spelling
    ChordDefinition  — a named chord formula + accepted name suffixes
    KeySignature     — a named diatonic scale as a set of pitch classes
    Match            — a dictionary entry matched against an interval set
    KeyMatch         — a key signature ranked by pitch-class overlap
    CheckResult      — pass/fail of one definition against an interval set
"""

from __future__ import annotations

from dataclasses import dataclass

#: Canonical sharp spelling per pitch class, used when no input spelling exists
SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Note:
    """A single pitch class with the spelling it was entered as.

    Attributes:
        pitch_class: 0 (C) through 11 (B)
        original:    Input spelling, e.g. "Db", "c#". Empty for notes produced
                     by interval expansion.
    """

    pitch_class: int
    original: str = ""

    def __post_init__(self) -> None:
        if not (0 <= self.pitch_class <= 11):
            raise ValueError(f"Note.pitch_class must be in [0, 11], got {self.pitch_class}")

    @property
    def name(self) -> str:
        """Display spelling: the original input, or the sharp spelling if generated."""
        return self.original or SHARP_NAMES[self.pitch_class]


# ---------------------------------------------------------------------------
# ChordDefinition
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChordDefinition:
    """A chord quality expressed as semitone offsets from its root.

    Attributes:
        name:     Display name, e.g. "Minor 7th"
        offsets:  Ascending, deduplicated offsets including 0, e.g. (0, 3, 7, 10)
        suffixes: Quality tokens accepted in compact chord names, e.g. ("m7", "min7").
                  The empty string is a valid suffix (bare major triad).
    """

    name: str
    offsets: tuple[int, ...]
    suffixes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ChordDefinition.name must not be empty")
        if not self.offsets or self.offsets[0] != 0:
            raise ValueError(f"ChordDefinition.offsets must start at 0, got {self.offsets}")
        if list(self.offsets) != sorted(set(self.offsets)):
            raise ValueError(
                f"ChordDefinition.offsets must be ascending and unique, got {self.offsets}"
            )
        for offset in self.offsets:
            if not (0 <= offset <= 11):
                raise ValueError(f"Chord offset {offset} out of range [0, 11]")

    @property
    def size(self) -> int:
        """Number of distinct pitch classes the formula requires."""
        return len(self.offsets)


# ---------------------------------------------------------------------------
# KeySignature
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeySignature:
    """A major or natural-minor key: display name + its 7 pitch classes."""

    name: str
    pitch_classes: frozenset[int]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("KeySignature.name must not be empty")
        if len(self.pitch_classes) != 7:
            raise ValueError(
                f"KeySignature.pitch_classes must hold 7 classes, got {len(self.pitch_classes)}"
            )

    def overlap(self, pitch_classes: frozenset[int] | set[int]) -> int:
        """Count how many of the given pitch classes fall inside this key."""
        return len(self.pitch_classes & pitch_classes)


# ---------------------------------------------------------------------------
# Match / KeyMatch / CheckResult
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Match:
    """A chord definition that matched an interval set.

    Attributes:
        root:    Spelling of the root the intervals were measured from ("" if unknown)
        name:    Matched ChordDefinition name, e.g. "Major Triad"
        offsets: The matched definition's offsets
        subset:  True when the input had more distinct notes than the formula
    """

    root: str
    name: str
    offsets: tuple[int, ...]
    subset: bool = False

    @property
    def size(self) -> int:
        return len(self.offsets)


@dataclass(frozen=True)
class KeyMatch:
    """A key signature and how many input pitch classes it contains."""

    name: str
    match_count: int

    def __post_init__(self) -> None:
        if self.match_count < 0:
            raise ValueError(f"KeyMatch.match_count must be >= 0, got {self.match_count}")


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one ChordDefinition against an interval set.

    ``reason`` is empty on a match and explains the first failed requirement
    otherwise, e.g. "missing interval 4".
    """

    matched: bool
    reason: str = ""
