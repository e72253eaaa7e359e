"""
cordelia/api/schemas/chords.py — Pydantic request/response schemas.

Covers:
    /chords/identify    — IdentifyRequest / IdentifyResponse
    /chords/parse       — ParseChordRequest / ParseChordResponse
    /chords/dictionary  — DictionaryResponse
    /keys/estimate      — EstimateKeyRequest / EstimateKeyResponse
"""

from pydantic import BaseModel, Field, model_validator

# ---------------------------------------------------------------------------
# Shared sub-schemas
# ---------------------------------------------------------------------------


class NoteOut(BaseModel):
    """A single note: pitch class plus display spelling."""

    pitch_class: int = Field(..., ge=0, le=11)
    name: str


class ChordDefinitionOut(BaseModel):
    """One chord dictionary entry."""

    name: str
    offsets: list[int]
    suffixes: list[str]


class MatchOut(BaseModel):
    """A matched chord quality."""

    name: str
    offsets: list[int]
    subset: bool
    label: str


class RootAnalysisOut(BaseModel):
    """Intervals and matches measured from one root."""

    root: str
    intervals: list[int]
    matches: list[MatchOut]


class KeyMatchOut(BaseModel):
    """A ranked key candidate."""

    name: str
    matches: int = Field(..., ge=1)


# ---------------------------------------------------------------------------
# /chords/identify
# ---------------------------------------------------------------------------


class IdentifyRequest(BaseModel):
    """POST /chords/identify request body."""

    notes: list[str] = Field(..., min_length=1, description="Note names, e.g. ['C', 'E', 'G']")
    inversions: bool = False


class IdentifyResponse(BaseModel):
    """POST /chords/identify response body."""

    notes: list[NoteOut]
    roots: list[RootAnalysisOut]


# ---------------------------------------------------------------------------
# /chords/parse
# ---------------------------------------------------------------------------


class ParseChordRequest(BaseModel):
    """POST /chords/parse request body."""

    name: str = Field(..., description="Compact chord name, e.g. 'F#m7'")


class ParseChordResponse(BaseModel):
    """POST /chords/parse response body."""

    root: NoteOut
    chord: ChordDefinitionOut
    notes: list[NoteOut]


# ---------------------------------------------------------------------------
# /chords/dictionary
# ---------------------------------------------------------------------------


class DictionaryResponse(BaseModel):
    """GET /chords/dictionary response body."""

    chords: list[ChordDefinitionOut]


# ---------------------------------------------------------------------------
# /keys/estimate
# ---------------------------------------------------------------------------


class EstimateKeyRequest(BaseModel):
    """POST /keys/estimate request body. At least one chord or note is required."""

    chords: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
    limit: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _require_input(self) -> "EstimateKeyRequest":
        if not self.chords and not self.notes:
            raise ValueError("Provide at least one chord or note")
        return self


class EstimateKeyResponse(BaseModel):
    """POST /keys/estimate response body."""

    aggregated_notes: list[NoteOut]
    keys: list[KeyMatchOut]
