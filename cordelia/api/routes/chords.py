"""
cordelia/api/routes/chords.py — Chord identification endpoints.

Endpoints:
    POST /chords/identify    — Name the chord(s) formed by a set of notes
    POST /chords/parse       — Split a chord name into root + quality + notes
    GET  /chords/dictionary  — List the fixed chord dictionary

Thin HTTP boundary over cordelia.core. Engine errors (bad note spelling,
bad chord name) are returned as 422.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from cordelia.api.schemas.chords import (
    ChordDefinitionOut,
    DictionaryResponse,
    IdentifyRequest,
    IdentifyResponse,
    MatchOut,
    NoteOut,
    ParseChordRequest,
    ParseChordResponse,
    RootAnalysisOut,
)
from cordelia.core import (
    ChordDefinition,
    ChordEngineError,
    Note,
    compute_intervals,
    find_matches,
    generate_notes,
    get_dictionary,
    parse_chord_name,
)
from cordelia.formatting import format_match, parse_note_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chords", tags=["chords"])


def note_out(note: Note) -> NoteOut:
    return NoteOut(pitch_class=note.pitch_class, name=note.name)


def definition_out(definition: ChordDefinition) -> ChordDefinitionOut:
    return ChordDefinitionOut(
        name=definition.name,
        offsets=list(definition.offsets),
        suffixes=list(definition.suffixes),
    )


# ---------------------------------------------------------------------------
# POST /chords/identify
# ---------------------------------------------------------------------------


@router.post("/identify", response_model=IdentifyResponse)
def identify_chord(request: IdentifyRequest) -> IdentifyResponse:
    """Identify chords by subset matching against the dictionary.

    Raises:
        422: A note name is not recognised.
    """
    try:
        notes = parse_note_list(request.notes)
    except ChordEngineError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    roots = notes if request.inversions else notes[:1]
    analyses = []
    for root in roots:
        intervals = compute_intervals(root, notes)
        matches = find_matches(intervals, root=root)
        analyses.append(
            RootAnalysisOut(
                root=root.name,
                intervals=intervals,
                matches=[
                    MatchOut(
                        name=m.name,
                        offsets=list(m.offsets),
                        subset=m.subset,
                        label=format_match(m.root, m),
                    )
                    for m in matches
                ],
            )
        )
    logger.info("Identified %d note(s) from %d root(s)", len(notes), len(roots))
    return IdentifyResponse(notes=[note_out(n) for n in notes], roots=analyses)


# ---------------------------------------------------------------------------
# POST /chords/parse
# ---------------------------------------------------------------------------


@router.post("/parse", response_model=ParseChordResponse)
def parse_chord(request: ParseChordRequest) -> ParseChordResponse:
    """Parse a compact chord name and expand it into notes.

    Raises:
        422: Invalid root or unknown quality suffix.
    """
    try:
        root, definition = parse_chord_name(request.name)
    except ChordEngineError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return ParseChordResponse(
        root=note_out(root),
        chord=definition_out(definition),
        notes=[note_out(n) for n in generate_notes(root, definition.offsets)],
    )


# ---------------------------------------------------------------------------
# GET /chords/dictionary
# ---------------------------------------------------------------------------


@router.get("/dictionary", response_model=DictionaryResponse)
def chord_dictionary() -> DictionaryResponse:
    """Return every chord definition in dictionary order."""
    return DictionaryResponse(chords=[definition_out(d) for d in get_dictionary()])
