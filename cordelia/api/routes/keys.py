"""
cordelia/api/routes/keys.py — Key estimation endpoint.

POST /keys/estimate — rank major / natural-minor keys from chord names
and/or note names.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from cordelia.api.routes.chords import note_out
from cordelia.api.schemas.chords import EstimateKeyRequest, EstimateKeyResponse, KeyMatchOut
from cordelia.core import (
    ChordEngineError,
    Note,
    dedupe,
    estimate,
    generate_notes,
    parse_chord_name,
)
from cordelia.formatting import parse_note_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/keys", tags=["keys"])


@router.post("/estimate", response_model=EstimateKeyResponse)
def estimate_key(request: EstimateKeyRequest) -> EstimateKeyResponse:
    """Estimate the key from chords and notes combined.

    Chord names are expanded to their notes; loose notes are added as-is.
    The ranking is returned in full unless ``limit`` is set.

    Raises:
        422: A chord name or note name cannot be parsed.
    """
    all_notes: list[Note] = []
    try:
        for name in request.chords:
            root, definition = parse_chord_name(name.strip())
            all_notes.extend(generate_notes(root, definition.offsets))
        if request.notes:
            all_notes.extend(parse_note_list(request.notes))
    except ChordEngineError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    unique = sorted(dedupe(all_notes), key=lambda n: n.pitch_class)
    ranked = estimate(unique)
    if request.limit is not None:
        ranked = ranked[: request.limit]

    logger.info("Estimated keys from %d pitch class(es)", len(unique))
    return EstimateKeyResponse(
        aggregated_notes=[note_out(n) for n in unique],
        keys=[KeyMatchOut(name=km.name, matches=km.match_count) for km in ranked],
    )
