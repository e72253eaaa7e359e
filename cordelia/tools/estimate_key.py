"""
estimate_key tool — rank likely keys from chord names and/or notes.

Chord names ("C G Am F") are expanded to their notes first; loose note
names are added as-is. The combined pitch classes are scored against the
24 major / natural-minor keys.
"""

from typing import Any

from cordelia.core import Note, dedupe, estimate, generate_notes, parse_chord_name, render
from cordelia.formatting import parse_note_list
from cordelia.tools.base import MusicalTool, ToolParameter, ToolResult, split_tokens


class EstimateKey(MusicalTool):
    """Estimate the key of a progression by scale overlap."""

    @property
    def name(self) -> str:
        return "estimate_key"

    @property
    def description(self) -> str:
        return (
            "Estimate the most likely musical key from chord names "
            "(e.g. 'C G Am F') and/or note names. Returns every major and "
            "natural-minor key containing at least one input pitch class, "
            "ranked by match count, ties ordered alphabetically."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="chords",
                type=str,
                description="Space- or comma-separated chord names, e.g. 'C G Am F'.",
                required=False,
                default="",
            ),
            ToolParameter(
                name="notes",
                type=str,
                description="Space- or comma-separated note names, e.g. 'C D E'.",
                required=False,
                default="",
            ),
            ToolParameter(
                name="limit",
                type=int,
                description="Return at most this many keys. 0 returns the full ranking.",
                required=False,
                default=0,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        chord_tokens = split_tokens(kwargs["chords"])
        note_tokens = split_tokens(kwargs["notes"])
        limit: int = kwargs["limit"]

        if not chord_tokens and not note_tokens:
            return ToolResult(success=False, error="Provide at least one chord or note.")
        if limit < 0:
            return ToolResult(success=False, error=f"limit must be >= 0, got {limit}")

        all_notes: list[Note] = []
        for token in chord_tokens:
            root, definition = parse_chord_name(token)
            all_notes.extend(generate_notes(root, definition.offsets))
        if note_tokens:
            all_notes.extend(parse_note_list(note_tokens))

        unique = sorted(dedupe(all_notes), key=lambda n: n.pitch_class)
        ranked = estimate(unique)
        total = len(ranked)
        if limit:
            ranked = ranked[:limit]

        return ToolResult(
            success=True,
            data={
                "aggregated_notes": render(unique),
                "keys": [{"name": km.name, "matches": km.match_count} for km in ranked],
            },
            metadata={
                "chord_count": len(chord_tokens),
                "candidate_count": total,
            },
        )
