"""
identify_chord tool — name the chord(s) formed by a set of notes.

Pure computation: no I/O.
Given a list of note names, returns:
  - The deduplicated input notes (original spellings kept)
  - For the first note (or every note with inversions=True):
      root-relative intervals and every dictionary chord they contain
"""

from typing import Any

from cordelia.core import Match, compute_intervals, find_matches, render
from cordelia.formatting import format_match, parse_note_list
from cordelia.tools.base import MusicalTool, ToolParameter, ToolResult, split_tokens


def match_to_dict(match: Match) -> dict[str, Any]:
    return {
        "name": match.name,
        "offsets": list(match.offsets),
        "subset": match.subset,
        "label": format_match(match.root, match),
    }


class IdentifyChord(MusicalTool):
    """
    Identify chords from note names by subset matching.

    Extra non-chord tones are tolerated: C E G Bb matches both
    "Dominant 7th" and "Major Triad" (flagged as subset).
    """

    @property
    def name(self) -> str:
        return "identify_chord"

    @property
    def description(self) -> str:
        return (
            "Identify the chord formed by a set of note names. "
            "Returns intervals from the root and every matching chord quality "
            "(seventh chords, triads, suspended chords). "
            "Set inversions=true to test every note as a potential root."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="notes",
                type=str,
                description="Comma- or space-separated note names, e.g. 'C,E,G,Bb'.",
            ),
            ToolParameter(
                name="inversions",
                type=bool,
                description="Treat each note as a potential root. Default: false.",
                required=False,
                default=False,
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        notes = parse_note_list(split_tokens(kwargs["notes"]))
        inversions: bool = kwargs["inversions"]

        roots = notes if inversions else notes[:1]
        analyses = []
        for root in roots:
            intervals = compute_intervals(root, notes)
            matches = find_matches(intervals, root=root)
            analyses.append(
                {
                    "root": root.name,
                    "intervals": intervals,
                    "matches": [match_to_dict(m) for m in matches],
                }
            )

        return ToolResult(
            success=True,
            data={
                "notes": render(notes),
                "roots": analyses,
            },
            metadata={
                "note_count": len(notes),
                "match_count": sum(len(a["matches"]) for a in analyses),
            },
        )
