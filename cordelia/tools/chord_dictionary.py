"""
list_chord_dictionary tool — expose the fixed chord dictionary.

Without notes: every definition with its offsets and accepted suffixes.
With notes: each entry also reports whether it matches the intervals
measured from the first note, and why not when it fails.
"""

from typing import Any

from cordelia.core import check, compute_intervals, get_dictionary
from cordelia.formatting import parse_note_list
from cordelia.tools.base import MusicalTool, ToolParameter, ToolResult, split_tokens


class ListChordDictionary(MusicalTool):
    """List dictionary entries, optionally checked against a note set."""

    @property
    def name(self) -> str:
        return "list_chord_dictionary"

    @property
    def description(self) -> str:
        return (
            "List every chord quality Cordelia recognises, with semitone offsets "
            "and accepted name suffixes. Pass notes to see which entries match "
            "and the reason each non-matching entry fails."
        )

    @property
    def parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="notes",
                type=str,
                description="Optional note names to check each entry against.",
                required=False,
                default="",
            ),
        ]

    def execute(self, **kwargs: Any) -> ToolResult:
        tokens = split_tokens(kwargs["notes"])
        intervals: list[int] | None = None
        if tokens:
            notes = parse_note_list(tokens)
            intervals = compute_intervals(notes[0], notes)

        entries = []
        for definition in get_dictionary():
            entry: dict[str, Any] = {
                "name": definition.name,
                "offsets": list(definition.offsets),
                "suffixes": list(definition.suffixes),
            }
            if intervals is not None:
                result = check(definition, intervals)
                entry["matched"] = result.matched
                entry["reason"] = result.reason
            entries.append(entry)

        return ToolResult(
            success=True,
            data={"intervals": intervals, "chords": entries},
            metadata={"entry_count": len(entries)},
        )
