"""
Tests for cordelia/formatting.py — console text rendering.

Validates:
    - parse_note_list: blank skipping, dedupe, error messages
    - format_match: root prefix, subset flag
    - format_identification / format_verbose exact layout
    - format_key_estimation: aggregated notes, ranking lines, limit, empty input
"""

import pytest

from cordelia.core import (
    ChordEngineError,
    Match,
    UnrecognizedPitchError,
    compute_intervals,
    find_matches,
    generate_notes,
    parse_chord_name,
)
from cordelia.formatting import (
    format_identification,
    format_intervals,
    format_key_estimation,
    format_match,
    format_verbose,
    parse_note_list,
)


def identify(*tokens):
    notes = parse_note_list(tokens)
    root = notes[0]
    intervals = compute_intervals(root, notes)
    return root, notes, intervals, find_matches(intervals, root=root)


# ---------------------------------------------------------------------------
# parse_note_list
# ---------------------------------------------------------------------------


class TestParseNoteList:
    def test_skips_blank_tokens(self):
        notes = parse_note_list(["C", " ", "", " E ", "G"])
        assert [n.original for n in notes] == ["C", "E", "G"]

    def test_dedupes(self):
        notes = parse_note_list(["C", "E", "B#", "G"])
        assert [n.original for n in notes] == ["C", "E", "G"]

    def test_invalid_note_message(self):
        with pytest.raises(UnrecognizedPitchError, match="invalid note 'X' in input"):
            parse_note_list(["C", "X"])

    def test_no_valid_notes(self):
        with pytest.raises(ChordEngineError, match="no valid notes provided"):
            parse_note_list(["", "  "])


# ---------------------------------------------------------------------------
# Identification reports
# ---------------------------------------------------------------------------


class TestFormatIntervals:
    def test_space_separated_in_brackets(self):
        assert format_intervals([0, 4, 7]) == "[0 4 7]"
        assert format_intervals(()) == "[]"


class TestFormatMatch:
    def test_root_and_name(self):
        match = Match(root="C", name="Major Triad", offsets=(0, 4, 7))
        assert format_match("C", match) == "C Major Triad"

    def test_subset_flag(self):
        match = Match(root="C", name="Major Triad", offsets=(0, 4, 7), subset=True)
        assert format_match("C", match) == "C Major Triad (subset)"

    def test_empty_root_renders_name_only(self):
        match = Match(root="", name="Sus4", offsets=(0, 5, 7))
        assert format_match("", match) == "Sus4"

    def test_uses_given_root_spelling(self):
        root, _notes, _intervals, matches = identify("Bb", "D", "F")
        assert format_match(root.name, matches[0]) == "Bb Major Triad"


class TestFormatIdentification:
    def test_major_triad_report(self):
        text = format_identification(*identify("C", "E", "G"))
        assert text == (
            "Input Notes: C E G\n"
            "Root: C\n"
            "Intervals: [0 4 7]\n"
            "Matched Chords:\n"
            " - C Major Triad\n"
            "\n"
        )

    def test_subset_flag_rendered(self):
        text = format_identification(*identify("C", "E", "G", "Bb"))
        assert " - C Dominant 7th\n - C Major Triad (subset)\n" in text

    def test_no_match(self):
        text = format_identification(*identify("C", "C#", "D"))
        assert "Matched Chords:\n - None\n" in text


class TestFormatVerbose:
    def test_lists_every_dictionary_entry(self):
        text = format_verbose(*identify("C", "E", "G"))
        assert "Input Intervals: [0 4 7]\n---\nChecking Dictionary...\n" in text
        assert "✅ Match: Major Triad [0 4 7]" in text
        assert "❌ No Match: Major 7th [0 4 7 11] (requires 4 intervals, input has 3)" in text
        assert "❌ No Match: Minor Triad [0 3 7] (missing interval 3)" in text
        assert "❌ No Match: Sus4 [0 5 7] (missing interval 5)" in text
        assert text.count("Match:") == 10

    def test_ends_with_matched_block(self):
        text = format_verbose(*identify("C", "E", "G"))
        assert text.endswith("---\nMatched Chords:\n - C Major Triad\n\n")


# ---------------------------------------------------------------------------
# Key estimation report
# ---------------------------------------------------------------------------


def _progression_notes(*names):
    notes = []
    for name in names:
        root, definition = parse_chord_name(name)
        notes.extend(generate_notes(root, definition.offsets))
    return notes


class TestFormatKeyEstimation:
    def test_layout(self):
        text = format_key_estimation(_progression_notes("C", "G", "Am"))
        assert text.startswith(
            "---\n"
            "Key Estimation Results\n"
            "Aggregated Notes: C D E G A B\n"
            "\n"
            "Likely Keys:\n"
            " A Minor (6 matches)\n"
            " C Major (6 matches)\n"
        )

    def test_aggregated_notes_sorted_by_pitch_class(self):
        notes = parse_note_list(["G", "Bb", "C"])
        assert "Aggregated Notes: C G Bb\n" in format_key_estimation(notes)

    def test_limit(self):
        text = format_key_estimation(_progression_notes("C", "G", "Am"), limit=2)
        assert text.count("matches)") == 2

    def test_no_notes(self):
        text = format_key_estimation([])
        assert text.endswith("Could not determine likely keys.\n")
