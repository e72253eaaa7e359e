"""
Tests for cordelia/cli.py — command-line modes and exit codes.

Validates:
    - Single-chord mode (positional notes, --notes, --inversions, --verbose)
    - Key estimation from chord names (--keys), --max-keys
    - Batch mode: output, per-line errors (exit 2), missing file, empty file,
      undecodable bytes, unknown encoding, CRLF line endings
    - --help prints "Usage of cordelia:" to stderr and exits 0
"""

from pathlib import Path

import pytest

from cordelia.cli import EXIT_BATCH_ERRORS, EXIT_ERROR, EXIT_OK, main


# ---------------------------------------------------------------------------
# Single chord
# ---------------------------------------------------------------------------


class TestSingleChord:
    def test_no_notes(self, capsys):
        assert main([]) == EXIT_ERROR
        assert "Error: No notes provided." in capsys.readouterr().err

    def test_standard_output(self, capsys):
        assert main(["C", "E", "G"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Matched Chords:\n - C Major Triad" in out
        assert "Intervals: [0 4 7]" in out

    def test_notes_flag(self, capsys):
        assert main(["--notes", "A,C,E,G"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Input Notes: A C E G" in out
        assert " - A Minor 7th\n - A Minor Triad (subset)" in out

    def test_notes_flag_overrides_positional(self, capsys):
        assert main(["--notes", "D,F#,A", "C", "E", "G"]) == EXIT_OK
        captured = capsys.readouterr()
        assert "using --notes" in captured.err
        assert "D Major Triad" in captured.out

    def test_invalid_note(self, capsys):
        assert main(["C", "H", "G"]) == EXIT_ERROR
        assert "Error: invalid note 'H' in input" in capsys.readouterr().err

    def test_only_blank_notes(self, capsys):
        assert main(["--notes", ",,"]) == EXIT_ERROR
        assert "no valid notes provided" in capsys.readouterr().err

    def test_inversions_try_every_root(self, capsys):
        assert main(["--inversions", "E", "G", "C"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.count("Root:") == 3
        assert "Root: C\nIntervals: [0 4 7]\nMatched Chords:\n - C Major Triad" in out

    def test_verbose(self, capsys):
        assert main(["--verbose", "C", "E", "G"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Checking Dictionary..." in out
        assert "❌ No Match: Minor Triad [0 3 7] (missing interval 3)" in out


# ---------------------------------------------------------------------------
# Key estimation from chord names
# ---------------------------------------------------------------------------


class TestKeysFromChords:
    def test_ranks_keys(self, capsys):
        assert main(["--keys", "C", "G", "Am"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Processing Chords: C G Am" in out
        assert "C Major (6 matches)" in out

    def test_no_chords(self, capsys):
        assert main(["--keys"]) == EXIT_ERROR
        assert "Error: No chord names provided for key estimation." in capsys.readouterr().err

    def test_bad_chord_name(self, capsys):
        assert main(["--keys", "C", "Cmaj9"]) == EXIT_ERROR
        err = capsys.readouterr().err
        assert "Could not parse chord name 'Cmaj9'" in err
        assert "maj9" in err

    def test_max_keys_flag(self, capsys):
        assert main(["--keys", "--max-keys", "1", "C", "G", "Am"]) == EXIT_OK
        out = capsys.readouterr().out
        assert out.count("matches)") == 1

    def test_max_keys_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("CORDELIA_MAX_KEYS", "2")
        assert main(["--keys", "C", "G", "Am"]) == EXIT_OK
        assert capsys.readouterr().out.count("matches)") == 2

    def test_bad_env_config(self, capsys, monkeypatch):
        monkeypatch.setenv("CORDELIA_MAX_KEYS", "many")
        assert main(["C", "E", "G"]) == EXIT_ERROR
        assert "CORDELIA_MAX_KEYS" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Batch mode
# ---------------------------------------------------------------------------


@pytest.fixture()
def batch_file(tmp_path: Path) -> Path:
    path = tmp_path / "chords.txt"
    path.write_text("C E G\nA C E G\nD F# A C\n", encoding="utf-8")
    return path


class TestBatch:
    def test_identifies_each_line(self, capsys, batch_file):
        assert main(["--batch", str(batch_file)]) == EXIT_OK
        out = capsys.readouterr().out
        assert f"Processing {batch_file}..." in out
        assert "[1] C E G -> C Major Triad" in out
        assert "[2] A C E G -> A Minor 7th, A Minor Triad (subset)" in out
        assert "[3] D F# A C -> D Dominant 7th, D Major Triad (subset)" in out
        assert "Key Estimation Results" not in out

    def test_with_keys(self, capsys, batch_file):
        assert main(["--batch", str(batch_file), "--keys"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Aggregated Notes: C D E F# G A" in out
        assert "Likely Keys:\n E Minor (6 matches)\n G Major (6 matches)" in out

    def test_line_errors_exit_2(self, capsys, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("C E G\n\nC X\n", encoding="utf-8")
        assert main(["--batch", str(path)]) == EXIT_BATCH_ERRORS
        captured = capsys.readouterr()
        assert "[1] C E G -> C Major Triad" in captured.out
        assert "Error on line 2: No notes provided" in captured.err
        assert "Error on line 3: invalid note 'X' in input" in captured.err

    def test_missing_file(self, capsys, tmp_path):
        missing = tmp_path / "nope.txt"
        assert main(["--batch", str(missing)]) == EXIT_ERROR
        assert f"Error: File not found: {missing}" in capsys.readouterr().err

    def test_undecodable_bytes_are_line_errors(self, capsys, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"C E G\n\xff\xfe G\nA C E\n")
        assert main(["--batch", str(path)]) == EXIT_BATCH_ERRORS
        captured = capsys.readouterr()
        assert "[1] C E G -> C Major Triad" in captured.out
        assert "[3] A C E -> A Minor Triad" in captured.out
        assert "Error on line 2: invalid note" in captured.err

    def test_unknown_encoding_exits_1(self, capsys, monkeypatch, batch_file):
        monkeypatch.setenv("CORDELIA_BATCH_ENCODING", "no-such-codec")
        assert main(["--batch", str(batch_file)]) == EXIT_ERROR
        assert "no-such-codec" in capsys.readouterr().err

    def test_crlf_file(self, capsys, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"C E G\r\nA C E\r\n")
        assert main(["--batch", str(path)]) == EXIT_OK
        out = capsys.readouterr().out
        assert "[2] A C E -> A Minor Triad" in out
        assert "[3]" not in out

    def test_empty_file(self, capsys, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert main(["--batch", str(path), "--keys"]) == EXIT_OK
        assert capsys.readouterr().out == ""


# ---------------------------------------------------------------------------
# Help
# ---------------------------------------------------------------------------


class TestHelp:
    def test_help_goes_to_stderr_and_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Usage of cordelia:\n")
        assert "Estimate key from chords:    cordelia --keys" in captured.err
        assert "--batch FILE" in captured.err

    def test_bad_flag_exits_2_with_usage(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-keys", "lots"])
        assert exc_info.value.code == 2
        assert "Usage of cordelia:" in capsys.readouterr().err
