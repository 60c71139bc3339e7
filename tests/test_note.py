"""Tests for pitch-class notes and intervals."""

import pytest

from guitar_tab import UnboundNote, UnknownNoteError
from guitar_tab.music.intervals import Interval, invert, positive_inversion


class TestNoteConstruction:
    """Test building notes from symbols."""

    @pytest.mark.parametrize(
        ("symbol", "semitones"),
        [("C", 0), ("C#", 1), ("Db", 1), ("E", 4), ("F", 5), ("Ab", 8), ("A", 9), ("Bb", 10), ("B", 11)],
    )
    def test_semitones_above_c(self, symbol: str, semitones: int) -> None:
        """Test each spelling maps to its pitch class."""
        assert UnboundNote(symbol).semitones_above_c == semitones

    @pytest.mark.parametrize("symbol", ["H", "c", "Cb", "E#", "C##", ""])
    def test_unknown_symbol_raises(self, symbol: str) -> None:
        """Test unrecognized spellings are rejected."""
        with pytest.raises(UnknownNoteError, match="Unknown note"):
            UnboundNote(symbol)

    def test_from_symbol_passes_notes_through(self) -> None:
        """Test from_symbol accepts an existing note."""
        note = UnboundNote("F#")
        assert UnboundNote.from_symbol(note) is note
        assert UnboundNote.from_symbol("F#") == note


class TestNoteComparison:
    """Test equality and ordering."""

    def test_enharmonic_equality(self) -> None:
        """Test spelling does not affect equality."""
        assert UnboundNote("C#") == UnboundNote("Db")
        assert UnboundNote("C#") != UnboundNote("D")

    def test_hash_follows_equality(self) -> None:
        """Test enharmonic notes collapse in a set."""
        assert len({UnboundNote("C#"), UnboundNote("Db"), UnboundNote("D")}) == 2

    def test_ordering_by_semitones(self) -> None:
        """Test notes sort by pitch class."""
        notes = [UnboundNote("B"), UnboundNote("C"), UnboundNote("Eb"), UnboundNote("D#")]
        assert [n.semitones_above_c for n in sorted(notes)] == [0, 3, 3, 11]
        assert UnboundNote("C") < UnboundNote("C#") <= UnboundNote("Db")

    def test_not_equal_to_string(self) -> None:
        """Test a note never equals its symbol string."""
        assert UnboundNote("C") != "C"

    def test_ordering_against_other_types_raises(self) -> None:
        """Test ordering is only defined between notes."""
        with pytest.raises(TypeError):
            UnboundNote("C") < 3


class TestApplyInterval:
    """Test shifting notes by semitones."""

    @pytest.mark.parametrize(
        ("symbol", "semitones", "expected"),
        [
            ("C", 4, "E"),
            ("C", 3, "D#"),
            ("F#", 4, "A#"),
            ("B", 1, "C"),
            ("A", 3, "C"),
            ("C", -8, "E"),
            ("C", 14, "D"),
        ],
    )
    def test_sharp_spelling(self, symbol: str, semitones: int, expected: str) -> None:
        """Test sharp or natural notes produce sharp spellings."""
        assert UnboundNote(symbol).apply_interval(semitones).symbol == expected

    @pytest.mark.parametrize(
        ("symbol", "semitones", "expected"),
        [("Bb", 3, "Db"), ("Eb", 4, "G"), ("Ab", 10, "Gb"), ("Db", -1, "C")],
    )
    def test_flat_spelling(self, symbol: str, semitones: int, expected: str) -> None:
        """Test flat notes produce flat spellings."""
        assert UnboundNote(symbol).apply_interval(semitones).symbol == expected

    def test_named_interval(self) -> None:
        """Test Interval members work as semitone counts."""
        assert UnboundNote("G").apply_interval(Interval.PERFECT_FIFTH).symbol == "D"


class TestIntervals:
    """Test interval helpers."""

    def test_named_values(self) -> None:
        """Test a sample of the interval table."""
        assert Interval.MINOR_THIRD == 3
        assert Interval.DIMINISHED_FIFTH == 6
        assert Interval.DIMINISHED_SEVENTH == Interval.MAJOR_SIXTH == 9
        assert Interval.OCTAVE + Interval.MAJOR_SECOND == 14

    @pytest.mark.parametrize(("semitones", "expected"), [(0, 0), (4, 4), (14, 2), (-8, 4), (12, 0)])
    def test_positive_inversion(self, semitones: int, expected: int) -> None:
        """Test reduction to 0-11."""
        assert positive_inversion(semitones) == expected

    def test_invert_round_trip(self) -> None:
        """Test inverting twice restores the interval."""
        assert invert(4) == -8
        assert invert(-8) == 4
        assert invert(0) == -12
