"""Tests for unbound chords."""

from types import MappingProxyType

import pytest

from guitar_tab import (
    CHORD_INTERVALS,
    DuplicateIntervalError,
    UnboundChord,
    UnboundNote,
    UnknownChordTypeError,
    UnknownNoteError,
)


class TestForType:
    """Test building chords from named chord types."""

    @pytest.mark.parametrize(
        ("root", "chord_type", "expected"),
        [
            ("C", "major", "C E G"),
            ("A", "minor", "A C E"),
            ("Bb", "major", "Bb D F"),
            ("G", "dominant_seventh", "G B D F"),
            ("C", "ninth", "C E G A# D"),
            ("E", "fifth", "E B"),
            ("B", "diminished", "B D F"),
            ("Db", "major_seventh", "Db F Ab C"),
            ("D", "suspended_fourth", "D G A"),
        ],
    )
    def test_notes(self, root: str, chord_type: str, expected: str) -> None:
        """Test derived note spelling for common chords."""
        assert UnboundChord.for_type(root, chord_type).notes_string() == expected

    def test_intervals_are_plain_sorted_ints(self) -> None:
        """Test stored intervals are sorted integers."""
        chord = UnboundChord.for_type("C", "major_thirteenth")
        assert chord.intervals == (4, 7, 11, 21)
        assert all(type(interval) is int for interval in chord.intervals)

    @pytest.mark.parametrize("chord_type", sorted(CHORD_INTERVALS))
    def test_every_chord_type_builds(self, chord_type: str) -> None:
        """Test the whole vocabulary builds valid chords rooted on C."""
        chord = UnboundChord.for_type("C", chord_type)
        assert chord.notes()[0] == UnboundNote("C")
        assert len(chord.notes()) == len(CHORD_INTERVALS[chord_type]) + 1

    def test_unknown_chord_type_raises(self) -> None:
        """Test unknown chord types are rejected."""
        with pytest.raises(UnknownChordTypeError, match="No chord type"):
            UnboundChord.for_type("C", "superlocrian")

    def test_unknown_root_raises(self) -> None:
        """Test unknown root symbols are rejected."""
        with pytest.raises(UnknownNoteError):
            UnboundChord.for_type("H", "major")

    def test_vocabulary_is_read_only(self) -> None:
        """Test the chord vocabulary cannot be modified."""
        assert isinstance(CHORD_INTERVALS, MappingProxyType)
        with pytest.raises(TypeError):
            CHORD_INTERVALS["major"] = ()  # type: ignore[index]


class TestSubstituteRoot:
    """Test slash-chord construction."""

    def test_chord_tone_moves_below_root(self) -> None:
        """Test C/E replaces the major third with its inversion."""
        plain = UnboundChord.for_type("C", "major")
        slash = UnboundChord.for_type("C", "major", substitute_root="E")

        assert slash.intervals == (-8, 7)
        assert slash.notes_string() == "C E G"
        assert slash != plain
        assert slash.equivalent(plain)

    def test_flat_roots(self) -> None:
        """Test interval arithmetic wraps across C."""
        slash = UnboundChord.for_type("Bb", "major", substitute_root="D")
        assert slash.intervals == (-8, 7)
        assert slash.notes_string() == "Bb D F"

    def test_non_chord_tone_is_added(self) -> None:
        """Test a bass note outside the chord is added below the root."""
        slash = UnboundChord.for_type("C", "major", substitute_root="D")
        assert slash.intervals == (-10, 4, 7)
        assert slash.notes_string() == "C D E G"

    def test_substitute_root_as_note(self) -> None:
        """Test the substitute root may be given as a note."""
        slash = UnboundChord.for_type(UnboundNote("G"), "major", substitute_root=UnboundNote("B"))
        assert slash.intervals == (-8, 7)


class TestConstruction:
    """Test direct construction invariants."""

    def test_intervals_sorted(self) -> None:
        """Test intervals are sorted on construction."""
        assert UnboundChord(UnboundNote("C"), (7, 4)).intervals == (4, 7)

    def test_duplicate_interval_raises(self) -> None:
        """Test duplicate intervals are rejected."""
        with pytest.raises(DuplicateIntervalError, match="duplicate"):
            UnboundChord(UnboundNote("C"), (4, 7, 4))

    def test_root_must_be_note(self) -> None:
        """Test a string root is rejected by the constructor."""
        with pytest.raises(TypeError, match="Root note"):
            UnboundChord("C", (4, 7))  # type: ignore[arg-type]


class TestEquality:
    """Test chord equality and equivalence."""

    def test_equal_chords(self) -> None:
        """Test equality compares root and sorted intervals."""
        assert UnboundChord.for_type("C", "major") == UnboundChord(UnboundNote("C"), (7, 4))
        assert UnboundChord.for_type("C#", "major") == UnboundChord.for_type("Db", "major")

    def test_interval_count_matters(self) -> None:
        """Test an extra interval makes chords unequal."""
        assert UnboundChord(UnboundNote("C"), (4, 7)) != UnboundChord(UnboundNote("C"), (4, 7, 11))

    def test_hashable(self) -> None:
        """Test equal chords hash alike."""
        chords = {UnboundChord.for_type("C#", "minor"), UnboundChord.for_type("Db", "minor")}
        assert len(chords) == 1

    def test_equivalent_to_note_sequence(self) -> None:
        """Test equivalence ignores order and repetition."""
        chord = UnboundChord.for_type("C", "major")
        assert chord.equivalent(["G", "E", "C", "G", "C"])
        assert chord.equivalent([UnboundNote("E"), UnboundNote("G"), UnboundNote("C")])
        assert not chord.equivalent(["C", "E"])
        assert not chord.equivalent(["C", "Eb", "G"])

    def test_equivalent_different_roots(self) -> None:
        """Test C6 and Am7 share the same pitch classes."""
        c6 = UnboundChord.for_type("C", "major_sixth")
        am7 = UnboundChord.for_type("A", "minor_seventh")
        assert c6 != am7
        assert c6.equivalent(am7)
        assert am7.equivalent(c6)

    def test_pitch_classes(self) -> None:
        """Test pitch class set of a chord."""
        assert UnboundChord.for_type("C", "major").pitch_classes() == frozenset({0, 4, 7})
