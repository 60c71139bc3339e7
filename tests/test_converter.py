import pytest

from guitar_tab import (
    UnboundChord,
    UnknownChordTypeError,
    from_name,
    pychord_quality_to_chord_type,
)


class TestQualityMapping:
    def test_major(self):
        assert pychord_quality_to_chord_type("") == "major"

    def test_minor(self):
        assert pychord_quality_to_chord_type("m") == "minor"

    def test_minor_seventh(self):
        assert pychord_quality_to_chord_type("m7") == "minor_seventh"

    def test_maj7(self):
        assert pychord_quality_to_chord_type("maj7") == "major_seventh"

    def test_dom7(self):
        assert pychord_quality_to_chord_type("7") == "dominant_seventh"

    def test_dim7(self):
        assert pychord_quality_to_chord_type("dim7") == "diminished_seventh"

    def test_half_diminished(self):
        assert pychord_quality_to_chord_type("m7-5") == "half_diminished_seventh"

    def test_unknown_quality_raises(self):
        with pytest.raises(UnknownChordTypeError, match="Unknown pychord quality"):
            pychord_quality_to_chord_type("unknown_quality")


class TestFromName:
    def test_simple_major(self):
        assert from_name("C") == UnboundChord.for_type("C", "major")

    def test_minor_seventh(self):
        chord = from_name("Gm7")
        assert chord == UnboundChord.for_type("G", "minor_seventh")
        assert chord.notes_string() == "G A# D F"

    def test_flat_root(self):
        assert from_name("Bbm7").notes_string() == "Bb Db F Ab"

    def test_sharp_root(self):
        assert from_name("F#dim7").notes_string() == "F# A C D#"

    def test_slash_chord(self):
        chord = from_name("C/E")
        assert chord.intervals == (-8, 7)
        assert chord.equivalent(from_name("C"))

    def test_slash_chord_sharp_bass(self):
        chord = from_name("G/B")
        assert chord == UnboundChord.for_type("G", "major", substitute_root="B")

    def test_invalid_name_raises(self):
        with pytest.raises(UnknownChordTypeError, match="Unrecognized chord name"):
            from_name("Xyz")


class TestAddedTones:
    def test_minor_added_ninth(self):
        assert pychord_quality_to_chord_type("madd9") == "minor_added_ninth"
        assert from_name("Cmadd9").notes_string() == "C D# G D"

    def test_added_eleventh(self):
        assert pychord_quality_to_chord_type("add11") == "added_eleventh"
        assert from_name("Cadd11").notes_string() == "C E G F"
