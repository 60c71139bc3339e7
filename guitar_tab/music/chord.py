"""Chords as a root plus a set of intervals.

An ``UnboundChord`` is not tied to an octave, instrument or voicing. It is
just a root and the semitone offsets of the other chord tones. Offsets are
kept sorted; a tone moved below the root (as in a slash chord) is stored as
the negative, inverted interval.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from guitar_tab.errors import DuplicateIntervalError, UnknownChordTypeError
from guitar_tab.music.intervals import Interval, invert, positive_inversion
from guitar_tab.music.note import UnboundNote

_I = Interval

CHORD_INTERVALS = MappingProxyType(
    {
        "minor": (_I.MINOR_THIRD, _I.PERFECT_FIFTH),
        "major": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH),
        "fifth": (_I.PERFECT_FIFTH,),
        "diminished": (_I.MINOR_THIRD, _I.DIMINISHED_FIFTH),
        "augmented": (_I.MAJOR_THIRD, _I.AUGMENTED_FIFTH),
        "suspended_second": (_I.MAJOR_SECOND, _I.PERFECT_FIFTH),
        "suspended_fourth": (_I.PERFECT_FOURTH, _I.PERFECT_FIFTH),
        "major_sixth": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SIXTH),
        "minor_sixth": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SIXTH),
        "major_seventh": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SEVENTH),
        "minor_seventh": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH),
        "diminished_seventh": (_I.MINOR_THIRD, _I.DIMINISHED_FIFTH, _I.DIMINISHED_SEVENTH),
        "augmented_seventh": (_I.MAJOR_THIRD, _I.AUGMENTED_FIFTH, _I.MINOR_SEVENTH),
        "dominant_seventh": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH),
        "dominant_seventh_suspended_fourth": (_I.PERFECT_FOURTH, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH),
        "minor_major_seventh": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SEVENTH),
        "half_diminished_seventh": (_I.MINOR_THIRD, _I.DIMINISHED_FIFTH, _I.MINOR_SEVENTH),
        "added_ninth": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.OCTAVE + _I.MAJOR_SECOND),
        "minor_added_ninth": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.OCTAVE + _I.MAJOR_SECOND),
        "added_eleventh": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.OCTAVE + _I.PERFECT_FOURTH),
        "major_ninth": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SEVENTH, _I.OCTAVE + _I.MAJOR_SECOND),
        "minor_ninth": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH, _I.OCTAVE + _I.MAJOR_SECOND),
        "ninth": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH, _I.OCTAVE + _I.MAJOR_SECOND),
        "major_eleventh": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SEVENTH, _I.OCTAVE + _I.PERFECT_FOURTH),
        "minor_eleventh": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH, _I.OCTAVE + _I.PERFECT_FOURTH),
        "eleventh": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH, _I.OCTAVE + _I.PERFECT_FOURTH),
        "major_thirteenth": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MAJOR_SEVENTH, _I.OCTAVE + _I.MAJOR_SIXTH),
        "minor_thirteenth": (_I.MINOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH, _I.OCTAVE + _I.MAJOR_SIXTH),
        "thirteenth": (_I.MAJOR_THIRD, _I.PERFECT_FIFTH, _I.MINOR_SEVENTH, _I.OCTAVE + _I.MAJOR_SIXTH),
    }
)


@dataclass(frozen=True)
class UnboundChord:
    """A root note and the intervals of the remaining chord tones.

    Parameters
    ----------
    root : UnboundNote
        The chord root.
    intervals : tuple[int, ...]
        Semitone offsets from the root. Sorted on construction; negative
        values are tones voiced below the root.

    Raises
    ------
    TypeError
        If ``root`` is not an ``UnboundNote``.
    DuplicateIntervalError
        If ``intervals`` repeats a value.

    Examples
    --------
    >>> chord = UnboundChord.for_type("C", "major")
    >>> chord.intervals
    (4, 7)
    >>> chord.notes_string()
    'C E G'
    """

    root: UnboundNote
    intervals: tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.root, UnboundNote):
            msg = f"Root note of a chord must be an UnboundNote, got {self.root!r}"
            raise TypeError(msg)
        intervals = [int(interval) for interval in self.intervals]
        if len(set(intervals)) != len(intervals):
            msg = f"Can't have duplicate intervals in a chord, got: {intervals}"
            raise DuplicateIntervalError(msg)
        object.__setattr__(self, "intervals", tuple(sorted(intervals)))

    @classmethod
    def for_type(
        cls,
        root: str | UnboundNote,
        chord_type: str,
        substitute_root: str | UnboundNote | None = None,
    ) -> UnboundChord:
        """Build a chord from a root and a named chord type.

        Parameters
        ----------
        root : str | UnboundNote
            The chord root, as a symbol or a note.
        chord_type : str
            A key of ``CHORD_INTERVALS`` (e.g. ``"minor_seventh"``).
        substitute_root : str | UnboundNote | None
            Bass note of a slash chord. The interval up to it is replaced by
            its inversion so that tone sits below the root.

        Returns
        -------
        UnboundChord
            The chord.

        Raises
        ------
        UnknownChordTypeError
            If ``chord_type`` is not in the vocabulary.

        Examples
        --------
        >>> UnboundChord.for_type("C", "major", substitute_root="E").intervals
        (-8, 7)
        """
        if chord_type not in CHORD_INTERVALS:
            msg = f"No chord type of {chord_type!r} known"
            raise UnknownChordTypeError(msg)

        root = UnboundNote.from_symbol(root)
        intervals = [int(interval) for interval in CHORD_INTERVALS[chord_type]]

        if substitute_root is not None:
            substitute_root = UnboundNote.from_symbol(substitute_root)
            positive_interval = positive_inversion(
                substitute_root.semitones_above_c - root.semitones_above_c
            )
            if positive_interval in intervals:
                intervals.remove(positive_interval)
            intervals.append(invert(positive_interval))

        return cls(root, tuple(intervals))

    def notes(self) -> list[UnboundNote]:
        """Return the root followed by each chord tone, lowest interval first."""
        return [self.root, *(self.root.apply_interval(interval) for interval in self.intervals)]

    def notes_string(self) -> str:
        """Return the note symbols joined by spaces."""
        return " ".join(note.symbol for note in self.notes())

    def pitch_classes(self) -> frozenset[int]:
        """Return the set of semitone offsets above C present in the chord."""
        return frozenset(note.semitones_above_c for note in self.notes())

    def equivalent(self, other: UnboundChord | Iterable[str | UnboundNote]) -> bool:
        """Check whether ``other`` sounds the same set of pitch classes.

        Order, octave, inversion and repetition are ignored.

        Parameters
        ----------
        other : UnboundChord | Iterable[str | UnboundNote]
            Anything with a ``notes()`` method, or a sequence of notes or
            note symbols.

        Returns
        -------
        bool
            True if both contain exactly the same pitch classes.

        Examples
        --------
        >>> UnboundChord.for_type("C", "major").equivalent(["G", "E", "C", "G"])
        True
        """
        other_notes = other.notes() if hasattr(other, "notes") else other
        other_classes = frozenset(
            UnboundNote.from_symbol(note).semitones_above_c for note in other_notes
        )
        return self.pitch_classes() == other_classes
