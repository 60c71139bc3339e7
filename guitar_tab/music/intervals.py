"""Named intervals measured in semitones.

The chord vocabulary is written in terms of these names; chords store
plain integers so that inverted (negative) and compound (> octave)
intervals need no special type.
"""

from enum import IntEnum

SEMITONES_PER_OCTAVE = 12


class Interval(IntEnum):
    """Semitone size of the named simple intervals."""

    UNISON = 0
    MINOR_SECOND = 1
    MAJOR_SECOND = 2
    MINOR_THIRD = 3
    MAJOR_THIRD = 4
    PERFECT_FOURTH = 5
    AUGMENTED_FOURTH = 6
    DIMINISHED_FIFTH = 6
    PERFECT_FIFTH = 7
    AUGMENTED_FIFTH = 8
    MINOR_SIXTH = 8
    MAJOR_SIXTH = 9
    DIMINISHED_SEVENTH = 9
    MINOR_SEVENTH = 10
    MAJOR_SEVENTH = 11
    OCTAVE = 12


def positive_inversion(semitones: int) -> int:
    """Reduce an interval to its smallest non-negative size (0-11).

    Examples
    --------
    >>> positive_inversion(-8)
    4
    >>> positive_inversion(14)
    2
    """
    return semitones % SEMITONES_PER_OCTAVE


def invert(semitones: int) -> int:
    """Move an interval to the other side of the root.

    A tone ``x`` semitones above the root sits ``x - 12`` semitones from it
    once moved below, and vice versa.

    Examples
    --------
    >>> invert(4)
    -8
    >>> invert(-8)
    4
    """
    if semitones >= 0:
        return semitones - SEMITONES_PER_OCTAVE
    return semitones + SEMITONES_PER_OCTAVE
