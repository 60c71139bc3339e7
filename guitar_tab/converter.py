"""Chord name to ``UnboundChord`` conversion.

Chord names such as ``"Gm7"`` or ``"C/E"`` are parsed with pychord, whose
quality name is then mapped onto the chord type vocabulary of
``guitar_tab.music.chord``.
"""

from __future__ import annotations

from guitar_tab.errors import UnknownChordTypeError
from guitar_tab.music.chord import UnboundChord

# Mapping from pychord quality names to chord types
PYCHORD_TO_CHORD_TYPE: dict[str, str] = {
    "": "major",
    "maj": "major",
    "m": "minor",
    "min": "minor",
    "5": "fifth",
    "dim": "diminished",
    "aug": "augmented",
    "+": "augmented",
    "sus2": "suspended_second",
    "sus4": "suspended_fourth",
    "sus": "suspended_fourth",
    "6": "major_sixth",
    "m6": "minor_sixth",
    "7": "dominant_seventh",
    "maj7": "major_seventh",
    "M7": "major_seventh",
    "m7": "minor_seventh",
    "dim7": "diminished_seventh",
    "aug7": "augmented_seventh",
    "7+5": "augmented_seventh",
    "7#5": "augmented_seventh",
    "7sus4": "dominant_seventh_suspended_fourth",
    "m7-5": "half_diminished_seventh",
    "m7b5": "half_diminished_seventh",
    "mmaj7": "minor_major_seventh",
    "mM7": "minor_major_seventh",
    "add9": "added_ninth",
    "madd9": "minor_added_ninth",
    "add11": "added_eleventh",
    "9": "ninth",
    "m9": "minor_ninth",
    "maj9": "major_ninth",
    "M9": "major_ninth",
    "11": "eleventh",
    "m11": "minor_eleventh",
    "maj11": "major_eleventh",
    "13": "thirteenth",
    "m13": "minor_thirteenth",
    "maj13": "major_thirteenth",
}


def pychord_quality_to_chord_type(pychord_quality: str) -> str:
    """Convert a pychord quality string to a chord type.

    Parameters
    ----------
    pychord_quality : str
        The pychord quality (e.g., "m7", "maj7", "dim").

    Returns
    -------
    str
        The chord type key (e.g., "minor_seventh", "major_seventh").

    Raises
    ------
    UnknownChordTypeError
        If the quality has no chord type.

    Examples
    --------
    >>> pychord_quality_to_chord_type("m7")
    'minor_seventh'
    >>> pychord_quality_to_chord_type("")
    'major'
    """
    if pychord_quality in PYCHORD_TO_CHORD_TYPE:
        return PYCHORD_TO_CHORD_TYPE[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise UnknownChordTypeError(msg)


def from_name(chord_str: str) -> UnboundChord:
    """Parse a chord name into an ``UnboundChord``.

    Parameters
    ----------
    chord_str : str
        Chord name (e.g., "Gm7", "C", "F#dim7/A").

    Returns
    -------
    UnboundChord
        The chord, with any slash bass moved below the root.

    Raises
    ------
    UnknownChordTypeError
        If pychord cannot read the name or its quality has no chord type.

    Examples
    --------
    >>> from_name("Gm7").notes_string()
    'G A# D F'
    >>> from_name("C/E").intervals
    (-8, 7)
    """
    from pychord import Chord as PyChord

    try:
        pc = PyChord(chord_str)
    except ValueError as e:
        msg = f"Unrecognized chord name: {chord_str}"
        raise UnknownChordTypeError(msg) from e

    chord_type = pychord_quality_to_chord_type(str(pc.quality))
    return UnboundChord.for_type(pc.root, chord_type, substitute_root=pc.on or None)
