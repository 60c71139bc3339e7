"""Pitch classes independent of octave.

An ``UnboundNote`` is one of the twelve pitch classes, identified by its
offset in semitones above C. Its spelling (``"C#"`` vs ``"Db"``) is kept so
derived notes can be spelled the same way, but it does not affect equality.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field

from guitar_tab.errors import UnknownNoteError
from guitar_tab.music.intervals import SEMITONES_PER_OCTAVE

# Note symbol to semitones above C
NOTES_TO_SEMITONES: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
}

SEMITONES_TO_FLAT_NOTES: dict[int, str] = {
    semitones: symbol for symbol, semitones in NOTES_TO_SEMITONES.items() if "#" not in symbol
}
SEMITONES_TO_SHARP_NOTES: dict[int, str] = {
    semitones: symbol for symbol, semitones in NOTES_TO_SEMITONES.items() if not symbol.endswith("b")
}


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class UnboundNote:
    """A pitch class with a preferred spelling.

    Parameters
    ----------
    symbol : str
        Letter A-G, optionally followed by ``#`` or ``b``.

    Raises
    ------
    UnknownNoteError
        If ``symbol`` is not a recognized spelling.

    Examples
    --------
    >>> UnboundNote("C#") == UnboundNote("Db")
    True
    >>> UnboundNote("Bb").semitones_above_c
    10
    """

    symbol: str
    semitones_above_c: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.symbol not in NOTES_TO_SEMITONES:
            msg = f"Unknown note: {self.symbol!r}"
            raise UnknownNoteError(msg)
        object.__setattr__(self, "semitones_above_c", NOTES_TO_SEMITONES[self.symbol])

    @classmethod
    def from_symbol(cls, symbol: str | UnboundNote) -> UnboundNote:
        """Build a note from its symbol, passing notes through unchanged."""
        if isinstance(symbol, cls):
            return symbol
        return cls(str(symbol))

    @property
    def is_flat(self) -> bool:
        """Whether the note is spelled with a flat."""
        return self.symbol.endswith("b")

    def apply_interval(self, semitones: int) -> UnboundNote:
        """Return the note ``semitones`` above (or below, if negative) this one.

        The result is spelled with flats if this note is, sharps otherwise.

        Examples
        --------
        >>> UnboundNote("C").apply_interval(3).symbol
        'D#'
        >>> UnboundNote("Eb").apply_interval(-8).symbol
        'G'
        """
        result = (self.semitones_above_c + int(semitones)) % SEMITONES_PER_OCTAVE
        table = SEMITONES_TO_FLAT_NOTES if self.is_flat else SEMITONES_TO_SHARP_NOTES
        return type(self)(table[result])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnboundNote):
            return NotImplemented
        return self.semitones_above_c == other.semitones_above_c

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UnboundNote):
            return NotImplemented
        return self.semitones_above_c < other.semitones_above_c

    def __hash__(self) -> int:
        return hash(self.semitones_above_c)

    def __str__(self) -> str:
        return self.symbol
