"""Chord and note algebra, independent of instrument or octave."""

from guitar_tab.music.chord import CHORD_INTERVALS, UnboundChord
from guitar_tab.music.intervals import Interval, invert, positive_inversion
from guitar_tab.music.note import UnboundNote

__all__ = [
    "CHORD_INTERVALS",
    "Interval",
    "UnboundChord",
    "UnboundNote",
    "invert",
    "positive_inversion",
]
