"""Guitar tab parsing and chord algebra.

This library provides a PEG parser that turns plain-text guitar tabs into
a document tree, and an octave-free chord and note model for comparing
chords by the pitch classes they contain.

Examples
--------
>>> from guitar_tab import UnboundChord, UnboundNote, from_name, parse

>>> # Parse a tab
>>> document = parse("[Intro]\\nEm Bb Cm\\n")
>>> document.sections[0].header.name
'Intro'

>>> # Build and compare chords
>>> UnboundChord.for_type("C", "major").notes_string()
'C E G'
>>> from_name("C/E").equivalent(UnboundChord.for_type("C", "major"))
True
>>> UnboundNote("C#") == UnboundNote("Db")
True
"""

from guitar_tab.converter import from_name, pychord_quality_to_chord_type
from guitar_tab.errors import (
    DuplicateIntervalError,
    GuitarTabError,
    ParseCause,
    TabParseError,
    UnknownChordTypeError,
    UnknownNoteError,
)
from guitar_tab.music import CHORD_INTERVALS, Interval, UnboundChord, UnboundNote
from guitar_tab.tab_parser import Document, document_to_dict, parse

__all__ = [
    "CHORD_INTERVALS",
    "Document",
    "DuplicateIntervalError",
    "GuitarTabError",
    "Interval",
    "ParseCause",
    "TabParseError",
    "UnboundChord",
    "UnboundNote",
    "UnknownChordTypeError",
    "UnknownNoteError",
    "document_to_dict",
    "from_name",
    "parse",
    "pychord_quality_to_chord_type",
]
