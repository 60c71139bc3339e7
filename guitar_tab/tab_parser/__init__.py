"""Plain-text guitar tab parser.

This module parses freeform tab sheets (section headers, chord lines,
lyrics, tab staves, chord fingering tables and metadata) into a document
tree using an ordered-choice PEG grammar.
"""

from guitar_tab.tab_parser.export import document_to_dict
from guitar_tab.tab_parser.models import (
    ChordDefinition,
    ChordDefinitionLines,
    ChordingLine,
    ChordLines,
    ChordToken,
    Contents,
    Document,
    FluffLines,
    Header,
    Section,
    TabLines,
    UnrecognizedLines,
)
from guitar_tab.tab_parser.parser import parse

__all__ = [
    "ChordDefinition",
    "ChordDefinitionLines",
    "ChordLines",
    "ChordToken",
    "ChordingLine",
    "Contents",
    "Document",
    "FluffLines",
    "Header",
    "Section",
    "TabLines",
    "UnrecognizedLines",
    "document_to_dict",
    "parse",
]
