"""Conversion of parsed documents to plain mappings and lists.

The output is JSON-serializable and uses the field names callers traverse:
``header_name``, ``header_fluff``, ``chords``, ``lyrics``, ``chord_root``,
``major_minor`` and one contents key per content kind.
"""

from __future__ import annotations

from typing import Any

from guitar_tab.tab_parser.models import (
    ChordDefinitionLines,
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


def chord_to_dict(token: ChordToken) -> dict[str, Any]:
    """Convert a ChordToken to a dict of its markers."""
    return {
        "chord_root": token.chord_root,
        "root_modifier": token.root_modifier,
        "major_minor": token.minor,
        "add": token.add,
        "extension_modifier": token.extension_modifier,
        "extension": token.extension,
        "suspended": token.suspended,
        "suspension": token.suspension,
        "diminished": token.diminished,
        "diminution": token.diminution,
        "augmented": token.augmented,
        "bass": token.bass,
    }


def header_to_dict(header: Header) -> dict[str, str]:
    """Convert a Header to a dict."""
    return {"header_name": header.name, "header_fluff": header.fluff}


def contents_to_dict(contents: Contents) -> dict[str, Any]:
    """Convert a contents block to a single-key dict naming its kind."""
    if isinstance(contents, ChordLines):
        value: list[Any] = [
            {"chords": [{"chord": chord_to_dict(chord)} for chord in line.chords]}
            if line.kind == "chords"
            else {"lyrics": line.text}
            for line in contents.lines
        ]
    elif isinstance(contents, ChordDefinitionLines):
        value = [
            {"chord": chord_to_dict(definition.chord), "frets": definition.frets}
            for definition in contents.definitions
        ]
    elif isinstance(contents, (FluffLines, TabLines, UnrecognizedLines)):
        value = list(contents.lines)
    else:
        msg = f"Unknown contents type: {type(contents).__name__}"
        raise TypeError(msg)
    return {contents.key: value}


def section_to_dict(section: Section) -> dict[str, Any]:
    """Convert a Section to a dict."""
    return {
        "section": {
            "header": header_to_dict(section.header) if section.header else None,
            "contents": contents_to_dict(section.contents) if section.contents else None,
        }
    }


def document_to_dict(document: Document) -> list[dict[str, Any]]:
    """Convert a Document to a JSON-serializable list of sections.

    Examples
    --------
    >>> from guitar_tab.tab_parser import parse
    >>> document_to_dict(parse("[Intro]"))
    [{'section': {'header': {'header_name': 'Intro', 'header_fluff': ''}, 'contents': None}}]
    """
    return [section_to_dict(section) for section in document.sections]
