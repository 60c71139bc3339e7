"""Main tab parser entry point.

This module provides ``parse()``, which normalizes the input and runs the
tab grammar over it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from guitar_tab.errors import TabParseError
from guitar_tab.tab_parser.grammar import FLUFF_KEYWORDS, TabGrammar
from guitar_tab.tab_parser.models import Document

logger = logging.getLogger(__name__)


def preprocess(text: str) -> str:
    """Normalize line endings and terminate the text with a line feed.

    The extra line feed means input without a final newline parses the same
    as input with one.

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    str
        Text using only ``\\n`` line endings, plus one trailing ``\\n``.

    Examples
    --------
    >>> preprocess("[Intro]\\r\\nEm")
    '[Intro]\\nEm\\n'
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return f"{text}\n"


def parse(text: str, *, fluff_keywords: Iterable[str] = FLUFF_KEYWORDS) -> Document:
    """Parse a plain-text tab into a document tree.

    Parameters
    ----------
    text : str
        The raw tab text.
    fluff_keywords : Iterable[str]
        Case-insensitive keywords that start a fluff (metadata) line.

    Returns
    -------
    Document
        The sections of the tab, in order.

    Raises
    ------
    TabParseError
        If the text cannot be read as a sequence of sections. The error
        carries the furthest failure position and a cause tree.

    Examples
    --------
    >>> document = parse("[Intro]\\nEm Bb Cm\\n")
    >>> document.sections[0].header.name
    'Intro'
    >>> [chord.root for chord in document.sections[0].contents.lines[0].chords]
    ['E', 'Bb', 'C']
    """
    normalized = preprocess(text)
    logger.debug("Parsing tab of %d lines", normalized.count("\n"))
    grammar = TabGrammar(normalized, fluff_keywords=fluff_keywords)
    try:
        document = grammar.parse(text)
    except TabParseError as e:
        logger.debug("Tab parse failed at line %d, column %d", e.line, e.column)
        raise
    logger.debug("Parsed %d sections", len(document.sections))
    return document
