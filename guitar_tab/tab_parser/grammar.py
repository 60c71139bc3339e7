"""PEG grammar for plain-text guitar tabs.

The grammar is an ordered-choice recursive-descent parser. Every rule takes
a position in the text and returns ``(end, value)`` on success or ``None``
on failure; a failed alternative simply leaves the position where it was,
so backtracking is free. Whenever a terminal fails, the rule path that led
to it is recorded if it is at or beyond the furthest position seen so far,
which gives standard PEG error reporting.

Rule order matters. Section contents are tried as fluff, chord
definitions, chording, tab staff and finally unrecognized lines.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Callable, Iterable
from typing import Any

from guitar_tab.errors import ParseCause, TabParseError
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

# Lines starting with one of these (case-insensitive) are fluff
FLUFF_KEYWORDS: tuple[str, ...] = (
    "tabbed by",
    "transcribed by",
    "capo",
    "tuning",
    "difficulty",
)

# More consecutive dash lines than this are not a tab staff
MAX_STAFF_LINES = 8

CHORD_RE = re.compile(
    r"(?P<chord_root>[A-G])"
    r"(?P<root_modifier>(?<=[ACDFG])#|(?<=[ABDEG])b)?"  # no Cb, Fb, E# or B#
    r"(?P<minor>min|m(?!aj))?"  # "m" that starts "maj" belongs to the extension
    r"(?:(?P<add>add)?(?P<extension_modifier>maj|min)?(?P<extension>13|11|9|7|6|5))?"
    r"(?:(?P<suspended>sus)(?P<suspension>[24])?)?"
    r"(?:(?P<diminished>dim)(?P<diminution>7)?)?"
    r"(?P<augmented>aug)?"
    r"(?:/(?P<bass>[A-G](?:(?<=[ACDFG])#|(?<=[ABDEG])b)?))?"
)

SPACES_RE = re.compile(r"[ \t]*")
SPACES1_RE = re.compile(r"[ \t]+")
EMPTY_LINE_RE = re.compile(r"[ \t]*\n")
HEADER_START_RE = re.compile(r"[ \t]*\[")
HEADER_NAME_RE = re.compile(r"[^\]\n]+")
LINE_CHARS_RE = re.compile(r"[^\n]*")
LINE_CHARS1_RE = re.compile(r"[^\n]+")
TAB_STAFF_LINE_RE = re.compile(r"-+\n")
FRETS_RE = re.compile(r"[0-9xXoO]+(?:-[0-9xXoO]+)*")

Result = tuple[int, Any] | None


def rule(name: str) -> Callable:
    """Name a grammar rule so failures inside it are reported under it."""

    def decorator(method: Callable) -> Callable:
        @functools.wraps(method)
        def wrapper(self: TabGrammar, pos: int, *args: Any) -> Result:
            self._stack.append(name)
            try:
                return method(self, pos, *args)
            finally:
                self._stack.pop()

        return wrapper

    return decorator


class TabGrammar:
    """Parser state for one input text.

    Parameters
    ----------
    text : str
        Normalized input: ``\\n`` line endings, ending in a line feed.
    fluff_keywords : Iterable[str]
        Keywords that introduce a fluff line.
    """

    def __init__(self, text: str, fluff_keywords: Iterable[str] = FLUFF_KEYWORDS) -> None:
        self.text = text
        # An empty keyword list must match nothing rather than everything
        keywords = "|".join(re.escape(keyword) for keyword in fluff_keywords) or "(?!)"
        self._fluff_re = re.compile(rf"[ \t]*(?:{keywords})[^\n]*", re.IGNORECASE)
        self._stack: list[str] = []
        self._furthest = 0
        self._expected: list[tuple[tuple[str, ...], str]] = []

    # Failure bookkeeping

    def _fail(self, pos: int, expected: str) -> None:
        if pos > self._furthest:
            self._furthest = pos
            self._expected = []
        if pos == self._furthest:
            entry = (tuple(self._stack), expected)
            if entry not in self._expected:
                self._expected.append(entry)
        return None

    def _location(self, pos: int) -> tuple[int, int]:
        line = self.text.count("\n", 0, pos) + 1
        column = pos - (self.text.rfind("\n", 0, pos) + 1) + 1
        return line, column

    def _got(self, pos: int) -> str:
        if pos >= len(self.text):
            return "end of input"
        return repr(LINE_CHARS_RE.match(self.text, pos).group()[:20] or "\n")

    def failure(self) -> TabParseError:
        """Build the error describing the furthest failure."""
        pos = self._furthest
        line, column = self._location(pos)

        tree: dict = {}
        for path, expected in self._expected:
            node = tree
            for name in path:
                node = node.setdefault(name, {})
            node.setdefault(None, []).append(expected)

        def build(name: str, node: dict) -> ParseCause:
            children = [build(child, sub) for child, sub in node.items() if child is not None]
            children.extend(
                ParseCause(
                    f"expected {expected} at line {line}, column {column}, got {self._got(pos)}",
                    pos,
                    line,
                    column,
                )
                for expected in node.get(None, [])
            )
            return ParseCause(name, pos, line, column, tuple(children))

        root = build(f"No alternative matched at line {line}, column {column}", tree)
        return TabParseError(root)

    # Terminals

    def _match(self, pos: int, pattern: re.Pattern, expected: str) -> Result:
        match = pattern.match(self.text, pos)
        if match is None:
            return self._fail(pos, expected)
        return match.end(), match

    def _check(self, pos: int, pattern: re.Pattern) -> bool:
        """Lookahead without recording a failure."""
        return pattern.match(self.text, pos) is not None

    # Lexical layer

    @rule("eol")
    def eol(self, pos: int) -> Result:
        if self.text.startswith("\n", pos):
            return pos + 1, "\n"
        return self._fail(pos, "line feed")

    @rule("empty_line")
    def empty_line(self, pos: int) -> Result:
        return self._match(pos, EMPTY_LINE_RE, "empty line")

    def empty_lines(self, pos: int, minimum: int = 0) -> Result:
        count = 0
        while (result := self.empty_line(pos)) is not None:
            pos = result[0]
            count += 1
        if count < minimum:
            return None
        return pos, count

    def _header_start(self, pos: int) -> bool:
        return self._check(pos, HEADER_START_RE)

    # Chords

    @rule("chord")
    def chord(self, pos: int) -> Result:
        result = self._match(pos, CHORD_RE, "chord root (A-G)")
        if result is None:
            return None
        end, match = result
        return end, ChordToken(text=match.group(), **match.groupdict())

    @rule("chord_line")
    def chord_line(self, pos: int) -> Result:
        start = pos
        pos = SPACES_RE.match(self.text, pos).end()
        result = self.chord(pos)
        if result is None:
            return None
        pos, token = result
        chords = [token]
        while True:
            spaced = self._match(pos, SPACES1_RE, "space")
            if spaced is None:
                break
            result = self.chord(spaced[0])
            if result is None:
                break
            pos, token = result
            chords.append(token)
        pos = SPACES_RE.match(self.text, pos).end()
        result = self.eol(pos)
        if result is None:
            return None
        text = self.text[start : result[0] - 1]
        return result[0], ChordingLine(kind="chords", text=text, chords=tuple(chords))

    # Content lines

    @rule("fluff_line")
    def fluff_line(self, pos: int) -> Result:
        result = self._match(pos, self._fluff_re, "fluff keyword")
        if result is None:
            return None
        end, match = result
        result = self.eol(end)
        if result is None:
            return None
        return result[0], match.group()

    @rule("lyric_line")
    def lyric_line(self, pos: int) -> Result:
        if self._header_start(pos):
            return self._fail(pos, "line not starting with '['")
        if self._check(pos, EMPTY_LINE_RE):
            return self._fail(pos, "non-empty line")
        if self._check(pos, TAB_STAFF_LINE_RE):
            return self._fail(pos, "line that is not a tab staff")
        result = self._match(pos, LINE_CHARS1_RE, "lyrics")
        if result is None:
            return None
        end, match = result
        result = self.eol(end)
        if result is None:
            return None
        return result[0], ChordingLine(kind="lyrics", text=match.group())

    @rule("tab_staff_line")
    def tab_staff_line(self, pos: int) -> Result:
        result = self._match(pos, TAB_STAFF_LINE_RE, "'-'")
        if result is None:
            return None
        end, match = result
        return end, match.group()[:-1]

    @rule("chord_definition_line")
    def chord_definition_line(self, pos: int) -> Result:
        pos = SPACES_RE.match(self.text, pos).end()
        result = self.chord(pos)
        if result is None:
            return None
        pos, token = result
        result = self._match(pos, SPACES1_RE, "space")
        if result is None:
            return None
        result = self._match(result[0], FRETS_RE, "fret pattern")
        if result is None:
            return None
        pos, frets = result
        pos = SPACES_RE.match(self.text, pos).end()
        result = self.eol(pos)
        if result is None:
            return None
        return result[0], ChordDefinition(chord=token, frets=frets.group())

    # Lyric lines already take any other non-blank line, so in practice this
    # only catches runs of more than MAX_STAFF_LINES dash lines and what follows them
    @rule("unrecognized_line")
    def unrecognized_line(self, pos: int) -> Result:
        if self._header_start(pos):
            return self._fail(pos, "line not starting with '['")
        if self._check(pos, EMPTY_LINE_RE):
            return self._fail(pos, "non-empty line")
        result = self._match(pos, LINE_CHARS1_RE, "any text")
        if result is None:
            return None
        end, match = result
        result = self.eol(end)
        if result is None:
            return None
        return result[0], match.group()

    # Content blocks

    def _separated(self, pos: int, line_rules: tuple[Callable, ...]) -> Result:
        """One or more lines, optionally separated by blank lines.

        Blank lines are consumed only when another line follows them, so
        trailing blank lines are left to the enclosing section.
        """
        items = []
        first = self._first_of(pos, line_rules)
        if first is None:
            return None
        pos, item = first
        items.append(item)
        while True:
            after_blanks = self.empty_lines(pos)[0]
            result = self._first_of(after_blanks, line_rules)
            if result is None:
                break
            pos, item = result
            items.append(item)
        return pos, items

    def _first_of(self, pos: int, alternatives: Iterable[Callable]) -> Result:
        for alternative in alternatives:
            result = alternative(pos)
            if result is not None:
                return result
        return None

    @rule("fluff")
    def fluff(self, pos: int) -> Result:
        lines = []
        while (result := self.fluff_line(pos)) is not None:
            pos, line = result
            lines.append(line)
        if not lines:
            return None
        return pos, FluffLines(lines=tuple(lines))

    @rule("chord_definitions")
    def chord_definitions(self, pos: int) -> Result:
        result = self._separated(pos, (self.chord_definition_line,))
        if result is None:
            return None
        pos, definitions = result
        return pos, ChordDefinitionLines(definitions=tuple(definitions))

    @rule("chording")
    def chording(self, pos: int) -> Result:
        result = self._separated(pos, (self.chord_line, self.lyric_line))
        if result is None:
            return None
        pos, lines = result
        return pos, ChordLines(lines=tuple(lines))

    @rule("tab_staff")
    def tab_staff(self, pos: int) -> Result:
        lines = []
        while len(lines) < MAX_STAFF_LINES and (result := self.tab_staff_line(pos)) is not None:
            pos, line = result
            lines.append(line)
        if not lines:
            return None
        if self._check(pos, TAB_STAFF_LINE_RE):
            return self._fail(pos, f"at most {MAX_STAFF_LINES} tab staff lines")
        return pos, TabLines(lines=tuple(lines))

    @rule("unrecognized_lines")
    def unrecognized_lines(self, pos: int) -> Result:
        lines = []
        while (result := self.unrecognized_line(pos)) is not None:
            pos, line = result
            lines.append(line)
        if not lines:
            return None
        return pos, UnrecognizedLines(lines=tuple(lines))

    @rule("section_contents")
    def section_contents(self, pos: int) -> Result:
        return self._first_of(
            pos,
            (
                self.fluff,
                self.chord_definitions,
                self.chording,
                self.tab_staff,
                self.unrecognized_lines,
            ),
        )

    # Structure

    @rule("section_header")
    def section_header(self, pos: int) -> Result:
        pos = SPACES_RE.match(self.text, pos).end()
        if not self.text.startswith("[", pos):
            return self._fail(pos, "'['")
        result = self._match(pos + 1, HEADER_NAME_RE, "header name")
        if result is None:
            return None
        pos, name = result
        if not self.text.startswith("]", pos):
            return self._fail(pos, "']'")
        fluff = LINE_CHARS_RE.match(self.text, pos + 1)
        result = self.eol(fluff.end())
        if result is None:
            return None
        return result[0], Header(name=name.group(), fluff=fluff.group())

    @rule("section")
    def section(self, pos: int) -> Result:
        return self._first_of(pos, (self._section_with_header, self._section_without_header))

    def _section_with_header(self, pos: int) -> Result:
        pos = self.empty_lines(pos)[0]
        result = self.section_header(pos)
        if result is None:
            return None
        pos, header = result
        pos = self.empty_lines(pos)[0]
        contents: Contents | None = None
        result = self.section_contents(pos)
        if result is not None:
            pos, contents = result
        pos = self.empty_lines(pos)[0]
        return pos, Section(header=header, contents=contents)

    def _section_without_header(self, pos: int) -> Result:
        pos = self.empty_lines(pos)[0]
        result = self.section_contents(pos)
        if result is None:
            return None
        pos, contents = result
        # End of input stands in for the trailing blank line
        result = self.empty_lines(pos, minimum=0 if pos == len(self.text) else 1)
        if result is None:
            return None
        return result[0], Section(contents=contents)

    @rule("document")
    def document(self, pos: int = 0) -> Result:
        sections = []
        while pos < len(self.text):
            result = self.section(pos)
            if result is None:
                break
            pos, section = result
            sections.append(section)
        if not sections or pos != len(self.text):
            return self._fail(pos, "end of input")
        return pos, sections

    def parse(self, raw: str) -> Document:
        """Match the whole text as a document.

        Parameters
        ----------
        raw : str
            The caller's original text, kept on the result.

        Raises
        ------
        TabParseError
            If the text is not a sequence of sections.
        """
        result = self.document(0)
        if result is None:
            raise self.failure()
        return Document(sections=tuple(result[1]), raw=raw)
