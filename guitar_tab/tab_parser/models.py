"""Data models for parsed tab documents.

A ``Document`` is an ordered sequence of ``Section`` objects. Each section
has an optional ``Header`` and an optional contents block, which is exactly
one of the content kinds below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal

if TYPE_CHECKING:
    from guitar_tab.music.chord import UnboundChord


ChordingKind = Literal["chords", "lyrics"]


@dataclass(frozen=True)
class ChordToken:
    """A chord name split into its notational parts.

    Markers that are absent are ``None``, so every token has the same shape.

    Parameters
    ----------
    text : str
        The chord exactly as written (e.g., "C#m7").
    chord_root : str
        Root letter A-G.
    root_modifier : str | None
        ``"#"`` or ``"b"``.
    minor : str | None
        ``"m"`` or ``"min"``.
    add : str | None
        ``"add"`` when the extension is an added tone.
    extension_modifier : str | None
        ``"maj"`` or ``"min"`` qualifying the extension.
    extension : str | None
        One of ``"5"``, ``"6"``, ``"7"``, ``"9"``, ``"11"``, ``"13"``.
    suspended : str | None
        ``"sus"``.
    suspension : str | None
        ``"2"`` or ``"4"``.
    diminished : str | None
        ``"dim"``.
    diminution : str | None
        ``"7"`` for a diminished seventh.
    augmented : str | None
        ``"aug"``.
    bass : str | None
        Slash-chord bass note (e.g., "E" in "C/E").

    Examples
    --------
    >>> token = ChordToken(text="Bb", chord_root="B", root_modifier="b")
    >>> token.root
    'Bb'
    """

    text: str
    chord_root: str
    root_modifier: str | None = None
    minor: str | None = None
    add: str | None = None
    extension_modifier: str | None = None
    extension: str | None = None
    suspended: str | None = None
    suspension: str | None = None
    diminished: str | None = None
    diminution: str | None = None
    augmented: str | None = None
    bass: str | None = None

    @property
    def root(self) -> str:
        """Root letter with its accidental."""
        return self.chord_root + (self.root_modifier or "")

    def to_unbound(self) -> UnboundChord:
        """Interpret the token as an ``UnboundChord``.

        A ``"min"`` minor marker is written as ``"m"`` for pychord.

        Examples
        --------
        >>> ChordToken(text="Cmin7", chord_root="C", minor="min", extension="7").to_unbound().notes_string()
        'C D# G A#'
        """
        from guitar_tab.converter import from_name

        name = self.text
        if self.minor == "min":
            name = self.root + "m" + name[len(self.root) + len(self.minor) :]
        return from_name(name)


@dataclass(frozen=True)
class ChordingLine:
    """One line of a chording block: either chords or lyrics.

    Parameters
    ----------
    kind : ChordingKind
        ``"chords"`` or ``"lyrics"``.
    text : str
        The raw line without its line feed.
    chords : tuple[ChordToken, ...]
        Parsed chords; empty for lyric lines.
    """

    kind: ChordingKind
    text: str
    chords: tuple[ChordToken, ...] = ()


@dataclass(frozen=True)
class ChordDefinition:
    """A chord name with its fingering, e.g. ``A6    xx767x``.

    Parameters
    ----------
    chord : ChordToken
        The chord being defined.
    frets : str
        The fret pattern as written.
    """

    chord: ChordToken
    frets: str


@dataclass(frozen=True)
class FluffLines:
    """Metadata lines such as "Tabbed by: ..." or "Capo 2"."""

    key: ClassVar[str] = "fluff_lines"
    lines: tuple[str, ...]


@dataclass(frozen=True)
class ChordLines:
    """Chord and lyric lines in their original order."""

    key: ClassVar[str] = "chord_lines"
    lines: tuple[ChordingLine, ...]


@dataclass(frozen=True)
class ChordDefinitionLines:
    """A table of chord fingerings."""

    key: ClassVar[str] = "chord_definition_lines"
    definitions: tuple[ChordDefinition, ...]


@dataclass(frozen=True)
class TabLines:
    """A tab staff block of one to eight dash lines."""

    key: ClassVar[str] = "tab_lines"
    lines: tuple[str, ...]


@dataclass(frozen=True)
class UnrecognizedLines:
    """Lines no other content kind accepted, kept verbatim."""

    key: ClassVar[str] = "unrecognized_lines"
    lines: tuple[str, ...]


Contents = FluffLines | ChordLines | ChordDefinitionLines | TabLines | UnrecognizedLines


@dataclass(frozen=True)
class Header:
    """A bracketed section header.

    Parameters
    ----------
    name : str
        Text between the brackets (e.g., "Verse 1").
    fluff : str
        Anything after the closing bracket on the same line, verbatim.
    """

    name: str
    fluff: str = ""


@dataclass(frozen=True)
class Section:
    """A header, a contents block, or both.

    Parameters
    ----------
    header : Header | None
        The section header, if the section has one.
    contents : Contents | None
        The section body, if the section has one.
    """

    header: Header | None = None
    contents: Contents | None = None


@dataclass(frozen=True)
class Document:
    """Complete parsed tab document.

    Parameters
    ----------
    sections : tuple[Section, ...]
        All sections, in input order.
    raw : str
        The original input text.
    """

    sections: tuple[Section, ...]
    raw: str
