"""Exception types raised by guitar-tab-parser.

Every error is a ``ValueError`` so callers that only care about bad input
can catch that, while callers that want to distinguish causes can catch
the specific subclass.
"""

from __future__ import annotations

from dataclasses import dataclass


class GuitarTabError(ValueError):
    """Base class for all library errors."""


class UnknownNoteError(GuitarTabError):
    """A note symbol is not one of the recognized pitch spellings."""


class UnknownChordTypeError(GuitarTabError):
    """A chord type (quality) is not in the chord vocabulary."""


class DuplicateIntervalError(GuitarTabError):
    """A chord was given the same interval more than once."""


@dataclass(frozen=True)
class ParseCause:
    """One node of a parse failure explanation.

    Parameters
    ----------
    message : str
        Human-readable description of this node.
    position : int
        Offset into the (normalized) input where the failure occurred.
    line : int
        1-based line number of ``position``.
    column : int
        1-based column number of ``position``.
    children : tuple[ParseCause, ...]
        Nested causes, from the outermost rule down to the expected terminal.
    """

    message: str
    position: int
    line: int
    column: int
    children: tuple[ParseCause, ...] = ()

    def to_list(self) -> list:
        """Return the tree as nested lists: ``[message, [child, ...]]``."""
        return [self.message, [child.to_list() for child in self.children]]

    def ascii_tree(self) -> str:
        """Render the cause tree as an indented ASCII diagram.

        Examples
        --------
        >>> leaf = ParseCause("expected ']'", 3, 1, 4)
        >>> print(ParseCause("section", 0, 1, 1, (leaf,)).ascii_tree())
        section
        `- expected ']'
        """
        lines = [self.message]
        for index, child in enumerate(self.children):
            last = index == len(self.children) - 1
            branch, indent = ("`- ", "   ") if last else ("|- ", "|  ")
            child_lines = child.ascii_tree().split("\n")
            lines.append(branch + child_lines[0])
            lines.extend(indent + line for line in child_lines[1:])
        return "\n".join(lines)


class TabParseError(GuitarTabError):
    """No alternative of the tab grammar matched the input.

    Parameters
    ----------
    cause : ParseCause
        Root of the failure tree, located at the furthest position any
        alternative reached.
    """

    def __init__(self, cause: ParseCause) -> None:
        super().__init__(cause.message)
        self.cause = cause
        self.position = cause.position
        self.line = cause.line
        self.column = cause.column

    def ascii_tree(self) -> str:
        """Render the failure cause tree."""
        return self.cause.ascii_tree()
