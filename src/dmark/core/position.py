"""
Source position tracking for the D-Mark scanner.

Positions are zero-based and advance one character at a time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """
    A location in the source text.

    Attributes:
        offset: Character index into the source (0-indexed)
        line: Line number (0-indexed)
        column: Column number (0-indexed)
    """

    offset: int = 0
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class PositionTracker:
    """Mutable cursor that produces immutable Position snapshots."""

    def __init__(self) -> None:
        self.offset = 0
        self.line = 0
        self.column = 0

    def advance(self, newline: bool) -> None:
        """Move past one character, starting a new line if it was a newline."""
        self.offset += 1
        if newline:
            self.line += 1
            self.column = 0
        else:
            self.column += 1

    def snapshot(self) -> Position:
        return Position(offset=self.offset, line=self.line, column=self.column)
