"""
Scanner Cursor and Primitives
=============================

The Scanner holds an immutable source buffer and the cursors used to
delimit lexemes:

    start    offset where the lexeme being recognized began
    current  offset of the next unread character
    line     current line number, bumped once per consumed newline

It knows nothing about the grammar beyond single characters; token
recognition lives in loxscan.lexer.compiler.

Cursor Invariants
-----------------
- 0 <= start <= current <= len(source)
- line >= 1
- current never decreases, except when restore() rewinds to a snapshot

Primitives that read the character at `current` (advance, peek) raise
ScannerBoundsError when called at end of input. Callers check
is_at_end() first.
"""

from dataclasses import dataclass
from typing import Optional

from loxscan.errors import ScannerBoundsError


# Characters skipped between lexemes (newline handled separately)
BLANKS = " \t\r"


@dataclass(frozen=True)
class ScannerState:
    """Saved cursor position, see Scanner.snapshot()."""
    start: int
    current: int
    line: int


class Scanner:
    """
    Cursor over a read-only source buffer.

    Usage:
        scanner = Scanner("print 1;")
        while not scanner.is_at_end():
            scanner.advance()

    Attributes:
        source: The text being scanned (never modified)
        start: Offset of the lexeme currently being recognized
        current: Offset of the next unread character
        line: Current line number (1-indexed)
    """

    def __init__(self, source: str, line: int = 1):
        """
        Bind a scanner to a source buffer.

        Args:
            source: The text to scan
            line: Starting line number (useful for embedded snippets)
        """
        self.source = source
        self.start = 0
        self.current = 0
        self.line = line

    def __repr__(self) -> str:
        return (
            f"<Scanner line={self.line} start={self.start} "
            f"current={self.current}/{len(self.source)}>"
        )

    # =========================================================================
    # Character Access
    # =========================================================================

    def is_at_end(self) -> bool:
        """True when no characters remain (always true for empty source)."""
        return self.current >= len(self.source)

    def advance(self) -> str:
        """Consume and return the character at the cursor."""
        if self.is_at_end():
            raise ScannerBoundsError("advance", self.current, len(self.source))
        char = self.source[self.current]
        self.current += 1
        return char

    def peek(self) -> str:
        """Return the character at the cursor without consuming it."""
        if self.is_at_end():
            raise ScannerBoundsError("peek", self.current, len(self.source))
        return self.source[self.current]

    def peek_next(self) -> Optional[str]:
        """
        Return the character after the cursor without consuming it.

        Returns None if that position is at or past end of input.
        """
        if self.current + 1 >= len(self.source):
            return None
        return self.source[self.current + 1]

    def match_next(self, expected: str) -> bool:
        """
        Consume the next character if it equals expected.

        Returns:
            True if matched and consumed, False otherwise (cursor unchanged)
        """
        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def newline(self) -> None:
        """Record that a newline was consumed."""
        self.line += 1

    def skip_insignificant(self) -> None:
        """
        Skip whitespace and // comments.

        Stops at the first significant character or at end of input.
        A comment runs up to, but not including, its newline, so the
        newline is counted by the whitespace branch on the next pass.
        A lone '/' is left in place for the division operator.
        """
        while not self.is_at_end():
            char = self.peek()

            if char in BLANKS:
                self.advance()
            elif char == "\n":
                self.advance()
                self.newline()
            elif char == "/" and self.peek_next() == "/":
                while not self.is_at_end() and self.peek() != "\n":
                    self.advance()
            else:
                return

    # =========================================================================
    # Lexeme Bookkeeping
    # =========================================================================

    def mark_start(self) -> None:
        """Begin a new lexeme at the cursor."""
        self.start = self.current

    @property
    def lexeme_length(self) -> int:
        return self.current - self.start

    # =========================================================================
    # State Save/Restore
    # =========================================================================

    def snapshot(self) -> ScannerState:
        """Capture the cursor so a lookahead can be undone."""
        return ScannerState(self.start, self.current, self.line)

    def restore(self, state: ScannerState) -> None:
        """Rewind the cursor to a snapshot taken from this scanner."""
        if state.current > len(self.source):
            raise ScannerBoundsError("restore", state.current, len(self.source))
        self.start = state.start
        self.current = state.current
        self.line = state.line
