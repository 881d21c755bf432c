"""
loxscan Error Hierarchy
=======================

This module defines the exception hierarchy for the Lox scanner.
All exceptions inherit from LoxError, allowing callers to catch every
scanner-related error with a single except clause if desired.

Exception Hierarchy
-------------------
LoxError (base)
├── ScanError - malformed lexeme found in the source
│   ├── UnexpectedCharacterError - character that starts no lexeme
│   ├── UnterminatedStringError - string literal missing its closing quote
│   └── ScanAbortedError - too many errors, scanning abandoned
└── ScannerBoundsError - cursor primitive used past end of input

Error Message Format
--------------------
Scan errors carry a source location and follow the gcc style:

    script.lox:3:9: error: unexpected character '@'
        var a @ 1;
            ^
    hint: remove the character or put it inside a string
"""

from dataclasses import dataclass
from typing import List, Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all loxscan errors.

        try:
            tokens = scan(source)
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in a source buffer, used for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scan Errors
# =============================================================================

class ScanError(LoxError):
    """
    A malformed lexeme in the source text.

    The scanner itself never raises these: it returns an error-kind token
    and the driver decides whether to raise or to collect.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The source text of the offending line
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            script.lox:1:5: error: unterminated string literal
                a = "hello
                    ^
            hint: add closing '"' to complete the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnexpectedCharacterError(ScanError):
    """A character that cannot start any lexeme."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unexpected character '{char}' (0x{ord(char):02X})",
            location=location,
            hint="remove the character or put it inside a string",
            source_line=source_line,
        )


class UnterminatedStringError(ScanError):
    """
    String literal not closed before the end of input.

    Example:
        print "hello;    // Missing closing quote
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )


class ScanAbortedError(ScanError):
    """
    Aggregate error raised when the error limit is reached.

    The message is the pre-formatted report from ScanErrorCollector.
    """

    def _format_message(self) -> str:
        return self.message


# =============================================================================
# Contract Violations
# =============================================================================

class ScannerBoundsError(LoxError, IndexError):
    """
    A cursor primitive was called past the end of the buffer.

    advance() and peek() require the caller to check is_at_end() first.
    This signals a bug in the caller, not bad input.
    """

    def __init__(self, operation: str, position: int, length: int):
        self.operation = operation
        self.position = position
        self.length = length
        super().__init__(
            f"{operation}() at offset {position} is past end of input "
            f"(length {length})"
        )


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ScanErrorCollector:
    """
    Collects scan errors so a whole file can be reported in one run.

    Example:
        collector = ScanErrorCollector(max_errors=100)

        for token in compiler.tokenize():
            if token.is_error():
                collector.add(compiler.error_for(token))
                if collector.should_stop():
                    break

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        self.errors: List[ScanError] = []
        self.max_errors = max_errors

    def add(self, error: ScanError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return self.max_errors > 0 and len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display, followed by a summary line."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a ScanAbortedError if any errors were collected."""
        if self.has_errors():
            raise ScanAbortedError(self.report())
