"""
Lox Scanning Front End
======================

This module turns scanner primitives into tokens and drives a full
scan of a source buffer.

    Source → Scanner (cursors) → Compiler.scan_token() → Token stream → consumer

Token Recognition
-----------------
Compiler.scan_token() skips whitespace and comments, then recognizes
exactly one lexeme:

| First character       | Result                                        |
|-----------------------|-----------------------------------------------|
| ( ) { } ; , . - + / * | single-character token                        |
| ! = < >               | two-character form if followed by '='         |
| "                     | STRING, or UNTERMINATED_STRING at end of input|
| digit                 | NUMBER, digits with optional '.digits' part   |
| letter or _           | keyword, else IDENTIFIER                      |
| anything else         | UNEXPECTED_CHARACTER (length 1)               |

Bad input never raises from scan_token(). The driver (run) turns error
tokens into ScanError exceptions and either raises the first one or
collects them, depending on ScanOptions.

Usage
-----
>>> from loxscan.lexer import Compiler
>>> compiler = Compiler("var x = 1;")
>>> [t.kind.name for t in compiler.tokenize()]
['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'SEMICOLON', 'EOF']
"""

import logging
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Optional

from loxscan.errors import (
    ScanAbortedError,
    ScanError,
    ScanErrorCollector,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from loxscan.lexer.scanner import Scanner
from loxscan.lexer.tokens import (
    EQUAL_SUFFIX_TOKENS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


# Characters that can start an identifier
IDENT_START = string.ascii_letters + "_"

# Characters that can continue an identifier
IDENT_CHARS = string.ascii_letters + string.digits + "_"


@dataclass
class ScanOptions:
    """
    Driver configuration.

    Attributes:
        filename: Name used in error messages
        stop_on_error: Raise on the first malformed lexeme instead of
                       collecting errors and continuing
        max_errors: Abandon the scan once this many errors are collected
                    (0 means no limit)
    """
    filename: str = "<input>"
    stop_on_error: bool = False
    max_errors: int = 100


@dataclass
class ScanResult:
    """
    Outcome of Compiler.run().

    Attributes:
        filename: Source filename
        token_count: Tokens delivered to the consumer, EOF included
        errors: Errors collected when scanning continued past them
    """
    filename: str
    token_count: int = 0
    errors: list[ScanError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class Compiler:
    """
    Recognizes tokens over a Scanner and drives complete scans.

    Example:
        compiler = Compiler(source, ScanOptions(filename="main.lox"))
        result = compiler.run(print)

    Attributes:
        scanner: The cursor state over the source buffer
        options: Driver configuration
    """

    def __init__(self, source: str, options: Optional[ScanOptions] = None):
        self.scanner = Scanner(source)
        self.options = options or ScanOptions()

    @classmethod
    def from_file(cls, path: str | Path, options: Optional[ScanOptions] = None) -> "Compiler":
        """Create a compiler for a source file, named after the file."""
        path = Path(path)
        options = options or ScanOptions(filename=str(path))
        return cls(path.read_text(), options)

    @property
    def source(self) -> str:
        return self.scanner.source

    # =========================================================================
    # Token Recognition
    # =========================================================================

    def scan_token(self) -> Token:
        """
        Scan the next token.

        Returns an EOF token (length 0) once input is exhausted, and
        keeps returning it on every later call.
        """
        scan = self.scanner
        scan.skip_insignificant()
        scan.mark_start()

        if scan.is_at_end():
            return self._make_token(TokenType.EOF, scan.line)

        line = scan.line
        char = scan.advance()

        if char in SINGLE_CHAR_TOKENS:
            return self._make_token(SINGLE_CHAR_TOKENS[char], line)

        if char in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[char]
            if scan.match_next("="):
                return self._make_token(with_equal, line)
            return self._make_token(alone, line)

        if char == '"':
            return self._scan_string(line)

        if char in string.digits:
            return self._scan_number(line)

        if char in IDENT_START:
            return self._scan_identifier(line)

        return self._make_token(TokenType.UNEXPECTED_CHARACTER, line)

    def _make_token(self, kind: TokenType, line: int) -> Token:
        return Token(
            kind=kind,
            start=self.scanner.start,
            length=self.scanner.lexeme_length,
            line=line,
        )

    def _scan_string(self, line: int) -> Token:
        """
        Scan the rest of a double-quoted string.

        Strings may span lines; the token keeps the line of the opening
        quote. There are no escape sequences.
        """
        scan = self.scanner
        while not scan.is_at_end():
            char = scan.advance()
            if char == '"':
                return self._make_token(TokenType.STRING, line)
            if char == "\n":
                scan.newline()

        return self._make_token(TokenType.UNTERMINATED_STRING, line)

    def _scan_number(self, line: int) -> Token:
        """Scan the rest of a number: digits, then an optional '.digits' part."""
        scan = self.scanner
        self._skip_digits()

        # The '.' belongs to the number only if a digit follows it
        if not scan.is_at_end() and scan.peek() == ".":
            following = scan.peek_next()
            if following is not None and following in string.digits:
                scan.advance()
                self._skip_digits()

        return self._make_token(TokenType.NUMBER, line)

    def _skip_digits(self) -> None:
        scan = self.scanner
        while not scan.is_at_end() and scan.peek() in string.digits:
            scan.advance()

    def _scan_identifier(self, line: int) -> Token:
        """Scan the rest of an identifier, then check the keyword table."""
        scan = self.scanner
        while not scan.is_at_end() and scan.peek() in IDENT_CHARS:
            scan.advance()

        name = self.source[scan.start:scan.current]
        return self._make_token(KEYWORDS.get(name, TokenType.IDENTIFIER), line)

    # =========================================================================
    # Iteration
    # =========================================================================

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens through end of input.

        Yields:
            Every remaining token, ending with exactly one EOF token
        """
        while True:
            token = self.scan_token()
            yield token
            if token.kind == TokenType.EOF:
                return

    def peek_token(self) -> Token:
        """Scan the next token without consuming it."""
        state = self.scanner.snapshot()
        try:
            return self.scan_token()
        finally:
            self.scanner.restore(state)

    # =========================================================================
    # Driver Loop
    # =========================================================================

    def error_for(self, token: Token) -> ScanError:
        """Build the exception describing an error-kind token."""
        location = token.location(self.source, self.options.filename)
        source_line = self._line_text(token)

        if token.kind == TokenType.UNEXPECTED_CHARACTER:
            return UnexpectedCharacterError(token.lexeme(self.source), location, source_line)
        if token.kind == TokenType.UNTERMINATED_STRING:
            return UnterminatedStringError(location, source_line)
        raise ValueError(f"{token.kind.name} is not an error token")

    def _line_text(self, token: Token) -> str:
        line_start = self.source.rfind("\n", 0, token.start) + 1
        line_end = self.source.find("\n", token.start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[line_start:line_end]

    def run(self, consumer: Optional[Callable[[Token], None]] = None) -> ScanResult:
        """
        Scan to end of input, handing every token to consumer.

        Args:
            consumer: Called with each token, EOF and error tokens included

        Returns:
            ScanResult with the token count and any collected errors

        Raises:
            ScanError: The first error, when options.stop_on_error is set
            ScanAbortedError: When options.max_errors errors were collected
        """
        result = ScanResult(filename=self.options.filename)
        collector = ScanErrorCollector(self.options.max_errors)

        for token in self.tokenize():
            result.token_count += 1
            if consumer is not None:
                consumer(token)

            if not token.is_error():
                continue

            error = self.error_for(token)
            logger.debug(f"Scan error: {error.message} at {error.location}")
            if self.options.stop_on_error:
                raise error

            collector.add(error)
            if collector.should_stop():
                logger.debug(f"Error limit {collector.max_errors} reached, scan abandoned")
                raise ScanAbortedError(collector.report())

        result.errors = list(collector.errors)
        logger.debug(
            f"Scanned {self.options.filename}: {result.token_count} tokens, "
            f"{len(result.errors)} errors"
        )
        return result


def scan(source: str) -> list[Token]:
    """Scan a source string and return all of its tokens, EOF included."""
    return list(Compiler(source).tokenize())
