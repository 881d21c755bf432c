"""
loxscan - Lexical Scanner for the Lox Scripting Language
=========================================================

This package converts Lox source text into a linear sequence of
classified lexemes for a downstream parser or compiler.

Tokens do not copy text: each one is a (start, length, line) span into
the original source buffer.

Main Components
---------------
- **lexer.scanner**: cursor state and character primitives
- **lexer.compiler**: token recognition and the scan driver
- **lexer.listing**: human-readable token dump
- **cli**: the `loxscan` command

Quick Start
-----------
    >>> from loxscan import scan
    >>> tokens = scan('var greeting = "hi";')
    >>> tokens[0].kind
    <TokenType.VAR: 37>

Or use the command-line tool:
    $ loxscan script.lox
    $ loxscan -e "print 1 + 2;"
"""

__version__ = "1.0.0"

from loxscan.errors import (
    LoxError,
    ScanAbortedError,
    ScanError,
    ScanErrorCollector,
    ScannerBoundsError,
    SourceLocation,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from loxscan.lexer import (
    KEYWORDS,
    Compiler,
    ScanOptions,
    ScanResult,
    Scanner,
    Token,
    TokenListing,
    TokenType,
    scan,
)

__all__ = [
    "__version__",
    # Lexer
    "KEYWORDS",
    "Compiler",
    "ScanOptions",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenListing",
    "TokenType",
    "scan",
    # Errors
    "LoxError",
    "ScanAbortedError",
    "ScanError",
    "ScanErrorCollector",
    "ScannerBoundsError",
    "SourceLocation",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
]
