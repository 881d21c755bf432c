"""
Lox Lexer
=========

Converts Lox source text into a stream of span-based tokens.

Pipeline
--------
    Source → Scanner (cursors, primitives) → Compiler.scan_token() → Tokens

Usage
-----
>>> from loxscan.lexer import scan
>>> [t.kind.name for t in scan("print 1 + 2;")]
['PRINT', 'NUMBER', 'PLUS', 'NUMBER', 'SEMICOLON', 'EOF']
"""

from loxscan.lexer.tokens import KEYWORDS, Token, TokenType
from loxscan.lexer.scanner import Scanner, ScannerState
from loxscan.lexer.compiler import Compiler, ScanOptions, ScanResult, scan
from loxscan.lexer.listing import TokenListing

__all__ = [
    # Tokens
    "KEYWORDS",
    "Token",
    "TokenType",
    # Scanner
    "Scanner",
    "ScannerState",
    # Front end
    "Compiler",
    "ScanOptions",
    "ScanResult",
    "scan",
    # Diagnostics
    "TokenListing",
]
