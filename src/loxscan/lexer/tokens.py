"""
Lox Token Definitions
=====================

Token kinds and the Token value type produced by the scanner.

A Token does not own any text. It is a span (start, length) into the
source buffer plus the line the lexeme begins on; the text is resolved
lazily with Token.lexeme(source).
"""

from dataclasses import dataclass
from enum import Enum, auto

from loxscan.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Lexeme categories for the Lox language.

    Keywords are distinguished from identifiers to simplify parsing.
    The two error kinds let the scanner report bad input as a value
    instead of raising.
    """

    # === Single-character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()         # "..." (span includes the quotes)
    NUMBER = auto()         # 123 or 12.5

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Errors ===
    UNEXPECTED_CHARACTER = auto()
    UNTERMINATED_STRING = auto()

    # === Sentinel ===
    EOF = auto()


# =============================================================================
# Lookup Tables
# =============================================================================

KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
}

# Operator head -> (kind when followed by '=', kind otherwise)
EQUAL_SUFFIX_TOKENS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

ERROR_TOKENS = frozenset({
    TokenType.UNEXPECTED_CHARACTER,
    TokenType.UNTERMINATED_STRING,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenType classification
        start: Offset of the lexeme's first character in the buffer
        length: Number of characters in the lexeme (0 for EOF)
        line: Line the lexeme begins on (1-indexed)
    """
    kind: TokenType
    start: int
    length: int
    line: int

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.start}+{self.length}, line {self.line})"

    @property
    def end(self) -> int:
        """Offset one past the last character of the lexeme."""
        return self.start + self.length

    def lexeme(self, source: str) -> str:
        """Resolve the token's text against the buffer it was scanned from."""
        return source[self.start:self.end]

    def is_error(self) -> bool:
        return self.kind in ERROR_TOKENS

    def is_keyword(self) -> bool:
        return self.kind in _KEYWORD_KINDS

    def column(self, source: str) -> int:
        """1-indexed column of the token's first character."""
        return self.start - (source.rfind("\n", 0, self.start) + 1) + 1

    def location(self, source: str, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column(source))


_KEYWORD_KINDS = frozenset(KEYWORDS.values())
