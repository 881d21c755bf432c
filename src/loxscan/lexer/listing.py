"""
Token Listing
=============

Human-readable token dump used by the loxscan CLI. Not a stable format.

Each token is printed on its own row. The line number is shown only when
it differs from the previous token's line; otherwise a continuation
marker is printed:

       1 VAR                3 'var'
       | IDENTIFIER         1 'x'
       | EQUAL              1 '='
       2 PRINT              5 'print'
"""

from typing import Callable, Optional

from loxscan.lexer.tokens import Token


CONTINUATION = "   | "


class TokenListing:
    """
    Token consumer that renders rows for Compiler.run().

    Example:
        listing = TokenListing(source, click.echo)
        compiler.run(listing)

    Attributes:
        source: The buffer the tokens refer to
        rows: Every row rendered so far
    """

    def __init__(self, source: str, emit: Optional[Callable[[str], None]] = None):
        self.source = source
        self.emit = emit
        self.rows: list[str] = []
        self._last_line: Optional[int] = None

    def __call__(self, token: Token) -> None:
        row = self.format(token)
        self.rows.append(row)
        if self.emit is not None:
            self.emit(row)

    def format(self, token: Token) -> str:
        """Render one token, updating the last reported line."""
        if token.line != self._last_line:
            prefix = f"{token.line:4d} "
            self._last_line = token.line
        else:
            prefix = CONTINUATION

        text = token.lexeme(self.source)
        return f"{prefix}{token.kind.name:<16} {token.length:3d} {text!r}"

    def render(self) -> str:
        return "\n".join(self.rows)
