"""
loxscan - Lox Scanner Command-Line Interface
============================================

Scans a Lox source file and prints the token stream, one token per row.
Useful for inspecting what a parser will receive.

Usage Examples
--------------
Scan a file:
    $ loxscan script.lox

Scan an inline snippet:
    $ loxscan -e 'print "hi";'

Read from stdin, stop at the first bad lexeme:
    $ cat script.lox | loxscan --stop-on-error -

Only report errors:
    $ loxscan -q script.lox
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from loxscan import __version__
from loxscan.cli.errors import ExitCode, handle_cli_exception
from loxscan.lexer import Compiler, ScanOptions, TokenListing

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
        force=True,
    )


def read_source(source_file: Optional[Path], expr: Optional[str]) -> tuple[str, str]:
    """
    Resolve the text to scan and the name to report it under.

    Returns:
        (source text, filename for error messages)
    """
    if expr is not None:
        return expr, "<expr>"
    if source_file is None or str(source_file) == "-":
        return click.get_text_stream("stdin").read(), "<stdin>"
    return source_file.read_text(), str(source_file)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "source_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-e", "--expr",
    metavar="TEXT",
    help="Scan TEXT instead of a file",
)
@click.option(
    "--keep-going/--stop-on-error",
    default=True,
    help="Continue past malformed lexemes (default) or stop at the first one",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=0),
    default=100,
    show_default=True,
    help="Abandon the scan after this many errors (0 = no limit)",
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Do not print the token listing",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    source_file: Optional[Path],
    expr: Optional[str],
    keep_going: bool,
    max_errors: int,
    quiet: bool,
    verbose: bool,
) -> None:
    """
    Scan Lox source code and print its tokens.

    SOURCE_FILE is the Lox file to scan, or '-' to read standard input.

    \b
    Examples:
        loxscan script.lox             # Token listing
        loxscan -e 'var a = 1;'        # Scan an inline snippet
        loxscan --stop-on-error a.lox  # Exit at the first bad lexeme
    """
    if source_file is not None and expr is not None:
        raise click.UsageError("give either SOURCE_FILE or --expr, not both")

    setup_logging(verbose)

    try:
        source, filename = read_source(source_file, expr)
        options = ScanOptions(
            filename=filename,
            stop_on_error=not keep_going,
            max_errors=max_errors,
        )
        logger.debug(f"Scan options: {options}")

        if verbose:
            click.echo(f"Scanning {filename} ({len(source)} characters)...", err=True)

        compiler = Compiler(source, options)
        listing = TokenListing(source, None if quiet else click.echo)
        result = compiler.run(listing)

        for error in result.errors:
            click.echo(str(error), err=True)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens", err=True)

        if not result.success:
            count = len(result.errors)
            click.echo(f"{count} {'error' if count == 1 else 'errors'}", err=True)
            sys.exit(ExitCode.SCAN_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
