"""
loxscan Command-Line Interface
==============================

- **loxscan**: token listing for Lox source files

Implemented as a Click-based CLI application with help text and
consistent exit codes.
"""

__all__ = ["loxscan"]
