"""Parsing of interactive shell command lines: quoting, pipes, redirections and expansion."""

__version__ = "0.1.0"
__all__ = ["environment", "expand", "parser", "strutils", "syntax", "tokens"]