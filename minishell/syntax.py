"""Syntax checks run on a command line before it is tokenised."""

from __future__ import annotations

from dataclasses import dataclass

_TRIM = "\t \v\r\b"
_BLANKS = frozenset(" \r\v\t\f\b")

QUOTE_ERROR = "minishell: syntax error"
NEWLINE_ERROR = "minishell: syntax error near unexpected token `newline'"
PIPE_ERROR = "minishell: syntax error near unexpected token `|'"


@dataclass
class QuoteState:
    """Tracks whether a scan is inside single or double quotes."""

    in_single: bool = False
    in_double: bool = False

    @property
    def quoted(self) -> bool:
        return self.in_single or self.in_double

    def feed(self, char: str) -> bool:
        """Update the state for ``char`` and return whether it is now quoted."""
        if char == '"' and not self.in_single:
            self.in_double = not self.in_double
        if char == "'" and not self.in_double:
            self.in_single = not self.in_single
        return self.quoted


class ShellSyntaxError(Exception):
    """A command line the shell refuses to run."""

    status = 2

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def quotes_balanced(text: str) -> bool:
    """Return True if every quote in ``text`` is closed."""
    state = QuoteState()
    singles = doubles = 0
    for char in text:
        state.feed(char)
        if char == '"' and not state.in_single:
            doubles += 1
        if char == "'" and not state.in_double:
            singles += 1
    return singles % 2 == 0 and doubles % 2 == 0


def pipes_valid(text: str) -> bool:
    """Return True unless a pipe is doubled, empty on its left or dangling."""
    state = QuoteState()
    seen = None
    for index, char in enumerate(text):
        state.feed(char)
        if _is_alnum(char):
            seen = True
        if char != "|" or state.quoted:
            continue
        if seen is False:
            return False
        if text[index + 1 : index + 2] == "|":
            return False
        seen = False
    return seen is not False


def count_pipes(text: str) -> int:
    """Count the pipes of ``text`` that are not inside quotes."""
    state = QuoteState()
    return sum(1 for char in text if not state.feed(char) and char == "|")


def _redirection_ok(text: str, redir: str) -> bool:
    opposite = ">" if redir == "<" else "<"
    position = 1 if text[1:2] == text[0] else 0
    if position + 1 >= len(text):
        return False
    word = False
    position += 1
    while position < len(text):
        char = text[position]
        if _is_alnum(char):
            word = True
        if char == "|" and not word:
            return False
        if char == opposite and not word:
            return False
        if char == redir:
            if not word:
                return False
            word = False
            if text[position + 1 : position + 2] == char:
                position += 1
        position += 1
    return True


def redirections_valid(text: str) -> bool:
    """Return True if every unquoted redirection is followed by a word."""
    state = QuoteState()
    for index, char in enumerate(text):
        if state.feed(char):
            continue
        if char in "<>" and not _redirection_ok(text[index:], char):
            return False
    return True


def check_line(text: str) -> str | None:
    """Trim ``text`` and check its syntax.

    Returns the trimmed line, or None when there is nothing to run.
    Raises ShellSyntaxError when the line is malformed.
    """
    line = text.strip(_TRIM)
    if not line or all(char in _BLANKS for char in line):
        return None
    if not quotes_balanced(line):
        raise ShellSyntaxError(QUOTE_ERROR)
    if not pipes_valid(line):
        raise ShellSyntaxError(PIPE_ERROR)
    if not redirections_valid(line):
        raise ShellSyntaxError(NEWLINE_ERROR)
    return line