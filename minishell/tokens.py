"""Splitting a command line into words and giving each word its role."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import IntEnum

from minishell.syntax import QuoteState

_REDIRECTION_CHARS = frozenset("<>")
_REDIRECTION_WORDS = frozenset({"<", ">", ">>", "<<"})
_WORD_BREAKS = frozenset(" |")


class TokenType(IntEnum):
    """The role a word plays in a command."""

    ARG = 0
    INREDIR = 1
    INREDIRAPP = 2
    OUTREDIR = 3
    HEREDOC = 4
    CMD = 5
    LIM = 6
    OPT = 7


_REDIRECTION_TYPES = frozenset(
    {TokenType.HEREDOC, TokenType.INREDIR, TokenType.OUTREDIR, TokenType.INREDIRAPP}
)


@dataclass
class Token:
    """One word of a command; ``type`` is None until it is classified."""

    content: str
    type: TokenType | None = None


def is_redirection(token: Token) -> bool:
    """Return True if ``token`` is a redirection operator.

    A classified token is judged by its type, an unclassified one by its text.
    """
    if token.type is not None:
        return token.type in _REDIRECTION_TYPES
    return token.content in _REDIRECTION_WORDS


def split_line(line: str) -> list[list[str]]:
    """Split ``line`` into pipe segments, each a list of words.

    Blanks and pipes separate words outside quotes; redirection operators
    always form words of their own. Quotes are kept in the words.
    """
    segments: list[list[str]] = [[]]
    state = QuoteState()
    word: list[str] = []

    def flush() -> None:
        if word:
            segments[-1].append("".join(word))
            word.clear()

    chars = [*line, ""]
    for index, char in enumerate(chars):
        quoted = state.feed(char)
        previous = chars[index - 1] if index else ""
        following = chars[index + 1] if index + 1 < len(chars) else ""
        if not quoted and char in ("", " ", "|"):
            flush()
        elif (
            not quoted
            and char in _REDIRECTION_CHARS
            and index > 0
            and previous not in _REDIRECTION_CHARS
        ):
            flush()
        if char and (char not in _WORD_BREAKS or quoted):
            word.append(char)
        if (
            not quoted
            and char in _REDIRECTION_CHARS
            and following not in _REDIRECTION_CHARS
        ):
            flush()
        if char == "|" and not quoted:
            segments.append([])
    return segments


def _mark_command_after(tokens: list[Token], index: int) -> None:
    if index < len(tokens) and not is_redirection(tokens[index]):
        tokens[index].type = TokenType.CMD


def _classify_redirection(tokens: list[Token], index: int) -> None:
    token = tokens[index]
    if token.type is not None:
        return
    if token.content == "<<":
        token.type = TokenType.HEREDOC
        if index + 1 < len(tokens):
            tokens[index + 1].type = TokenType.LIM
        _mark_command_after(tokens, index + 2)
    elif token.content == "<":
        token.type = TokenType.OUTREDIR
        _mark_command_after(tokens, index + 2)
    elif token.content == ">":
        token.type = TokenType.INREDIR
    elif token.content == ">>":
        token.type = TokenType.INREDIRAPP


def _is_option(previous: Token | None, token: Token) -> bool:
    if previous is None or previous.type is not TokenType.CMD:
        return False
    text = token.content
    return len(text) > 1 and text[0] == "-" and text[1].isascii() and text[1].isalpha()


def classify(words: Iterable[str | Token]) -> list[Token]:
    """Give every word of one segment its type.

    Words may be plain strings or tokens; a token that already has a type
    keeps it. The given tokens are not changed.
    """
    tokens = [
        replace(word) if isinstance(word, Token) else Token(word) for word in words
    ]
    previous: Token | None = None
    for index, token in enumerate(tokens):
        _classify_redirection(tokens, index)
        if previous is None and token.type is None:
            token.type = TokenType.CMD
        if token.type is None and _is_option(previous, token):
            token.type = TokenType.OPT
        if token.type is None:
            token.type = TokenType.ARG
        previous = token
    return tokens


def has_heredoc(segment: Iterable[Token]) -> bool:
    """Return True if the segment holds a here-document operator."""
    return any(token.type is TokenType.HEREDOC for token in segment)


def has_command(segment: Iterable[Token]) -> bool:
    """Return True if the segment holds a command word."""
    return any(token.type is TokenType.CMD for token in segment)