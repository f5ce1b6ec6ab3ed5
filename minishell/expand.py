"""Variable expansion and quote removal on the words of a command."""

from __future__ import annotations

from collections.abc import Iterable

from minishell.environment import Environment, variable_value, word_len
from minishell.syntax import QuoteState
from minishell.tokens import Token, TokenType

_LITERAL_REDIRECTIONS = frozenset({">>", ">", "<"})
_NOT_A_NAME = frozenset({"$", "", " ", '"'})


def _expand(
    word: str, environment: Environment, status: int
) -> tuple[str | None, bool]:
    """Expand ``word``; also tell whether it expanded into a bare operator."""
    state = QuoteState()
    buffer: list[str] = []
    literal = False
    position = 0
    while position < len(word):
        char = word[position]
        state.feed(char)
        following = word[position + 1:position + 2]
        if char == "$" and not state.in_single and following not in _NOT_A_NAME:
            rest = word[position:]
            value = variable_value(rest, environment, status)
            if value is not None:
                buffer.append(value)
            position += word_len(rest)
            if "".join(buffer) in _LITERAL_REDIRECTIONS:
                literal = True
        else:
            buffer.append(char)
            position += 1
    result = "".join(buffer)
    return (result or None), literal


def expand_word(word: str, environment: Environment, status: int) -> str | None:
    """Replace the ``$`` references of ``word`` outside single quotes.

    ``$?`` becomes ``status``. Returns None when nothing is left.
    """
    return _expand(word, environment, status)[0]


def expand_segments(
    segments: Iterable[Iterable[str]], environment: Environment, status: int
) -> list[list[Token]]:
    """Expand the words of every segment into tokens.

    The word after ``<<`` is left as written. Words that expand to nothing
    are dropped; a word whose expansion reads as a redirection operator is
    marked as a plain argument.
    """
    result: list[list[Token]] = []
    for segment in segments:
        tokens: list[Token] = []
        first = True
        previous: str | None = None
        for word in segment:
            if not first and previous == "<<":
                content, literal = word, False
            else:
                content, literal = _expand(word, environment, status)
            first = False
            previous = content
            if content is not None:
                tokens.append(Token(content, TokenType.ARG if literal else None))
        result.append(tokens)
    return result


def _drop_run(chars: list[str], position: int, quote: str, quoted: bool) -> None:
    if quoted or position >= len(chars) or chars[position] != quote:
        return
    while position < len(chars) and chars[position] == quote:
        del chars[position]


def strip_quotes(word: str) -> str:
    """Remove the quotes that delimit the quoted parts of ``word``."""
    chars = list(word)
    state = QuoteState()
    position = 0
    while position < len(chars):
        state.feed(chars[position])
        _drop_run(chars, position, '"', state.in_single)
        _drop_run(chars, position, "'", state.in_double)
        position += 1
    return "".join(chars)