"""Turning a command line into the commands of a pipeline."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from minishell.environment import Environment
from minishell.expand import expand_segments, strip_quotes
from minishell.syntax import check_line
from minishell.tokens import Token, TokenType, classify, is_redirection, split_line

_WORD_TYPES = frozenset({TokenType.ARG, TokenType.OPT, TokenType.CMD})
_ARGUMENT_TYPES = frozenset({TokenType.ARG, TokenType.OPT})


@dataclass
class Command:
    """One command of a pipeline.

    ``words`` is the argument vector handed to the program, and
    ``redirections`` pairs each operator with the word that follows it.
    """

    tokens: list[Token] = field(default_factory=list)
    words: list[str] = field(default_factory=list)
    redirections: list[tuple[str, str]] = field(default_factory=list)

    @property
    def name(self) -> str | None:
        """The program to run, or None when the command has no words."""
        return self.words[0] if self.words else None


def _command_name(segment: Sequence[Token]) -> str:
    for token in segment:
        if token.type is TokenType.CMD:
            return token.content
    return segment[0].content


def command_words(segment: Sequence[Token]) -> list[str]:
    """Return the argument vector of a classified segment.

    When the segment starts with a redirection, only the command word is
    kept. Otherwise words are gathered from the start up to the first
    redirection that follows them. Empty words are dropped.
    """
    if not segment:
        return []
    if is_redirection(segment[0]):
        name = _command_name(segment)
        return [name] if name else []
    words: list[str] = []
    for token in segment:
        if token.type in _WORD_TYPES:
            if token.content:
                words.append(token.content)
        elif words:
            break
    return words


def redirections(segment: Sequence[Token]) -> list[tuple[str, str]]:
    """Return the (operator, target) pairs of a classified segment, in order."""
    operators = [token.content for token in segment if is_redirection(token)]
    targets = [
        token.content
        for previous, token in zip(segment, segment[1:])
        if is_redirection(previous)
    ]
    return list(zip(operators, targets))


def _unquote(segment: Sequence[Token]) -> list[Token]:
    result = []
    for token in segment:
        content = strip_quotes(token.content)
        if content:
            result.append(Token(content, token.type))
    return result


def parse(line: str, environment: Environment, status: int) -> list[Command]:
    """Parse ``line`` into the commands of its pipeline.

    Variables are expanded against ``environment`` and ``$?`` against
    ``status``. Returns an empty list when there is nothing to run.
    Raises ShellSyntaxError when the line is malformed.
    """
    checked = check_line(line)
    if checked is None:
        return []
    expanded = [
        segment
        for segment in expand_segments(split_line(checked), environment, status)
        if segment
    ]
    segments = [_unquote(classify(segment)) for segment in expanded]
    segments = [segment for segment in segments if segment]
    return [
        Command(
            tokens=segment,
            words=command_words(segment),
            redirections=redirections(segment),
        )
        for segment in segments
    ]