"""Shell variables and the lookup of ``$NAME`` references."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from minishell.strutils import is_alpha_name

_WORD_STOPS = frozenset(" '\"\t")


def _is_alnum(char: str) -> bool:
    return len(char) == 1 and char.isascii() and char.isalnum()


@dataclass
class Environment:
    """The shell's environment and its exported-only variables.

    Both hold ``NAME=value`` entries, in the order they were defined.
    """

    env: list[str] = field(default_factory=list)
    exported: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.env = list(self.env)
        self.exported = list(self.exported)

    def entries(self) -> list[str]:
        """Return every entry, the environment first, then exported variables."""
        return [*self.env, *self.exported]

    def lookup(self, name: str) -> str | None:
        """Return the value bound to ``name``, or None if it is unset.

        When a name is defined more than once, the last definition wins.
        """
        prefix = f"{name}="
        found = None
        for entry in self.entries():
            if entry.startswith(prefix):
                found = entry
        if found is None:
            return None
        return found[len(prefix):]


def word_len(text: str) -> int:
    """Return the length of the ``$`` reference that starts ``text``.

    The length counts the leading ``$``; ``$?`` always has length 2.
    """
    if text.startswith("$?"):
        return 2
    count = 0
    for index, char in enumerate(text):
        if char in _WORD_STOPS:
            break
        following = text[index + 1:index + 2]
        if following == "$" or not _is_alnum(following):
            return count + 1
        count += 1
    return count


def variable_value(
    text: str, environment: Environment, status: int
) -> str | None:
    """Return the value of the ``$`` reference that starts ``text``.

    ``$?`` gives the last exit ``status``; an unset name gives None.
    """
    if text.startswith("$?"):
        return str(status)
    length = word_len(text)
    name = text[1:length].strip(" ")
    return environment.lookup(name)


def valid_export_name(text: str) -> bool:
    """Return True if ``text`` may be given to ``export``.

    The name before any '=' must be made of ASCII letters only, and
    the argument must not start with '='.
    """
    if not is_alpha_name(text):
        return False
    return not text.startswith("=")