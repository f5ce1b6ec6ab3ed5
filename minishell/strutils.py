"""Small string helpers shared by the shell's parser and builtins."""

from __future__ import annotations

_LONG_MAX = "9223372036854775807"
_INT64_SPAN = 1 << 64
_INT64_HALF = 1 << 63
_ATOI_SPACES = frozenset("\t\n\v\f\r ")
_QUOTES = frozenset("'\"")


def is_numeric(text: str) -> bool:
    """Return True if ``text`` is an optional sign followed only by digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return all("0" <= char <= "9" for char in body)


def _not_above(text: str, limit: str) -> bool:
    if len(text) > len(limit):
        return False
    return all(char <= bound for char, bound in zip(text, limit))


def fits_in_long(text: str) -> bool:
    """Return False when ``text`` is too long a number for a signed 64-bit value.

    Numbers as long as the limit are compared digit by digit against it.
    """
    if text.startswith("-"):
        limit = "-" + _LONG_MAX
    elif text.startswith("+"):
        limit = "+" + _LONG_MAX
    else:
        limit = _LONG_MAX
    if len(text) >= len(limit):
        return _not_above(text, limit)
    return True


def atoi_long(text: str) -> int:
    """Read a leading integer the way ``atoi`` does, wrapping to 64 bits."""
    position = 0
    while position < len(text) and text[position] in _ATOI_SPACES:
        position += 1
    sign = 1
    if position < len(text) and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    for char in text[position:]:
        if not "0" <= char <= "9":
            break
        result = result * 10 + (ord(char) - ord("0"))
    return (sign * result + _INT64_HALF) % _INT64_SPAN - _INT64_HALF


def count_words(text: str, sep: str) -> int:
    """Count the runs of characters in ``text`` that are not ``sep``."""
    return sum(
        1
        for index, char in enumerate(text)
        if char != sep and (index + 1 == len(text) or text[index + 1] == sep)
    )


def name_length(text: str) -> int:
    """Return the length of the part of ``text`` before the first '='."""
    index = text.find("=")
    return len(text) if index < 0 else index


def contains_slash(text: str) -> bool:
    """Return True if ``text`` contains a '/'."""
    return "/" in text


def remove_quotes(text: str) -> str:
    """Return ``text`` with every single and double quote removed."""
    return "".join(char for char in text if char not in _QUOTES)


def first_quoted(text: str) -> str:
    """Return the first quoted run of ``text``, wrapped in its opening quote.

    ``text`` must start with a quote; leading quotes are skipped and the last
    of them is used to wrap the characters up to the next quote.
    """
    position = 0
    while position < len(text) and text[position] in _QUOTES:
        position += 1
    if position == 0:
        raise ValueError("text does not start with a quote")
    quote = text[position - 1]
    end = position
    while end < len(text) and text[end] not in _QUOTES:
        end += 1
    return quote + text[position:end] + quote


def is_alpha_name(text: str) -> bool:
    """Return True if every character before the first '=' is an ASCII letter."""
    name = text.split("=", 1)[0]
    return all(char.isascii() and char.isalpha() for char in name)


def error_message(prefix: str, message: str) -> str:
    """Build a shell error line: the shell name, ``prefix`` and ``message``."""
    return f"minishell: {prefix}{message}"


def join_path(directory: str, name: str) -> str:
    """Join a directory and a file name with a single '/'."""
    return f"{directory}/{name}"