"""Reading URL lists and their variables from files and the command line."""

from __future__ import annotations

import os
from typing import Iterator

from besiege.variables import escape, evaluate

BUFSIZE = 40000
_WHITESPACE = " \t\n\r\f\v"
_SEPARATORS = "=:"
_NAME_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)
_COMMAND_LINE_COPIES = 4


class ConfigError(OSError):
    """Raised when a configuration or URL file cannot be read."""


def strip_comment(line: str) -> str:
    """Trim ``line`` and remove a comment from it.

    A line whose first non-blank character is ``#`` is a comment. Otherwise
    a ``#`` ends the line only if the line contains a space and no slash, so
    URL fragments survive. Anything after a newline is dropped as well.
    """
    text = line.strip(_WHITESPACE)
    if text.startswith("#"):
        return ""
    if "/" not in text and " " in text:
        text = text.split("#", 1)[0]
    text = text.split("\n", 1)[0]
    return text.strip(_WHITESPACE)


def is_variable_line(line: str) -> bool:
    """True when ``line`` assigns a variable: ``NAME=value``.

    Everything before the first ``=`` must be letters, digits or underscores.
    """
    name, sep, _ = line.partition("=")
    if not sep:
        return False
    return all(ch in _NAME_CHARS for ch in name)


def _split_assignment(line: str) -> tuple[str, str]:
    i = 0
    length = len(line)
    while i < length and line[i] not in _WHITESPACE and line[i] not in _SEPARATORS:
        i += 1
    name = line[:i]
    i += 1
    while i < length and (line[i] in _WHITESPACE or line[i] in _SEPARATORS):
        i += 1
    return name, line[i:]


def _expand(variables: dict[str, str], line: str) -> str:
    """Expand each ``$`` reference once; ``\\$`` yields a literal dollar."""
    budget = line.count("$")
    rounds = 0
    while "$" in line:
        if "\\$" in line:
            line = escape(line)
        else:
            line = evaluate(variables, line)
        rounds += 1
        if rounds == budget:
            break
    return line


def _lines(handle) -> Iterator[str]:
    """Yield lines without their newline, skipping those too long to keep."""
    limit = BUFSIZE - 1
    for raw in handle:
        has_newline = raw.endswith("\n")
        content = raw[:-1] if has_newline else raw
        if len(content) > limit or (len(content) == limit and has_newline):
            continue
        yield content


def read_cfg_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a URL file, returning its lines with variables expanded.

    Blank lines and comments are skipped. Lines of the form ``NAME=value``
    define variables for the lines that follow and are not returned;
    ``$NAME``, ``${NAME}`` and ``$(NAME)`` are looked up among them and then
    in the environment.
    """
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise ConfigError(f"unable to open file: {os.fspath(path)}") from exc

    variables: dict[str, str] = {}
    result: list[str] = []
    with handle:
        for raw in _lines(handle):
            line = strip_comment(raw).rstrip("\r\n")
            if not line:
                continue
            if is_variable_line(line):
                name, value = _split_assignment(line)
                variables[name] = value
            else:
                result.append(_expand(variables, line))
    return result


def read_cmd_line(url: str) -> list[str]:
    """Turn a URL given on the command line into a URL list.

    The cleaned URL is listed four times; an empty or comment-only argument
    gives an empty list.
    """
    line = strip_comment(url[: BUFSIZE - 1]).rstrip("\r\n")
    if not line:
        return []
    return [line] * _COMMAND_LINE_COPIES