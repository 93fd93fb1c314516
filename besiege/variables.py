"""Expansion of ``$NAME`` variables in configuration lines."""

from __future__ import annotations

import os
from typing import Mapping

_OPENERS = "{("
_CLOSERS = "})"
_NAME_ENDS = "})/"


def escape(text: str) -> str:
    """Drop the first backslash in ``text``, keeping what it escaped."""
    index = text.find("\\")
    if index < 0:
        return text
    return text[:index] + text[index + 1:]


def evaluate(variables: Mapping[str, str], text: str) -> str:
    """Replace the first variable reference in ``text``.

    A reference is ``$NAME``, ``${NAME}`` or ``$(NAME)``; the name runs up to
    a closing brace or parenthesis, a slash, or the end of the text. It is
    looked up in ``variables`` first and then in the environment; an unknown
    name expands to nothing.
    """
    dollar = text.find("$")
    if dollar < 0:
        return text
    prefix = text[:dollar]
    rest = text[dollar + 1:]
    if rest[:1] and rest[0] in _OPENERS:
        rest = rest[1:]

    end = next((i for i, ch in enumerate(rest) if ch in _NAME_ENDS), len(rest))
    name = rest[:end]
    rest = rest[end:]
    if rest[:1] and rest[0] in _CLOSERS:
        rest = rest[1:]

    if name in variables:
        value = variables[name]
    else:
        value = os.environ.get(name, "")
    return prefix + value + rest