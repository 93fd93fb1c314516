"""Parsing of ``Set-Cookie`` header values into cookies."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime

_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
_WHITESPACE = " \t\n\r\f\v"
_SEPARATORS = "=:"


class CookieParseError(ValueError):
    """Raised when a cookie header cannot be parsed at all."""


@dataclass
class Cookie:
    """One cookie as set by a server.

    ``expires`` is seconds since the epoch, or 0 when the cookie carries no
    usable expiry. A session cookie lives only as long as the run.
    """

    name: str | None = None
    value: str | None = None
    domain: str | None = None
    path: str | None = None
    expires: int = 0
    session: bool = True
    secure: bool = False

    def expires_string(self) -> str:
        """The expiry in local time, e.g. ``Fri, 01 May 2015 12:51:25 -0400``."""
        moment = datetime.fromtimestamp(self.expires).astimezone()
        return moment.strftime("%a, %d %b %Y %H:%M:%S %z")

    def reset_value(self, value: str) -> None:
        """Replace the cookie's value."""
        self.value = value

    def clone_from(self, other: "Cookie") -> "Cookie":
        """Take value, domain and path from ``other``.

        The expiry is taken over only when this cookie already had one, and
        a session cookie adopts the other's session flag.
        """
        self.value = other.value
        self.domain = other.domain
        self.path = other.path
        if self.expires > 0:
            self.expires = other.expires
        if self.session:
            self.session = other.session
        return self

    def __str__(self) -> str:
        if self.name is None or self.value is None or self.domain is None:
            return ""
        path = self.path if self.path is not None else "/"
        return f"{self.name}={self.value}; domain={self.domain}; path={path}; expires={self.expires}"


def _strtol(text: str, pos: int) -> tuple[int, int]:
    """Read a decimal integer like C's strtol; no digits gives (0, pos)."""
    i = pos
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        sign = -1 if text[i] == "-" else 1
        i += 1
    start = i
    while i < length and "0" <= text[i] <= "9":
        i += 1
    if i == start:
        return 0, pos
    return sign * int(text[start:i]), i


def _month(text: str, pos: int) -> tuple[int, int]:
    """Find the next month name from ``pos``; unknown names give month 0."""
    i = pos
    length = len(text)
    while i < length and not (text[i].isascii() and text[i].isalpha()):
        i += 1
    if i >= length:
        return 0, pos
    word = text[i:i + 3].lower()
    index = _MONTHS.index(word) if word in _MONTHS else 0
    return index, i + 3


def _utc_offset() -> int:
    """Hours between local time and UTC, e.g. -5 for EST."""
    local = time.localtime(24 * 60 * 60)
    hours = local.tm_hour
    if local.tm_mday < 2:
        hours -= 24
    return hours


def parse_cookie_time(text: str | None) -> int:
    """Parse a cookie ``expires`` value into seconds since the epoch.

    Understands RFC 1123, RFC 850, asctime, a limited ISO form and plain
    delta seconds. Malformed or past dates give 0.
    """
    if not text:
        return 0

    comma = text.find(",")
    if comma >= 0:
        s = text[comma + 1:].lstrip(" ")
        if "-" in s:
            if len(s) < 18:
                return 0
            mday, p = _strtol(s, 0)
            mon, p = _month(s, p + 1)
            year, p = _strtol(s, p + 1)
            hour, p = _strtol(s, p + 1)
            minute, p = _strtol(s, p + 1)
            sec, p = _strtol(s, p + 1)
        else:
            if len(s) < 20:
                return 0
            mday, p = _strtol(s, 0)
            mon, p = _month(s, p)
            year, p = _strtol(s, p)
            hour, p = _strtol(s, p)
            minute, p = _strtol(s, p + 1)
            sec, p = _strtol(s, p + 1)
    elif "0" <= text[0] <= "9":
        if "T" not in text:
            value, _ = _strtol(text, 0)
            return value
        s = text.lstrip(" ")
        if len(s) < 21:
            return 0
        year, p = _strtol(s, 0)
        mon, p = _strtol(s, p + 1)
        mday, p = _strtol(s, p + 1)
        hour, p = _strtol(s, p + 1)
        minute, p = _strtol(s, p + 1)
        sec, p = _strtol(s, p + 1)
    else:
        space = text.find(" ")
        s = text[space:] if space >= 0 else ""
        if len(s) < 20:
            return 0
        mon, p = _month(s, 0)
        mday, p = _strtol(s, p)
        hour, p = _strtol(s, p)
        minute, p = _strtol(s, p + 1)
        sec, p = _strtol(s, p + 1)
        year, p = _strtol(s, p)

    if not (0 <= sec <= 59 and 0 <= minute <= 59 and 0 <= hour <= 23
            and 1 <= mday <= 31 and 0 <= mon <= 11):
        return 0

    try:
        rv = int(time.mktime((year, mon + 1, mday, hour, minute, sec, 0, 0, -1)))
    except (OverflowError, ValueError):
        rv = -1
    if rv != -1 and " GMT" not in text and " UTC" not in text:
        rv += _utc_offset() * 3600

    if rv == -1:
        return rv
    if rv - int(time.time()) < 0:
        return 0
    return rv


def _pairs(text: str):
    """Yield ``;``-separated segments up to the first one without ``=``."""
    pos = 0
    length = len(text)
    while pos < length:
        semi = text.find(";", pos)
        end = semi if semi >= 0 else length
        segment = text[pos:end]
        pos = end + 1
        if "=" not in segment:
            return
        yield segment.strip(_WHITESPACE)


def _split_pair(pair: str) -> tuple[str, str]:
    i = 0
    length = len(pair)
    while i < length and pair[i] not in _WHITESPACE and pair[i] not in _SEPARATORS:
        i += 1
    key = pair[:i]
    i += 1
    while i < length and (pair[i] in _WHITESPACE or pair[i] in _SEPARATORS):
        i += 1
    return key, pair[i:]


def parse_cookie(text: str | None, host: str) -> Cookie:
    """Build a :class:`Cookie` from the value of a ``Set-Cookie`` header.

    Parsing stops at the first attribute that has no ``=``. Without a
    ``domain`` attribute the domain is taken from ``host`` starting at its
    first dot, or ``"."`` when it has none.
    """
    if text is None:
        raise CookieParseError("unable to parse cookie header")

    cookie = Cookie()
    for pair in _pairs(text.lstrip(" ")):
        key, value = _split_pair(pair)
        lowered = key.lower()
        if lowered.startswith("expires"):
            expires = parse_cookie_time(value)
            if expires != -1:
                cookie.session = False
                cookie.expires = expires
        elif lowered.startswith("max-age"):
            number, _ = _strtol(value, 0)
            if number != -1:
                cookie.session = False
        elif lowered.startswith("path"):
            cookie.path = value
        elif lowered.startswith("domain"):
            cookie.domain = value
        elif lowered.startswith("secure"):
            cookie.secure = True
        else:
            cookie.name = key
            cookie.value = value

    if cookie.expires < 1000:
        cookie.session = True

    if cookie.domain is None:
        dot = host.find(".")
        cookie.domain = "." if dot < 0 else host[dot:]
    return cookie