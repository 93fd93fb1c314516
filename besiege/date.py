"""HTTP date parsing and the date/etag values kept by the cache."""

from __future__ import annotations

import re
import time
from datetime import date, datetime, timedelta, timezone
from enum import Enum

_INT_MAX = 2**31 - 1
_FAR_FUTURE = 0x7FFFFFFF
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()

_WDAY = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_WEEKDAY = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_MONTH = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DAYZONE = -60
# Offsets in minutes west of Greenwich.
_TIMEZONES = {
    "GMT": 0,
    "UTC": 0,
    "WET": 0,
    "BST": 0 + _DAYZONE,
    "WAT": 60,
    "AST": 240,
    "ADT": 240 + _DAYZONE,
    "EST": 300,
    "EDT": 300 + _DAYZONE,
    "CST": 360,
    "CDT": 360 + _DAYZONE,
    "MST": 420,
    "MDT": 420 + _DAYZONE,
    "PST": 480,
    "PDT": 480 + _DAYZONE,
    "YST": 540,
    "YDT": 540 + _DAYZONE,
    "HST": 600,
    "HDT": 600 + _DAYZONE,
    "CAT": 600,
    "AHST": 600,
    "NT": 660,
    "IDLW": 720,
    "CET": -60,
    "MET": -60,
    "MEWT": -60,
    "MEST": -60 + _DAYZONE,
    "CEST": -60 + _DAYZONE,
    "MESZ": -60 + _DAYZONE,
    "FWT": -60,
    "FST": -60 + _DAYZONE,
    "EET": -120,
    "WAST": -420,
    "WADT": -420 + _DAYZONE,
    "CCT": -480,
    "JST": -540,
    "EAST": -600,
    "EADT": -600 + _DAYZONE,
    "GST": -600,
    "NZT": -720,
    "NZST": -720,
    "NZDT": -720 + _DAYZONE,
    "IDLE": -720,
}

_WORD = re.compile(r"[A-Za-z]{1,31}")
_CLOCK = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})")
_DIGITS = re.compile(r"\d+")


class _Expect(Enum):
    MDAY = 0
    YEAR = 1


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _check_day(word: str) -> int:
    names = _WEEKDAY if len(word) > 3 else _WDAY
    lowered = word.lower()
    return next((i for i, name in enumerate(names) if name.lower() == lowered), -1)


def _check_month(word: str) -> int:
    lowered = word.lower()
    return next((i for i, name in enumerate(_MONTH) if name.lower() == lowered), -1)


def _check_tz(word: str) -> int:
    offset = _TIMEZONES.get(word.upper())
    return -1 if offset is None else offset * 60


def parse_http_date(text: str | None) -> int:
    """Parse an HTTP date into seconds since the epoch.

    Accepts RFC 1123, RFC 850, asctime and ``YYYYMMDD`` forms with named or
    numeric zones. Returns 0 for empty input, -1 for an unparsable string and
    ``0x7fffffff`` for years beyond the 32-bit range.
    """
    if not text:
        return 0

    sec = minute = hour = mday = mon = year = wday = tzoff = -1
    expect = _Expect.MDAY
    pos = 0
    part = 0
    length = len(text)

    while pos < length and part < 6:
        found = False
        while pos < length and not (text[pos].isascii() and text[pos].isalnum()):
            pos += 1

        if pos < length and _is_alpha(text[pos]):
            word = _WORD.match(text, pos).group()
            if wday == -1:
                wday = _check_day(word)
                found = wday != -1
            if not found and mon == -1:
                mon = _check_month(word)
                found = mon != -1
            if not found and tzoff == -1:
                tzoff = _check_tz(word)
                found = tzoff != -1
            if not found:
                return -1
            pos += len(word)
        elif pos < length and _is_digit(text[pos]):
            clock = _CLOCK.match(text, pos)
            if sec == -1 and clock:
                hour, minute, sec = (int(g) for g in clock.groups())
                pos += 8
                found = True
            else:
                digits = _DIGITS.match(text, pos).group()
                val = int(digits)
                width = len(digits)

                if (
                    tzoff == -1
                    and width == 4
                    and val < 1300
                    and pos > 0
                    and text[pos - 1] in "+-"
                ):
                    found = True
                    tzoff = (val // 100 * 60 + val % 100) * 60
                    if text[pos - 1] == "+":
                        tzoff = -tzoff

                if width == 8 and year == -1 and mon == -1 and mday == -1:
                    found = True
                    year = val // 10000
                    mon = (val % 10000) // 100 - 1
                    mday = val % 100

                if not found and expect is _Expect.MDAY and mday == -1:
                    if 0 < val < 32:
                        mday = val
                        found = True
                    expect = _Expect.YEAR

                if not found and expect is _Expect.YEAR and year == -1:
                    year = val
                    found = True
                    if year > 1970:
                        year -= 1900
                    if mday == -1:
                        expect = _Expect.MDAY

                if not found:
                    return -1
                pos += width
        part += 1

    if sec == -1:
        sec = minute = hour = 0

    if -1 in (mday, mon, year):
        return -1

    if year > 2037:
        return _FAR_FUTURE

    full_year = year + 1900 + mon // 12
    days = date(full_year, mon % 12 + 1, 1).toordinal() - _EPOCH_ORDINAL + mday - 1
    seconds = days * 86400 + hour * 3600 + minute * 60 + sec
    return seconds + (tzoff if tzoff != -1 else 0)


def adjust(timestamp: int, seconds: int) -> int:
    """Move ``timestamp`` by ``seconds``; 0 for a -1 input, -1 on overflow."""
    if timestamp == -1:
        return 0
    if seconds > _INT_MAX - time.localtime(timestamp).tm_sec:
        return -1
    return timestamp + seconds


def _from_timestamp(seconds: int) -> datetime | None:
    try:
        return _EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


def _iso(moment: datetime) -> str:
    return (
        f"{_WDAY[moment.weekday()]}, {moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


class HttpDate:
    """A point in time taken from an HTTP header, or an entity tag.

    ``moment`` is the UTC time, or ``None`` for an entity tag.
    """

    def __init__(self, text: str | None = None, etag: str | None = None) -> None:
        self.etag = etag
        self.moment: datetime | None
        if etag is not None:
            self.moment = None
        elif text is None:
            self.moment = datetime.now(timezone.utc).replace(microsecond=0)
        else:
            self.moment = _from_timestamp(parse_http_date(text))

    @classmethod
    def from_etag(cls, etag: str | None) -> "HttpDate":
        """Wrap an entity tag so it can be stored alongside dates."""
        return cls(etag="" if etag is None else etag)

    def rfc850(self) -> str:
        """Render the date for an ``If-Modified-Since`` header.

        The weekday is looked up by days since Sunday and the year is given
        as years since 1900, exactly as the header has always been written.
        Returns an empty string when there is no date.
        """
        moment = self.moment
        if moment is None or moment.year == 1900:
            return ""
        day_name = _WDAY[(moment.weekday() + 1) % 7]
        return (
            f"{day_name}, {moment.day} {_MONTH[moment.month - 1]} {moment.year - 1900} "
            f"{moment.hour}:{moment.minute}:{moment.second} GMT"
        )

    def expired(self) -> bool:
        """True when the date lies in the past or there is no date at all."""
        if self.moment is None:
            return True
        return int(self.moment.timestamp()) < int(time.time())

    def stamp(self) -> str:
        """A bracketed timestamp for prefixing log lines."""
        if self.moment is None:
            return ""
        return f"[{_iso(self.moment)}] "

    def __str__(self) -> str:
        if self.etag is not None:
            return self.etag
        if self.moment is None:
            return ""
        return f"{_iso(self.moment)} "