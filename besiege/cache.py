"""A logical HTTP cache of validators: etags, modification and expiry dates."""

from __future__ import annotations

from enum import Enum

from besiege.date import HttpDate

_MAX_HEADER = 255


class CacheType(Enum):
    """The kind of validator stored, with the key prefix it is filed under."""

    ETAG = "ET_"
    LAST = "LM_"
    EXPIRES = "EX_"


class Cache:
    """Remembers validators per request; no response bodies are stored."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._entries: dict[str, HttpDate] = {}

    @staticmethod
    def _key(ctype: CacheType, request: str | None) -> str | None:
        if not request:
            return None
        return ctype.value + request

    def contains(self, ctype: CacheType, request: str | None) -> bool:
        """True when caching is on and a validator of this kind is stored."""
        if not self.enabled:
            return False
        key = self._key(ctype, request)
        return key is not None and key in self._entries

    def is_cached(self, request: str | None) -> bool:
        """True when the request has an unexpired expiry date.

        An expired entry is dropped.
        """
        key = self._key(CacheType.EXPIRES, request)
        if key is None or key not in self._entries:
            return False
        if not self._entries[key].expired():
            return True
        del self._entries[key]
        return False

    def add(self, ctype: CacheType, request: str | None, value: str | None) -> None:
        """Store a validator; an existing expiry date is never replaced."""
        key = self._key(ctype, request)
        if key is None:
            return
        if ctype is CacheType.EXPIRES:
            if key not in self._entries:
                self._entries[key] = HttpDate(value)
        elif ctype is CacheType.ETAG:
            self._entries[key] = HttpDate.from_etag(value)
        else:
            self._entries[key] = HttpDate(value)

    def get(self, ctype: CacheType, request: str | None) -> HttpDate | None:
        key = self._key(ctype, request)
        if key is None:
            return None
        return self._entries.get(key)

    def header(self, ctype: CacheType, request: str | None) -> str | None:
        """The conditional request header for a fresh cached validator.

        Returns ``None`` when nothing is cached or the entry has no
        unexpired expiry date, and an empty string when the validator is
        empty.
        """
        if not self.contains(ctype, request):
            return None
        expiry = self.get(CacheType.EXPIRES, request)
        if expiry is None or expiry.expired():
            return None
        stored = self.get(ctype, request)
        if stored is None:
            return None
        if ctype is CacheType.ETAG:
            etag = stored.etag or ""
            if not etag:
                return ""
            line = f"If-None-Match: {etag}\r\n"
        else:
            rendered = stored.rfc850()
            if not rendered:
                return ""
            line = f"If-Modified-Since: {rendered}\r\n"
        return line[:_MAX_HEADER]