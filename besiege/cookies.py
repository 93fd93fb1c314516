"""A jar of cookies shared by the simulated users of a run."""

from __future__ import annotations

import os
import sys
import threading
import time
from dataclasses import dataclass
from pathlib import Path

from besiege.cookie import Cookie, CookieParseError, parse_cookie

_MAX_COOKIES_SIZE = 81920
_MAX_LINE = 4096
_BANNER = (
    "#\n",
    "# Cookies file. You may edit this file to add cookies\n",
    "# manually but comments and formatting will be removed.    \n",
    "# All cookies that expire in the future will be preserved. \n",
    "# ---------------------------------------------------------\n",
)


def default_cookie_file() -> Path:
    """The cookie file kept in the user's home directory."""
    return Path(os.environ.get("HOME", "")) / ".besiege" / "cookies.txt"


@dataclass
class _Entry:
    thread_id: int
    cookie: Cookie


def _bare(domain: str | None) -> str:
    """The domain without its leading dot, for suffix matching."""
    domain = domain or ""
    return domain[1:] if domain.startswith(".") else domain


class CookieJar:
    """Cookies filed by the thread that received them.

    Each thread sees only its own cookies unless ``shared`` is set, in which
    case every cookie matching the host is sent. Leaving the jar as a
    context manager saves the persistent cookies to ``path``.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None, shared: bool = False) -> None:
        self.path = Path(path) if path is not None else default_cookie_file()
        self.shared = shared
        self._entries: list[_Entry] = []
        self._lock = threading.RLock()

    def add(self, text: str | None, host: str) -> bool:
        """Store the cookie from a ``Set-Cookie`` value received from ``host``.

        A cookie of the same name already held by this thread has its value
        replaced. Returns False when the header holds no named cookie.
        """
        try:
            cookie = parse_cookie(text, host)
        except CookieParseError:
            return False
        if cookie.name is None or cookie.value is None:
            return False

        thread_id = threading.get_ident()
        wanted = cookie.name.lower()
        with self._lock:
            valid = False
            for entry in self._entries:
                if host.endswith(_bare(entry.cookie.domain)):
                    valid = True
                held = entry.cookie
                if valid and entry.thread_id == thread_id and (held.name or "").lower() == wanted:
                    held.reset_value(cookie.value)
                    return True
            self._entries.append(_Entry(thread_id, cookie))
        return True

    def delete(self, name: str) -> bool:
        """Remove this thread's cookie called ``name``; True if one went."""
        thread_id = threading.get_ident()
        wanted = name.lower()
        with self._lock:
            for position, entry in enumerate(self._entries):
                if entry.thread_id == thread_id and (entry.cookie.name or "").lower() == wanted:
                    del self._entries[position]
                    return True
        return False

    def delete_all(self) -> bool:
        """Remove every cookie held by this thread."""
        thread_id = threading.get_ident()
        with self._lock:
            self._entries = [e for e in self._entries if e.thread_id != thread_id]
        return True

    def header(self, host: str) -> str:
        """The ``Cookie`` request header for ``host``, or an empty string.

        Expired persistent cookies met on the way are dropped.
        """
        now = int(time.time())
        thread_id = threading.get_ident()
        parts: list[str] = []
        with self._lock:
            for entry in list(self._entries):
                if not (self.shared or entry.thread_id == thread_id):
                    continue
                cookie = entry.cookie
                if not host.endswith(_bare(cookie.domain)):
                    continue
                if cookie.expires <= now and not cookie.session:
                    self.delete(cookie.name or "")
                    continue
                parts.append(f"{cookie.name}={cookie.value}")
        value = ";".join(parts)[: _MAX_COOKIES_SIZE - 10]
        return f"Cookie: {value}\r\n" if value else ""

    def describe(self) -> str:
        """A listing of every cookie in the jar."""
        with self._lock:
            entries = list(self._entries)
        return "".join(
            f"{e.thread_id}: NAME: {e.cookie.name}\n"
            f"   VALUE: {e.cookie.value}\n"
            f"   Expires: {e.cookie.expires_string()}\n"
            for e in entries
        )

    def save(self) -> bool:
        """Write the unexpired persistent cookies to the cookie file."""
        now = int(time.time())
        try:
            with open(self.path, "w", encoding="utf-8") as handle:
                handle.writelines(_BANNER)
                with self._lock:
                    for entry in self._entries:
                        cookie = entry.cookie
                        if cookie.session or cookie.expires < now:
                            continue
                        line = str(cookie)
                        if line:
                            handle.write(f"{entry.thread_id} | {line}\n")
        except OSError:
            print(f"ERROR: Unable to open cookies file: {self.path}", file=sys.stderr)
            return False
        return True

    def load(self) -> list[list[str]]:
        """Read the cookie file, grouping cookie strings by their owner.

        Groups come in the order their owner first appears; duplicates within
        a group are dropped. Comments, blank lines and overlong lines are
        skipped. A missing file gives an empty list.
        """
        try:
            handle = open(self.path, encoding="utf-8", errors="replace")
        except OSError:
            return []

        groups: dict[str, dict[str, None]] = {}
        with handle:
            for raw in handle:
                line = raw[:-1] if raw.endswith("\n") else raw
                if len(line) >= _MAX_LINE - 1:
                    continue
                line = line.split("#", 1)[0].rstrip()
                if len(line) <= 1:
                    continue
                owner, sep, value = line.partition("|")
                if not sep:
                    continue
                groups.setdefault(owner.strip(), {})[value.strip()] = None
        return [list(values) for values in groups.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __enter__(self) -> "CookieJar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.save()