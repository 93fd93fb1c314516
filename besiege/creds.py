"""Login credentials given as ``username:password[:realm]``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_REALM = "any"


@dataclass
class Credentials:
    """A username and password, valid for one realm under one scheme."""

    scheme: Any
    username: str
    password: str
    realm: str = DEFAULT_REALM


def parse_credentials(scheme: Any, text: str) -> Credentials:
    """Split ``username:password:realm`` into :class:`Credentials`.

    The realm takes everything after the second colon and defaults to
    ``"any"`` when there is no second colon. A missing password is empty.
    """
    parts = text.split(":", 2)
    username = parts[0]
    password = parts[1] if len(parts) > 1 else ""
    realm = parts[2] if len(parts) > 2 else DEFAULT_REALM
    return Credentials(scheme=scheme, username=username, password=password, realm=realm)