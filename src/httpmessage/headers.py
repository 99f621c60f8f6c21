"""
=============================================================================
HEADER, PARAMETER AND COOKIE MAPS
=============================================================================

Key/value containers used by HTTP messages.

=============================================================================
CASE SENSITIVITY RULES
=============================================================================

    ┌───────────────────┬──────────────────┬────────────────────────────────┐
    │  Container        │  Key identity    │  Example                       │
    ├───────────────────┼──────────────────┼────────────────────────────────┤
    │  HeaderMap        │  case-INsensitive│  "Content-Type" == "content-type"
    │  KeyValueMap      │  case-sensitive  │  "id" != "ID"                  │
    │  (params, cookies)│                  │                                │
    └───────────────────┴──────────────────┴────────────────────────────────┘

Header names are case-insensitive per RFC 7230, but we still want to hand
back the name exactly as the caller wrote it. So instead of lowercasing
keys at insert time (which loses the original spelling), HeaderMap keys
the dictionary by a CaseInsensitiveKey and stores the original key next
to the value:

    _store = {
        CaseInsensitiveKey("Content-Type"): ("Content-Type", "application/json"),
        CaseInsensitiveKey("Accept"):       ("Accept", "text/html"),
    }

    headers.get("CONTENT-TYPE")   →  "application/json"
    list(headers)                 →  ["Content-Type", "Accept"]

Re-inserting under a different casing replaces both the value and the
stored key spelling (last write wins).

=============================================================================
"""

from collections.abc import Hashable, Iterable, Iterator, Mapping, MutableMapping
from typing import Dict, Optional, Tuple, Union


# =============================================================================
# WELL-KNOWN HEADER NAMES AND VALUES
# =============================================================================

CONTENT_TYPE = "Content-Type"
ACCEPT = "Accept"
COOKIE = "Cookie"
SET_COOKIE = "Set-Cookie"
WWW_AUTHENTICATE = "WWW-Authenticate"
PROXY_AUTHENTICATE = "Proxy-Authenticate"

APPLICATION_JSON = "application/json"


# Only A-Z are folded; non-ASCII characters compare exactly.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def ascii_lower(value: str) -> str:
    """Lowercase the ASCII letters of value, leaving everything else alone."""
    return value.translate(_ASCII_LOWER)


class CaseInsensitiveKey:
    """
    A string wrapper whose equality and hash ignore ASCII case.

        >>> CaseInsensitiveKey("Content-Type") == CaseInsensitiveKey("content-type")
        True
        >>> str(CaseInsensitiveKey("Content-Type"))
        'Content-Type'
    """

    __slots__ = ("_value", "_folded")

    def __init__(self, value: str):
        self._value = value
        self._folded = ascii_lower(value)

    @property
    def value(self) -> str:
        """The original, unfolded string."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CaseInsensitiveKey):
            return self._folded == other._folded
        # Not equal to plain str: a str hashes on its own casing.
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._folded)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"CaseInsensitiveKey({self._value!r})"


PairsOrMapping = Union[Mapping[str, str], Iterable[Tuple[str, str]], None]


class KeyValueMap(MutableMapping):
    """
    Mapping of case-sensitive string keys to string values.

    Used for query parameters and request cookies. At most one entry per
    exact key; inserting an existing key overwrites its value.

    Besides the normal dict-like interface, it offers the explicit
    operations HTTP message code tends to want:

        params = KeyValueMap()
        params.insert("id", "1234")       # False - new entry
        params.insert("id", "5678")       # True  - replaced
        params.insert("ID", "0000")       # False - different key
        params.get("id")                  # "5678"
        params.contains_key("Id")         # False

    Subclasses change key identity by overriding _identity().
    """

    def __init__(self, data: PairsOrMapping = None):
        # identity -> (stored key, value)
        self._store: Dict[Hashable, Tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def _identity(self, key: str) -> Hashable:
        return key

    # =========================================================================
    # EXPLICIT OPERATIONS
    # =========================================================================

    def insert(self, key: str, value: str) -> bool:
        """
        Store value under key.

        Returns:
            True if an entry with the same identity existed and was
            overwritten, False otherwise.
        """
        identity = self._identity(key)
        existed = identity in self._store
        if existed:
            # Drop the old entry so the new key spelling is the one kept.
            del self._store[identity]
        self._store[identity] = (key, value)
        return existed

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        entry = self._store.get(self._identity(key))
        return entry[1] if entry is not None else default

    def contains_key(self, key: str) -> bool:
        return self._identity(key) in self._store

    def iter(self) -> Iterator[Tuple[str, str]]:
        """Fresh iterator of (key, value) pairs over the current entries."""
        return iter(list(self._store.values()))

    def copy(self):
        return self.__class__(self.iter())

    # =========================================================================
    # MutableMapping PROTOCOL
    # =========================================================================

    def __getitem__(self, key: str) -> str:
        return self._store[self._identity(key)][1]

    def __setitem__(self, key: str, value: str) -> None:
        self.insert(key, value)

    def __delitem__(self, key: str) -> None:
        del self._store[self._identity(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter([key for key, _ in self._store.values()])

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.iter())!r})"


class HeaderMap(KeyValueMap):
    """
    Mapping of case-insensitive header names to string values.

    Lookups, inserts and deletes accept any casing of the name. Iteration
    yields names as spelled by their most recent insertion.

        headers = HeaderMap([("Content-Type", "text/html")])
        headers.get("content-type")                       # "text/html"
        headers.insert("CONTENT-TYPE", "application/json")  # True
        list(headers)                                     # ["CONTENT-TYPE"]
    """

    def _identity(self, key: str) -> Hashable:
        return CaseInsensitiveKey(key)
