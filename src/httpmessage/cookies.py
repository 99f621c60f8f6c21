"""
=============================================================================
COOKIES
=============================================================================

Both directions of HTTP cookies live here:

    CLIENT → SERVER                        SERVER → CLIENT
    ────────────────                       ────────────────
    Cookie: session=abc; theme=dark        Set-Cookie: session=abc; Max-Age=3600; HttpOnly
            │                                          │
            ▼                                          ▼
    parse_cookie_header()                  SetCookie / SetCookie.parse()
    format_cookie_header()                 SetCookie.to_header_value()
    (Request.cookies - a KeyValueMap)      (Response.cookies - an ordered list)

Request cookies are plain case-sensitive name/value pairs. Response
cookies are directives with attributes, and a response may legitimately
carry several with the same name (different Path or Domain), so they are
kept as an ordered list rather than a map.

=============================================================================
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Iterable, Optional, Tuple

from .headers import KeyValueMap, ascii_lower


class CookieParseError(ValueError):
    """Raised when a Set-Cookie header value cannot be parsed."""


class SameSite(str, Enum):
    """Values of the SameSite cookie attribute."""

    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"


@dataclass
class SetCookie:
    """
    A Set-Cookie directive attached to a Response.

    Attributes are optional and only rendered when set:

        cookie = SetCookie("session", "1234", max_age=timedelta(hours=1))
        cookie.to_header_value()
        # 'session=1234; Max-Age=3600'
    """

    name: str
    value: str
    max_age: Optional[timedelta] = None
    expires: Optional[datetime] = None
    domain: Optional[str] = None
    path: Optional[str] = None
    secure: bool = False
    http_only: bool = False
    same_site: Optional[SameSite] = None

    def to_header_value(self) -> str:
        """Serialize to a Set-Cookie header value string."""
        parts = [f"{self.name}={self.value}"]
        if self.max_age is not None:
            parts.append(f"Max-Age={int(self.max_age.total_seconds())}")
        if self.expires is not None:
            parts.append(f"Expires={format_http_date(self.expires)}")
        if self.domain:
            parts.append(f"Domain={self.domain}")
        if self.path:
            parts.append(f"Path={self.path}")
        if self.secure:
            parts.append("Secure")
        if self.http_only:
            parts.append("HttpOnly")
        if self.same_site is not None:
            parts.append(f"SameSite={SameSite(self.same_site).value}")
        return "; ".join(parts)

    @classmethod
    def parse(cls, header_value: str) -> "SetCookie":
        """
        Parse a Set-Cookie header value.

        Attribute names are matched case-insensitively; unknown attributes
        and attributes with unparseable values are ignored, as user agents
        do (RFC 6265 section 5.2).

        Raises:
            CookieParseError: If there is no name=value pair.
        """
        pair, *attributes = header_value.split(";")
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise CookieParseError(f"Invalid Set-Cookie value: {header_value!r}")

        cookie = cls(name=name, value=value.strip())

        for attribute in attributes:
            key, _, arg = attribute.partition("=")
            key = ascii_lower(key.strip())
            arg = arg.strip()

            if key == "max-age":
                try:
                    cookie.max_age = timedelta(seconds=int(arg))
                except (ValueError, OverflowError):
                    continue
            elif key == "expires":
                try:
                    cookie.expires = parsedate_to_datetime(arg)
                except (TypeError, ValueError):
                    continue
            elif key == "domain":
                cookie.domain = arg or None
            elif key == "path":
                cookie.path = arg or None
            elif key == "secure":
                cookie.secure = True
            elif key == "httponly":
                cookie.http_only = True
            elif key == "samesite":
                for option in SameSite:
                    if ascii_lower(option.value) == ascii_lower(arg):
                        cookie.same_site = option

        return cookie


def parse_cookie_header(header: str) -> KeyValueMap:
    """
    Parse a Cookie request header value into a KeyValueMap.

    Pairs without "=" are skipped. Later duplicates win.

        parse_cookie_header("session=abc; theme=dark")
        # KeyValueMap({'session': 'abc', 'theme': 'dark'})
    """
    cookies = KeyValueMap()
    if not header:
        return cookies
    for pair in header.split(";"):
        key, sep, value = pair.strip().partition("=")
        if sep and key.strip():
            cookies.insert(key.strip(), value.strip())
    return cookies


def format_cookie_header(pairs: Iterable[Tuple[str, str]]) -> str:
    """Render name/value pairs as a Cookie request header value."""
    return "; ".join(f"{name}={value}" for name, value in pairs)


def format_http_date(dt: datetime) -> str:
    """
    Format a datetime as an HTTP-date (RFC 7231 IMF-fixdate).

    Format: Day, DD Mon YYYY HH:MM:SS GMT
    Example: Wed, 01 Jan 2026 12:00:00 GMT

    Naive datetimes are taken to be UTC already; aware ones are converted.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    days = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

    return (
        f"{days[dt.weekday()]}, "
        f"{dt.day:02d} {months[dt.month - 1]} {dt.year} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d} GMT"
    )
