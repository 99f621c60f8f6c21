"""
=============================================================================
REQUEST TARGET PARSING
=============================================================================

Turns a request target string into a structured URL, or reports that it
cannot. Request construction uses this leniently: a target that does not
parse is kept as a plain string and Request.url is None.

=============================================================================
WHAT COUNTS AS A VALID TARGET
=============================================================================

urllib.parse.urlsplit() almost never fails - it happily splits
"http//example.com/user" into an empty scheme and a path. We layer the
checks an absolute-URL parser would make on top of it:

    ┌────────────────────────────────┬──────────┬──────────────────────────┐
    │  Target                        │  Valid?  │  Why                     │
    ├────────────────────────────────┼──────────┼──────────────────────────┤
    │  http://example.com/user       │   yes    │                          │
    │  http//example.com/user        │   no     │ no scheme (missing ':')  │
    │  /users/123                    │   no     │ relative, no scheme      │
    │  http:///path                  │   no     │ http needs a host        │
    │  http://example.com:99999/     │   no     │ port out of range        │
    │  http://[::1/                  │   no     │ unbalanced IPv6 bracket  │
    │  mailto:user@example.com       │   yes    │ non-special scheme       │
    │  http://exa mple.com/          │   no     │ whitespace in host       │
    │  http://example.com/my file    │   yes    │ space sent as %20        │
    └────────────────────────────────┴──────────┴──────────────────────────┘

Leading and trailing spaces and C0 control characters are stripped first,
the way browsers do.

=============================================================================
"""

import re
from urllib.parse import SplitResult, quote, urlsplit


class URLParseError(ValueError):
    """Raised when a target string is not a valid absolute URL."""

    def __init__(self, message: str, target: str):
        super().__init__(message)
        self.target = target


# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*:")

# Schemes that always carry an authority (host) component.
SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_STRIP_CHARS = "".join(chr(c) for c in range(0x21))
_WHITESPACE = re.compile(r"\s")


def parse_url(target: str) -> SplitResult:
    """
    Parse target as an absolute URL.

    Whitespace is rejected in the scheme and authority. Spaces in the path,
    query or fragment are accepted and percent-encoded in the result.

    Args:
        target: The raw request target.

    Returns:
        The urllib SplitResult for the (stripped) target.

    Raises:
        URLParseError: If the target is not a valid absolute URL.
    """
    candidate = target.strip(_STRIP_CHARS)

    if not SCHEME_PATTERN.match(candidate):
        raise URLParseError(f"Invalid URL: missing scheme in {target!r}", target)

    try:
        parts = urlsplit(candidate)
    except ValueError as e:
        raise URLParseError(f"Invalid URL {target!r}: {e}", target) from e

    if _WHITESPACE.search(parts.netloc):
        raise URLParseError(f"Invalid URL: whitespace in host of {target!r}", target)

    try:
        # .port parses lazily and raises ValueError for bad ports
        parts.port
    except ValueError as e:
        raise URLParseError(f"Invalid URL {target!r}: {e}", target) from e

    if parts.scheme in SPECIAL_SCHEMES and not parts.hostname:
        raise URLParseError(f"Invalid URL: missing host in {target!r}", target)

    return parts._replace(
        path=_encode_whitespace(parts.path),
        query=_encode_whitespace(parts.query),
        fragment=_encode_whitespace(parts.fragment),
    )


def _encode_whitespace(component: str) -> str:
    return _WHITESPACE.sub(lambda m: quote(m.group()), component)
