"""
=============================================================================
HTTP RESPONSE
=============================================================================

In-memory model of an HTTP response.

    ┌─ Response ─────────────────────────────────────────────────────────┐
    │                                                                     │
    │   status_code        : int           401                           │
    │   cookies            : [SetCookie]   session=1234; Max-Age=3600    │
    │   auth_headers       : [str]         Basic realm="api"             │
    │   proxy_auth_headers : [str]         Basic realm="proxy"           │
    │   message            : HttpMessage   headers + body                │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

    response = (Response.with_status(HTTPStatus.UNAUTHORIZED)
        .insert_auth_header('Basic realm="api"')
        .insert_cookie(SetCookie("session", "1234", max_age=timedelta(hours=1)))
        .set_json({"error": "Unauthorized"}))

=============================================================================
WHY LISTS, NOT MAPS?
=============================================================================

Set-Cookie, WWW-Authenticate and Proxy-Authenticate are the headers that
may appear several times in one response, one directive per line, and
the order can matter (clients try auth challenges in order). So they are
kept out of the HeaderMap, in append-only lists:

    Set-Cookie: session=1234; Path=/
    Set-Cookie: Session=3456; Path=/admin     ← different case, kept as-is

No deduplication and no case folding is applied to cookie names.

=============================================================================
"""

import copy
from typing import List, Optional, Tuple

from .config import MessageConfig
from .cookies import SetCookie
from .message import HttpMessage, MessageDelegate
from .status_codes import HTTPStatus


MAX_STATUS_CODE = 0xFFFF


class Response(MessageDelegate):
    """
    An HTTP response: status code, Set-Cookie directives, authentication
    challenges, headers and body.

    Only the status code is required; it is not checked against the list
    of assigned codes, so Response(299) is fine.
    """

    def __init__(self, status_code: int, config: Optional[MessageConfig] = None):
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            raise TypeError(f"Status code must be an int, got {status_code!r}")
        if not 0 <= status_code <= MAX_STATUS_CODE:
            raise ValueError(f"Status code out of range: {status_code}")

        self._status_code = int(status_code)
        self._cookies: List[SetCookie] = []
        self._auth: List[str] = []
        self._proxy_auth: List[str] = []
        self._message = HttpMessage(config)

    @classmethod
    def with_status(cls, status_code: int, config: Optional[MessageConfig] = None) -> "Response":
        return cls(status_code, config)

    # =========================================================================
    # STATUS
    # =========================================================================

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def status(self) -> Optional[HTTPStatus]:
        """The matching HTTPStatus member, or None for unlisted codes."""
        return HTTPStatus.lookup(self._status_code)

    @property
    def reason_phrase(self) -> str:
        status = self.status
        return status.phrase if status is not None else "Unknown"

    # =========================================================================
    # SET-COOKIE
    # =========================================================================

    def insert_cookie(self, cookie: SetCookie) -> "Response":
        """Append a Set-Cookie directive. Never replaces an existing one."""
        self._cookies.append(cookie)
        return self

    @property
    def cookies(self) -> Tuple[SetCookie, ...]:
        """Set-Cookie directives in insertion order."""
        return tuple(self._cookies)

    def set_cookie_headers(self) -> List[str]:
        """One Set-Cookie header value per cookie, in insertion order."""
        return [cookie.to_header_value() for cookie in self._cookies]

    # =========================================================================
    # AUTHENTICATION CHALLENGES
    # =========================================================================

    def insert_auth_header(self, challenge: str) -> "Response":
        """Append a WWW-Authenticate challenge, e.g. 'Basic realm="api"'."""
        self._auth.append(challenge)
        return self

    @property
    def auth_headers(self) -> Tuple[str, ...]:
        return tuple(self._auth)

    def insert_proxy_auth_header(self, challenge: str) -> "Response":
        """Append a Proxy-Authenticate challenge."""
        self._proxy_auth.append(challenge)
        return self

    @property
    def proxy_auth_headers(self) -> Tuple[str, ...]:
        return tuple(self._proxy_auth)

    # =========================================================================
    # MISC
    # =========================================================================

    def copy(self) -> "Response":
        """An independent deep copy, e.g. to hand to another thread."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        return f"{self._status_code} {self.reason_phrase}\n" + self._header_lines()

    def __repr__(self) -> str:
        return f"<Response {self._status_code}>"
