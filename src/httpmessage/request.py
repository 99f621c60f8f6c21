"""
=============================================================================
HTTP REQUEST
=============================================================================

In-memory model of an HTTP request, built fluently by a client before a
transport sends it, or built by a transport after it parsed one.

    ┌─ Request ──────────────────────────────────────────────────────────┐
    │                                                                     │
    │   method  : HttpMethod       PUT                                   │
    │   target  : str              "https://service.com/users/"          │
    │   url     : SplitResult|None scheme=https netloc=service.com ...   │
    │   params  : KeyValueMap      client_id=1234                        │
    │   cookies : KeyValueMap      session=abcd                          │
    │   message : HttpMessage      headers + body                        │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

    request = (Request.put("https://service.com/users/")
        .insert_param("client_id", "1234")
        .insert_header("Accept", "application/json")
        .insert_cookie("session", "abcd")
        .set_json({"name": "John", "surname": "Smith"}))

=============================================================================
LENIENT TARGETS
=============================================================================

The target string is stored exactly as given and parsed ONCE, at
construction. If it is not a valid URL the request is still built: url
is None and target holds the raw string. Targets may legitimately be
templates ("{base}/users/{id}") that get substituted later, and callers
can always inspect the original text.

    Request.get("http://example.com/user").url   →  SplitResult(...)
    Request.get("http//example.com/user").url    →  None

Header names are case-insensitive. Parameter and cookie names are NOT:
"id" and "ID" are two different parameters.

=============================================================================
"""

import copy
import logging
from enum import Enum
from typing import Optional, Union
from urllib.parse import SplitResult

from .config import MessageConfig
from .cookies import format_cookie_header
from .headers import KeyValueMap
from .message import HttpMessage, MessageDelegate
from .urls import URLParseError, parse_url


logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """
    HTTP request methods (RFC 7231, plus PATCH from RFC 5789).

        ┌──────────┬────────────┬────────────────────────────────────┐
        │  Method  │ Idempotent │ Description                        │
        ├──────────┼────────────┼────────────────────────────────────┤
        │  GET     │    Yes     │ Retrieve resource                  │
        │  HEAD    │    Yes     │ GET without body (metadata only)   │
        │  POST    │    No      │ Create resource / submit data      │
        │  PUT     │    Yes     │ Replace entire resource            │
        │  DELETE  │    Yes     │ Delete resource                    │
        │  CONNECT │    No      │ Establish tunnel (HTTPS proxy)     │
        │  OPTIONS │    Yes     │ Get allowed methods (CORS)         │
        │  TRACE   │    Yes     │ Echo request (debugging)           │
        │  PATCH   │    No      │ Partial update                     │
        └──────────┴────────────┴────────────────────────────────────┘
    """

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: Union["HttpMethod", str]) -> "HttpMethod":
        """
        Accept a member or a method name in any case.

        Raises:
            ValueError: For names that are not HTTP methods.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name.upper())
        except ValueError:
            raise ValueError(f"Invalid method: {name}") from None


class Request(MessageDelegate):
    """
    An HTTP request: method, target, params, cookies, headers and body.

    Build one with a method-named constructor:

        Request.get(target)      Request.post(target)     Request.put(target)
        Request.delete(target)   Request.head(target)     Request.options(target)
        Request.patch(target)    Request.trace(target)    Request.connect(target)

    or generically with Request.for_method(method, target).

    method, target and url are fixed at construction. Everything else is
    mutated through chainable insert_*/set_* methods.
    """

    def __init__(
        self,
        method: Union[HttpMethod, str],
        target: str,
        config: Optional[MessageConfig] = None,
    ):
        self._method = HttpMethod.parse(method)
        self._target = target
        self._url = self._parse_target(target)
        self._params = KeyValueMap()
        self._cookies = KeyValueMap()
        self._message = HttpMessage(config)

    @staticmethod
    def _parse_target(target: str) -> Optional[SplitResult]:
        try:
            return parse_url(target)
        except URLParseError as e:
            logger.debug(f"Keeping unparsed request target: {e}")
            return None

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def for_method(
        cls,
        method: Union[HttpMethod, str],
        target: str,
        config: Optional[MessageConfig] = None,
    ) -> "Request":
        return cls(method, target, config)

    @classmethod
    def get(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.GET, target, config)

    @classmethod
    def head(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.HEAD, target, config)

    @classmethod
    def post(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.POST, target, config)

    @classmethod
    def put(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.PUT, target, config)

    @classmethod
    def delete(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.DELETE, target, config)

    @classmethod
    def connect(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.CONNECT, target, config)

    @classmethod
    def options(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.OPTIONS, target, config)

    @classmethod
    def trace(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.TRACE, target, config)

    @classmethod
    def patch(cls, target: str, config: Optional[MessageConfig] = None) -> "Request":
        return cls(HttpMethod.PATCH, target, config)

    # =========================================================================
    # REQUEST LINE
    # =========================================================================

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def target(self) -> str:
        """The target exactly as passed to the constructor."""
        return self._target

    @property
    def url(self) -> Optional[SplitResult]:
        """The parsed target, or None if it was not a valid URL."""
        return self._url

    # =========================================================================
    # QUERY PARAMETERS (case-sensitive)
    # =========================================================================

    @property
    def params(self) -> KeyValueMap:
        return self._params

    def insert_param(self, key: str, value: str) -> "Request":
        """Set a query parameter, replacing any value under the same exact key."""
        self._params.insert(key, value)
        return self

    def get_param(self, key: str) -> Optional[str]:
        return self._params.get(key)

    # =========================================================================
    # COOKIES (case-sensitive)
    # =========================================================================

    @property
    def cookies(self) -> KeyValueMap:
        return self._cookies

    def insert_cookie(self, key: str, value: str) -> "Request":
        """Set a cookie, replacing any value under the same exact name."""
        self._cookies.insert(key, value)
        return self

    def get_cookie(self, key: str) -> Optional[str]:
        return self._cookies.get(key)

    def cookie_header(self) -> Optional[str]:
        """
        The cookies rendered as a Cookie header value, or None if there
        are none.

            Request.get(url).insert_cookie("a", "1").insert_cookie("b", "2")
            # .cookie_header() → "a=1; b=2"
        """
        if not self._cookies:
            return None
        return format_cookie_header(self._cookies.iter())

    # =========================================================================
    # MISC
    # =========================================================================

    def copy(self) -> "Request":
        """An independent deep copy, e.g. to hand to another thread."""
        return copy.deepcopy(self)

    def __str__(self) -> str:
        # Debug rendering, not the wire format.
        return f"{self._method} {self._target}\n" + self._header_lines()

    def __repr__(self) -> str:
        return f"<Request {self._method.value} {self._target!r}>"
