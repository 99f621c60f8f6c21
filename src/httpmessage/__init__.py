"""
=============================================================================
HTTPMESSAGE - In-Memory HTTP Requests and Responses
=============================================================================

Value objects for HTTP messages: method, target, headers, query
parameters, cookies, status code and body. No sockets, no wire format:
a transport serializes these onto the wire or builds them from it.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpmessage/
    ├── __init__.py          # This file - package exports
    ├── config.py            # MessageConfig dataclass
    ├── headers.py           # HeaderMap, KeyValueMap, CaseInsensitiveKey
    ├── body.py              # MessageBody tagged value
    ├── message.py           # HttpMessage base + JSON codec
    ├── request.py           # Request, HttpMethod
    ├── response.py          # Response
    ├── cookies.py           # SetCookie, Cookie header helpers
    ├── urls.py              # Request target parsing
    └── status_codes.py      # HTTPStatus enum

=============================================================================
QUICK START
=============================================================================

    from datetime import timedelta
    from httpmessage import Request, Response, SetCookie, HTTPStatus

    request = (Request.put("https://service.com/users/")
        .insert_param("client_id", "1234")
        .insert_header("Accept", "application/json")
        .insert_cookie("session", "1234")
        .set_json({"name": "John", "surname": "Smith"}))

    request.get_header("content-type")   # "application/json"
    request.json()                       # {"name": "John", "surname": "Smith"}

    response = (Response.with_status(HTTPStatus.OK)
        .insert_cookie(SetCookie("session", "1234", max_age=timedelta(hours=1)))
        .set_json({"id": 1}))

=============================================================================
"""

__version__ = "1.0.0"

from .body import BodyKind, MessageBody
from .config import DEFAULT_CONFIG, MessageConfig
from .cookies import (
    CookieParseError,
    SameSite,
    SetCookie,
    format_cookie_header,
    format_http_date,
    parse_cookie_header,
)
from .headers import (
    ACCEPT,
    APPLICATION_JSON,
    CONTENT_TYPE,
    COOKIE,
    PROXY_AUTHENTICATE,
    SET_COOKIE,
    WWW_AUTHENTICATE,
    CaseInsensitiveKey,
    HeaderMap,
    KeyValueMap,
)
from .message import BodyDecodeError, HttpMessage
from .request import HttpMethod, Request
from .response import Response
from .status_codes import HTTPStatus
from .urls import URLParseError, parse_url

__all__ = [
    # Messages
    "HttpMessage",
    "Request",
    "Response",
    "HttpMethod",

    # Containers
    "CaseInsensitiveKey",
    "HeaderMap",
    "KeyValueMap",
    "MessageBody",
    "BodyKind",

    # Cookies
    "SetCookie",
    "SameSite",
    "parse_cookie_header",
    "format_cookie_header",
    "format_http_date",

    # URLs
    "parse_url",

    # Errors
    "BodyDecodeError",
    "CookieParseError",
    "URLParseError",

    # Configuration
    "MessageConfig",
    "DEFAULT_CONFIG",

    # Constants
    "HTTPStatus",
    "CONTENT_TYPE",
    "ACCEPT",
    "COOKIE",
    "SET_COOKIE",
    "WWW_AUTHENTICATE",
    "PROXY_AUTHENTICATE",
    "APPLICATION_JSON",

    "__version__",
]
