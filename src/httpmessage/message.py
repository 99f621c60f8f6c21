"""
=============================================================================
HTTP MESSAGE BASE
=============================================================================

The parts every HTTP message has, whichever direction it travels:

    ┌─ HttpMessage ──────────────────────────────────────────────────────┐
    │                                                                     │
    │   headers : HeaderMap     Content-Type: application/json           │
    │                           Accept: application/json                 │
    │                                                                     │
    │   body    : MessageBody   ABSENT | SINGLE(bytes) | MULTIPART       │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

Request and Response each OWN one HttpMessage (composition, not
inheritance) and forward the header/body operations to it through
MessageDelegate. The JSON codec lives here once so request and response
bodies encode and decode identically.

=============================================================================
JSON BODIES
=============================================================================

    set_json(value)                         json()
    ───────────────                         ──────
    value                                   body bytes
      │ json.dumps(indent=4)                  │ not SINGLE?  → BodyDecodeError("empty body")
      ▼                                       │ .decode("utf-8") fails → BodyDecodeError
    text                                      ▼
      │ .encode("utf-8")                    text
      ▼                                       │ json.loads fails (or nests too deep) → BodyDecodeError
    body = SINGLE(bytes)                      ▼
    Content-Type: application/json          value

json() does not look at Content-Type: a body is JSON if it parses as JSON.

=============================================================================
"""

import json
import logging
from typing import Any, Iterator, Optional, Tuple, Union

from .body import MessageBody
from .config import DEFAULT_CONFIG, MessageConfig
from .headers import APPLICATION_JSON, CONTENT_TYPE, HeaderMap
from .status_codes import HTTPStatus


logger = logging.getLogger(__name__)

BodyData = Union[bytes, bytearray, memoryview, str]


class BodyDecodeError(ValueError):
    """
    Raised when a message body cannot be decoded as JSON.

    Carries the HTTP status a server would answer with when the body came
    from a client (400 Bad Request). The underlying UnicodeDecodeError or
    JSONDecodeError, if any, is available as __cause__.
    """

    def __init__(self, message: str, status_code: int = HTTPStatus.BAD_REQUEST):
        super().__init__(message)
        self.status_code = status_code


def _reject_constant(name: str) -> Any:
    # json.loads accepts NaN/Infinity by default; they are not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


class HttpMessage:
    """
    Headers plus body, shared by Request and Response.

    Created empty: no headers and an ABSENT body. Mutators return self so
    calls can be chained:

        message = HttpMessage()
        message.insert_header("Accept", "application/json").set_json({"a": 1})
    """

    def __init__(self, config: Optional[MessageConfig] = None):
        self._config = config or DEFAULT_CONFIG
        self._headers = HeaderMap()
        self._body = MessageBody.absent()

    @property
    def config(self) -> MessageConfig:
        return self._config

    # =========================================================================
    # HEADERS
    # =========================================================================

    @property
    def headers(self) -> HeaderMap:
        """The live header map; changes made through it are kept."""
        return self._headers

    def insert_header(self, key: str, value: str) -> "HttpMessage":
        """Set a header (case-insensitive name, last write wins)."""
        self._headers.insert(key, value)
        return self

    def get_header(self, key: str) -> Optional[str]:
        """Get a header value by name in any casing, or None."""
        return self._headers.get(key)

    def header_iter(self) -> Iterator[Tuple[str, str]]:
        return self._headers.iter()

    # =========================================================================
    # BODY
    # =========================================================================

    @property
    def body(self) -> Optional[bytes]:
        """The body buffer if the body is SINGLE, otherwise None."""
        return self._body.data if self._body.is_single else None

    @property
    def body_state(self) -> MessageBody:
        return self._body

    def set_body(self, data: BodyData) -> "HttpMessage":
        """
        Replace the body with a single buffer.

        Strings are encoded as UTF-8; bytearray and memoryview are copied.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._body = MessageBody.single(data)
        return self

    def has_body(self) -> bool:
        return not self._body.is_absent

    def has_single_body(self) -> bool:
        return self._body.is_single

    def has_multipart_body(self) -> bool:
        return self._body.is_multipart

    # =========================================================================
    # JSON CODEC
    # =========================================================================

    def set_json(self, value: Any) -> "HttpMessage":
        """
        Encode value as pretty-printed UTF-8 JSON and make it the body.

        Also sets Content-Type to application/json, replacing any previous
        value. Encoding happens first, so if value is not serializable the
        TypeError/ValueError from json propagates and the message is left
        exactly as it was.
        """
        text = json.dumps(
            value,
            indent=self._config.json_indent,
            ensure_ascii=self._config.json_ensure_ascii,
            sort_keys=self._config.json_sort_keys,
            allow_nan=False,
        )
        self._body = MessageBody.single(text.encode("utf-8"))
        self._headers.insert(CONTENT_TYPE, APPLICATION_JSON)
        return self

    def json(self) -> Any:
        """
        Decode the body as JSON.

        Returns:
            The parsed value (dict, list, str, int, float, bool or None).

        Raises:
            BodyDecodeError: If there is no single body, it is not UTF-8,
                or it is not valid JSON.
        """
        if not self._body.is_single:
            raise BodyDecodeError("empty body")

        try:
            text = self._body.data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug(f"Body is not UTF-8: {e}")
            raise BodyDecodeError(f"Invalid UTF-8 body: {e}") from e

        try:
            return json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError; overly deep nesting
            # surfaces as RecursionError
            logger.debug(f"Body is not JSON: {e}")
            raise BodyDecodeError(f"Invalid JSON body: {e}") from e

    def __repr__(self) -> str:
        return f"<HttpMessage headers={len(self._headers)} body={self._body.kind.value}>"


class MessageDelegate:
    """
    Forwards header and body operations to an owned HttpMessage.

    Classes using this set self._message in __init__. Chainable methods
    return the delegating object (the Request or Response), not the
    inner message.
    """

    _message: HttpMessage

    @property
    def message(self) -> HttpMessage:
        """The embedded message, for callers that want to work on it directly."""
        return self._message

    @property
    def headers(self) -> HeaderMap:
        return self._message.headers

    def insert_header(self, key: str, value: str):
        self._message.insert_header(key, value)
        return self

    def get_header(self, key: str) -> Optional[str]:
        return self._message.get_header(key)

    def header_iter(self) -> Iterator[Tuple[str, str]]:
        return self._message.header_iter()

    @property
    def body(self) -> Optional[bytes]:
        return self._message.body

    def set_body(self, data: BodyData):
        self._message.set_body(data)
        return self

    def has_body(self) -> bool:
        return self._message.has_body()

    def has_single_body(self) -> bool:
        return self._message.has_single_body()

    def has_multipart_body(self) -> bool:
        return self._message.has_multipart_body()

    def set_json(self, value: Any):
        self._message.set_json(value)
        return self

    def json(self) -> Any:
        return self._message.json()

    def _header_lines(self) -> str:
        return "".join(f"{key}={value}\n" for key, value in self.header_iter())
