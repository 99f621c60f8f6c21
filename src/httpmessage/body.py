"""
=============================================================================
MESSAGE BODY
=============================================================================

The body of an HTTP message is always in exactly one of three states:

    ┌────────────┬──────────────────────────────────────────────────────────┐
    │  ABSENT    │ No body was set (GET requests, 204 responses, ...)      │
    │  SINGLE    │ One complete in-memory byte buffer                       │
    │  MULTIPART │ Reserved for multipart bodies. Carries no payload and   │
    │            │ cannot be created through the public API yet.            │
    └────────────┴──────────────────────────────────────────────────────────┘

Modelling this as a tagged value rather than "bytes or None" keeps the
difference between "no body" and "an empty body" (b"") explicit, and
leaves room for multipart support without changing callers.

=============================================================================
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class BodyKind(Enum):
    """Which state a MessageBody is in."""

    ABSENT = "absent"
    SINGLE = "single"
    MULTIPART = "multipart"


@dataclass(frozen=True)
class MessageBody:
    """
    Immutable tagged body value.

    Build one with MessageBody.absent() or MessageBody.single(data).
    """

    kind: BodyKind = BodyKind.ABSENT
    data: Optional[bytes] = None

    def __post_init__(self):
        if self.kind is BodyKind.MULTIPART:
            raise ValueError("multipart bodies are not supported yet")
        if self.kind is BodyKind.SINGLE and not isinstance(self.data, bytes):
            raise TypeError("a single body needs a bytes buffer")
        if self.kind is BodyKind.ABSENT and self.data is not None:
            raise ValueError("an absent body carries no data")

    @classmethod
    def absent(cls) -> "MessageBody":
        return cls(BodyKind.ABSENT)

    @classmethod
    def single(cls, data: bytes) -> "MessageBody":
        """Wrap a complete buffer; bytearray/memoryview are copied to bytes."""
        return cls(BodyKind.SINGLE, bytes(data))

    @classmethod
    def _multipart(cls) -> "MessageBody":
        # Placeholder until multipart encoding exists. Bypasses
        # __post_init__, which refuses the tag from public construction.
        body = object.__new__(cls)
        object.__setattr__(body, "kind", BodyKind.MULTIPART)
        object.__setattr__(body, "data", None)
        return body

    @property
    def is_absent(self) -> bool:
        return self.kind is BodyKind.ABSENT

    @property
    def is_single(self) -> bool:
        return self.kind is BodyKind.SINGLE

    @property
    def is_multipart(self) -> bool:
        return self.kind is BodyKind.MULTIPART
