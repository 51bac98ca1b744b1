# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Sec-WebSocket-Accept token (RFC 6455 section 4.2.2).

Purpose
=======
The server proves it understood a WebSocket opening handshake by hashing
the client's nonce (the ``Sec-WebSocket-Key`` text) together with a fixed
GUID and returning the Base64 of the SHA-1 digest. The client recomputes
the same value and compares. ``AcceptToken`` is that 20-byte digest.

Flow::

    Server                                   Client
    ──────                                   ──────
    nonce text ─→ AcceptToken.derive()       header text ─→ AcceptToken.parse()
                 ─→ token.serialize()                     ─→ compare with
                 ─→ "Sec-WebSocket-Accept: ..."              AcceptToken.derive(nonce)

Derivation::

    SHA1( utf8( nonce_text + "258EAFA5-E914-47DA-95CA-C5AB0DC85B11" ) )

The nonce text must be exactly the string the client sent. Any re-encoding
(stripping padding, changing case) produces a different digest and this
module cannot detect it.

Definition::

    class AcceptToken:
        __slots__ = ("_digest",)

        def __init__(self, digest: bytes) -> None
        @classmethod derive(cls, nonce: str | HeaderValue) -> AcceptToken
        @classmethod parse(cls, value: str) -> AcceptToken
        def serialize(self) -> str

        # HeaderValue capabilities
        @classmethod header_name(cls) -> str
        @classmethod parse_header(cls, raw: Sequence[bytes]) -> AcceptToken
        def format_header(self) -> str
        def to_raw_header(self) -> tuple[bytes, bytes]

Example::

    >>> token = AcceptToken.derive("dGhlIHNhbXBsZSBub25jZQ==")
    >>> token.serialize()
    's3pPLMBiTxaQ9kYGzzhZRbK+xOo='
    >>> AcceptToken.parse("s3pPLMBiTxaQ9kYGzzhZRbK+xOo=") == token
    True

Errors
======
- ``InvalidAcceptEncoding``: text is not valid Base64
- ``InvalidAcceptLength``: Base64 decodes to anything but 20 bytes
- ``InvalidHeader``: raw header missing, repeated, empty, or not UTF-8

Tokens are immutable and hold no resources, so they can be shared freely
between concurrent handshakes.
"""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Sequence
from typing import Any, Final

from .datastructures import HeaderValue
from .exceptions import InvalidAcceptEncoding, InvalidAcceptLength, InvalidHeader
from .types import RawHeader

__all__ = ["ACCEPT_HEADER", "MAGIC_GUID", "TOKEN_SIZE", "AcceptToken"]

MAGIC_GUID: Final = "258EAFA5-E914-47DA-95CA-C5AB0DC85B11"
ACCEPT_HEADER: Final = "Sec-WebSocket-Accept"
TOKEN_SIZE: Final = 20  # SHA-1 digest size


def _nonce_text(nonce: str | HeaderValue) -> str:
    if isinstance(nonce, str):
        return nonce
    return nonce.format_header()


class AcceptToken:
    """
    The 20-byte Sec-WebSocket-Accept value.

    Equality and hashing are byte-wise, regardless of whether the token was
    derived or parsed.

    Attributes:
        digest: The raw 20 bytes (read-only).
    """

    __slots__ = ("_digest",)

    def __init__(self, digest: bytes) -> None:
        """
        Wrap raw digest bytes.

        Args:
            digest: Exactly 20 bytes.

        Raises:
            InvalidAcceptLength: If digest is not 20 bytes long.
            TypeError: If digest is not bytes, bytearray or memoryview.
        """
        if not isinstance(digest, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"AcceptToken expects bytes, got {type(digest).__name__}"
            )
        digest = bytes(digest)
        if len(digest) != TOKEN_SIZE:
            raise InvalidAcceptLength(len(digest))
        object.__setattr__(self, "_digest", digest)

    @classmethod
    def derive(cls, nonce: str | HeaderValue) -> AcceptToken:
        """
        Derive the token the server must answer for a client nonce.

        Args:
            nonce: The nonce text exactly as the client sent it, or a nonce
                header value whose ``format_header()`` returns that text.

        Returns:
            The derived token. Never fails.
        """
        concat = _nonce_text(nonce) + MAGIC_GUID
        return cls(hashlib.sha1(concat.encode("utf-8")).digest())

    @classmethod
    def parse(cls, value: str) -> AcceptToken:
        """
        Parse the Base64 text of a Sec-WebSocket-Accept header.

        Only the standard alphabet with correct padding is accepted.
        Surrounding whitespace is not stripped.

        Args:
            value: Header text.

        Returns:
            The token holding the decoded bytes unchanged.

        Raises:
            InvalidAcceptEncoding: If value is not valid Base64.
            InvalidAcceptLength: If value does not decode to 20 bytes.
        """
        try:
            decoded = base64.b64decode(value, validate=True)
        except ValueError as exc:
            raise InvalidAcceptEncoding(value) from exc
        return cls(decoded)

    def serialize(self) -> str:
        """Return the canonical padded Base64 text."""
        return base64.b64encode(self._digest).decode("ascii")

    @property
    def digest(self) -> bytes:
        return self._digest

    # HeaderValue capabilities

    @classmethod
    def header_name(cls) -> str:
        return ACCEPT_HEADER

    @classmethod
    def parse_header(cls, raw: Sequence[bytes]) -> AcceptToken:
        """
        Parse from every raw occurrence of the header.

        Exactly one occurrence is accepted. The value must be UTF-8.

        Raises:
            InvalidHeader: If there is not exactly one occurrence, or the
                value is empty or not UTF-8.
            InvalidAcceptEncoding: See ``parse``.
            InvalidAcceptLength: See ``parse``.
        """
        if len(raw) != 1:
            raise InvalidHeader(
                ACCEPT_HEADER, f"expected exactly one value, got {len(raw)}"
            )
        try:
            text = bytes(raw[0]).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidHeader(ACCEPT_HEADER, "value is not valid UTF-8") from exc
        if not text:
            raise InvalidHeader(ACCEPT_HEADER, "empty value")
        return cls.parse(text)

    def format_header(self) -> str:
        return self.serialize()

    def to_raw_header(self) -> RawHeader:
        """Return the ``(name, value)`` pair in ASGI shape."""
        name = ACCEPT_HEADER.lower().encode("latin-1")
        return (name, self.serialize().encode("ascii"))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[AcceptToken], tuple[bytes]]:
        return (type(self), (self._digest,))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AcceptToken):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __bytes__(self) -> bytes:
        return self._digest

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"AcceptToken({self.serialize()!r})"
