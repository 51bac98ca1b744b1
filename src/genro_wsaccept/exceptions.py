# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for Sec-WebSocket-Accept handling.

Every failure in this package is a protocol violation by the peer: the
handshake is invalid and the calling layer is expected to reject it.
Nothing here is retryable and nothing is recovered leniently.

Module Structure
----------------
ProtocolError is the common base, so callers can catch everything with a
single clause. Subclasses distinguish the failure kinds:

1. InvalidAcceptEncoding - header text is not valid Base64
2. InvalidAcceptLength - Base64 is valid but does not decode to 20 bytes
3. InvalidHeader - raw header missing, duplicated, or not UTF-8
4. AcceptMismatch - well-formed token that does not match the nonce

Each exception carries the WebSocket close code 1002 (protocol error,
RFC 6455 section 7.4.1) so an orchestration layer can close with it
directly if it wants to.

Example:
    >>> try:
    ...     token = AcceptToken.parse(value)
    ... except InvalidAcceptLength as e:
    ...     print(e.length)
    ... except ProtocolError as e:
    ...     reject_handshake(e.code, e.detail)
"""

PROTOCOL_ERROR_CODE = 1002


class ProtocolError(Exception):
    """
    Base class for handshake protocol violations.

    Attributes:
        detail: Human readable error message.
        code: WebSocket close code (always 1002).
    """

    def __init__(self, detail: str = "") -> None:
        """
        Initialize protocol error.

        Args:
            detail: Error detail message (default: "")
        """
        self.detail = detail
        self.code = PROTOCOL_ERROR_CODE
        super().__init__(detail)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"{type(self).__name__}(detail={self.detail!r})"


class InvalidAcceptEncoding(ProtocolError):
    """
    The Sec-WebSocket-Accept text is not valid Base64.

    Raised for characters outside the standard alphabet, including
    whitespace and non-ASCII characters, and for incorrect padding.

    Attributes:
        value: The rejected header text.
    """

    def __init__(self, value: str) -> None:
        super().__init__("Invalid Sec-WebSocket-Accept value")
        self.value = value

    def __repr__(self) -> str:
        return f"InvalidAcceptEncoding(value={self.value!r})"


class InvalidAcceptLength(ProtocolError):
    """
    The Sec-WebSocket-Accept value does not hold exactly 20 bytes.

    Attributes:
        length: Number of bytes actually decoded.
    """

    def __init__(self, length: int) -> None:
        super().__init__("Sec-WebSocket-Accept must be 20 bytes")
        self.length = length

    def __repr__(self) -> str:
        return f"InvalidAcceptLength(length={self.length})"


class InvalidHeader(ProtocolError):
    """Raw header is missing, repeated, or not decodable as UTF-8."""

    def __init__(self, name: str, detail: str) -> None:
        super().__init__(f"{name}: {detail}")
        self.name = name

    def __repr__(self) -> str:
        return f"InvalidHeader(name={self.name!r}, detail={self.detail!r})"


class AcceptMismatch(ProtocolError):
    """Peer sent a well-formed token that does not match the derived one."""

    def __init__(self, expected: str, received: str) -> None:
        super().__init__(
            f"Sec-WebSocket-Accept mismatch: expected {expected}, got {received}"
        )
        self.expected = expected
        self.received = received

    def __repr__(self) -> str:
        return (
            f"AcceptMismatch(expected={self.expected!r}, received={self.received!r})"
        )
