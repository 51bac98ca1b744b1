# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Case-insensitive header access and the header value capabilities.

Purpose
=======
A handshake helper needs two things from the HTTP layer: a way to look up
every occurrence of a header by name, and a way for typed header values to
parse themselves from wire bytes and format themselves back to text. This
module provides both without depending on any HTTP framework.

- ``Headers``: immutable, case-insensitive view over ASGI raw headers
- ``headers_from_scope()``: build Headers from an ASGI scope
- ``HeaderValue``: protocol implemented by typed header values

Unlike a general purpose header map, ``Headers`` keeps values as the raw
bytes received. Typed values decide how to decode them.

Definition::

    class HeaderValue(Protocol):
        @classmethod
        def header_name(cls) -> str
        @classmethod
        def parse_header(cls, raw: Sequence[bytes]) -> Self
        def format_header(self) -> str

    class Headers:
        def __init__(self, raw_headers: Iterable[tuple[bytes, bytes]]) -> None
        def getlist(self, key: str) -> list[bytes]
        def get(self, key: str, default: bytes | None = None) -> bytes | None
        def typed(self, header_type: type[H]) -> H

Example::

    headers = Headers([(b"Sec-WebSocket-Accept", b"s3pPLMBiTxaQ9kYGzzhZRbK+xOo=")])
    token = headers.typed(AcceptToken)

References
==========
- HTTP Headers (RFC 7230): https://tools.ietf.org/html/rfc7230#section-3.2
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = ["HeaderValue", "Headers", "headers_from_scope"]

H = TypeVar("H", bound="HeaderValue")


@runtime_checkable
class HeaderValue(Protocol):
    """A typed header value that parses from and formats to header text."""

    @classmethod
    def header_name(cls) -> str:
        """Canonical header name, e.g. ``"Sec-WebSocket-Accept"``."""
        ...

    @classmethod
    def parse_header(cls: type[H], raw: Sequence[bytes]) -> H:
        """Build the value from every raw occurrence of the header."""
        ...

    def format_header(self) -> str:
        """Header text to emit on the wire."""
        ...


class Headers:
    """
    Immutable, case-insensitive HTTP headers with raw byte values.

    Names are normalized to lowercase, values are kept as received.

    Example:
        >>> headers = Headers([(b"Host", b"example.com"), (b"X-A", b"1"), (b"x-a", b"2")])
        >>> headers.get("HOST")
        b'example.com'
        >>> headers.getlist("x-a")
        [b'1', b'2']
    """

    __slots__ = ("_headers",)

    def __init__(self, raw_headers: Iterable[tuple[bytes, bytes]]) -> None:
        self._headers: list[tuple[str, bytes]] = [
            (name.decode("latin-1").lower(), value) for name, value in raw_headers
        ]

    def getlist(self, key: str) -> list[bytes]:
        """Return all raw values for a header, empty list if absent."""
        key_lower = key.lower()
        return [value for name, value in self._headers if name == key_lower]

    def get(self, key: str, default: bytes | None = None) -> bytes | None:
        """Return the first raw value for a header, or default."""
        values = self.getlist(key)
        return values[0] if values else default

    def typed(self, header_type: type[H]) -> H:
        """
        Parse a header into its typed value.

        All occurrences are passed to ``header_type.parse_header`` so the
        value type can enforce its own multiplicity rules.

        Args:
            header_type: A class implementing ``HeaderValue``.

        Returns:
            The parsed header value.
        """
        return header_type.parse_header(self.getlist(header_type.header_name()))

    def raw(self) -> list[tuple[bytes, bytes]]:
        """Return headers in ASGI shape (lowercase names)."""
        return [(name.encode("latin-1"), value) for name, value in self._headers]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return bool(self.getlist(key))

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._headers:
            if name not in seen:
                seen.add(name)
                yield name

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"


def headers_from_scope(scope: Mapping[str, Any]) -> Headers:
    """
    Create Headers from an ASGI scope.

    Returns empty Headers if the scope has no "headers" key.
    """
    return Headers(scope.get("headers", []))
