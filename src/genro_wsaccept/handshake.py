# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Handshake helpers built on AcceptToken.

Two small entry points for the layer that drives the opening handshake:

- ``accept_header(nonce)``: server side, the header pair to send back.
- ``check_accept(headers, nonce)``: client side, verify the server reply.

Deciding which headers are required and how to reject a failed handshake
stays with the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .accept import AcceptToken
from .datastructures import HeaderValue, Headers
from .exceptions import AcceptMismatch
from .types import RawHeader

__all__ = ["accept_header", "check_accept"]

logger = logging.getLogger("genro_wsaccept.handshake")


def accept_header(nonce: str | HeaderValue) -> RawHeader:
    """Derive the Sec-WebSocket-Accept header pair for a client nonce."""
    token = AcceptToken.derive(nonce)
    logger.debug("Derived Sec-WebSocket-Accept %s", token)
    return token.to_raw_header()


def check_accept(
    headers: Headers | Iterable[tuple[bytes, bytes]], nonce: str | HeaderValue
) -> AcceptToken:
    """
    Verify the server's Sec-WebSocket-Accept against the nonce we sent.

    Args:
        headers: Response headers, as Headers or raw ASGI pairs.
        nonce: The nonce text sent in Sec-WebSocket-Key.

    Returns:
        The verified token.

    Raises:
        InvalidHeader: Header missing, repeated, or not UTF-8.
        InvalidAcceptEncoding: Header is not valid Base64.
        InvalidAcceptLength: Header does not decode to 20 bytes.
        AcceptMismatch: Header is well formed but does not match.
    """
    if not isinstance(headers, Headers):
        headers = Headers(headers)
    received = headers.typed(AcceptToken)
    expected = AcceptToken.derive(nonce)
    if received != expected:
        logger.debug(
            "Sec-WebSocket-Accept mismatch: expected %s, got %s", expected, received
        )
        raise AcceptMismatch(expected.serialize(), received.serialize())
    return received
