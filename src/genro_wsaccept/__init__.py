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

"""genro-wsaccept - WebSocket Sec-WebSocket-Accept derivation and validation.

Main components:
    AcceptToken: 20-byte accept value (derive, parse, serialize)
    Headers: Case-insensitive view over ASGI raw headers
    HeaderValue: Protocol for typed header values

Helpers:
    accept_header: Server side response header pair
    check_accept: Client side verification

Usage:
    from genro_wsaccept import AcceptToken

    token = AcceptToken.derive(client_key)
    headers.append(token.to_raw_header())
"""

__version__ = "0.1.0"

from .accept import ACCEPT_HEADER, MAGIC_GUID, TOKEN_SIZE, AcceptToken
from .datastructures import HeaderValue, Headers, headers_from_scope
from .exceptions import (
    AcceptMismatch,
    InvalidAcceptEncoding,
    InvalidAcceptLength,
    InvalidHeader,
    ProtocolError,
)
from .handshake import accept_header, check_accept
from .types import RawHeader, RawHeaders, Scope

__all__ = [
    # Accept token
    "AcceptToken",
    "ACCEPT_HEADER",
    "MAGIC_GUID",
    "TOKEN_SIZE",
    # Headers
    "HeaderValue",
    "Headers",
    "headers_from_scope",
    # Handshake helpers
    "accept_header",
    "check_accept",
    # Exceptions
    "ProtocolError",
    "InvalidAcceptEncoding",
    "InvalidAcceptLength",
    "InvalidHeader",
    "AcceptMismatch",
    # Types
    "RawHeader",
    "RawHeaders",
    "Scope",
]
