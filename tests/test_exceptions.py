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

"""Tests for exception classes."""

import binascii

import pytest

from genro_wsaccept import AcceptToken
from genro_wsaccept.exceptions import (
    AcceptMismatch,
    InvalidAcceptEncoding,
    InvalidAcceptLength,
    InvalidHeader,
    ProtocolError,
)


class TestProtocolError:
    """Tests for ProtocolError base class."""

    def test_basic_creation(self) -> None:
        """Test detail and close code."""
        exc = ProtocolError("bad handshake")
        assert exc.detail == "bad handshake"
        assert exc.code == 1002
        assert str(exc) == "bad handshake"

    def test_default_detail(self) -> None:
        """Test that detail defaults to empty string."""
        assert ProtocolError().detail == ""

    def test_repr(self) -> None:
        """Test __repr__ format."""
        assert repr(ProtocolError("x")) == "ProtocolError(detail='x')"

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidAcceptEncoding("!"),
            InvalidAcceptLength(3),
            InvalidHeader("Sec-WebSocket-Accept", "missing"),
            AcceptMismatch("a", "b"),
        ],
    )
    def test_subclasses(self, exc) -> None:
        """Test every error is a ProtocolError with code 1002."""
        assert isinstance(exc, ProtocolError)
        assert exc.code == 1002


class TestAcceptErrors:
    """Tests for the accept-specific errors."""

    def test_encoding_message(self) -> None:
        """Test encoding error message and value."""
        exc = InvalidAcceptEncoding("abc!")
        assert str(exc) == "Invalid Sec-WebSocket-Accept value"
        assert exc.value == "abc!"
        assert "abc!" in repr(exc)

    def test_length_message(self) -> None:
        """Test length error message and length."""
        exc = InvalidAcceptLength(15)
        assert str(exc) == "Sec-WebSocket-Accept must be 20 bytes"
        assert exc.length == 15
        assert repr(exc) == "InvalidAcceptLength(length=15)"

    def test_encoding_error_chained(self) -> None:
        """Test the decoder error is kept as __cause__."""
        with pytest.raises(InvalidAcceptEncoding) as exc_info:
            AcceptToken.parse("###")
        assert isinstance(exc_info.value.__cause__, binascii.Error)

    def test_invalid_header(self) -> None:
        """Test header error message includes the name."""
        exc = InvalidHeader("Sec-WebSocket-Accept", "expected exactly one value, got 0")
        assert exc.name == "Sec-WebSocket-Accept"
        assert str(exc) == "Sec-WebSocket-Accept: expected exactly one value, got 0"

    def test_mismatch(self) -> None:
        """Test mismatch keeps both values."""
        exc = AcceptMismatch("expected=", "received=")
        assert exc.expected == "expected="
        assert exc.received == "received="
        assert "expected=" in str(exc)

    def test_catch_with_base(self) -> None:
        """Test catching subclasses through the base."""
        with pytest.raises(ProtocolError):
            raise InvalidAcceptLength(0)
