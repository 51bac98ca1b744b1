# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Type aliases shared with the surrounding ASGI/HTTP layer.

ASGI carries headers as a list of ``(name, value)`` byte pairs, names
lowercased, values Latin-1. The helpers in this package accept and produce
headers in that shape so they can be dropped into a ``websocket.accept`` or
``http.response.start`` message without conversion.

Definitions::

    RawHeader = tuple[bytes, bytes]
    RawHeaders = list[RawHeader]
    Scope = MutableMapping[str, Any]
"""

from typing import Any, MutableMapping

RawHeader = tuple[bytes, bytes]
RawHeaders = list[RawHeader]
Scope = MutableMapping[str, Any]

__all__ = ["RawHeader", "RawHeaders", "Scope"]
