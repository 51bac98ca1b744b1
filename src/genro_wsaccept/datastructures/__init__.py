# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Header data structures.

Mapping from ASGI to genro-wsaccept classes::

    ASGI Raw Data                          genro-wsaccept Classes
    ─────────────────                      ──────────────────────
    scope["headers"] = [(b"...", b"...")]  →  Headers (case-insensitive)
    one header's raw occurrences          →  HeaderValue.parse_header()
"""

from .headers import HeaderValue, Headers, headers_from_scope

__all__ = ["HeaderValue", "Headers", "headers_from_scope"]
