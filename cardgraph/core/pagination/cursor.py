"""Cursor encoding and decoding for pagination.

A cursor is an opaque string wrapping the ordering key of one row. The key
is rendered as its decimal string and wrapped in standard base64, so
``3`` becomes ``"Mw=="``. The encoding only marks the value as opaque to
clients; it offers no tamper resistance, and encoded cursors carry no
ordering of their own. Compare decoded keys, never the strings.
"""

from __future__ import annotations

import base64
import binascii

from cardgraph.core.pagination.exceptions import MalformedCursorError

# Largest key a signed 64-bit integer column can hold
MAX_KEY = 2**63 - 1
_MAX_KEY_DIGITS = len(str(MAX_KEY))


class CursorCodec:
    """Encode and decode pagination cursors.

    Usage:
        cursor = CursorCodec.encode(card.card_id)   # "Mw=="
        key = CursorCodec.decode(cursor)            # 3
    """

    @staticmethod
    def encode(key: int) -> str:
        """Encode an ordering key as an opaque cursor.

        Args:
            key: Non-negative integer ordering key.

        Returns:
            Standard base64 text of the key's decimal form.

        Raises:
            TypeError: If ``key`` is not an ``int``.
            ValueError: If ``key`` is negative or above ``MAX_KEY``.
        """
        if isinstance(key, bool) or not isinstance(key, int):
            msg = f"Ordering key must be an int, got {type(key).__name__}"
            raise TypeError(msg)
        if key < 0:
            msg = f"Ordering key must be non-negative, got {key}"
            raise ValueError(msg)
        if key > MAX_KEY:
            msg = f"Ordering key must not exceed {MAX_KEY}, got {key}"
            raise ValueError(msg)
        return base64.b64encode(str(key).encode("utf-8")).decode("ascii")

    @staticmethod
    def decode(cursor: str) -> int:
        """Decode a cursor back into its ordering key.

        Args:
            cursor: Cursor previously produced by :meth:`encode`.

        Returns:
            The ordering key.

        Raises:
            MalformedCursorError: If the cursor is not valid base64, not
                UTF-8, or not the canonical decimal form of a key within
                ``0..MAX_KEY``.
        """
        if not isinstance(cursor, str) or not cursor:
            raise MalformedCursorError(str(cursor), "cursor must be a non-empty string")

        try:
            raw = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
        except (UnicodeError, binascii.Error) as e:
            raise MalformedCursorError(cursor, "not a valid base64 token") from e

        # Canonical decimal only, so every key has exactly one cursor.
        if (
            not (raw.isascii() and raw.isdigit())
            or len(raw) > _MAX_KEY_DIGITS
            or str(int(raw)) != raw
        ):
            raise MalformedCursorError(cursor, "does not encode an ordering key")

        key = int(raw)
        if key > MAX_KEY:
            raise MalformedCursorError(cursor, "does not encode an ordering key")
        return key


__all__ = ["CursorCodec", "MAX_KEY"]
