"""Unit tests for the pagination cursor codec."""

from __future__ import annotations

import base64

import pytest

from cardgraph.core.pagination import CursorCodec, MalformedCursorError
from cardgraph.core.pagination.cursor import MAX_KEY


class TestCursorEncode:
    """Tests for CursorCodec.encode."""

    def test_encode_is_base64_of_decimal_key(self):
        """Key 3 should become the base64 text of "3"."""
        assert CursorCodec.encode(3) == "Mw=="
        assert base64.b64decode(CursorCodec.encode(1234)) == b"1234"

    def test_encode_zero(self):
        assert CursorCodec.encode(0) == "MA=="

    @pytest.mark.parametrize("key", [0, 1, 9, 10, 255, 2**31 - 1, MAX_KEY])
    def test_decode_inverts_encode(self, key):
        assert CursorCodec.decode(CursorCodec.encode(key)) == key

    def test_encode_rejects_negative_key(self):
        with pytest.raises(ValueError, match="non-negative"):
            CursorCodec.encode(-1)

    def test_encode_rejects_key_beyond_64_bits(self):
        with pytest.raises(ValueError, match="must not exceed"):
            CursorCodec.encode(MAX_KEY + 1)

    @pytest.mark.parametrize("key", ["3", 3.0, True, None])
    def test_encode_rejects_non_int(self, key):
        with pytest.raises(TypeError):
            CursorCodec.encode(key)


class TestCursorDecode:
    """Tests for CursorCodec.decode."""

    def test_decode_known_cursor(self):
        assert CursorCodec.decode("Mw==") == 3

    @pytest.mark.parametrize(
        "cursor",
        [
            "",
            "not-base64!!",
            "Mw",  # missing padding
            base64.b64encode(b"abc").decode(),
            base64.b64encode(b"-3").decode(),
            base64.b64encode(b"007").decode(),
            base64.b64encode(b" 7").decode(),
            base64.b64encode(b"\xff\xfe").decode(),
            "Mw==é",
            # more digits than any key, and beyond int() string limits
            base64.b64encode(b"9" * 5000).decode(),
            # one past the largest 64-bit key
            base64.b64encode(str(2**63).encode()).decode(),
            base64.b64encode(str(2**70).encode()).decode(),
        ],
    )
    def test_decode_rejects_malformed_cursor(self, cursor):
        with pytest.raises(MalformedCursorError) as exc_info:
            CursorCodec.decode(cursor)

        assert exc_info.value.code == "MALFORMED_CURSOR"
        assert exc_info.value.status_code == 400

    def test_malformed_cursor_keeps_the_token(self):
        with pytest.raises(MalformedCursorError) as exc_info:
            CursorCodec.decode("not-base64!!")

        assert exc_info.value.cursor == "not-base64!!"
        assert exc_info.value.extra == {"cursor": "not-base64!!"}
        assert exc_info.value.detail.startswith("Invalid cursor")
