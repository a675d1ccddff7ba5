"""Tests for the internal decode errors and their logging."""

import logging
import unittest

from ncrcodec import codec
from ncrcodec.codec import _parse_code_point, decode
from ncrcodec.errors import DecodeError


class TestParseCodePoint(unittest.TestCase):
    def test_valid(self):
        assert _parse_code_point("128077") == "\U0001F44D"
        assert _parse_code_point("65") == "A"
        assert _parse_code_point("0") == "\x00"

    def test_invalid_integer(self):
        for digits in ("", "abc", "+65", "-1", " 65", "65\n", "6_5", "٦٥", "4294967296"):
            with self.subTest(digits=digits):
                with self.assertRaises(DecodeError) as ctx:
                    _parse_code_point(digits)
                assert ctx.exception.kind == DecodeError.INVALID_INTEGER
                assert ctx.exception.value == digits

    def test_invalid_code_point(self):
        for value in (0xD800, 0xDFFF, 0x110000, 0xFFFFFFFF):
            with self.subTest(value=value):
                with self.assertRaises(DecodeError) as ctx:
                    _parse_code_point(str(value))
                assert ctx.exception.kind == DecodeError.INVALID_CODE_POINT
                assert ctx.exception.value == value


class TestDecodeError(unittest.TestCase):
    def test_equality(self):
        a = DecodeError(DecodeError.INVALID_CODE_POINT, 55296)
        b = DecodeError(DecodeError.INVALID_CODE_POINT, 55296)
        c = DecodeError(DecodeError.INVALID_INTEGER, "55296")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert a != "invalid-code-point"

    def test_repr(self):
        err = DecodeError(DecodeError.INVALID_INTEGER, "x")
        assert repr(err) == "DecodeError('invalid-integer', 'x')"

    def test_str(self):
        assert str(DecodeError(DecodeError.INVALID_INTEGER, "x")) == (
            "invalid-integer - 'x' is not an unsigned 32-bit integer"
        )
        assert str(DecodeError(DecodeError.INVALID_CODE_POINT, 1114112)) == (
            "invalid-code-point - 1114112 is not a Unicode scalar value"
        )

    def test_not_exported(self):
        import ncrcodec

        assert not hasattr(ncrcodec, "DecodeError")
        assert "DecodeError" not in ncrcodec.__all__


class TestDecodeLogging(unittest.TestCase):
    def test_dropped_reference_is_logged(self):
        with self.assertLogs(codec.logger, level=logging.DEBUG) as logs:
            assert decode("&#65;&#bogus;&#1114112;") == "A"
        assert len(logs.records) == 2
        assert "invalid-integer" in logs.records[0].getMessage()
        assert "&#bogus" in logs.records[0].getMessage()
        assert "invalid-code-point" in logs.records[1].getMessage()

    def test_trailing_empty_segment_is_not_logged(self):
        with self.assertLogs(codec.logger, level=logging.DEBUG) as logs:
            # Emit one record so assertLogs has something to capture
            codec.logger.debug("start")
            assert decode("&#65;&#66;") == "AB"
        assert [r.getMessage() for r in logs.records] == ["start"]


if __name__ == "__main__":
    unittest.main()
