"""Decimal numeric character reference encoding.

Encodes every character of a string as ``&#N;`` where ``N`` is its decimal
code point, and decodes such strings back to text. Decoding is lossy on
purpose: a reference that does not parse contributes nothing to the output.
"""

import logging

from .errors import DecodeError

logger = logging.getLogger(__name__)

PREFIX = "&#"
DELIMITER = ";"

MAX_U32 = 0xFFFFFFFF
MAX_CODE_POINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

# Longest decimal form of a u32 once leading zeros are gone
_MAX_U32_DIGITS = len(str(MAX_U32))


def encode(text: str) -> str:
    """Encode every character of ``text`` as a decimal reference.

    >>> encode("测试")
    '&#27979;&#35797;'
    """
    return "".join([f"{PREFIX}{ord(ch)}{DELIMITER}" for ch in text])


def _parse_u32(digits: str) -> int:
    # ASCII digits only: int() alone would also take signs, whitespace,
    # underscores and non-ASCII digits.
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise DecodeError(DecodeError.INVALID_INTEGER, digits)
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_U32_DIGITS:
        raise DecodeError(DecodeError.INVALID_INTEGER, digits)
    value = int(significant)
    if value > MAX_U32:
        raise DecodeError(DecodeError.INVALID_INTEGER, digits)
    return value


def _parse_code_point(digits: str) -> str:
    """Parse a decimal code point and return its character.

    Raises DecodeError when ``digits`` is not an unsigned 32-bit integer or
    when the value is not a Unicode scalar value.
    """
    code_point = _parse_u32(digits)
    if code_point > MAX_CODE_POINT or SURROGATE_MIN <= code_point <= SURROGATE_MAX:
        raise DecodeError(DecodeError.INVALID_CODE_POINT, code_point)
    return chr(code_point)


def decode(text: str) -> str:
    """Decode a string of decimal references back to text.

    The input is split on ``;`` and every ``&#`` is stripped from each
    segment, wherever it occurs. Segments that do not hold a valid code
    point are dropped rather than reported.

    >>> decode("&#27979;&#35797;")
    '测试'
    """
    result = []
    for segment in text.split(DELIMITER):
        digits = segment.replace(PREFIX, "")
        try:
            result.append(_parse_code_point(digits))
        except DecodeError as e:
            if segment:
                logger.debug("Dropping reference %r: %s", segment, e)
    return "".join(result)
