"""Internal decode errors.

Raised while parsing a single reference and absorbed by ``decode``; they
never reach callers of the public API.
"""


class DecodeError(Exception):
    """A reference that could not be turned into a character."""

    INVALID_INTEGER = "invalid-integer"
    INVALID_CODE_POINT = "invalid-code-point"

    def __init__(self, kind, value):
        super().__init__(kind, value)
        self.kind = kind
        self.value = value

    def __repr__(self):
        return f"DecodeError({self.kind!r}, {self.value!r})"

    def __str__(self):
        if self.kind == self.INVALID_CODE_POINT:
            return f"{self.kind} - {self.value} is not a Unicode scalar value"
        return f"{self.kind} - {self.value!r} is not an unsigned 32-bit integer"

    def __eq__(self, other):
        if not isinstance(other, DecodeError):
            return NotImplemented
        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))
