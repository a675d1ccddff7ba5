from .codec import DELIMITER, PREFIX, decode, encode

__all__ = [
    "DELIMITER",
    "PREFIX",
    "decode",
    "encode",
]
