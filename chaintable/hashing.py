"""
chaintable/hashing.py
Key normalisation and the default hash function (djb2).

djb2 folds each byte into the running digest as h = h * 33 + byte,
starting from 5381. The digest is truncated to an unsigned 64-bit word.
Collisions are expected; the table resolves them by chaining.
"""

from __future__ import annotations
from typing import Callable

HashFunc = Callable[[bytes], int]

DJB2_SEED = 5381
_WORD_MASK = (1 << 64) - 1


def djb2(key: bytes) -> int:
    """Return the djb2 digest of key as an unsigned 64-bit integer."""
    h = DJB2_SEED
    for byte in key:
        h = ((h << 5) + h + byte) & _WORD_MASK   # h * 33 + byte
    return h


def as_key(key: str | bytes | bytearray | memoryview) -> bytes:
    """
    Normalise a caller-supplied key to an owned, immutable byte string.
    str keys are UTF-8 encoded. Raises TypeError for anything else.
    """
    if isinstance(key, bytes):
        return key
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)  # copy: the table owns its keys
    raise TypeError(f"key must be str or bytes-like, got {type(key).__name__}")
