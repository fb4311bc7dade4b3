"""
chaintable/resize.py
Resize engine: rebuild a BucketArray at a new bucket count.

The rebuild is all-or-nothing and never touches the source block:

  1. allocate an empty block at the target capacity
  2. enumerate every pair of the old block with BucketIterator
  3. insert each pair with BucketArray.insert_new (no resize trigger)

If any allocation fails along the way the partial block is torn down and
None is returned. The caller keeps the old block and goes on working at
its current capacity.
"""

from __future__ import annotations
import logging

from chaintable.buckets import BucketArray
from chaintable.iterator import BucketIterator

logger = logging.getLogger(__name__)


def resize(old: BucketArray, new_bucket_count: int) -> BucketArray | None:
    """
    Return a new block holding exactly the pairs of `old`, rehashed into
    `new_bucket_count` buckets, or None if memory ran out.
    Raises ValueError if new_bucket_count is not a positive integer.
    """
    if isinstance(new_bucket_count, bool) or not isinstance(new_bucket_count, int):
        raise TypeError("new_bucket_count must be an int")
    if new_bucket_count < 1:
        raise ValueError("new_bucket_count must be >= 1")

    try:
        new = BucketArray(new_bucket_count, old.hash_func)
    except MemoryError:
        logger.warning(
            "resize %d -> %d buckets skipped: could not allocate bucket array",
            old.bucket_count, new_bucket_count,
        )
        return None

    try:
        for key, value in BucketIterator(old):
            new.insert_new(key, value)
    except MemoryError:
        moved = new.clear()
        logger.warning(
            "resize %d -> %d buckets skipped: out of memory after %d of %d entries",
            old.bucket_count, new_bucket_count, moved, old.entry_count,
        )
        return None

    logger.debug(
        "resized %d -> %d buckets (%d entries, load %.3f)",
        old.bucket_count, new.bucket_count, new.entry_count, new.load_factor,
    )
    return new


def grow(old: BucketArray) -> BucketArray | None:
    """Rebuild at twice the capacity."""
    return resize(old, old.bucket_count * 2)


def shrink(old: BucketArray) -> BucketArray | None:
    """Rebuild at half the capacity."""
    return resize(old, max(1, old.bucket_count // 2))
