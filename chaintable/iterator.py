"""
chaintable/iterator.py
Traversal over every (key, value) pair of a BucketArray.

Order is bucket index order, then chain order within a bucket. It is
neither insertion order nor sorted order, and is only stable while the
block is not mutated.
"""

from __future__ import annotations
from typing import Callable

from chaintable.buckets import BucketArray
from chaintable.chain import Entry

Sink = Callable[[bytes, int], object]


class BucketIterator:
    """
    One-shot iterator over a BucketArray.
    Create a new one to restart the traversal.
    """

    def __init__(self, storage: BucketArray) -> None:
        self._buckets = storage.buckets
        self._index = 0
        self._entry: Entry | None = None

    def __iter__(self) -> "BucketIterator":
        return self

    def __next__(self) -> tuple[bytes, int]:
        # Walk the current chain; when it runs out, move to the next non-empty bucket
        while self._entry is None:
            if self._index >= len(self._buckets):
                raise StopIteration
            self._entry = self._buckets[self._index]
            self._index += 1
        entry = self._entry
        self._entry = entry.next
        return entry.key, entry.value


def foreach(storage: BucketArray, sink: Sink) -> int:
    """Call sink(key, value) once per stored pair. Returns the number of calls."""
    calls = 0
    for key, value in BucketIterator(storage):
        sink(key, value)
        calls += 1
    return calls

