"""
chaintable/buckets.py
BucketArray: one capacity-sized storage block of a HashTable.

Layout:
  buckets[i]   head Entry of the chain for slot i (None when empty)
  entry_count  number of entries reachable from all chains

An entry with key k always lives in buckets[hash(k) % bucket_count].
The bucket count of a block never changes; resizing builds a new block
(see chaintable.resize) and the owner swaps it in.
"""

from __future__ import annotations

from chaintable import chain
from chaintable.chain import Entry
from chaintable.hashing import HashFunc, djb2


class BucketArray:
    """
    Array of bucket chains plus the entry count.

    load_factor is derived from entry_count, which every structural change
    adjusts by exactly one, so it always equals the true density.
    """

    def __init__(self, bucket_count: int, hash_func: HashFunc = djb2) -> None:
        if isinstance(bucket_count, bool) or not isinstance(bucket_count, int):
            raise TypeError("bucket_count must be an int")
        if bucket_count < 1:
            raise ValueError("bucket_count must be >= 1")
        self.hash_func = hash_func
        self.buckets: list[Entry | None] = [None] * bucket_count
        self.entry_count = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def bucket_count(self) -> int:
        return len(self.buckets)

    @property
    def load_factor(self) -> float:
        return self.entry_count / len(self.buckets)

    def index_of(self, key: bytes) -> int:
        return self.hash_func(key) % len(self.buckets)

    def find(self, key: bytes) -> Entry | None:
        """Return the entry holding key, or None."""
        return chain.find(self.buckets[self.index_of(key)], key)

    def insert_new(self, key: bytes, value: int) -> Entry:
        """
        Structural insert of a key known to be absent.
        MemoryError propagates with the block unchanged.
        """
        i = self.index_of(key)
        entry = chain.insert_front(self.buckets[i], key, value)
        self.buckets[i] = entry
        self.entry_count += 1
        return entry

    def discard(self, key: bytes) -> Entry | None:
        """Unlink and return the entry holding key, or None if absent."""
        i = self.index_of(key)
        head, removed = chain.unlink(self.buckets[i], key)
        if removed is not None:
            self.buckets[i] = head
            self.entry_count -= 1
        return removed

    def clear(self) -> int:
        """Release every entry in every chain. Returns the number released."""
        released = 0
        for i, head in enumerate(self.buckets):
            released += chain.release_chain(head)
            self.buckets[i] = None
        self.entry_count = 0
        return released

    def chain_lengths(self) -> list[int]:
        """Length of each chain, in bucket order."""
        return [sum(1 for _ in chain.iter_chain(head)) for head in self.buckets]

    def __len__(self) -> int:
        return self.entry_count

    def __repr__(self) -> str:
        return (
            f"BucketArray(buckets={self.bucket_count}, entries={self.entry_count}, "
            f"load={self.load_factor:.3f})"
        )
