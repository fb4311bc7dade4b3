"""
chaintable/policy.py
ResizePolicy: capacity floor and load-factor thresholds for HashTable.

The shrink threshold is a quarter of the grow threshold. The 4x gap keeps
a table that sits near one threshold from alternately growing and
shrinking on interleaved inserts and removes.
"""

from __future__ import annotations
from dataclasses import dataclass

MIN_BUCKETS = 8
GROW_THRESHOLD = 1.5
SHRINK_THRESHOLD = GROW_THRESHOLD / 4


@dataclass(frozen=True)
class ResizePolicy:
    min_buckets: int = MIN_BUCKETS
    grow_threshold: float = GROW_THRESHOLD

    def __post_init__(self) -> None:
        if isinstance(self.min_buckets, bool) or not isinstance(self.min_buckets, int):
            raise TypeError("min_buckets must be an int")
        if self.min_buckets < 1:
            raise ValueError("min_buckets must be >= 1")
        if not self.grow_threshold > 0:
            raise ValueError("grow_threshold must be > 0")

    @property
    def shrink_threshold(self) -> float:
        return self.grow_threshold / 4

    def should_grow(self, load_factor: float) -> bool:
        return load_factor > self.grow_threshold

    def should_shrink(self, load_factor: float, bucket_count: int) -> bool:
        return load_factor < self.shrink_threshold and bucket_count > self.min_buckets
