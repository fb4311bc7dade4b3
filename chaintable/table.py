"""
chaintable/table.py
HashTable: string-keyed, integer-valued hash table with separate chaining.

The HashTable object is the caller's stable handle. It owns one
replaceable BucketArray; when the load factor crosses a threshold the
resize engine builds a replacement block, the table swaps it in and tears
the old one down. Callers never see the swap.

  set     may grow   (load factor > grow threshold after a new key)
  remove  may shrink (load factor < shrink threshold after a removal,
                      never below the policy's min_buckets)
  get / iterate never resize.
"""

from __future__ import annotations
import logging
from typing import Iterator

from chaintable import resize as resize_engine
from chaintable.buckets import BucketArray
from chaintable.hashing import HashFunc, as_key, djb2
from chaintable.iterator import BucketIterator, Sink, foreach
from chaintable.policy import ResizePolicy

logger = logging.getLogger(__name__)

VALUE_BITS = 64
VALUE_MIN = -(1 << (VALUE_BITS - 1))
VALUE_MAX = (1 << (VALUE_BITS - 1)) - 1

Key = str | bytes | bytearray | memoryview


class HashTableError(Exception):
    """Base class for HashTable errors."""


class InsertError(HashTableError, MemoryError):
    """A new entry could not be allocated. The table is left unchanged."""


class TableDestroyedError(HashTableError):
    """Operation on a table after destroy()."""


def _check_value(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, got {type(value).__name__}")
    if not VALUE_MIN <= value <= VALUE_MAX:
        raise OverflowError(f"value {value} does not fit in a signed {VALUE_BITS}-bit integer")
    return value


class HashTable:
    """
    Resizable chained hash table.

    Args:
        policy:    capacity floor and thresholds (default ResizePolicy()).
        hash_func: pure function bytes -> unsigned int (default djb2).
    """

    def __init__(self, policy: ResizePolicy | None = None, hash_func: HashFunc = djb2) -> None:
        self.policy = policy if policy is not None else ResizePolicy()
        self._storage: BucketArray | None = BucketArray(self.policy.min_buckets, hash_func)
        # Bumped on every structural change; live iterators compare against it
        self._mutations = 0
        logger.debug("created table with %d buckets", self.policy.min_buckets)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def set(self, key: Key, value: int) -> None:
        """
        Insert key or overwrite its value.
        Overwriting is never a structural change and never resizes.
        Raises InsertError if the new entry cannot be allocated.
        """
        storage = self._live()
        k = as_key(key)
        v = _check_value(value)

        entry = storage.find(k)
        if entry is not None:
            entry.value = v
            return

        try:
            storage.insert_new(k, v)
        except MemoryError as e:
            logger.error("out of memory inserting key %r", k)
            raise InsertError(f"could not allocate entry for key {k!r}") from e
        self._mutations += 1

        if self.policy.should_grow(storage.load_factor):
            self._swap(resize_engine.grow(storage))

    def get(self, key: Key) -> tuple[bool, int | None]:
        """Return (True, value) if key is present, else (False, None)."""
        entry = self._live().find(as_key(key))
        if entry is None:
            return False, None
        return True, entry.value

    def remove(self, key: Key) -> bool:
        """
        Remove key. Returns True if it was present, False otherwise
        (absent keys are a no-op).
        """
        storage = self._live()
        if storage.discard(as_key(key)) is None:
            return False
        self._mutations += 1

        if self.policy.should_shrink(storage.load_factor, storage.bucket_count):
            self._swap(resize_engine.shrink(storage))
        return True

    def iterate(self, sink: Sink) -> int:
        """
        Call sink(key, value) for every pair. Returns the number of pairs.
        The sink must not modify the table.
        """
        return foreach(self._live(), sink)

    def items(self) -> Iterator[tuple[bytes, int]]:
        """Yield (key, value) pairs. Raises RuntimeError if the table changes size meanwhile."""
        expected = self._mutations
        for pair in BucketIterator(self._live()):
            yield pair
            if self._mutations != expected:
                raise RuntimeError("HashTable changed size during iteration")

    def keys(self) -> Iterator[bytes]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[int]:
        for _, value in self.items():
            yield value

    def destroy(self) -> None:
        """Release every entry and the bucket array. Safe to call twice."""
        if self._storage is None:
            return
        released = self._storage.clear()
        self._storage = None
        self._mutations += 1
        logger.debug("destroyed table (%d entries released)", released)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def destroyed(self) -> bool:
        return self._storage is None

    @property
    def bucket_count(self) -> int:
        return self._live().bucket_count

    @property
    def load_factor(self) -> float:
        return self._live().load_factor

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._live())

    def __contains__(self, key: Key) -> bool:
        return self.get(key)[0]

    def __getitem__(self, key: Key) -> int:
        found, value = self.get(key)
        if not found:
            raise KeyError(key)
        return value

    def __setitem__(self, key: Key, value: int) -> None:
        self.set(key, value)

    def __delitem__(self, key: Key) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[bytes]:
        return self.keys()

    def __enter__(self) -> "HashTable":
        return self

    def __exit__(self, *_: object) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if self._storage is None:
            return "HashTable(destroyed)"
        return (
            f"HashTable(entries={len(self._storage)}, buckets={self._storage.bucket_count}, "
            f"load={self._storage.load_factor:.3f})"
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _live(self) -> BucketArray:
        if self._storage is None:
            raise TableDestroyedError("operation on a destroyed HashTable")
        return self._storage

    def _swap(self, new: BucketArray | None) -> None:
        """Install a rebuilt block; on a failed rebuild keep the current one."""
        if new is None:
            return
        old = self._storage
        self._storage = new
        if old is not None:
            old.clear()
