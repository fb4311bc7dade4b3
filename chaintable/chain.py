"""
chaintable/chain.py
Entry nodes and the singly-linked bucket chain primitives.

A chain is referenced by its head Entry (or None when the bucket is
empty). All functions take the current head and return the new head
where the chain can change, so the caller (BucketArray) owns the slot.

Newly inserted entries go to the front of the chain.
"""

from __future__ import annotations
from typing import Iterator


class Entry:
    """A single (key, value) pair plus the link to the next entry in its chain."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: bytes, value: int, next: "Entry | None" = None) -> None:
        self.key: bytes = key
        self.value: int = value
        self.next: "Entry | None" = next

    def __repr__(self) -> str:  # pragma: no cover
        return f"Entry({self.key!r}, {self.value})"


def find(head: Entry | None, key: bytes) -> Entry | None:
    """Return the entry holding key, or None."""
    entry = head
    while entry is not None and entry.key != key:
        entry = entry.next
    return entry


def insert_front(head: Entry | None, key: bytes, value: int) -> Entry:
    """
    Allocate a new entry for (key, value) and prepend it to the chain.
    Returns the new head. If allocation fails, MemoryError propagates
    and the chain is left as it was.
    """
    return Entry(key, value, head)


def unlink(head: Entry | None, key: bytes) -> tuple[Entry | None, Entry | None]:
    """
    Splice the entry holding key out of the chain.
    Returns (new_head, removed_entry); removed_entry is None if key is absent.
    """
    prev: Entry | None = None
    entry = head
    while entry is not None and entry.key != key:
        prev = entry
        entry = entry.next

    if entry is None:
        return head, None

    if prev is None:
        head = entry.next
    else:
        prev.next = entry.next
    entry.next = None
    return head, entry


def iter_chain(head: Entry | None) -> Iterator[Entry]:
    """Yield every entry of the chain in chain order."""
    entry = head
    while entry is not None:
        yield entry
        entry = entry.next


def release_chain(head: Entry | None) -> int:
    """
    Break every link of the chain so no entry is reachable from another.
    Returns the number of entries released.
    """
    released = 0
    entry = head
    while entry is not None:
        nxt = entry.next
        entry.next = None
        released += 1
        entry = nxt
    return released
