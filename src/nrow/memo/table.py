from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import List, Optional

from nrow.config import TABLE_SIZE
from nrow.memo.errors import DuplicateKeyError, NotFoundError
from nrow.memo.record import Record
from nrow.types import NOT_FOUND

logger = logging.getLogger(__name__)

_NIL = -1  # end of chain / empty bucket
_MULTIPLIER = 31


@dataclass(frozen=True, slots=True)
class TableStats:
    capacity: int
    records: int
    occupied_buckets: int
    longest_chain: int
    load_factor: float
    collisions: int


class HashDictionary:
    """
    Fixed-capacity hash table with separate chaining, keyed by board encodings.

    Records live in an arena; each bucket holds the arena index of its first
    record and ``_next`` links the rest of the chain in insertion order.
    Freed arena slots are reused. The bucket array never grows.
    """

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size < 1:
            raise ValueError(f"Table size must be positive, got {size}.")
        self._heads: List[int] = [_NIL] * size
        self._records: List[Optional[Record]] = []
        self._next: List[int] = []
        self._free: List[int] = []
        self._num_records = 0
        self._collisions = 0
        logger.debug("Created table with %d buckets", size)

    @property
    def capacity(self) -> int:
        return len(self._heads)

    def bucket_index(self, key: str) -> int:
        """
        Polynomial hash (base 31) reduced modulo the capacity.

        The accumulator is seeded with the first character and the main loop
        then starts at position 0 again, so the first character is counted
        twice. Kept as-is so bucket assignment stays stable across versions.
        """
        m = len(self._heads)
        if not key:
            return 0
        val = ord(key[0])
        for ch in key:
            val = (val * _MULTIPLIER + ord(ch)) % m
        return val % m

    def _find(self, key: str) -> tuple[int, int, int]:
        """Return (bucket, previous index, index) for ``key``; index is _NIL on a miss."""
        bucket = self.bucket_index(key)
        prev = _NIL
        i = self._heads[bucket]
        while i != _NIL:
            rec = self._records[i]
            if rec is not None and rec.key == key:
                return bucket, prev, i
            prev = i
            i = self._next[i]
        # prev is now the tail of the chain (or _NIL if the bucket is empty)
        return bucket, prev, _NIL

    def _alloc(self, record: Record) -> int:
        if self._free:
            i = self._free.pop()
            self._records[i] = record
            self._next[i] = _NIL
            return i
        self._records.append(record)
        self._next.append(_NIL)
        return len(self._records) - 1

    def put(self, record: Record) -> bool:
        """
        Append ``record`` to its bucket.
        Returns True if the bucket already held a record (a collision).
        """
        bucket, tail, found = self._find(record.key)
        if found != _NIL:
            logger.debug("Rejected duplicate key %r in bucket %d", record.key, bucket)
            raise DuplicateKeyError(record.key)

        i = self._alloc(record)
        if tail == _NIL:
            self._heads[bucket] = i
        else:
            self._next[tail] = i
        self._num_records += 1

        collided = tail != _NIL
        if collided:
            self._collisions += 1
        return collided

    def get(self, key: str) -> int:
        _, _, i = self._find(key)
        if i == _NIL:
            return NOT_FOUND
        rec = self._records[i]
        assert rec is not None
        return rec.score

    def remove(self, key: str) -> None:
        bucket, prev, i = self._find(key)
        if i == _NIL:
            logger.debug("Cannot remove missing key %r from bucket %d", key, bucket)
            raise NotFoundError(key)

        if prev == _NIL:
            self._heads[bucket] = self._next[i]
        else:
            self._next[prev] = self._next[i]
        self._records[i] = None
        self._next[i] = _NIL
        self._free.append(i)
        self._num_records -= 1

    def num_records(self) -> int:
        return self._num_records

    def __len__(self) -> int:
        return self._num_records

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key)[2] != _NIL

    # Instrumentation

    def bucket_lengths(self) -> List[int]:
        lengths = []
        for head in self._heads:
            n = 0
            i = head
            while i != _NIL:
                n += 1
                i = self._next[i]
            lengths.append(n)
        return lengths

    def stats(self) -> TableStats:
        lengths = self.bucket_lengths()
        return TableStats(
            capacity=len(lengths),
            records=self._num_records,
            occupied_buckets=sum(1 for n in lengths if n > 0),
            longest_chain=max(lengths),
            load_factor=self._num_records / len(lengths),
            collisions=self._collisions,
        )
