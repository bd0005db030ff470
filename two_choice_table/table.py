# ==================================================
# two_choice_table/table.py
# ==================================================
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar, Iterable

from loguru import logger

from .const import *
from .bins import Bin
from .hashing import candidate_bins
from .loader import load_records
from .record import Record
from . import stats


@dataclass(frozen=True)
class Position:
    index_in_table: int
    index_in_bin: int

    NOT_FOUND: ClassVar["Position"]

    @property
    def found(self) -> bool:
        return self.index_in_table != NOT_FOUND

    def __str__(self) -> str:
        return f"[{self.index_in_table},{self.index_in_bin}]"


Position.NOT_FOUND = Position(NOT_FOUND, NOT_FOUND)


class TwoChoiceTable:
    """Fixed-size separate-chaining table with 2-choice insertion.

    Every record gets two candidate bins, ``h1(upc)`` and ``h2(desc)``, and
    goes to the front of the shorter one (``h1`` wins ties). The table is
    filled once, in dataset order, and is read-only afterwards.
    """
    def __init__(self, path: str | os.PathLike, size: int):
        self._allocate(size)
        self._insert_all(load_records(path))
        logger.info("Built table of size {} from {}: {} records",
                    self._size, path, self._count)

    @classmethod
    def from_records(cls, records: Iterable[Record], size: int) -> "TwoChoiceTable":
        table = cls.__new__(cls)
        table._allocate(size)
        table._insert_all(records)
        return table

    # ------------------------------------------------------------------
    def _allocate(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"Table size must be an int, got {type(size).__name__}")
        if size <= 0:
            raise ValueError(f"Table size must be positive, got {size}")
        self._size = size
        self._bins = [Bin() for _ in range(size)]
        self._count = 0

    def _insert_all(self, records: Iterable[Record]):
        for record in records:
            self.insert(record)

    # ------------------------------------------------------------------
    def insert(self, record: Record) -> bool:
        """Store ``record`` unless it is already present; True if stored."""
        b1, b2 = candidate_bins(record, self._size)
        first, second = self._bins[b1], self._bins[b2]

        if record in first or (b1 != b2 and record in second):
            logger.debug("Duplicate record {} ignored", record)
            return False

        if b1 == b2 or len(first) <= len(second):
            first.insert_front(record)
        else:
            second.insert_front(record)
        self._count += 1
        return True

    def search(self, record: Record) -> Position:
        b1, b2 = candidate_bins(record, self._size)

        i = self._bins[b1].find(record)
        if i != NOT_FOUND:
            return Position(b1, i)
        if b1 == b2:
            return Position.NOT_FOUND

        j = self._bins[b2].find(record)
        if j != NOT_FOUND:
            return Position(b2, j)
        return Position.NOT_FOUND

    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._count

    def __contains__(self, record: Record) -> bool:
        return self.search(record).found

    def bin(self, index: int) -> Bin:
        return self._bins[index]

    def bin_lengths(self) -> list[int]:
        return [len(b) for b in self._bins]

    def std_dev(self) -> float:
        return stats.std_dev(self)
