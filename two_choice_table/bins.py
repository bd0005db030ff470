# ==================================================
# two_choice_table/bins.py
# ==================================================
from __future__ import annotations

from collections import deque
from typing import Iterator

from .const import NOT_FOUND
from .record import Record


class Bin:
    """Chain of records for one table slot; index 0 is the newest entry."""

    __slots__ = ("_items",)

    def __init__(self):
        self._items: deque[Record] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._items)

    def __contains__(self, record: Record) -> bool:
        return self.find(record) != NOT_FOUND

    def __repr__(self):
        return f"Bin({list(self._items)!r})"

    def length(self) -> int:
        return len(self._items)

    def insert_front(self, record: Record):
        self._items.appendleft(record)

    def find(self, record: Record) -> int:
        for i, item in enumerate(self._items):
            if item == record:
                return i
        return NOT_FOUND
