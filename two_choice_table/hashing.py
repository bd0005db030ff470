# ==================================================
# two_choice_table/hashing.py
# ==================================================
from __future__ import annotations

from typing import TYPE_CHECKING

from .const import DECODE_ERRORS, DEFAULT_ENCODING, H2_PREFIX_LEN, H2_WEIGHTS

if TYPE_CHECKING:
    from .record import Record


def _signed_char(b: int) -> int:
    return b - 256 if b > 127 else b


# -- the two choices --------------------------------------------------------
def h1(upc: int, size: int) -> int:
    """upc % size; upc is assumed non-negative (no abs guard)."""
    return upc % size


def h2(desc: str, size: int) -> int:
    """abs(c0 + 27*c1 + 729*c2) % size over the first three bytes of desc.

    Bytes are read as signed chars; positions past the end count as 0.
    """
    head = desc.encode(DEFAULT_ENCODING, DECODE_ERRORS)[:H2_PREFIX_LEN]
    total = sum(w * _signed_char(b) for w, b in zip(H2_WEIGHTS, head))
    return abs(total) % size


def candidate_bins(record: "Record", size: int) -> tuple[int, int]:
    return h1(record.upc, size), h2(record.desc, size)
