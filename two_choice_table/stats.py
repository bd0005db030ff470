# ==================================================
# two_choice_table/stats.py
# ==================================================
"""Load-balance statistics over a built table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .table import TwoChoiceTable


@dataclass(frozen=True)
class BinStats:
    size: int
    records: int
    mean: float
    std_dev: float
    max_length: int
    empty_bins: int


def _lengths(table: "TwoChoiceTable") -> np.ndarray:
    return np.asarray(table.bin_lengths(), dtype=np.float64)


def std_dev(table: "TwoChoiceTable") -> float:
    """Population standard deviation of bin lengths (divisor = table size)."""
    return float(np.std(_lengths(table), ddof=0))


def summarize(table: "TwoChoiceTable") -> BinStats:
    lengths = _lengths(table)
    return BinStats(
        size=table.size,
        records=int(lengths.sum()),
        mean=float(lengths.mean()),
        std_dev=float(lengths.std(ddof=0)),
        max_length=int(lengths.max()),
        empty_bins=int(np.count_nonzero(lengths == 0)),
    )
