import itertools
from pathlib import Path

import pytest
from loguru import logger

from two_choice_table.hashing import h2
from two_choice_table.record import Record

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def test_data_path() -> Path:
    return DATA_DIR / "test_data.csv"


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def make_record():
    """Factory for fresh records whose candidate bins are (b1, b2)."""
    counter = itertools.count()

    def _make(size: int, b1: int, b2: int) -> Record:
        for i in counter:
            desc = f"{i % 1000:03d}-{i}"
            if h2(desc, size) == b2:
                return Record(b1 + size * (i + 1), desc)

    return _make
