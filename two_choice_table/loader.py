# ==================================================
# two_choice_table/loader.py
# ==================================================
"""Read a ``<upc>,<desc>`` dataset into records, in file order."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator

from loguru import logger

from .const import DECODE_ERRORS, DEFAULT_ENCODING
from .record import Record
from .scanner import MalformedLineError


def parse_line(line: str) -> Record:
    return Record.from_line(line.rstrip("\r\n"))


def iter_records(lines: Iterable[str], source: str = "<lines>") -> Iterator[Record]:
    """Yield a record per well-formed line.

    Blank lines are ignored; malformed ones are logged and skipped.
    """
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield parse_line(line)
        except MalformedLineError as exc:
            logger.warning("{}:{}: skipping line ({})", source, lineno, exc)


def load_records(path: str | os.PathLike) -> list[Record]:
    """Read every record of ``path`` up front.

    Decoding always matches the byte view h2 re-encodes to, so hashing sees
    the file's own bytes whatever its real encoding.

    A missing or unreadable file raises before anything is returned.
    """
    path = Path(path)
    with path.open("r", encoding=DEFAULT_ENCODING, errors=DECODE_ERRORS) as f:
        lines = f.readlines()

    records = list(iter_records(lines, source=str(path)))
    logger.info("Loaded {} records from {} ({} lines)", len(records), path, len(lines))
    return records
