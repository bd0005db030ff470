# ==================================================
# two_choice_table/record.py
# ==================================================
from __future__ import annotations

from dataclasses import dataclass

from .const import DELIMITER
from .scanner import MalformedLineError, quote_field, split_line


@dataclass(frozen=True)
class Record:
    """One dataset item: numeric UPC plus free-text description."""
    upc: int
    desc: str

    @classmethod
    def from_line(cls, line: str) -> "Record":
        """Parse ``<upc>,<desc>``; everything after the first delimiter is desc."""
        fields = split_line(line, maxsplit=1)
        if len(fields) != 2:
            raise MalformedLineError(f"no {DELIMITER!r} delimiter in {line!r}")
        upc_text, desc = fields
        upc_text = upc_text.strip()
        if not (upc_text.isascii() and upc_text.isdigit()):
            raise MalformedLineError(f"non-numeric upc {upc_text!r}")
        return cls(int(upc_text), desc)

    def __str__(self) -> str:
        return f"{self.upc}{DELIMITER}{quote_field(self.desc)}"
