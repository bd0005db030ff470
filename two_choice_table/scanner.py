# ==================================================
# two_choice_table/scanner.py
# ==================================================
"""Quote-aware field scanner for ``<upc>,<desc>`` dataset lines.

Quoting follows the usual delimited-text rules: a field holding the
delimiter or a quote is wrapped in quotes, and quotes inside it are doubled::

    079927020217,"Unique ""splits"" Split-open Pretzel Extra Dark"
"""
from __future__ import annotations

from .const import DELIMITER, QUOTE

# scanner states
FIELD_START, UNQUOTED, QUOTED, QUOTE_IN_QUOTED = range(4)


class MalformedLineError(ValueError):
    """A dataset line that cannot be turned into a record."""


# ------------------------------------------------------------------
def split_line(line: str, maxsplit: int = -1,
               delimiter: str = DELIMITER, quote: str = QUOTE) -> list[str]:
    """Split ``line`` into unescaped fields.

    With ``maxsplit >= 0`` at most that many delimiters separate fields; any
    later unquoted delimiter is kept as text of the last field.
    """
    fields: list[str] = []
    buf: list[str] = []
    state = FIELD_START

    for pos, ch in enumerate(line):
        splitting = maxsplit < 0 or len(fields) < maxsplit
        if state == FIELD_START:
            if ch == quote:
                state = QUOTED
            elif ch == delimiter and splitting:
                fields.append("")
            else:
                buf.append(ch)
                state = UNQUOTED
        elif state == UNQUOTED:
            if ch == delimiter and splitting:
                fields.append("".join(buf))
                buf = []
                state = FIELD_START
            else:
                buf.append(ch)          # stray quotes are literal here
        elif state == QUOTED:
            if ch == quote:
                state = QUOTE_IN_QUOTED
            else:
                buf.append(ch)
        else:                           # QUOTE_IN_QUOTED
            if ch == quote:
                buf.append(quote)
                state = QUOTED
            elif ch == delimiter and splitting:
                fields.append("".join(buf))
                buf = []
                state = FIELD_START
            else:
                raise MalformedLineError(
                    f"unexpected {ch!r} after closing quote at column {pos}")

    if state == QUOTED:
        raise MalformedLineError("unterminated quoted field")
    fields.append("".join(buf))
    return fields


def quote_field(text: str, delimiter: str = DELIMITER, quote: str = QUOTE) -> str:
    """Inverse of the scanner for a single field."""
    if delimiter in text or quote in text or "\n" in text:
        return quote + text.replace(quote, quote * 2) + quote
    return text
