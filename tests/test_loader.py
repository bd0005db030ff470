import pytest

from two_choice_table.hashing import h2
from two_choice_table.loader import iter_records, load_records, parse_line
from two_choice_table.record import Record


def test_parse_line_strips_line_endings():
    assert parse_line("12,Salt\r\n") == Record(12, "Salt")


def test_iter_records_keeps_order_and_skips_bad_lines(log_messages):
    lines = ["upc12,name\n", "2,b\n", "\n", "garbage\n", "1,a\n", '3,"open\n']

    records = list(iter_records(lines, source="inline.csv"))

    assert records == [Record(2, "b"), Record(1, "a")]
    warnings = [msg for msg in log_messages if msg.startswith("WARNING|")]
    assert len(warnings) == 3
    assert "inline.csv:1:" in warnings[0]
    assert "inline.csv:4:" in warnings[1]
    assert "inline.csv:6:" in warnings[2]


def test_load_records_reads_file_in_order(test_data_path, log_messages):
    records = load_records(test_data_path)

    assert len(records) == 11  # header skipped, duplicate kept for the table to drop
    assert records[0].upc == 753950001954
    assert records[4] == Record(41220576462, "Tostitos Scoops, Tortilla Chips - 10 Oz")
    assert records[-1] == Record(79927020217, 'Unique "splits" Split-open Pretzel Extra Dark')
    assert any(msg.startswith("INFO|Loaded 11 records") for msg in log_messages)


def test_load_records_keeps_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"5,Caf\xe9 Noir\n")

    (record,) = load_records(path)

    assert record.upc == 5
    assert record.desc.encode("utf-8", "surrogateescape") == b"Caf\xe9 Noir"


def test_load_records_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_records(tmp_path / "nope.csv")


def test_loaded_non_utf8_desc_hashes_raw_bytes(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"7,\xe9ab\n")

    (record,) = load_records(path)

    # 0xE9 is -23 as a signed char; 'a' and 'b' follow in their own positions
    assert h2(record.desc, 1000) == abs(-23 + 27 * 97 + 729 * 98) % 1000 == 38
