# ==================================================
# two_choice_table/report.py
# ==================================================
"""Build tables at several sizes and print stddev plus probe positions.

    python -m two_choice_table.report grocery_upc_database.csv
    python -m two_choice_table.report data.csv --sizes 3 --probe "753950001954,Doctor's Best"
"""
import argparse
import sys

from loguru import logger

from .const import DEFAULT_TABLE_SIZES, PROBE_LINES
from .loader import parse_line
from .scanner import MalformedLineError
from .table import TwoChoiceTable


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"table size must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="two-choice-report", description=__doc__,
                                formatter_class=argparse.RawDescriptionHelpFormatter)
    p.add_argument("dataset", help="path to <upc>,<desc> csv file")
    p.add_argument("--sizes", type=_positive_int, nargs="+",
                   default=list(DEFAULT_TABLE_SIZES), help="table sizes to build")
    p.add_argument("--probe", action="append", dest="probes", metavar="LINE",
                   help="record to look up, in dataset form (repeatable)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO")

    try:
        probes = [parse_line(line) for line in (args.probes or PROBE_LINES)]
    except MalformedLineError as exc:
        parser.error(f"bad --probe: {exc}")
    for size in args.sizes:
        try:
            table = TwoChoiceTable(args.dataset, size)
        except OSError as exc:
            print(f"error: cannot read {args.dataset}: {exc}", file=sys.stderr)
            return 1
        print(f"Table size = {size}, stddev = {table.std_dev():g}")
        for record in probes:
            print(f"      {table.search(record)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
