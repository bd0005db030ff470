from .record import Record
from .scanner import MalformedLineError
from .table import Position, TwoChoiceTable
from .stats import BinStats, std_dev, summarize

__all__ = ["Record", "MalformedLineError", "Position", "TwoChoiceTable",
           "BinStats", "std_dev", "summarize"]
