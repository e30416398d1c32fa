from enum import Enum

from whoisrecord.model import Record
from whoisrecord.parser.flat import parse_flat
from whoisrecord.parser.indented import parse_indented


class RecordStyle(str, Enum):
    FLAT = "flat"
    INDENTED = "indented"


PARSERS = {
    RecordStyle.FLAT: parse_flat,
    RecordStyle.INDENTED: parse_indented,
}


def parse(raw_text: str, style: RecordStyle = RecordStyle.FLAT) -> Record:
    """Parse a raw whois response with the grammar the queried registry uses."""
    return PARSERS[RecordStyle(style)](raw_text)


__all__ = ["RecordStyle", "parse", "parse_flat", "parse_indented"]
