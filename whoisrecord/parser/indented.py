from typing import List, Optional

from whoisrecord.model import Record
from whoisrecord.parser.constants import (
    OUTLINE_DATE_KEYS,
    OUTLINE_DATES_HEADER,
    OUTLINE_HEADERS,
    FieldTag,
)
from whoisrecord.parser.dates import parse_day_month_year
from whoisrecord.parser.engine import RecordContext, split_lines
from whoisrecord.parser.nameservers import extract_nameserver
from whoisrecord.parser.outline import ContentItem, PairItem, TextItem, parse_outline


def first_text(items: List[ContentItem]) -> Optional[str]:
    for item in items:
        if isinstance(item, TextItem):
            return item.text
    return None


def parse_indented(raw_text: str) -> Record:
    """Parse an outline style whois response (see whoisrecord.parser.outline)."""
    ctx = RecordContext(raw_text)

    for header, items in parse_outline(split_lines(raw_text)).items():
        if header == OUTLINE_DATES_HEADER:
            for item in items:
                if not isinstance(item, PairItem):
                    continue
                tag = OUTLINE_DATE_KEYS.get(item.key)
                if tag is not None:
                    ctx.set_date(tag, parse_day_month_year(item.value))
            continue

        tag = OUTLINE_HEADERS.get(header)
        if tag is FieldTag.NAMESERVERS:
            ctx.set_nameservers(
                extract_nameserver(item.text) for item in items if isinstance(item, TextItem)
            )
        elif tag is not None:
            ctx.set_value(tag, first_text(items))

    return ctx.build()
