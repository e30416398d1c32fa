"""
Generic parser for whois responses laid out as an indented outline.

Some registries (Nominet for instance) answer with headers followed by
more deeply indented content instead of "label: value" lines:

    Domain name:
        google.co.uk

    Registrar:
        Markmonitor Inc. t/a MarkMonitor Inc. [Tag = MARKMONITOR]
        URL: http://www.markmonitor.com

    Relevant dates:
        Registered on: 14-Feb-1999
        Expiry date:  14-Feb-2019
        Last updated:  13-Jan-2018

which parse_outline() turns into:

    {
        "domain name": [TextItem("google.co.uk")],
        "registrar": [
            TextItem("Markmonitor Inc. t/a MarkMonitor Inc. [Tag = MARKMONITOR]"),
            PairItem("url", "http://www.markmonitor.com"),
        ],
        "relevant dates": [
            PairItem("registered on", "14-Feb-1999"),
            PairItem("expiry date", "14-Feb-2019"),
            PairItem("last updated", "13-Jan-2018"),
        ],
    }

The walk stops quietly at the first line that does not fit the outline,
so the legal boilerplate registries append after the data is ignored.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Union

HEADER_RE = re.compile(r"^(?P<header>.+):$")
PAIR_RE = re.compile(r"^(?P<key>.+?):\s+(?P<value>.+)$")


@dataclass(frozen=True)
class TextItem:
    text: str


@dataclass(frozen=True)
class PairItem:
    key: str
    value: str


ContentItem = Union[TextItem, PairItem]


class OutlineSection(NamedTuple):
    header: str
    items: List[ContentItem]


def leading_indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def is_blank(line: str) -> bool:
    return not line.strip()


def parse_header(line: str) -> Optional[str]:
    match = HEADER_RE.match(line.strip())
    if not match:
        return None
    return match.group("header").strip().lower() or None


def parse_content_line(line: str) -> ContentItem:
    text = line.strip()
    match = PAIR_RE.match(text)
    if match:
        return PairItem(
            key=match.group("key").strip().lower(),
            value=match.group("value").strip(),
        )
    return TextItem(text)


def iter_sections(lines: Iterable[str]) -> Iterator[OutlineSection]:
    """Yield sections in document order until the outline ends."""
    remaining = [line for line in lines if not is_blank(line)]
    position = 0

    while position + 1 < len(remaining):
        header_line = remaining[position]
        header = parse_header(header_line)
        if header is None:
            return

        # The first content line decides the indent of the whole section.
        content_indent = leading_indent(remaining[position + 1])
        if content_indent <= leading_indent(header_line):
            return

        position += 1
        items: List[ContentItem] = []
        while position < len(remaining) and leading_indent(remaining[position]) == content_indent:
            items.append(parse_content_line(remaining[position]))
            position += 1

        yield OutlineSection(header, items)


def parse_outline(lines: Iterable[str]) -> Dict[str, List[ContentItem]]:
    """Map each header to its content items. A repeated header keeps its last section."""
    return {section.header: section.items for section in iter_sections(lines)}
