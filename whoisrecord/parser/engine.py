from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from whoisrecord.model import Record
from whoisrecord.parser.constants import DATE_FIELDS, FieldTag
from whoisrecord.parser.nameservers import normalize_nameservers


def split_lines(raw_text: str) -> List[str]:
    return raw_text.replace("\r\n", "\n").split("\n")


class RecordContext:
    """Accumulates the fields of one parse call before they are frozen into a Record."""

    def __init__(self, raw_text: str):
        self.raw_text = raw_text
        self.data: Dict[str, Any] = self._init_structure()

    def _init_structure(self) -> Dict[str, Any]:
        return {
            FieldTag.DOMAIN.value: None,
            FieldTag.REGISTRAR.value: None,
            FieldTag.NAMESERVERS.value: [],
            FieldTag.CREATED.value: None,
            FieldTag.UPDATED.value: None,
            FieldTag.EXPIRES.value: None,
            "contacts": {
                k: {} for k in
                ["registrant", "administrator", "technical"]
            },
        }

    def set_value(self, tag: FieldTag, value: Optional[str]) -> None:
        if not value:
            return

        if tag is FieldTag.NAMESERVERS:
            self.add_nameserver(value)
        elif tag in DATE_FIELDS:
            raise ValueError(f"{tag.value} needs a parsed date, use set_date()")
        else:
            self.data[tag.value] = value

    def set_date(self, tag: FieldTag, parsed: Optional[datetime]) -> None:
        # A later line that fails to parse never erases an earlier date.
        if parsed is not None:
            self.data[tag.value] = parsed

    def add_nameserver(self, nameserver: Optional[str]) -> None:
        if nameserver:
            self.data[FieldTag.NAMESERVERS.value].append(nameserver)

    def set_nameservers(self, nameservers: Iterable[Optional[str]]) -> None:
        self.data[FieldTag.NAMESERVERS.value] = [ns for ns in nameservers if ns]

    def set_contact(self, role: str, field: str, value: Optional[str]) -> None:
        if value:
            self.data["contacts"][role][field] = value

    def build(self) -> Record:
        data = dict(self.data)
        data[FieldTag.NAMESERVERS.value] = normalize_nameservers(data[FieldTag.NAMESERVERS.value])
        return Record(raw_text=self.raw_text, **data)
