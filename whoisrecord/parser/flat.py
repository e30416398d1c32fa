from whoisrecord.model import Record
from whoisrecord.parser.constants import DATE_FIELDS, FLAT_LABELS
from whoisrecord.parser.contacts import split_contact_label
from whoisrecord.parser.dates import parse_iso_datetime
from whoisrecord.parser.engine import RecordContext, split_lines


def parse_flat(raw_text: str) -> Record:
    """
    Parse a "Label: value" whois response, one line at a time.

    Only the first colon separates label and value, so times and URLs
    survive in the value. Labels that are not known are dropped.

    A known label with an empty value ("Registrar:") is skipped: it neither
    sets the field to "" nor clears a value read from an earlier line.
    """
    ctx = RecordContext(raw_text)

    for line in split_lines(raw_text):
        label, sep, value = line.strip().partition(":")
        if not sep:
            continue

        label = label.strip().lower()
        value = value.strip()

        tag = FLAT_LABELS.get(label)
        if tag in DATE_FIELDS:
            ctx.set_date(tag, parse_iso_datetime(value))
        elif tag is not None:
            ctx.set_value(tag, value)
        else:
            contact_slot = split_contact_label(label)
            if contact_slot:
                role, field = contact_slot
                ctx.set_contact(role, field, value)

    return ctx.build()
