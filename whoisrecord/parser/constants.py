from enum import Enum


class FieldTag(str, Enum):
    """Record slots a whois label can be folded into. Values are Record attribute names."""
    DOMAIN = "domain"
    REGISTRAR = "registrar"
    NAMESERVERS = "nameservers"
    CREATED = "created_at"
    UPDATED = "updated_at"
    EXPIRES = "expires_at"


DATE_FIELDS = frozenset({FieldTag.CREATED, FieldTag.UPDATED, FieldTag.EXPIRES})

# "Label: value" style responses (Verisign, PIR and most ICANN registries)
FLAT_LABELS = {
    "domain name": FieldTag.DOMAIN,
    "name server": FieldTag.NAMESERVERS,
    "registrar": FieldTag.REGISTRAR,
    "sponsoring registrar": FieldTag.REGISTRAR,
    "creation date": FieldTag.CREATED,
    "updated date": FieldTag.UPDATED,
    "expiration date": FieldTag.EXPIRES,
    "registry expiry date": FieldTag.EXPIRES,
}

# Outline style responses (Nominet)
OUTLINE_HEADERS = {
    "domain name": FieldTag.DOMAIN,
    "domain": FieldTag.DOMAIN,
    "registrar": FieldTag.REGISTRAR,
    "name servers": FieldTag.NAMESERVERS,
}

OUTLINE_DATES_HEADER = "relevant dates"

OUTLINE_DATE_KEYS = {
    "registered on": FieldTag.CREATED,
    "expiry date": FieldTag.EXPIRES,
    "last updated": FieldTag.UPDATED,
}

CONTACT_ROLES = {
    "registrant ": "registrant",
    "admin ": "administrator",
    "tech ": "technical",
}

CONTACT_FIELDS = {
    "name": "name",
    "organization": "organization",
    "street": "street",
    "city": "city",
    "state/province": "state",
    "postal code": "zip",
    "country": "country",
    "phone": "phone",
    "fax": "fax",
    "email": "email",
}
