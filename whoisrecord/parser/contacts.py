from typing import Optional, Tuple

from whoisrecord.parser.constants import CONTACT_FIELDS, CONTACT_ROLES


def contact_field(name: str) -> Optional[str]:
    """Return the Contact attribute for a free-text field name, or None."""
    return CONTACT_FIELDS.get(name.strip().lower())


def split_contact_label(label: str) -> Optional[Tuple[str, str]]:
    """
    Resolve a flat label such as "admin postal code" into ("administrator", "zip").

    Returns None when the label has no known role prefix or when the rest
    of the label is not a known contact field.
    """
    label = label.strip().lower()
    for prefix, role in CONTACT_ROLES.items():
        if label.startswith(prefix):
            field = contact_field(label[len(prefix):])
            if field is None:
                return None
            return role, field
    return None
