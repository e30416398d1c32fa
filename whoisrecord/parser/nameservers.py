import re
from typing import Iterable, List, Optional

NAMESERVER_TOKEN_RE = re.compile(r"^(?P<hostname>[A-Za-z0-9.\-]+)")


def extract_nameserver(line: str) -> Optional[str]:
    """
    Return the hostname a nameserver line starts with.

    Outline style responses may follow the hostname with glue records or
    a description ("ns1.example.co.uk  192.0.2.1"), which is dropped.
    """
    match = NAMESERVER_TOKEN_RE.match(line.strip())
    if not match:
        return None
    return match.group("hostname")


def normalize_nameservers(nameservers: Iterable[str]) -> List[str]:
    """Lowercase nameservers and drop duplicates, keeping the first-seen order."""
    seen = set()
    result = []
    for nameserver in nameservers:
        lowered = nameserver.lower()
        if lowered not in seen:
            seen.add(lowered)
            result.append(lowered)
    return result
