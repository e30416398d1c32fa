import logging
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from whoisrecord.parser import RecordStyle

logger = logging.getLogger(__name__)

TLD_TABLE = "data/tld.csv"

# Registries known to answer with an indented outline instead of "label: value" lines
INDENTED_HOSTS = frozenset({"whois.nic.uk"})


def read_table(text: str) -> Dict[str, str]:
    servers = {}
    for line in text.replace("\r\n", "\n").split("\n"):
        line = line.strip()
        if not line:
            continue
        tld, host = line.split(",", 1)
        servers[tld.strip().lower()] = host.strip()
    return servers


@lru_cache(maxsize=None)
def load_servers() -> Mapping[str, str]:
    """Load the packaged TLD -> whois host table. Read once per process."""
    text = resources.files("whoisrecord").joinpath(TLD_TABLE).read_text(encoding="utf-8")
    servers = read_table(text)
    logger.debug("Loaded %d whois servers from %s", len(servers), TLD_TABLE)
    return MappingProxyType(servers)


def server_for(domain: str) -> Optional[str]:
    """
    Return the whois host for the last label of domain, or None.

    Only the final label is looked up, so entries such as "co.uk" in the
    table are never matched ("example.co.uk" resolves through "uk").
    """
    tld = domain.strip().rstrip(".").rsplit(".", 1)[-1].lower()
    host = load_servers().get(tld)
    if host is None:
        logger.debug("No whois server known for .%s", tld)
    return host


def style_for(host: str) -> RecordStyle:
    if host.lower() in INDENTED_HOSTS:
        return RecordStyle.INDENTED
    return RecordStyle.FLAT
