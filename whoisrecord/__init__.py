# -*- coding: utf-8 -*-

import asyncio
import logging
import sys
from typing import Optional

import tldextract

from whoisrecord.client import NICClient
from whoisrecord.exceptions import WhoisError, WhoisServerNotFoundError
from whoisrecord.model import Contact, Contacts, Record
from whoisrecord.parser import RecordStyle, parse, parse_flat, parse_indented
from whoisrecord.servers import server_for, style_for

logger = logging.getLogger("whoisrecord")
# Offline: only the public suffix snapshot bundled with tldextract is used
extractor = tldextract.TLDExtract(suffix_list_urls=(), include_psl_private_domains=True)


def extract_domain(url: str) -> str:
    """Extract the registrable domain from the given URL or hostname

    >>> extract_domain('https://www.google.com.au/tos.html')
    'google.com.au'
    >>> extract_domain('abc.def.com')
    'def.com'
    >>> extract_domain('www.webscraping.com')
    'webscraping.com'
    >>> extract_domain('https://foo.unknowntld:8043/path')
    'foo.unknowntld'
    """
    ext = extractor(url)
    if ext.top_domain_under_public_suffix:
        return ext.top_domain_under_public_suffix

    # Unknown suffix: keep the bare hostname, without scheme, port or path
    hostname = ".".join(part for part in (ext.subdomain, ext.domain) if part)
    return (hostname or url.strip()).rstrip(".").lower()


async def whois(
        url: str,
        host: Optional[str] = None,
        style: Optional[RecordStyle] = None,
        timeout: int = 10,
        prefer_ipv6: bool = False,
) -> Record:
    """
    url: the URL or domain to search whois
    host: whois server to query (default: picked from the packaged TLD table)
    style: response grammar to parse with (default: picked from the whois server)
    timeout: timeout for WHOIS request (default 10 seconds)
    prefer_ipv6: try the IPv6 addresses of the whois server first (default False)
    """
    domain = extract_domain(url)

    if host is None:
        host = server_for(domain)
        if host is None:
            raise WhoisServerNotFoundError(f"No whois server is known for {domain}")

    style = style_for(host) if style is None else RecordStyle(style)

    nic_client = NICClient(prefer_ipv6=prefer_ipv6)
    text = await nic_client.query(host, domain, timeout=timeout)

    logger.debug("Parsing %d characters from %s as %s", len(text), host, style.value)
    return parse(text, style)


async def main():
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        url = sys.argv[1]
    except IndexError:
        logger.error("Usage: %s url", sys.argv[0])
    else:
        try:
            record = await whois(url)
        except WhoisError as exception:
            logger.error("could not process %s: %s", url, exception)
        else:
            if record.is_empty:
                logger.warning("no registration data could be extracted for %s", url)
            logger.info(record.model_dump_json(indent=2, exclude={'raw_text'}))


def run():
    asyncio.run(main())


__all__ = [
    "Contact",
    "Contacts",
    "NICClient",
    "Record",
    "RecordStyle",
    "extract_domain",
    "parse",
    "parse_flat",
    "parse_indented",
    "whois",
]


if __name__ == "__main__":
    run()
