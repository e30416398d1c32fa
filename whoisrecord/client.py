# -*- coding: utf-8 -*-

"""
Asynchronous whois client talking to registries on TCP port 43

based on:
http://www.opensource.apple.com/source/adv_cmds/adv_cmds-138.1/whois/whois.c

Copyright (c) 2010 Chris Wolf

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import asyncio
import logging
import socket
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Tuple

from whoisrecord.exceptions import WhoisEmptyResponseError, WhoisNetworkError

logger = logging.getLogger(__name__)


class NICClient:
    WHOIS_PORT = 43
    DENICHOST = "whois.denic.de"
    DK_HOST = "whois.dk-hostmaster.dk"

    def __init__(self, prefer_ipv6: bool = False):
        self.prefer_ipv6 = prefer_ipv6

    @asynccontextmanager
    async def _connect(self, hostname: str, timeout: int) -> AsyncGenerator[Tuple[asyncio.StreamReader, asyncio.StreamWriter], None]:
        """Resolve WHOIS IP address and connect to its TCP 43 port."""
        writer = None
        try:
            loop = asyncio.get_running_loop()
            addr_infos = await loop.getaddrinfo(
                hostname, self.WHOIS_PORT, family=socket.AF_UNSPEC, type=socket.SOCK_STREAM
            )

            if self.prefer_ipv6:
                addr_infos.sort(key=lambda x: x[0], reverse=True)

            last_err = None
            for _family, _sock_type, _proto, _canonname, sockaddr in addr_infos:
                try:
                    reader, writer = await asyncio.wait_for(
                        asyncio.open_connection(host=sockaddr[0], port=sockaddr[1]),
                        timeout=timeout
                    )
                except (asyncio.TimeoutError, OSError) as e:
                    logger.debug("Could not connect to %s (%s): %s", hostname, sockaddr[0], e)
                    last_err = e
                    continue

                yield reader, writer
                return

            raise last_err or OSError(f"Could not connect to {hostname}")

        finally:
            if writer:
                writer.close()
                await writer.wait_closed()

    @classmethod
    def format_query(cls, hostname: str, domain: str) -> str:
        if hostname == cls.DENICHOST:
            return "-T dn,ace -C UTF-8 " + domain
        if hostname == cls.DK_HOST:
            return " --show-handles " + domain
        if hostname.endswith(".jp"):
            return domain + "/e"
        return domain

    async def query(self, hostname: str, domain: str, timeout: int = 10) -> str:
        """Send domain to the whois server at hostname and return its full answer."""
        logger.debug("Querying %s for %s", hostname, domain)
        try:
            async with self._connect(hostname, timeout) as (reader, writer):
                writer.write(self.format_query(hostname, domain).encode("utf-8") + b"\r\n")
                await writer.drain()
                response = await asyncio.wait_for(reader.read(), timeout=timeout)
        except (asyncio.TimeoutError, OSError) as exc:
            raise WhoisNetworkError(f"Whois query to {hostname} failed: {exc}") from exc

        if not response:
            raise WhoisEmptyResponseError(f"{hostname} returned no data for {domain}")

        return response.decode("utf-8", "replace")
