from __future__ import annotations

import textwrap

import pytest

NOMINET_RESPONSE = textwrap.dedent(
    """

        Domain name:
            google.co.uk

        Data validation:
            Nominet was able to match the registrant's name and address against a 3rd party data source on 10-Dec-2012

        Registrar:
            Markmonitor Inc. t/a MarkMonitor Inc. [Tag = MARKMONITOR]
            URL: http://www.markmonitor.com

        Relevant dates:
            Registered on: 14-Feb-1999
            Expiry date:  14-Feb-2019
            Last updated:  13-Jan-2018

        Name servers:
            ns1.google.com
            ns2.google.com
            NS1.GOOGLE.COM
            ns3.google.com        216.239.36.10

        WHOIS lookup made at 10:47:05 14-Jan-2018

    --
    This WHOIS information is provided for free by Nominet UK the central registry
    for .uk domain names. This information and the .uk WHOIS are:

        Copyright Nominet UK 1996 - 2018.
    """
)

VERISIGN_RESPONSE = (
    "   Domain Name: EXAMPLE.COM\r\n"
    "   Registry Domain ID: 2336799_DOMAIN_COM-VRSN\r\n"
    "   Registrar WHOIS Server: whois.iana.org\r\n"
    "   Registrar URL: http://res-dom.iana.org\r\n"
    "   Updated Date: 2023-08-14T07:01:38Z\r\n"
    "   Creation Date: 1995-08-14T04:00:00Z\r\n"
    "   Registry Expiry Date: 2024-08-13T04:00:00Z\r\n"
    "   Registrar: RESERVED-Internet Assigned Numbers Authority\r\n"
    "   Registrar IANA ID: 376\r\n"
    "   Domain Status: clientDeleteProhibited https://icann.org/epp#clientDeleteProhibited\r\n"
    "   Name Server: A.IANA-SERVERS.NET\r\n"
    "   Name Server: B.IANA-SERVERS.NET\r\n"
    "   DNSSEC: signedDelegation\r\n"
    ">>> Last update of whois database: 2024-01-09T12:00:00Z <<<\r\n"
    "\r\n"
    "NOTICE: The expiration date displayed in this record is the date the\r\n"
    "registrar's sponsorship of the domain name registration in the registry is\r\n"
    "currently set to expire.\r\n"
)


@pytest.fixture
def nominet_response() -> str:
    return NOMINET_RESPONSE


@pytest.fixture
def verisign_response() -> str:
    return VERISIGN_RESPONSE
