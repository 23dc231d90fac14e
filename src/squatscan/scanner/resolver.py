"""Recursive DNS lookups against a single configured nameserver."""

import ipaddress
import socket
from typing import List, Tuple

import dns.exception
import dns.flags
import dns.message
import dns.query
import dns.rcode
import dns.rdatatype

from .. import constants
from ..exceptions import ConfigError, DNSLookupError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Everything a single lookup may raise; callers treat these as "no data"
LOOKUP_ERRORS = (dns.exception.DNSException, DNSLookupError, OSError, ValueError)


def parse_nameserver(value: str) -> Tuple[str, int]:
    """
    Split ``host[:port]`` (or ``[v6]:port``) into host and port.

    Raises:
        ConfigError: if the port is not a number in range
    """
    value = value.strip()
    if value.startswith('['):
        host, _, rest = value[1:].partition(']')
        port = rest.lstrip(':') or constants.DEFAULT_DNS_PORT
    elif value.count(':') == 1:
        host, port = value.split(':')
    else:
        # bare IPv4, bare IPv6 or hostname
        host, port = value, constants.DEFAULT_DNS_PORT

    try:
        port = int(port)
    except ValueError:
        raise ConfigError(f"Invalid nameserver port in {value!r}")
    if not 0 < port < 65536:
        raise ConfigError(f"Nameserver port out of range in {value!r}")
    if not host:
        raise ConfigError(f"Missing nameserver host in {value!r}")
    return host, port


class Resolver:
    """Sends RD-flagged UDP queries for A, MX and NS records."""

    def __init__(self, nameserver: str = f"{constants.DEFAULT_NAMESERVER}:{constants.DEFAULT_DNS_PORT}",
                 timeout: float = constants.DEFAULT_TIMEOUT):
        """
        Initialize resolver.

        Args:
            nameserver: Target as ``host[:port]``
            timeout: Timeout for one query/response exchange in seconds
        """
        self.host, self.port = parse_nameserver(nameserver)
        self.timeout = timeout
        self.address = self._resolve_host(self.host)

    @staticmethod
    def _resolve_host(host: str) -> str:
        try:
            ipaddress.ip_address(host)
            return host
        except ValueError:
            pass
        try:
            address = socket.gethostbyname(host)
        except OSError as e:
            logger.warning(f"Could not resolve nameserver {host}: {e}")
            return host
        logger.debug(f"Nameserver {host} resolved to {address}")
        return address

    def query(self, name: str, rdtype: str) -> List[str]:
        """
        Resolve ``name`` for one record type.

        Args:
            name: ASCII domain name
            rdtype: Record type tag ("A", "MX", "NS")

        Returns:
            Record values in answer order (possibly empty)

        Raises:
            DNSLookupError: if the response code is not NOERROR
            dns.exception.DNSException: on timeout or malformed response
            OSError: on socket errors
        """
        request = dns.message.make_query(name, dns.rdatatype.from_text(rdtype))
        request.flags |= dns.flags.RD

        response = dns.query.udp(request, self.address, timeout=self.timeout, port=self.port)

        rcode = response.rcode()
        if rcode != dns.rcode.NOERROR:
            raise DNSLookupError(f"DNS lookup of {name}/{rdtype} failed with {dns.rcode.to_text(rcode)}")

        wanted = dns.rdatatype.from_text(rdtype)
        values = []
        for rrset in response.answer:
            if rrset.rdtype != wanted:
                continue
            for rdata in rrset:
                values.append(self._rdata_text(rdata))
        logger.debug(f"{name}/{rdtype}: {values}")
        return values

    @staticmethod
    def _rdata_text(rdata) -> str:
        if rdata.rdtype == dns.rdatatype.A:
            return rdata.address
        if rdata.rdtype == dns.rdatatype.MX:
            return rdata.exchange.to_text(omit_final_dot=True)
        if rdata.rdtype == dns.rdatatype.NS:
            return rdata.target.to_text(omit_final_dot=True)
        return rdata.to_text()
