"""Host name to address lookups."""

from __future__ import annotations

import ipaddress
import socket
from typing import NamedTuple, Optional


class Addresses(NamedTuple):
    """The IPv4 and IPv6 address found for a host, either may be None."""

    ipv4: Optional[str]
    ipv6: Optional[str]


def get_address(hostname: str) -> Addresses:
    """Resolve ``hostname`` to its IPv4 and IPv6 addresses.

    When several addresses of one family are returned, the last one wins.
    Resolution failures raise :class:`socket.gaierror`.
    """
    results = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    ipv4: Optional[str] = None
    ipv6: Optional[str] = None
    for family, _type, _proto, _canon, sockaddr in results:
        if family == socket.AF_INET:
            ipv4 = sockaddr[0]
        elif family == socket.AF_INET6:
            ipv6 = sockaddr[0]
    return Addresses(ipv4, ipv6)


def get_address4(hostname: str) -> int:
    """IPv4 address of ``hostname`` as an integer in host order, 0 on failure."""
    try:
        address = socket.gethostbyname(hostname)
    except OSError:
        return 0
    return int(ipaddress.IPv4Address(address))