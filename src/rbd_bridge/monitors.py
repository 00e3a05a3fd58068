"""
Monitor address normalization.

Accepted forms:

- IPv4:           10.0.0.1
- IPv4 with port: 10.0.0.1:6789
- IPv6:           [::1]
- IPv6 with port: [::1]:6789
- hostname, optionally with port; resolved to every address it has

An unbracketed IPv6 literal is read as host:port and rejected.
"""

import ipaddress
import logging
import re
import socket
from typing import Iterable, List, Tuple, Union

from rbd_bridge.errors import AddressResolutionError, InvalidMonitorAddressError

logger = logging.getLogger(__name__)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_IPV6_WITH_PORT_RE = re.compile(r"^\[.*\]:\d+$")


def has_port(addr: str) -> bool:
    """Return True if ``addr`` carries a port suffix."""
    if addr.startswith("["):
        return _IPV6_WITH_PORT_RE.match(addr) is not None
    return ":" in addr


def split_host_port(addr: str) -> Tuple[str, str]:
    """
    Split ``host:port`` or ``[host]:port`` into host and port.

    Brackets are removed from the host. A host containing ":" must be
    bracketed.

    Raises:
        InvalidMonitorAddressError: If the address cannot be split.
    """
    if addr.startswith("["):
        end = addr.find("]")
        if end < 0:
            raise InvalidMonitorAddressError(addr, "missing ']'")
        if addr[end + 1:end + 2] != ":":
            raise InvalidMonitorAddressError(addr, "missing port")
        host, port = addr[1:end], addr[end + 2:]
        if "[" in host or "]" in host or "]" in port:
            raise InvalidMonitorAddressError(addr, "unexpected bracket")
        return host, port

    host, sep, port = addr.rpartition(":")
    if not sep:
        raise InvalidMonitorAddressError(addr, "missing port")
    if ":" in host:
        raise InvalidMonitorAddressError(addr, "too many colons")
    if "[" in host or "]" in host:
        raise InvalidMonitorAddressError(addr, "unexpected bracket")
    return host, port


def resolve_host(host: str) -> List[IPAddress]:
    """
    Look up every address of ``host`` in resolver order.

    Raises:
        AddressResolutionError: If the lookup fails or returns nothing.
    """
    if not host:
        raise AddressResolutionError(host, "empty host")
    try:
        infos = socket.getaddrinfo(host, None, proto=socket.IPPROTO_TCP)
    except (socket.gaierror, UnicodeError) as e:
        raise AddressResolutionError(host, str(e)) from e

    addrs = []
    for _family, _type, _proto, _canonname, sockaddr in infos:
        addrs.append(ipaddress.ip_address(sockaddr[0]))
    if not addrs:
        raise AddressResolutionError(host, "no addresses found")
    return addrs


def parse_monitor_addresses(addrs: Iterable[str]) -> List[IPAddress]:
    """
    Normalize monitor addresses into IP addresses.

    Ports and brackets are dropped and hostnames are resolved. Order
    follows the input and duplicates are kept. The first failure aborts
    the whole call.

    Raises:
        InvalidMonitorAddressError: If an address cannot be split.
        AddressResolutionError: If a hostname cannot be resolved.
    """
    ips: List[IPAddress] = []

    for mon in addrs:
        host = mon
        if has_port(mon):
            host, _ = split_host_port(mon)
        if host.startswith("["):
            # pull the host/IP out of the brackets
            host = host.strip("[]")

        try:
            ips.append(ipaddress.ip_address(host))
            continue
        except ValueError:
            pass

        logger.debug(f"resolving monitor host {host!r}")
        ips.extend(resolve_host(host))

    return ips
