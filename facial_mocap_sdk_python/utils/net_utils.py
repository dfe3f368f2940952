"""
Local address lookup.

The address is only shown to the user so it can be typed into the
iFacialMocap app; it is never used to filter incoming datagrams.
"""

import ipaddress
import socket


ADDRESS_UNAVAILABLE = "IP address unavailable"
NO_IPV4_ADDRESS = "No IPv4 address found"


def fetch_local_ip_address():
    """
    Resolve this host's IPv4 addresses, preferring a non-loopback one.

    Returns:
        Dotted IPv4 string, or NO_IPV4_ADDRESS if the host has none

    Raises:
        OSError: if host name resolution fails
    """
    _name, _aliases, addresses = socket.gethostbyname_ex(socket.gethostname())
    ipv4 = [a for a in addresses if isinstance(ipaddress.ip_address(a), ipaddress.IPv4Address)]
    if not ipv4:
        return NO_IPV4_ADDRESS

    for address in ipv4:
        if not ipaddress.ip_address(address).is_loopback:
            return address
    return ipv4[0]


def get_local_ip_address():
    """
    Best-effort variant of fetch_local_ip_address.

    Returns:
        Dotted IPv4 string, or a placeholder string if lookup fails
    """
    try:
        return fetch_local_ip_address()
    except (OSError, ValueError) as e:
        print(f"[FacialMocapReceiver] Warning: failed to get local IP address: {e}")
        return ADDRESS_UNAVAILABLE
