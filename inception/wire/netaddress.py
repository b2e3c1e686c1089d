"""
Copyright (c) 2020, The Inception developers
See LICENSE for details
"""

import ipaddress
import socket
import time

from inception import InceptionError
from inception.util.encode import ByteArray
from inception.wire import wire


# Prefix for a IPv4 adderess encoded as 16 bytes.
ipv4to16prefix = ByteArray(0xFFFF, length=12)


class NetAddress:
    """
    NetAddress defines information about a peer on the network including the time
    it was last seen, the services it supports, its IP address, and port. The
    address is always held in its 16-byte form, with IPv4 addresses mapped into
    IPv6.
    """

    def __init__(self, ip, port, services=wire.SFNodeNetwork, stamp=None):
        """
        Args:
            ip (str or bytes-like): The peer's IP address, as a string or as
                4 or 16 bytes.
            port (int): Port the peer is using.  This is encoded in big endian
                on the wire which differs from most everything else.
            services (int): Optional. Default: SFNodeNetwork. Bitfield which
                identifies the services supported by the peer.
            stamp (int): Optional. Default: current time. The last time the peer
                was seen. This is encoded as a uint32 on the wire and therefore
                is limited to 2106.
        """
        self.timestamp = stamp if stamp is not None else int(time.time())
        self.services = services

        # If the IP is a string, parse it to bytes.
        if isinstance(ip, str):
            ip = decodeStringIP(ip)
        ip = ByteArray(ip)
        if len(ip) == 4:
            ip = ipv4to16prefix + ip
        if len(ip) != 16:
            raise InceptionError(f"invalid IP address length {len(ip)}")
        self.ip = ip

        self.port = port

    def __eq__(self, other):
        return (
            self.ip == other.ip
            and self.port == other.port
            and self.services == other.services
            and self.timestamp == other.timestamp
        )

    def __repr__(self):
        return f"NetAddress({self.key()}, services={self.services}, stamp={self.timestamp})"

    def isIPv4(self):
        return self.ip[:12] == ipv4to16prefix

    def ipString(self):
        """
        The IP address in its conventional text form. IPv4-mapped addresses are
        shown as IPv4.
        """
        if self.isIPv4():
            return str(ipaddress.IPv4Address(self.ip[12:].bytes()))
        return str(ipaddress.IPv6Address(self.ip.bytes()))

    def key(self):
        """
        The host:port string for the address, with IPv6 hosts bracketed.
        """
        host = self.ipString()
        if not self.isIPv4():
            host = f"[{host}]"
        return f"{host}:{self.port}"


def decodeStringIP(ip):
    """
    Parse an IP string to bytes.

    Args:
        ip (str): The string-encoded IP address.

    Returns:
        bytes-like: The byte-encoded IP address.
    """
    try:
        return socket.inet_pton(socket.AF_INET, ip)
    except OSError:
        pass
    try:
        return socket.inet_pton(socket.AF_INET6, ip)
    except OSError:
        raise InceptionError(f"failed to decode IP {ip}")
