"""
Reverse lookup through the system resolution path
"""

import socket

from .base import BaseLookup, LookupFailed


class SystemLookup(BaseLookup):
    """
    getaddrinfo/getnameinfo based reverse lookup.

    Uses whatever the host is configured to use for name resolution
    (/etc/hosts, nsswitch, system DNS). The configured resolver is only
    validated, never queried.
    """

    def records(self, ip: str) -> list[tuple]:
        try:
            # One record per address: pin the socket type.
            return socket.getaddrinfo(ip, None, type=self.context.socket_type)
        except (socket.gaierror, UnicodeError, ValueError) as e:
            raise LookupFailed(str(e)) from e

    def hostname(self, record: tuple) -> str:
        sockaddr = record[4]
        try:
            host, _ = socket.getnameinfo(sockaddr, 0)
        except (socket.gaierror, OSError) as e:
            raise LookupFailed(str(e)) from e
        return host
