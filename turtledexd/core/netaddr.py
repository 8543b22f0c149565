"""Endpoint string helpers."""
from __future__ import annotations


def process_net_addr(addr: str) -> str:
    """Return *addr* in ``host:port`` form.

    A value without a colon is a bare port and gets an empty host, which
    means "all interfaces". Anything already holding a colon is left alone;
    port range checks belong to whoever binds the socket.
    """
    if ":" in addr:
        return addr
    return ":" + addr


def split_host(addr: str) -> str:
    """Return the host part of a ``host:port`` endpoint.

    IPv6 literals are accepted in bracketed form (``[::1]:9980``).
    """
    host, sep, _port = addr.rpartition(":")
    if not sep:
        return ""
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host
