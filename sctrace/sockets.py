"""Rendering of socket addresses and socket types."""

from __future__ import annotations

import socket
import struct

from .flags import format_flags
from .memory import CallContext, PointerNotRead, read_remote

AF_INET = 2
AF_INET6 = 10

SOCKADDR_SIZE = 16
SOCKADDR_IN6_SIZE = 28

_SOCKET_TYPES = (
    (1, "SOCK_STREAM"),
    (2, "SOCK_DGRAM"),
    (3, "SOCK_RAW"),
    (4, "SOCK_RDM"),
    (5, "SOCK_SEQPACKET"),
    (6, "SOCK_DCCP"),
    (10, "SOCK_PACKET"),
    (0o2000000, "SOCK_CLOEXEC"),
    (0o4000, "SOCK_NONBLOCK"),
)


def format_sockaddr(value: int, context: CallContext) -> str:
    """Render the socket address that ``value`` points to."""
    try:
        data = read_remote(value, context, SOCKADDR_SIZE)
    except PointerNotRead as exc:
        return exc.text
    (family,) = struct.unpack_from("<H", data)
    if family == AF_INET:
        (port,) = struct.unpack_from(">H", data, 2)
        address = socket.inet_ntoa(data[4:8])
        return (
            f'{{sa_family=AF_INET, sin_port=htons({port}), sin_addr=inet_addr("{address}")}}'
        )
    if family == AF_INET6:
        try:
            data = read_remote(value, context, SOCKADDR_IN6_SIZE)
        except PointerNotRead as exc:
            return exc.text
        (port,) = struct.unpack_from(">H", data, 2)
        address = socket.inet_ntop(socket.AF_INET6, data[8:24])
        return (
            f"{{sa_family=AF_INET6, sin6_port=htons({port}), "
            f'sin6_addr=inet_addr("{address}")}}'
        )
    return f"{{sa_family={family}}}"


def format_socket_type(value: int) -> str:
    """Render the type argument of ``socket``."""
    return format_flags(value, _SOCKET_TYPES)