"""Rendering of strings, file status structures and swap flags."""

from __future__ import annotations

import struct

from .flags import format_flags
from .memory import CallContext, PointerNotRead, read_remote
from .names import escape

_MASK64 = (1 << 64) - 1

STAT_SIZE = 144
_STAT_MODE_OFFSET = 24
_STAT_SIZE_OFFSET = 48

_FILE_TYPES = (
    (0o100000, "S_IFREG"),
    (0o040000, "S_IFDIR"),
    (0o020000, "S_IFCHR"),
    (0o060000, "S_IFBLK"),
)

# f_type .. f_ffree, f_fsid[2], f_namelen, f_frsize, f_flags
_STATFS_HEAD = struct.Struct("<7Q2i3Q")
STATFS_SIZE = 120

_SWAP_FLAGS: tuple[tuple[int, str], ...] = ()


def _alt_hex(value: int) -> str:
    return "0" if value == 0 else f"{value:#x}"


def format_stat(value: int, context: CallContext) -> str:
    """Render the file type, mode bits and size of a ``stat`` structure."""
    try:
        data = read_remote(value, context, STAT_SIZE)
    except PointerNotRead as exc:
        return exc.text
    (mode,) = struct.unpack_from("<I", data, _STAT_MODE_OFFSET)
    (size,) = struct.unpack_from("<q", data, _STAT_SIZE_OFFSET)
    parts = []
    for flag, name in _FILE_TYPES:
        if mode & flag:
            parts.append(name)
            mode &= ~flag
    if mode:
        parts.append("0" + format(mode, "o"))
    return f"{{st_mode={'|'.join(parts)}, st_size={size}, ...}}"


def format_statfs(value: int, context: CallContext) -> str:
    """Render a ``statfs`` structure."""
    try:
        data = read_remote(value, context, STATFS_SIZE)
    except PointerNotRead as exc:
        return exc.text
    (
        f_type,
        bsize,
        blocks,
        bfree,
        bavail,
        files,
        ffree,
        fsid0,
        fsid1,
        namelen,
        frsize,
        flags,
    ) = _STATFS_HEAD.unpack_from(data)
    return (
        f"{{f_type={_alt_hex(f_type)}, f_bsize={bsize}, f_blocks={blocks}, "
        f"f_bfree={bfree}, f_bavail={bavail}, f_files={files}, f_ffree={ffree}, "
        f"f_fsid={{{fsid0}, {fsid1}}}, f_namelen={namelen}, f_frsize={frsize}, "
        f"f_flags={_alt_hex(flags)}}}"
    )


def format_remote_string(context: CallContext, address: int, max_size: int | None = None) -> str:
    """Render the NUL-terminated string at ``address`` as a quoted, escaped literal.

    At most ``max_size`` bytes are read (no limit when it is ``None`` or
    negative); a string cut off by the limit loses its last byte read and is
    followed by ``...``. Raises :class:`~sctrace.memory.RemoteMemoryError`
    when the memory cannot be read.
    """
    if address == 0:
        return "NULL"
    limit = None if max_size is None or max_size < 0 else max_size
    buffer = bytearray()
    while True:
        byte = context.memory.read((address + len(buffer)) & _MASK64, 1)
        buffer += byte
        if limit is not None and len(buffer) >= limit:
            break
        if byte == b"\0":
            break
    truncated = limit is not None and len(buffer) >= limit
    text = escape(bytes(buffer), len(buffer) - 1)
    return f'"{text}"...' if truncated else f'"{text}"'


def format_string(value: int, context: CallContext) -> str:
    """Render the string argument ``value`` in full."""
    return format_remote_string(context, value, None)


def format_swap_flags(value: int) -> str:
    """Render the flags of ``swapon``; no names are known, so they show in hex."""
    return format_flags(value, _SWAP_FLAGS)