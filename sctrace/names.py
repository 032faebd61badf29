"""Symbolic names for signals and errno values, and byte-string escaping."""

from __future__ import annotations

import os

_SIGNAL_NAMES = {
    1: "SIGHUP",
    2: "SIGINT",
    3: "SIGQUIT",
    4: "SIGILL",
    5: "SIGTRAP",
    6: "SIGABRT",
    7: "SIGBUS",
    8: "SIGFPE",
    9: "SIGKILL",
    10: "SIGUSR1",
    11: "SIGSEGV",
    12: "SIGUSR2",
    13: "SIGPIPE",
    14: "SIGALRM",
    15: "SIGTERM",
    16: "SIGSTKFLT",
    17: "SIGCHLD",
    18: "SIGCONT",
    19: "SIGSTOP",
    20: "SIGTSTP",
    21: "SIGTTIN",
    22: "SIGTTOU",
    23: "SIGURG",
    24: "SIGXCPU",
    25: "SIGXFSZ",
    26: "SIGVTALRM",
    27: "SIGPROF",
    28: "SIGWINCH",
    29: "SIGIO",
    30: "SIGPWR",
    31: "SIGSYS",
}

# Linux errno numbers.
_ERRNO_NAMES = {
    1: "EPERM",
    2: "ENOENT",
    3: "ESRCH",
    4: "EINTR",
    5: "EIO",
    6: "ENXIO",
    7: "E2BIG",
    8: "ENOEXEC",
    9: "EBADF",
    10: "ECHILD",
    11: "EAGAIN",
    12: "ENOMEM",
    13: "EACCES",
    14: "EFAULT",
    16: "EBUSY",
    17: "EEXIST",
    18: "EXDEV",
    19: "ENODEV",
    20: "ENOTDIR",
    21: "EISDIR",
    22: "EINVAL",
    23: "ENFILE",
    24: "EMFILE",
    25: "ENOTTY",
    26: "ETXTBSY",
    27: "EFBIG",
    28: "ENOSPC",
    29: "ESPIPE",
    30: "EROFS",
    31: "EMLINK",
    32: "EPIPE",
    33: "EDOM",
    34: "ERANGE",
    35: "EDEADLK",
    36: "ENAMETOOLONG",
    37: "ENOLCK",
    38: "ENOSYS",
    39: "ENOTEMPTY",
    40: "ELOOP",
    42: "ENOMSG",
    43: "EIDRM",
    60: "ENOSTR",
    61: "ENODATA",
    62: "ETIME",
    63: "ENOSR",
    67: "ENOLINK",
    71: "EPROTO",
    72: "EMULTIHOP",
    74: "EBADMSG",
    75: "EOVERFLOW",
    84: "EILSEQ",
    88: "ENOTSOCK",
    89: "EDESTADDRREQ",
    90: "EMSGSIZE",
    91: "EPROTOTYPE",
    92: "ENOPROTOOPT",
    93: "EPROTONOSUPPORT",
    95: "ENOTSUP",
    97: "EAFNOSUPPORT",
    98: "EADDRINUSE",
    99: "EADDRNOTAVAIL",
    100: "ENETDOWN",
    101: "ENETUNREACH",
    102: "ENETRESET",
    103: "ECONNABORTED",
    104: "ECONNRESET",
    105: "ENOBUFS",
    106: "EISCONN",
    107: "ENOTCONN",
    110: "ETIMEDOUT",
    111: "ECONNREFUSED",
    113: "EHOSTUNREACH",
    114: "EALREADY",
    115: "EINPROGRESS",
    116: "ESTALE",
    122: "EDQUOT",
    125: "ECANCELED",
}


def signal_name(sig: int) -> str:
    """Return the symbolic name of a signal number, or ``SIG<n>``."""
    return _SIGNAL_NAMES.get(sig, f"SIG{sig}")


def errno_name(errnum: int) -> str:
    """Return the symbolic name of an errno value, or ``E<n>``."""
    return _ERRNO_NAMES.get(errnum, f"E{errnum}")


def strerror(errnum: int) -> str:
    """Return the system's description of an errno value."""
    return os.strerror(errnum)


def _escape_byte(byte: int) -> str:
    if byte < 32 or byte > 126 or byte in (0x5C, 0x22):
        return f"\\x{byte:02x}"
    return chr(byte)


def escape(data: bytes | bytearray | memoryview | str | None, size: int | None = None) -> str | None:
    """Escape at most ``size`` bytes of ``data``, stopping at the first NUL.

    Control characters, bytes above 0x7e, backslashes and double quotes are
    written as ``\\xHH``. ``None`` is returned unchanged; a ``size`` of
    ``None`` or below zero means the whole input.
    """
    if data is None:
        return None
    if isinstance(data, str):
        data = data.encode("utf-8", "surrogateescape")
    raw = bytes(data)
    if size is not None and size >= 0:
        raw = raw[:size]
    raw = raw.split(b"\0", 1)[0]
    return "".join(_escape_byte(byte) for byte in raw)