"""Rendering of wait options, wait statuses and ``waitid`` id types."""

from __future__ import annotations

import struct

from .flags import format_flags, format_option
from .memory import CallContext, PointerNotRead, read_remote

_WAIT_FLAGS = (
    (0x00000001, "WNOHANG"),
    (0x00000002, "WUNTRACED"),
    (0x00000008, "WCONTINUED"),
    (0x00000004, "WEXITED"),
    (0x00000002, "WSTOPPED"),
    (0x01000000, "WNOWAIT"),
)

_WAITID_WHICH = (
    (1, "P_PID"),
    (2, "P_PGID"),
    (0, "P_ALL"),
)

_CONTINUED = 0xFFFF


def format_wait_options(value: int) -> str:
    """Render the options of ``wait4`` and ``waitid``."""
    return format_flags(value, _WAIT_FLAGS)


def _term_sig(status: int) -> int:
    return status & 0x7F


def _exit_status(status: int) -> int:
    return (status & 0xFF00) >> 8


def describe_wait_status(status: int) -> str:
    """Describe a wait status the way the ``W*`` macros decode it."""
    status &= 0xFFFFFFFF
    parts = []
    if _term_sig(status) == 0:
        parts.append(f"{{WIFEXITED(s), WEXITSTATUS(s) == {_exit_status(status)}}}")
    if 0 < _term_sig(status) < 0x7F:
        text = f"{{WIFSIGNALED(s), WTERMSIG(s) == {_term_sig(status)}"
        if status & 0x80:
            text += f", WCOREDUMP(s) == {status & 0x80}"
        parts.append(text + "}")
    if status & 0xFF == 0x7F:
        parts.append(f"{{WIFSTOPPED(s), WSTOPSIG(s) == {_exit_status(status)}}}")
    if status == _CONTINUED:
        parts.append("{WIFCONTINUED(s)}")
    return ", ".join(parts)


def format_wait_status(value: int, context: CallContext) -> str:
    """Render the wait status that ``value`` points to."""
    try:
        data = read_remote(value, context, 4)
    except PointerNotRead as exc:
        return exc.text
    (status,) = struct.unpack("<i", data)
    return f"[{describe_wait_status(status)}]"


def format_waitid_which(value: int) -> str:
    """Render the id type argument of ``waitid``."""
    return format_option(value, _WAITID_WHICH, "P_???")