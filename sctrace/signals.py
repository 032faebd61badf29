"""Rendering of signal numbers, signal sets and signal-related structures."""

from __future__ import annotations

import struct

from .flags import format_flags, format_option
from .memory import CallContext, PointerNotRead, read_remote
from .names import signal_name

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

# Signals 2..64 are shown in a set; signal 1 is never listed.
NSIG = 65

# Size of the C library's sigset_t on x86-64.
SIGSET_SIZE = 128

SA_RESTORER = 0x04000000
_SA_FLAGS = (
    (SA_RESTORER, "SA_RESTORER"),
    (0x08000000, "SA_ONSTACK"),
    (0x10000000, "SA_RESTART"),
    (0x00000004, "SA_SIGINFO"),
    (0x00000001, "SA_NOCLDSTOP"),
    (0x40000000, "SA_NODEFER"),
    (0x80000000, "SA_RESETHAND"),
    (0x00000002, "SA_NOCLDWAIT"),
    (0x40000000, "SA_NOMASK"),
    (0x80000000, "SA_ONESHOT"),
    (0x08000000, "SA_STACK"),
)

_SIGPROCMASK_HOW = (
    (0, "SIG_BLOCK"),
    (1, "SIG_UNBLOCK"),
    (2, "SIG_SETMASK"),
)

# handler, flags, restorer, then the mask.
_KERNEL_SIGACTION = struct.Struct("<QQQ")
SIGACTION_SIZE = _KERNEL_SIGACTION.size + SIGSET_SIZE

# ss_sp, ss_flags, padding, ss_size
_STACK_T = struct.Struct("<Qi4xQ")

# sigev_value (sival_int in its first four bytes), sigev_signo, sigev_notify
_SIGEVENT_HEAD = struct.Struct("<i4xii")
SIGEVENT_SIZE = 64

# si_signo, si_errno, si_code, padding, si_pid, si_uid, si_int
_SIGINFO_HEAD = struct.Struct("<iii4xiIi")
_SIGINFO_PTR_OFFSET = 24
SIGINFO_SIZE = 128

_SIG_DFL = 0
_SIG_IGN = 1


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _alt_hex(value: int) -> str:
    return "0" if value == 0 else f"{value:#x}"


def _c_pointer(value: int) -> str:
    """A pointer the way ``%p`` prints it."""
    return "(nil)" if value == 0 else f"{value:#x}"


def _pointer(value: int) -> str:
    return "NULL" if value == 0 else f"{value:#x}"


def format_signal_name(value: int) -> str:
    """Render a signal number by name."""
    return signal_name(_signed(value, 32))


def format_signed_int(value: int) -> str:
    """Render a register value as a signed 64-bit decimal."""
    return str(_signed(value, 64))


def format_sigprocmask_how(value: int) -> str:
    """Render the ``how`` argument of ``rt_sigprocmask``."""
    return format_option(value, _SIGPROCMASK_HOW, "SIG_???")


def skip_sig_prefix(name: str) -> str:
    """Drop a leading ``SIG`` from a signal name."""
    return name[3:] if name.startswith("SIG") else name


def format_local_sigset(mask: int) -> str:
    """Render a signal mask, bit ``n - 1`` standing for signal ``n``."""
    members = (
        skip_sig_prefix(signal_name(sig)) for sig in range(2, NSIG) if (mask >> (sig - 1)) & 1
    )
    return "[" + " ".join(members) + "]"


def _mask_from(data: bytes, offset: int = 0) -> int:
    return int.from_bytes(data[offset : offset + 8], "little")


def format_sigset(value: int, context: CallContext) -> str:
    """Render the signal set that ``value`` points to."""
    try:
        data = read_remote(value, context, SIGSET_SIZE)
    except PointerNotRead as exc:
        return exc.text
    return format_local_sigset(_mask_from(data))


def _format_handler(handler: int) -> str:
    if handler == _SIG_DFL:
        return "SIG_DFL"
    if handler == _SIG_IGN:
        return "SIG_IGN"
    return _c_pointer(handler)


def format_sigaction(value: int, context: CallContext) -> str:
    """Render the kernel ``sigaction`` structure that ``value`` points to."""
    try:
        data = read_remote(value, context, SIGACTION_SIZE)
    except PointerNotRead as exc:
        return exc.text
    handler, flags, restorer = _KERNEL_SIGACTION.unpack_from(data)
    mask = _mask_from(data, _KERNEL_SIGACTION.size)
    parts = [
        f"{{sa_handler={_format_handler(handler)}",
        f", sa_mask={format_local_sigset(mask)}",
        f", sa_flags={format_flags(flags, _SA_FLAGS)}",
    ]
    if flags & SA_RESTORER:
        parts.append(f", sa_restorer={_pointer(restorer)}")
    parts.append("}")
    return "".join(parts)


def format_sigaltstack(value: int, context: CallContext) -> str:
    """Render the ``stack_t`` structure that ``value`` points to."""
    try:
        data = read_remote(value, context, _STACK_T.size)
    except PointerNotRead as exc:
        return exc.text
    sp, flags, size = _STACK_T.unpack_from(data)
    return (
        f"{{ss_sp={_c_pointer(sp)}, ss_flags={_alt_hex(flags & _MASK32)}, ss_size={size}}}"
    )


def format_sigevent(value: int, context: CallContext) -> str:
    """Render the ``sigevent`` structure that ``value`` points to."""
    try:
        data = read_remote(value, context, SIGEVENT_SIZE)
    except PointerNotRead as exc:
        return exc.text
    sival, signo, notify = _SIGEVENT_HEAD.unpack_from(data)
    return f"{{sigev_value={sival}, sigev_signo={signo}, sigev_notify={notify}}}"


def format_siginfo(value: int, context: CallContext) -> str:
    """Render the ``siginfo_t`` structure that ``value`` points to."""
    try:
        data = read_remote(value, context, SIGINFO_SIZE)
    except PointerNotRead as exc:
        return exc.text
    signo, _errno, code, pid, uid, sival = _SIGINFO_HEAD.unpack_from(data)
    (ptr,) = struct.unpack_from("<Q", data, _SIGINFO_PTR_OFFSET)
    return (
        f"{{si_signo={signal_name(signo)}, si_code={_alt_hex(code & _MASK32)}, "
        f"si_pid={pid}, si_uid={_signed(uid, 32)}, si_int={sival}, si_ptr={_c_pointer(ptr)}}}"
    )