import struct

import pytest

from sctrace.memory import CallContext, MappedMemory
from sctrace.signals import (
    SA_RESTORER,
    SIGACTION_SIZE,
    SIGEVENT_SIZE,
    SIGINFO_SIZE,
    SIGSET_SIZE,
    format_local_sigset,
    format_sigaction,
    format_sigaltstack,
    format_sigevent,
    format_siginfo,
    format_signal_name,
    format_signed_int,
    format_sigprocmask_how,
    format_sigset,
    skip_sig_prefix,
)

BASE = 0x4000


def context_with(data: bytes, **kwargs) -> CallContext:
    return CallContext(memory=MappedMemory({BASE: data}), **kwargs)


def pad(data: bytes, size: int) -> bytes:
    return data + bytes(size - len(data))


def test_signal_name_known_and_unknown():
    assert format_signal_name(9) == "SIGKILL"
    assert format_signal_name(100) == "SIG100"


def test_signed_int_reinterprets_register():
    assert format_signed_int(42) == "42"
    assert format_signed_int((1 << 64) - 1) == "-1"


@pytest.mark.parametrize("value,name", [(0, "SIG_BLOCK"), (1, "SIG_UNBLOCK"), (2, "SIG_SETMASK")])
def test_sigprocmask_how_known(value, name):
    assert format_sigprocmask_how(value) == name


def test_sigprocmask_how_unknown_names_default():
    assert format_sigprocmask_how(7).endswith("/* SIG_??? */")


def test_skip_sig_prefix():
    assert skip_sig_prefix("SIGINT") == "INT"
    assert skip_sig_prefix("FOO") == "FOO"


def test_local_sigset_empty_and_signal_one_ignored():
    assert format_local_sigset(0) == "[]"
    assert format_local_sigset(1) == format_local_sigset(0)


def test_local_sigset_lists_members_in_order():
    mask = (1 << (2 - 1)) | (1 << (15 - 1))
    assert format_local_sigset(mask) == "[INT TERM]"


def test_sigset_from_memory_matches_local():
    mask = (1 << 8) | (1 << 16)
    ctx = context_with(pad(struct.pack("<Q", mask), SIGSET_SIZE))
    assert format_sigset(BASE, ctx) == format_local_sigset(mask)


def test_sigset_null_and_unreadable():
    ctx = context_with(b"")
    assert format_sigset(0, ctx) == "NULL"
    assert format_sigset(BASE, ctx) == hex(BASE)


def test_sigset_after_failed_call_is_not_read():
    ctx = context_with(pad(b"", SIGSET_SIZE), after_syscall=True, return_value=-1)
    assert format_sigset(BASE, ctx) == hex(BASE)


def test_sigaction_ignored_without_restorer():
    data = pad(struct.pack("<QQQ", 1, 0, 0), SIGACTION_SIZE)
    text = format_sigaction(BASE, context_with(data))
    assert text.startswith("{sa_handler=SIG_IGN, sa_mask=[], sa_flags=0")
    assert "sa_restorer" not in text
    assert text.endswith("}")


def test_sigaction_with_restorer():
    restorer = 0x7F0000001000
    data = pad(struct.pack("<QQQ", 0, SA_RESTORER, restorer), SIGACTION_SIZE)
    text = format_sigaction(BASE, context_with(data))
    assert text.startswith("{sa_handler=SIG_DFL")
    assert "sa_flags=SA_RESTORER" in text
    assert f"sa_restorer={hex(restorer)}" in text


def test_sigaltstack_fields():
    sp, size = 0x10000, 8192
    data = struct.pack("<Qi4xQ", sp, 0, size)
    text = format_sigaltstack(BASE, context_with(data))
    assert f"ss_sp={hex(sp)}" in text
    assert f"ss_size={size}}}" in text


def test_sigevent_fields():
    data = pad(struct.pack("<i4xii", 5, 10, 0), SIGEVENT_SIZE)
    assert format_sigevent(BASE, context_with(data)) == (
        "{sigev_value=5, sigev_signo=10, sigev_notify=0}"
    )


def test_siginfo_fields():
    pid, uid = 1234, 1000
    data = pad(struct.pack("<iii4xiIi", 17, 0, 1, pid, uid, 0), SIGINFO_SIZE)
    text = format_siginfo(BASE, context_with(data))
    assert text.startswith("{si_signo=SIGCHLD, ")
    assert f"si_pid={pid}, si_uid={uid}" in text


def test_siginfo_null():
    assert format_siginfo(0, context_with(b"")) == "NULL"