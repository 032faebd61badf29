import struct

import pytest

from sctrace.memory import CallContext, MappedMemory
from sctrace.system import (
    format_sysinfo,
    format_syslog_type,
    format_time_t,
    format_timer_settime_flags,
    format_timeval,
    format_timezone,
    format_tms,
    format_ustat,
    format_utimbuf,
    format_utsname,
)

ADDR = 0x7000


def ctx(data: bytes, **kwargs) -> CallContext:
    return CallContext(MappedMemory({ADDR: data}), **kwargs)


EMPTY = CallContext(MappedMemory({}))


@pytest.mark.parametrize(
    "formatter",
    [
        format_sysinfo,
        format_time_t,
        format_timeval,
        format_timezone,
        format_tms,
        format_ustat,
        format_utimbuf,
        format_utsname,
    ],
)
def test_null_pointer(formatter):
    assert formatter(0, EMPTY) == "NULL"


@pytest.mark.parametrize(
    "formatter",
    [format_sysinfo, format_time_t, format_timeval, format_tms, format_utsname],
)
def test_unreadable_pointer_shows_address(formatter):
    assert formatter(0x1234, EMPTY) == "0x1234"


def test_failed_call_shows_address():
    context = ctx(struct.pack("<qq", 1, 2), after_syscall=True, return_value=-1)
    assert format_timeval(ADDR, context) == f"{ADDR:#x}"


def test_timeval():
    assert format_timeval(ADDR, ctx(struct.pack("<qq", 5, 250))) == "{tv_sec=5, tv_usec=250}"


def test_timeval_timeout_only_on_return():
    zero = struct.pack("<qq", 0, 0)
    assert format_timeval(ADDR, ctx(zero, is_return_log=True)) == "(Timeout)"
    assert format_timeval(ADDR, ctx(zero)) == "{tv_sec=0, tv_usec=0}"


def test_timezone():
    text = format_timezone(ADDR, ctx(struct.pack("<ii", -60, 1)))
    assert text == "{tz_minuteswest=-60, tz_dsttime=1}"


def test_time_t():
    assert format_time_t(ADDR, ctx(struct.pack("<q", 1700000000))) == "1700000000"


def test_tms():
    text = format_tms(ADDR, ctx(struct.pack("<4q", 1, 2, 3, 4)))
    assert text == "{tms_utime=1, tms_stime=2, tms_cutime=3, tms_cstime=4}"


def test_utimbuf():
    text = format_utimbuf(ADDR, ctx(struct.pack("<qq", 10, 20)))
    assert text == "{actime=10, modtime=20}"


def test_ustat():
    data = struct.pack("<qq6s6s4x", 7, 8, b"disk", b"pack")
    text = format_ustat(ADDR, ctx(data))
    assert text == '{f_tfree=7, f_tinode=8, f_fname="disk", f_fpack="pack"}'


def test_utsname():
    data = b"Linux".ljust(65, b"\0") + b"box".ljust(65, b"\0") + bytes(65 * 4)
    assert format_utsname(ADDR, ctx(data)) == '{sysname="Linux", nodename="box", ...}'


def test_sysinfo():
    data = struct.pack(
        "<q3Q6QH6xQQI4x", 100, 1, 2, 3, 11, 12, 13, 14, 15, 16, 42, 21, 22, 1
    )
    text = format_sysinfo(ADDR, ctx(data))
    assert text.startswith("{uptime=100, loads=[1, 2, 3], totalram=11, freeram=12")
    assert "procs=42" in text
    assert text.endswith("totalhigh=21, freehigh=22, mem_unit=1}")


def test_syslog_type():
    assert format_syslog_type(0) == "0"
    assert format_syslog_type(2) == "SYSLOG_ACTION_READ"
    assert format_syslog_type(1) == "SYSLOG_ACTION_OPEN"


def test_timer_settime_flags():
    assert format_timer_settime_flags(1) == "TIMER_ABSTIME"
    assert format_timer_settime_flags(0) == "0"
    assert format_timer_settime_flags(3) == "TIMER_ABSTIME|0x2"