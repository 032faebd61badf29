"""Rendering of time, system information and miscellaneous kernel structures."""

from __future__ import annotations

import struct

from .flags import format_flags
from .memory import CallContext, PointerNotRead, read_remote

# uptime, loads[3], totalram..freeswap, procs, padding, totalhigh, freehigh, mem_unit
_SYSINFO = struct.Struct("<q3Q6QH6xQQI4x")

_SYSLOG_TYPES = (
    (0, "SYSLOG_ACTION_CLOSE"),
    (1, "SYSLOG_ACTION_OPEN"),
    (2, "SYSLOG_ACTION_READ"),
    (3, "SYSLOG_ACTION_READ_ALL"),
    (4, "SYSLOG_ACTION_READ_CLEAR"),
    (5, "SYSLOG_ACTION_CLEAR"),
    (6, "SYSLOG_ACTION_CONSOLE_OFF"),
    (7, "SYSLOG_ACTION_CONSOLE_ON"),
    (8, "SYSLOG_ACTION_CONSOLE_LEVEL"),
    (9, "SYSLOG_ACTION_SIZE_UNREAD"),
    (10, "SYSLOG_ACTION_SIZE_BUFFER"),
)

TIMER_ABSTIME = 1
_TIMER_SETTIME_FLAGS = ((TIMER_ABSTIME, "TIMER_ABSTIME"),)

_TIME_T = struct.Struct("<q")
_TIMEVAL = struct.Struct("<qq")
_TIMEZONE = struct.Struct("<ii")
_TMS = struct.Struct("<4q")
# f_tfree, f_tinode, f_fname[6], f_fpack[6], padding
_USTAT = struct.Struct("<qq6s6s4x")
_UTIMBUF = struct.Struct("<qq")

UTSNAME_FIELD = 65
UTSNAME_SIZE = 6 * UTSNAME_FIELD


def _c_string(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", "replace")


def _read(value: int, context: CallContext, layout: struct.Struct) -> tuple:
    return layout.unpack_from(read_remote(value, context, layout.size))


def format_sysinfo(value: int, context: CallContext) -> str:
    """Render the ``sysinfo`` structure that ``value`` points to."""
    try:
        (
            uptime,
            load1,
            load5,
            load15,
            totalram,
            freeram,
            sharedram,
            bufferram,
            totalswap,
            freeswap,
            procs,
            totalhigh,
            freehigh,
            mem_unit,
        ) = _read(value, context, _SYSINFO)
    except PointerNotRead as exc:
        return exc.text
    return (
        f"{{uptime={uptime}, loads=[{load1}, {load5}, {load15}], totalram={totalram}, "
        f"freeram={freeram}, sharedram={sharedram}, bufferram={bufferram}, "
        f"totalswap={totalswap}, freeswap={freeswap}, procs={procs}, "
        f"totalhigh={totalhigh}, freehigh={freehigh}, mem_unit={mem_unit & 0xFFFF}}}"
    )


def format_syslog_type(value: int) -> str:
    """Render the type argument of ``syslog``."""
    return format_flags(value, _SYSLOG_TYPES)


def format_time_t(value: int, context: CallContext) -> str:
    """Render the ``time_t`` that ``value`` points to."""
    try:
        (seconds,) = _read(value, context, _TIME_T)
    except PointerNotRead as exc:
        return exc.text
    return str(seconds)


def format_timer_settime_flags(value: int) -> str:
    """Render the flags of ``timer_settime`` and related calls."""
    return format_flags(value, _TIMER_SETTIME_FLAGS)


def format_timeval(value: int, context: CallContext) -> str:
    """Render a ``timeval``; a zero one shown as a return value is ``(Timeout)``."""
    try:
        sec, usec = _read(value, context, _TIMEVAL)
    except PointerNotRead as exc:
        return exc.text
    if context.is_return_log and sec == 0 and usec == 0:
        return "(Timeout)"
    return f"{{tv_sec={sec}, tv_usec={usec}}}"


def format_timezone(value: int, context: CallContext) -> str:
    """Render the ``timezone`` structure that ``value`` points to."""
    try:
        minuteswest, dsttime = _read(value, context, _TIMEZONE)
    except PointerNotRead as exc:
        return exc.text
    return f"{{tz_minuteswest={minuteswest}, tz_dsttime={dsttime}}}"


def format_tms(value: int, context: CallContext) -> str:
    """Render the ``tms`` structure that ``value`` points to."""
    try:
        utime, stime, cutime, cstime = _read(value, context, _TMS)
    except PointerNotRead as exc:
        return exc.text
    return (
        f"{{tms_utime={utime}, tms_stime={stime}, "
        f"tms_cutime={cutime}, tms_cstime={cstime}}}"
    )


def format_ustat(value: int, context: CallContext) -> str:
    """Render the ``ustat`` structure that ``value`` points to."""
    try:
        tfree, tinode, fname, fpack = _read(value, context, _USTAT)
    except PointerNotRead as exc:
        return exc.text
    # An unterminated name runs on into the following field.
    return (
        f'{{f_tfree={tfree}, f_tinode={tinode}, f_fname="{_c_string(fname + fpack)}", '
        f'f_fpack="{_c_string(fpack)}"}}'
    )


def format_utimbuf(value: int, context: CallContext) -> str:
    """Render the ``utimbuf`` structure that ``value`` points to."""
    try:
        actime, modtime = _read(value, context, _UTIMBUF)
    except PointerNotRead as exc:
        return exc.text
    return f"{{actime={actime}, modtime={modtime}}}"


def format_utsname(value: int, context: CallContext) -> str:
    """Render the system and node names of a ``utsname`` structure."""
    try:
        data = read_remote(value, context, UTSNAME_SIZE)
    except PointerNotRead as exc:
        return exc.text
    sysname = _c_string(data[:UTSNAME_FIELD])
    nodename = _c_string(data[UTSNAME_FIELD : 2 * UTSNAME_FIELD])
    return f'{{sysname="{sysname}", nodename="{nodename}", ...}}'