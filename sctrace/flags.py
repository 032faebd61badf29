"""Rendering of bit flags and enumerated option values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

_MASK64 = (1 << 64) - 1

Names = "Mapping[int, str] | Iterable[tuple[int, str]]"


def _pairs(names: Mapping[int, str] | Iterable[tuple[int, str]]) -> Iterable[tuple[int, str]]:
    if isinstance(names, Mapping):
        return names.items()
    return names


def _alt_hex(value: int) -> str:
    """Hexadecimal with a ``0x`` prefix, except for zero (as ``%#x`` does)."""
    return "0" if value == 0 else f"{value:#x}"


def format_flags(flags: int, names: Mapping[int, str] | Iterable[tuple[int, str]]) -> str:
    """Render ``flags`` as ``NAME|NAME|0x..`` using ``(flag, name)`` pairs in order."""
    flags &= _MASK64
    if flags == 0:
        return "0"
    parts = []
    for flag, name in _pairs(names):
        if flags & flag:
            parts.append(name)
            flags &= ~flag
    if flags:
        parts.append(_alt_hex(flags))
    return "|".join(parts)


def format_option(
    value: int,
    options: Mapping[int, str] | Iterable[tuple[int, str]],
    default_name: str | None = None,
) -> str:
    """Render ``value`` as the name of the option equal to it, else in hex."""
    value &= _MASK64
    for option, name in _pairs(options):
        if option == value:
            return name
    if default_name is None:
        return _alt_hex(value)
    return f"{_alt_hex(value)} /* {default_name} */"