"""Access to the memory of a traced process and pointer handling."""

from __future__ import annotations

import os
from bisect import bisect_right
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


class RemoteMemoryError(OSError):
    """Memory of the traced process could not be read."""


class PointerNotRead(Exception):
    """A pointer argument was not dereferenced; ``text`` is what to print instead."""

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class Memory(Protocol):
    def read(self, address: int, size: int) -> bytes: ...


class ProcessMemory:
    """Reads memory of a live process through ``/proc/<pid>/mem``."""

    def __init__(self, pid: int) -> None:
        self.pid = pid
        self.path = f"/proc/{pid}/mem"

    def read(self, address: int, size: int) -> bytes:
        """Return exactly ``size`` bytes at ``address``."""
        if size < 0:
            raise ValueError("size must not be negative")
        try:
            fd = os.open(self.path, os.O_RDONLY)
        except OSError as exc:
            raise RemoteMemoryError(exc.errno, f"cannot open {self.path}") from exc
        try:
            data = os.pread(fd, size, address)
        except (OSError, OverflowError, ValueError) as exc:
            raise RemoteMemoryError(f"cannot read {size} bytes at {address:#x}") from exc
        finally:
            os.close(fd)
        if len(data) != size:
            raise RemoteMemoryError(f"short read of {len(data)} of {size} bytes at {address:#x}")
        return data


class MappedMemory:
    """Memory made of fixed regions, keyed by their start address."""

    def __init__(self, regions: Mapping[int, bytes]) -> None:
        self._starts = sorted(regions)
        self._regions = {start: bytes(regions[start]) for start in self._starts}

    def read(self, address: int, size: int) -> bytes:
        """Return exactly ``size`` bytes at ``address`` from a single region."""
        if size < 0:
            raise ValueError("size must not be negative")
        index = bisect_right(self._starts, address) - 1
        if index >= 0:
            start = self._starts[index]
            data = self._regions[start]
            offset = address - start
            if offset + size <= len(data):
                return data[offset : offset + size]
        raise RemoteMemoryError(f"cannot read {size} bytes at {address:#x}")


@dataclass
class CallContext:
    """What an argument formatter knows about the call being printed."""

    memory: Memory
    arg_index: int = 0
    after_syscall: bool = False
    return_value: int = 0
    is_return_log: bool = False


def read_remote(value: int, context: CallContext, size: int) -> bytes:
    """Read ``size`` bytes that the pointer ``value`` refers to.

    Raises :class:`PointerNotRead` with the replacement text when the pointer
    is NULL, when the call failed, or when its memory cannot be read.
    """
    if value == 0:
        raise PointerNotRead("NULL")
    if context.after_syscall and context.return_value < 0:
        raise PointerNotRead(f"{value:#x}")
    try:
        return context.memory.read(value, size)
    except RemoteMemoryError as exc:
        raise PointerNotRead(f"{value:#x}") from exc