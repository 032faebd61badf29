# sctrace

`sctrace` renders the arguments of Linux x86-64 system calls the way strace
shows them: flag sets as `NAME|NAME`, enumerated values by name, signal masks
as `[INT TERM]`, and kernel structures such as `stat`, `sigaction`,
`sockaddr` or `timeval` as `{field=value, ...}`, read out of the traced
process's memory.

## Installation

```
pip install .
```

The package uses nothing outside the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `sctrace.names`: `signal_name`, `errno_name`, `strerror` and `escape`.
- `sctrace.flags`: `format_flags` and `format_option`, the building blocks of
  every flag and option formatter.
- `sctrace.memory`: `ProcessMemory` (reads `/proc/<pid>/mem`),
  `MappedMemory` (fixed regions, handy for tests), `CallContext`,
  `read_remote`, and the exceptions `RemoteMemoryError` and `PointerNotRead`.
- `sctrace.signals`: signal names, signed integers, `rt_sigprocmask` how,
  signal sets, `sigaction`, `stack_t`, `sigevent` and `siginfo_t`.
- `sctrace.sockets`: `sockaddr` (AF_INET and AF_INET6) and socket types.
- `sctrace.files`: strings, `stat`, `statfs` and swap flags.
- `sctrace.system`: `sysinfo`, syslog types, `time_t`, timer flags,
  `timeval`, `timezone`, `tms`, `ustat`, `utimbuf` and `utsname`.
- `sctrace.wait`: wait options, wait statuses and `waitid` id types.

## Usage

Plain values need no process memory:

```python
from sctrace.flags import format_flags, format_option
from sctrace.names import escape, errno_name, signal_name
from sctrace.signals import format_local_sigset
from sctrace.sockets import format_socket_type
from sctrace.wait import describe_wait_status

format_flags(0x3, [(1, "A"), (2, "B")])      # "A|B"
format_flags(0x5, [(1, "A")])                # "A|0x4"
format_option(5, [(1, "X")], "X_???")        # "0x5 /* X_??? */"
signal_name(9)                               # "SIGKILL"
errno_name(2)                                # "ENOENT"
escape(b'a"b\n')                             # 'a\\x22b\\x0a'
format_local_sigset((1 << 1) | (1 << 14))    # "[INT TERM]"
format_socket_type(1 | 0o2000000)            # "SOCK_STREAM|SOCK_CLOEXEC"
describe_wait_status(0)                      # "{WIFEXITED(s), WEXITSTATUS(s) == 0}"
```

Formatters of pointer arguments take the pointer value and a `CallContext`
holding the memory to read from. `MappedMemory` stands in for a process;
`ProcessMemory(pid)` reads a real one through `/proc/<pid>/mem`, which needs
the usual permission to trace that process.

```python
import struct
from sctrace.files import format_remote_string, format_string
from sctrace.memory import CallContext, MappedMemory
from sctrace.sockets import format_sockaddr

addr = struct.pack("<H", 2) + struct.pack(">H", 80) + bytes([127, 0, 0, 1]) + bytes(8)
memory = MappedMemory({0x1000: b"/etc/hostname\0", 0x2000: addr})
context = CallContext(memory)

format_string(0x1000, context)              # '"/etc/hostname"'
format_remote_string(context, 0x1000, 4)    # '"/et"...'
format_string(0, context)                   # "NULL"
format_sockaddr(0x2000, context)
# '{sa_family=AF_INET, sin_port=htons(80), sin_addr=inet_addr("127.0.0.1")}'
```

Structure formatters print `NULL` for a null pointer and the pointer in hex
when its memory cannot be read, or when the context says the call has
returned (`after_syscall=True`) with a negative `return_value`. They get this
from `read_remote`, which raises `PointerNotRead` carrying the text to print.
`format_timeval` prints `(Timeout)` for a zero value when the context has
`is_return_log=True`. String formatters raise `RemoteMemoryError` when the
memory cannot be read.

## What the package does not do

`sctrace` only formats values. It does not start or attach to processes, stop
them at system calls or fetch their registers. It has no table of system call
names and argument kinds, does not assemble a whole `name(args) = result`
line, and keeps no call statistics. The caller picks the formatter for each
argument and puts the line together.