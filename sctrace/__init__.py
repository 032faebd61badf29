"""Strace-style rendering of Linux x86-64 system call arguments and kernel structures."""

__version__ = "0.1.0"