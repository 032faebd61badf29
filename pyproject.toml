[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sctrace"
version = "0.1.0"
description = "Strace-style rendering of Linux x86-64 system call arguments and kernel structures"
requires-python = ">=3.10"
dependencies = []
keywords = ["strace", "syscall", "tracing", "linux", "debugging", "formatting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sctrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
