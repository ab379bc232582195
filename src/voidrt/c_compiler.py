"""Compile an assembled runtime unit with the host C toolchain."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from voidrt.config import BuildConfig

logger = logging.getLogger(__name__)

# Searched in order when the build config names no compiler, or names one
# that is not installed.
FALLBACK_COMPILERS = ("gcc", "cc", "clang")

# The emitted unit is plain C99; generated helpers may leave parameters
# and locals unused.
UNIT_FLAGS = (
    "-std=c99",
    "-Wall",
    "-Wextra",
    "-Wno-unused-parameter",
    "-Wno-unused-variable",
)

COMPILE_TIMEOUT = 60


class CompileCError(Exception):
    """The toolchain is missing or rejected the unit.

    ``stderr`` holds the compiler diagnostics and ``command`` the argument
    vector that was run, both empty when no compiler was started.
    """

    def __init__(self, message: str, stderr: str = "", command: list[str] | None = None) -> None:
        self.stderr = stderr
        self.command = command or []
        super().__init__(message)


def find_c_compiler(preferred: str | None = None) -> str | None:
    """*preferred* if it is on PATH, else the first installed fallback."""
    candidates = ((preferred,) if preferred else ()) + FALLBACK_COMPILERS
    return next((name for name in candidates if shutil.which(name)), None)


def compiler_command(cc: str, source: Path, output: Path, build: BuildConfig) -> list[str]:
    """Argument vector compiling the single unit *source* into *output*."""
    level = "-O2" if build.optimize else "-O0"
    return [cc, *UNIT_FLAGS, level, str(source), "-o", str(output)]


def compile_unit(source: Path, output: Path, build: BuildConfig | None = None) -> Path:
    """Compile one generated translation unit to a native binary.

    Returns *output*; raises CompileCError when no compiler is available
    or the compiler exits non-zero.
    """
    build = build or BuildConfig()
    cc = find_c_compiler(build.compiler)
    if cc is None:
        raise CompileCError("no C compiler found (install gcc or clang)")
    if build.compiler and cc != build.compiler:
        logger.warning("C compiler %r not found, using %s", build.compiler, cc)

    cmd = compiler_command(cc, source, output, build)
    logger.info("compiling: %s", " ".join(cmd))
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=COMPILE_TIMEOUT)
    except subprocess.TimeoutExpired as e:
        raise CompileCError(
            f"{cc} did not finish {source.name} within {COMPILE_TIMEOUT}s", command=cmd,
        ) from e

    if proc.returncode != 0:
        raise CompileCError(
            f"{cc} rejected {source.name} (exit {proc.returncode})",
            stderr=proc.stderr,
            command=cmd,
        )
    return output
