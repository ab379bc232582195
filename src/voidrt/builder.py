"""Write an assembled unit to disk and compile it to a native binary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from voidrt.c_compiler import CompileCError, compile_unit
from voidrt.config import RuntimeConfig

logger = logging.getLogger(__name__)


@dataclass
class BuildResult:
    """Outcome of a build."""

    ok: bool
    source: Path | None = None
    binary: Path | None = None
    c_error: str | None = None


def write_unit(unit: list[str], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(unit) + "\n")
    return path


def build_unit(
    unit: list[str],
    build_dir: Path,
    name: str = "a.out",
    config: RuntimeConfig | None = None,
) -> BuildResult:
    """Write *unit* to ``build_dir/name.c`` and compile ``build_dir/name``."""
    config = config or RuntimeConfig()
    source = write_unit(unit, build_dir / f"{name}.c")
    logger.info("wrote %s (%d lines)", source, len(unit))

    binary = build_dir / name
    try:
        compile_unit(source, binary, config.build)
    except CompileCError as e:
        return BuildResult(
            ok=False, source=source,
            c_error=f"{e}\n{e.stderr}" if e.stderr else str(e),
        )
    return BuildResult(ok=True, source=source, binary=binary)
