"""Render the registry into the blocks of a C translation unit.

A complete unit is, in order: headers, shadow-store state, user
functions, ``main``, runtime implementations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from voidrt.c_types import c_string
from voidrt.types import ValueKind

if TYPE_CHECKING:
    from voidrt.c_runtime import RuntimeLibrary

logger = logging.getLogger(__name__)

_STANDARD_INCLUDES = (
    "#include <stdio.h>",
    "#include <stdlib.h>",
    "#include <string.h>",
    "#include <stdint.h>",
    "#include <stdbool.h>",
    "#include <stdarg.h>",
)

_RUNTIME_TYPES = (
    "typedef struct {",
    "    int type;",
    "    void* data;",
    "} vs_value_t;",
    "",
    "typedef struct {",
    "    char* key;",
    "    vs_value_t* value;",
    "} vs_object_entry_t;",
    "",
    "typedef struct {",
    "    vs_object_entry_t* entries;",
    "    size_t count;",
    "    size_t capacity;",
    "} vs_object_t;",
)


def generate_headers(lib: RuntimeLibrary) -> list[str]:
    """Includes, the shared value typedefs, then one declaration per function."""
    headers: list[str] = list(_STANDARD_INCLUDES)
    headers.append("")
    headers.append("// VoidScript Runtime Types")
    headers.extend(_RUNTIME_TYPES)
    headers.append("")
    headers.append("// VoidScript Runtime Function Declarations")
    for func in lib.ordered_functions():
        headers.append(func.signature + ";")
    headers.append("")
    logger.debug("generated %d header lines", len(headers))
    return headers


def generate_implementations(lib: RuntimeLibrary) -> list[str]:
    """Bodies of every builtin with a non-empty implementation."""
    lines: list[str] = ["// VoidScript Runtime Function Implementations", ""]
    for func in lib.ordered_functions():
        if not func.is_builtin or not func.implementation:
            continue
        lines.extend(func.implementation.splitlines())
        lines.append("")
    logger.debug("generated %d implementation lines", len(lines))
    return lines


# ── Shadow-store state ─────────────────────────────────────────────


def array_default(name: str) -> str:
    return f"vs_default_{name}"


def array_shadow(name: str) -> str:
    return f"vs_shadow_{name}"


def array_written(name: str) -> str:
    return f"vs_shadow_{name}_set"


def object_field(obj: str, prop: str) -> str:
    return f"vs_object_{obj}_{prop}"


def object_updated(obj: str) -> str:
    return f"vs_object_{obj}_updated"


def generate_state(lib: RuntimeLibrary) -> list[str]:
    """File-scope storage shared by the array and object primitives.

    Arrays get their compiled-in defaults, a shadow buffer and a
    per-element written flag; objects get one field per property.
    """
    symbols = lib.symbols
    width = lib.config.limits.string_size
    lines: list[str] = ["// Shadow storage for known arrays"]
    for arr in symbols.arrays:
        size = len(arr)
        if arr.element_kind == ValueKind.INTEGER:
            values = ", ".join(str(v) for v in arr.values)
            lines.append(f"static const int {array_default(arr.name)}[{size}] = {{{values}}};")
            lines.append(f"static int {array_shadow(arr.name)}[{size}];")
        else:
            values = ", ".join(c_string(str(v)) for v in arr.values)
            lines.append(
                f"static const char* const {array_default(arr.name)}[{size}] = {{{values}}};"
            )
            lines.append(f"static char {array_shadow(arr.name)}[{size}][{width}];")
        lines.append(f"static int {array_written(arr.name)}[{size}];")
    lines.append("")

    lines.append("// Shadow storage for known objects")
    for obj in symbols.objects:
        for prop in obj.properties:
            field = object_field(obj.name, prop.name)
            if prop.kind == ValueKind.STRING:
                lines.append(f"static char {field}[{width}] = {c_string(str(prop.default))};")
            elif prop.kind == ValueKind.BOOLEAN:
                lines.append(f"static int {field} = {1 if prop.default else 0};")
            else:
                lines.append(f"static int {field} = {int(prop.default)};")
        lines.append(f"static int {object_updated(obj.name)} = 0;")
    lines.append("")
    return lines


def assemble_unit(
    lib: RuntimeLibrary,
    *,
    functions: Iterable[str] = (),
    main_body: Iterable[str] = (),
) -> list[str]:
    """Stitch a whole translation unit around generator-produced code.

    *functions* are complete user function definitions; *main_body* are
    statements placed inside ``main`` before ``return 0;``.
    """
    lines = generate_headers(lib)
    lines.extend(generate_state(lib))

    lines.append("// User-defined functions")
    for definition in functions:
        lines.extend(definition.splitlines())
        lines.append("")

    lines.append("int main(void) {")
    for stmt in main_body:
        lines.append(f"    {stmt}")
    lines.append("    return 0;")
    lines.append("}")
    lines.append("")

    lines.extend(generate_implementations(lib))
    return lines
