"""ValueKind -> C type mapping and runtime name construction."""

from __future__ import annotations

from dataclasses import dataclass

from voidrt.types import ValueKind


@dataclass(frozen=True)
class CType:
    """A C type representation."""

    decl: str  # C type string, e.g. "int64_t", "vs_object_t*"
    is_pointer: bool  # heap owned, needs a vs_free_* call


# ── Canonical tags ────────────────────────────────────────────────

_KIND_TAGS: dict[ValueKind, str] = {
    ValueKind.INTEGER: "int",
    ValueKind.DOUBLE: "double",
    ValueKind.FLOAT: "float",
    ValueKind.STRING: "string",
    ValueKind.BOOLEAN: "bool",
    ValueKind.OBJECT: "object",
    ValueKind.CLASS: "class",
}

_C_TYPES: dict[ValueKind, CType] = {
    ValueKind.INTEGER: CType("int64_t", is_pointer=False),
    ValueKind.DOUBLE: CType("double", is_pointer=False),
    ValueKind.FLOAT: CType("float", is_pointer=False),
    ValueKind.STRING: CType("char*", is_pointer=True),
    ValueKind.BOOLEAN: CType("bool", is_pointer=False),
    ValueKind.OBJECT: CType("vs_object_t*", is_pointer=True),
    ValueKind.CLASS: CType("vs_object_t*", is_pointer=True),
}


def kind_tag(kind: ValueKind) -> str:
    """Short lowercase tag for a value kind, used in runtime names.

    Kinds without a dedicated tag (arrays, null, anything new) map to
    ``"unknown"``.
    """
    return _KIND_TAGS.get(kind, "unknown")


def map_kind(kind: ValueKind) -> CType:
    """Map a value kind to its C representation."""
    return _C_TYPES.get(kind, CType("void*", is_pointer=True))


# ── Name templates ─────────────────────────────────────────────────


def conversion_name(from_kind: ValueKind, to_kind: ValueKind) -> str:
    """e.g. (INTEGER, STRING) -> "vs_convert_int_to_string"."""
    return f"vs_convert_{kind_tag(from_kind)}_to_{kind_tag(to_kind)}"


def type_check_name(kind: ValueKind) -> str:
    return f"vs_is_{kind_tag(kind)}"


def alloc_name(kind: ValueKind) -> str:
    return f"vs_alloc_{kind_tag(kind)}"


def free_name(kind: ValueKind) -> str:
    return f"vs_free_{kind_tag(kind)}"


def builtin_name(operation: str) -> str:
    """e.g. "strlen" -> "vs_builtin_strlen"."""
    return f"vs_builtin_{operation}"


def escape_c_string(s: str) -> str:
    """Escape a string for use inside a C string literal."""
    return (
        s.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


def c_string(s: str) -> str:
    """Render *s* as a quoted C string literal."""
    return f'"{escape_c_string(s)}"'
