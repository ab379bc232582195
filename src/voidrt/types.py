"""Value kinds and the runtime function descriptor.

Value kinds are the semantic types the checker hands to the naming
resolver. The numeric tags stored in ``vs_value_t.type`` are shared only
by the allocator and the ``vs_is_*`` predicates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValueKind(Enum):
    INTEGER = "integer"
    DOUBLE = "double"
    FLOAT = "float"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    CLASS = "class"
    NULL = "null"
    UNKNOWN = "unknown"


# ── Tagged value discriminants ────────────────────────────────────

VALUE_TAGS: dict[ValueKind, int] = {
    ValueKind.INTEGER: 0,
    ValueKind.DOUBLE: 1,
    ValueKind.FLOAT: 2,
    ValueKind.STRING: 3,
    ValueKind.BOOLEAN: 4,
    ValueKind.ARRAY: 5,
    ValueKind.OBJECT: 6,
}


@dataclass(frozen=True)
class RuntimeFunction:
    """One emittable runtime primitive.

    ``signature`` is the forward declaration without the trailing
    semicolon. ``implementation`` is either empty (the body lives inside
    another descriptor) or a complete, self-contained C definition.
    """

    name: str
    signature: str
    implementation: str = ""
    is_builtin: bool = True
