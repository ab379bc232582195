"""Late-bound expressions the generator cannot resolve at compile time.

Each variant carries the fields the generator already extracted. It is
lowered to a call into one of the runtime evaluators, whose argument is
the canonical descriptor text those evaluators pattern-match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from voidrt.c_types import c_string
from voidrt.symbols import strip_sigil

if TYPE_CHECKING:
    from voidrt.c_runtime import RuntimeLibrary


# ── Reads ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class VariableRef:
    name: str


@dataclass(frozen=True)
class ArrayElement:
    array: str
    index: int


@dataclass(frozen=True)
class MemberAccess:
    obj: str
    member: str


@dataclass(frozen=True)
class MethodCall:
    obj: str
    method: str
    args: tuple[str, ...] = ()


@dataclass(frozen=True)
class FunctionCall:
    function: str
    args: tuple[str, ...] = ()


DynamicExpr = VariableRef | ArrayElement | MemberAccess | MethodCall | FunctionCall


# ── Writes ─────────────────────────────────────────────────────────
# ``value`` is C expression text producing a ``const char*``.


@dataclass(frozen=True)
class VariableAssign:
    name: str
    value: str


@dataclass(frozen=True)
class ArrayAssign:
    array: str
    index: int
    value: str


@dataclass(frozen=True)
class PropertyAssign:
    obj: str
    member: str
    value: str


DynamicWrite = VariableAssign | ArrayAssign | PropertyAssign


_READERS: dict[type, str] = {
    VariableRef: "vs_runtime_get_variable_as_string",
    ArrayElement: "vs_runtime_get_array_element_as_string",
    MemberAccess: "vs_runtime_evaluate_member_access",
    MethodCall: "vs_runtime_evaluate_method_call",
    FunctionCall: "vs_runtime_evaluate_function_call",
}

_WRITERS: dict[type, str] = {
    VariableAssign: "vs_runtime_set_variable",
    ArrayAssign: "vs_runtime_set_array_element",
    PropertyAssign: "vs_runtime_set_object_property",
}


def _var(name: str) -> str:
    return "$" + strip_sigil(name)


def descriptor(expr: DynamicExpr) -> str:
    """Canonical descriptor text, e.g. ``$numbers[0]`` or ``person->age``."""
    if isinstance(expr, VariableRef):
        return _var(expr.name)
    if isinstance(expr, ArrayElement):
        return f"{_var(expr.array)}[{expr.index}]"
    if isinstance(expr, MemberAccess):
        return f"{strip_sigil(expr.obj)}->{expr.member}"
    if isinstance(expr, MethodCall):
        return f"{strip_sigil(expr.obj)}->{expr.method}({', '.join(expr.args)})"
    if isinstance(expr, FunctionCall):
        text = f"function='{expr.function}', args={len(expr.args)}"
        if expr.args:
            text += f", argv={', '.join(expr.args)}"
        return text
    raise TypeError(f"not a dynamic expression: {expr!r}")


def emit_read(lib: RuntimeLibrary, expr: DynamicExpr) -> str:
    """C expression evaluating *expr* at run time, or "" if unsupported."""
    func = _READERS.get(type(expr))
    if func is None:
        raise TypeError(f"not a dynamic expression: {expr!r}")
    if not lib.has_function(func):
        return ""
    return f"{func}({c_string(descriptor(expr))})"


def emit_write(lib: RuntimeLibrary, stmt: DynamicWrite) -> str:
    """C statement performing *stmt* at run time, or "" if unsupported."""
    func = _WRITERS.get(type(stmt))
    if func is None:
        raise TypeError(f"not a dynamic write: {stmt!r}")
    if not lib.has_function(func):
        return ""
    if isinstance(stmt, VariableAssign):
        args = [c_string(_var(stmt.name)), stmt.value]
    elif isinstance(stmt, ArrayAssign):
        args = [c_string(_var(stmt.array)), str(stmt.index), stmt.value]
    else:
        args = [c_string(strip_sigil(stmt.obj)), c_string(stmt.member), stmt.value]
    return f"{func}({', '.join(args)});"
