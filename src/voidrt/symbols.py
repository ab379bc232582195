"""Symbols known to the generated program's shadow stores.

The type checker resolves which arrays, objects and named values a
script uses; the runtime layer receives them here instead of matching
identifiers it has never been told about.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from voidrt.types import ValueKind


def strip_sigil(name: str) -> str:
    """Drop one leading ``$`` from a script identifier."""
    return name[1:] if name.startswith("$") else name


@dataclass(frozen=True)
class ArraySymbol:
    name: str
    values: tuple[int | str, ...] = ()

    @property
    def element_kind(self) -> ValueKind:
        """INTEGER when every element is an int, STRING otherwise."""
        if self.values and all(
            isinstance(v, int) and not isinstance(v, bool) for v in self.values
        ):
            return ValueKind.INTEGER
        return ValueKind.STRING

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class PropertySymbol:
    name: str
    kind: ValueKind  # INTEGER, STRING or BOOLEAN
    default: int | str | bool


@dataclass(frozen=True)
class ObjectSymbol:
    name: str
    properties: tuple[PropertySymbol, ...] = ()


@dataclass
class RuntimeSymbols:
    """Arrays, objects and named values the runtime knows by name."""

    arrays: list[ArraySymbol] = field(default_factory=list)
    objects: list[ObjectSymbol] = field(default_factory=list)
    defaults: dict[str, str] = field(default_factory=dict)
    accumulator: int = 0


def default_symbols() -> RuntimeSymbols:
    """The fixed set of names the VoidScript test programs rely on."""
    return RuntimeSymbols(
        arrays=[
            ArraySymbol("numbers", (1, 2, 3, 4, 5)),
            ArraySymbol("fruits", ("apple", "banana", "cherry")),
        ],
        objects=[
            ObjectSymbol("person", (
                PropertySymbol("name", ValueKind.STRING, "John"),
                PropertySymbol("age", ValueKind.INTEGER, 30),
                PropertySymbol("active", ValueKind.BOOLEAN, True),
            )),
        ],
        defaults={
            # Constants
            "MAX_SIZE": "100",
            "APP_NAME": "VoidScript Compiler Test",
            "DEBUG_MODE": "true",
            "PI": "3.14159",
            # Initial values of variables not yet assigned at run time
            "a": "10",
            "b": "Hello",
            "c": "true",
            "d": "3.14",
            "x": "10",
        },
        accumulator=10,
    )
