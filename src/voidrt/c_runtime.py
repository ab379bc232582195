"""Registry of the C runtime primitives generated programs call into.

The code generator asks the library which primitive implements a
construct (``get_type_conversion_function`` and friends) while emitting
statements, then closes out the translation unit with the header and
implementation blocks produced from the same registry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from voidrt import c_assembler
from voidrt.c_builtins import INSTALLERS
from voidrt.c_types import (
    alloc_name,
    builtin_name,
    conversion_name,
    free_name,
    type_check_name,
)
from voidrt.config import RuntimeConfig
from voidrt.symbols import RuntimeSymbols
from voidrt.types import RuntimeFunction, ValueKind

logger = logging.getLogger(__name__)

DEFAULT_ALLOC = "vs_alloc_value"
DEFAULT_FREE = "vs_free_value"


class RuntimeLibrary:
    """Name-keyed catalog of runtime functions.

    Filled once by :meth:`initialize`; read-only for the rest of the
    compiler run. Lookups never raise: an absent name is ``None`` from
    :meth:`get_function` and ``""`` from the ``get_*_function`` resolvers.
    """

    def __init__(self, config: RuntimeConfig | None = None) -> None:
        self.config = config or RuntimeConfig()
        self._functions: dict[str, RuntimeFunction] = {}

    @property
    def symbols(self) -> RuntimeSymbols:
        return self.config.symbols

    def initialize(self) -> None:
        """(Re)populate the registry from every category installer."""
        self._functions.clear()
        for install in INSTALLERS:
            before = len(self._functions)
            install(self)
            logger.debug(
                "%s registered %d function(s)",
                install.__name__, len(self._functions) - before,
            )
        logger.debug("runtime library initialized with %d functions", len(self._functions))

    # ── Registry ───────────────────────────────────────────────

    def add_function(self, func: RuntimeFunction) -> None:
        """Insert *func*, replacing any earlier entry with the same name."""
        if func.name in self._functions:
            logger.debug("replacing runtime function %s", func.name)
        self._functions[func.name] = func

    def get_function(self, name: str) -> RuntimeFunction | None:
        return self._functions.get(name)

    def has_function(self, name: str) -> bool:
        return name in self._functions

    @property
    def functions(self) -> Mapping[str, RuntimeFunction]:
        """Read-only view of every registered function."""
        return MappingProxyType(self._functions)

    def ordered_functions(self) -> list[RuntimeFunction]:
        """Entries in emission order: by name when deterministic output is on."""
        if self.config.deterministic:
            return [self._functions[name] for name in sorted(self._functions)]
        return list(self._functions.values())

    # ── Naming resolver ────────────────────────────────────────

    def _registered(self, name: str) -> str:
        return name if name in self._functions else ""

    def get_type_conversion_function(self, from_kind: ValueKind, to_kind: ValueKind) -> str:
        """Name of the from->to converter, or "" if there is none."""
        return self._registered(conversion_name(from_kind, to_kind))

    def get_type_check_function(self, kind: ValueKind) -> str:
        return self._registered(type_check_name(kind))

    def get_allocation_function(self, kind: ValueKind) -> str:
        """Type-specific allocator if registered, else the generic one."""
        return self._registered(alloc_name(kind)) or DEFAULT_ALLOC

    def get_deallocation_function(self, kind: ValueKind) -> str:
        return self._registered(free_name(kind)) or DEFAULT_FREE

    def get_builtin_function(self, operation: str) -> str:
        """e.g. "strlen" -> "vs_builtin_strlen" when registered."""
        return self._registered(builtin_name(operation))

    # ── Code assembly ──────────────────────────────────────────

    def generate_headers(self) -> list[str]:
        return c_assembler.generate_headers(self)

    def generate_state(self) -> list[str]:
        return c_assembler.generate_state(self)

    def generate_implementations(self) -> list[str]:
        return c_assembler.generate_implementations(self)

    def assemble_unit(
        self, functions: Iterable[str] = (), main_body: Iterable[str] = (),
    ) -> list[str]:
        return c_assembler.assemble_unit(self, functions=functions, main_body=main_body)
