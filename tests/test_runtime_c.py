"""Tests for the emitted C runtime.

Each test assembles a full unit around a small ``main``, compiles it and
checks what the program prints.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from voidrt.builder import build_unit
from voidrt.c_runtime import RuntimeLibrary
from voidrt.config import LimitsConfig, RuntimeConfig, config_from_dict
from voidrt.dynamic import ArrayAssign, ArrayElement, emit_read, emit_write


@pytest.fixture(autouse=True)
def _require_cc(needs_cc):
    """Every test here compiles C."""


def _run(
    tmp_path: Path, main_body: list[str], *,
    lib: RuntimeLibrary | None = None, name: str = "test",
) -> list[str]:
    """Compile a unit with *main_body* and return its stdout lines."""
    if lib is None:
        lib = RuntimeLibrary()
        lib.initialize()
    result = build_unit(lib.assemble_unit(main_body=main_body), tmp_path, name)
    assert result.ok, f"Compile failed:\n{result.c_error}"
    proc = subprocess.run([str(result.binary)], capture_output=True, text=True, timeout=10)
    assert proc.returncode == 0
    return proc.stdout.splitlines()


def _show(expr: str) -> str:
    """Print a C string expression wrapped in brackets."""
    return f'printf("[%s]\\n", {expr});'


def _show_int(expr: str) -> str:
    return f'printf("%d\\n", (int)({expr}));'


# ── Conversion, memory, type checks ───────────────────────────────


class TestConversions:
    def test_int_and_bool_to_string(self, tmp_path):
        out = _run(tmp_path, [
            _show("vs_convert_int_to_string(-42)"),
            _show("vs_convert_bool_to_string(true)"),
            _show("vs_convert_bool_to_string(false)"),
            _show_int('vs_convert_string_to_int("123") + 1'),
        ])
        assert out == ["[-42]", "[true]", "[false]", "124"]

    def test_double_round_trip(self, tmp_path):
        out = _run(tmp_path, [
            _show("vs_convert_double_to_string(3.5)"),
            _show_int('vs_convert_string_to_double("2.5") * 2'),
            _show_int('vs_convert_string_to_bool("true")'),
        ])
        assert out == ["[3.5]", "5", "1"]


class TestMemory:
    def test_alloc_check_free(self, tmp_path):
        out = _run(tmp_path, [
            "vs_value_t* i = vs_alloc_value(0);",
            'vs_value_t* s = vs_alloc_string("text");',
            _show_int("vs_is_int(i)"),
            _show_int("vs_is_string(i)"),
            _show_int("vs_is_string(s)"),
            _show("(const char*)s->data"),
            "vs_free_value(i);",
            "vs_free_value(s);",
            "vs_free_value(NULL);",
            _show_int("vs_is_int(NULL)"),
        ])
        assert out == ["1", "0", "1", "[text]", "0"]


# ── I/O and strings ────────────────────────────────────────────────


class TestIO:
    def test_print_primitives(self, tmp_path):
        out = _run(tmp_path, [
            'vs_builtin_print("hello");',
            "vs_builtin_print_int(7);",
            'vs_builtin_printnl("%s=%d", "x", 3);',
            'vs_builtin_printnl_simple("Name: ", "John");',
            'vs_builtin_printnl_simple(NULL, "only");',
        ])
        assert out == ["hello", "7", "x=3", "Name: John", "only"]


class TestStrings:
    def test_strlen_and_strcat(self, tmp_path):
        out = _run(tmp_path, [
            _show_int('vs_builtin_strlen("abcd")'),
            _show_int("vs_builtin_strlen(NULL)"),
            _show('vs_builtin_strcat("foo", "bar")'),
            _show_int('vs_builtin_strcat(NULL, "bar") == NULL'),
        ])
        assert out == ["4", "0", "[foobar]", "1"]


# ── Arrays ─────────────────────────────────────────────────────────


class TestArrays:
    def test_default_reads(self, tmp_path):
        out = _run(tmp_path, [
            _show('vs_runtime_get_array_element_as_string("numbers[1]")'),
            _show('vs_runtime_get_array_element_as_string("$fruits[0]")'),
        ])
        assert out == ["[2]", "[apple]"]

    def test_write_then_read(self, tmp_path):
        out = _run(tmp_path, [
            'vs_runtime_set_array_element("$numbers", 0, "10");',
            'vs_runtime_set_array_element("fruits", 2, "grape");',
            _show('vs_runtime_get_array_element_as_string("numbers[0]")'),
            _show('vs_runtime_get_array_element_as_string("$fruits[2]")'),
            _show('vs_runtime_get_array_element_as_string("$numbers[1]")'),
        ])
        assert out == ["[10]", "[grape]", "[2]"]

    def test_round_trip_through_variants(self, tmp_path):
        lib = RuntimeLibrary()
        lib.initialize()
        out = _run(tmp_path, [
            emit_write(lib, ArrayAssign("fruits", 1, '"kiwi"')),
            _show(emit_read(lib, ArrayElement("fruits", 1))),
        ], lib=lib)
        assert out == ["[kiwi]"]

    def test_modified_is_null_until_written(self, tmp_path):
        out = _run(tmp_path, [
            _show_int('vs_runtime_get_array_element_modified("$numbers", 3) == NULL'),
            'vs_runtime_set_array_element("$numbers", 3, "40");',
            _show('vs_runtime_get_array_element_modified("$numbers", 3)'),
        ])
        assert out == ["1", "[40]"]

    def test_out_of_range(self, tmp_path):
        out = _run(tmp_path, [
            'vs_runtime_set_array_element("$numbers", 9, "1");',
            _show('vs_runtime_get_array_element_as_string("numbers[9]")'),
            _show('vs_runtime_get_array_element_as_string("planets[0]")'),
        ])
        assert out == ["[[array access: numbers[9]]]", "[[array access: planets[0]]]"]

    def test_count(self, tmp_path):
        out = _run(tmp_path, [
            _show_int('vs_builtin_count("$numbers")'),
            _show_int('vs_builtin_count("fruits")'),
            _show_int('vs_builtin_count("$planets")'),
        ])
        assert out == ["5", "3", "0"]

    def test_iterate_with_prefix(self, tmp_path):
        out = _run(tmp_path, ['vs_runtime_iterate_array("$numbers", "  ");'])
        assert out == ["  1", "  2", "  3", "  4", "  5"]

    def test_iterate_sees_writes(self, tmp_path):
        out = _run(tmp_path, [
            'vs_runtime_set_array_element("$fruits", 2, "grape");',
            'vs_runtime_iterate_array("fruits", "- ");',
        ])
        assert out == ["- apple", "- banana", "- grape"]

    def test_iterate_unknown(self, tmp_path):
        out = _run(tmp_path, ['vs_runtime_iterate_array("$planets", "  ");'])
        assert out == ["// Unknown array: $planets"]


# ── Objects ────────────────────────────────────────────────────────


class TestObjects:
    def test_property_bag(self, tmp_path):
        out = _run(tmp_path, [
            "vs_object_t* obj = vs_builtin_object_new();",
            'vs_builtin_object_set(obj, "a", vs_alloc_string("1"));',
            'vs_builtin_object_set(obj, "b", vs_alloc_string("2"));',
            'vs_builtin_object_set(obj, "c", vs_alloc_string("3"));',
            'vs_builtin_object_set(obj, "d", vs_alloc_string("4"));',
            'vs_builtin_object_set(obj, "e", vs_alloc_string("5"));',
            'vs_builtin_object_set(obj, "a", vs_alloc_string("one"));',
            _show_int("obj->count"),
            _show_int("obj->capacity"),
            _show('(const char*)vs_builtin_object_get(obj, "a")->data'),
            _show('(const char*)vs_builtin_object_get(obj, "e")->data'),
            _show_int('vs_builtin_object_get(obj, "z") == NULL'),
            "vs_free_object(obj);",
        ])
        assert out == ["5", "8", "[one]", "[5]", "1"]

    def test_member_access_defaults(self, tmp_path):
        out = _run(tmp_path, [
            _show('vs_runtime_evaluate_member_access("person->name")'),
            _show('vs_runtime_evaluate_member_access("$person->age")'),
            _show('vs_runtime_evaluate_member_access("person->active")'),
            _show('vs_runtime_evaluate_member_access("robot->x")'),
        ])
        assert out == ["[John]", "[30]", "[true]", "[[member access: robot->x]]"]

    def test_member_access_prefix_properties(self, tmp_path):
        lib = RuntimeLibrary(config_from_dict({"objects": {"box": {"a": 1, "ab": 2}}}))
        lib.initialize()
        out = _run(tmp_path, [
            _show('vs_runtime_evaluate_member_access("box->ab")'),
            _show('vs_runtime_evaluate_member_access("box->a")'),
            _show('vs_runtime_evaluate_member_access("box->abc")'),
        ], lib=lib)
        assert out == ["[2]", "[1]", "[[member access: box->abc]]"]

    def test_set_property(self, tmp_path):
        out = _run(tmp_path, [
            _show_int('vs_runtime_object_was_updated("person")'),
            'vs_runtime_set_object_property("person", "name", "Jane");',
            'vs_runtime_set_object_property("person", "age", "25");',
            'vs_runtime_set_object_property("$person", "active", "false");',
            'vs_runtime_set_object_property("robot", "age", "1");',
            _show_int('vs_runtime_object_was_updated("$person")'),
            'vs_runtime_iterate_object_properties("person", "  ");',
            'vs_runtime_iterate_object_properties("robot", "  ");',
        ])
        assert out == [
            "0",
            "1",
            "  name: Jane",
            "  age: 25",
            "  active: false",
            "// Unknown object: robot",
        ]


# ── Dynamic evaluation ─────────────────────────────────────────────


class TestVariables:
    def test_defaults(self, tmp_path):
        out = _run(tmp_path, [
            _show('vs_runtime_get_variable_as_string("$MAX_SIZE")'),
            _show('vs_runtime_get_variable_as_string("APP_NAME")'),
            _show('vs_runtime_get_variable_as_string("$a")'),
            _show('vs_runtime_get_variable_as_string("$nothing")'),
        ])
        assert out == ["[100]", "[VoidScript Compiler Test]", "[10]", "[]"]

    def test_table_overrides_default(self, tmp_path):
        out = _run(tmp_path, [
            'vs_runtime_set_variable("$a", "99");',
            'vs_runtime_set_variable("$sum", vs_convert_int_to_string(5 + 3));',
            _show('vs_runtime_get_variable_as_string("$a")'),
            _show('vs_runtime_get_variable_as_string("$sum")'),
            'vs_runtime_set_variable("$a", "100");',
            _show('vs_runtime_get_variable_as_string("a")'),
        ])
        assert out == ["[99]", "[8]", "[100]"]

    def test_full_table_drops_new_names(self, tmp_path):
        lib = RuntimeLibrary(RuntimeConfig(limits=LimitsConfig(max_variables=2)))
        lib.initialize()
        out = _run(tmp_path, [
            'vs_runtime_set_variable("$v1", "one");',
            'vs_runtime_set_variable("$v2", "two");',
            'vs_runtime_set_variable("$v3", "three");',
            'vs_runtime_set_variable("$v1", "uno");',
            _show('vs_runtime_get_variable_as_string("$v1")'),
            _show('vs_runtime_get_variable_as_string("$v2")'),
            _show('vs_runtime_get_variable_as_string("$v3")'),
        ], lib=lib)
        assert out == ["[uno]", "[two]", "[]"]

    def test_long_name_keeps_one_slot(self, tmp_path):
        lib = RuntimeLibrary(RuntimeConfig(limits=LimitsConfig(max_variables=2)))
        lib.initialize()
        long_name = "$" + "v" * 70
        out = _run(tmp_path, [
            f'vs_runtime_set_variable("{long_name}", "one");',
            f'vs_runtime_set_variable("{long_name}", "two");',
            'vs_runtime_set_variable("$w", "three");',
            _show(f'vs_runtime_get_variable_as_string("{long_name}")'),
            _show('vs_runtime_get_variable_as_string("$w")'),
        ], lib=lib)
        assert out == ["[two]", "[three]"]

    def test_prefix_names_are_distinct(self, tmp_path):
        out = _run(tmp_path, [
            'vs_runtime_set_variable("$ab", "long");',
            'vs_runtime_set_variable("$a", "short");',
            _show('vs_runtime_get_variable_as_string("ab")'),
            _show('vs_runtime_get_variable_as_string("$a")'),
        ])
        assert out == ["[long]", "[short]"]


class TestEvaluators:
    def test_method_calls(self, tmp_path):
        out = _run(tmp_path, [
            _show('vs_runtime_evaluate_method_call("calculator->getValue()")'),
            _show('vs_runtime_evaluate_method_call("calculator->add(5)")'),
            _show('vs_runtime_evaluate_method_call("MethodCall(multiply, args=1)")'),
            _show('vs_runtime_evaluate_method_call("calculator->add(-3)")'),
            _show('vs_runtime_evaluate_method_call("calculator->divide(2)")'),
        ])
        assert out == ["[10]", "[15]", "[30]", "[27]", "[[method result: calculator->divide(2)]]"]

    def test_count_named_array(self, tmp_path):
        out = _run(tmp_path, [
            _show(
                "vs_runtime_evaluate_function_call("
                "\"function='count', args=1, argv=$fruits\")"
            ),
        ])
        assert out == ["[3]"]

    def test_count_by_call_order(self, tmp_path):
        call = "vs_runtime_evaluate_function_call(\"function='count', args=1\")"
        out = _run(tmp_path, [_show(call), _show(call), _show(call)])
        assert out == ["[5]", "[3]", "[3]"]

    def test_unknown_function(self, tmp_path):
        out = _run(tmp_path, [
            _show("vs_runtime_evaluate_function_call(\"function='now', args=0\")"),
        ])
        assert out == ["[[function result: function='now', args=0]]"]

    def test_count_arg_count_must_be_exact(self, tmp_path):
        out = _run(tmp_path, [
            _show(
                "vs_runtime_evaluate_function_call("
                "\"function='count', args=10, argv=$fruits\")"
            ),
        ])
        assert out == ["[[function result: function='count', args=10, argv=$fruits]]"]

    def test_count_prefix_array_names(self, tmp_path):
        lib = RuntimeLibrary(config_from_dict({
            "arrays": {"num": [1], "numbers": [1, 2, 3]},
        }))
        lib.initialize()
        out = _run(tmp_path, [
            _show(
                "vs_runtime_evaluate_function_call("
                "\"function='count', args=1, argv=$numbers\")"
            ),
            _show(
                "vs_runtime_evaluate_function_call("
                "\"function='count', args=1, argv=$num\")"
            ),
        ], lib=lib)
        assert out == ["[3]", "[1]"]
