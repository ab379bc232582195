"""Built-in runtime primitives, grouped by category.

Each ``install_*`` function registers one themed group with a
:class:`~voidrt.c_runtime.RuntimeLibrary`. Array, object and variable
primitives are rendered from the library's symbol table, so the names
they recognise are the ones the checker resolved.
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from typing import TYPE_CHECKING

from voidrt.c_assembler import (
    array_default,
    array_shadow,
    array_written,
    object_field,
    object_updated,
)
from voidrt.c_types import (
    c_string,
    conversion_name,
    escape_c_string,
    map_kind,
    type_check_name,
)
from voidrt.symbols import ArraySymbol, PropertySymbol
from voidrt.types import VALUE_TAGS, RuntimeFunction, ValueKind

if TYPE_CHECKING:
    from voidrt.c_runtime import RuntimeLibrary


def _c(text: str) -> str:
    return textwrap.dedent(text).strip("\n")


def _add(lib: RuntimeLibrary, name: str, signature: str, implementation: str) -> None:
    lib.add_function(RuntimeFunction(name, signature, implementation))


def _matches(var: str, name: str) -> str:
    return f"vs_runtime_name_matches({var}, {c_string(name)})"


# ── Type conversion ────────────────────────────────────────────────


def _conversion_signature(from_kind: ValueKind, to_kind: ValueKind) -> str:
    param = map_kind(from_kind)
    param_decl = f"const {param.decl}" if param.is_pointer else param.decl
    name = conversion_name(from_kind, to_kind)
    return f"{map_kind(to_kind).decl} {name}({param_decl} value)"


# (from, to) -> body lines between the braces
_CONVERSIONS: dict[tuple[ValueKind, ValueKind], str] = {
    (ValueKind.INTEGER, ValueKind.STRING): """
        char* result = malloc(32);
        snprintf(result, 32, "%lld", (long long)value);
        return result;
    """,
    (ValueKind.STRING, ValueKind.INTEGER): """
        return value ? strtoll(value, NULL, 10) : 0;
    """,
    (ValueKind.BOOLEAN, ValueKind.STRING): """
        char* result = malloc(8);
        strcpy(result, value ? "true" : "false");
        return result;
    """,
    (ValueKind.DOUBLE, ValueKind.STRING): """
        char* result = malloc(64);
        snprintf(result, 64, "%g", value);
        return result;
    """,
    (ValueKind.STRING, ValueKind.DOUBLE): """
        return value ? strtod(value, NULL) : 0.0;
    """,
    (ValueKind.STRING, ValueKind.BOOLEAN): """
        return value != NULL && strcmp(value, "true") == 0;
    """,
}


def install_type_conversions(lib: RuntimeLibrary) -> None:
    for (from_kind, to_kind), body in _CONVERSIONS.items():
        signature = _conversion_signature(from_kind, to_kind)
        _add(lib, conversion_name(from_kind, to_kind), signature,
             f"{signature} {{\n{textwrap.indent(_c(body), '    ')}\n}}")


# ── Memory management ──────────────────────────────────────────────


def install_memory_management(lib: RuntimeLibrary) -> None:
    _add(lib, "vs_alloc_value", "vs_value_t* vs_alloc_value(int type)", _c("""
        vs_value_t* vs_alloc_value(int type) {
            vs_value_t* value = malloc(sizeof(vs_value_t));
            value->type = type;
            value->data = NULL;
            return value;
        }
    """))
    _add(lib, "vs_free_value", "void vs_free_value(vs_value_t* value)", _c("""
        void vs_free_value(vs_value_t* value) {
            if (value) {
                if (value->data) {
                    free(value->data);
                }
                free(value);
            }
        }
    """))
    string_tag = VALUE_TAGS[ValueKind.STRING]
    _add(lib, "vs_alloc_string", "vs_value_t* vs_alloc_string(const char* str)", _c(f"""
        vs_value_t* vs_alloc_string(const char* str) {{
            vs_value_t* value = vs_alloc_value({string_tag});
            size_t len = str ? strlen(str) : 0;
            char* copy = malloc(len + 1);
            if (len) memcpy(copy, str, len);
            copy[len] = '\\0';
            value->data = copy;
            return value;
        }}
    """))
    _add(lib, "vs_free_object", "void vs_free_object(vs_object_t* obj)", _c("""
        void vs_free_object(vs_object_t* obj) {
            if (!obj) return;
            for (size_t i = 0; i < obj->count; i++) {
                free(obj->entries[i].key);
                vs_free_value(obj->entries[i].value);
            }
            free(obj->entries);
            free(obj);
        }
    """))


# ── Utility: type checks and identifier matching ───────────────────


def install_utilities(lib: RuntimeLibrary) -> None:
    for kind, tag in VALUE_TAGS.items():
        if kind == ValueKind.ARRAY:
            continue
        name = type_check_name(kind)
        signature = f"bool {name}(vs_value_t* value)"
        _add(lib, name, signature, _c(f"""
            {signature} {{
                return value && value->type == {tag};
            }}
        """))
    _add(lib, "vs_runtime_name_matches",
         "bool vs_runtime_name_matches(const char* given, const char* name)", _c("""
        bool vs_runtime_name_matches(const char* given, const char* name) {
            if (!given || !name) return false;
            if (given[0] == '$') given++;
            if (name[0] == '$') name++;
            return strcmp(given, name) == 0;
        }
    """))
    _add(lib, "vs_runtime_find_name",
         "const char* vs_runtime_find_name(const char* text, const char* name)", _c("""
        static bool vs_name_char(char c) {
            return c == '_' || (c >= '0' && c <= '9')
                || (c >= 'a' && c <= 'z') || (c >= 'A' && c <= 'Z');
        }

        const char* vs_runtime_find_name(const char* text, const char* name) {
            const char* hit;
            size_t len;
            if (!text || !name || !name[0]) return NULL;
            len = strlen(name);
            // A match must not run into a longer identifier on either side.
            for (hit = strstr(text, name); hit != NULL; hit = strstr(hit + 1, name)) {
                int clean_start = hit == text || !vs_name_char(name[0]) || !vs_name_char(hit[-1]);
                if (clean_start && !vs_name_char(hit[len])) return hit;
            }
            return NULL;
        }
    """))


# ── I/O ────────────────────────────────────────────────────────────


def install_io(lib: RuntimeLibrary) -> None:
    _add(lib, "vs_builtin_print", "void vs_builtin_print(const char* str)", _c("""
        void vs_builtin_print(const char* str) {
            printf("%s\\n", str ? str : "");
        }
    """))
    _add(lib, "vs_builtin_print_int", "void vs_builtin_print_int(int64_t value)", _c("""
        void vs_builtin_print_int(int64_t value) {
            printf("%lld\\n", (long long)value);
        }
    """))
    _add(lib, "vs_builtin_printnl",
         "void vs_builtin_printnl(const char* format, ...)", _c("""
        void vs_builtin_printnl(const char* format, ...) {
            va_list args;
            va_start(args, format);
            vprintf(format, args);
            va_end(args);
            printf("\\n");
        }
    """))
    _add(lib, "vs_builtin_printnl_simple",
         "void vs_builtin_printnl_simple(const char* str1, const char* str2)", _c("""
        void vs_builtin_printnl_simple(const char* str1, const char* str2) {
            if (str1) printf("%s", str1);
            if (str2) printf("%s", str2);
            printf("\\n");
        }
    """))


# ── Strings ────────────────────────────────────────────────────────


def install_strings(lib: RuntimeLibrary) -> None:
    _add(lib, "vs_builtin_strlen", "int64_t vs_builtin_strlen(const char* str)", _c("""
        int64_t vs_builtin_strlen(const char* str) {
            return str ? (int64_t)strlen(str) : 0;
        }
    """))
    _add(lib, "vs_builtin_strcat",
         "char* vs_builtin_strcat(const char* str1, const char* str2)", _c("""
        char* vs_builtin_strcat(const char* str1, const char* str2) {
            if (!str1 || !str2) return NULL;
            size_t len1 = strlen(str1);
            size_t len2 = strlen(str2);
            char* result = malloc(len1 + len2 + 1);
            memcpy(result, str1, len1);
            memcpy(result + len1, str2, len2 + 1);
            return result;
        }
    """))


# ── Arrays ─────────────────────────────────────────────────────────


def _element_format(arr: ArraySymbol) -> str:
    return "%d" if arr.element_kind == ValueKind.INTEGER else "%s"


def install_arrays(lib: RuntimeLibrary) -> None:
    arrays = lib.symbols.arrays
    width = lib.config.limits.string_size
    array_tag = VALUE_TAGS[ValueKind.ARRAY]

    _add(lib, "vs_builtin_array_new", "vs_value_t* vs_builtin_array_new(size_t size)", _c(f"""
        vs_value_t* vs_builtin_array_new(size_t size) {{
            vs_value_t* array = vs_alloc_value({array_tag});
            array->data = size ? calloc(size, sizeof(vs_value_t*)) : NULL;
            return array;
        }}
    """))

    # count
    sig = "int vs_builtin_count(const char* array_name)"
    body = [f"{sig} {{"]
    for arr in arrays:
        body.append(f"    if ({_matches('array_name', arr.name)}) return {len(arr)};")
    body += ["    return 0;", "}"]
    _add(lib, "vs_builtin_count", sig, "\n".join(body))

    # Shadow read: live value, or NULL when the element was never written
    sig = "char* vs_runtime_get_array_element_modified(const char* array_name, int index)"
    body = [f"{sig} {{", "    static char buffer[256];"]
    for arr in arrays:
        body += [
            f"    if ({_matches('array_name', arr.name)}) {{",
            f"        if (index >= 0 && index < {len(arr)} && {array_written(arr.name)}[index]) {{",
            f'            snprintf(buffer, sizeof(buffer), "{_element_format(arr)}", '
            f"{array_shadow(arr.name)}[index]);",
            "            return buffer;",
            "        }",
            "        return NULL;",
            "    }",
        ]
    body += ["    return NULL;", "}"]
    _add(lib, "vs_runtime_get_array_element_modified", sig, "\n".join(body))

    # Read from a "name[index]" descriptor
    sig = "char* vs_runtime_get_array_element_as_string(const char* expression)"
    body = [
        f"{sig} {{",
        "    static char buffer[256];",
        "    char array_name[64];",
        "    int index = 0;",
        "",
        '    if (expression && sscanf(expression, "%63[^[][%d]", array_name, &index) == 2) {',
        "        char* modified = vs_runtime_get_array_element_modified(array_name, index);",
        "        if (modified) {",
        '            snprintf(buffer, sizeof(buffer), "%s", modified);',
        "            return buffer;",
        "        }",
    ]
    for arr in arrays:
        body += [
            f"        if ({_matches('array_name', arr.name)} && index >= 0 && index < {len(arr)}) {{",
            f'            snprintf(buffer, sizeof(buffer), "{_element_format(arr)}", '
            f"{array_default(arr.name)}[index]);",
            "            return buffer;",
            "        }",
        ]
    body += [
        "    }",
        "",
        '    snprintf(buffer, sizeof(buffer), "[array access: %s]", expression ? expression : "");',
        "    return buffer;",
        "}",
    ]
    _add(lib, "vs_runtime_get_array_element_as_string", sig, "\n".join(body))

    # Write into the shadow store
    sig = "void vs_runtime_set_array_element(const char* array_name, int index, const char* value)"
    body = [f"{sig} {{", "    if (!value) return;"]
    for arr in arrays:
        if arr.element_kind == ValueKind.INTEGER:
            store = f"        {array_shadow(arr.name)}[index] = (int)strtol(value, NULL, 10);"
        else:
            store = (
                f"        snprintf({array_shadow(arr.name)}[index], {width}, \"%s\", value);"
            )
        body += [
            f"    if ({_matches('array_name', arr.name)} && index >= 0 && index < {len(arr)}) {{",
            store,
            f"        {array_written(arr.name)}[index] = 1;",
            "        return;",
            "    }",
        ]
    body.append("}")
    _add(lib, "vs_runtime_set_array_element", sig, "\n".join(body))

    # foreach over a known array
    sig = "void vs_runtime_iterate_array(const char* array_name, const char* prefix)"
    body = [f"{sig} {{", '    if (!prefix) prefix = "";']
    for arr in arrays:
        live = (
            f"{array_written(arr.name)}[i] ? {array_shadow(arr.name)}[i] "
            f": {array_default(arr.name)}[i]"
        )
        body += [
            f"    if ({_matches('array_name', arr.name)}) {{",
            f"        for (int i = 0; i < {len(arr)}; i++) {{",
            f'            printf("%s{_element_format(arr)}\\n", prefix, {live});',
            "        }",
            "        return;",
            "    }",
        ]
    body += [
        '    printf("// Unknown array: %s\\n", array_name ? array_name : "(null)");',
        "}",
    ]
    _add(lib, "vs_runtime_iterate_array", sig, "\n".join(body))


# ── Objects ────────────────────────────────────────────────────────


def _property_printf(obj: str, prop: PropertySymbol) -> str:
    label = escape_c_string(prop.name).replace("%", "%%")
    field = object_field(obj, prop.name)
    if prop.kind == ValueKind.STRING:
        return f'printf("%s{label}: %s\\n", prefix, {field});'
    if prop.kind == ValueKind.BOOLEAN:
        return f'printf("%s{label}: %s\\n", prefix, {field} ? "true" : "false");'
    return f'printf("%s{label}: %d\\n", prefix, {field});'


def _property_assign(obj: str, prop: PropertySymbol, width: int) -> str:
    field = object_field(obj, prop.name)
    if prop.kind == ValueKind.STRING:
        return f'snprintf({field}, {width}, "%s", value);'
    if prop.kind == ValueKind.BOOLEAN:
        return f'{field} = strcmp(value, "true") == 0;'
    return f"{field} = (int)strtol(value, NULL, 10);"


def install_objects(lib: RuntimeLibrary) -> None:
    objects = lib.symbols.objects
    width = lib.config.limits.string_size

    _add(lib, "vs_builtin_object_new", "vs_object_t* vs_builtin_object_new(void)", _c("""
        vs_object_t* vs_builtin_object_new(void) {
            vs_object_t* obj = malloc(sizeof(vs_object_t));
            obj->entries = NULL;
            obj->count = 0;
            obj->capacity = 0;
            return obj;
        }
    """))
    _add(lib, "vs_builtin_object_get",
         "vs_value_t* vs_builtin_object_get(vs_object_t* obj, const char* key)", _c("""
        vs_value_t* vs_builtin_object_get(vs_object_t* obj, const char* key) {
            if (!obj || !key) return NULL;
            for (size_t i = 0; i < obj->count; i++) {
                if (strcmp(obj->entries[i].key, key) == 0) {
                    return obj->entries[i].value;
                }
            }
            return NULL;
        }
    """))
    _add(lib, "vs_builtin_object_set",
         "void vs_builtin_object_set(vs_object_t* obj, const char* key, vs_value_t* value)",
         _c("""
        void vs_builtin_object_set(vs_object_t* obj, const char* key, vs_value_t* value) {
            if (!obj || !key) return;
            for (size_t i = 0; i < obj->count; i++) {
                if (strcmp(obj->entries[i].key, key) == 0) {
                    if (obj->entries[i].value != value) {
                        vs_free_value(obj->entries[i].value);
                    }
                    obj->entries[i].value = value;
                    return;
                }
            }
            if (obj->count == obj->capacity) {
                size_t capacity = obj->capacity ? obj->capacity * 2 : 4;
                vs_object_entry_t* entries = realloc(obj->entries, capacity * sizeof(vs_object_entry_t));
                if (!entries) return;
                obj->entries = entries;
                obj->capacity = capacity;
            }
            size_t len = strlen(key);
            char* copy = malloc(len + 1);
            memcpy(copy, key, len + 1);
            obj->entries[obj->count].key = copy;
            obj->entries[obj->count].value = value;
            obj->count++;
        }
    """))

    # Property setter for known objects
    sig = (
        "void vs_runtime_set_object_property(const char* object_name, "
        "const char* property, const char* value)"
    )
    body = [f"{sig} {{", "    if (!property || !value) return;"]
    for obj in objects:
        body += [
            f"    if ({_matches('object_name', obj.name)}) {{",
            f"        {object_updated(obj.name)} = 1;",
        ]
        for i, prop in enumerate(obj.properties):
            keyword = "if" if i == 0 else "} else if"
            body += [
                f"        {keyword} (strcmp(property, {c_string(prop.name)}) == 0) {{",
                f"            {_property_assign(obj.name, prop, width)}",
            ]
        if obj.properties:
            body.append("        }")
        body += ["        return;", "    }"]
    body.append("}")
    _add(lib, "vs_runtime_set_object_property", sig, "\n".join(body))

    # foreach over a known object's properties
    sig = "void vs_runtime_iterate_object_properties(const char* object_name, const char* prefix)"
    body = [f"{sig} {{", '    if (!prefix) prefix = "";']
    for obj in objects:
        body.append(f"    if ({_matches('object_name', obj.name)}) {{")
        body += [f"        {_property_printf(obj.name, prop)}" for prop in obj.properties]
        body += ["        return;", "    }"]
    body += [
        '    printf("// Unknown object: %s\\n", object_name ? object_name : "(null)");',
        "}",
    ]
    _add(lib, "vs_runtime_iterate_object_properties", sig, "\n".join(body))

    sig = "int vs_runtime_object_was_updated(const char* object_name)"
    body = [f"{sig} {{"]
    for obj in objects:
        body.append(
            f"    if ({_matches('object_name', obj.name)}) return {object_updated(obj.name)};"
        )
    body += ["    return 0;", "}"]
    _add(lib, "vs_runtime_object_was_updated", sig, "\n".join(body))


# ── Dynamic evaluation ─────────────────────────────────────────────


def _variable_store(lib: RuntimeLibrary) -> str:
    """The variable table plus both of its accessors, as one body."""
    limits = lib.config.limits
    defaults: list[str] = []
    for name, value in lib.symbols.defaults.items():
        defaults += [
            f"    if ({_matches('varname', name)}) {{",
            f'        snprintf(buffer, sizeof(buffer), "%s", {c_string(value)});',
            "        return buffer;",
            "    }",
        ]
    head = _c(f"""
        // Dynamic variable storage, shared by vs_runtime_set_variable
        #define VS_MAX_VARIABLES {limits.max_variables}
        static struct {{
            char name[{limits.variable_name_size}];
            char value[{limits.variable_value_size}];
            int used;
        }} vs_variable_table[VS_MAX_VARIABLES];

        // Names are stored without the sigil, cut to the slot width.
        static int vs_variable_slot_is(int i, const char* key) {{
            return vs_variable_table[i].used
                && strncmp(vs_variable_table[i].name, key, sizeof(vs_variable_table[i].name) - 1) == 0;
        }}

        void vs_runtime_set_variable(const char* varname, const char* value) {{
            const char* key;
            int slot = -1;
            if (!varname || !value) return;
            key = varname[0] == '$' ? varname + 1 : varname;
            for (int i = 0; i < VS_MAX_VARIABLES; i++) {{
                if (vs_variable_slot_is(i, key)) {{
                    slot = i;
                    break;
                }}
                if (!vs_variable_table[i].used && slot == -1) {{
                    slot = i;
                }}
            }}
            if (slot == -1) {{
                return; // table full
            }}
            snprintf(vs_variable_table[slot].name, sizeof(vs_variable_table[slot].name), "%s", key);
            snprintf(vs_variable_table[slot].value, sizeof(vs_variable_table[slot].value), "%s", value);
            vs_variable_table[slot].used = 1;
        }}

        char* vs_runtime_get_variable_as_string(const char* varname) {{
            static char buffer[{limits.variable_value_size}];
            const char* key;
            if (!varname) varname = "";
            key = varname[0] == '$' ? varname + 1 : varname;
            for (int i = 0; i < VS_MAX_VARIABLES; i++) {{
                if (vs_variable_slot_is(i, key)) {{
                    snprintf(buffer, sizeof(buffer), "%s", vs_variable_table[i].value);
                    return buffer;
                }}
            }}
    """)
    tail = ["    buffer[0] = '\\0';", "    return buffer;", "}"]
    return "\n".join([head, *defaults, *tail])


def _member_access(lib: RuntimeLibrary) -> str:
    sig = "char* vs_runtime_evaluate_member_access(const char* expression)"
    body = [f"{sig} {{", "    static char buffer[256];", '    if (!expression) expression = "";']
    for obj in lib.symbols.objects:
        for prop in obj.properties:
            field = object_field(obj.name, prop.name)
            if prop.kind == ValueKind.STRING:
                fmt, arg = "%s", field
            elif prop.kind == ValueKind.BOOLEAN:
                fmt, arg = "%s", f'{field} ? "true" : "false"'
            else:
                fmt, arg = "%d", field
            body += [
                f"    if (vs_runtime_find_name(expression, {c_string(f'{obj.name}->{prop.name}')}) != NULL) {{",
                f'        snprintf(buffer, sizeof(buffer), "{fmt}", {arg});',
                "        return buffer;",
                "    }",
            ]
    body += [
        '    snprintf(buffer, sizeof(buffer), "[member access: %s]", expression);',
        "    return buffer;",
        "}",
    ]
    return "\n".join(body)


def _method_call(lib: RuntimeLibrary) -> str:
    return _c(f"""
        static const char* vs_method_find(const char* expression, const char* method) {{
            static const char* const prefixes[] = {{"->", "MethodCall("}};
            char pattern[96];
            for (size_t p = 0; p < 2; p++) {{
                const char* hit;
                snprintf(pattern, sizeof(pattern), "%s%s", prefixes[p], method);
                hit = strstr(expression, pattern);
                if (hit != NULL) {{
                    const char* rest = hit + strlen(pattern);
                    if (strchr("(,) ", *rest) != NULL) return rest;
                }}
            }}
            return NULL;
        }}

        static long long vs_method_operand(const char* rest, long long fallback) {{
            char* end;
            long long value;
            if (rest[0] != '(') return fallback;
            value = strtoll(rest + 1, &end, 10);
            return end == rest + 1 ? fallback : value;
        }}

        char* vs_runtime_evaluate_method_call(const char* expression) {{
            static char buffer[256];
            static long long accumulator = {lib.symbols.accumulator};
            const char* rest;
            if (!expression) expression = "";

            if (vs_method_find(expression, "getValue") != NULL) {{
                snprintf(buffer, sizeof(buffer), "%lld", accumulator);
                return buffer;
            }}
            if ((rest = vs_method_find(expression, "add")) != NULL) {{
                accumulator += vs_method_operand(rest, 5);
                snprintf(buffer, sizeof(buffer), "%lld", accumulator);
                return buffer;
            }}
            if ((rest = vs_method_find(expression, "multiply")) != NULL) {{
                accumulator *= vs_method_operand(rest, 2);
                snprintf(buffer, sizeof(buffer), "%lld", accumulator);
                return buffer;
            }}

            snprintf(buffer, sizeof(buffer), "[method result: %s]", expression);
            return buffer;
        }}
    """)


def _function_call(lib: RuntimeLibrary) -> str:
    arrays = lib.symbols.arrays
    sig = "char* vs_runtime_evaluate_function_call(const char* expression)"
    body = [
        f"{sig} {{",
        "    static char buffer[256];",
        '    if (!expression) expression = "";',
        "",
        "    if (strstr(expression, \"function='count'\") != NULL"
        ' && vs_runtime_find_name(expression, "args=1") != NULL) {',
    ]
    for arr in arrays:
        body += [
            f"        if (vs_runtime_find_name(expression, {c_string('$' + arr.name)}) != NULL) {{",
            f'            snprintf(buffer, sizeof(buffer), "%d", vs_builtin_count({c_string(arr.name)}));',
            "            return buffer;",
            "        }",
        ]
    if arrays:
        names = ", ".join(c_string(arr.name) for arr in arrays)
        body += [
            # No array named: the n-th count() in the program counts the n-th array
            "        static int count_calls = 0;",
            f"        static const char* const known[] = {{{names}}};",
            f"        if (count_calls < {len(arrays)}) count_calls++;",
            '        snprintf(buffer, sizeof(buffer), "%d", vs_builtin_count(known[count_calls - 1]));',
        ]
    else:
        body.append('        snprintf(buffer, sizeof(buffer), "%d", 0);')
    body += [
        "        return buffer;",
        "    }",
        "",
        '    snprintf(buffer, sizeof(buffer), "[function result: %s]", expression);',
        "    return buffer;",
        "}",
    ]
    return "\n".join(body)


def install_dynamic_evaluation(lib: RuntimeLibrary) -> None:
    # The setter's body is part of the getter's so both share one table.
    _add(lib, "vs_runtime_set_variable",
         "void vs_runtime_set_variable(const char* varname, const char* value)", "")
    _add(lib, "vs_runtime_get_variable_as_string",
         "char* vs_runtime_get_variable_as_string(const char* varname)",
         _variable_store(lib))
    _add(lib, "vs_runtime_evaluate_member_access",
         "char* vs_runtime_evaluate_member_access(const char* expression)",
         _member_access(lib))
    _add(lib, "vs_runtime_evaluate_method_call",
         "char* vs_runtime_evaluate_method_call(const char* expression)",
         _method_call(lib))
    _add(lib, "vs_runtime_evaluate_function_call",
         "char* vs_runtime_evaluate_function_call(const char* expression)",
         _function_call(lib))


INSTALLERS: tuple[Callable[[RuntimeLibrary], None], ...] = (
    install_type_conversions,
    install_memory_management,
    install_utilities,
    install_io,
    install_strings,
    install_arrays,
    install_objects,
    install_dynamic_evaluation,
)
