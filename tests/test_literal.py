"""
Tests for reading schemas from the literal grammar.
"""

import pytest

from schemawalk import (
    Array,
    Object,
    Options,
    Parser,
    Record,
    Schema,
    SchemaError,
    Tuple,
    Union,
    ValidationFail,
    ValidationMessage,
    as_schema,
    assert_valid,
    evaluate,
    from_literal,
    nullable,
    optional,
)


def passthrough(value):
    return value, None


class TestFromLiteral:
    def test_primitive(self):
        assert from_literal(("string", [])) == as_schema("string")

    def test_modifiers(self):
        assert from_literal(["number", ["Null", "Opt"]]) == optional(nullable("number"))

    def test_options(self):
        schema = from_literal((("Options", ["A", "B"]), ["Opt"]))
        assert schema == optional(Options(["A", "B"]))

    def test_object(self):
        schema = from_literal(({"one": ("number", []), "two": ("string", ["Null"])}, []))
        assert schema == Schema(Object({"one": "number", "two": nullable("string")}))

    def test_array(self):
        schema = from_literal((("number", ["Null"]), []))
        assert schema == Schema(Array(nullable("number")))

    def test_tuple(self):
        schema = from_literal((("Tuple", [("string", []), ("number", [])]), []))
        assert schema == Schema(Tuple(["string", "number"]))

    def test_union(self):
        schema = from_literal((("Union", ("string", []), ("number", [])), []))
        assert schema == Schema(Union("string", "number"))

    def test_record(self):
        schema = from_literal(
            (("Record", ("Options", ["A", "B"]), ("number", [])), [])
        )
        assert schema == Schema(Record(Options(["A", "B"]), "number"))

    def test_parser(self):
        assert from_literal((passthrough, [])) == Schema(Parser(passthrough))


class TestLiteralMix:
    schema = from_literal(
        (
            {
                "one": ("number", []),
                "nested": (
                    {"two": ("string", []), "arr": (("number", ["Null"]), [])},
                    [],
                ),
                "nestedOptional": ({"three": ("string", [])}, ["Opt"]),
            },
            [],
        )
    )

    def test_allows_valid_object(self):
        data = {"one": 1, "nested": {"two": "two", "arr": [1, 2, None]}}
        assert assert_valid(data, self.schema) == data

    def test_rejects_invalid_object(self):
        result, _, messages = evaluate(
            {"one": 1, "nested": {"two": 2, "arr": [1, "abc", 3]}}, self.schema
        )
        assert result is ValidationFail
        assert messages == [
            ValidationMessage("root.nested.two", '"2" is not a string.'),
            ValidationMessage("root.nested.arr[1]", '"abc" is not a number.'),
        ]


class TestMalformedLiterals:
    @pytest.mark.parametrize(
        "literal",
        [
            ("string",),
            "string",
            ("string", ["Maybe"]),
            ("string", "Opt"),
            ("float", []),
            (("Record", "string"), []),
            (("Union", ("string", [])), []),
            (("Record", ("number", []), ("number", [])), []),
            ((), []),
            (42, []),
        ],
    )
    def test_raises(self, literal):
        with pytest.raises(SchemaError):
            from_literal(literal)
