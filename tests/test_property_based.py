"""Property-based tests for the walk over generated schemas."""

from hypothesis import given
from hypothesis import strategies as st

from schemawalk import (
    Array,
    Object,
    Options,
    Primitive,
    Record,
    Schema,
    Tuple,
    ValidationFail,
    evaluate,
    leaf_errors,
    nullable,
    optional,
)

property_names = st.text(alphabet="abcde", min_size=1, max_size=3)

leaf_schemas = st.one_of(
    st.sampled_from(["string", "number", "boolean", "unknown"]).map(Primitive),
    st.lists(st.sampled_from(["A", "B", 1, 2]), min_size=1, max_size=3).map(Options),
)


def _with_modifiers(node):
    return st.sampled_from(
        [
            Schema(node),
            nullable(node),
            optional(node),
            optional(nullable(node)),
        ]
    )


def _extend(children):
    return st.one_of(
        children.map(Array),
        st.lists(children, max_size=3).map(Tuple),
        st.dictionaries(property_names, children, max_size=3).map(Object),
        children.map(lambda value: Record("string", value)),
        children.map(lambda value: Record(Options(["A", "B"]), value)),
    ).flatmap(_with_modifiers)


# Union-free schemas; unions log every member so they are checked separately
schemas = st.recursive(leaf_schemas.flatmap(_with_modifiers), _extend, max_leaves=8)

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False)
    | st.text(max_size=5),
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(property_names, children, max_size=3),
    max_leaves=10,
)


def values_for(schema: Schema):
    """Strategy producing values that conform to a schema."""
    inner = _node_values(schema)
    if schema.is_nullable:
        return st.one_of(st.none(), inner)
    return inner


def _node_values(schema: Schema):
    node = schema.node
    if isinstance(node, Primitive):
        return {
            "string": st.text(max_size=5),
            "number": st.integers() | st.floats(allow_nan=False),
            "boolean": st.booleans(),
            "unknown": st.integers() | st.text(max_size=5),
        }[node.name]
    if isinstance(node, Options):
        return st.sampled_from(node.values)
    if isinstance(node, Array):
        return st.lists(values_for(node.element), max_size=3)
    if isinstance(node, Tuple):
        return st.tuples(*(values_for(item) for item in node.items)).map(list)
    if isinstance(node, Object):
        props = node.properties.items()
        required = {k: values_for(p) for k, p in props if not p.is_optional}
        missing_ok = {k: values_for(p) for k, p in props if p.is_optional}
        return st.fixed_dictionaries(required, optional=missing_ok)
    if isinstance(node, Record) and isinstance(node.key, Options):
        entries = {option: values_for(node.value) for option in node.key.values}
        if node.value.is_optional:
            return st.fixed_dictionaries({}, optional=entries)
        return st.fixed_dictionaries(entries)
    return st.dictionaries(st.text(max_size=3), values_for(node.value), max_size=3)


conforming = schemas.flatmap(lambda s: st.tuples(st.just(s), values_for(s)))


class TestPropertyBasedWalk:
    @given(conforming)
    def test_conforming_values_pass(self, schema_and_value):
        schema, value = schema_and_value
        result, validation, messages = evaluate(value, schema)

        assert result is not ValidationFail
        assert messages == []
        assert leaf_errors(validation) == []

    @given(conforming)
    def test_success_is_idempotent(self, schema_and_value):
        schema, value = schema_and_value
        result = evaluate(value, schema).result

        assert evaluate(result, schema).result == result

    @given(schemas, json_values)
    def test_messages_match_validation_leaves(self, schema, value):
        result, validation, messages = evaluate(value, schema)

        assert leaf_errors(validation) == [m.err for m in messages]
        assert (result is ValidationFail) == bool(messages)
