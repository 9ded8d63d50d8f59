"""
Operation registry tests.
"""

import operator

import pytest

from user_logic.logic import (
    DEFAULT_OPERATIONS,
    InvalidDefinitionError,
    OpCategory,
    OperationRegistry,
    OperationSpec,
    OpKind,
    UserLogic,
    binary_operation,
    complex_operation,
    unary_operation,
)

BUILTIN_NAMES = {
    "literal", "valueTemplate", "stringTemplate", "if", "typeof", "not",
    "and", "or", "eq", "gt", "gte", "lt", "lte", "array", "object",
    "object-property", "map", "debug", "capitalize", "concat", "split", "join",
}


class TestDefaultOperations:

    def test_builtins_registered(self):
        assert set(DEFAULT_OPERATIONS.names()) == BUILTIN_NAMES

    def test_every_kind_but_extension_registered(self):
        kinds = {spec.kind for spec in DEFAULT_OPERATIONS.specs()}

        assert kinds == set(OpKind) - {OpKind.EXTENSION}

    def test_lookup(self):
        assert callable(DEFAULT_OPERATIONS.lookup("concat"))
        assert DEFAULT_OPERATIONS.lookup("bogus") is None

    def test_mapping_interface(self):
        assert "map" in DEFAULT_OPERATIONS
        assert DEFAULT_OPERATIONS["map"] is DEFAULT_OPERATIONS.lookup("map")
        assert len(DEFAULT_OPERATIONS) == len(BUILTIN_NAMES)

    def test_spec(self):
        spec = DEFAULT_OPERATIONS.spec("gte")

        assert spec.kind is OpKind.GTE
        assert spec.category is OpCategory.COMPARISON
        assert spec.description


class TestMerge:

    def test_merge_adds(self):
        upper = unary_operation(str.upper)
        registry = DEFAULT_OPERATIONS.merged({"upper": upper})

        assert registry.lookup("upper") is upper
        assert registry.spec("upper").kind is OpKind.EXTENSION
        assert "upper" not in DEFAULT_OPERATIONS

    def test_merge_overrides(self):
        replacement = unary_operation(str.lower)
        registry = DEFAULT_OPERATIONS.merged({"concat": replacement})

        assert registry.lookup("concat") is replacement
        assert DEFAULT_OPERATIONS.lookup("concat") is not replacement

    def test_merge_nothing_returns_same(self):
        assert DEFAULT_OPERATIONS.merged(None) is DEFAULT_OPERATIONS
        assert DEFAULT_OPERATIONS.merged({}) is DEFAULT_OPERATIONS

    def test_merge_registry(self):
        extra = OperationRegistry({"upper": unary_operation(str.upper)})
        registry = DEFAULT_OPERATIONS.merged(extra)

        assert "upper" in registry
        assert "concat" in registry

    def test_merge_spec(self):
        spec = OperationSpec(
            name="upper",
            kind=OpKind.EXTENSION,
            category=OpCategory.STRING,
            factory=unary_operation(str.upper),
            description="Upper-case",
        )
        registry = DEFAULT_OPERATIONS.merged({"upper": spec})

        assert registry.spec("upper") is spec

    def test_rejects_non_factory(self):
        with pytest.raises(TypeError):
            OperationRegistry({"bad": 5})


class TestFactoryHelpers:

    def test_unary(self):
        logic = UserLogic({"upper": "$name"}, operations={"upper": unary_operation(str.upper)})

        assert logic.evaluate({"name": "ada"}) == "ADA"

    def test_binary_reduces_left_to_right(self):
        logic = UserLogic({"sub": [10, "$a", 2]}, operations={"sub": binary_operation(operator.sub)})

        assert logic.evaluate({"a": 3}) == 5

    def test_binary_requires_two_operands(self):
        with pytest.raises(InvalidDefinitionError, match="at least 2"):
            UserLogic({"add": [1]}, operations={"add": binary_operation(operator.add)})

    def test_complex(self):
        def clamp(value, low, high):
            return max(low, min(high, value))

        operations = {"clamp": complex_operation(clamp, arity=3)}
        logic = UserLogic({"clamp": ["$v", 0, 10]}, operations=operations)

        assert logic.evaluate({"v": 42}) == 10
        assert logic.lookups == [["v"]]

    def test_complex_arity(self):
        operations = {"pair": complex_operation(lambda a, b: [a, b], name="pair", arity=2)}

        with pytest.raises(InvalidDefinitionError, match="exactly 2"):
            UserLogic({"pair": [1, 2, 3]}, operations=operations)

    def test_complex_variadic(self):
        operations = {"total": complex_operation(lambda *values: sum(values), name="total")}

        assert UserLogic({"total": [1, 2, 3]}, operations=operations).evaluate() == 6
