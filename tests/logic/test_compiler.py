"""
Compiler tests.

Shape-directed dispatch, compile-time errors and determinism.
"""

import pytest

from user_logic.logic import (
    DEFAULT_OPERATIONS,
    CompileError,
    InvalidDefinitionError,
    LogicError,
    MalformedTemplateError,
    UnknownOperationError,
    compile_logic,
    create_logic_node,
)
from user_logic.logic.nodes import (
    ArrayNode,
    BinaryOperationNode,
    LiteralNode,
    StringTemplateNode,
    ValueTemplateNode,
)


class TestDispatch:

    def test_value_template(self):
        node = compile_logic("$foo.bar")

        assert isinstance(node, ValueTemplateNode)
        assert node.path == ("foo", "bar")

    def test_string_template(self):
        node = compile_logic("`Hi ${name}`")

        assert isinstance(node, StringTemplateNode)
        assert node.text == "Hi ${name}"
        assert len(node.placeholders) == 1

    def test_plain_string_is_literal(self):
        assert compile_logic("hello") == LiteralNode("hello")

    def test_list_is_array(self):
        node = compile_logic([1, "$a"])

        assert isinstance(node, ArrayNode)
        assert len(node.items) == 2

    def test_scalars_are_literals(self):
        assert compile_logic(5) == LiteralNode(5)
        assert compile_logic(None) == LiteralNode(None)
        assert compile_logic(False) == LiteralNode(False)

    def test_first_key_names_operation(self):
        node = compile_logic({"eq": [1, 1]})

        assert isinstance(node, BinaryOperationNode)
        assert node.name == "eq"

    def test_compile_is_deterministic(self):
        definition = {"if": [{"gt": ["$n", 3]}, "`big ${n}`", {"concat": ["small ", "$n"]}]}
        first, second = compile_logic(definition), compile_logic(definition)

        for context in ({"n": 1}, {"n": 10}, {}):
            assert first.evaluate(context) == second.evaluate(context)

    def test_definition_not_mutated(self):
        definition = {"literal": {"a": {"$logic": "$x"}}}
        compile_logic(definition)

        assert definition == {"literal": {"a": {"$logic": "$x"}}}


class TestErrors:

    def test_unterminated_template(self):
        with pytest.raises(MalformedTemplateError):
            compile_logic("`unterminated")

    def test_lone_marker(self):
        with pytest.raises(MalformedTemplateError):
            compile_logic("`")

    def test_unknown_operation(self):
        with pytest.raises(UnknownOperationError) as excinfo:
            compile_logic({"bogus": 1})

        assert excinfo.value.operation == "bogus"
        assert "bogus" in str(excinfo.value)
        assert "concat" in str(excinfo.value)

    def test_nested_unknown_operation(self):
        with pytest.raises(UnknownOperationError):
            compile_logic({"and": [True, {"nope": []}]})

    def test_empty_object(self):
        with pytest.raises(InvalidDefinitionError):
            compile_logic({})

    @pytest.mark.parametrize("definition", [
        {"and": [True]},
        {"or": True},
        {"if": [True]},
        {"if": [True, 1, 2, 3]},
        {"map": ["$a"]},
        {"object-property": ["$a"]},
        {"split": ["a"]},
        {"object": [1, 2]},
    ])
    def test_invalid_operands(self, definition):
        with pytest.raises(InvalidDefinitionError):
            compile_logic(definition)

    def test_error_hierarchy(self):
        assert issubclass(UnknownOperationError, CompileError)
        assert issubclass(MalformedTemplateError, CompileError)
        assert issubclass(CompileError, LogicError)

    def test_lookups_before_failure_are_kept(self, lookups):
        with pytest.raises(UnknownOperationError):
            compile_logic({"and": ["$a", {"bogus": "$b"}]}, report_lookup=lookups.append)

        assert lookups == [["a"]]


class TestLookupReporting:

    def test_reports_in_definition_order(self, lookups):
        compile_logic({"object": {"x": "$a.b", "y": ["$c", "`${d.e}`"]}}, report_lookup=lookups.append)

        assert lookups == [["a", "b"], ["c"], ["d", "e"]]

    def test_reports_duplicates(self, lookups):
        compile_logic({"eq": ["$a", "$a"]}, report_lookup=lookups.append)

        assert lookups == [["a"], ["a"]]


class TestTemplateMarker:

    def test_configured_marker(self, monkeypatch):
        monkeypatch.setenv("USER_LOGIC_TEMPLATE_MARKER", "~")

        node = compile_logic("~Hi ${name}~")

        assert node.evaluate({"name": "Ada"}) == "Hi Ada"
        assert compile_logic("`literal`").evaluate({}) == "`literal`"

    def test_explicit_marker(self):
        node = create_logic_node("|x ${a}|", DEFAULT_OPERATIONS, lambda path: None, template_marker="|")

        assert node.evaluate({"a": 1}) == "x 1"


class TestChildParse:

    def test_child_parse_overrides_children(self):
        compiled = []

        def child_parse(definition, child_parse=None):
            compiled.append(definition)
            return LiteralNode("replaced")

        node = create_logic_node(
            {"concat": ["$a", "b"]},
            DEFAULT_OPERATIONS,
            lambda path: None,
            child_parse=child_parse,
        )

        assert compiled == ["$a", "b"]
        assert node.evaluate({}) == "replacedreplaced"
