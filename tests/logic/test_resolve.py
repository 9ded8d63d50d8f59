"""
Path resolver tests.
"""

from collections import ChainMap
from dataclasses import dataclass

import pytest

from user_logic.logic import UNDEFINED, InheritedPathResolver, PathResolver, UserLogic, split_path


@dataclass
class Account:
    owner: str
    _secret: str = "hidden"


class TestPathResolver:

    def test_nested_mappings(self):
        assert PathResolver().get({"a": {"b": {"c": 1}}}, ["a", "b", "c"]) == 1

    def test_missing(self):
        resolver = PathResolver()

        assert resolver.get({"a": {}}, ["a", "b"]) is UNDEFINED
        assert resolver.get({"a": None}, ["a", "b"]) is UNDEFINED
        assert resolver.get({"a": "text"}, ["a", "b"]) is UNDEFINED

    def test_none_value_is_not_missing(self):
        assert PathResolver().get({"a": None}, ["a"]) is None

    def test_sequences(self):
        resolver = PathResolver()

        assert resolver.get({"a": [10, 20]}, ["a", "1"]) == 20
        assert resolver.get({"a": [10, 20]}, ["a", 0]) == 10
        assert resolver.get({"a": [10, 20]}, ["a", "5"]) is UNDEFINED
        assert resolver.get({"a": [10, 20]}, ["a", "x"]) is UNDEFINED

    def test_attributes(self):
        resolver = PathResolver()
        context = {"account": Account(owner="ada")}

        assert resolver.get(context, ["account", "owner"]) == "ada"
        assert resolver.get(context, ["account", "_secret"]) is UNDEFINED
        assert resolver.get(context, ["account", "__class__"]) is UNDEFINED

    def test_empty_path_returns_root(self):
        assert PathResolver().get({"a": 1}, []) == {"a": 1}

    def test_chain_map(self):
        context = ChainMap({"a": 1}, {"b": 2})

        assert PathResolver().get(context, ["b"]) == 2


class TestInheritedPathResolver:

    def test_falls_back_to_parent(self):
        resolver = InheritedPathResolver("__parent__")
        scope = {"name": "child", "__parent__": {"locale": "en", "name": "parent"}}

        assert resolver.get(scope, ["locale"]) == "en"
        assert resolver.get(scope, ["name"]) == "child"

    def test_grandparent(self):
        resolver = InheritedPathResolver("up")
        scope = {"up": {"up": {"deep": {"value": 3}}}}

        assert resolver.get(scope, ["deep", "value"]) == 3

    def test_inherits_at_every_level(self):
        resolver = InheritedPathResolver("up")
        scope = {"user": {"up": {"theme": "dark"}}}

        assert resolver.get(scope, ["user", "theme"]) == "dark"

    def test_missing_everywhere(self):
        resolver = InheritedPathResolver("up")

        assert resolver.get({"up": {"a": 1}}, ["b"]) is UNDEFINED

    def test_cyclic_parents(self):
        resolver = InheritedPathResolver("up")
        scope = {"a": 1}
        scope["up"] = scope

        assert resolver.get(scope, ["missing"]) is UNDEFINED

    def test_value_templates_inherit(self):
        context = {"__parent__": {"site": {"name": "example"}}}

        assert UserLogic("$site.name").evaluate(context) == "example"

    def test_configured_parent_key(self, monkeypatch):
        monkeypatch.setenv("USER_LOGIC_PARENT_KEY", "base")

        logic = UserLogic("`${greeting}`")

        assert logic.evaluate({"base": {"greeting": "hello"}}) == "hello"

    def test_object_property_does_not_inherit(self):
        definition = {"object-property": ["$scope", "locale"]}
        context = {"scope": {"__parent__": {"locale": "en"}}}

        assert UserLogic(definition).evaluate(context) is UNDEFINED


class TestSplitPath:

    def test_string(self):
        assert split_path("a.b") == ["a", "b"]

    def test_int(self):
        assert split_path(3) == [3]

    def test_list(self):
        assert split_path(("a", 1)) == ["a", 1]

    @pytest.mark.parametrize("key", [None, True, 1.5, {"a": 1}])
    def test_invalid(self, key):
        with pytest.raises(TypeError):
            split_path(key)
