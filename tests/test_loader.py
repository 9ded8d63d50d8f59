"""
Definition and context loading tests.
"""

import pytest

from user_logic.logic import load_context, load_definition


class TestLoadDefinition:

    def test_json(self, tmp_path):
        path = tmp_path / "rule.json"
        path.write_text('{"eq": ["$a", 1]}', encoding="utf-8")

        assert load_definition(path) == {"eq": ["$a", 1]}

    def test_yaml(self, tmp_path):
        path = tmp_path / "rule.yaml"
        path.write_text("concat:\n  - $first\n  - ' '\n  - $last\n", encoding="utf-8")

        assert load_definition(str(path)) == {"concat": ["$first", " ", "$last"]}

    def test_yaml_keeps_template_strings(self, tmp_path):
        path = tmp_path / "rule.yml"
        path.write_text('greeting: "`Hello ${name}`"\n', encoding="utf-8")

        assert load_definition(path) == {"greeting": "`Hello ${name}`"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_definition(tmp_path / "missing.json")

    def test_bad_json(self, tmp_path):
        path = tmp_path / "rule.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse"):
            load_definition(path)

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "rule.yaml"
        path.write_text("a: [1, 2\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to parse"):
            load_definition(path)


class TestLoadContext:

    def test_none_is_empty(self):
        assert load_context(None) == {}

    def test_empty_file_is_empty(self, tmp_path):
        path = tmp_path / "context.yaml"
        path.write_text("", encoding="utf-8")

        assert load_context(path) == {}

    def test_object(self, tmp_path):
        path = tmp_path / "context.json"
        path.write_text('{"user": {"name": "Ada"}}', encoding="utf-8")

        assert load_context(path) == {"user": {"name": "Ada"}}

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "context.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain an object"):
            load_context(path)
