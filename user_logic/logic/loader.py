"""
Definition and context file loading.

JSON files are read with the standard library; YAML files with PyYAML's
safe loader. Files with any other extension are parsed as YAML, which
also accepts JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

JSON_SUFFIXES = (".json",)


def load_definition(path: Union[str, Path]) -> Any:
    """
    Load a definition (or context) document from disk.

    Args:
        path: File path

    Returns:
        Parsed document

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"Definition file not found: {file_path}")

    text = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() in JSON_SUFFIXES:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to parse {file_path}: {e}") from e


def load_context(path: Union[str, Path, None]) -> dict:
    """Load a context document; None yields an empty context."""
    if path is None:
        return {}
    context = load_definition(path)
    if context is None:
        return {}
    if not isinstance(context, dict):
        raise ValueError(
            f"Context file {path} must contain an object, got {type(context).__name__}"
        )
    return context
