"""
Path resolution against contexts.

Resolvers walk a root value through a sequence of path segments:
- Mappings by key
- Sequences by integer index (digit strings accepted)
- Other objects by public attribute

A segment that cannot be followed resolves to UNDEFINED rather than
raising, so missing context data flows through expressions silently.

The inherited resolver adds a fallback chain: when a key is absent from a
mapping, the lookup continues in the mapping stored under the parent key.

Usage:
    resolver = InheritedPathResolver(parent_key="__parent__")
    scope = {"name": "child", "__parent__": {"locale": "en"}}
    resolver.get(scope, ["locale"])  # "en"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional

from ..config import get_config
from .constants import PATH_SEPARATOR
from .types import UNDEFINED, is_sequence


def split_path(key: Any) -> list:
    """
    Normalize a property key into path segments.

    Args:
        key: Dot-separated string, integer index, or list of segments

    Returns:
        List of segments

    Raises:
        TypeError: If key cannot be used as a path
    """
    if isinstance(key, str):
        return key.split(PATH_SEPARATOR)
    if isinstance(key, bool):
        raise TypeError(f"Invalid property key: {key!r}")
    if isinstance(key, int):
        return [key]
    if isinstance(key, (list, tuple)):
        return list(key)
    raise TypeError(
        f"Invalid property key: {key!r}. "
        f"Expected dot-separated string, integer index, or list of segments."
    )


def _as_index(segment: Any) -> Optional[int]:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment
    if isinstance(segment, str) and segment.isdigit():
        return int(segment)
    return None


class PathResolver:
    """
    Walks values through path segments without fallback.

    Stateless and thread-safe.
    """

    def get(self, root: Any, path: Iterable[Any]) -> Any:
        """
        Resolve a path from root.

        Args:
            root: Value to start from
            path: Segments to follow

        Returns:
            The resolved value, or UNDEFINED if any segment is missing
        """
        current = root
        for segment in path:
            current = self.step(current, segment)
            if current is UNDEFINED:
                return UNDEFINED
        return current

    def step(self, value: Any, segment: Any) -> Any:
        """Follow a single segment."""
        if isinstance(value, Mapping):
            if segment in value:
                return value[segment]
            return UNDEFINED
        if is_sequence(value):
            index = _as_index(segment)
            if index is None or index < 0 or index >= len(value):
                return UNDEFINED
            return value[index]
        if value is None or value is UNDEFINED or isinstance(value, str):
            return UNDEFINED
        if isinstance(segment, str) and segment and not segment.startswith("_"):
            return getattr(value, segment, UNDEFINED)
        return UNDEFINED


class InheritedPathResolver(PathResolver):
    """
    Path resolver that falls back to ancestor scopes.

    Attributes:
        parent_key: Mapping key holding the ancestor scope
    """

    def __init__(self, parent_key: str):
        self.parent_key = parent_key

    def step(self, value: Any, segment: Any) -> Any:
        seen: set[int] = set()
        while isinstance(value, Mapping):
            if segment in value:
                return value[segment]
            # Cyclic parent chains stop at the first repeat
            seen.add(id(value))
            value = value.get(self.parent_key, UNDEFINED)
            if id(value) in seen:
                return UNDEFINED
            if not isinstance(value, Mapping):
                return UNDEFINED
        return super().step(value, segment)

    def __repr__(self) -> str:
        return f"InheritedPathResolver(parent_key={self.parent_key!r})"


PLAIN_RESOLVER = PathResolver()


def default_resolver() -> InheritedPathResolver:
    """Inherited resolver using the configured parent key."""
    return InheritedPathResolver(get_config().logic.parent_key)
