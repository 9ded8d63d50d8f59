"""
Logic maps: named and conditional sub-expressions merged into one result.

Definition forms:

    # Object form: one expression per result key
    {"foo": {"concat": ["$test", "b"]}, "bar": "$other"}

    # Pass-through: a single expression stands for the whole map
    "$settings"
    {"$logic": {"object": {...}}}

    # Array form: entries merged in order, each optionally guarded by `if`
    [
        {"spam": "foo"},
        {"if": {"eq": ["$mode", "full"]}, "ham": "bar"},
    ]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .constants import CONDITION_KEY, LOGIC_KEY
from .errors import InvalidDefinitionError
from .types import Context, Value
from .user_logic import UserLogic

UserLogicFactory = Callable[[Any], UserLogic]


@dataclass(frozen=True)
class LogicMapEntry:
    """
    One element of an array logic map.

    Attributes:
        content: Nested logic map evaluated when the entry applies
        condition: Guard; None means the entry always applies
    """
    content: "LogicMap"
    condition: Optional[UserLogic] = None


LogicMap = Union[dict[str, UserLogic], list[LogicMapEntry]]


def make_logic_map(definition_map: Any, user_logic_class: UserLogicFactory = UserLogic) -> LogicMap:
    """
    Compile a logic map definition.

    Args:
        definition_map: Object, pass-through, or array form
        user_logic_class: Builds one compiled expression from a definition

    Returns:
        dict of key -> UserLogic (a pass-through is keyed "$logic"),
        or list of LogicMapEntry for the array form

    Raises:
        InvalidDefinitionError: If definition_map has none of the forms above
    """
    if definition_map is None:
        return {}
    if isinstance(definition_map, str):
        return {LOGIC_KEY: user_logic_class(definition_map)}
    if isinstance(definition_map, (list, tuple)):
        return _make_array_logic_map(definition_map, user_logic_class)
    if not isinstance(definition_map, Mapping):
        raise InvalidDefinitionError(
            definition_map,
            "Logic maps must be an object, an array, or a string expression",
        )
    if LOGIC_KEY in definition_map:
        return {LOGIC_KEY: user_logic_class(definition_map[LOGIC_KEY])}

    return {key: user_logic_class(value) for key, value in definition_map.items()}


def _make_array_logic_map(definition_map, user_logic_class: UserLogicFactory) -> list[LogicMapEntry]:
    entries = []
    for element in definition_map:
        condition = None
        content = element
        if isinstance(element, Mapping) and CONDITION_KEY in element:
            condition = user_logic_class(element[CONDITION_KEY])
            content = {key: value for key, value in element.items() if key != CONDITION_KEY}
        entries.append(LogicMapEntry(
            content=make_logic_map(content, user_logic_class),
            condition=condition,
        ))
    return entries


def eval_logic_map(logic_map: LogicMap, context: Optional[Context] = None) -> Value:
    """
    Evaluate a compiled logic map.

    Args:
        logic_map: Result of make_logic_map
        context: Runtime values

    Returns:
        The pass-through value, or a dict built from the entries

    Raises:
        TypeError: If an array entry's content does not evaluate to a mapping
    """
    context = context or {}
    if isinstance(logic_map, Mapping) and LOGIC_KEY in logic_map:
        return logic_map[LOGIC_KEY].evaluate(context)

    if isinstance(logic_map, list):
        return _eval_array_logic_map(logic_map, context)

    return {key: logic.evaluate(context) for key, logic in logic_map.items()}


def _eval_array_logic_map(logic_map: list[LogicMapEntry], context: Context) -> dict:
    result = {}
    for entry in logic_map:
        if entry.condition is not None and not entry.condition.evaluate(context):
            continue

        value = eval_logic_map(entry.content, context)
        if not isinstance(value, Mapping):
            raise TypeError(
                f"Logic map entries must evaluate to objects to be merged, "
                f"got {type(value).__name__} ({value!r})"
            )
        result.update(value)
    return result


def collect_lookups(logic_map: LogicMap) -> list[list[str]]:
    """
    All context paths reported while building a logic map.

    Conditions come before their content, entries in order.
    """
    if isinstance(logic_map, list):
        lookups = []
        for entry in logic_map:
            if entry.condition is not None:
                lookups.extend(entry.condition.lookups)
            lookups.extend(collect_lookups(entry.content))
        return lookups

    lookups = []
    for logic in logic_map.values():
        lookups.extend(getattr(logic, "lookups", []))
    return lookups
