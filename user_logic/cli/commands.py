"""
Subcommand handlers for the user-logic CLI.

All handle_* functions are module-level, accept an `args` namespace and
return a process exit code. They are dispatched from main() in
user_logic_cli.py.
"""

from __future__ import annotations

import json

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table

from ..logic import (
    DEFAULT_OPERATIONS,
    LogicError,
    UserLogic,
    collect_lookups,
    eval_logic_map,
    load_context,
    load_definition,
    make_logic_map,
    to_json_compatible,
)
from ..utils.logger import get_logger

console = Console()
logger = get_logger(__name__)


# =============================================================================
# SHARED HELPERS
# =============================================================================

def _print_error(title: str, error: Exception) -> None:
    console.print(Panel(
        f"[red]{error}[/]",
        title=f"[bold red]{title}[/]",
        border_style="red",
    ))


def _print_json(value, json_output: bool) -> None:
    text = json.dumps(to_json_compatible(value), ensure_ascii=False, default=str)
    if json_output:
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(JSON(text))


# =============================================================================
# HANDLERS
# =============================================================================

def handle_eval(args) -> int:
    """Compile a definition, evaluate it against the context file, print the result."""
    try:
        definition = load_definition(args.definition)
        context = load_context(args.context_file)
    except (OSError, ValueError) as e:
        _print_error("Load failed", e)
        return 1

    try:
        if args.logic_map:
            result = eval_logic_map(make_logic_map(definition), context)
        else:
            result = UserLogic(definition).evaluate(context)
    except LogicError as e:
        _print_error("Compile failed", e)
        return 1
    except Exception as e:
        logger.debug("Evaluation of %s failed", args.definition, exc_info=True)
        _print_error("Evaluation failed", e)
        return 1

    _print_json(result, args.json_output)
    return 0


def handle_lookups(args) -> int:
    """Print every context path the definition reads, in definition order."""
    try:
        definition = load_definition(args.definition)
    except (OSError, ValueError) as e:
        _print_error("Load failed", e)
        return 1

    try:
        if args.logic_map:
            lookups = collect_lookups(make_logic_map(definition))
        else:
            lookups = UserLogic(definition).lookups
    except LogicError as e:
        _print_error("Compile failed", e)
        return 1

    paths = [".".join(path) for path in lookups]
    if args.json_output:
        _print_json(paths, json_output=True)
        return 0

    if not paths:
        console.print("[dim]No context lookups[/]")
        return 0
    for path in paths:
        console.print(f"  ${path}", markup=False, highlight=False)
    return 0


def handle_operations(args) -> int:
    """Print a table of the default operations."""
    table = Table(title="Operations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description")

    for spec in DEFAULT_OPERATIONS.specs():
        table.add_row(spec.name, spec.category.name.lower(), spec.description)

    console.print(table)
    return 0
