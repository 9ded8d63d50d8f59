"""
Argument parser setup for the user-logic CLI.

Defines all subcommands and their arguments:
- eval: Compile and evaluate a definition (or logic map) against a context
- lookups: List the context paths a definition reads
- operations: List registered operations
"""

import argparse
from typing import Optional, Sequence


def setup_argparse(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for user_logic_cli.

    Supports:
      eval DEFINITION [--context FILE] [--map]   Evaluate a definition
      lookups DEFINITION [--map]                 Show context dependencies
      operations                                 List available operations
    """
    parser = argparse.ArgumentParser(
        description="user-logic - compile and evaluate JSON-defined logic",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python user_logic_cli.py eval rules/discount.yaml --context order.json
  python user_logic_cli.py eval fields.json --map --context user.json
  python user_logic_cli.py lookups rules/discount.yaml
  python user_logic_cli.py operations
        """
    )

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: WARNING only, minimal output"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO logging"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: DEBUG logging, `debug` operation records at INFO"
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    _setup_eval_subcommand(subparsers)
    _setup_lookups_subcommand(subparsers)
    _setup_operations_subcommand(subparsers)

    return parser.parse_args(argv)


def _setup_eval_subcommand(subparsers) -> None:
    eval_parser = subparsers.add_parser("eval", help="Evaluate a definition against a context")
    eval_parser.add_argument("definition", help="Definition file (.json, .yaml, .yml)")
    eval_parser.add_argument("--context", dest="context_file", help="Context file (.json, .yaml, .yml)")
    eval_parser.add_argument("--map", action="store_true", dest="logic_map", help="Treat the definition as a logic map")
    eval_parser.add_argument("--json", action="store_true", dest="json_output", help="Output plain JSON")


def _setup_lookups_subcommand(subparsers) -> None:
    lookups_parser = subparsers.add_parser("lookups", help="List context paths a definition reads")
    lookups_parser.add_argument("definition", help="Definition file (.json, .yaml, .yml)")
    lookups_parser.add_argument("--map", action="store_true", dest="logic_map", help="Treat the definition as a logic map")
    lookups_parser.add_argument("--json", action="store_true", dest="json_output", help="Output plain JSON")


def _setup_operations_subcommand(subparsers) -> None:
    subparsers.add_parser("operations", help="List registered operations")
