#!/usr/bin/env python3
"""
user-logic CLI

Compile JSON/YAML logic definitions and evaluate them from the shell.
This is a PURE SHELL - it only:
- Parses arguments
- Configures logging
- Dispatches to user_logic.cli handlers

Usage:
  python user_logic_cli.py eval rules.yaml --context context.json
  python user_logic_cli.py lookups rules.yaml
  python user_logic_cli.py operations
"""

import sys

from user_logic.cli import handle_eval, handle_lookups, handle_operations, setup_argparse
from user_logic.config import get_config
from user_logic.utils.debug import enable_debug
from user_logic.utils.logger import setup_logger

HANDLERS = {
    "eval": handle_eval,
    "lookups": handle_lookups,
    "operations": handle_operations,
}


def _log_level(args) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    if args.quiet:
        return "WARNING"
    return get_config().log.level


def main(argv=None) -> int:
    """Main entry point."""
    args = setup_argparse(argv)

    setup_logger(_log_level(args), get_config().log.log_dir)
    if args.debug:
        enable_debug()

    return HANDLERS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
