"""
Command-line interface.
"""

from .argparser import setup_argparse
from .commands import handle_eval, handle_lookups, handle_operations

__all__ = [
    "setup_argparse",
    "handle_eval",
    "handle_lookups",
    "handle_operations",
]
