"""Interactive command-line shell."""

from generator.cli.shell import PasswordShell
from generator.cli.token_reader import TokenReader

__all__ = [
    "PasswordShell",
    "TokenReader",
]
