"""CLI subcommand implementations."""

from .build import cmd_build
from .inspect import cmd_inspect

__all__ = ["cmd_build", "cmd_inspect"]
