"""CLI commands for ignorekit."""

from ignorekit.cli.commands.check import check_cmd
from ignorekit.cli.commands.patterns import patterns_cmd
from ignorekit.cli.commands.config import config_cmd

__all__ = ['check_cmd', 'patterns_cmd', 'config_cmd']
