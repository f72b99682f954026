"""Command line interface for entry-evaluator."""

from entry_evaluator.cli.app import app, main
from entry_evaluator.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
