"""CLI command modules."""

import typer

from entry_evaluator.cli.commands.assets import (
    register_commands as register_assets_commands,
)
from entry_evaluator.cli.commands.render import (
    register_commands as register_render_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_render_commands(app)
    register_assets_commands(app)


__all__ = ["register_all_commands"]
