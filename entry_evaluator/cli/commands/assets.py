"""Assets command: show the public paths templates receive."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from entry_evaluator.build import load_stats
from entry_evaluator.cli.decorators import handle_errors
from entry_evaluator.evaluation import map_assets


@handle_errors
def assets_command(
    stats_file: Annotated[Path, typer.Argument(help="Bundler stats JSON file")],
    public_path: Annotated[
        str | None,
        typer.Option("--public-path", help="Override the stats publicPath"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the mapping as JSON")
    ] = False,
) -> None:
    """Print the chunk to public path mapping for a stats file."""
    stats = load_stats(stats_file)
    prefix = public_path if public_path is not None else stats.public_path
    assets = map_assets(stats.assets_by_chunk_name, prefix)

    if as_json:
        typer.echo(json.dumps(assets, indent=2, sort_keys=True))
        return

    table = Table(title="Assets", show_header=True, header_style="bold")
    table.add_column("Chunk", style="cyan")
    table.add_column("Public path", style="green")
    for chunk, path in sorted(assets.items()):
        table.add_row(chunk, path)
    Console().print(table)


def register_commands(app: typer.Typer) -> None:
    """Register assets command with the main app."""
    app.command(name="assets")(assets_command)
