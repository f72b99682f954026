"""Render command: evaluate entries and write the templated artifact."""

from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console

from entry_evaluator.adapters import create_template_adapter
from entry_evaluator.build import load_compilation, write_artifact
from entry_evaluator.cli.app import AppContext
from entry_evaluator.cli.decorators import handle_errors
from entry_evaluator.config import RenderConfig, load_render_config
from entry_evaluator.core.errors import ConfigError
from entry_evaluator.core.structlog_logger import get_struct_logger
from entry_evaluator.evaluation import run_build_pass


logger = get_struct_logger(__name__)


def parse_scope_options(values: list[str] | None) -> dict[str, Any]:
    """Parse ``KEY=VALUE`` options; values are read as YAML scalars."""
    scope: dict[str, Any] = {}
    for item in values or []:
        key, sep, raw_value = item.partition("=")
        key = key.strip()
        if not sep or not key.isidentifier():
            raise ConfigError(
                f"Invalid scope binding '{item}', expected NAME=VALUE",
                {"binding": item},
            )
        try:
            scope[key] = yaml.safe_load(raw_value) if raw_value else ""
        except yaml.YAMLError:
            scope[key] = raw_value
    return scope


def build_render_config(
    config_file: Path | None,
    entries: list[str] | None,
    template: Path | None,
    output_dir: Path | None,
    destination: str | None,
    stats_file: Path | None,
    public_path: str | None,
    scope: dict[str, Any],
) -> RenderConfig:
    """Combine the config file (if any) with command line overrides."""
    overrides: dict[str, Any] = {
        key: value
        for key, value in {
            "entries": entries,
            "template": template,
            "output_dir": output_dir,
            "destination": destination,
            "stats_file": stats_file,
            "public_path": public_path,
        }.items()
        if value is not None and value != []
    }

    data: dict[str, Any] = {}
    if config_file is not None:
        data = load_render_config(config_file).model_dump()
    data.update(overrides)
    data["scope"] = {**data.get("scope", {}), **scope}

    try:
        return RenderConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid render options: {e}") from e


@handle_errors
def render_command(
    ctx: typer.Context,
    entries: Annotated[
        list[str] | None,
        typer.Argument(help="Entry files or asset/chunk names, evaluated in order"),
    ] = None,
    template: Annotated[
        Path | None,
        typer.Option("--template", "-t", help="Jinja2 template file"),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Bundler output directory"),
    ] = None,
    destination: Annotated[
        str | None,
        typer.Option("--destination", "-d", help="Artifact name in the output dir"),
    ] = None,
    stats_file: Annotated[
        Path | None,
        typer.Option("--stats", "-s", help="Bundler stats JSON file"),
    ] = None,
    public_path: Annotated[
        str | None,
        typer.Option("--public-path", help="Override the stats publicPath"),
    ] = None,
    scope: Annotated[
        list[str] | None,
        typer.Option("--scope", help="Base binding NAME=VALUE (repeatable)"),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="YAML render configuration"),
    ] = None,
) -> None:
    """Evaluate entries and write the rendered artifact."""
    app_ctx: AppContext | None = ctx.obj
    if config_file is None and app_ctx is not None:
        config_file = app_ctx.default_config_file

    config = build_render_config(
        config_file,
        entries,
        template,
        output_dir,
        destination,
        stats_file,
        public_path,
        parse_scope_options(scope),
    )

    compilation = load_compilation(
        config.output_dir, config.stats_file, config.public_path
    )
    template_fn = create_template_adapter().create_template_function(config.template)

    result = run_build_pass(
        config.entries, config.destination, config.scope, template_fn, compilation
    )
    artifact = result.unwrap()
    target = write_artifact(compilation, config.destination, config.output_dir)

    console = Console()
    console.print(
        f"[green]✓[/green] Wrote [bold]{target}[/bold] ({artifact.size()} bytes)"
    )


def register_commands(app: typer.Typer) -> None:
    """Register render command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="render")(render_command)
