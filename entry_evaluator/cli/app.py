"""Main CLI application for entry-evaluator."""

import logging
import sys
from importlib.metadata import version as package_version
from pathlib import Path
from typing import Annotated

import typer

from entry_evaluator.cli.decorators.error_handling import print_stack_trace_if_verbose
from entry_evaluator.config.settings import EvaluatorSettings, create_settings
from entry_evaluator.core.logging import setup_logging_from_config


__all__ = ["AppContext", "app", "main", "__version__"]

__version__ = package_version("entry-evaluator")

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: Path | None = None,
        settings: EvaluatorSettings | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            settings: Settings read from the environment
        """
        self.verbose = verbose
        self.settings = settings or create_settings()
        self.log_file = log_file or self.settings.log_file

    @property
    def default_config_file(self) -> Path | None:
        return self.settings.config_file


app = typer.Typer(
    name="entry-evaluator",
    help=f"""entry-evaluator v{__version__}

Evaluate bundle entries in an isolated namespace and render the exported
value through a template into a new build artifact.

Common workflows:
  • Prerender a page:  entry-evaluator render app.py -t page.html.j2 -s stats.json
  • From a config:     entry-evaluator render --config prerender.yaml
  • Inspect assets:    entry-evaluator assets stats.json --public-path /static/""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        Path | None, typer.Option("--log-file", help="Also log to file as JSON")
    ] = None,
    json_logs: Annotated[
        bool, typer.Option("--json-logs", help="Render console logs as JSON")
    ] = False,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """entry-evaluator command line interface."""
    if version:
        print(f"entry-evaluator v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(verbose=verbose, log_file=log_file)
    ctx.obj = app_context

    level: str | None = None
    if debug or verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"

    logging_config = app_context.settings.logging_config(level)
    if json_logs:
        logging_config.format = "json"
    if app_context.log_file:
        logging_config.file_path = app_context.log_file
    setup_logging_from_config(logging_config)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
