"""Create the main Typer CLI app."""

import typer
from pydantic import ValidationError

from opencmd.api.config.OpenerConfig import OpenerConfig
from opencmd.utils.configure_logging import configure_logging

from .config import config
from .open import open_app


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="opencmd CLI - commands for opening paths and URIs in the default handler",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(open_app(), name="open")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            opener_config = OpenerConfig.from_env()
        except ValidationError as e:
            typer.echo(f"Error: invalid configuration in environment: {e}", err=True)
            raise typer.Exit(1) from e
        configure_logging("DEBUG" if verbose else opener_config.log_level)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
