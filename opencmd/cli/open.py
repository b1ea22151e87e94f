"""Open Typer app factory."""

import typer

from opencmd.api.open.cmd_resolve import cmd_resolve
from opencmd.api.open.cmd_target import cmd_target
from opencmd.constants import BROWSER_ENV, EDITOR_ENV

from ._handle_stage_result import _handle_stage_result


def open_app() -> typer.Typer:
    """Create and configure the open Typer app."""
    app = typer.Typer(
        name="open",
        help="Resolve open commands (never executes them)",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="resolve")
    def resolve_cmd(
        ctx: typer.Context,
        target: str = typer.Argument(..., help="Path or URI to open"),
        browser: bool = typer.Option(False, "--browser", "-b", help=f"Honor ${BROWSER_ENV}"),
        editor: bool = typer.Option(False, "--editor", "-e", help=f"Honor ${EDITOR_ENV}"),
        env: str | None = typer.Option(None, "--env", help="Honor this override variable"),
        backend: str | None = typer.Option(None, "--backend", help="Force backend: linux, darwin or windows"),
    ) -> None:
        """Show the command that opens TARGET."""
        if sum(bool(flag) for flag in (browser, editor, env)) > 1:
            typer.echo("Error: --browser, --editor and --env are mutually exclusive", err=True)
            raise typer.Exit(1)
        if browser:
            env = BROWSER_ENV
        elif editor:
            env = EDITOR_ENV
        _handle_stage_result(cmd_resolve, ctx)(target, env, backend)

    @app.command(name="target")
    def target_cmd(
        ctx: typer.Context,
        target: str = typer.Argument(..., help="Path or URI to inspect"),
    ) -> None:
        """Show how TARGET is classified and its URI form."""
        _handle_stage_result(cmd_target, ctx)(target)

    return app
