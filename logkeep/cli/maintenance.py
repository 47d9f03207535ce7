"""Maintenance Typer app factory."""

import typer

from logkeep.api.maintenance.cmd_run import cmd_run
from logkeep.api.maintenance.cmd_sweep import cmd_sweep
from logkeep.cli._handle_stage_result import _handle_stage_result


def maintenance() -> typer.Typer:
    """Create and configure the maintenance Typer app."""
    app = typer.Typer(
        name="maintenance",
        help="Rotation, retention and scheduled backups",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Maintenance operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd(
        category: str = typer.Argument(..., help="Production, Audit, Error or Diagnostics"),
    ) -> None:
        """Apply rotation, retention and a due backup to one category."""
        _handle_stage_result(cmd_run)(category)

    @app.command(name="sweep")
    def sweep_cmd() -> None:
        """Purge expired files and run due backups for every enabled category."""
        _handle_stage_result(cmd_sweep)()

    return app
