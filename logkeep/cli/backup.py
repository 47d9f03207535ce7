"""Backup Typer app factory."""

import typer

from logkeep.api.backup.cmd_due import cmd_due
from logkeep.api.backup.cmd_restore import cmd_restore
from logkeep.api.backup.cmd_run import cmd_run
from logkeep.cli._handle_stage_result import _handle_stage_result


def backup() -> typer.Typer:
    """Create and configure the backup Typer app."""
    app = typer.Typer(
        name="backup",
        help="Backup and restore category folders",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Backup operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd(
        category: str = typer.Argument(..., help="Production, Audit, Error or Diagnostics"),
    ) -> None:
        """Back up a category now, regardless of schedule."""
        _handle_stage_result(cmd_run)(category)

    @app.command(name="restore")
    def restore_cmd(
        category: str = typer.Argument(..., help="Production, Audit, Error or Diagnostics"),
    ) -> None:
        """Copy a category's backup back over its folders."""
        _handle_stage_result(cmd_restore)(category)

    @app.command(name="due")
    def due_cmd(
        category: str = typer.Argument(..., help="Production, Audit, Error or Diagnostics"),
        at: str = typer.Option("", "--at", help="ISO date-time to check (default: now)"),
    ) -> None:
        """Check whether a category's scheduled backup fires at a given minute."""
        _handle_stage_result(cmd_due)(category, at=at)

    return app
