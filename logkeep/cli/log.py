"""Log Typer app factory."""

import typer

from logkeep.api.log.cmd_files import cmd_files
from logkeep.api.log.cmd_read import cmd_read
from logkeep.api.log.cmd_write import cmd_write
from logkeep.cli._handle_stage_result import _handle_stage_result


def log() -> typer.Typer:
    """Create and configure the log Typer app."""
    app = typer.Typer(
        name="log",
        help="Write, list and read category logs",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Log operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="write")
    def write_cmd(
        category: str = typer.Argument(..., help="Production, Audit, Error or Diagnostics"),
        message: str = typer.Argument(..., help="Entry text"),
        level: str = typer.Option("INFO", "--level", "-l", help="INFO, WARN or ERROR"),
    ) -> None:
        """Write one entry to a category log."""
        _handle_stage_result(cmd_write)(category, message, level=level)

    @app.command(name="files")
    def files_cmd(
        category: str = typer.Argument(..., help="Production, Audit, Error or Diagnostics"),
    ) -> None:
        """List a category's log files, newest first."""
        _handle_stage_result(cmd_files)(category)

    @app.command(name="read")
    def read_cmd(
        path: str = typer.Argument("", help="Log file to read"),
        limit: int = typer.Option(0, "--limit", "-n", help="Show at most this many entries (0 for all)"),
        category: str = typer.Option("", "--category", "-c", help="Read this category's log instead of PATH"),
        date: str = typer.Option("", "--date", help="Day of the category log as YYYYMMDD (default today)"),
    ) -> None:
        """Read a log file or a category's dated log, newest entries first."""
        _handle_stage_result(cmd_read)(path, limit=limit, category=category, date=date)

    return app
