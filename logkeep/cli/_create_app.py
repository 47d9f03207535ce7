"""Create the main Typer CLI app."""

import typer

from logkeep.cli.backup import backup
from logkeep.cli.config import config
from logkeep.cli.log import log
from logkeep.cli.maintenance import maintenance


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="logkeep: categorized CSV logs with rotation, retention and scheduled backup",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")
    app.add_typer(log(), name="log")
    app.add_typer(maintenance(), name="maintenance")
    app.add_typer(backup(), name="backup")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Commands read the display format from the context chain
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
