"""Config Typer app factory."""

import typer

from logkeep.api.config.cmd_init import cmd_init
from logkeep.api.config.cmd_show import cmd_show
from logkeep.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
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

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the configuration file and the categories it loads."""
        _handle_stage_result(cmd_show)()

    @app.command(name="init")
    def init_cmd(
        base_dir: str = typer.Option("", "--base-dir", help="Root for Logs/ and LogsBackup/ (default: logkeep home)"),
        force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration"),
    ) -> None:
        """Write a configuration with the four stock categories."""
        _handle_stage_result(cmd_init)(base_dir=base_dir, force=force)

    return app
