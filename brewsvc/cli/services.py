"""Services Typer app factory."""

import typer

from brewsvc.api.service.cmd_info import cmd_info
from brewsvc.api.service.cmd_list import cmd_list
from brewsvc.cli._handle_stage_result import _handle_stage_result


def services() -> typer.Typer:
    """Create and configure the services Typer app."""
    app = typer.Typer(
        name="services",
        help="Formula service status",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Service operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd() -> None:
        """List services of installed formulae."""
        _handle_stage_result(cmd_list)()

    @app.command(name="info")
    def info_cmd(
        formula: str = typer.Argument(..., help="Formula name"),
    ) -> None:
        """Show the service status of a formula."""
        _handle_stage_result(cmd_info)(formula)

    return app
