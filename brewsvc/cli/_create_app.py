"""Create the main Typer CLI app."""

import logging

import typer

from brewsvc.api.config.BrewsvcConfig import BrewsvcConfig
from brewsvc.cli.services import services
from brewsvc.logging_config import setup_logging


def _configure_logging(verbose: bool) -> None:
    level = "WARNING"
    if verbose:
        level = "DEBUG"
    else:
        try:
            level = BrewsvcConfig.load().log_level
        except ValueError:
            # No usable config yet; commands report the problem themselves
            pass
    setup_logging(level=level, log_file=BrewsvcConfig.get_home_dir() / "logs" / "brewsvc.log")
    logging.getLogger(__name__).debug("Logging configured at %s", level)


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="brewsvc CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(services(), name="services")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", help="Log service queries at DEBUG level"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        _configure_logging(verbose)

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
