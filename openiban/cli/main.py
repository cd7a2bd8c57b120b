"""Main CLI entry point for OpenIBAN."""

from typing import Optional

import typer
from pydantic import ValidationError as SettingsValidationError
from rich.console import Console

from openiban import __version__
from openiban.exceptions import ConfigurationError
from openiban.utils.config import LOG_LEVELS, get_settings
from openiban.utils.logging import configure_logging

from .commands import config, countries, iban

app = typer.Typer(
    name="openiban",
    help="🏦 Validate, parse and format International Bank Account Numbers",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"OpenIBAN version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
    json_logs: Optional[bool] = typer.Option(
        None, "--json-logs/--no-json-logs", help="Emit logs as JSON lines"
    ),
) -> None:
    """
    OpenIBAN - IBAN validation made simple.

    Checks country-specific length and structure plus the MOD-97 checksum.
    """
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Expected one of: {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )

    try:
        settings = get_settings()
    except SettingsValidationError as e:
        error = ConfigurationError(
            f"Invalid configuration: {e.errors()[0]['msg']}",
            setting=".".join(str(part) for part in e.errors()[0]["loc"]),
            original_error=e,
        )
        console.print(f"[red]✗ {error}[/red]")
        raise typer.Exit(2) from e

    configure_logging(
        log_level=log_level or settings.log_level,
        json_logs=settings.json_logs if json_logs is None else json_logs,
        dev_mode=settings.debug,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


app.command("validate")(iban.validate)
app.command("format")(iban.format_iban)
app.command("countries")(countries.list_countries)
app.add_typer(config.app, name="config", help="⚙️  Show configuration")


if __name__ == "__main__":
    app()
