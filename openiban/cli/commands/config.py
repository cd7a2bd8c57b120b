"""Configuration commands."""

import typer
from rich.console import Console
from rich.table import Table

from openiban.i18n.catalog import SUPPORTED_LOCALES
from openiban.utils.config import get_settings

app = typer.Typer()
console = Console()


@app.command("show")
def show_config() -> None:
    """Show current configuration."""
    settings = get_settings()

    table = Table(title="OpenIBAN Configuration", show_header=True)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Locale", settings.locale)
    table.add_row("Supported Locales", ", ".join(SUPPORTED_LOCALES))
    table.add_row("Log Level", settings.log_level)
    table.add_row("JSON Logs", str(settings.json_logs))
    table.add_row("Debug Mode", str(settings.debug))

    console.print(table)
