"""Supported countries command."""

import typer
from rich.console import Console
from rich.table import Table

from openiban.registry.registry import get_default_registry

console = Console()


def list_countries(
    sepa: bool = typer.Option(False, "--sepa", help="Only list SEPA countries"),
) -> None:
    """🌍 List supported countries with their IBAN structure."""
    countries = get_default_registry().countries()
    if sepa:
        countries = [country for country in countries if country.sepa]

    table = Table(title=f"🌍 Supported Countries ({len(countries)})", show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country")
    table.add_column("Length", justify="right")
    table.add_column("BBAN", no_wrap=True)
    table.add_column("SEPA", justify="center")
    table.add_column("Example", style="dim", no_wrap=True)

    for country in countries:
        table.add_row(
            country.code,
            country.name,
            str(country.length),
            str(country.bban_pattern),
            "✓" if country.sepa else "",
            country.example or "",
        )

    console.print(table)
