#!/usr/bin/env python3
"""
IBAN Demo for OpenIBAN

This script walks through parsing, formatting, custom rules and localized
error messages.
"""

from rich.console import Console
from rich.table import Table

from openiban import (
    AcceptCountryRule,
    CustomErrorResult,
    Iban,
    IbanFormat,
    IbanFormatError,
    IbanParser,
    IbanValidator,
    ValidatorOptions,
)

console = Console()

SAMPLES = [
    "NL91 ABNA 0417 1643 00",
    "de89370400440532013000",
    "NL91ABNA0417164301",
    "NL91ABNA041716430",
    "XX91ABNA0417164300",
]


def demo_parsing():
    """Demonstrate parse() and try_parse()."""
    console.print("\n[bold cyan]1. Parsing[/bold cyan]\n")

    table = Table(title="Iban.try_parse()")
    table.add_column("Input", style="cyan")
    table.add_column("Flat")
    table.add_column("Partitioned")

    for sample in SAMPLES:
        iban = Iban.try_parse(sample)
        if iban is None:
            table.add_row(sample, "[red]invalid[/red]", "")
        else:
            table.add_row(sample, f"{iban}", iban.to_string(IbanFormat.PARTITIONED))

    console.print(table)


def demo_localized_errors():
    """Demonstrate error messages in every supported language."""
    console.print("\n[bold cyan]2. Localized Errors[/bold cyan]\n")

    for locale in ["en", "de", "it", "fr", "es"]:
        try:
            Iban.parse("NL91ABNA041716430", locale=locale)
        except IbanFormatError as e:
            console.print(f"[{locale.upper()}] {e}")


def no_test_bank(context):
    if context.value[4:8] == "TEST":
        return CustomErrorResult("Test bank accounts are not allowed.")
    return None


def demo_custom_rules():
    """Demonstrate custom rules and country restrictions."""
    console.print("\n[bold cyan]3. Custom Rules[/bold cyan]\n")

    parser = IbanParser(
        IbanValidator(ValidatorOptions(rules=[AcceptCountryRule(["NL", "BE"]), no_test_bank]))
    )

    for sample in ["NL91ABNA0417164300", "DE89370400440532013000"]:
        try:
            console.print(f"[green]✓[/green] {parser.parse(sample).to_string(IbanFormat.PARTITIONED)}")
        except IbanFormatError as e:
            console.print(f"[red]✗[/red] {sample}: {e}")


def main():
    """Run all demos."""
    console.print("[bold]OpenIBAN Demo[/bold]")
    demo_parsing()
    demo_localized_errors()
    demo_custom_rules()


if __name__ == "__main__":
    main()
