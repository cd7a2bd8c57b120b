"""IBAN validation and formatting commands."""

import json
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from openiban.exceptions import IbanFormatError
from openiban.iban import IbanFormat
from openiban.parser import IbanParser
from openiban.utils.config import get_settings
from openiban.utils.logging import get_logger
from openiban.validation.validator import IbanValidator

console = Console()
logger = get_logger(__name__)


class FormatStyle(str, Enum):
    """Output style accepted on the command line."""

    FLAT = "flat"
    PARTITIONED = "partitioned"

    @property
    def iban_format(self) -> IbanFormat:
        return IbanFormat.FLAT if self is FormatStyle.FLAT else IbanFormat.PARTITIONED


def _resolve_locale(locale: Optional[str]) -> str:
    return locale or get_settings().locale


def validate(
    values: list[str] = typer.Argument(..., help="IBANs to validate (quote partitioned values)"),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Message language (en, de, it, fr, es)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """✅ Validate one or more IBANs.

    Exits with code 1 when at least one value is invalid.

    Examples:
        openiban validate NL91ABNA0417164300

        openiban validate "DE89 3704 0044 0532 0130 00" GB29NWBK60161331926819 --locale de
    """
    validator = IbanValidator()
    message_locale = _resolve_locale(locale)
    results = [validator.validate(value) for value in values]

    if json_output:
        typer.echo(json.dumps([result.to_dict(message_locale) for result in results], indent=2))
    else:
        table = Table(title="🏦 IBAN Validation", show_header=True)
        table.add_column("IBAN", style="cyan", no_wrap=True)
        table.add_column("Status", justify="center")
        table.add_column("Details")

        for result in results:
            if result.error is None:
                table.add_row(result.attempted_value, "[green]✓ valid[/green]", "")
            else:
                table.add_row(
                    result.attempted_value,
                    "[red]✗ invalid[/red]",
                    result.error.render(message_locale),
                )
        console.print(table)

    invalid = sum(1 for result in results if not result.is_valid)
    logger.info("cli_validate_completed", total=len(results), invalid=invalid)
    if invalid:
        raise typer.Exit(1)


def format_iban(
    value: str = typer.Argument(..., help="IBAN to format"),
    style: FormatStyle = typer.Option(
        FormatStyle.PARTITIONED, "--style", "-s", help="Output style", case_sensitive=False
    ),
    locale: Optional[str] = typer.Option(
        None, "--locale", "-l", help="Message language (en, de, it, fr, es)"
    ),
) -> None:
    """🖨️  Print an IBAN in flat or partitioned form.

    Examples:
        openiban format nl91abna0417164300

        openiban format "NL91 ABNA 0417 1643 00" --style flat
    """
    parser = IbanParser()
    try:
        iban = parser.parse(value, locale=_resolve_locale(locale))
    except IbanFormatError as e:
        console.print(f"[red]✗ {e.message}[/red]")
        raise typer.Exit(1) from e

    typer.echo(iban.to_string(style.iban_format))
