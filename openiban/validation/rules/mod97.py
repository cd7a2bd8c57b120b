"""ISO 7064 MOD-97-10 checksum rule."""

from __future__ import annotations

from string import ascii_uppercase, digits

from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import ErrorResult, InvalidChecksumResult
from openiban.validation.rules.base import ValidationRule

# Letters map to two-digit numerals: A=10 ... Z=35
_NUMERALS = {char: str(index) for index, char in enumerate(digits + ascii_uppercase)}

# Digits appended per reduction step; with a two-digit carried remainder the
# intermediate value stays below 10**9.
CHUNK_SIZE = 7


def iban_to_numeric(value: str) -> str:
    """Move the first four characters to the end and convert letters to numerals.

    Raises:
        ValueError: If the value contains characters outside A-Z and 0-9
    """
    rearranged = value[4:] + value[:4]
    try:
        return "".join(_NUMERALS[char] for char in rearranged)
    except KeyError as e:
        raise ValueError(f"Invalid character in IBAN: {e.args[0]!r}") from e


def mod97(numeral: str) -> int:
    """Compute ``numeral % 97`` chunk by chunk, carrying the running remainder."""
    remainder = 0
    for start in range(0, len(numeral), CHUNK_SIZE):
        remainder = int(f"{remainder}{numeral[start:start + CHUNK_SIZE]}") % 97
    return remainder


def calculate_checksum(value: str) -> int:
    """MOD-97-10 remainder of an uppercase IBAN; valid IBANs yield 1."""
    return mod97(iban_to_numeric(value))


class Mod97Rule(ValidationRule):
    """Verifies the check digits with ISO 7064 MOD-97-10."""

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        if calculate_checksum(context.value) != 1:
            return InvalidChecksumResult()
        return None
