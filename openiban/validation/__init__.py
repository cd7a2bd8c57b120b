"""Rule-based IBAN validation."""

from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import (
    CountryNotAcceptedResult,
    CustomErrorResult,
    ErrorResult,
    IllegalCharactersResult,
    InvalidChecksumResult,
    InvalidCountryCodeResult,
    InvalidLengthResult,
    InvalidStructureResult,
    RuleFaultResult,
    ValidationResult,
)
from openiban.validation.validator import IbanValidator, ValidatorOptions, normalize

__all__ = [
    "CountryNotAcceptedResult",
    "CustomErrorResult",
    "ErrorResult",
    "IbanValidator",
    "IllegalCharactersResult",
    "InvalidChecksumResult",
    "InvalidCountryCodeResult",
    "InvalidLengthResult",
    "InvalidStructureResult",
    "RuleFaultResult",
    "ValidationResult",
    "ValidationRuleContext",
    "ValidatorOptions",
    "normalize",
]
