"""BBAN structure rule."""

from __future__ import annotations

from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import (
    ErrorResult,
    InvalidCountryCodeResult,
    InvalidStructureResult,
)
from openiban.validation.rules.base import ValidationRule


class StructureValidationRule(ValidationRule):
    """Checks the check digits and the BBAN against the country pattern.

    Layout: country code (2 letters), check digits (2 digits), BBAN.
    """

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        country = context.country
        if country is None:
            return InvalidCountryCodeResult()

        check_digits = context.value[2:4]
        if len(check_digits) != 2 or not check_digits.isdigit():
            return InvalidStructureResult()

        if not country.bban_pattern.matches(context.value[4:]):
            return InvalidStructureResult()
        return None
