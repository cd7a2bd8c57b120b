"""Length rule."""

from __future__ import annotations

from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import ErrorResult, InvalidCountryCodeResult, InvalidLengthResult
from openiban.validation.rules.base import ValidationRule


class IsValidLengthRule(ValidationRule):
    """Checks the value against the fixed IBAN length of its country."""

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        country = context.country
        if country is None:
            return InvalidCountryCodeResult()

        if len(context.value) != country.length:
            return InvalidLengthResult(expected=country.length, actual=len(context.value))
        return None
