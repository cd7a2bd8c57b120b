"""Optional rules restricting which countries are accepted.

Both are registered as custom rules, so they only run for values that are
already structurally valid.
"""

from __future__ import annotations

from collections.abc import Iterable

from openiban.exceptions import InvalidArgumentError, MissingArgumentError
from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import CountryNotAcceptedResult, ErrorResult
from openiban.validation.rules.base import ValidationRule


def _country_set(country_codes: Iterable[str] | None) -> frozenset[str]:
    if country_codes is None:
        raise MissingArgumentError("country_codes")
    if isinstance(country_codes, str):
        country_codes = [country_codes]
    codes = frozenset(code.strip().upper() for code in country_codes)
    if not codes:
        raise InvalidArgumentError(
            "At least one country code is required.", param_name="country_codes"
        )
    return codes


class AcceptCountryRule(ValidationRule):
    """Only accepts values from the given countries.

    Example:
        >>> validator = IbanValidator(ValidatorOptions(rules=(AcceptCountryRule(["NL", "BE"]),)))
    """

    def __init__(self, country_codes: Iterable[str]) -> None:
        self.accepted_countries = _country_set(country_codes)

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        if context.country_code not in self.accepted_countries:
            return CountryNotAcceptedResult(context.country_code)
        return None


class RejectCountryRule(ValidationRule):
    """Rejects values from the given countries."""

    def __init__(self, country_codes: Iterable[str]) -> None:
        self.rejected_countries = _country_set(country_codes)

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        if context.country_code in self.rejected_countries:
            return CountryNotAcceptedResult(context.country_code)
        return None
