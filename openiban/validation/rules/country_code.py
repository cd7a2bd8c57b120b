"""Country code rule."""

from __future__ import annotations

from openiban.registry.registry import CountryRegistry
from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import ErrorResult, InvalidCountryCodeResult
from openiban.validation.rules.base import ValidationRule


class CountryCodeRule(ValidationRule):
    """Resolves the country code and stores the definition in the context."""

    def __init__(self, registry: CountryRegistry) -> None:
        self.registry = registry

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        country = self.registry.lookup(context.country_code)
        if country is None:
            return InvalidCountryCodeResult()

        context.country = country
        return None
