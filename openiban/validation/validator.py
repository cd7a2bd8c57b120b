"""Rule chain deciding whether a value is a valid IBAN."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from string import ascii_lowercase, ascii_uppercase

from openiban.exceptions import MissingArgumentError
from openiban.registry.registry import CountryRegistry, get_default_registry
from openiban.utils.logging import get_logger
from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import ErrorResult, RuleFaultResult, ValidationResult
from openiban.validation.rules.base import RuleCallable, ValidationRule, as_rule
from openiban.validation.rules.country_code import CountryCodeRule
from openiban.validation.rules.illegal_characters import IllegalCharactersRule
from openiban.validation.rules.length import IsValidLengthRule
from openiban.validation.rules.mod97 import Mod97Rule
from openiban.validation.rules.structure import StructureValidationRule

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
# ASCII only: str.upper() would turn e.g. "ß" into the legal "SS"
_ASCII_UPPER = str.maketrans(ascii_lowercase, ascii_uppercase)


def normalize(value: str) -> str:
    """Remove all whitespace and uppercase ASCII letters.

    >>> normalize(" nl91 abna 0417 1643 00 ")
    'NL91ABNA0417164300'
    """
    return _WHITESPACE.sub("", value).translate(_ASCII_UPPER)


@dataclass(frozen=True)
class ValidatorOptions:
    """Validator configuration.

    Attributes:
        registry: Country definitions used by the structural rules
        rules: Custom rules, run in order after all built-in rules passed
    """

    registry: CountryRegistry = field(default_factory=get_default_registry)
    rules: Sequence[ValidationRule | RuleCallable] = ()


class IbanValidator:
    """Runs the validation rules in a fixed order, stopping at the first failure.

    Built-in rules always run first; custom rules only run for values that
    passed every built-in rule. An exception raised by a custom rule, or a
    return value that is neither None nor an ErrorResult, does not propagate:
    it becomes a :class:`RuleFaultResult` and ends the run. Results always
    carry the value the built-in rules checked.

    Usage:
        >>> validator = IbanValidator()
        >>> validator.validate("NL91 ABNA 0417 1643 00").is_valid
        True
        >>> validator.validate("NL91ABNA0417164301").error
        InvalidChecksumResult()
    """

    def __init__(self, options: ValidatorOptions | None = None) -> None:
        self.options = options or ValidatorOptions()
        self._builtin_rules: tuple[ValidationRule, ...] = (
            IllegalCharactersRule(),
            CountryCodeRule(self.options.registry),
            IsValidLengthRule(),
            StructureValidationRule(),
            Mod97Rule(),
        )
        self._custom_rules: tuple[ValidationRule, ...] = tuple(
            as_rule(rule) for rule in self.options.rules
        )

    @property
    def registry(self) -> CountryRegistry:
        return self.options.registry

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        """Active rules in execution order."""
        return self._builtin_rules + self._custom_rules

    def validate(self, value: str) -> ValidationResult:
        """Validate a value.

        Args:
            value: Raw input; whitespace and letter case are ignored

        Returns:
            Result holding the normalized value and the first failure, if any

        Raises:
            MissingArgumentError: If value is None
        """
        if value is None:
            raise MissingArgumentError("value")

        normalized = normalize(value)
        context = ValidationRuleContext(normalized)

        for rule in self._builtin_rules:
            error = rule.validate(context)
            if error is not None:
                return self._failed(normalized, rule, error)

        for rule in self._custom_rules:
            try:
                error = rule.validate(context)
                if error is not None and not isinstance(error, ErrorResult):
                    raise TypeError(
                        f"Rule {rule.name} returned {type(error).__name__}, "
                        "expected an ErrorResult or None"
                    )
            except Exception as e:
                logger.warning(
                    "iban_rule_fault",
                    rule=rule.name,
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=e,
                )
                return ValidationResult(normalized, RuleFaultResult(normalized, e))
            if error is not None:
                return self._failed(normalized, rule, error)

        logger.debug("iban_validated", country=normalized[:2])
        return ValidationResult(normalized)

    def _failed(
        self, normalized: str, rule: ValidationRule, error: ErrorResult
    ) -> ValidationResult:
        logger.debug(
            "iban_validation_failed",
            rule=rule.name,
            error=error.code,
            country=normalized[:2],
        )
        return ValidationResult(normalized, error)
