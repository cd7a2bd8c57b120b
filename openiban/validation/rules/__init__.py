"""Validation rules.

Built-in rules run in this order, stopping at the first failure:

1. IllegalCharactersRule
2. CountryCodeRule
3. IsValidLengthRule
4. StructureValidationRule
5. Mod97Rule
"""

from openiban.validation.rules.base import FunctionRule, RuleCallable, ValidationRule, as_rule
from openiban.validation.rules.country_code import CountryCodeRule
from openiban.validation.rules.country_filters import AcceptCountryRule, RejectCountryRule
from openiban.validation.rules.illegal_characters import IllegalCharactersRule
from openiban.validation.rules.length import IsValidLengthRule
from openiban.validation.rules.mod97 import Mod97Rule, calculate_checksum
from openiban.validation.rules.structure import StructureValidationRule

__all__ = [
    "AcceptCountryRule",
    "CountryCodeRule",
    "FunctionRule",
    "IllegalCharactersRule",
    "IsValidLengthRule",
    "Mod97Rule",
    "RejectCountryRule",
    "RuleCallable",
    "StructureValidationRule",
    "ValidationRule",
    "as_rule",
    "calculate_checksum",
]
