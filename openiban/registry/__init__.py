"""IBAN country registry."""

from openiban.registry.models import (
    BbanPattern,
    CharacterClass,
    ChecksumAlgorithm,
    IbanCountry,
    PatternSegment,
)
from openiban.registry.registry import CountryRegistry, get_default_registry

__all__ = [
    "BbanPattern",
    "CharacterClass",
    "ChecksumAlgorithm",
    "CountryRegistry",
    "IbanCountry",
    "PatternSegment",
    "get_default_registry",
]
