"""
Pytest configuration and global fixtures.

This module provides shared fixtures used across all tests.
"""

from collections.abc import Generator

import pytest
from hypothesis import HealthCheck, settings

from openiban.parser import IbanParser, set_default_parser
from openiban.registry import CountryRegistry, get_default_registry
from openiban.utils.config import reload_settings
from openiban.validation import IbanValidator, ValidatorOptions

# Autouse fixtures here only reset module-level state
settings.register_profile("openiban", suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("openiban")


class TestValues:
    """IBANs shared by many tests."""

    __test__ = False

    VALID_IBAN = "NL91ABNA0417164300"
    VALID_IBAN_PARTITIONED = "NL91 ABNA 0417 1643 00"
    OTHER_VALID_IBAN = "AE070331234567890123456"
    # Illegal character in an otherwise valid value
    INVALID_IBAN = "NL91ABNA041716430!"
    WRONG_CHECKSUM_IBAN = "NL91ABNA0417164301"
    WRONG_STRUCTURE_IBAN = "NL91ABN10417164300"
    WRONG_LENGTH_IBAN = "NL91ABNA041716430"
    UNKNOWN_COUNTRY_IBAN = "XX91ABNA0417164300"
    # Registry examples, all valid
    REGISTRY_EXAMPLES = (
        "AD1200012030200359100100",
        "AE070331234567890123456",
        "AT611904300234573201",
        "BE68539007547034",
        "CH9300762011623852957",
        "CY17002001280000001200527600",
        "CZ6508000000192000145399",
        "DE89370400440532013000",
        "DK5000400440116243",
        "EE382200221020145685",
        "ES9121000418450200051332",
        "FI2112345600000785",
        "FR1420041010050500013M02606",
        "GB29NWBK60161331926819",
        "GR1601101250000000012300695",
        "HR1210010051863000160",
        "HU42117730161111101800000000",
        "IE29AIBK93115212345678",
        "IS140159260076545510730339",
        "IT60X0542811101000000123456",
        "LI21088100002324013AA",
        "LT121000011101001000",
        "LU280019400644750000",
        "LV80BANK0000435195001",
        "MT84MALT011000012345MTLCAST001S",
        "NL91ABNA0417164300",
        "NO9386011117947",
        "PL61109010140000071219812874",
        "PT50000201231234567890154",
        "RO49AAAA1B31007593840000",
        "SE4550000000058398257466",
        "SI56263300012039086",
        "SK3112000000198742637541",
    )


@pytest.fixture
def registry() -> CountryRegistry:
    """The built-in country registry."""
    return get_default_registry()


@pytest.fixture
def validator(registry: CountryRegistry) -> IbanValidator:
    """Validator with built-in rules only."""
    return IbanValidator(ValidatorOptions(registry=registry))


@pytest.fixture
def parser(validator: IbanValidator) -> IbanParser:
    """Parser using the built-in validator."""
    return IbanParser(validator)


@pytest.fixture(autouse=True)
def reset_default_parser() -> Generator[None, None, None]:
    """Make sure tests replacing the default parser do not leak."""
    yield
    set_default_parser(None)


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove OPENIBAN_* variables and reload settings around a test."""
    for name in ("OPENIBAN_LOCALE", "OPENIBAN_LOG_LEVEL", "OPENIBAN_JSON_LOGS", "OPENIBAN_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    yield
    monkeypatch.undo()
    reload_settings()
