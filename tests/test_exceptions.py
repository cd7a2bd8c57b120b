"""Tests for the exception hierarchy."""

import pytest

from openiban.exceptions import (
    ConfigurationError,
    IbanFormatError,
    InvalidArgumentError,
    MissingArgumentError,
    OpenIbanError,
    RegistryError,
)
from openiban.validation import InvalidChecksumResult, ValidationResult

pytestmark = pytest.mark.unit


class TestHierarchy:
    """Tests for base classes and context."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidArgumentError("bad", param_name="format"),
            MissingArgumentError("value"),
            IbanFormatError("bad"),
            RegistryError("bad"),
            ConfigurationError("bad"),
        ],
    )
    def test_all_derive_from_base(self, error):
        assert isinstance(error, OpenIbanError)

    def test_argument_errors_are_value_errors(self):
        assert isinstance(MissingArgumentError("value"), ValueError)
        assert isinstance(IbanFormatError("bad"), ValueError)

    def test_missing_argument_default_message(self):
        error = MissingArgumentError("value")

        assert str(error) == "Value cannot be None. (Parameter 'value')"
        assert error.param_name == "value"
        assert error.context == {"param_name": "value"}

    def test_format_error_context(self):
        result = ValidationResult("NL91ABNA0417164301", InvalidChecksumResult())

        error = IbanFormatError("The IBAN has an incorrect checksum.", result=result)

        assert error.result is result
        assert error.context == {
            "attempted_value": "NL91ABNA0417164301",
            "error": "InvalidChecksumResult",
        }

    def test_original_error_is_kept(self):
        cause = RuntimeError("boom")

        error = IbanFormatError("bad", original_error=cause)

        assert error.original_error is cause
        assert error.result is None

    def test_configuration_error_context(self):
        error = ConfigurationError("bad", setting="locale", expected="en, de")

        assert error.context == {"setting": "locale", "expected": "en, de"}

    def test_repr(self):
        assert repr(RegistryError("bad", country_code="NL")) == (
            "RegistryError(message='bad', context={'country_code': 'NL'})"
        )
