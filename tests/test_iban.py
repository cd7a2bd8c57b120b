"""Tests for the Iban value object: parsing, formatting and equality."""

from unittest.mock import Mock

import pytest
from conftest import TestValues
from hypothesis import given
from hypothesis import strategies as st

from openiban import Iban, IbanFormat
from openiban.exceptions import IbanFormatError, InvalidArgumentError, MissingArgumentError
from openiban.parser import IbanParser, set_default_parser
from openiban.validation import (
    CustomErrorResult,
    IbanValidator,
    IllegalCharactersResult,
    ValidationResult,
    ValidationRuleContext,
    ValidatorOptions,
)
from openiban.validation.rules import ValidationRule

pytestmark = pytest.mark.unit

IBAN_FOR_CUSTOM_RULE_FAILURE = "NO9386011117947"
IBAN_FOR_CUSTOM_RULE_EXCEPTION = "DK5000400440116243"


class CustomRule(ValidationRule):
    """Fails one IBAN with a message and raises for another."""

    def validate(self, context: ValidationRuleContext):
        if context.value == IBAN_FOR_CUSTOM_RULE_FAILURE:
            return CustomErrorResult("Custom message")
        if context.value == IBAN_FOR_CUSTOM_RULE_EXCEPTION:
            raise RuntimeError("Custom rule crashed")
        return None


@pytest.fixture
def validator_mock() -> Mock:
    """Real validator with custom rules, wrapped to count calls."""
    return Mock(wraps=IbanValidator(ValidatorOptions(rules=[CustomRule()])))


@pytest.fixture(autouse=True)
def default_parser(validator_mock: Mock) -> IbanParser:
    parser = IbanParser(validator_mock)
    set_default_parser(parser)
    return parser


class TestParse:
    """Iban.parse()"""

    def test_none_value_raises_missing_argument(self):
        with pytest.raises(MissingArgumentError) as exc_info:
            Iban.parse(None)  # type: ignore[arg-type]

        assert exc_info.value.param_name == "value"

    def test_invalid_value_raises_with_result(self):
        with pytest.raises(IbanFormatError) as exc_info:
            Iban.parse(TestValues.INVALID_IBAN)

        error = exc_info.value
        assert error.result == ValidationResult(
            attempted_value=TestValues.INVALID_IBAN,
            error=IllegalCharactersResult(),
        )
        assert error.__cause__ is None
        assert error.original_error is None
        assert str(error) == "The IBAN contains illegal characters."

    def test_valid_value_returns_iban(self):
        iban = Iban.parse(TestValues.VALID_IBAN)

        assert isinstance(iban, Iban)
        assert str(iban) == TestValues.VALID_IBAN

    def test_value_failing_custom_rule_raises_with_custom_message(self):
        with pytest.raises(IbanFormatError) as exc_info:
            Iban.parse(IBAN_FOR_CUSTOM_RULE_FAILURE)

        error = exc_info.value
        assert error.result == ValidationResult(
            attempted_value=IBAN_FOR_CUSTOM_RULE_FAILURE,
            error=CustomErrorResult("Custom message"),
        )
        assert error.__cause__ is None
        assert str(error) == "Custom message"

    def test_custom_rule_exception_becomes_cause(self):
        with pytest.raises(IbanFormatError) as exc_info:
            Iban.parse(IBAN_FOR_CUSTOM_RULE_EXCEPTION)

        error = exc_info.value
        assert error.result is None
        assert isinstance(error.__cause__, RuntimeError)
        assert error.original_error is error.__cause__
        assert "is not a valid IBAN." in str(error)

    def test_error_message_uses_requested_locale(self):
        with pytest.raises(IbanFormatError) as exc_info:
            Iban.parse(TestValues.WRONG_LENGTH_IBAN, locale="de")

        assert str(exc_info.value) == "Der IBAN hat eine falsche Länge."

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            Iban.parse(TestValues.WRONG_CHECKSUM_IBAN)


class TestTryParse:
    """Iban.try_parse()"""

    def test_none_value_returns_none(self, validator_mock: Mock):
        assert Iban.try_parse(None) is None
        validator_mock.validate.assert_not_called()

    def test_invalid_value_returns_none(self, validator_mock: Mock):
        assert Iban.try_parse(TestValues.INVALID_IBAN) is None
        assert validator_mock.validate.call_count == 1

    def test_valid_value_returns_iban(self, validator_mock: Mock):
        iban = Iban.try_parse(TestValues.VALID_IBAN)

        assert isinstance(iban, Iban)
        assert str(iban) == TestValues.VALID_IBAN
        assert validator_mock.validate.call_count == 1

    def test_custom_rule_exception_returns_none(self):
        assert Iban.try_parse(IBAN_FOR_CUSTOM_RULE_EXCEPTION) is None


class TestFormatting:
    """Iban.to_string() and format()"""

    @pytest.fixture
    def iban(self) -> Iban:
        return Iban.parse(TestValues.VALID_IBAN)

    def test_none_format_raises_missing_argument(self, iban: Iban):
        with pytest.raises(MissingArgumentError) as exc_info:
            iban.to_string(None)

        assert exc_info.value.param_name == "format"

    @pytest.mark.parametrize("format", ["f", "s", "invalid_format", "", None])
    def test_invalid_format_raises_invalid_argument(self, iban: Iban, format):
        with pytest.raises(InvalidArgumentError) as exc_info:
            iban.to_string(format)

        assert exc_info.value.param_name == "format"

    @pytest.mark.parametrize("format", ["f", "s", "invalid_format", ""])
    def test_unrecognized_format_is_not_missing_argument(self, iban: Iban, format):
        with pytest.raises(InvalidArgumentError) as exc_info:
            iban.to_string(format)

        assert not isinstance(exc_info.value, MissingArgumentError)

    @pytest.mark.parametrize(
        "format,expected",
        [
            (IbanFormat.FLAT, TestValues.VALID_IBAN),
            (IbanFormat.PARTITIONED, TestValues.VALID_IBAN_PARTITIONED),
            ("F", TestValues.VALID_IBAN),
            ("S", TestValues.VALID_IBAN_PARTITIONED),
        ],
    )
    def test_valid_format(self, iban: Iban, format, expected):
        assert iban.to_string(format) == expected

    def test_default_format_is_flat(self, iban: Iban):
        assert iban.to_string() == TestValues.VALID_IBAN
        assert str(iban) == TestValues.VALID_IBAN

    def test_format_builtin(self, iban: Iban):
        assert f"{iban}" == TestValues.VALID_IBAN
        assert f"{iban:S}" == TestValues.VALID_IBAN_PARTITIONED
        assert format(iban, "F") == TestValues.VALID_IBAN

    def test_partitioned_last_block_may_be_shorter(self):
        iban = Iban.parse("LI21088100002324013AA")

        assert iban.to_string(IbanFormat.PARTITIONED) == "LI21 0881 0000 2324 013A A"

    @given(st.sampled_from(TestValues.REGISTRY_EXAMPLES))
    def test_partitioned_round_trips_to_flat(self, value):
        parser = IbanParser()
        partitioned = parser.parse(value).to_string(IbanFormat.PARTITIONED)
        blocks = partitioned.split(" ")

        assert partitioned.replace(" ", "") == value
        assert all(len(block) == 4 for block in blocks[:-1])
        assert 1 <= len(blocks[-1]) <= 4
        assert parser.parse(partitioned) == parser.parse(value)


class TestEquality:
    """Equality and hashing."""

    @pytest.fixture
    def iban(self) -> Iban:
        return Iban.parse(TestValues.VALID_IBAN)

    @pytest.fixture
    def equal_iban(self) -> Iban:
        return Iban.parse(TestValues.VALID_IBAN_PARTITIONED.lower())

    @pytest.fixture
    def other_iban(self) -> Iban:
        return Iban.parse(TestValues.OTHER_VALID_IBAN)

    def test_equal_values(self, iban: Iban, equal_iban: Iban):
        assert iban == equal_iban
        assert not (iban != equal_iban)

    def test_different_values(self, iban: Iban, other_iban: Iban):
        assert iban != other_iban
        assert not (iban == other_iban)

    def test_equal_to_self(self, iban: Iban):
        assert iban == iban

    def test_not_equal_to_none(self, iban: Iban):
        assert iban != None  # noqa: E711
        assert iban.__eq__(None) is NotImplemented

    def test_not_equal_to_other_type(self, iban: Iban):
        assert iban != object()
        assert iban != TestValues.VALID_IBAN

    def test_hash_is_hash_of_normalized_value(self, iban: Iban):
        assert hash(iban) == hash(TestValues.VALID_IBAN)

    def test_equal_values_have_equal_hashes(self, iban: Iban, equal_iban: Iban):
        assert hash(iban) == hash(equal_iban)
        assert len({iban, equal_iban}) == 1


class TestValueObject:
    """Construction and immutability."""

    def test_direct_instantiation_is_rejected(self):
        with pytest.raises(TypeError):
            Iban(TestValues.VALID_IBAN)

    def test_is_immutable(self):
        iban = Iban.parse(TestValues.VALID_IBAN)

        with pytest.raises(AttributeError):
            iban._value = "XX"  # type: ignore[misc]

    def test_parts(self):
        iban = Iban.parse(TestValues.VALID_IBAN)

        assert iban.country_code == "NL"
        assert iban.check_digits == "91"
        assert iban.bban == "ABNA0417164300"
        assert iban.value == TestValues.VALID_IBAN

    def test_repr(self):
        assert repr(Iban.parse(TestValues.VALID_IBAN)) == "Iban('NL91ABNA0417164300')"

    def test_copy_and_pickle_keep_value(self):
        import copy
        import pickle

        iban = Iban.parse(TestValues.VALID_IBAN)

        assert copy.copy(iban) == iban
        assert pickle.loads(pickle.dumps(iban)) == iban
