"""Tests for country definition models."""

import pytest

from openiban.exceptions import RegistryError
from openiban.registry import (
    BbanPattern,
    CharacterClass,
    ChecksumAlgorithm,
    IbanCountry,
    PatternSegment,
)

pytestmark = pytest.mark.unit


class TestPatternSegment:
    """Tests for PatternSegment."""

    def test_str_uses_registry_notation(self):
        assert str(PatternSegment(CharacterClass.ALPHA, 4)) == "4!a"

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count_rejected(self, count):
        with pytest.raises(RegistryError):
            PatternSegment(CharacterClass.NUMERIC, count)


class TestBbanPattern:
    """Tests for BbanPattern."""

    def test_parse_notation(self):
        pattern = BbanPattern.parse("4!a10!n")

        assert pattern.segments == (
            PatternSegment(CharacterClass.ALPHA, 4),
            PatternSegment(CharacterClass.NUMERIC, 10),
        )
        assert pattern.length == 14
        assert str(pattern) == "4!a10!n"

    @pytest.mark.parametrize("notation", ["", "4a", "4!x", "4!a10", "!a", "4!a 10!n"])
    def test_parse_rejects_malformed_notation(self, notation):
        with pytest.raises(RegistryError):
            BbanPattern.parse(notation)

    def test_empty_segments_rejected(self):
        with pytest.raises(RegistryError):
            BbanPattern(())

    @pytest.mark.parametrize(
        "bban,expected",
        [
            ("ABNA0417164300", True),
            ("ABN10417164300", False),  # digit in letter segment
            ("ABNA041716430A", False),  # letter in digit segment
            ("ABNA041716430", False),  # too short
            ("ABNA04171643000", False),  # too long
            ("abna0417164300", False),  # lowercase is not normalized here
        ],
    )
    def test_matches(self, bban, expected):
        assert BbanPattern.parse("4!a10!n").matches(bban) is expected

    def test_alphanumeric_segment_accepts_both(self):
        pattern = BbanPattern.parse("3!c")

        assert pattern.matches("A1B")
        assert pattern.matches("123")
        assert not pattern.matches("A-B")

    def test_patterns_compare_by_segments(self):
        assert BbanPattern.parse("4!a10!n") == BbanPattern.parse("4!a10!n")


class TestIbanCountry:
    """Tests for IbanCountry."""

    def _country(self, **overrides) -> IbanCountry:
        fields = {
            "code": "NL",
            "name": "Netherlands",
            "length": 18,
            "bban_pattern": BbanPattern.parse("4!a10!n"),
            "example": "NL91ABNA0417164300",
            "sepa": True,
        }
        fields.update(overrides)
        return IbanCountry(**fields)

    def test_valid_definition(self):
        country = self._country()

        assert country.bban_length == 14
        assert country.checksum_algorithm is ChecksumAlgorithm.MOD97

    @pytest.mark.parametrize("code", ["nl", "N", "NLD", "N1", ""])
    def test_invalid_code_rejected(self, code):
        with pytest.raises(RegistryError):
            self._country(code=code, example=None)

    def test_length_must_match_pattern(self):
        with pytest.raises(RegistryError) as exc_info:
            self._country(length=19, example=None)

        assert exc_info.value.country_code == "NL"

    def test_example_must_fit(self):
        with pytest.raises(RegistryError):
            self._country(example="DE89370400440532013000")

    def test_example_is_optional(self):
        assert self._country(example=None).example is None

    def test_is_frozen(self):
        country = self._country()

        with pytest.raises(AttributeError):
            country.length = 20  # type: ignore[misc]
