"""Country definition models for the IBAN registry.

A country definition describes the fixed shape of every IBAN issued by that
country: total length, the structure of the BBAN (the part after the country
code and check digits) and the checksum algorithm used for the check digits.

BBAN structures are declared in SWIFT IBAN Registry notation, e.g. ``4!a10!n``
for "4 letters followed by 10 digits".
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from openiban.exceptions import RegistryError

_NOTATION_TOKEN = re.compile(r"(\d+)!([anc])")


class CharacterClass(str, Enum):
    """Character class of a BBAN segment, keyed by its SWIFT notation letter."""

    ALPHA = "a"  # A-Z
    NUMERIC = "n"  # 0-9
    ALPHANUMERIC = "c"  # A-Z, 0-9

    def __str__(self) -> str:
        return self.value

    @property
    def regex(self) -> str:
        """Regex character set for this class (uppercase input)."""
        return _CLASS_REGEX[self]


_CLASS_REGEX = {
    CharacterClass.ALPHA: "[A-Z]",
    CharacterClass.NUMERIC: "[0-9]",
    CharacterClass.ALPHANUMERIC: "[A-Z0-9]",
}


class ChecksumAlgorithm(str, Enum):
    """Checksum algorithm protecting the IBAN check digits."""

    MOD97 = "mod97"  # ISO 7064 MOD-97-10

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PatternSegment:
    """A fixed-width run of characters from a single character class."""

    char_class: CharacterClass
    count: int

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise RegistryError(f"Segment length must be positive, got {self.count}")

    def __str__(self) -> str:
        return f"{self.count}!{self.char_class.value}"


@dataclass(frozen=True)
class BbanPattern:
    """Ordered sequence of fixed-width segments describing a BBAN.

    Example:
        >>> pattern = BbanPattern.parse("4!a10!n")
        >>> pattern.length
        14
        >>> pattern.matches("ABNA0417164300")
        True
    """

    segments: tuple[PatternSegment, ...]
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.segments:
            raise RegistryError("BBAN pattern must contain at least one segment")
        expression = "".join(f"{s.char_class.regex}{{{s.count}}}" for s in self.segments)
        object.__setattr__(self, "_regex", re.compile(expression))

    @classmethod
    def parse(cls, notation: str) -> BbanPattern:
        """Build a pattern from SWIFT registry notation (``"4!a10!n"``).

        Raises:
            RegistryError: If the notation is empty or malformed
        """
        segments: list[PatternSegment] = []
        position = 0
        for match in _NOTATION_TOKEN.finditer(notation):
            if match.start() != position:
                break
            segments.append(PatternSegment(CharacterClass(match.group(2)), int(match.group(1))))
            position = match.end()

        if not segments or position != len(notation):
            raise RegistryError(f"Invalid BBAN pattern notation: {notation!r}")
        return cls(tuple(segments))

    @property
    def length(self) -> int:
        """Total number of characters described by the pattern."""
        return sum(segment.count for segment in self.segments)

    def matches(self, bban: str) -> bool:
        """Check whether ``bban`` (uppercase) matches the pattern exactly."""
        return self._regex.fullmatch(bban) is not None

    def __str__(self) -> str:
        return "".join(str(segment) for segment in self.segments)


@dataclass(frozen=True)
class IbanCountry:
    """Structural IBAN definition for one country.

    Attributes:
        code: ISO 3166-1 alpha-2 code (e.g., "NL", "DE")
        name: Country name in English
        length: Total IBAN length including country code and check digits
        bban_pattern: Structure of the BBAN
        checksum_algorithm: Algorithm validating the check digits
        example: Registry example IBAN (electronic format), if known
        sepa: Whether the country belongs to the SEPA scheme
    """

    code: str
    name: str
    length: int
    bban_pattern: BbanPattern
    checksum_algorithm: ChecksumAlgorithm = ChecksumAlgorithm.MOD97
    example: str | None = None
    sepa: bool = False

    def __post_init__(self) -> None:
        if len(self.code) != 2 or not ("A" <= self.code[0] <= "Z" and "A" <= self.code[1] <= "Z"):
            raise RegistryError(
                f"Country code must be two uppercase letters, got {self.code!r}",
                country_code=self.code,
            )
        if self.length != 4 + self.bban_pattern.length:
            raise RegistryError(
                f"Length {self.length} does not match BBAN pattern {self.bban_pattern} "
                f"(expected {4 + self.bban_pattern.length})",
                country_code=self.code,
            )
        if self.example is not None and (
            len(self.example) != self.length or not self.example.startswith(self.code)
        ):
            raise RegistryError(
                f"Example IBAN {self.example!r} does not fit the definition",
                country_code=self.code,
            )

    @property
    def bban_length(self) -> int:
        """Length of the BBAN part."""
        return self.bban_pattern.length
