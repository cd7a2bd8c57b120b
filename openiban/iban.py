"""The IBAN value object.

Value objects:
- Immutable
- No identity (equality based on the normalized value)
- Only created from values that passed validation
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from openiban.exceptions import InvalidArgumentError, MissingArgumentError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

PARTITION_SIZE = 4


class IbanFormat(str, Enum):
    """Display formats of an IBAN."""

    FLAT = "F"  # NL91ABNA0417164300
    PARTITIONED = "S"  # NL91 ABNA 0417 1643 00

    def __str__(self) -> str:
        return self.value


def _resolve_format(format: IbanFormat | str | None) -> IbanFormat:
    if format is None:
        raise MissingArgumentError("format")
    if isinstance(format, IbanFormat):
        return format
    if isinstance(format, str):
        for member in IbanFormat:
            if format == member.value:
                return member
    raise InvalidArgumentError(
        f"The format '{format}' is invalid. Supported formats: "
        + ", ".join(member.value for member in IbanFormat),
        param_name="format",
    )


class Iban:
    """An International Bank Account Number that passed validation.

    Instances are created with :meth:`Iban.parse` or :meth:`Iban.try_parse`;
    calling the class directly is not supported.

    Usage:
        >>> iban = Iban.parse("nl91 abna 0417 1643 00")
        >>> str(iban)
        'NL91ABNA0417164300'
        >>> iban.to_string(IbanFormat.PARTITIONED)
        'NL91 ABNA 0417 1643 00'
        >>> f"{iban:S}"
        'NL91 ABNA 0417 1643 00'
    """

    __slots__ = ("_value",)

    _value: str

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError("Iban cannot be instantiated directly, use Iban.parse() or Iban.try_parse()")

    @classmethod
    def _from_trusted(cls, normalized_value: str) -> Iban:
        """Wrap a value that already passed validation. Internal use only."""
        iban = object.__new__(cls)
        object.__setattr__(iban, "_value", normalized_value)
        return iban

    @classmethod
    def parse(cls, value: str, locale: str | None = None) -> Iban:
        """Parse a value with the default parser.

        Args:
            value: IBAN in flat or partitioned form, any letter case
            locale: Locale for the error message (e.g., "de")

        Raises:
            MissingArgumentError: If value is None
            IbanFormatError: If value is not a valid IBAN
        """
        from openiban.parser import get_default_parser

        return get_default_parser().parse(value, locale=locale)

    @classmethod
    def try_parse(cls, value: str | None) -> Iban | None:
        """Parse a value with the default parser, returning None if it is invalid."""
        from openiban.parser import get_default_parser

        return get_default_parser().try_parse(value)

    @property
    def value(self) -> str:
        """Normalized (flat) value."""
        return self._value

    @property
    def country_code(self) -> str:
        return self._value[:2]

    @property
    def check_digits(self) -> str:
        return self._value[2:4]

    @property
    def bban(self) -> str:
        """Basic Bank Account Number: everything after the check digits."""
        return self._value[4:]

    def to_string(self, format: IbanFormat | str | None = IbanFormat.FLAT) -> str:
        """Format the IBAN.

        Args:
            format: IbanFormat.FLAT ("F") or IbanFormat.PARTITIONED ("S")

        Raises:
            MissingArgumentError: If format is None
            InvalidArgumentError: If format is not a supported format
        """
        if _resolve_format(format) is IbanFormat.PARTITIONED:
            return " ".join(
                self._value[start : start + PARTITION_SIZE]
                for start in range(0, len(self._value), PARTITION_SIZE)
            )
        return self._value

    def __format__(self, format_spec: str) -> str:
        # Empty spec (plain f-string / format()) is the flat form
        return self.to_string(format_spec or IbanFormat.FLAT)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Iban({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Iban):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (Iban._from_trusted, (self._value,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Allow ``Iban`` as a pydantic field type (input: str or Iban)."""
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _coerce(cls, value: Any) -> Iban:
        if isinstance(value, Iban):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a string, got {type(value).__name__}")
        return cls.parse(value)
