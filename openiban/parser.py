"""Parsing front door: validate a raw value and build an :class:`Iban`."""

from __future__ import annotations

import threading

from openiban.exceptions import IbanFormatError, MissingArgumentError
from openiban.i18n.catalog import MessageCatalog
from openiban.iban import Iban
from openiban.utils.logging import get_logger
from openiban.validation.results import RuleFaultResult
from openiban.validation.validator import IbanValidator

logger = get_logger(__name__)


class IbanParser:
    """Parses values into :class:`Iban` instances using a validator.

    Usage:
        >>> parser = IbanParser(IbanValidator(ValidatorOptions(rules=[my_rule])))
        >>> parser.parse("NL91ABNA0417164300")
        Iban('NL91ABNA0417164300')
        >>> parser.try_parse("NL91ABNA0417164301") is None
        True
    """

    def __init__(
        self,
        validator: IbanValidator | None = None,
        catalog: MessageCatalog | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            validator: Validator deciding validity (default: built-in rules only)
            catalog: Message catalog for error messages (default: bundled catalog)
        """
        self.validator = validator or IbanValidator()
        self.catalog = catalog

    def parse(self, value: str, locale: str | None = None) -> Iban:
        """Parse a value, raising on failure.

        Args:
            value: Raw input; whitespace and letter case are ignored
            locale: Locale for the error message (e.g., "de")

        Returns:
            The parsed IBAN

        Raises:
            MissingArgumentError: If value is None
            IbanFormatError: If validation failed. ``result`` holds the failed
                validation result, except when a custom rule raised: then
                ``result`` is None and the rule's exception is the cause.
        """
        if value is None:
            raise MissingArgumentError("value")

        result = self.validator.validate(value)
        if result.error is None:
            return Iban._from_trusted(result.attempted_value)

        message = result.error.render(locale, self.catalog)
        if isinstance(result.error, RuleFaultResult):
            fault = result.error.exception
            raise IbanFormatError(message, original_error=fault) from fault
        raise IbanFormatError(message, result=result)

    def try_parse(self, value: str | None) -> Iban | None:
        """Parse a value, returning None instead of raising.

        Absent or non-string input and every kind of validation failure
        yield None.
        """
        if not isinstance(value, str):
            return None

        result = self.validator.validate(value)
        if result.error is not None:
            return None
        return Iban._from_trusted(result.attempted_value)


_default_parser: IbanParser | None = None
_default_parser_lock = threading.Lock()


def get_default_parser() -> IbanParser:
    """Get the parser used by ``Iban.parse`` and ``Iban.try_parse``."""
    global _default_parser

    if _default_parser is None:
        with _default_parser_lock:
            if _default_parser is None:
                _default_parser = IbanParser()
    return _default_parser


def set_default_parser(parser: IbanParser | None) -> None:
    """Replace the parser used by ``Iban.parse``; None restores the built-in one.

    Intended for application start-up (custom rules, restricted countries).
    """
    global _default_parser

    with _default_parser_lock:
        _default_parser = parser
    logger.debug("default_parser_replaced", custom=parser is not None)
