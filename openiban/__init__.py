"""OpenIBAN - IBAN validation and parsing.

Usage:
    from openiban import Iban, IbanFormat

    iban = Iban.parse("NL91 ABNA 0417 1643 00")
    iban.to_string(IbanFormat.PARTITIONED)
"""

__version__ = "1.0.0"

from openiban.exceptions import (  # noqa: E402
    IbanFormatError,
    InvalidArgumentError,
    MissingArgumentError,
    OpenIbanError,
)
from openiban.iban import Iban, IbanFormat  # noqa: E402
from openiban.parser import IbanParser, get_default_parser, set_default_parser  # noqa: E402
from openiban.registry import CountryRegistry, IbanCountry, get_default_registry  # noqa: E402
from openiban.validation import (  # noqa: E402
    CustomErrorResult,
    IbanValidator,
    ValidationResult,
    ValidationRuleContext,
    ValidatorOptions,
)
from openiban.validation.rules import (  # noqa: E402
    AcceptCountryRule,
    RejectCountryRule,
    ValidationRule,
)

__all__ = [
    "__version__",
    "AcceptCountryRule",
    "CountryRegistry",
    "CustomErrorResult",
    "Iban",
    "IbanCountry",
    "IbanFormat",
    "IbanFormatError",
    "IbanParser",
    "IbanValidator",
    "InvalidArgumentError",
    "MissingArgumentError",
    "OpenIbanError",
    "RejectCountryRule",
    "ValidationResult",
    "ValidationRule",
    "ValidationRuleContext",
    "ValidatorOptions",
    "get_default_parser",
    "get_default_registry",
    "set_default_parser",
]
