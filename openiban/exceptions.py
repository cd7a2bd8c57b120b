"""Exception hierarchy for OpenIBAN.

All exceptions carry a human-readable message plus optional structured
context, so they can be logged with structlog without string parsing.

Usage:
    from openiban.exceptions import IbanFormatError

    try:
        iban = Iban.parse(value)
    except IbanFormatError as e:
        logger.warning("iban_rejected", error=str(e), context=e.context)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from openiban.validation.results import ValidationResult


class OpenIbanError(Exception):
    """Base exception for all OpenIBAN errors.

    Attributes:
        message: Human-readable error message
        context: Additional context for debugging (dict)
        original_error: Original exception if wrapped
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, context={self.context!r})"


# =============================================================================
# Argument Errors
# =============================================================================


class InvalidArgumentError(OpenIbanError, ValueError):
    """Raised when an argument has a value outside of its accepted domain.

    These signal programmer errors (a malformed call), not invalid data.
    """

    def __init__(self, message: str, *, param_name: str, **kwargs: Any) -> None:
        context = kwargs.pop("context", None) or {}
        context["param_name"] = param_name
        super().__init__(message, context=context, **kwargs)
        self.param_name = param_name


class MissingArgumentError(InvalidArgumentError):
    """Raised when a required argument is ``None``."""

    def __init__(self, param_name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Value cannot be None. (Parameter '{param_name}')",
            param_name=param_name,
            **kwargs,
        )


# =============================================================================
# Validation Errors
# =============================================================================


class IbanFormatError(OpenIbanError, ValueError):
    """Raised by ``Iban.parse`` when a value is not a valid IBAN.

    Exactly one of ``result`` and ``original_error`` is set:

    - ``result`` holds the failed :class:`ValidationResult` when a rule
      rejected the value.
    - ``original_error`` (also chained as ``__cause__``) holds the exception
      raised by a faulty custom rule; ``result`` is ``None`` in that case.
    """

    def __init__(
        self,
        message: str,
        *,
        result: ValidationResult | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", None) or {}
        if result is not None:
            context["attempted_value"] = result.attempted_value
            if result.error is not None:
                context["error"] = type(result.error).__name__
        super().__init__(message, context=context, **kwargs)
        self.result = result


# =============================================================================
# Registry & Configuration Errors
# =============================================================================


class RegistryError(OpenIbanError):
    """Raised when country definitions are inconsistent or malformed."""

    def __init__(self, message: str, *, country_code: str | None = None, **kwargs: Any) -> None:
        context = kwargs.pop("context", None) or {}
        if country_code:
            context["country_code"] = country_code
        super().__init__(message, context=context, **kwargs)
        self.country_code = country_code


class ConfigurationError(OpenIbanError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        setting: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.pop("context", None) or {}
        if setting:
            context["setting"] = setting
        if expected:
            context["expected"] = expected
        super().__init__(message, context=context, **kwargs)


__all__ = [
    "OpenIbanError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "IbanFormatError",
    "RegistryError",
    "ConfigurationError",
]
