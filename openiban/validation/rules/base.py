"""Base interface for validation rules.

Every rule is an independent predicate over a :class:`ValidationRuleContext`.
A rule returns None when the value passes and an :class:`ErrorResult` when it
does not. The validator decides which rule runs next.

Implementing a custom rule:
    1. Inherit from ValidationRule
    2. Implement validate()
    3. Return None on success, an ErrorResult (usually CustomErrorResult) on failure

Example:
    >>> class NoTestBankRule(ValidationRule):
    ...     def validate(self, context):
    ...         if context.value[4:8] == "TEST":
    ...             return CustomErrorResult("Test bank accounts are not allowed.")
    ...         return None
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import ErrorResult

RuleCallable = Callable[[ValidationRuleContext], ErrorResult | None]


class ValidationRule(ABC):
    """Abstract base class for validation rules."""

    @property
    def name(self) -> str:
        """Rule name used in log events."""
        return self.__class__.__name__

    @abstractmethod
    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        """Validate the value held by ``context``.

        Args:
            context: Context of the current validation run

        Returns:
            None if the value passes, otherwise the error describing the failure
        """


class FunctionRule(ValidationRule):
    """Adapts a plain function ``(context) -> ErrorResult | None`` to a rule."""

    def __init__(self, func: RuleCallable, name: str | None = None) -> None:
        self._func = func
        self._name = name or getattr(func, "__name__", "FunctionRule")

    @property
    def name(self) -> str:
        return self._name

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        return self._func(context)


def as_rule(rule: ValidationRule | RuleCallable) -> ValidationRule:
    """Wrap callables so the validator only deals with ValidationRule."""
    if isinstance(rule, ValidationRule):
        return rule
    if callable(rule):
        return FunctionRule(rule)
    raise TypeError(f"Expected a ValidationRule or callable, got {type(rule).__name__}")
