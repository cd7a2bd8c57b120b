"""Character set rule."""

from __future__ import annotations

import re

from openiban.validation.context import ValidationRuleContext
from openiban.validation.results import ErrorResult, IllegalCharactersResult
from openiban.validation.rules.base import ValidationRule

_LEGAL = re.compile(r"[A-Z0-9]+")


class IllegalCharactersRule(ValidationRule):
    """Rejects values containing anything other than ``A-Z`` and ``0-9``.

    Runs first: every later rule assumes a clean character set. An empty value
    has no legal characters and is rejected here as well.
    """

    def validate(self, context: ValidationRuleContext) -> ErrorResult | None:
        if _LEGAL.fullmatch(context.value) is None:
            return IllegalCharactersResult()
        return None
