from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from bylocator.core.exceptions import InvalidSelectorError, LocatorValidationError

if TYPE_CHECKING:
    from bylocator.core.strategy import Strategy

_WHITESPACE = re.compile(r"\s")


def validate(strategy: Strategy, value: Any) -> str:
    """Runs the construction-time checks for ``strategy`` and returns the value untouched."""

    require_text(strategy.keyword, value)
    strategy.spec.validate(value)
    return value


def require_text(noun: str, value: Any) -> None:
    if value is None:
        raise LocatorValidationError(f"Cannot find elements when the {noun} is null.")
    if not isinstance(value, str):
        raise LocatorValidationError(
            f"Cannot find elements when the {noun} is not a string: {type(value).__name__}"
        )


def any_value(value: str) -> None:
    """CSS and XPath syntax is left to the engine; failures there are relayed."""


def single_class_token(value: str) -> None:
    if not value:
        raise InvalidSelectorError("Class name must not be empty")
    if _WHITESPACE.search(value):
        raise InvalidSelectorError(f"Compound class names not permitted: {value!r}")
