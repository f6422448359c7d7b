from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from bylocator.core.locator import By
from bylocator.core.strategy import Strategy

_CSS = Strategy.CSS_SELECTOR.keyword
_EMPTY_STRING = '""'


class WireDialect(str, Enum):
    """How a locator is rendered for the remote end.

    ``compatibility`` keeps the legacy ``id`` strategy on the wire; ``strict``
    follows the W3C protocol, which only knows css, link text, partial link
    text, tag name and xpath, so ids are rewritten as CSS as well.
    """

    COMPATIBILITY = "compatibility"
    STRICT = "strict"


class WireBlob(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    using: str
    value: str

    @field_validator("using")
    @classmethod
    def validate_using(cls, value: str) -> str:
        known = {strategy.keyword for strategy in Strategy}
        if value not in known:
            raise ValueError(f"Unknown locator strategy {value!r}; expected one of {sorted(known)}")
        return value


def to_wire(locator: By, dialect: WireDialect | str = WireDialect.COMPATIBILITY) -> WireBlob:
    strategy = locator.strategy
    if strategy is None:
        raise TypeError(f"{type(locator).__name__} has no strategy and cannot be serialized")
    value = locator.value
    if strategy is Strategy.NAME:
        return WireBlob(using=_CSS, value=f"*[name={css_escape(value) or _EMPTY_STRING}]")
    if strategy is Strategy.CLASS_NAME:
        return WireBlob(using=_CSS, value=f".{css_escape(value)}")
    if strategy is Strategy.ID and WireDialect(dialect) is WireDialect.STRICT:
        if not value:
            return WireBlob(using=_CSS, value=f"*[id={_EMPTY_STRING}]")
        return WireBlob(using=_CSS, value=f"#{css_escape(value)}")
    return WireBlob(using=strategy.keyword, value=value)


def from_wire(blob: WireBlob | Mapping[str, Any]) -> By:
    """Rebuilds a locator from a wire blob.

    Name and class-name locators travel as CSS, so they come back as
    ``By.css_selector``.
    """

    if not isinstance(blob, WireBlob):
        blob = WireBlob.model_validate(dict(blob))
    return By.using(blob.using, blob.value)


def json_default(obj: Any) -> dict[str, str]:
    """``default=`` hook so ``json.dumps`` can emit locators inside command payloads."""

    if isinstance(obj, By):
        return to_wire(obj).model_dump()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def css_escape(value: str) -> str:
    """Escapes ``value`` for use as a CSS identifier, following CSSOM ``CSS.escape()``."""

    escaped: list[str] = []
    for index, char in enumerate(value):
        code = ord(char)
        if code == 0:
            escaped.append("\ufffd")
        elif 0x01 <= code <= 0x1F or code == 0x7F:
            escaped.append(f"\\{code:x} ")
        elif char.isascii() and char.isdigit() and (index == 0 or (index == 1 and value[0] == "-")):
            escaped.append(f"\\{code:x} ")
        elif index == 0 and char == "-" and len(value) == 1:
            escaped.append("\\-")
        elif code >= 0x80 or char in "-_" or (char.isascii() and char.isalnum()):
            escaped.append(char)
        else:
            escaped.append(f"\\{char}")
    return "".join(escaped)
