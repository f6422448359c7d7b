from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Callable, NamedTuple

from bylocator.core.validation import any_value, single_class_token


class StrategySpec(NamedTuple):
    keyword: str
    label: str
    validate: Callable[[str], None]


class Strategy(Enum):
    """Closed set of element search strategies, valued by their wire keyword."""

    ID = "id"
    NAME = "name"
    CLASS_NAME = "class name"
    CSS_SELECTOR = "css selector"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    TAG_NAME = "tag name"
    XPATH = "xpath"

    @property
    def spec(self) -> StrategySpec:
        return STRATEGY_TABLE[self]

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return STRATEGY_TABLE[self].label

    @classmethod
    def parse(cls, text: str | Strategy) -> Strategy:
        """Resolves a keyword, member name or label suffix to a strategy.

        ``"css selector"``, ``"CSS_SELECTOR"``, ``"cssSelector"`` and
        ``"By.cssSelector"`` all resolve to ``Strategy.CSS_SELECTOR``.
        """

        if isinstance(text, Strategy):
            return text
        if not isinstance(text, str):
            raise ValueError(f"Unknown locator strategy: {text!r}")
        candidate = text.strip()
        for strategy in cls:
            spec = STRATEGY_TABLE[strategy]
            if candidate == spec.keyword:
                return strategy
            if candidate.upper() == strategy.name:
                return strategy
            if candidate in (spec.label, spec.label.removeprefix("By.")):
                return strategy
        raise ValueError(
            f"Unknown locator strategy: {text!r}. "
            f"Valid strategies: {[strategy.keyword for strategy in cls]}"
        )


STRATEGY_TABLE: MappingProxyType[Strategy, StrategySpec] = MappingProxyType(
    {
        Strategy.ID: StrategySpec("id", "By.id", any_value),
        Strategy.NAME: StrategySpec("name", "By.name", any_value),
        Strategy.CLASS_NAME: StrategySpec("class name", "By.className", single_class_token),
        Strategy.CSS_SELECTOR: StrategySpec("css selector", "By.cssSelector", any_value),
        Strategy.LINK_TEXT: StrategySpec("link text", "By.linkText", any_value),
        Strategy.PARTIAL_LINK_TEXT: StrategySpec("partial link text", "By.partialLinkText", any_value),
        Strategy.TAG_NAME: StrategySpec("tag name", "By.tagName", any_value),
        Strategy.XPATH: StrategySpec("xpath", "By.xpath", any_value),
    }
)
