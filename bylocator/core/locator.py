from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Mapping

from selenium.common.exceptions import NoSuchElementException

from bylocator.core.strategy import Strategy
from bylocator.core.validation import validate

if TYPE_CHECKING:
    from bylocator.core.context import SearchContext

UNKNOWN_LOCATOR = "[unknown locator]"
_FIXED_METHODS = frozenset({"__eq__", "__hash__"})


class _FixedEquality(type):
    """Rejects locator subclasses that replace equality, in the class body or afterwards."""

    def __setattr__(cls, name: str, value: Any) -> None:
        if name in _FIXED_METHODS and any(isinstance(base, _FixedEquality) for base in cls.__bases__):
            raise TypeError(_redefinition_message(cls, [name]))
        super().__setattr__(name, value)


def _redefinition_message(cls: type, names: list[str]) -> str:
    return f"{cls.__name__} may not redefine {', '.join(names)}; locator equality is fixed to (strategy, value)"


@dataclass(frozen=True, eq=False, repr=False)
class By(metaclass=_FixedEquality):
    """Immutable (strategy, value) pair used to ask a search context for elements.

    Instances come from the strategy factories (``By.id``, ``By.xpath``, ...)
    and are validated once, on construction. Subclasses may leave the strategy
    unset and supply their own ``find_elements``; equality and hashing are
    fixed here and never consult discovery methods.
    """

    strategy: Strategy | None = None
    value: str | None = None

    def __post_init__(self) -> None:
        if self.strategy is None:
            if type(self) is By:
                raise TypeError("By requires a strategy; use a factory such as By.id() or By.xpath()")
            return
        strategy = Strategy.parse(self.strategy)
        object.__setattr__(self, "strategy", strategy)
        validate(strategy, self.value)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        overridden = sorted(_FIXED_METHODS & set(vars(cls)))
        if overridden:
            raise TypeError(_redefinition_message(cls, overridden))

    @classmethod
    def using(cls, strategy: Strategy | str, value: str) -> By:
        return cls(Strategy.parse(strategy), value)

    @classmethod
    def id(cls, value: str) -> By:
        return cls.using(Strategy.ID, value)

    @classmethod
    def name(cls, value: str) -> By:
        return cls.using(Strategy.NAME, value)

    @classmethod
    def class_name(cls, value: str) -> By:
        """Locates by a single class token; compound names raise ``InvalidSelectorError``."""
        return cls.using(Strategy.CLASS_NAME, value)

    @classmethod
    def css_selector(cls, value: str) -> By:
        return cls.using(Strategy.CSS_SELECTOR, value)

    @classmethod
    def link_text(cls, value: str) -> By:
        return cls.using(Strategy.LINK_TEXT, value)

    @classmethod
    def partial_link_text(cls, value: str) -> By:
        return cls.using(Strategy.PARTIAL_LINK_TEXT, value)

    @classmethod
    def tag_name(cls, value: str) -> By:
        return cls.using(Strategy.TAG_NAME, value)

    @classmethod
    def xpath(cls, value: str) -> By:
        return cls.using(Strategy.XPATH, value)

    def find_element(self, context: SearchContext):
        if self.strategy is not None:
            return context.find_element(self)
        elements = self.find_elements(context)
        if not elements:
            raise NoSuchElementException(f"Cannot locate an element using {self}")
        return elements[0]

    def find_elements(self, context: SearchContext) -> list:
        if self.strategy is None:
            raise NotImplementedError(f"{type(self).__name__} must override find_elements()")
        return list(context.find_elements(self))

    def to_json(self) -> dict[str, str]:
        from bylocator.core.serializer import to_wire  # noqa: PLC0415

        return to_wire(self).model_dump()

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> By:
        from bylocator.core.serializer import from_wire  # noqa: PLC0415

        return from_wire(payload)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, By):
            return NotImplemented
        return self.strategy is other.strategy and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.strategy, self.value))

    def __str__(self) -> str:
        if self.strategy is None:
            return UNKNOWN_LOCATOR
        return f"{self.strategy.label}: {self.value}"

    def __repr__(self) -> str:
        if self.strategy is None:
            return f"<{type(self).__name__} {UNKNOWN_LOCATOR}>"
        return f"By.{self.strategy.name.lower()}({self.value!r})"
