from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Sequence, runtime_checkable

from bylocator.core.serializer import WireDialect, to_wire

if TYPE_CHECKING:
    from bylocator.core.locator import By


@runtime_checkable
class SearchContext(Protocol):
    """Anything that can run a locator: a driver, an element, a test double.

    ``find_element`` raises when nothing matches; ``find_elements`` returns an
    empty sequence instead.
    """

    def find_element(self, locator: By) -> Any: ...

    def find_elements(self, locator: By) -> Sequence[Any]: ...


class RemoteSearchContext:
    """Runs locators against a Selenium WebDriver, WebElement or ShadowRoot."""

    def __init__(self, target, dialect: WireDialect | str = WireDialect.STRICT) -> None:
        self.target = target
        self.dialect = WireDialect(dialect)

    def find_element(self, locator: By):
        blob = to_wire(locator, self.dialect)
        return self.target.find_element(blob.using, blob.value)

    def find_elements(self, locator: By) -> list:
        blob = to_wire(locator, self.dialect)
        return self.target.find_elements(blob.using, blob.value) or []
