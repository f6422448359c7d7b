from selenium.common.exceptions import InvalidSelectorException, WebDriverException


class LocatorError(WebDriverException):
    """Base class for errors raised by locator construction."""


class LocatorValidationError(LocatorError):
    """Raised when a locator value is missing or not text."""


class InvalidSelectorError(LocatorValidationError, InvalidSelectorException):
    """Raised when a locator value breaks its strategy's syntax rule."""
