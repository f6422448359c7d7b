from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

import pytest
from selenium import webdriver
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from selenium.webdriver import ChromeOptions, FirefoxOptions

from bylocator.core.locator import By


@dataclass
class RecordingContext:
    """Search context double that answers from a fixed table and records every call."""

    results: dict[By, list] = field(default_factory=dict)
    calls: list[tuple[str, By]] = field(default_factory=list)
    raises: dict[By, Exception] = field(default_factory=dict)

    def find_element(self, locator: By):
        self.calls.append(("find_element", locator))
        if locator in self.raises:
            raise self.raises[locator]
        matches = self.results.get(locator, [])
        if not matches:
            raise NoSuchElementException(f"Unable to locate element: {locator}")
        return matches[0]

    def find_elements(self, locator: By) -> list:
        self.calls.append(("find_elements", locator))
        if locator in self.raises:
            raise self.raises[locator]
        return list(self.results.get(locator, []))


@dataclass
class FakeWebDriver:
    """Stands in for a Selenium WebDriver; keyed by the raw (using, value) wire pair."""

    elements: dict[tuple[str, str], list] = field(default_factory=dict)
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    def find_element(self, by: str, value: str):
        self.calls.append(("find_element", by, value))
        matches = self.elements.get((by, value), [])
        if not matches:
            raise NoSuchElementException(f"no such element: {by}={value}")
        return matches[0]

    def find_elements(self, by: str, value: str) -> list:
        self.calls.append(("find_elements", by, value))
        return list(self.elements.get((by, value), []))


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def start_browser(browser_name: str, headless: bool = True):
    normalized = browser_name.lower()
    if normalized == "chrome":
        options = ChromeOptions()
        if headless:
            options.add_argument("--headless=new")
        return webdriver.Chrome(options=options)
    if normalized == "firefox":
        options = FirefoxOptions()
        if headless:
            options.add_argument("-headless")
        return webdriver.Firefox(options=options)
    raise ValueError(f"Unsupported browser: {browser_name}")


@contextmanager
def managed_driver(browser_name: str) -> Iterator[object]:
    try:
        driver = start_browser(browser_name)
    except WebDriverException as exc:
        pytest.skip(f"WebDriver could not start for {browser_name}: {exc}")
    driver.implicitly_wait(0)
    try:
        yield driver
    finally:
        driver.quit()
