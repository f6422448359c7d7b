from __future__ import annotations

import logging
from time import monotonic

from selenium.common.exceptions import InvalidSelectorException, NoSuchElementException

from bylocator.config.schema import FinderSettings, LocatorCatalog
from bylocator.core.locator import By
from bylocator.core.metadata import LookupRecord
from bylocator.core.serializer import to_wire
from bylocator.logging.audit import LookupAuditLogger
from bylocator.utils.wait import wait_until

log = logging.getLogger(__name__)


class LocatorFinder:
    """Caller-side lookup over a search context, with fallbacks and polling.

    Locators themselves never retry; this is where a caller opts into it.
    """

    def __init__(
        self,
        context,
        settings: FinderSettings | None = None,
        audit_logger: LookupAuditLogger | None = None,
        catalog: LocatorCatalog | None = None,
    ) -> None:
        self.context = context
        self.settings = settings or FinderSettings()
        self.audit_logger = audit_logger
        self.catalog = catalog

    @classmethod
    def from_catalog(cls, context, catalog: LocatorCatalog) -> LocatorFinder:
        settings = catalog.settings
        audit_logger = LookupAuditLogger(settings.audit_root) if settings.audit_root else None
        return cls(context, settings=settings, audit_logger=audit_logger, catalog=catalog)

    def find_key(self, element_key: str, timeout: float | None = None):
        if self.catalog is None:
            raise KeyError(f"No catalog configured; cannot resolve element key: {element_key}")
        return self.find(*self.catalog.candidates(element_key), timeout=timeout, element_key=element_key)

    def find(self, *locators: By, timeout: float | None = None, element_key: str = ""):
        """Returns the first element matched by any locator, trying them in order.

        Raises ``NoSuchElementException`` once the timeout elapses with no match.
        """

        if not locators:
            raise ValueError("find() needs at least one locator")
        duration = self.settings.default_timeout_seconds if timeout is None else timeout
        started = monotonic()
        record = LookupRecord(
            element_key=element_key,
            locator=str(locators[0]),
            wire=self._wire(locators[0]),
            candidates=[str(locator) for locator in locators],
        )
        last_error: InvalidSelectorException | None = None

        def attempt():
            nonlocal last_error
            for locator in locators:
                log.debug("Looking up %s", locator)
                try:
                    matches = locator.find_elements(self.context)
                except InvalidSelectorException as exc:
                    log.warning("Skipping invalid selector %s: %s", locator, exc.msg)
                    last_error = exc
                    continue
                if matches:
                    return locator, matches
            return None

        try:
            result = wait_until(attempt, duration, self.settings.poll_interval_seconds)
            if not result:
                error = NoSuchElementException(
                    f"No element matched {', '.join(record.candidates)} within {duration}s"
                )
                raise error from last_error
            matched_by, matches = result
            record.matched_by = str(matched_by)
            record.match_count = len(matches)
            record.success = True
            return matches[0]
        except Exception as exc:  # noqa: BLE001
            record.failure_type = type(exc).__name__
            raise
        finally:
            record.elapsed_ms = round((monotonic() - started) * 1000, 3)
            if self.audit_logger is not None:
                self.audit_logger.write(record)

    def find_all(self, locator: By, element_key: str = "") -> list:
        """Returns every match for ``locator``; an empty list when nothing matches."""

        started = monotonic()
        matches = list(locator.find_elements(self.context) or [])
        if self.audit_logger is not None:
            self.audit_logger.write(
                LookupRecord(
                    element_key=element_key,
                    locator=str(locator),
                    wire=self._wire(locator),
                    candidates=[str(locator)],
                    matched_by=str(locator) if matches else "",
                    match_count=len(matches),
                    success=True,
                    elapsed_ms=round((monotonic() - started) * 1000, 3),
                )
            )
        return matches

    def _wire(self, locator: By) -> dict[str, str]:
        if locator.strategy is None:
            return {}
        return to_wire(locator, self.settings.wire_dialect).model_dump()
