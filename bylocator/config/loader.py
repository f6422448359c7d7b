from __future__ import annotations

import json
import logging
from pathlib import Path

from bylocator.config.schema import LocatorCatalog

log = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates a JSON locator catalog."""

    @staticmethod
    def load(path: str | Path) -> LocatorCatalog:
        config_path = Path(path)
        with config_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        catalog = LocatorCatalog.model_validate(payload)
        log.info("Loaded %d locators from %s", len(catalog.locators), config_path)
        return catalog
