from __future__ import annotations

import json

import pytest

from bylocator.config.loader import ConfigLoader
from tests.helpers import RecordingContext


@pytest.fixture()
def recording_context():
    return RecordingContext()


@pytest.fixture()
def catalog_payload(tmp_path):
    return {
        "settings": {
            "default_timeout_seconds": 0,
            "poll_interval_seconds": 0.1,
            "wire_dialect": "strict",
            "audit_root": str(tmp_path / "audit"),
        },
        "locators": [
            {
                "key": "login_button",
                "strategy": "id",
                "value": "login-button",
                "fallbacks": [
                    {"strategy": "css selector", "value": "button[type='submit']"},
                    {"strategy": "xpath", "value": "//button[text()='Login']"},
                ],
            },
            {
                "key": "email_input",
                "strategy": "name",
                "value": "email",
            },
        ],
    }


@pytest.fixture()
def catalog(tmp_path, catalog_payload):
    config_path = tmp_path / "locators.json"
    config_path.write_text(json.dumps(catalog_payload), encoding="utf-8")
    return ConfigLoader.load(config_path)
