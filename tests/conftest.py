"""Shared fixtures for the test suite."""

from __future__ import annotations

from typing import Any

import pytest

from perfbudget import config
from perfbudget.models import resources
from perfbudget.utils import logger

# ── Network Record Factories ────────────────────────────────────


def make_record(
    url: str,
    resource_type: str | None = None,
    transfer_size: int = 0,
) -> resources.NetworkRecord:
    """Build a network record the way the measurement layer reports it."""
    return resources.NetworkRecord.model_validate(
        {"url": url, "resourceType": resource_type, "transferSize": transfer_size}
    )


@pytest.fixture()
def page_records() -> list[resources.NetworkRecord]:
    """Two first-party and two third-party requests (160 bytes)."""
    return [
        make_record("http://example.com/file.html", "Document", 30),
        make_record("http://example.com/app.js", "Script", 10),
        make_record("http://third-party.com/script.js", "Script", 50),
        make_record("http://third-party.com/file.jpg", "Image", 70),
    ]


@pytest.fixture()
def cdn_records() -> list[resources.NetworkRecord]:
    """Requests spread over a root domain, its CDN and other hosts."""
    return [
        make_record("http://example.com/file.html", "Document", 30),
        make_record("http://cdn.example.com/app.js", "Script", 10),
        make_record("http://my-cdn.com/styles.css", "Stylesheet", 25),
        make_record("http://third-party.com/script.js", "Script", 50),
        make_record("http://third-party.com/file.jpg", "Image", 70),
    ]


# ── Budget Fixtures ─────────────────────────────────────────────


@pytest.fixture()
def budget_json() -> list[dict[str, Any]]:
    """Raw budget file contents with every section populated."""
    return [
        {
            "path": "/",
            "resourceSizes": [
                {"resourceType": "script", "budget": 123},
                {"resourceType": "image", "budget": 456},
            ],
            "resourceCounts": [
                {"resourceType": "total", "budget": 100},
                {"resourceType": "third-party", "budget": 10},
            ],
            "timings": [
                {"metric": "interactive", "budget": 2000, "tolerance": 1000},
                {"metric": "first-contentful-paint", "budget": 1000, "tolerance": 500},
            ],
            "options": {"firstPartyHostnames": ["example.com", "*.cdn.example.com"]},
        },
        {
            "path": "/second-path",
            "resourceSizes": [{"resourceType": "script", "budget": 1000}],
        },
    ]


@pytest.fixture()
def settings() -> config.EngineSettings:
    """Engine settings with the built-in defaults."""
    return config.EngineSettings()


@pytest.fixture(autouse=True)
def _fresh_log_buffer() -> None:
    """Start every test with an empty log buffer."""
    logger.clear_log_buffer()
