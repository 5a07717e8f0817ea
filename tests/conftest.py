"""Pytest fixtures shared by unit and integration tests."""

from pathlib import Path

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError, sync_playwright

from browser.controller import BrowserController
from config import SCHEMA, get_config


class FakeElement:
    """Stand-in for a Playwright locator."""

    def __init__(self, visible: bool = True) -> None:
        self.visible = visible
        self.waits: list[tuple[str, float]] = []

    def is_visible(self) -> bool:
        return self.visible

    def wait_for(self, state: str, timeout: float) -> None:
        self.waits.append((state, timeout))
        if not self.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")


class FakePage:
    """Stand-in for a Playwright page exposing title() and locator()."""

    def __init__(self, title: str = "", visible: bool = True) -> None:
        self._title = title
        self.element = FakeElement(visible)
        self.selectors: list[str] = []
        self.title_calls = 0

    def title(self) -> str:
        self.title_calls += 1
        return self._title

    def locator(self, selector: str) -> FakeElement:
        self.selectors.append(selector)
        return self.element


@pytest.fixture
def env(monkeypatch):
    """Clear every configuration key and return monkeypatch for setting new ones."""
    for entry in SCHEMA:
        monkeypatch.delenv(entry.env_key, raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()


@pytest.fixture
def make_page():
    """Factory for stub pages with a given title and heading visibility."""
    return FakePage


@pytest.fixture
def fake_page():
    return FakePage(title="  Google  ")


def _playwright_available() -> bool:
    try:
        with sync_playwright() as pw:
            return Path(pw.chromium.executable_path).exists()
    except Exception:
        return False


@pytest.fixture
def browser():
    """Provide a started headless Playwright browser."""
    if not _playwright_available():
        pytest.skip("Playwright chromium is not installed")
    with BrowserController(headless=True, implicit_timeout=10) as controller:
        yield controller
