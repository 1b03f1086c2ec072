"""
Browser session for form end-to-end tests.

Holds the single Playwright browser used by a test run and a few helpers for
getting around the application under test. Editors and checkers in this package
only need a ``Locator``; use ``get_page().locator(...)`` to obtain one.

## Configuration

    FORM_E2E_HOST        host of the application (default: localhost)
    FORM_E2E_PORT        port of the application (default: 8181)
    FORM_E2E_HEADLESS    run without a window (default: 1)
    FORM_E2E_TIMEOUT_MS  default timeout for every action (default: 5000)
"""

import os
from pathlib import Path
from typing import Optional

from playwright.sync_api import sync_playwright, Browser, Page

# Configuration
SERVER_HOST = os.getenv("FORM_E2E_HOST", "localhost")
SERVER_PORT = os.getenv("FORM_E2E_PORT", "8181")
BASE_URL = f"http://{SERVER_HOST}:{SERVER_PORT}"
HEADLESS = os.getenv("FORM_E2E_HEADLESS", "1").lower() not in ("0", "false", "no", "off")
DEFAULT_TIMEOUT_MS = int(os.getenv("FORM_E2E_TIMEOUT_MS", "5000"))

# Global browser and page
_playwright = None
_browser: Browser = None
_page: Page = None


def start_browser(headless: Optional[bool] = None) -> tuple[Browser, Page]:
    """
    Launch Chromium and open a page.

    Args:
        headless: Overrides FORM_E2E_HEADLESS when given

    Returns:
        Tuple of (browser, page)
    """
    global _playwright, _browser, _page

    if headless is None:
        headless = HEADLESS

    _playwright = sync_playwright().start()
    try:
        _browser = _playwright.chromium.launch(headless=headless)
    except Exception:
        _playwright.stop()
        _playwright = None
        raise

    _page = _browser.new_page(viewport={"width": 1280, "height": 720})
    _page.set_default_timeout(DEFAULT_TIMEOUT_MS)
    print(f"Browser started (headless={headless}).")
    print(f"Application URL: {BASE_URL}")

    return _browser, _page


def get_page() -> Page:
    """Get the current page object."""
    if _page is None:
        raise RuntimeError("Browser not started. Call start_browser() first.")
    return _page


def url_for(path: str) -> str:
    """Resolve a path against BASE_URL; absolute URLs are returned unchanged."""
    if "://" in path:
        return path
    return f"{BASE_URL}/{path.lstrip('/')}"


def goto(path: str) -> None:
    """Navigate to a URL or to a path of the application."""
    url = url_for(path)
    get_page().goto(url)
    print(f"Navigated to: {url}")


def wait_for_load(timeout: int = None) -> None:
    """Wait until the page has stopped fetching (defaults to FORM_E2E_TIMEOUT_MS)."""
    if timeout is None:
        timeout = DEFAULT_TIMEOUT_MS
    get_page().wait_for_load_state("networkidle", timeout=timeout)
    print("Page loaded.")


def screenshot(path: str = None, full_page: bool = False) -> bytes:
    """
    Take a screenshot of the current page.

    Handy when an editor step fails and the page state needs inspecting.

    Args:
        path: Optional path to save the screenshot
        full_page: Whether to capture the full scrollable page

    Returns:
        Screenshot as bytes
    """
    if path is None:
        path = str(Path.cwd() / "screenshot.png")

    screenshot_bytes = get_page().screenshot(path=path, full_page=full_page)
    print(f"Screenshot saved to: {path}")
    return screenshot_bytes


def close() -> None:
    """Close the browser."""
    global _playwright, _browser, _page
    if _browser:
        _browser.close()
        _browser = None
        _page = None
    if _playwright:
        _playwright.stop()
        _playwright = None
    print("Browser closed.")
