"""
Shared fixtures.

``FakeLocator`` stands in for a Playwright ``Locator`` in tests that only care
about which elements the editors act on and in which order. Sub-locators are
cached by selector, so a test can rebuild the locator an editor should have
used and compare it by identity. Every action is appended to a shared log as a
``(path, action, *args)`` tuple.
"""

import pytest

from playwright.sync_api import Error as PlaywrightError

from form_e2e import browser, extensions


class FakeLocator:
    def __init__(self, path: str, log: list, page: "FakeLocator" = None):
        self.path = path
        self.log = log
        self._page = page if page is not None else self
        self._children = {}

        # Canned answers for queries
        self.count_value = 0
        self.texts = []
        self.text = ""
        self.html = ""
        self.tag = "div"
        self.items = []

    def __repr__(self):
        return f"FakeLocator({self.path!r})"

    def _child(self, key: str) -> "FakeLocator":
        if key not in self._children:
            self._children[key] = FakeLocator(f"{self.path} > {key}", self.log, self._page)
        return self._children[key]

    @property
    def page(self) -> "FakeLocator":
        return self._page

    @property
    def last(self) -> "FakeLocator":
        return self._child("last")

    def locator(self, selector: str) -> "FakeLocator":
        return self._child(selector)

    def frame_locator(self, selector: str) -> "FakeLocator":
        return self._child(f"frame({selector})")

    def nth(self, index: int) -> "FakeLocator":
        return self._child(f"nth({index})")

    def click(self) -> None:
        self.log.append((self.path, "click"))

    def clear(self) -> None:
        self.log.append((self.path, "clear"))

    def press_sequentially(self, text: str) -> None:
        self.log.append((self.path, "type", text))

    def press(self, key: str) -> None:
        self.log.append((self.path, "press", key))

    def evaluate(self, expression: str):
        self.log.append((self.path, "evaluate", expression))
        return self.tag

    def count(self) -> int:
        self.log.append((self.path, "count"))
        return self.count_value

    def all(self) -> list:
        return list(self.items)

    def all_inner_texts(self) -> list:
        return list(self.texts)

    def inner_text(self) -> str:
        return self.text

    def inner_html(self) -> str:
        return self.html


def actions_of(log: list, action: str) -> list:
    """Paths (plus arguments) of all logged actions of one kind."""
    return [entry[0] if len(entry) == 2 else (entry[0],) + entry[2:] for entry in log if entry[1] == action]


class RecordingWidget:
    """A non-interactive widget that records what it was asked to do."""

    def __init__(self):
        self.customized = []
        self.checked = []

    def customize_widget(self, modal, *args):
        self.customized.append((modal, args))

    def expect_widget_details_to_match(self, element, *args):
        self.checked.append((element, args))


@pytest.fixture
def action_log():
    return []


@pytest.fixture
def fake_page(action_log):
    return FakeLocator("page", action_log)


@pytest.fixture
def container(fake_page):
    return fake_page.locator("#field")


@pytest.fixture
def math_widget():
    widget = RecordingWidget()
    extensions.register_noninteractive("Math", widget)
    yield widget
    extensions.unregister_noninteractive("Math")


@pytest.fixture(scope="module")
def live_page():
    """A real headless Chromium page; tests using it skip if no browser is installed."""
    try:
        _, page = browser.start_browser(headless=True)
    except PlaywrightError as e:
        browser.close()
        pytest.skip(f"Chromium not available: {e}")

    try:
        yield page
    finally:
        browser.close()
