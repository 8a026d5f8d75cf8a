from pathlib import Path
from types import SimpleNamespace

import pytest

from site_checklist import (
    CHECKS,
    CONTACT_FORM,
    IMAGES_SELECTOR,
    MOBILE_MENU_BUTTON,
    NAV_LINKS_SELECTOR,
)

FIXTURES = Path(__file__).parent / "fixtures"


class FakePage:
    """Stands in for a Playwright page.

    selectors maps a selector to the number of elements it matches. events
    are (name, payload) pairs delivered to registered handlers during goto.
    """

    def __init__(self, selectors=None, events=(), goto_error=None, query_error=None):
        self.selectors = dict(selectors or {})
        self.events = list(events)
        self.goto_error = goto_error
        self.query_error = query_error
        self.handlers = {}
        self.goto_calls = []
        self.queried = []

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    def goto(self, url, wait_until=None):
        self.goto_calls.append((url, wait_until))
        for name, payload in self.events:
            for handler in self.handlers.get(name, []):
                handler(payload)
        if self.goto_error is not None:
            raise self.goto_error

    def query_selector(self, selector):
        self.queried.append(selector)
        if self.query_error is not None:
            raise self.query_error
        return object() if self.selectors.get(selector, 0) else None

    def query_selector_all(self, selector):
        return [object() for _ in range(self.selectors.get(selector, 0))]


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.closed = False

    def new_context(self):
        return SimpleNamespace(new_page=lambda: self.page)

    def close(self):
        self.closed = True


class FakePlaywright:
    """Context manager returned by the playwright factory."""

    def __init__(self, page):
        self.browser = FakeBrowser(page)
        self.launch_kwargs = None
        self.stopped = False
        self.chromium = SimpleNamespace(launch=self._launch)

    def _launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.stopped = True
        return False


class RecordingReporter:
    def __init__(self):
        self.findings = []
        self.counts_calls = 0
        self.loaded = False

    def page_loaded(self):
        self.loaded = True

    def finding(self, finding):
        self.findings.append(finding)

    def counts(self, result):
        self.counts_calls += 1


def console(kind, text):
    return SimpleNamespace(type=kind, text=text)


def page_error(message):
    return SimpleNamespace(message=message)


@pytest.fixture
def complete_selectors():
    selectors = {check.selector: 1 for check in CHECKS}
    selectors[CONTACT_FORM.selector] = 1
    selectors[MOBILE_MENU_BUTTON.selector] = 1
    selectors[IMAGES_SELECTOR] = 4
    selectors[NAV_LINKS_SELECTOR] = 5
    return selectors


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def fake_playwright():
    """Builds a FakePlaywright around a FakePage made from the given kwargs."""

    def build(**page_kwargs):
        return FakePlaywright(FakePage(**page_kwargs))

    return build
