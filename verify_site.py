"""Smoke test for the static marketing page.

Loads index.html from this directory in headless Chromium, checks that every
landmark section is on the page and prints whatever the console reported on
the way. Exits with 1 when a landmark is missing or the page cannot be loaded.
"""
import sys
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from site_checklist import (
    CHECKS,
    CONTACT_FORM,
    IMAGES_SELECTOR,
    MOBILE_MENU_BUTTON,
    NAV_LINKS_SELECTOR,
)
from site_findings import DiagnosticLog, Finding, RunResult
from site_report import Reporter

TARGET = Path(__file__).resolve().parent / "index.html"
HEADLESS = True
WAIT_UNTIL = "networkidle"


class NavigationError(Exception):
    """The target document could not be loaded."""


def check_element(page, check):
    return Finding.for_check(check, page.query_selector(check.selector) is not None)


def verify(target=TARGET, reporter=None, playwright_factory=None):
    reporter = reporter or Reporter()
    playwright_factory = playwright_factory or sync_playwright
    result = RunResult()
    log = DiagnosticLog()

    def record(check):
        finding = check_element(page, check)
        result.findings.append(finding)
        reporter.finding(finding)

    with playwright_factory() as p:
        browser = p.chromium.launch(headless=HEADLESS)
        try:
            context = browser.new_context()
            page = context.new_page()

            # 1. Listen before navigating so load-time errors are captured
            page.on("console", log.on_console)
            page.on("pageerror", log.on_page_error)

            # 2. Load the page and wait for the network to settle
            url = Path(target).resolve().as_uri()
            try:
                page.goto(url, wait_until=WAIT_UNTIL)
            except PlaywrightError as e:
                raise NavigationError(e.message) from e
            reporter.page_loaded()

            # 3. Landmark sections
            for check in CHECKS:
                record(check)

            # 4. Counts are informational
            result.image_count = len(page.query_selector_all(IMAGES_SELECTOR))
            result.nav_link_count = len(page.query_selector_all(NAV_LINKS_SELECTOR))
            reporter.counts(result)

            # 5. Contact form and mobile menu
            record(CONTACT_FORM)
            record(MOBILE_MENU_BUTTON)
        finally:
            browser.close()

    result.diagnostics = log.drain()
    return result


def main():
    reporter = Reporter()
    try:
        result = verify(TARGET, reporter)
    except NavigationError as e:
        reporter.navigation_failed(e)
        return 1
    except PlaywrightError as e:
        reporter.navigation_failed(e.message)
        return 1
    return reporter.summary(result)


if __name__ == "__main__":
    sys.exit(main())
