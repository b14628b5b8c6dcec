"""
Fakes standing in for a WebDriver session in framework unit tests.

The fake driver answers find_element from a locator table and records every
command it receives, so tests can assert ordering and "no navigation" cases
without a browser.
"""

from collections import defaultdict

import pytest
from selenium.common.exceptions import NoSuchElementException

from testsuites.ui_testing.framework.config_loader import AppSettings


class FakeElement:
    def __init__(self, displayed=True, enabled=True, text=""):
        self.displayed = displayed
        self.enabled = enabled
        self.text = text
        self.sent_keys = []
        self.clicks = 0
        self.enabled_checks = 0

    def is_displayed(self):
        return self.displayed

    def is_enabled(self):
        self.enabled_checks += 1
        return self.enabled

    def click(self):
        self.clicks += 1

    def send_keys(self, *value):
        self.sent_keys.append("".join(value))


class FakeService:
    def __init__(self, error=None):
        self.error = error
        self.stops = 0

    def stop(self):
        self.stops += 1
        if self.error:
            raise self.error


class FakeDriver:
    def __init__(self):
        self.elements = {}
        self.appear_after = {}
        self.lookups = defaultdict(int)
        self.commands = []
        self.current_url = "about:blank"
        self.service = FakeService()
        self.quit_error = None
        self.maximize_error = None
        self.screenshot_error = None
        self.screenshot_result = True

    def add_element(self, locator, element=None, appear_after=0):
        element = element or FakeElement()
        self.elements[locator] = element
        self.appear_after[locator] = appear_after
        return element

    def find_element(self, by, value):
        locator = (by, value)
        self.lookups[locator] += 1
        self.commands.append(("find_element", locator))
        if locator in self.elements and self.lookups[locator] > self.appear_after[locator]:
            return self.elements[locator]
        raise NoSuchElementException(f"Unable to locate element: {value}")

    def get(self, url):
        self.commands.append(("get", url))
        self.current_url = url

    def maximize_window(self):
        self.commands.append(("maximize_window",))
        if self.maximize_error:
            raise self.maximize_error

    def get_screenshot_as_file(self, filename):
        self.commands.append(("screenshot", filename))
        if self.screenshot_error:
            raise self.screenshot_error
        if not self.screenshot_result:
            return False
        with open(filename, "wb") as f:
            f.write(b"\x89PNG\r\n\x1a\n")
        return True

    def quit(self):
        self.commands.append(("quit",))
        if self.quit_error:
            raise self.quit_error


class FakeFactory:
    """Stands in for WebDriverFactory: hands out a prepared driver or raises."""

    def __init__(self, driver=None, error=None):
        self.driver = driver
        self.error = error
        self.created = []

    def create(self, browser):
        self.created.append(browser)
        if self.error:
            raise self.error
        return self.driver


@pytest.fixture
def fake_driver():
    return FakeDriver()


@pytest.fixture
def make_driver():
    return FakeDriver


@pytest.fixture
def make_element():
    return FakeElement


@pytest.fixture
def fake_factory(fake_driver):
    return FakeFactory(driver=fake_driver)


@pytest.fixture
def make_factory():
    return FakeFactory


@pytest.fixture
def settings():
    return AppSettings(
        {
            "TestUserEmail": "demo.user@example.com",
            "TestUserPassword": "demo_password",
        }
    )
