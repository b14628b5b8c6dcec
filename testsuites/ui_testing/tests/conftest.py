"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for settings,
browser session lifecycle and diagnostic screenshots.

Key Features:
- Settings loaded once per session and injected into page objects
- One browser session per test class (started before the first test,
  torn down after the last)
- Screenshot of the final page state after every test

================================================================================
"""

from typing import Generator

import pytest
from loguru import logger
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import AppSettings, ConfigLoader
from testsuites.ui_testing.framework.exceptions import ScreenshotError
from testsuites.ui_testing.framework.models import BrowserType
from testsuites.ui_testing.pages.microsoft_login_page import MicrosoftLoginPage
from uitest_tools.report_tools.allure_utils import attach_text


# ================================================================================
# Settings Fixtures
# ================================================================================

@pytest.fixture(scope="session")
def app_settings(request) -> AppSettings:
    """
    Session-scoped settings loaded from --settings / APPSETTINGS_PATH.
    """
    return ConfigLoader(request.config.getoption("--settings")).load()


@pytest.fixture(scope="session")
def browser_type(request) -> BrowserType:
    """Browser engine selected with --browser."""
    return BrowserType.parse(request.config.getoption("--browser"))


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture(scope="class")
def browser_manager(browser_type: BrowserType) -> Generator[BrowserManager, None, None]:
    """
    Class-scoped browser session.

    Teardown runs whatever the test outcome; its own failures are logged by
    the manager and do not replace test failures.
    """
    manager = BrowserManager(browser_type)
    manager.start()
    yield manager
    manager.teardown()


@pytest.fixture
def driver(browser_manager: BrowserManager) -> WebDriver:
    """Live WebDriver of the class session."""
    return browser_manager.driver


@pytest.fixture(autouse=True)
def screenshot_on_teardown(request) -> Generator[None, None, None]:
    """
    Capture '<test name>.png' after each test that uses a browser session.
    """
    yield

    if "browser_manager" not in request.fixturenames:
        return

    manager: BrowserManager = request.getfixturevalue("browser_manager")
    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and manager.is_active:
        logger.info(f"{request.node.name} failed, capturing final page state")
        try:
            attach_text(manager.driver.current_url, name="Current URL")
        except WebDriverException as e:
            logger.warning(f"Current URL unavailable: {e}")
    try:
        manager.capture_screenshot(f"{request.node.name}.png")
    except ScreenshotError as e:
        logger.warning(f"Screenshot for {request.node.name} skipped: {e}")


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def microsoft_login_page(driver: WebDriver, app_settings: AppSettings) -> MicrosoftLoginPage:
    """
    Provides MicrosoftLoginPage instance.
    """
    return MicrosoftLoginPage(driver, app_settings)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase report on the item (rep_setup / rep_call / rep_teardown)
    so fixtures can inspect the outcome.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
