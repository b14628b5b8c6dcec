"""
================================================================================
Browser Manager
================================================================================

Browser session lifecycle management for UI automation.

Features:
    - One WebDriver session per manager, created through WebDriverFactory
    - Explicit lifecycle: UNINITIALIZED -> ACTIVE -> TORN_DOWN
    - Screenshot capture with Allure attachment
    - Teardown that always runs both quit and dispose, and never raises

Test cases hold a BrowserManager rather than inheriting from a base class.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.remote.webdriver import WebDriver

from uitest_tools.common import ensure_directory
from uitest_tools.report_tools.allure_utils import attach_screenshot

from .constants import SCREENSHOT_ATTACHMENT_NAME, SCREENSHOT_DIR_NAME
from .driver_factory import WebDriverFactory
from .exceptions import EngineStartupError, ScreenshotError, SessionStateError
from .models import BrowserType


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    TORN_DOWN = "torn down"


class BrowserManager:
    """
    Owns one browser session for the duration of a test (or test class).

    Usage:
        with BrowserManager(BrowserType.CHROME) as manager:
            manager.driver.get("https://example.com")
            manager.capture_screenshot("example.png")

        # Or explicitly, e.g. from fixtures
        manager = BrowserManager("firefox")
        manager.start()
        try:
            ...
        finally:
            manager.teardown()
    """

    def __init__(
        self,
        browser: Union[BrowserType, str] = BrowserType.CHROME,
        factory: Optional[WebDriverFactory] = None,
        screenshot_dir: Optional[Union[str, Path]] = None,
        maximize: bool = True,
    ):
        """
        Initialize browser manager.

        Args:
            browser: Browser engine selector
            factory: Factory creating the session (default WebDriverFactory())
            screenshot_dir: Working directory for screenshots (default ./screenshots)
            maximize: Maximize the window once the session is started
        """
        self.browser = browser
        self.factory = factory or WebDriverFactory()
        self.screenshot_dir = Path(screenshot_dir) if screenshot_dir else Path.cwd() / SCREENSHOT_DIR_NAME
        self.maximize = maximize

        self._driver: Optional[WebDriver] = None
        self._state = SessionState.UNINITIALIZED

    def __enter__(self) -> "BrowserManager":
        """Context manager entry - start session."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - tear session down."""
        self.teardown()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state is SessionState.ACTIVE

    @property
    def driver(self) -> WebDriver:
        """
        Get the live session.

        Raises:
            SessionStateError: When the session is not active
        """
        if not self.is_active:
            raise SessionStateError("access the driver", self._state.value)
        return self._driver

    def start(self) -> WebDriver:
        """
        Create the session through the factory.

        Returns:
            The active WebDriver

        Raises:
            SessionStateError: When called on a started or torn-down manager
            UnsupportedEngineError: Unknown browser
            EngineStartupError: Engine failed to launch or to be prepared
        """
        if self._state is not SessionState.UNINITIALIZED:
            raise SessionStateError("start a session", self._state.value)

        driver = self.factory.create(self.browser)

        if self.maximize:
            try:
                driver.maximize_window()
            except WebDriverException as e:
                logger.error(f"Failed to maximize window, quitting session: {e}")
                self._quit_quietly(driver)
                raise EngineStartupError(self.browser, None, f"maximize window failed: {e}") from e

        self._driver = driver
        self._state = SessionState.ACTIVE
        logger.info(f"Browser session active: {self.browser}")
        return driver

    def capture_screenshot(self, file_name: str) -> Path:
        """
        Save a PNG of the current page and attach it to the Allure record.

        Args:
            file_name: File name inside the screenshot directory

        Returns:
            Path to saved screenshot

        Raises:
            ScreenshotError: Session not active, capture or write failed
        """
        if not self.is_active:
            raise ScreenshotError(file_name, f"browser session is {self._state.value}")

        filepath = self.screenshot_dir / file_name
        try:
            ensure_directory(self.screenshot_dir)
            saved = self._driver.get_screenshot_as_file(str(filepath))
        except (WebDriverException, OSError) as e:
            raise ScreenshotError(file_name, str(e).strip() or type(e).__name__) from e

        if not saved:
            raise ScreenshotError(file_name, f"could not write {filepath}")

        attach_screenshot(filepath, name=SCREENSHOT_ATTACHMENT_NAME)
        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    def teardown(self) -> List[Exception]:
        """
        Quit the session and dispose of local driver resources.

        Both steps always run; a failing quit does not skip dispose. Failures
        are logged and returned rather than raised so they cannot replace the
        failure that triggered teardown. Calling this on a manager that never
        started, or a second time, does nothing.

        Returns:
            Exceptions raised by the quit/dispose steps (empty when clean)
        """
        driver = self._driver
        self._driver = None
        self._state = SessionState.TORN_DOWN

        if driver is None:
            return []

        errors: List[Exception] = []

        try:
            driver.quit()
        except Exception as e:
            logger.warning(f"Session quit failed: {e}")
            errors.append(e)

        try:
            self._dispose(driver)
        except Exception as e:
            logger.warning(f"Driver service dispose failed: {e}")
            errors.append(e)

        logger.info(f"Browser session closed: {self.browser}")
        return errors

    @staticmethod
    def _dispose(driver: WebDriver) -> None:
        """Stop the local driver service process, if the driver owns one."""
        service = getattr(driver, "service", None)
        if service is not None:
            service.stop()

    @staticmethod
    def _quit_quietly(driver: WebDriver) -> None:
        try:
            driver.quit()
        except Exception as e:
            logger.warning(f"Session quit failed: {e}")


__all__ = [
    "BrowserManager",
    "SessionState",
]
