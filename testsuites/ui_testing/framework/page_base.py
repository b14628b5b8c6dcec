"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation to the page URL
    - Synchronized element interactions (explicit waits only)
    - Access to the injected settings

Page objects never call driver.find_element directly; every lookup goes
through SynchronizedActions.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from selenium.webdriver.remote.webdriver import WebDriver

from .config_loader import AppSettings
from .synchronization import SynchronizedActions, WaitPolicy


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class SearchPage(BasePage):
            URL = "https://www.bing.com"
            SEARCH_BOX = (By.ID, "sb_form_q")

            def search(self, text: str) -> None:
                self.navigate()
                self.actions.type_text(self.SEARCH_BOX, text + Keys.ENTER)
    """

    # Override in subclasses
    URL: str = ""

    def __init__(
        self,
        driver: WebDriver,
        settings: AppSettings,
        policy: Optional[WaitPolicy] = None,
    ):
        """
        Initialize page object.

        Args:
            driver: Active WebDriver session
            settings: Loaded application settings
            policy: Wait policy for element interactions
        """
        self.driver = driver
        self.settings = settings
        self.actions = SynchronizedActions(driver, policy)

    @property
    def current_url(self) -> str:
        return self.driver.current_url

    def navigate(self, url: Optional[str] = None) -> None:
        """
        Navigate to this page (or an explicit URL).

        Args:
            url: Absolute URL; defaults to the page URL
        """
        target = url or self.URL
        with allure.step(f"Navigate to {target}"):
            self.driver.get(target)
            logger.debug(f"Navigated to: {target}")


__all__ = [
    "BasePage",
]
