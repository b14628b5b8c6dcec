"""
================================================================================
Microsoft Login Page Object
================================================================================

Sign-in flow on login.microsoftonline.com for the configured test user.

The flow is a two-step form: email then "Next", password then "Sign in".
Both buttons share the same element id.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from selenium.webdriver.common.by import By

from testsuites.ui_testing.framework.constants import MICROSOFT_LOGIN_URL
from testsuites.ui_testing.framework.models import Credentials
from testsuites.ui_testing.framework.page_base import BasePage


class MicrosoftLoginPage(BasePage):
    """Microsoft account sign-in page."""

    URL = MICROSOFT_LOGIN_URL

    EMAIL_INPUT = (By.ID, "i0116")
    PASSWORD_INPUT = (By.ID, "i0118")
    SUBMIT_BUTTON = (By.ID, "idSIButton9")

    @allure.step("Login with configured test user")
    def login(self) -> None:
        """
        Sign in with TestUserEmail / TestUserPassword from settings.

        Credentials are resolved before any navigation, so a missing setting
        fails the flow without touching the browser.

        Raises:
            MissingSettingError: A credential setting is missing or empty
            InteractionTimeoutError: A form element never became clickable
        """
        credentials = Credentials.from_settings(self.settings)
        logger.info(f"Logging in as {credentials.email}")

        self.navigate()

        self.actions.type_text(self.EMAIL_INPUT, credentials.email, description="Email")
        self.actions.click(self.SUBMIT_BUTTON, description="Next")
        self.actions.type_text(
            self.PASSWORD_INPUT,
            credentials.password,
            description="Password",
            sensitive=True,
        )
        self.actions.click(self.SUBMIT_BUTTON, description="Sign in")


__all__ = [
    "MicrosoftLoginPage",
]
