# ================================================================================
# Synchronized Interaction Module
# ================================================================================
#
# Explicit-wait primitives for page objects. Every interaction first waits for
# its element to reach the expected state, so flows do not race the page's
# asynchronous rendering.
#
# Key Features:
#   - Bounded polling through Selenium's WebDriverWait
#   - Presence / visibility / clickability conditions
#   - Timeouts reported with locator, condition and elapsed time
#   - Allure step integration
#
# A condition is checked once: the element returned by a successful wait is
# used as is, without re-verifying the condition before the action. Retrying
# failed interactions is left to the test framework.
#
# ================================================================================

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

import allure
from loguru import logger
from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from .constants import DEFAULT_POLL_FREQUENCY, DEFAULT_WAIT_TIMEOUT
from .exceptions import InteractionTimeoutError


# (By strategy, value), e.g. (By.ID, "i0116")
Locator = Tuple[str, str]


class Condition(str, Enum):
    """Element states an explicit wait can block on."""

    PRESENT = "present"
    VISIBLE = "visible"
    CLICKABLE = "clickable"

    @property
    def expectation(self) -> Callable[[Locator], Callable[[WebDriver], object]]:
        return _EXPECTATIONS[self]


_EXPECTATIONS: Dict[Condition, Callable] = {
    Condition.PRESENT: EC.presence_of_element_located,
    Condition.VISIBLE: EC.visibility_of_element_located,
    Condition.CLICKABLE: EC.element_to_be_clickable,
}


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timeout and polling interval applied to each wait.

    Attributes:
        timeout: Seconds to wait before giving up
        poll_frequency: Seconds between condition checks
    """
    timeout: float = DEFAULT_WAIT_TIMEOUT
    poll_frequency: float = DEFAULT_POLL_FREQUENCY


def describe_locator(locator: Locator) -> str:
    by, value = locator
    return f"{by}='{value}'"


def wait_for(
    driver: WebDriver,
    locator: Locator,
    condition: Union[Condition, str] = Condition.CLICKABLE,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
    poll_frequency: float = DEFAULT_POLL_FREQUENCY,
    timeout_log_level: str = "ERROR",
) -> WebElement:
    """
    Block until the located element satisfies the condition.

    Returns as soon as the condition holds; does not wait out the timeout.

    Args:
        driver: Active WebDriver session
        locator: (By strategy, value) tuple
        condition: Required element state
        timeout: Seconds to wait before failing
        poll_frequency: Seconds between checks
        timeout_log_level: Loguru level for the timeout line

    Returns:
        The matching WebElement

    Raises:
        InteractionTimeoutError: When the condition does not hold in time
    """
    condition = Condition(condition)
    started = time.monotonic()

    try:
        element = WebDriverWait(driver, timeout, poll_frequency=poll_frequency).until(
            condition.expectation(locator)
        )
    except TimeoutException as e:
        elapsed = time.monotonic() - started
        logger.log(
            timeout_log_level,
            f"Timeout after {elapsed:.2f}s waiting for element "
            f"{describe_locator(locator)} to be {condition.value}"
        )
        raise InteractionTimeoutError(locator, condition.value, timeout, elapsed) from e

    logger.debug(
        f"Element {describe_locator(locator)} {condition.value} "
        f"after {time.monotonic() - started:.2f}s"
    )
    return element


class SynchronizedActions:
    """
    Element interactions that always go through an explicit wait.

    Example:
        actions = SynchronizedActions(driver)
        actions.type_text((By.ID, "i0116"), "user@example.com", description="Email")
        actions.click((By.ID, "idSIButton9"), description="Next")
    """

    def __init__(self, driver: WebDriver, policy: Optional[WaitPolicy] = None):
        """
        Initialize with a live driver.

        Args:
            driver: Active WebDriver session
            policy: Wait policy; 10s timeout / 0.5s polling when omitted
        """
        self.driver = driver
        self.policy = policy or WaitPolicy()

    def wait_for(
        self,
        locator: Locator,
        condition: Union[Condition, str] = Condition.CLICKABLE,
        timeout: Optional[float] = None,
        timeout_log_level: str = "ERROR",
    ) -> WebElement:
        """Wait with this instance's policy (timeout may be overridden)."""
        return wait_for(
            self.driver,
            locator,
            condition,
            timeout=self.policy.timeout if timeout is None else timeout,
            poll_frequency=self.policy.poll_frequency,
            timeout_log_level=timeout_log_level,
        )

    def click(self, locator: Locator, description: str = "") -> None:
        """
        Click an element once it is clickable.

        Args:
            locator: (By strategy, value) tuple
            description: Human-readable description for reporting
        """
        name = description or describe_locator(locator)
        with allure.step(f"Click element: {name}"):
            logger.info(f"Clicking element: {name}")
            self.wait_for(locator, Condition.CLICKABLE).click()

    def type_text(
        self,
        locator: Locator,
        text: str,
        description: str = "",
        sensitive: bool = False,
    ) -> None:
        """
        Send keys to an element once it is clickable.

        Args:
            locator: (By strategy, value) tuple
            text: Text to type
            description: Human-readable description for reporting
            sensitive: Mask the text in step titles and logs
        """
        name = description or describe_locator(locator)
        shown = "*" * len(text) if sensitive else text
        with allure.step(f"Type into {name}: {shown}"):
            logger.info(f"Typing into {name}: '{shown[:50]}'")
            self.wait_for(locator, Condition.CLICKABLE).send_keys(text)

    def get_text(self, locator: Locator, description: str = "") -> str:
        """Return the text of an element once it is visible."""
        name = description or describe_locator(locator)
        with allure.step(f"Read text: {name}"):
            return self.wait_for(locator, Condition.VISIBLE).text

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """
        Check visibility within a bounded wait.

        Returns:
            True if the element became visible before the timeout
        """
        try:
            self.wait_for(locator, Condition.VISIBLE, timeout=timeout, timeout_log_level="DEBUG")
            return True
        except InteractionTimeoutError:
            return False


__all__ = [
    "Locator",
    "Condition",
    "WaitPolicy",
    "describe_locator",
    "wait_for",
    "SynchronizedActions",
]
