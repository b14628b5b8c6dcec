"""
================================================================================
WebDriver Factory
================================================================================

Creates Selenium WebDriver sessions for the supported browser engines.

Each engine is a BrowserEngine subclass registered against its BrowserType:
    - ChromeEngine            (ChromeWebDriver  -> chromedriver)
    - FirefoxEngine           (GeckoWebDriver   -> geckodriver)
    - EdgeEngine              (EdgeWebDriver    -> msedgedriver)
    - InternetExplorerEngine  (IeWebDriver      -> IEDriverServer)

Capabilities are fixed per engine for a stable test matrix; they are not
meant to be tuned by callers.

Usage:
    factory = WebDriverFactory()
    driver = factory.create(BrowserType.CHROME)
    driver.get("https://example.com")
    driver.quit()

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Type, Union

from loguru import logger
from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.common.service import Service
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.firefox.options import Options as FirefoxOptions
from selenium.webdriver.firefox.service import Service as FirefoxService
from selenium.webdriver.ie.options import Options as IeOptions
from selenium.webdriver.ie.service import Service as IeService
from selenium.webdriver.remote.webdriver import WebDriver

from .constants import (
    CHROME_WEBDRIVER_ENV_VAR,
    CHROME_WEBDRIVER_EXE,
    EDGE_WEBDRIVER_ENV_VAR,
    EDGE_WEBDRIVER_EXE,
    FIREFOX_WEBDRIVER_ENV_VAR,
    FIREFOX_WEBDRIVER_EXE,
    IE_WEBDRIVER_ENV_VAR,
    IE_WEBDRIVER_EXE,
)
from .driver_path import resolve_driver_path
from .exceptions import EngineStartupError, UnsupportedEngineError
from .models import BrowserType


# Registered engines, keyed by browser type
ENGINES: Dict[BrowserType, Type["BrowserEngine"]] = {}


def register_engine(engine_cls: Type["BrowserEngine"]) -> Type["BrowserEngine"]:
    """Class decorator adding an engine to the factory registry."""
    ENGINES[engine_cls.browser_type] = engine_cls
    return engine_cls


class BrowserEngine(ABC):
    """
    One browser engine: how to configure, locate and launch its driver.

    Subclasses declare the engine constants and implement create_options()
    and launch(); driver location and service creation are shared.
    """

    browser_type: ClassVar[BrowserType]
    env_var: ClassVar[str]
    driver_executable: ClassVar[str]
    service_class: ClassVar[Type[Service]]

    # Option attributes applied to every session of this engine
    capabilities: ClassVar[Mapping[str, Any]] = {}

    @abstractmethod
    def create_options(self) -> ArgOptions:
        """Build the engine options object with the engine capabilities."""

    @abstractmethod
    def launch(self, options: ArgOptions, service: Service) -> WebDriver:
        """Start the driver process and open the session."""

    def executable_path(self, driver_path: str) -> str:
        """
        Map a resolved driver location to the driver executable.

        A directory gets the engine's executable name appended; anything
        else is taken as the executable itself.
        """
        if os.path.isdir(driver_path):
            name = self.driver_executable
            if sys.platform == "win32":
                name += ".exe"
            return os.path.join(driver_path, name)
        return driver_path

    def create_service(self, driver_path: str) -> Service:
        return self.service_class(executable_path=self.executable_path(driver_path))

    def _apply_capabilities(self, options: ArgOptions) -> ArgOptions:
        for name, value in self.capabilities.items():
            setattr(options, name, value)
        return options


@register_engine
class ChromeEngine(BrowserEngine):
    browser_type = BrowserType.CHROME
    env_var = CHROME_WEBDRIVER_ENV_VAR
    driver_executable = CHROME_WEBDRIVER_EXE
    service_class = ChromeService

    def create_options(self) -> ChromeOptions:
        return self._apply_capabilities(ChromeOptions())

    def launch(self, options: ArgOptions, service: Service) -> WebDriver:
        return webdriver.Chrome(options=options, service=service)


@register_engine
class FirefoxEngine(BrowserEngine):
    browser_type = BrowserType.FIREFOX
    env_var = FIREFOX_WEBDRIVER_ENV_VAR
    driver_executable = FIREFOX_WEBDRIVER_EXE
    service_class = FirefoxService

    def create_options(self) -> FirefoxOptions:
        return self._apply_capabilities(FirefoxOptions())

    def launch(self, options: ArgOptions, service: Service) -> WebDriver:
        return webdriver.Firefox(options=options, service=service)


@register_engine
class EdgeEngine(BrowserEngine):
    """Chromium-based Edge (Selenium 4 Edge options are Chromium options)."""

    browser_type = BrowserType.EDGE
    env_var = EDGE_WEBDRIVER_ENV_VAR
    driver_executable = EDGE_WEBDRIVER_EXE
    service_class = EdgeService

    def create_options(self) -> EdgeOptions:
        return self._apply_capabilities(EdgeOptions())

    def launch(self, options: ArgOptions, service: Service) -> WebDriver:
        return webdriver.Edge(options=options, service=service)


@register_engine
class InternetExplorerEngine(BrowserEngine):
    """Legacy IE driver, configured to tolerate its flaky defaults."""

    browser_type = BrowserType.INTERNET_EXPLORER
    env_var = IE_WEBDRIVER_ENV_VAR
    driver_executable = IE_WEBDRIVER_EXE
    service_class = IeService
    capabilities = {
        "unhandled_prompt_behavior": "accept",
        "native_events": False,
        "persistent_hover": True,
        "ignore_protected_mode_settings": True,
        "ignore_zoom_level": True,
        "ensure_clean_session": True,
    }

    def create_options(self) -> IeOptions:
        return self._apply_capabilities(IeOptions())

    def launch(self, options: ArgOptions, service: Service) -> WebDriver:
        return webdriver.Ie(options=options, service=service)


class WebDriverFactory:
    """
    Creates WebDriver sessions for a browser selector.

    Features:
        - Engine lookup through the registry (no central branch)
        - Driver location from the engine environment variable
        - Startup failures reported as EngineStartupError

    Usage:
        factory = WebDriverFactory()
        driver = factory.create("firefox")

        # Tests can inject the path resolver or a reduced engine table
        factory = WebDriverFactory(path_resolver=lambda env_var: "/opt/drivers")
    """

    def __init__(
        self,
        path_resolver: Callable[[str], str] = resolve_driver_path,
        engines: Optional[Mapping[BrowserType, Type[BrowserEngine]]] = None,
    ):
        """
        Initialize the factory.

        Args:
            path_resolver: Maps an engine env var name to a driver location
            engines: Engine table to use; defaults to all registered engines
        """
        self._path_resolver = path_resolver
        self._engines = dict(engines) if engines is not None else dict(ENGINES)

    @property
    def supported(self) -> Tuple[str, ...]:
        """Values of the browser types this factory can create."""
        return tuple(browser_type.value for browser_type in self._engines)

    def engine_for(self, browser: Union[BrowserType, str]) -> BrowserEngine:
        """
        Look up the engine for a selector.

        Raises:
            UnsupportedEngineError: When the selector has no registered engine
        """
        try:
            browser_type = BrowserType.parse(browser)
        except UnsupportedEngineError as e:
            raise UnsupportedEngineError(browser, self.supported) from e

        engine_cls = self._engines.get(browser_type)
        if engine_cls is None:
            raise UnsupportedEngineError(browser, self.supported)
        return engine_cls()

    def create(self, browser: Union[BrowserType, str]) -> WebDriver:
        """
        Create a live WebDriver session.

        Args:
            browser: BrowserType or browser name

        Returns:
            Started WebDriver

        Raises:
            UnsupportedEngineError: Unknown or unregistered browser
            EngineStartupError: Driver missing, failed to start or to handshake
        """
        engine = self.engine_for(browser)
        name = engine.browser_type.value

        options = engine.create_options()
        driver_path = self._path_resolver(engine.env_var)
        logger.info(f"Starting {name} session (driver path: {driver_path})")

        try:
            service = engine.create_service(driver_path)
            driver = engine.launch(options, service)
        except (WebDriverException, OSError, ValueError) as e:
            logger.error(f"Failed to start {name} session: {e}")
            raise EngineStartupError(name, driver_path, str(e).strip() or type(e).__name__) from e

        logger.info(f"{name} session started")
        return driver


__all__ = [
    "ENGINES",
    "register_engine",
    "BrowserEngine",
    "ChromeEngine",
    "FirefoxEngine",
    "EdgeEngine",
    "InternetExplorerEngine",
    "WebDriverFactory",
]
