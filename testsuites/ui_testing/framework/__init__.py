"""
================================================================================
UI Testing Framework
================================================================================

Selenium-based UI automation framework.

Components:
    - config_loader: Settings file loading and required-key lookup
    - driver_path: Driver executable location from environment
    - driver_factory: Engine registry and WebDriver creation
    - browser_manager: Session lifecycle, screenshots and teardown
    - synchronization: Explicit-wait element interactions
    - page_base: Base page object

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager, SessionState
from .config_loader import AppSettings, ConfigLoader
from .driver_factory import BrowserEngine, WebDriverFactory, register_engine
from .driver_path import resolve_driver_path
from .exceptions import (
    ConfigLoadError,
    EngineStartupError,
    InteractionTimeoutError,
    MissingSettingError,
    ScreenshotError,
    SessionStateError,
    UiFrameworkError,
    UnsupportedEngineError,
)
from .models import BrowserType, Credentials
from .page_base import BasePage
from .synchronization import Condition, SynchronizedActions, WaitPolicy, wait_for

__all__ = [
    "AppSettings",
    "BasePage",
    "BrowserEngine",
    "BrowserManager",
    "BrowserType",
    "Condition",
    "ConfigLoadError",
    "ConfigLoader",
    "Credentials",
    "EngineStartupError",
    "InteractionTimeoutError",
    "MissingSettingError",
    "ScreenshotError",
    "SessionState",
    "SessionStateError",
    "SynchronizedActions",
    "UiFrameworkError",
    "UnsupportedEngineError",
    "WaitPolicy",
    "WebDriverFactory",
    "register_engine",
    "resolve_driver_path",
    "wait_for",
]
