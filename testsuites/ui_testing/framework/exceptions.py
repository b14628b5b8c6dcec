"""
================================================================================
Framework Exceptions
================================================================================

Typed failures raised by the UI automation framework.

Every error carries the context needed to tell a broken environment from a
flaky page: the settings key, the engine and driver path, or the locator and
condition that timed out.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Tuple


class UiFrameworkError(Exception):
    """Base exception for all framework failures."""
    pass


class ConfigLoadError(UiFrameworkError):
    """Raised when the settings file is missing, unreadable or malformed."""

    def __init__(self, path: Any, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Unable to load settings from '{self.path}': {reason}")


class MissingSettingError(UiFrameworkError):
    """Raised when a required setting is absent or empty."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required setting '{key}' is missing or empty")


class UnsupportedEngineError(UiFrameworkError):
    """Raised when a browser selector does not map to a registered engine."""

    def __init__(self, browser: Any, supported: Tuple[str, ...] = ()):
        self.browser = browser
        self.supported = supported
        message = f"Unsupported browser engine: {browser!r}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)


class EngineStartupError(UiFrameworkError):
    """Raised when the browser engine fails to launch or handshake."""

    def __init__(self, browser: Any, driver_path: Optional[str], reason: str):
        self.browser = browser
        self.driver_path = driver_path
        self.reason = reason
        super().__init__(
            f"Failed to start {browser} session "
            f"(driver path: {driver_path}): {reason}"
        )


class InteractionTimeoutError(UiFrameworkError):
    """Raised when an explicit wait elapses before its condition holds."""

    def __init__(
        self,
        locator: Tuple[str, str],
        condition: Any,
        timeout: float,
        elapsed: float,
    ):
        self.locator = locator
        self.condition = condition
        self.timeout = timeout
        self.elapsed = elapsed
        by, value = locator
        super().__init__(
            f"Timed out after {elapsed:.2f}s (timeout {timeout}s) waiting for "
            f"element ({by}='{value}') to be {condition}"
        )


class ScreenshotError(UiFrameworkError):
    """Raised when a screenshot cannot be captured or written."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Unable to capture screenshot '{file_name}': {reason}")


class SessionStateError(UiFrameworkError):
    """Raised when a session operation is used in the wrong lifecycle state."""

    def __init__(self, operation: str, state: Any):
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation}: browser session is {state}")


__all__ = [
    "UiFrameworkError",
    "ConfigLoadError",
    "MissingSettingError",
    "UnsupportedEngineError",
    "EngineStartupError",
    "InteractionTimeoutError",
    "ScreenshotError",
    "SessionStateError",
]
