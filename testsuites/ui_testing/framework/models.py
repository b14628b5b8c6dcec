"""
================================================================================
Framework Models
================================================================================

Value types shared across the framework:
    - BrowserType: which browser engine a session runs on
    - Credentials: test user email/password pair

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Union

from .constants import TEST_USER_EMAIL_KEY, TEST_USER_PASSWORD_KEY
from .exceptions import UnsupportedEngineError

if TYPE_CHECKING:
    from .config_loader import AppSettings


class BrowserType(str, Enum):
    """Browser engines available to the driver factory."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    INTERNET_EXPLORER = "ie"

    @classmethod
    def parse(cls, value: Union["BrowserType", str]) -> "BrowserType":
        """
        Resolve a selector from an enum member, a value or a common alias.

        Args:
            value: BrowserType member or name such as 'chrome', 'gecko', 'ie'

        Returns:
            Matching BrowserType

        Raises:
            UnsupportedEngineError: When the value names no known engine
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
            if normalized in _ALIASES:
                return _ALIASES[normalized]
        raise UnsupportedEngineError(value, tuple(member.value for member in cls))


_ALIASES: Dict[str, BrowserType] = {
    "chrome": BrowserType.CHROME,
    "chromium": BrowserType.CHROME,
    "firefox": BrowserType.FIREFOX,
    "gecko": BrowserType.FIREFOX,
    "edge": BrowserType.EDGE,
    "msedge": BrowserType.EDGE,
    "ie": BrowserType.INTERNET_EXPLORER,
    "internet_explorer": BrowserType.INTERNET_EXPLORER,
    "internetexplorer": BrowserType.INTERNET_EXPLORER,
}


@dataclass(frozen=True)
class Credentials:
    """
    Test user credentials loaded from settings.

    Attributes:
        email: Sign-in name of the test user
        password: Password of the test user (masked in repr)
    """
    email: str
    password: str

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "Credentials":
        """
        Build credentials from the TestUserEmail/TestUserPassword settings.

        Raises:
            MissingSettingError: When either setting is absent or empty
        """
        return cls(
            email=settings.require(TEST_USER_EMAIL_KEY),
            password=settings.require(TEST_USER_PASSWORD_KEY),
        )

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


__all__ = [
    "BrowserType",
    "Credentials",
]
