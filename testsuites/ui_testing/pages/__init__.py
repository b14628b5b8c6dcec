"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for application pages.

Each page class encapsulates:
    - Element locators
    - Page-specific flows built on synchronized interactions

Author: Automation Team
License: MIT
================================================================================
"""

from .microsoft_login_page import MicrosoftLoginPage

__all__ = [
    "MicrosoftLoginPage",
]
