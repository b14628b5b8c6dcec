"""
================================================================================
UI Test Tools
================================================================================

Shared infrastructure for the browser automation suites.

Modules:
    - common: Logging bootstrap and filesystem helpers
    - report_tools: Allure attachment helpers

Example:
    from uitest_tools.common import init_logger
    from uitest_tools.report_tools.allure_utils import attach_text

    init_logger(level="DEBUG")
    attach_text("https://login.microsoftonline.com", name="Current URL")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
