"""
================================================================================
Allure Report Utilities
================================================================================

This module provides helpers for attaching diagnostic artifacts to the Allure
record of the currently running test.

Features:
- Screenshot (file) attachments
- Text attachments

When no Allure listener is active (plain pytest run) every helper is a no-op
on the report side, which keeps the framework usable without a report.

================================================================================
"""

from pathlib import Path
from typing import Union

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_screenshot(path: Union[str, Path], name: str = "Screenshot") -> None:
    """
    Attach a PNG file from disk to the Allure report.

    Args:
        path: Screenshot file path
        name: Attachment name
    """
    allure.attach.file(
        str(path),
        name=name,
        attachment_type=allure.attachment_type.PNG
    )
    logger.debug(f"Attached screenshot '{name}': {path}")


def attach_text(text: str, name: str = "Text") -> None:
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


__all__ = [
    "attach_screenshot",
    "attach_text",
]
