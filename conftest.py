"""
Repository-level pytest configuration.

Why this exists:
  - Register the command-line options shared by all suites (browser, settings
    file, live-test opt-in)
  - Initialize loguru once per test session

Important:
  appsettings.json ships with placeholder credentials. Real runs should point
  --settings (or APPSETTINGS_PATH) at a file provisioned by CI/CD.
"""

from __future__ import annotations

import pytest

from uitest_tools.common import init_logger

pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    group = parser.getgroup("ui", "UI automation")
    group.addoption(
        "--browser",
        action="store",
        default="chrome",
        choices=["chrome", "firefox", "edge", "ie"],
        help="Browser engine for UI tests (default: chrome)",
    )
    group.addoption(
        "--settings",
        action="store",
        default=None,
        help="Settings file (default: APPSETTINGS_PATH or ./appsettings.json)",
    )
    group.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run tests marked 'live' against a real browser",
    )


def pytest_configure(config):
    init_logger()

