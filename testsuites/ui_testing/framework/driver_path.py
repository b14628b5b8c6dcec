"""
Driver executable location.

Each engine has an optional environment variable pointing at its driver
(binary or containing directory). When unset, drivers are expected next to
the running interpreter. Nothing is validated here; a wrong location surfaces
as an EngineStartupError when the engine is launched.
"""

from __future__ import annotations

import os
import sys

from loguru import logger


def process_base_dir() -> str:
    """Directory containing the executable of the running process."""
    return os.path.dirname(os.path.abspath(sys.executable))


def resolve_driver_path(env_var_name: str) -> str:
    """
    Resolve the driver location for an engine.

    Args:
        env_var_name: Engine-specific variable, e.g. 'ChromeWebDriver'

    Returns:
        The variable's value verbatim when set and non-empty,
        otherwise process_base_dir()
    """
    value = os.environ.get(env_var_name)
    if value:
        logger.debug(f"Driver path from {env_var_name}: {value}")
        return value

    base_dir = process_base_dir()
    logger.debug(f"{env_var_name} not set, using process base directory: {base_dir}")
    return base_dir


__all__ = [
    "process_base_dir",
    "resolve_driver_path",
]
