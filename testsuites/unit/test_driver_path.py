import os
import sys

import pytest

from testsuites.ui_testing.framework.driver_path import process_base_dir, resolve_driver_path


def test_process_base_dir_is_interpreter_directory():
    assert process_base_dir() == os.path.dirname(os.path.abspath(sys.executable))


def test_unset_variable_falls_back_to_base_dir(monkeypatch):
    monkeypatch.delenv("ChromeWebDriver", raising=False)

    assert resolve_driver_path("ChromeWebDriver") == process_base_dir()


def test_empty_variable_falls_back_to_base_dir(monkeypatch):
    monkeypatch.setenv("GeckoWebDriver", "")

    assert resolve_driver_path("GeckoWebDriver") == process_base_dir()


@pytest.mark.parametrize(
    "value",
    ["/opt/drivers", "C:\\drivers\\msedgedriver.exe", " /path/with trailing space/ ", "relative/dir"],
)
def test_set_variable_is_returned_verbatim(monkeypatch, value):
    monkeypatch.setenv("EdgeWebDriver", value)

    assert resolve_driver_path("EdgeWebDriver") == value


def test_path_is_not_validated(monkeypatch, tmp_path):
    missing = str(tmp_path / "does-not-exist")
    monkeypatch.setenv("IeWebDriver", missing)

    assert resolve_driver_path("IeWebDriver") == missing
