"""Tests for the USAQI_LOG_LEVEL setting."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from usaqi.core.config import _resolve_log_level

REPO_ROOT = Path(__file__).resolve().parents[1]


def _imported_level(value):
    env = dict(os.environ, USAQI_LOG_LEVEL=value)
    out = subprocess.run(
        [sys.executable, "-c", "import logging, usaqi; print(logging.getLogger('usaqi').level)"],
        cwd=REPO_ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    return int(out.stdout.strip())


class TestResolveLogLevel:

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("DEBUG", logging.DEBUG),
            ("info", logging.INFO),
            (" error ", logging.ERROR),
            ("WARNING", logging.WARNING),
            ("critical", logging.CRITICAL),
        ],
    )
    def test_known_levels(self, value, expected):
        assert _resolve_log_level(value) == expected

    @pytest.mark.parametrize("value", [None, "", "verbose", "15"])
    def test_unknown_levels_fall_back_to_warning(self, value):
        assert _resolve_log_level(value) == logging.WARNING


class TestLogLevelOnImport:

    def test_valid_level_applied(self):
        assert _imported_level("debug") == logging.DEBUG

    def test_invalid_level_does_not_break_import(self):
        assert _imported_level("verbose") == logging.WARNING
