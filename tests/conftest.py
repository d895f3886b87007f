# Headless Qt for the whole suite: widgets, fonts and graphics effects need a
# QApplication, value objects (QMarginsF, QColor, enums) do not.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from ultra_spacing.cache import invalidate_cache  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv[:1])
    yield app


@pytest.fixture(autouse=True)
def _fresh_default_caches():
    """Module-level caches are process wide; isolate each test."""
    invalidate_cache()
    yield
    invalidate_cache()
