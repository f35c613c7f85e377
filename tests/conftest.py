"""Pytest configuration for the ripples tests."""
import os
import sys
import time
from pathlib import Path

import pytest

# Make the repository root importable without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Qt widgets are exercised headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def wait_until(qapp):
    """Runs the Qt event loop until ``predicate()`` holds or ``timeout`` seconds pass."""
    def wait(predicate, timeout=5.0):
        deadline = time.monotonic() + timeout
        while not predicate():
            if time.monotonic() > deadline:
                raise AssertionError("condition not met within %.1fs" % timeout)
            qapp.processEvents()
            time.sleep(0.005)
    return wait
