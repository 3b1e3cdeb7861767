"""pytest configuration and fixtures for pyqt-formbuilder tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_formbuilder.protocols.form_config import set_form_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_form_config():
    """Tests that install a global config must not leak it."""
    yield
    set_form_config(None)
