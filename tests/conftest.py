import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from dimensionless.app.state import PreferenceStore


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings_path(tmp_path):
    return str(tmp_path / "preferences.ini")


@pytest.fixture
def settings(settings_path):
    return QSettings(settings_path, QSettings.Format.IniFormat)


@pytest.fixture
def preferences(qapp, settings):
    """English, dark theme, nothing stored yet."""
    return PreferenceStore(settings, prefers_light=lambda: False, locale_name=lambda: "en_US")
