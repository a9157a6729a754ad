"""
Application Initialization
==========================
Creates the QApplication, sets the organisation/application identity used by
QSettings and installs the stylesheet of the current theme.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from dimensionless.app.state import PreferenceStore, Theme
from dimensionless.config import APP_ID, ORG_DOMAIN, ORG_ID
from dimensionless.view.theme import load_stylesheet

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Dimensionless"


def apply_theme(app: QApplication, theme: Theme | str) -> None:
    """Install the stylesheet for `theme` on the whole application."""
    app.setStyleSheet(load_stylesheet(theme))
    logger.debug(f"Applied {theme} theme")


def create_app(argv: Optional[list[str]] = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def create_preferences(app: QApplication) -> PreferenceStore:
    """Load the stored preferences and keep the stylesheet in sync with the theme."""
    preferences = PreferenceStore(parent=app)
    apply_theme(app, preferences.theme)
    preferences.theme_changed.connect(lambda theme: apply_theme(app, theme))
    return preferences
