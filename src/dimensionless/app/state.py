"""
Preference State
================
The only state that outlives a single calculation: the colour theme and the
interface language. Both are persisted in QSettings and announced through Qt
signals so open windows and dialogs can re-render.
"""
from __future__ import annotations

from enum import StrEnum
from typing import Callable, Optional
import logging

from PySide6.QtCore import QObject, QSettings, Signal, QLocale, Qt
from PySide6.QtGui import QGuiApplication

from dimensionless.config import SETTINGS_LANGUAGE_KEY, SETTINGS_THEME_KEY
from dimensionless.model.i18n import Language

logger = logging.getLogger(__name__)


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


def system_prefers_light() -> bool:
    """True when the desktop reports a light colour scheme."""
    if QGuiApplication.instance() is None:
        return False
    return QGuiApplication.styleHints().colorScheme() == Qt.ColorScheme.Light


def system_locale_name() -> str:
    return QLocale.system().name()


class PreferenceStore(QObject):
    """Theme and language preferences with persist/reload semantics."""
    theme_changed = Signal(str)
    language_changed = Signal(str)

    def __init__(
        self,
        settings: Optional[QSettings] = None,
        prefers_light: Callable[[], bool] = system_prefers_light,
        locale_name: Callable[[], str] = system_locale_name,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else QSettings()
        self._theme = self._load_theme(prefers_light)
        self._language = self._load_language(locale_name)
        logger.info(f"Preferences loaded: theme={self._theme}, language={self._language}")

    # ---- loading ----

    def _load_theme(self, prefers_light: Callable[[], bool]) -> Theme:
        stored = self._settings.value(SETTINGS_THEME_KEY, "", type=str)
        if stored:
            try:
                return Theme(stored)
            except ValueError:
                logger.warning(f"Ignoring unknown stored theme '{stored}'")
        return Theme.LIGHT if prefers_light() else Theme.DARK

    def _load_language(self, locale_name: Callable[[], str]) -> Language:
        stored = self._settings.value(SETTINGS_LANGUAGE_KEY, "", type=str)
        if stored:
            try:
                return Language(stored)
            except ValueError:
                logger.warning(f"Ignoring unknown stored language '{stored}'")
        return Language.KO if locale_name().lower().startswith("ko") else Language.EN

    # ---- theme ----

    @property
    def theme(self) -> Theme:
        return self._theme

    def set_theme(self, theme: Theme | str) -> None:
        theme = Theme(theme)
        if theme == self._theme:
            return
        self._theme = theme
        self._settings.setValue(SETTINGS_THEME_KEY, theme.value)
        self._settings.sync()
        logger.info(f"Theme set to {theme}")
        self.theme_changed.emit(theme.value)

    def toggle_theme(self) -> Theme:
        self.set_theme(Theme.DARK if self._theme == Theme.LIGHT else Theme.LIGHT)
        return self._theme

    # ---- language ----

    @property
    def language(self) -> Language:
        return self._language

    def set_language(self, language: Language | str) -> None:
        language = Language(language)
        if language == self._language:
            return
        self._language = language
        self._settings.setValue(SETTINGS_LANGUAGE_KEY, language.value)
        self._settings.sync()
        logger.info(f"Language set to {language}")
        self.language_changed.emit(language.value)
