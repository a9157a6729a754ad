"""
Main Application Window
=======================
A grid of calculator cards plus a toolbar with the theme and language toggles.

Clicking a card opens the CalculatorDialog of that calculator. Language changes
are pushed to every open widget through PreferenceStore.language_changed.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QGridLayout, QLabel, QPushButton,
    QToolBar, QComboBox, QSizePolicy
)

from dimensionless.app.application import VISIBLE_APP_NAME
from dimensionless.app.state import PreferenceStore, Theme
from dimensionless.model.calculators import CalculatorDefinition, all_calculators, get_calculator
from dimensionless.model.errors import UnknownCalculatorError
from dimensionless.model.i18n import LANGUAGE_NAMES, Language, ui_text
from dimensionless.view.dialogs.calculator_dialog import CalculatorDialog

logger = logging.getLogger(__name__)

CARD_COLUMNS = 5

# Glyph shown on the theme action: the theme you switch TO
THEME_GLYPHS = {
    Theme.DARK: "☀",
    Theme.LIGHT: "☾",
}


class MainWindow(QMainWindow):
    def __init__(self, preferences: PreferenceStore) -> None:
        super().__init__()
        self.preferences = preferences
        self.active_dialog: Optional[CalculatorDialog] = None
        self.resize(1100, 600)

        # ---- Toolbar ----
        toolbar = QToolBar(self)
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        spacer = QWidget(toolbar)
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        toolbar.addWidget(spacer)

        self.cmb_language = QComboBox(toolbar)
        for lang in Language:
            self.cmb_language.addItem(LANGUAGE_NAMES[lang], lang.value)
        self.cmb_language.currentIndexChanged.connect(self._on_language_selected)
        toolbar.addWidget(self.cmb_language)

        self.act_theme = QAction(self)
        self.act_theme.triggered.connect(lambda _=False: self.preferences.toggle_theme())
        toolbar.addAction(self.act_theme)

        # ---- Central: header + card grid ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(24, 16, 24, 24)

        self.lbl_title = QLabel(central)
        self.lbl_title.setObjectName("appTitle")
        self.lbl_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(self.lbl_title)

        self.lbl_subtitle = QLabel(central)
        self.lbl_subtitle.setObjectName("appSubtitle")
        self.lbl_subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(self.lbl_subtitle)

        grid = QGridLayout()
        grid.setSpacing(12)
        self.cards: Dict[str, QPushButton] = {}
        for i, definition in enumerate(all_calculators()):
            card = QPushButton(central)
            card.setObjectName("calculatorCard")
            card.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            card.clicked.connect(lambda _=False, k=definition.key: self.open_calculator(k))
            grid.addWidget(card, i // CARD_COLUMNS, i % CARD_COLUMNS)
            self.cards[definition.key] = card
        v.addLayout(grid, 1)

        self.setCentralWidget(central)

        # ---- Preference signals ----
        self.preferences.language_changed.connect(self.retranslate_ui)
        self.preferences.theme_changed.connect(self._update_theme_action)

        self.retranslate_ui()
        self._update_theme_action()

    # ---------- Calculators ----------

    def create_dialog(self, key: str) -> Optional[CalculatorDialog]:
        """Build the dialog of calculator `key`; unknown keys are ignored."""
        try:
            definition: CalculatorDefinition = get_calculator(key)
        except UnknownCalculatorError as e:
            logger.warning(str(e))
            return None
        return CalculatorDialog(definition, self.preferences, parent=self)

    def open_calculator(self, key: str) -> Optional[CalculatorDialog]:
        """Open the (window-modal) dialog of calculator `key`."""
        dlg = self.create_dialog(key)
        if dlg is None:
            return None

        if self.active_dialog is not None:
            self.active_dialog.close()

        dlg.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)
        dlg.finished.connect(self._on_dialog_finished)
        self.active_dialog = dlg
        logger.info(f"Opened calculator '{key}'")
        dlg.open()
        return dlg

    @Slot()
    def _on_dialog_finished(self) -> None:
        self.active_dialog = None

    # ---------- Preferences ----------

    @Slot(int)
    def _on_language_selected(self, index: int) -> None:
        code = self.cmb_language.itemData(index)
        if code:
            self.preferences.set_language(code)

    def _update_theme_action(self, *_) -> None:
        self.act_theme.setText(THEME_GLYPHS[self.preferences.theme])

    def retranslate_ui(self, *_) -> None:
        """Refresh all user-visible strings after language change."""
        lang = self.preferences.language
        title = ui_text("app.title", lang)
        self.setWindowTitle(f"{VISIBLE_APP_NAME} - {title}")
        self.lbl_title.setText(title)
        self.lbl_subtitle.setText(ui_text("app.subtitle", lang))
        self.act_theme.setToolTip(ui_text("toolbar.theme", lang))
        self.cmb_language.setToolTip(ui_text("toolbar.language", lang))

        index = self.cmb_language.findData(lang.value)
        if index != self.cmb_language.currentIndex():
            self.cmb_language.blockSignals(True)
            self.cmb_language.setCurrentIndex(index)
            self.cmb_language.blockSignals(False)

        for definition in all_calculators():
            card = self.cards[definition.key]
            card.setText(f"{definition.symbol}\n{definition.title.get(lang)}")
