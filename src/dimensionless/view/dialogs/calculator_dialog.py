"""
Modal Dialog for a Single Calculator
Collects the inputs of one calculator, runs the evaluation and shows the
formatted result with its classification.
"""
from __future__ import annotations

from typing import Dict, Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLabel, QLineEdit, QPushButton,
    QGroupBox, QDialogButtonBox, QWidget
)

from dimensionless.app.state import PreferenceStore
from dimensionless.model.calculators import CalculatorDefinition
from dimensionless.model.evaluation import EvaluationResult, MissingOrInvalidInputError, evaluate
from dimensionless.model.i18n import Language, ui_text


class CalculatorDialog(QDialog):
    calculated = Signal(object)

    def __init__(
        self,
        definition: CalculatorDefinition,
        preferences: PreferenceStore,
        parent: Optional[QWidget] = None
    ) -> None:
        super().__init__(parent)
        self.definition = definition
        self.preferences = preferences
        self._result: Optional[EvaluationResult] = None
        self.resize(520, 560)

        layout = QVBoxLayout(self)

        self.lbl_title = QLabel(self)
        self.lbl_title.setObjectName("calcTitle")
        layout.addWidget(self.lbl_title)

        self.lbl_description = QLabel(self)
        self.lbl_description.setObjectName("calcDescription")
        self.lbl_description.setTextFormat(Qt.TextFormat.RichText)
        self.lbl_description.setWordWrap(True)
        layout.addWidget(self.lbl_description)

        # Inputs
        form = QFormLayout()
        self._labels: Dict[str, QLabel] = {}
        self._edits: Dict[str, QLineEdit] = {}
        for input_field in definition.inputs:
            lab = QLabel(self)
            edit = QLineEdit(self)
            edit.setObjectName(f"input_{input_field.key}")
            edit.textEdited.connect(lambda _text, e=edit: self._set_invalid(e, False))
            lab.setBuddy(edit)
            form.addRow(lab, edit)
            self._labels[input_field.key] = lab
            self._edits[input_field.key] = edit
        layout.addLayout(form)

        self.btn_calculate = QPushButton(self)
        self.btn_calculate.setObjectName("calculateButton")
        self.btn_calculate.setDefault(True)
        self.btn_calculate.clicked.connect(self.calculate)
        layout.addWidget(self.btn_calculate)

        self.lbl_error = QLabel(self)
        self.lbl_error.setObjectName("errorLabel")
        self.lbl_error.setVisible(False)
        layout.addWidget(self.lbl_error)

        # Result (hidden until the first successful calculation)
        self.result_box = QGroupBox(self)
        self.result_box.setObjectName("resultBox")
        result_layout = QVBoxLayout(self.result_box)
        self.lbl_value = QLabel(self.result_box)
        self.lbl_value.setObjectName("resultValue")
        self.lbl_value.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.lbl_info = QLabel(self.result_box)
        self.lbl_info.setObjectName("resultInfo")
        self.lbl_info.setWordWrap(True)
        result_layout.addWidget(self.lbl_value)
        result_layout.addWidget(self.lbl_info)
        self.result_box.setVisible(False)
        layout.addWidget(self.result_box)

        layout.addStretch()

        self.buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close, self)
        self.buttons.button(QDialogButtonBox.StandardButton.Close).setAutoDefault(False)
        self.buttons.rejected.connect(self.reject)
        layout.addWidget(self.buttons)

        self.preferences.language_changed.connect(self.retranslate)
        self.retranslate()

    # ---- accessors ----

    @property
    def language(self) -> Language:
        return self.preferences.language

    @property
    def result(self) -> Optional[EvaluationResult]:
        return self._result

    def has_result(self) -> bool:
        return not self.result_box.isHidden()

    def input_edit(self, key: str) -> QLineEdit:
        return self._edits[key]

    def raw_inputs(self) -> Dict[str, str]:
        return {key: edit.text() for key, edit in self._edits.items()}

    # ---- actions ----

    @Slot()
    def calculate(self) -> Optional[EvaluationResult]:
        """Evaluate the current inputs; returns None when they are incomplete."""
        try:
            result = evaluate(self.definition.key, self.raw_inputs())
        except MissingOrInvalidInputError as e:
            self._result = None
            self.result_box.setVisible(False)
            for key in e.field_keys:
                self._set_invalid(self._edits[key], True)
            self.lbl_error.setText(ui_text("dialog.fill_all", self.language))
            self.lbl_error.setVisible(True)
            return None

        self._result = result
        self.lbl_error.setVisible(False)
        self._show_result()
        self.result_box.setVisible(True)
        self.calculated.emit(result)
        return result

    def _show_result(self) -> None:
        if self._result is None:
            return
        self.lbl_value.setText(f"{self.definition.symbol} = {self._result.formatted_value}")
        self.lbl_info.setText(self._result.label(self.language))

    @staticmethod
    def _set_invalid(edit: QLineEdit, invalid: bool) -> None:
        if edit.property("invalid") == invalid:
            return
        edit.setProperty("invalid", invalid)
        # Re-polish so the [invalid="true"] stylesheet rule is picked up
        edit.style().unpolish(edit)
        edit.style().polish(edit)

    # ---- i18n ----

    def retranslate(self, *_) -> None:
        """Refresh all user-visible strings; typed input is left untouched."""
        lang = self.language
        title = self.definition.title.get(lang)
        self.setWindowTitle(title)
        self.lbl_title.setText(title)

        if self.definition.description is not None:
            self.lbl_description.setText(self.definition.description.get(lang))
            self.lbl_description.setVisible(True)
        else:
            self.lbl_description.setVisible(False)

        for input_field in self.definition.inputs:
            self._labels[input_field.key].setText(input_field.label.get(lang))
            self._edits[input_field.key].setPlaceholderText(input_field.placeholder.get(lang))

        self.btn_calculate.setText(ui_text("dialog.calculate", lang))
        self.buttons.button(QDialogButtonBox.StandardButton.Close).setText(ui_text("dialog.close", lang))
        self.result_box.setTitle(ui_text("dialog.result", lang))
        if not self.lbl_error.isHidden():
            self.lbl_error.setText(ui_text("dialog.fill_all", lang))
        self._show_result()
