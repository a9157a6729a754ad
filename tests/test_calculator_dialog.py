import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from dimensionless.model.calculators import get_calculator
from dimensionless.view.dialogs.calculator_dialog import CalculatorDialog


@pytest.fixture
def dialog(preferences):
    dlg = CalculatorDialog(get_calculator("reynolds"), preferences)
    yield dlg
    dlg.close()
    dlg.deleteLater()


def fill(dlg, **values):
    for key, text in values.items():
        dlg.input_edit(key).setText(text)


def test_dialog_renders_definition(dialog):
    assert dialog.windowTitle() == "Reynolds Number"
    assert dialog.input_edit("mu").placeholderText() == "e.g. 0.001"
    assert dialog.btn_calculate.text() == "Calculate"
    assert not dialog.has_result()


def test_successful_calculation_shows_result(dialog):
    seen = []
    dialog.calculated.connect(seen.append)
    fill(dialog, v="2.0", rho="1000", L="0.5", mu="0.001")

    result = dialog.calculate()

    assert result is not None and result.regime == "turbulent"
    assert seen == [result]
    assert dialog.has_result()
    assert dialog.lbl_value.text() == "Re = 1,000,000"
    assert dialog.lbl_info.text() == "Turbulent Flow (난류)"
    assert dialog.lbl_error.isHidden()


def test_incomplete_input_hides_result_and_marks_fields(dialog):
    fill(dialog, v="2.0", rho="1000", L="0.5", mu="0.001")
    dialog.calculate()

    dialog.input_edit("mu").setText("")
    dialog.input_edit("rho").setText("water")
    assert dialog.calculate() is None

    assert not dialog.has_result()
    assert dialog.result is None
    assert not dialog.lbl_error.isHidden()
    assert dialog.lbl_error.text() == "Please fill in all values."
    assert dialog.input_edit("mu").property("invalid") is True
    assert dialog.input_edit("rho").property("invalid") is True
    assert not dialog.input_edit("v").property("invalid")


def test_enter_in_an_input_triggers_calculate(dialog):
    seen = []
    dialog.calculated.connect(seen.append)
    dialog.show()
    fill(dialog, v="2.0", rho="1000", L="0.5", mu="0.001")

    QTest.keyClick(dialog.input_edit("mu"), Qt.Key.Key_Return)

    assert dialog.has_result()
    assert len(seen) == 1
    assert dialog.lbl_value.text() == "Re = 1,000,000"


def test_enter_with_incomplete_input_shows_error(dialog):
    dialog.show()
    fill(dialog, v="2.0", rho="1000", L="0.5")

    QTest.keyClick(dialog.input_edit("L"), Qt.Key.Key_Enter)

    assert not dialog.has_result()
    assert not dialog.lbl_error.isHidden()
    assert dialog.input_edit("mu").property("invalid") is True


def test_language_switch_keeps_typed_input(dialog, preferences):
    fill(dialog, v="2.0", rho="1000", L="0.5", mu="0.001")
    dialog.calculate()

    preferences.set_language("ko")

    assert dialog.windowTitle() == "레이놀즈 수"
    assert dialog.btn_calculate.text() == "계산"
    assert dialog.input_edit("mu").placeholderText() == "예: 0.001"
    assert dialog.lbl_info.text() == "난류 (Turbulent Flow)"
    assert dialog.raw_inputs() == {"v": "2.0", "rho": "1000", "L": "0.5", "mu": "0.001"}
