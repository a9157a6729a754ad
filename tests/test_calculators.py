import math

import pytest

from dimensionless.model.calculators import (
    CalculatorDefinition, CalculatorKey, InputField, all_calculators, calculator_keys,
    get_calculator, register_calculator, classify_reynolds,
)
from dimensionless.model.errors import UnknownCalculatorError
from dimensionless.model.i18n import Language, LocalizedText

# key -> (inputs, direct algebraic result)
SAMPLES = {
    "reynolds": ({"v": 2.0, "rho": 1000.0, "L": 0.5, "mu": 0.001}, (1000.0 * 2.0 * 0.5) / 0.001),
    "mach": ({"v": 250.0, "c": 340.0}, 250.0 / 340.0),
    "nusselt": ({"h": 50.0, "L": 0.1, "k": 0.6}, (50.0 * 0.1) / 0.6),
    "prandtl": ({"mu": 0.001, "cp": 4180.0, "k": 0.6}, (0.001 * 4180.0) / 0.6),
    "schmidt": ({"mu": 0.001, "rho": 1000.0, "D": 1e-9}, 0.001 / (1000.0 * 1e-9)),
    "peclet": ({"v": 2.0, "L": 0.5, "alpha": 1e-7}, (2.0 * 0.5) / 1e-7),
    "strouhal": ({"f": 10.0, "L": 0.1, "v": 5.0}, (10.0 * 0.1) / 5.0),
    "froude": ({"v": 3.0, "L": 5.0, "g": 9.81}, 3.0 / math.sqrt(9.81 * 5.0)),
    "weber": ({"rho": 1000.0, "v": 2.0, "L": 0.01, "sigma": 0.072}, (1000.0 * 2.0 ** 2 * 0.01) / 0.072),
    "knudsen": ({"lambda": 6.8e-8, "L": 0.001}, 6.8e-8 / 0.001),
}


def test_registry_holds_the_ten_calculators_in_order():
    assert calculator_keys() == [
        "reynolds", "mach", "nusselt", "prandtl", "schmidt",
        "peclet", "strouhal", "froude", "weber", "knudsen",
    ]
    assert [d.key for d in all_calculators()] == list(CalculatorKey)


def test_declared_inputs():
    assert get_calculator("reynolds").field_keys == ("v", "rho", "L", "mu")
    assert get_calculator("weber").field_keys == ("rho", "v", "L", "sigma")
    assert get_calculator("knudsen").field_keys == ("lambda", "L")
    assert get_calculator("froude").inputs[2].placeholder.get(Language.EN) == "9.81"


@pytest.mark.parametrize("key", sorted(SAMPLES))
def test_formula_matches_direct_computation(key):
    inputs, expected = SAMPLES[key]
    assert math.isclose(get_calculator(key).compute(inputs), expected, rel_tol=1e-12)


def test_lookup_accepts_enum_members():
    assert get_calculator(CalculatorKey.MACH) is get_calculator("mach")


def test_unknown_calculator():
    with pytest.raises(UnknownCalculatorError) as exc_info:
        get_calculator("bernoulli")
    assert exc_info.value.key == "bernoulli"
    assert isinstance(exc_info.value, KeyError)


def test_duplicate_registration_is_rejected():
    original = get_calculator("reynolds")
    duplicate = CalculatorDefinition(
        key=CalculatorKey.REYNOLDS,
        symbol="Re",
        title=LocalizedText(en="Another Reynolds"),
        inputs=(),
        formula=lambda x: 0.0,
        classifier=classify_reynolds,
    )
    with pytest.raises(ValueError):
        register_calculator(duplicate)
    assert get_calculator("reynolds") is original


def test_duplicate_input_keys_are_rejected():
    field = InputField("v", LocalizedText(en="v"), LocalizedText(en=""))
    with pytest.raises(ValueError):
        CalculatorDefinition(
            key=CalculatorKey.MACH,
            symbol="Ma",
            title=LocalizedText(en="Mach"),
            inputs=(field, field),
            formula=lambda x: x["v"],
            classifier=classify_reynolds,
        )


def test_every_calculator_is_bilingual():
    for definition in all_calculators():
        assert definition.title.ko and definition.title.en
        assert definition.description is not None
        assert definition.description.ko and definition.description.en
        for input_field in definition.inputs:
            assert input_field.label.ko and input_field.label.en


def test_division_by_zero_gives_infinity():
    assert get_calculator("mach").compute({"v": 340.0, "c": 0.0}) == math.inf
    assert get_calculator("mach").compute({"v": -340.0, "c": 0.0}) == -math.inf
    assert math.isnan(get_calculator("mach").compute({"v": 0.0, "c": 0.0}))


def test_froude_with_negative_gravity_is_nan():
    assert math.isnan(get_calculator("froude").compute({"v": 3.0, "L": 5.0, "g": -9.81}))
