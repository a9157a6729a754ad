from dimensionless.model.calculators import (
    Regime, classify_froude, classify_knudsen, classify_mach, classify_reynolds, get_calculator,
)
from dimensionless.model.i18n import Language


def test_reynolds_thresholds_are_strict():
    assert classify_reynolds(2299.9).regime == Regime.LAMINAR
    assert classify_reynolds(2300).regime == "transitional"
    assert classify_reynolds(4000).regime == "transitional"
    assert classify_reynolds(4000.1).regime == "turbulent"


def test_mach_bands():
    assert classify_mach(0.5).regime == "subsonic"
    assert classify_mach(0.8).regime == "transonic"
    assert classify_mach(1.2).regime == "supersonic"
    assert classify_mach(5.0).regime == "hypersonic"


def test_froude_critical_only_at_exactly_one():
    assert classify_froude(0.999).regime == "subcritical"
    assert classify_froude(1.0).regime == "critical"
    assert classify_froude(1.0000001).regime == "supercritical"


def test_knudsen_bands():
    assert classify_knudsen(0.005).regime == "continuum"
    assert classify_knudsen(0.01).regime == "slip"
    assert classify_knudsen(0.1).regime == "transition/free-molecular"


def test_nan_falls_through_to_last_branch():
    nan = float("nan")
    assert classify_reynolds(nan).regime == "transitional"
    assert classify_mach(nan).regime == "hypersonic"
    assert classify_froude(nan).regime == "supercritical"


def test_threshold_labels_are_bilingual():
    text = classify_reynolds(100).text
    assert text.get(Language.EN) == "Laminar Flow (층류)"
    assert text.get(Language.KO) == "층류 (Laminar Flow)"


def test_descriptive_classifiers_have_no_regime():
    for key in ("nusselt", "schmidt", "peclet", "strouhal", "weber"):
        classification = get_calculator(key).classify(123.0)
        assert classification.regime is None
        assert classification == get_calculator(key).classify(0.5)


def test_prandtl_sentence_embeds_rounded_value():
    classification = get_calculator("prandtl").classify(6.9666)
    assert classification.regime is None
    assert classification.text.get(Language.EN) == "Pr ≈ 7.0: Fluid property characteristic."
    assert classification.text.get(Language.KO).startswith("Pr ≈ 7.0")


def test_prandtl_sentence_rounds_ties_away_from_zero():
    assert get_calculator("prandtl").classify(0.25).text.get(Language.EN).startswith("Pr ≈ 0.3:")
    assert get_calculator("prandtl").classify(-0.25).text.get(Language.EN).startswith("Pr ≈ -0.3:")
